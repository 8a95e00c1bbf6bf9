class FlashBagError(Exception):
    """Base class for all flashbag errors."""


class ImproperlyConfigured(FlashBagError, ValueError):
    """Raised when flash messages are used without required collaborators
    (session, configuration) or with an invalid configuration."""
