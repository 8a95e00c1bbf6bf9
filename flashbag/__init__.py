from flashbag.config import Config, FlashMessagesConfig
from flashbag.exceptions import FlashBagError, ImproperlyConfigured
from flashbag.lifecycle import CONTEXT_KEY, enable_flash_messages, flash
from flashbag.messages import SESSION_KEY, FlashMessages, MessageTable, MessageType
from flashbag.pipelines import Pipeline, Pipelines
from flashbag.renderers import BootstrapRenderer, MessageRenderer, PlainRenderer, TemplateRenderer
from flashbag.responses import RedirectResponse, ViewResponse
from flashbag.templating import Templates, render_flash_messages

__all__ = [
    "Config",
    "FlashMessagesConfig",
    "FlashBagError",
    "ImproperlyConfigured",
    "CONTEXT_KEY",
    "enable_flash_messages",
    "flash",
    "SESSION_KEY",
    "FlashMessages",
    "MessageTable",
    "MessageType",
    "Pipeline",
    "Pipelines",
    "BootstrapRenderer",
    "MessageRenderer",
    "PlainRenderer",
    "TemplateRenderer",
    "RedirectResponse",
    "ViewResponse",
    "Templates",
    "render_flash_messages",
]

__version__ = "0.1.0"
