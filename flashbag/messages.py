from __future__ import annotations

import enum
import typing

from flashbag import json as jsonlib
from flashbag.exceptions import ImproperlyConfigured
from flashbag.sessions import Session

if typing.TYPE_CHECKING:  # pragma: no cover
    from flashbag.config import FlashMessagesConfig

SESSION_KEY = "__fm"

type MessageTable = dict[str, list[str]]


class MessageType(enum.Enum):
    """Well-known message types.

    They match the alert types of the Bootstrap CSS framework. `ERROR` is an
    alias of `DANGER`, both resolve to "danger". Any other string is a valid
    message type too."""

    INFO = "info"
    WARNING = "warning"
    SUCCESS = "success"
    DANGER = "danger"
    ERROR = "danger"


def message_type_value(message_type: MessageType | str) -> str:
    if isinstance(message_type, MessageType):
        return message_type.value
    return message_type


class FlashMessages:
    """Manages lists of messages to be displayed to a user.

    Each list is identified by a message type. The whole table is kept in the
    session under a single key so messages survive redirects. The table is
    decoded on every read and written back on every mutation."""

    Type = MessageType

    def __init__(self, session: Session | None, configuration: FlashMessagesConfig | None) -> None:
        if session is None:
            raise ImproperlyConfigured(
                "Sessions are disabled. Install SessionMiddleware in order to use flash messages."
            )

        if configuration is None:
            raise ImproperlyConfigured("Flash messages configuration is required.")

        self._session = session
        self._configuration = configuration

    @property
    def configuration(self) -> FlashMessagesConfig:
        return self._configuration

    def _load(self) -> MessageTable | None:
        value = self._session.get(SESSION_KEY)
        if value is None:
            return None
        return typing.cast(MessageTable, jsonlib.loads(str(value)))

    def _save(self, messages: MessageTable) -> None:
        self._session[SESSION_KEY] = jsonlib.dumps(messages)

    def add(self, message_type: MessageType | str, message: str) -> None:
        """Append a message to the list of the given type."""
        messages = self._load() or {}
        messages.setdefault(message_type_value(message_type), []).append(message)
        self._save(messages)

    def peek(self, message_type: MessageType | str) -> list[str] | None:
        """Return messages of the given type without removing them."""
        messages = self._load()
        if messages is None:
            return None
        return messages.get(message_type_value(message_type))

    def pop(self, message_type: MessageType | str) -> list[str] | None:
        """Return messages of the given type and remove them from the session."""
        messages = self._load()
        message_type = message_type_value(message_type)
        if messages is None or message_type not in messages:
            return None

        popped = messages.pop(message_type)
        self._save(messages)
        return popped

    def pop_all(self) -> MessageTable | None:
        """Return messages of all types and delete them from the session."""
        messages = self._load()
        if messages is None:
            return None

        del self._session[SESSION_KEY]
        return messages

    def info(self, message: str) -> None:
        self.add(MessageType.INFO, message)

    def warning(self, message: str) -> None:
        self.add(MessageType.WARNING, message)

    def success(self, message: str) -> None:
        self.add(MessageType.SUCCESS, message)

    def danger(self, message: str) -> None:
        self.add(MessageType.DANGER, message)

    def error(self, message: str) -> None:
        self.add(MessageType.ERROR, message)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}: {self._load() or {}}>"
