from __future__ import annotations

import logging
import typing

from starlette.requests import HTTPConnection, Request

from flashbag.config import FlashMessagesConfig
from flashbag.exceptions import ImproperlyConfigured
from flashbag.messages import FlashMessages
from flashbag.pipelines import Pipelines
from flashbag.sessions import get_session

SCOPE_KEY = "flash_messages"
CONTEXT_KEY = "flash_messages"

logger = logging.getLogger(__name__)


def enable_flash_messages(pipelines: Pipelines, configuration: FlashMessagesConfig | None = None) -> None:
    """Enable flash messages for all endpoints dispatched through pipelines."""
    configuration = configuration or FlashMessagesConfig()

    def create_flash_messages(request: Request) -> None:
        request.scope[SCOPE_KEY] = FlashMessages(get_session(request), configuration)

    # must run before the session middleware persists the session
    def move_to_view_context(request: Request, response: typing.Any) -> None:
        if not getattr(response, "template_name", None):
            logger.debug("Response has no view, flash messages left in session.")
            return

        # an earlier before request hook returned a response
        if SCOPE_KEY not in request.scope:
            logger.debug("Flash messages were not created for this request, nothing to move.")
            return

        messages = flash(request).pop_all()
        if messages:
            response.context[CONTEXT_KEY] = messages
            logger.debug("Moved flash messages of types %s into view context.", ", ".join(messages))

    pipelines.before_request.add_item_to_end(create_flash_messages)
    pipelines.after_request.add_item_to_start(move_to_view_context)


def flash(connection: HTTPConnection) -> FlashMessages:
    """Return flash messages of the current request."""
    if SCOPE_KEY not in connection.scope:
        raise ImproperlyConfigured("Flash messages are not enabled. Call enable_flash_messages() first.")
    return typing.cast(FlashMessages, connection.scope[SCOPE_KEY])


def get_or_create_flash_messages(connection: HTTPConnection) -> FlashMessages:
    """Return flash messages of the current request.

    When the request skipped the before request hooks, flash messages are
    created from the request session with the default configuration."""
    if SCOPE_KEY not in connection.scope:
        connection.scope[SCOPE_KEY] = FlashMessages(get_session(connection), FlashMessagesConfig())
    return flash(connection)
