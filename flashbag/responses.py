from __future__ import annotations

import typing

from starlette import responses
from starlette.requests import Request
from starlette.types import Receive, Scope, Send

from flashbag.lifecycle import get_or_create_flash_messages
from flashbag.messages import MessageType
from flashbag.templating import Templates


class ViewResponse:
    """A response that renders a template when it is sent.

    The context stays mutable until then, so request hooks may put extra
    variables into it."""

    def __init__(
        self,
        template_name: str,
        context: typing.Mapping[str, typing.Any] | None = None,
        *,
        status_code: int = 200,
        headers: typing.Mapping[str, str] | None = None,
        media_type: str = "text/html",
    ) -> None:
        self.template_name = template_name
        self.context = dict(context or {})
        self.status_code = status_code
        self.headers = headers
        self.media_type = media_type

    def create_http_response(self, request: Request) -> responses.Response:
        return Templates.of(request).TemplateResponse(
            request,
            self.template_name,
            self.context,
            status_code=self.status_code,
            headers=self.headers,
            media_type=self.media_type,
        )

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        request = Request(scope, receive, send)
        response = self.create_http_response(request)
        await response(scope, receive, send)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}: template_name={self.template_name!r}>"


class RedirectResponse(responses.RedirectResponse):
    def __init__(
        self,
        url: str,
        status_code: int = 302,
        headers: typing.Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(url=url, status_code=status_code, headers=headers)
        self.flash_messages: list[tuple[str, MessageType | str]] = []

    def flash(self, message: str, message_type: MessageType | str = MessageType.SUCCESS) -> RedirectResponse:
        """Queue a flash message to be stored when the response is sent."""
        self.flash_messages.append((message, message_type))
        return self

    def with_error(self, message: str) -> RedirectResponse:
        return self.flash(message, MessageType.ERROR)

    def with_success(self, message: str) -> RedirectResponse:
        return self.flash(message, MessageType.SUCCESS)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if self.flash_messages:
            flash_messages = get_or_create_flash_messages(Request(scope))
            for message, message_type in self.flash_messages:
                flash_messages.add(message_type, message)
        await super().__call__(scope, receive, send)


redirect = RedirectResponse
view = ViewResponse
