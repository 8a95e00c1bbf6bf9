from __future__ import annotations

import typing

import jinja2
from markupsafe import Markup, escape


class MessageRenderer(typing.Protocol):  # pragma: no cover
    """Turns a list of messages of one type into markup."""

    def render(self, message_type: str, messages: typing.Sequence[str] | None) -> str: ...


class BootstrapRenderer:
    """Render messages as Bootstrap alerts."""

    def __init__(self, dismissible: bool = False) -> None:
        self.dismissible = dismissible

    def render(self, message_type: str, messages: typing.Sequence[str] | None) -> str:
        if not messages:
            return ""

        css_class = "alert alert-" + message_type
        close_button = Markup("")
        if self.dismissible:
            css_class += " alert-dismissible fade show"
            close_button = Markup('<button type="button" class="btn-close" data-bs-dismiss="alert"></button>')

        if len(messages) == 1:
            body = escape(messages[0])
        else:
            body = Markup("<ul>%s</ul>") % Markup("").join(Markup("<li>%s</li>") % message for message in messages)

        return str(Markup('<div class="%s" role="alert">%s%s</div>') % (css_class, body, close_button))


class PlainRenderer:
    """Render messages as a plain unordered list."""

    def render(self, message_type: str, messages: typing.Sequence[str] | None) -> str:
        if not messages:
            return ""

        items = Markup("").join(Markup("<li>%s</li>") % message for message in messages)
        return str(Markup('<ul class="flash-messages flash-%s">%s</ul>') % (message_type, items))


class TemplateRenderer:
    """Delegate rendering to a Jinja2 macro.

    The macro receives `message_type` and `messages` keyword arguments."""

    def __init__(self, env: jinja2.Environment, template_name: str, macro: str = "render") -> None:
        self.env = env
        self.template_name = template_name
        self.macro = macro

    def render(self, message_type: str, messages: typing.Sequence[str] | None) -> str:
        if not messages:
            return ""

        template = self.env.get_template(self.template_name)
        template_module = template.make_module({})
        callback = getattr(template_module, self.macro)
        return str(callback(message_type=message_type, messages=list(messages)))
