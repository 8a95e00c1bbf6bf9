import os
import typing

import jinja2
import jinja2.ext
from markupsafe import Markup
from starlette.requests import Request
from starlette.templating import Jinja2Templates

from flashbag.exceptions import ImproperlyConfigured
from flashbag.extensions import Extension
from flashbag.lifecycle import CONTEXT_KEY, flash
from flashbag.messages import MessageTable, MessageType, message_type_value

type ContextProcessor = typing.Callable[[Request], dict[str, typing.Any]]


@jinja2.pass_context
def render_flash_messages(context: jinja2.runtime.Context, message_type: MessageType | str) -> Markup:
    """Render flash messages of the given type moved into the view context.

    Usage: {{ render_flash_messages("info") }}"""
    message_type = message_type_value(message_type)
    table: MessageTable = context.get(CONTEXT_KEY) or {}
    request = context.get("request")
    if request is None:
        raise ImproperlyConfigured("render_flash_messages() requires request in the template context.")

    renderer = flash(request).configuration.get_renderer()
    return Markup(renderer.render(message_type, table.get(message_type)))


class Templates(Jinja2Templates, Extension):
    def __init__(
        self,
        jinja_env: jinja2.Environment | None = None,
        *,
        debug: bool = False,
        auto_escape: bool = True,
        directories: typing.Sequence[str | os.PathLike[str]] = (),
        packages: typing.Sequence[str] = (),
        context_processors: typing.Sequence[ContextProcessor] = (),
        extensions: typing.Sequence[str | type[jinja2.ext.Extension]] = (),
        globals: dict[str, typing.Any] | None = None,
        filters: dict[str, typing.Callable[[typing.Any], typing.Any]] | None = None,
    ) -> None:
        if not jinja_env:
            jinja_env = jinja2.Environment(
                auto_reload=debug,
                autoescape=auto_escape,
                extensions=extensions,
                loader=jinja2.ChoiceLoader(
                    [
                        jinja2.FileSystemLoader(directories),
                        *[jinja2.PackageLoader(package) for package in packages],
                    ]
                ),
            )
        jinja_env.globals.update(globals or {})
        jinja_env.globals["render_flash_messages"] = render_flash_messages
        jinja_env.filters.update(filters or {})

        super().__init__(
            env=jinja_env,
            context_processors=list(context_processors),
        )

    def render(self, name: str, context: dict[str, typing.Any] | None = None) -> str:
        template = self.env.get_template(name)
        return template.render(context or {})
