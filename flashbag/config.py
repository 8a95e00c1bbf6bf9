from __future__ import annotations

import dataclasses
import os
import pathlib
import typing

from starlette.config import Config as BaseConfig
from starlette.config import Environ

from flashbag.exceptions import ImproperlyConfigured
from flashbag.renderers import BootstrapRenderer, MessageRenderer, PlainRenderer

__all__ = ["Config", "FlashMessagesConfig"]


class Config(BaseConfig):
    def __init__(
        self,
        env_files: list[str | pathlib.Path] | None = None,
        env_prefix: str = "",
        environ: typing.Mapping[str, str] | None = None,
    ) -> None:
        env_files = env_files or []
        super().__init__(None, Environ() if environ is None else environ, env_prefix)
        for env_file in env_files:
            if os.path.exists(env_file) and os.path.isfile(env_file):
                self.file_values.update(self._read_file(env_file))


_renderers: dict[str, typing.Callable[[bool], MessageRenderer]] = {
    "bootstrap": lambda dismissible: BootstrapRenderer(dismissible=dismissible),
    "plain": lambda dismissible: PlainRenderer(),
}


@dataclasses.dataclass
class FlashMessagesConfig:
    """Flash messages configuration.

    The renderer turns a list of messages of one type into markup when a view
    asks for it."""

    renderer: MessageRenderer = dataclasses.field(default_factory=BootstrapRenderer)

    def get_renderer(self) -> MessageRenderer:
        return self.renderer

    @classmethod
    def from_config(cls, config: BaseConfig) -> FlashMessagesConfig:
        """Build configuration from environment variables.

        Reads FLASH_MESSAGES_RENDERER ("bootstrap" or "plain") and
        FLASH_MESSAGES_DISMISSIBLE."""
        renderer_name = config("FLASH_MESSAGES_RENDERER", default="bootstrap")
        dismissible = config("FLASH_MESSAGES_DISMISSIBLE", cast=bool, default=False)
        if renderer_name not in _renderers:
            raise ImproperlyConfigured(
                "Unsupported flash messages renderer: {name}. Choices: {choices}.".format(
                    name=renderer_name, choices=", ".join(_renderers)
                )
            )
        return cls(renderer=_renderers[renderer_name](dismissible))
