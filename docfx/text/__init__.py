"""Summary and description rendering for documentation comments."""

from __future__ import annotations

from ..config import DocfxConfig, TextConfig
from .reflow import reflow
from .synopsis import synopsis


class TextRenderer:
    """Produces the summary and description strings of exported entities."""

    __slots__ = ("_config",)

    def __init__(self, config: TextConfig | None = None) -> None:
        self._config = config or TextConfig()

    @property
    def config(self) -> TextConfig:
        return self._config

    @classmethod
    def from_config(cls, config: DocfxConfig) -> "TextRenderer":
        return cls(config.text)

    def summary(self, doc: str) -> str:
        return synopsis(doc, self.config.illegal_prefixes)

    def description(self, doc: str) -> str:
        return reflow(
            doc,
            indent=self.config.indent,
            pre_indent=self.config.pre_indent,
            width=self.config.width,
        )


DEFAULT_TEXT_RENDERER = TextRenderer()


def summary(doc: str) -> str:
    """Return the one-sentence synopsis of ``doc``."""
    return DEFAULT_TEXT_RENDERER.summary(doc)


def description(doc: str) -> str:
    """Return ``doc`` reflowed to plain text with default settings."""
    return DEFAULT_TEXT_RENDERER.description(doc)


__all__ = [
    "DEFAULT_TEXT_RENDERER",
    "TextRenderer",
    "description",
    "reflow",
    "summary",
    "synopsis",
]
