"""Export analyzed package documentation as a serialization-ready tree."""

from .config import ConfigError, DocfxConfig, TextConfig, load_config
from .dto import (
    DocsDir,
    DocsExample,
    DocsFunc,
    DocsNote,
    DocsPackage,
    DocsType,
    DocsValue,
)
from .mapper import to_docs_package
from .render import CodeRenderer, CommentedNode
from .serialize import to_dict, to_json
from .text import TextRenderer, description, summary

__all__ = [
    "CodeRenderer",
    "CommentedNode",
    "ConfigError",
    "DocfxConfig",
    "DocsDir",
    "DocsExample",
    "DocsFunc",
    "DocsNote",
    "DocsPackage",
    "DocsType",
    "DocsValue",
    "TextConfig",
    "TextRenderer",
    "description",
    "load_config",
    "summary",
    "to_dict",
    "to_docs_package",
    "to_json",
]
