"""Serialization-ready output tree consumed by the documentation site generator.

Field names are Pythonic; the JSON keys the site generator expects are carried
as serialization aliases, so dump with ``by_alias=True`` (see
:mod:`docfx.serialize`). Sequence fields default to empty tuples and ``notes``
to an empty mapping so that "no elements" is never serialized as ``null``.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class _DocsModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class DocsFunc(_DocsModel):
    name: str = ""
    summary: str = ""
    description: str = ""
    code: str = ""


class DocsValue(_DocsModel):
    """A grouped declaration; several identifiers may share one entry."""

    names: Tuple[str, ...] = ()
    summary: str = ""
    description: str = ""
    code: str = ""


class DocsType(_DocsModel):
    """A type with its own constants, variables, constructors and methods."""

    name: str = ""
    summary: str = ""
    description: str = ""
    code: str = ""

    consts: Tuple[DocsValue, ...] = ()
    vars: Tuple[DocsValue, ...] = ()
    funcs: Tuple[DocsFunc, ...] = ()
    methods: Tuple[DocsFunc, ...] = ()


class DocsNote(_DocsModel):
    uid: str = ""
    description: str = ""


class DocsExample(_DocsModel):
    name: str = ""
    code: str = ""


class DocsDir(_DocsModel):
    name: str = ""
    path: str = ""
    summary: str = ""
    has_pkg: bool = Field(default=False, serialization_alias="haspkg")


class DocsPackage(_DocsModel):
    """Root of the exported tree for one directory page."""

    is_main: bool = Field(default=False, serialization_alias="ismain")
    summary: str = ""
    description: str = ""
    import_path: str = Field(default="", serialization_alias="importPath")
    dir: str = ""
    consts: Tuple[DocsValue, ...] = ()
    types: Tuple[DocsType, ...] = ()
    vars: Tuple[DocsValue, ...] = ()
    funcs: Tuple[DocsFunc, ...] = ()
    notes: Mapping[str, Tuple[DocsNote, ...]] = Field(default_factory=dict, validate_default=True)
    examples: Tuple[DocsExample, ...] = ()
    dirs: Tuple[DocsDir, ...] = ()

    @field_validator("notes", mode="after")
    @classmethod
    def freeze_notes(
        cls, notes: Mapping[str, Tuple[DocsNote, ...]]
    ) -> Mapping[str, Tuple[DocsNote, ...]]:
        return MappingProxyType(dict(notes))

    @field_serializer("notes")
    def dump_notes(
        self, notes: Mapping[str, Tuple[DocsNote, ...]]
    ) -> Dict[str, Tuple[DocsNote, ...]]:
        return dict(notes)


__all__ = [
    "DocsDir",
    "DocsExample",
    "DocsFunc",
    "DocsNote",
    "DocsPackage",
    "DocsType",
    "DocsValue",
]
