"""Input documentation model handed over by the source analyzer.

These objects are produced upstream and treated as read-only by the exporter.
Declaration nodes (``decl``, ``Example.code``, ``Example.comments``) are opaque
here; only the injected code renderer knows how to print them.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence


@dataclass(frozen=True)
class Value:
    """A grouped const or var declaration sharing one doc comment."""

    doc: str
    names: Sequence[str]
    decl: Any


@dataclass(frozen=True)
class Func:
    """A function or method declaration."""

    doc: str
    name: str
    decl: Any
    recv: Optional[str] = None


@dataclass(frozen=True)
class Type:
    """A type declaration together with the declarations associated with it.

    ``funcs`` holds package-level functions returning the type (constructors);
    ``methods`` holds functions bound to it.
    """

    doc: str
    name: str
    decl: Any
    consts: Sequence[Value] = field(default_factory=list)
    vars: Sequence[Value] = field(default_factory=list)
    funcs: Sequence[Func] = field(default_factory=list)
    methods: Sequence[Func] = field(default_factory=list)


@dataclass(frozen=True)
class Note:
    """A marked note (``BUG(uid): body``) collected from the package comments."""

    uid: str
    body: str


@dataclass(frozen=True)
class Example:
    """A runnable example with its body and the comments found inside it."""

    name: str
    code: Any
    comments: Sequence[Any] = field(default_factory=list)
    doc: str = ""
    output: str = ""


@dataclass(frozen=True)
class DirEntry:
    """A sub-directory listed on a package page."""

    name: str
    path: str
    synopsis: str = ""
    has_pkg: bool = False


@dataclass(frozen=True)
class DirList:
    """Directory listing below the current page."""

    entries: Sequence[DirEntry] = field(default_factory=list)


@dataclass(frozen=True)
class PackageDoc:
    """Primary documentation of a package with buildable declarations."""

    doc: str
    name: str
    import_path: str
    filenames: Sequence[str] = field(default_factory=list)
    consts: Sequence[Value] = field(default_factory=list)
    vars: Sequence[Value] = field(default_factory=list)
    types: Sequence[Type] = field(default_factory=list)
    funcs: Sequence[Func] = field(default_factory=list)


@dataclass(frozen=True)
class PageInfo:
    """Everything the analyzer knows about one directory page.

    ``pdoc`` is ``None`` for a directory without a buildable package; notes and
    dirs are gathered independently of it.
    """

    dirname: str
    is_main: bool = False
    pdoc: Optional[PackageDoc] = None
    examples: Sequence[Example] = field(default_factory=list)
    notes: Mapping[str, Sequence[Note]] = field(default_factory=dict)
    dirs: Optional[DirList] = None


__all__ = [
    "DirEntry",
    "DirList",
    "Example",
    "Func",
    "Note",
    "PackageDoc",
    "PageInfo",
    "Type",
    "Value",
]
