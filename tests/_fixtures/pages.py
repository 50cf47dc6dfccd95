"""Helpers for building analyzer pages and a recording code renderer in tests."""

from __future__ import annotations

from typing import Any, List, Tuple

from docfx.models import (
    DirEntry,
    DirList,
    Example,
    Func,
    Note,
    PackageDoc,
    PageInfo,
    Type,
    Value,
)
from docfx.render import CommentedNode


class StubRenderer:
    """Code renderer returning fixed strings and remembering every call."""

    def __init__(self) -> None:
        self.calls: List[Tuple[Any, Any]] = []

    def __call__(self, context: Any, node: Any) -> str:
        self.calls.append((context, node))
        if isinstance(node, CommentedNode):
            comments = " ".join(str(comment) for comment in node.comments)
            return f"example {node.node} {comments}".rstrip()
        return f"code {node}"


def buffer_type() -> Type:
    return Type(
        doc="A Buffer is a variable-sized buffer of bytes.\n\nThe zero value is ready to use.\n",
        name="Buffer",
        decl="type Buffer struct",
        consts=[Value(doc="", names=["MinRead"], decl="const MinRead = 512")],
        vars=[],
        funcs=[
            Func(doc="NewBuffer creates a Buffer.", name="NewBuffer", decl="func NewBuffer"),
            Func(
                doc="NewBufferString creates a Buffer from a string.",
                name="NewBufferString",
                decl="func NewBufferString",
            ),
        ],
        methods=[
            Func(
                doc="Len returns the number of unread bytes.",
                name="Len",
                decl="func (b *Buffer) Len",
                recv="*Buffer",
            ),
        ],
    )


def bytes_page() -> PageInfo:
    """Return a page resembling a small standard-library package."""
    pdoc = PackageDoc(
        doc="Package bytes implements functions for byte slices. It is analogous to strings.\n",
        name="bytes",
        import_path="bytes",
        filenames=["buffer.go", "bytes.go"],
        consts=[],
        vars=[
            Value(
                doc="ErrTooLarge is passed to panic if memory cannot be allocated.",
                names=["ErrTooLarge"],
                decl="var ErrTooLarge",
            ),
            Value(
                doc="Common separators.",
                names=["Comma", "Colon"],
                decl="var ( Comma; Colon )",
            ),
        ],
        types=[buffer_type()],
        funcs=[
            Func(doc="Compare compares two byte slices.", name="Compare", decl="func Compare"),
            Func(doc="Equal reports whether a and b are equal.", name="Equal", decl="func Equal"),
        ],
    )
    return PageInfo(
        dirname="src/bytes",
        is_main=False,
        pdoc=pdoc,
        examples=[Example(name="Buffer", code="ExampleBuffer", comments=["// Output: hi"])],
        notes={"BUG": [Note(uid="rsc", body="Compare is slow.")]},
        dirs=DirList(
            entries=[
                DirEntry(name="internal", path="bytes/internal", synopsis="", has_pkg=False),
                DirEntry(name="reader", path="bytes/reader", synopsis="Package reader reads.", has_pkg=True),
            ]
        ),
    )


__all__ = ["StubRenderer", "buffer_type", "bytes_page"]
