"""Mapping from the analyzer's documentation model to the exported tree.

Every mapper receives the code renderer and the rendering context explicitly.
Sequence mappers keep order and cardinality; a missing sequence maps to an
empty tuple. Errors raised by the code renderer propagate unchanged.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from .dto import (
    DocsDir,
    DocsExample,
    DocsFunc,
    DocsNote,
    DocsPackage,
    DocsType,
    DocsValue,
)
from .logging import get_logger
from .models import DirList, Example, Func, Note, PageInfo, Type, Value
from .render import CodeRenderer, CommentedNode
from .text import DEFAULT_TEXT_RENDERER, TextRenderer

logger = get_logger("mapper")


def to_docs_package(
    page: PageInfo,
    render_code: CodeRenderer,
    context: Any = None,
    text: Optional[TextRenderer] = None,
) -> DocsPackage:
    """Export one directory page.

    ``context`` is handed to ``render_code`` untouched and defaults to ``page``.
    Declarations, examples and the package comment are only exported when the
    page has primary documentation; notes and sub-directories always are.
    """
    if context is None:
        context = page
    text = text or DEFAULT_TEXT_RENDERER

    fields: Dict[str, Any] = {
        "is_main": page.is_main,
        "dir": page.dirname,
        "notes": to_docs_notes(page.notes),
        "dirs": to_docs_dirs(page.dirs),
    }
    pdoc = page.pdoc
    if pdoc is not None:
        fields.update(
            import_path=pdoc.import_path,
            summary=text.summary(pdoc.doc),
            description=text.description(pdoc.doc),
            examples=to_docs_examples(page.examples, render_code, context),
            consts=to_docs_values(pdoc.consts, render_code, context, text),
            vars=to_docs_values(pdoc.vars, render_code, context, text),
            funcs=to_docs_funcs(pdoc.funcs, render_code, context, text),
            types=to_docs_types(pdoc.types, render_code, context, text),
        )

    package = DocsPackage(**fields)
    logger.debug(
        "Exported %s: %d types, %d funcs, %d examples, %d note markers, %d dirs",
        page.dirname,
        len(package.types),
        len(package.funcs),
        len(package.examples),
        len(package.notes),
        len(package.dirs),
    )
    return package


def to_docs_dirs(dirs: Optional[DirList]) -> Tuple[DocsDir, ...]:
    if dirs is None:
        return ()
    return tuple(
        DocsDir(
            name=entry.name,
            path=entry.path,
            summary=entry.synopsis,
            has_pkg=entry.has_pkg,
        )
        for entry in dirs.entries
    )


def to_docs_types(
    types: Optional[Sequence[Type]],
    render_code: CodeRenderer,
    context: Any,
    text: Optional[TextRenderer] = None,
) -> Tuple[DocsType, ...]:
    text = text or DEFAULT_TEXT_RENDERER
    return tuple(
        DocsType(
            name=item.name,
            summary=text.summary(item.doc),
            description=text.description(item.doc),
            code=render_code(context, item.decl),
            consts=to_docs_values(item.consts, render_code, context, text),
            vars=to_docs_values(item.vars, render_code, context, text),
            funcs=to_docs_funcs(item.funcs, render_code, context, text),
            methods=to_docs_funcs(item.methods, render_code, context, text),
        )
        for item in types or ()
    )


def to_docs_funcs(
    funcs: Optional[Sequence[Func]],
    render_code: CodeRenderer,
    context: Any,
    text: Optional[TextRenderer] = None,
) -> Tuple[DocsFunc, ...]:
    text = text or DEFAULT_TEXT_RENDERER
    return tuple(
        DocsFunc(
            name=func.name,
            summary=text.summary(func.doc),
            description=text.description(func.doc),
            code=render_code(context, func.decl),
        )
        for func in funcs or ()
    )


def to_docs_values(
    values: Optional[Sequence[Value]],
    render_code: CodeRenderer,
    context: Any,
    text: Optional[TextRenderer] = None,
) -> Tuple[DocsValue, ...]:
    text = text or DEFAULT_TEXT_RENDERER
    return tuple(
        DocsValue(
            names=tuple(value.names),
            summary=text.summary(value.doc),
            description=text.description(value.doc),
            code=render_code(context, value.decl),
        )
        for value in values or ()
    )


def to_docs_examples(
    examples: Optional[Sequence[Example]],
    render_code: CodeRenderer,
    context: Any,
) -> Tuple[DocsExample, ...]:
    return tuple(
        DocsExample(
            name=example.name,
            code=render_code(context, CommentedNode(example.code, example.comments)),
        )
        for example in examples or ()
    )


def to_docs_notes(
    notes: Optional[Mapping[str, Sequence[Note]]],
) -> Dict[str, Tuple[DocsNote, ...]]:
    """Copy notes per marker; marker keys are kept exactly as given."""
    if not notes:
        return {}
    return {
        marker: tuple(DocsNote(uid=note.uid, description=note.body) for note in group or ())
        for marker, group in notes.items()
    }


__all__ = [
    "to_docs_dirs",
    "to_docs_examples",
    "to_docs_funcs",
    "to_docs_notes",
    "to_docs_package",
    "to_docs_types",
    "to_docs_values",
]
