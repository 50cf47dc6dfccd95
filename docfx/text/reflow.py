"""Plain-text reflow of documentation comments."""

from __future__ import annotations

from typing import List

from ..config import DEFAULT_INDENT, DEFAULT_PRE_INDENT, DEFAULT_WIDTH
from .comment import Block, BlockKind, convert_quotes, is_blank, parse_blocks


class _LineWriter:
    """Accumulates words into lines of at most ``width`` characters."""

    def __init__(self, indent: str, width: int) -> None:
        self.indent = indent
        self.width = width
        self._parts: List[str] = []
        self._printed = False
        self._column = 0
        self._pending_space = 0

    def raw(self, text: str) -> None:
        self._parts.append(text)

    def mark_printed(self) -> None:
        self._printed = True

    def write(self, text: str) -> None:
        if self._column == 0 and self._printed:
            # blank line before a new paragraph
            self._parts.append("\n")
        self._printed = True
        for word in text.split():
            size = len(word)
            if self._column > 0 and self._column + self._pending_space + size > self.width:
                self._parts.append("\n")
                self._column = 0
                self._pending_space = 0
            if self._column == 0:
                self._parts.append(self.indent)
            self._parts.append(" " * self._pending_space)
            self._parts.append(word)
            self._column += self._pending_space + size
            self._pending_space = 1

    def flush(self) -> None:
        if self._column == 0:
            return
        self._parts.append("\n")
        self._pending_space = 0
        self._column = 0

    def getvalue(self) -> str:
        return "".join(self._parts)


def reflow(
    text: str,
    *,
    indent: str = DEFAULT_INDENT,
    pre_indent: str = DEFAULT_PRE_INDENT,
    width: int = DEFAULT_WIDTH,
) -> str:
    """Render a comment as plain text.

    Paragraph lines are joined and wrapped at ``width`` with ``indent`` on each
    line; preformatted lines are copied verbatim behind ``pre_indent``.
    """
    out = _LineWriter(indent, width)
    for block in parse_blocks(text):
        if block.kind is BlockKind.PARAGRAPH:
            for line in block.lines:
                out.write(convert_quotes(line))
            out.flush()
        elif block.kind is BlockKind.HEADING:
            out.raw("\n")
            out.write(convert_quotes(block.lines[0]))
            out.flush()
        elif block.kind is BlockKind.PRE:
            out.raw("\n")
            for line in block.lines:
                out.raw("\n" if is_blank(line) else pre_indent + line)
            out.mark_printed()
        else:
            _write_list(out, block, indent)
    return out.getvalue()


def _write_list(out: _LineWriter, block: Block, indent: str) -> None:
    out.raw("\n")
    for position, item in enumerate(block.items):
        if position and block.loose:
            out.raw("\n")
        marker = f" {item.number}. " if item.number else "  - "
        out.raw(f"{indent}{marker}{convert_quotes(item.text)}\n")
    out.mark_printed()


__all__ = ["reflow"]
