"""Block structure of documentation comments.

A comment is split into paragraphs, headings, preformatted spans and lists:

* blank lines separate paragraphs;
* indented lines (with interior blank lines) form a preformatted span, or a
  list when the span opens with a ``-``/``*``/``+``/``•`` or ``N.``/``N)``
  marker;
* a lone capitalised line surrounded by blank lines and followed by
  unindented text is a heading when it has no sentence punctuation; commas,
  parentheses and periods inside a token ("Go 1.5") are allowed. A one-line
  ``# Title`` paragraph is a heading too.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

_HEADING_ILLEGAL = frozenset(";:!?+*/=[]{}_^°&§~%#@<\">\\")
_LIST_MARKER = re.compile(r"(?:([-*+•])|(\d+)[.)])[ \t]+(?=\S)")


class BlockKind(Enum):
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    PRE = "pre"
    LIST = "list"


@dataclass(frozen=True)
class ListItem:
    """One list entry; ``number`` is empty for bullet items."""

    number: str
    text: str


@dataclass(frozen=True)
class Block:
    kind: BlockKind
    lines: Tuple[str, ...] = ()
    items: Tuple[ListItem, ...] = ()
    loose: bool = False


def convert_quotes(text: str) -> str:
    """Turn ``quoted'' text into typographic quotes."""
    return text.replace("``", "“").replace("''", "”")


def split_lines(text: str) -> List[str]:
    """Split after each newline, keeping the terminators."""
    lines = [line + "\n" for line in text.split("\n")]
    lines[-1] = lines[-1][:-1]
    return lines


def is_blank(line: str) -> bool:
    return not line.strip()


def indent_len(line: str) -> int:
    return len(line) - len(line.lstrip(" \t"))


def unindent(lines: Sequence[str]) -> List[str]:
    """Remove the longest whitespace prefix shared by all non-blank lines."""
    prefix: Optional[str] = None
    for line in lines:
        if is_blank(line):
            continue
        current = line[: indent_len(line)]
        if prefix is None:
            prefix = current
            continue
        size = 0
        while size < len(prefix) and size < len(current) and prefix[size] == current[size]:
            size += 1
        prefix = prefix[:size]
    if not prefix:
        return list(lines)
    return [line if is_blank(line) else line[len(prefix) :] for line in lines]


def heading_text(line: str) -> str:
    """Return the heading text of ``line`` or ``""`` when it cannot be one."""
    line = line.strip()
    if not line:
        return ""
    first, last = line[0], line[-1]
    if not (first.isalpha() and first.isupper()):
        return ""
    if not (last.isalpha() or last.isdigit()):
        return ""
    if any(char in _HEADING_ILLEGAL for char in line):
        return ""
    # apostrophes are only allowed in possessives ("Go's runtime")
    rest = line
    while True:
        index = rest.find("'")
        if index < 0:
            break
        if index + 1 >= len(rest) or rest[index + 1] != "s":
            return ""
        if index + 2 < len(rest) and rest[index + 2] != " ":
            return ""
        rest = rest[index + 2 :]
    # periods only inside a token ("Go 1.5"), never before a space or at the end
    for index, char in enumerate(line):
        if char == "." and (index + 1 >= len(line) or line[index + 1] == " "):
            return ""
    return line


def parse_blocks(text: str) -> List[Block]:
    """Split a comment into paragraph, heading, preformatted and list blocks."""
    lines = unindent(split_lines(text))
    blocks: List[Block] = []
    para: List[str] = []
    last_was_blank = False
    last_was_heading = False

    def close() -> None:
        if para:
            blocks.append(Block(BlockKind.PARAGRAPH, tuple(para)))
            para.clear()

    index = 0
    while index < len(lines):
        line = lines[index]
        if is_blank(line):
            close()
            index += 1
            last_was_blank = True
            continue

        if indent_len(line) > 0:
            close()
            end = index + 1
            while end < len(lines) and (is_blank(lines[end]) or indent_len(lines[end]) > 0):
                end += 1
            while end > index and is_blank(lines[end - 1]):
                end -= 1
            span = unindent(lines[index:end])
            index = end
            blocks.append(_list_block(span) or Block(BlockKind.PRE, tuple(span)))
            last_was_heading = False
            continue

        if not para and line.startswith("# ") and (
            index + 1 >= len(lines) or is_blank(lines[index + 1])
        ):
            title = line[2:].strip()
            if title:
                blocks.append(Block(BlockKind.HEADING, (title,)))
                index += 1
                last_was_heading = True
                continue

        if (
            last_was_blank
            and not last_was_heading
            and index + 2 < len(lines)
            and is_blank(lines[index + 1])
            and not is_blank(lines[index + 2])
            and indent_len(lines[index + 2]) == 0
        ):
            title = heading_text(line)
            if title:
                close()
                blocks.append(Block(BlockKind.HEADING, (title,)))
                index += 2
                last_was_heading = True
                continue

        last_was_blank = False
        last_was_heading = False
        para.append(line)
        index += 1

    close()
    return blocks


def _list_block(lines: Sequence[str]) -> Optional[Block]:
    if not lines or not _LIST_MARKER.match(lines[0]):
        return None

    items: List[ListItem] = []
    number = ""
    parts: List[str] = []
    loose = False
    saw_blank = False
    for line in lines:
        if is_blank(line):
            saw_blank = True
            continue
        match = _LIST_MARKER.match(line)
        if match:
            if parts:
                items.append(ListItem(number, " ".join(parts)))
                loose = loose or saw_blank
            number = match.group(2) or ""
            parts = [line[match.end() :].strip()]
        else:
            parts.append(line.strip())
        saw_blank = False
    items.append(ListItem(number, " ".join(parts)))
    return Block(BlockKind.LIST, items=tuple(items), loose=loose)


__all__ = [
    "Block",
    "BlockKind",
    "ListItem",
    "convert_quotes",
    "heading_text",
    "parse_blocks",
]
