"""One-sentence synopsis of a documentation comment."""

from __future__ import annotations

import re
from typing import Iterable

from ..config import DEFAULT_ILLEGAL_PREFIXES
from .comment import convert_quotes

_PARAGRAPH_BREAK = re.compile(r"\n[ \t\r]*\n")
_SPACE_RUN = re.compile(r"[ \t\r\n]+")
_FULL_STOPS = ("。", "．")


def first_sentence_len(text: str) -> int:
    """Return the length of the first sentence of ``text``, terminator included.

    A period ends the sentence when followed by whitespace, unless it follows a
    lone capital letter ("U.S. law"); "ABC. " still ends it.
    """
    ppp = pp = p = ""
    for index, char in enumerate(text):
        if char in "\n\r\t":
            char = " "
        if char == " " and p == "." and (not pp.isupper() or ppp.isupper()):
            return index
        if p in _FULL_STOPS:
            return index
        ppp, pp, p = pp, p, char
    return len(text)


def collapse_whitespace(text: str) -> str:
    return _SPACE_RUN.sub(" ", text).strip(" ")


def synopsis(text: str, illegal_prefixes: Iterable[str] = DEFAULT_ILLEGAL_PREFIXES) -> str:
    """Return the first sentence of the first paragraph of ``text``.

    Comments opening with a copyright or authorship line have no synopsis.
    """
    paragraph = _PARAGRAPH_BREAK.split(text.lstrip(), maxsplit=1)[0]
    sentence = collapse_whitespace(paragraph[: first_sentence_len(paragraph)])
    lowered = sentence.lower()
    if any(prefix and lowered.startswith(prefix) for prefix in illegal_prefixes):
        return ""
    return convert_quotes(sentence)


__all__ = ["collapse_whitespace", "first_sentence_len", "synopsis"]
