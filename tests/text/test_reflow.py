"""Tests for description reflow."""

from __future__ import annotations

import pytest

from docfx.config import TextConfig
from docfx.text import DEFAULT_TEXT_RENDERER, TextRenderer, description
from docfx.text.reflow import reflow


def test_empty_comment_has_empty_description() -> None:
    assert description("") == ""


def test_paragraph_lines_are_joined() -> None:
    assert description("Hello\nworld.") == "Hello world.\n"


def test_paragraphs_are_separated_by_blank_line() -> None:
    assert description("Hello world.\n\nSecond para.\n") == "Hello world.\n\nSecond para.\n"


def test_long_lines_are_not_wrapped() -> None:
    text = " ".join(["word"] * 500)
    assert description(text) == text + "\n"


def test_common_indentation_is_removed() -> None:
    assert description("  Indented whole\n  comment.\n") == "Indented whole comment.\n"


def test_preformatted_block_uses_pre_indent() -> None:
    text = "Intro:\n\n\tcode()\n\tmore()\n"
    assert description(text) == "Intro:\n\n    code()\n    more()\n"


def test_preformatted_block_keeps_interior_blank_lines() -> None:
    text = "Intro:\n\n\ta()\n\n\tb()\n"
    assert description(text) == "Intro:\n\n    a()\n\n    b()\n"


def test_paragraph_after_preformatted_block() -> None:
    text = "Intro:\n\n\tcode()\n\nAfter.\n"
    assert description(text) == "Intro:\n\n    code()\n\nAfter.\n"


def test_heading_is_rendered_as_plain_line() -> None:
    text = "Intro text.\n\nOverview\n\nBody text.\n"
    assert description(text) == "Intro text.\n\n\nOverview\n\nBody text.\n"


def test_explicit_heading_drops_marker() -> None:
    text = "Intro.\n\n# Usage\n\nBody.\n"
    assert description(text) == "Intro.\n\n\nUsage\n\nBody.\n"


def test_punctuated_line_is_not_a_heading() -> None:
    text = "Intro.\n\nNot a heading.\n\nBody.\n"
    assert description(text) == "Intro.\n\nNot a heading.\n\nBody.\n"


def test_bullet_list() -> None:
    text = "Options:\n\n  - fast\n  * small\n"
    assert description(text) == "Options:\n\n  - fast\n  - small\n"


def test_loose_numbered_list() -> None:
    text = "Steps:\n\n 1. one\n\n 2. two\n"
    assert description(text) == "Steps:\n\n 1. one\n\n 2. two\n"


def test_quotes_become_typographic() -> None:
    assert description("Say ``hi''.\n") == "Say “hi”.\n"


def test_reflow_wraps_at_width_with_indent() -> None:
    text = "alpha beta gamma delta epsilon\n"
    assert reflow(text, indent="> ", width=20) == "> alpha beta gamma\n> delta epsilon\n"


def test_renderer_uses_configured_indents() -> None:
    renderer = TextRenderer(TextConfig(indent="> ", pre_indent="\t"))
    assert renderer.description("x\n\n  y\n") == "> x\n\n\ty\n"


def test_description_is_deterministic() -> None:
    text = "Intro.\n\nOverview\n\n\tcode()\n\n  - item\n"
    assert description(text) == description(text)


def test_heading_with_version_number() -> None:
    text = "Intro.\n\nGo 1.5 Changes\n\nBody.\n"
    assert description(text) == "Intro.\n\n\nGo 1.5 Changes\n\nBody.\n"


def test_heading_with_comma() -> None:
    text = "Intro.\n\nReading, Writing\n\nBody.\n"
    assert description(text) == "Intro.\n\n\nReading, Writing\n\nBody.\n"


def test_default_renderer_settings_cannot_be_replaced() -> None:
    with pytest.raises(AttributeError):
        DEFAULT_TEXT_RENDERER.config = TextConfig(indent="> ")  # type: ignore[misc]
    with pytest.raises(AttributeError):
        DEFAULT_TEXT_RENDERER.width = 10  # type: ignore[attr-defined]
    assert description("Plain.") == "Plain.\n"
