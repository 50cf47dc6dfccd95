"""Tests for docfx.logging."""

from __future__ import annotations

from docfx.logging import get_logger


def test_get_logger_uses_docfx_hierarchy() -> None:
    assert get_logger().name == "docfx"
    assert get_logger("mapper").name == "docfx.mapper"
    assert get_logger("mapper").parent is get_logger()
