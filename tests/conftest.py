from __future__ import annotations

import pytest

from docfx.models import PageInfo
from tests._fixtures.pages import StubRenderer, bytes_page


@pytest.fixture
def stub_renderer() -> StubRenderer:
    """Provide a code renderer that records the nodes it is asked to print."""
    return StubRenderer()


@pytest.fixture
def page() -> PageInfo:
    return bytes_page()
