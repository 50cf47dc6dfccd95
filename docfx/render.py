"""Contract for the code renderer injected into the exporter."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, Sequence


@dataclass(frozen=True)
class CommentedNode:
    """An example body paired with the comments that belong inside it.

    Renderers print ``comments`` at their original positions within ``node``.
    """

    node: Any
    comments: Sequence[Any] = field(default_factory=list)


class CodeRenderer(Protocol):
    """Renders a declaration or example node to source text for a page.

    Implementations are called once per exported entity and must be reentrant
    when packages are exported in parallel. Errors they raise reach the caller
    of the exporter unchanged.
    """

    def __call__(self, context: Any, node: Any) -> str:
        """Return formatted source text for ``node``."""


__all__ = ["CodeRenderer", "CommentedNode"]
