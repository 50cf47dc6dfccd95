"""JSON serialization of the exported tree.

Keys follow the site generator's contract (``ismain``, ``importPath``,
``haspkg`` ...); empty sequences are written as ``[]`` and missing notes as
``{}``, never ``null``.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel


def to_dict(model: BaseModel) -> Dict[str, Any]:
    """Return ``model`` as plain JSON-compatible data using the wire keys."""
    return model.model_dump(mode="json", by_alias=True)


def to_json(model: BaseModel, *, indent: Optional[int] = None) -> str:
    """Return ``model`` as JSON text using the wire keys."""
    return model.model_dump_json(by_alias=True, indent=indent)


__all__ = ["to_dict", "to_json"]
