"""Tagged-union modeling for enumcodec.

This module provides the TaggedUnion base class and the variant declaration
helpers.
"""

from __future__ import annotations

from .base import TaggedUnion, UnionOptions
from .fields import Constant, Field, Unit

__all__ = [
    "TaggedUnion",
    "UnionOptions",
    "Unit",
    "Field",
    "Constant",
]
