"""Utility functions for enumcodec.

This module provides layout inspection helpers.
"""

from __future__ import annotations

from .layout import payload_bits, tag_bits, tag_table

__all__ = [
    "tag_bits",
    "payload_bits",
    "tag_table",
]
