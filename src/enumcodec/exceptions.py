"""Exception hierarchy for enumcodec.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from EnumCodecError for easy catching of any enumcodec-specific error.
"""

from __future__ import annotations


class EnumCodecError(Exception):
    """Base exception for all enumcodec errors."""

    pass


class SchemaError(EnumCodecError):
    """Raised when a union declaration is invalid.

    Raised once, when the union is registered, never deferred to encode or
    decode time.

    Examples:
        - Empty variant list
        - Field variant with zero or several payload types
        - Field variant with named payload fields
        - Constant value outside the 64-bit word
        - Invalid start_at option
    """

    pass


class EncodeError(EnumCodecError):
    """Raised when a value cannot be encoded with a layout.

    Examples:
        - Value is not an instance of the layout's union class
        - Variant name not declared by the layout
    """

    pass


class DecodeError(EnumCodecError):
    """Raised when decoding an integer fails."""

    pass


class NoMatchingVariant(DecodeError):
    """Raised by the strict decode entry point when no variant matches.

    Either no check in the priority chain matched the integer, or a tag
    matched and the nested payload failed to decode. Use ``try_decode`` to
    get ``None`` instead.
    """

    pass
