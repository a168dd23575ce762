"""Utility functions for the SMS client."""

from .encoding import (
    ConversionResult,
    EncodingFailure,
    Utf16Units,
    percent_encode,
    utf8_to_utf16_units,
)

__all__ = [
    "ConversionResult",
    "EncodingFailure",
    "Utf16Units",
    "percent_encode",
    "utf8_to_utf16_units",
]
