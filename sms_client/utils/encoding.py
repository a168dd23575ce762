"""UTF-8 to UTF-16 conversion and form encoding helpers for message bodies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union
from urllib.parse import quote


@dataclass(frozen=True)
class Utf16Units:
    """A message body expressed as UTF-16 code units.

    The provider measures body length in these units: characters in the
    Basic Multilingual Plane take one unit, anything above U+FFFF takes two
    (a surrogate pair).
    """

    units: tuple[int, ...]

    def __len__(self) -> int:
        return len(self.units)


@dataclass(frozen=True)
class EncodingFailure:
    """Input that could not be read as UTF-8."""

    reason: str
    position: Optional[int] = None

    def describe(self) -> str:
        if self.position is None:
            return f"Message body is not valid UTF-8: {self.reason}"
        return f"Message body is not valid UTF-8 at position {self.position}: {self.reason}"


ConversionResult = Union[Utf16Units, EncodingFailure]


def utf8_to_utf16_units(data: Union[str, bytes]) -> ConversionResult:
    """Convert UTF-8 input into its sequence of UTF-16 code units.

    `bytes` are decoded strictly. A `str` is first checked to be encodable as
    UTF-8, which rejects lone surrogates smuggled in via `surrogateescape` or
    similar error handlers.

    Returns:
        `Utf16Units` on success, `EncodingFailure` when the input is not UTF-8.
    """
    try:
        if isinstance(data, bytes):
            text = data.decode("utf-8")
        else:
            data.encode("utf-8")
            text = data
    except UnicodeError as e:
        return EncodingFailure(reason=getattr(e, "reason", str(e)), position=getattr(e, "start", None))

    # utf-16-le has no BOM, so every two bytes are exactly one code unit
    encoded = text.encode("utf-16-le")
    units = tuple(
        int.from_bytes(encoded[i : i + 2], "little") for i in range(0, len(encoded), 2)
    )
    return Utf16Units(units=units)


def percent_encode(data: Union[str, bytes]) -> str:
    """Percent-encode every byte outside the RFC 3986 unreserved set.

    Letters, digits and `-._~` are kept; everything else, including spaces,
    `&`, `=` and `+`, becomes `%XX` over the UTF-8 bytes.
    """
    return quote(data, safe="")
