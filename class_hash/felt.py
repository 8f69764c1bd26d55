"""
class_hash.felt
===============

Field elements and short strings.

- `FieldElement`: an `int` bounded to [0, FIELD_PRIME), built once at every
  ingestion point. Accepts ints, bools, `0x`-hex text and decimal text.
- `to_hex`: canonical boundary form, `0x` + lowercase hex, no zero padding.
- Short strings: up to 31 ASCII bytes packed big-endian into one element.

>>> to_hex(FieldElement("0x0AB"))
'0xab'
>>> encode_short_string("hello")
'0x68656c6c6f'
>>> decode_short_string("0x68656c6c6f")
'hello'
"""

from __future__ import annotations

import re
from typing import Any, Union

from .constants import FIELD_PRIME, SHORT_STRING_MAX_LEN
from .errors import FeltDecodeError, FeltRangeError, ShortStringError

BigNumberish = Union[int, str]

_HEX_RE = re.compile(r"^0[xX][0-9a-fA-F]+$")
_DEC_RE = re.compile(r"^-?[0-9]+$")


def is_hex_string(s: str) -> bool:
    return bool(_HEX_RE.match(s))


def is_decimal_string(s: str) -> bool:
    return bool(_DEC_RE.match(s))


def to_int(value: Any) -> int:
    """Read an int from int/bool/hex text/decimal text without range checks."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return int(value)
    if isinstance(value, str):
        s = value.strip()
        if is_hex_string(s):
            return int(s, 16)
        if is_decimal_string(s):
            return int(s, 10)
    raise FeltDecodeError(value)


class FieldElement(int):
    """Integer in [0, FIELD_PRIME). Arithmetic on it yields plain ints."""

    def __new__(cls, value: Any) -> "FieldElement":
        if isinstance(value, FieldElement):
            return value
        v = to_int(value)
        if not 0 <= v < FIELD_PRIME:
            raise FeltRangeError(v)
        return super().__new__(cls, v)

    def to_hex(self) -> str:
        return hex(self)

    def __repr__(self) -> str:
        return f"FieldElement({hex(self)})"

    __str__ = to_hex


def to_hex(value: Any) -> str:
    """Canonical `0x` lowercase hex of a field element (range-checked)."""
    return hex(FieldElement(value))


# ---------------------------------------------------------------------------
# Short strings
# ---------------------------------------------------------------------------


def is_ascii(text: str) -> bool:
    return all(ord(c) < 128 for c in text)


def is_short_string(text: str) -> bool:
    return len(text) <= SHORT_STRING_MAX_LEN


def encode_short_string(text: str) -> str:
    """Pack an ASCII string of at most 31 bytes big-endian; returns hex."""
    if not is_ascii(text):
        raise ShortStringError(text, "not ASCII")
    if not is_short_string(text):
        raise ShortStringError(text, f"longer than {SHORT_STRING_MAX_LEN} characters")
    return hex(int.from_bytes(text.encode("ascii"), "big"))


def decode_short_string(value: BigNumberish) -> str:
    """Inverse of encode_short_string; leading zero bytes are dropped."""
    n = FieldElement(value)
    raw = n.to_bytes(32, "big").lstrip(b"\x00")
    if len(raw) > SHORT_STRING_MAX_LEN:
        raise ShortStringError(hex(n), f"longer than {SHORT_STRING_MAX_LEN} bytes")
    try:
        return raw.decode("ascii")
    except UnicodeDecodeError as e:
        raise ShortStringError(hex(n), "not ASCII") from e


__all__ = [
    "BigNumberish",
    "FieldElement",
    "to_int",
    "to_hex",
    "is_hex_string",
    "is_decimal_string",
    "is_ascii",
    "is_short_string",
    "encode_short_string",
    "decode_short_string",
]
