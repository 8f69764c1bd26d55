"""
Canonical JSON text for hash inputs
===================================

The network hashes certain class fields as *text*. To agree with it we must
reproduce its serializer byte-for-byte:

1. Compact JSON (no whitespace), strings escaped as JSON with non-ASCII kept
   verbatim, object members in the order they were authored. Members are
   never sorted.
2. An optional replacer, called as ``replacer(key, value)`` for the root
   (key ``""``), every object member and every array element (key is the
   index as text). Returning ``OMIT`` drops an object member; an omitted
   array element is rendered as ``null``.
3. ``format_spaces``: one space after each ``:`` and ``,`` that sits outside
   a quoted string. A ``"`` directly preceded by a backslash does not toggle
   the quoted state.
4. UTF-8 bytes of the result go through ``starknet_keccak``.

Numbers: integer literals stay exact Python ints. Non-integer literals become
floats, and floats are written the way ``Number#toString`` writes them, so
``1.0`` and ``1e5`` hash as ``1`` and ``100000`` whether the class arrived as
text or as an already-parsed mapping.

Two rule sets are used by the hashers:

- ``legacy_replacer`` (hinted class hash over ``{abi, program}``):
  ``attributes`` and ``accessible_scopes`` are dropped when they are an empty
  list; ``debug_info`` is always ``null``; any other ``null`` member is dropped.
- pass-through (Sierra ABI hash): ``stringify(value)`` without a replacer.
"""

from __future__ import annotations

import json
import math
from decimal import Decimal
from typing import Any, Callable, List, Mapping, Optional

from ..crypto import starknet_keccak
from ..errors import CanonicalizationError


class _Omit:
    _instance: Optional["_Omit"] = None

    def __new__(cls) -> "_Omit":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "OMIT"

    def __bool__(self) -> bool:
        return False


OMIT = _Omit()

Replacer = Callable[[str, Any], Any]

# Wrapper members of the hinted class hash input, in hash order.
HINTED_HASH_FIELDS = ("abi", "program")

_FILTER_EMPTY_KEYS = ("attributes", "accessible_scopes")


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def parse(text: str | bytes) -> Any:
    """Parse JSON text; ints stay exact, other numbers become floats. Raises json.JSONDecodeError."""
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("utf-8")
    return json.loads(text)


# ---------------------------------------------------------------------------
# Replacers
# ---------------------------------------------------------------------------


def legacy_replacer(key: str, value: Any) -> Any:
    if key in _FILTER_EMPTY_KEYS:
        return OMIT if isinstance(value, (list, tuple)) and len(value) == 0 else value
    if key == "debug_info":
        return None
    return OMIT if value is None else value


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------


def _number(value: float) -> str:
    # Number#toString: shortest round-trip digits, exponent form outside [1e-7, 1e21).
    if not math.isfinite(value):
        return "null"
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    _, digit_tuple, exp = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = exp + k
    if k <= n <= 21:
        body = digits + "0" * (n - k)
    elif 0 < n <= 21:
        body = digits[:n] + "." + digits[n:]
    elif -6 < n <= 0:
        body = "0." + "0" * (-n) + digits
    else:
        e = n - 1
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        body = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
    return sign + body


def _encode(value: Any, replacer: Optional[Replacer], out: List[str], path: str) -> None:
    if value is None:
        out.append("null")
    elif isinstance(value, str):
        out.append(json.dumps(str.__str__(value), ensure_ascii=False))
    elif isinstance(value, bool):
        out.append("true" if value else "false")
    elif isinstance(value, int):
        out.append(int.__repr__(value))
    elif isinstance(value, float):
        out.append(_number(value))
    elif isinstance(value, Mapping):
        out.append("{")
        first = True
        for k, v in value.items():
            if not isinstance(k, str):
                raise CanonicalizationError(k, path=f"{path}.<key>")
            if replacer is not None:
                v = replacer(k, v)
                if v is OMIT:
                    continue
            if not first:
                out.append(",")
            first = False
            out.append(json.dumps(k, ensure_ascii=False))
            out.append(":")
            _encode(v, replacer, out, f"{path}.{k}")
        out.append("}")
    elif isinstance(value, (list, tuple)):
        out.append("[")
        for i, item in enumerate(value):
            if i:
                out.append(",")
            if replacer is not None:
                item = replacer(str(i), item)
                if item is OMIT:
                    out.append("null")
                    continue
            _encode(item, replacer, out, f"{path}[{i}]")
        out.append("]")
    else:
        raise CanonicalizationError(value, path=path or "$")


def stringify(value: Any, replacer: Optional[Replacer] = None) -> str:
    """Compact JSON text of `value` in authored member order."""
    if replacer is not None:
        value = replacer("", value)
        if value is OMIT:
            return ""
    out: List[str] = []
    _encode(value, replacer, out, "")
    return "".join(out)


def format_spaces(text: str) -> str:
    """Insert one space after each ':' and ',' outside quoted strings."""
    inside_quotes = False
    out: List[str] = []
    prev = ""
    for ch in text:
        if ch == '"' and prev != "\\":
            inside_quotes = not inside_quotes
        if inside_quotes:
            out.append(ch)
        elif ch == ":":
            out.append(": ")
        elif ch == ",":
            out.append(", ")
        else:
            out.append(ch)
        prev = ch
    return "".join(out)


def hash_text(text: str) -> int:
    """starknet_keccak over the UTF-8 bytes of `text`."""
    return starknet_keccak(text.encode("utf-8"))


def hinted_input_text(abi: Any, program: Any) -> str:
    """Canonical text hashed by the legacy hinted class hash."""
    values = {"abi": abi, "program": program}
    wrapper = {name: values[name] for name in HINTED_HASH_FIELDS}
    return format_spaces(stringify(wrapper, legacy_replacer))


def abi_text(abi: Any) -> str:
    """Canonical text hashed as the Sierra ABI hash (no filtering)."""
    return format_spaces(stringify(abi))


__all__ = [
    "OMIT",
    "HINTED_HASH_FIELDS",
    "parse",
    "legacy_replacer",
    "stringify",
    "format_spaces",
    "hash_text",
    "hinted_input_text",
    "abi_text",
]
