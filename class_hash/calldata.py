"""
Flatten structured constructor arguments into field elements.

Rules (applied recursively, in order):
- FieldElement / int      -> one element
- bool                    -> 1 or 0
- numeric text (hex/dec)  -> one element
- other text              -> one short-string element
- list / tuple            -> length, then each item flattened
- mapping                 -> each value flattened, in insertion order
  (a ``{"low": .., "high": ..}`` u256 therefore yields low, high)

>>> [hex(x) for x in compile_calldata([1, "0x2", "ab", [3, 4]])]
['0x1', '0x2', '0x6162', '0x2', '0x3', '0x4']
"""

from __future__ import annotations

from typing import Any, List, Mapping

from .errors import CalldataError
from .felt import FieldElement, encode_short_string, is_decimal_string, is_hex_string

RawArgs = Any


def _flatten(value: Any, out: List[FieldElement], path: str) -> None:
    if isinstance(value, float):
        raise CalldataError("calldata numbers must be integers", path=path or "$", value=str(value))
    if isinstance(value, (bool, int)):
        out.append(FieldElement(value))
    elif isinstance(value, str):
        s = value.strip()
        if is_hex_string(s) or is_decimal_string(s):
            out.append(FieldElement(s))
        else:
            out.append(FieldElement(encode_short_string(value)))
    elif isinstance(value, Mapping):
        for k, v in value.items():
            _flatten(v, out, f"{path}.{k}")
    elif isinstance(value, (list, tuple)):
        out.append(FieldElement(len(value)))
        for i, item in enumerate(value):
            _flatten(item, out, f"{path}[{i}]")
    else:
        raise CalldataError(
            f"unsupported calldata value of type {type(value).__name__}", path=path or "$"
        )


def compile_calldata(args: RawArgs) -> List[FieldElement]:
    """
    Compile constructor arguments into an ordered list of field elements.

    A top-level list is the *argument list* and is not length-prefixed; a
    top-level mapping contributes its values in order.
    """
    if args is None:
        return []
    out: List[FieldElement] = []
    if isinstance(args, Mapping):
        _flatten(args, out, "")
    elif isinstance(args, (list, tuple)):
        for i, item in enumerate(args):
            _flatten(item, out, f"[{i}]")
    else:
        _flatten(args, out, "")
    return out


__all__ = ["RawArgs", "compile_calldata"]
