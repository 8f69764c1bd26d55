"""
Typed exceptions for class-hash computation.

Design goals
- Structured: machine-readable code + human message + contextual fields.
- Permanent: every failure is an input error; nothing here is retryable.
- Composable: wrap lower-level exceptions with preserved causes.

The specific subtypes exported here are:
  - ClassHashError (base)
  - FeltDecodeError / FeltRangeError
  - ShortStringError
  - ClassDecodeError
  - CanonicalizationError
  - CalldataError
  - ConfigError

Malformed JSON text is *not* wrapped: `json.JSONDecodeError` propagates as-is
from the parser.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional


class ErrorCode(str, Enum):
    """Canonical error codes."""

    UNKNOWN = "UNKNOWN"

    FELT_DECODE = "FELT_DECODE"  # value cannot be read as an integer
    FELT_RANGE = "FELT_RANGE"  # value outside [0, FIELD_PRIME)
    SHORT_STRING = "SHORT_STRING"  # non-ASCII or longer than 31 bytes
    CLASS_DECODE = "CLASS_DECODE"  # missing / malformed contract class fields
    CANONICALIZATION = "CANONICALIZATION"  # value has no JSON representation
    CALLDATA = "CALLDATA"  # constructor argument cannot be compiled
    CONFIG = "CONFIG"  # invalid configuration value


@dataclass(eq=False)
class ClassHashError(Exception):
    """
    Base structured error.

    Fields:
      code:  stable machine code (ErrorCode | str)
      msg:   human-readable summary
      ctx:   small dict of contextual fields (paths, values, lengths)
      cause: optional underlying exception (not serialized)
    """

    code: ErrorCode | str = ErrorCode.UNKNOWN
    msg: str = "class hash error"
    ctx: Dict[str, Any] = field(default_factory=dict)
    cause: Optional[BaseException] = None

    def __post_init__(self) -> None:
        if not isinstance(self.ctx, dict):
            self.ctx = {"repr": repr(self.ctx)}
        Exception.__init__(self, self.msg)

    def __str__(self) -> str:
        code = self.code.value if isinstance(self.code, ErrorCode) else self.code
        parts = [f"[{code}] {self.msg}"]
        if self.ctx:
            parts.append(f"ctx={self.ctx}")
        if self.cause:
            parts.append(f"cause={self.cause!r}")
        return " ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        code = self.code.value if isinstance(self.code, ErrorCode) else str(self.code)
        return {"code": code, "msg": self.msg, "ctx": self.ctx}


def _ctx(base: Dict[str, Any], extra: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    if extra:
        base.update(extra)
    return base


class FeltDecodeError(ClassHashError):
    """A value could not be interpreted as an integer."""

    def __init__(self, value: Any, *, ctx: Optional[Mapping[str, Any]] = None) -> None:
        super().__init__(
            code=ErrorCode.FELT_DECODE,
            msg="value is not an integer, hex or decimal string",
            ctx=_ctx({"value": repr(value)[:80], "type": type(value).__name__}, ctx),
        )


class FeltRangeError(ClassHashError):
    """A value lies outside the field [0, FIELD_PRIME)."""

    def __init__(self, value: int, *, ctx: Optional[Mapping[str, Any]] = None) -> None:
        super().__init__(
            code=ErrorCode.FELT_RANGE,
            msg="value is not a valid field element",
            ctx=_ctx({"value": hex(value)}, ctx),
        )


class ShortStringError(ClassHashError):
    def __init__(self, text: str, reason: str) -> None:
        super().__init__(
            code=ErrorCode.SHORT_STRING,
            msg=f"cannot encode short string: {reason}",
            ctx={"text": text[:64], "length": len(text)},
        )


class ClassDecodeError(ClassHashError):
    """Missing or structurally invalid contract class fields."""

    def __init__(
        self,
        msg: str = "invalid contract class",
        *,
        path: Optional[str] = None,
        ctx: Optional[Mapping[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        base: Dict[str, Any] = {}
        if path is not None:
            base["path"] = path
        super().__init__(code=ErrorCode.CLASS_DECODE, msg=msg, ctx=_ctx(base, ctx), cause=cause)


class CanonicalizationError(ClassHashError):
    def __init__(self, value: Any, *, path: str = "") -> None:
        super().__init__(
            code=ErrorCode.CANONICALIZATION,
            msg=f"value of type {type(value).__name__} has no JSON representation",
            ctx={"path": path},
        )


class CalldataError(ClassHashError):
    def __init__(self, msg: str, **ctx: Any) -> None:
        super().__init__(code=ErrorCode.CALLDATA, msg=msg, ctx=dict(ctx))


class ConfigError(ClassHashError):
    def __init__(self, msg: str = "invalid configuration", **ctx: Any) -> None:
        super().__init__(code=ErrorCode.CONFIG, msg=msg, ctx=dict(ctx))


# Handy guard helpers ---------------------------------------------------------


def decode_guard(ok: bool, *, msg: str, path: Optional[str] = None, **ctx: Any) -> None:
    """Raise ClassDecodeError at `path` if ok is False."""
    if not ok:
        raise ClassDecodeError(msg, path=path, ctx=ctx)


__all__ = [
    "ErrorCode",
    "ClassHashError",
    "FeltDecodeError",
    "FeltRangeError",
    "ShortStringError",
    "ClassDecodeError",
    "CanonicalizationError",
    "CalldataError",
    "ConfigError",
    "decode_guard",
]
