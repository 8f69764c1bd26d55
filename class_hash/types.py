"""
class_hash.types
================

Decoded contract-class model.

Three class shapes are understood:

- **LegacyContractClass** (Cairo 0): ``{abi, program:{builtins, data, ...},
  entry_points_by_type}``. ``abi`` and ``program`` are also kept *raw*, in
  authored key order, because the hinted class hash serializes them as text.
- **SierraContractClass** (next-gen declare): ``{sierra_program,
  entry_points_by_type, abi, contract_class_version}``.
- **CompiledClass** (CASM, next-gen compiled program): ``{bytecode,
  entry_points_by_type, ...}``.

``decode_contract_class`` decides Legacy vs Sierra exactly once, from the
presence of ``sierra_program``. Everything downstream dispatches on the
Python type, never on the raw mapping again.

Entry-point tables keep caller order; that order is hashed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Mapping, Optional, Tuple, TypeVar, Union

from .encoding.canonical import parse
from .errors import ClassDecodeError, FeltDecodeError, decode_guard
from .felt import FieldElement


class EntryPointType(str, Enum):
    EXTERNAL = "EXTERNAL"
    L1_HANDLER = "L1_HANDLER"
    CONSTRUCTOR = "CONSTRUCTOR"


# Hash order of the per-kind tables.
ENTRY_POINT_ORDER: Tuple[EntryPointType, ...] = (
    EntryPointType.EXTERNAL,
    EntryPointType.L1_HANDLER,
    EntryPointType.CONSTRUCTOR,
)

SIERRA_PROGRAM_FIELD = "sierra_program"


# ---- helpers ----

def _require(o: Mapping[str, Any], key: str, path: str) -> Any:
    decode_guard(isinstance(o, Mapping), msg="expected an object", path=path)
    decode_guard(key in o, msg=f"missing field {key!r}", path=path)
    return o[key]


def _felt(value: Any, path: str) -> FieldElement:
    # Range violations propagate as FeltRangeError; only shape errors become decode errors.
    try:
        return FieldElement(value)
    except FeltDecodeError as e:
        raise ClassDecodeError("invalid field element", path=path, cause=e) from e


def _felts(values: Any, path: str) -> Tuple[FieldElement, ...]:
    decode_guard(isinstance(values, (list, tuple)), msg="expected an array", path=path)
    return tuple(_felt(v, f"{path}[{i}]") for i, v in enumerate(values))


def _names(values: Any, path: str) -> Tuple[str, ...]:
    decode_guard(isinstance(values, (list, tuple)), msg="expected an array", path=path)
    for i, v in enumerate(values):
        decode_guard(isinstance(v, str), msg="expected a string", path=f"{path}[{i}]")
    return tuple(values)


E = TypeVar("E")


# ---- entry points ----

@dataclass(frozen=True)
class LegacyEntryPoint:
    selector: FieldElement
    offset: FieldElement

    @staticmethod
    def from_obj(o: Mapping[str, Any], path: str = "entry_point") -> "LegacyEntryPoint":
        return LegacyEntryPoint(
            selector=_felt(_require(o, "selector", path), f"{path}.selector"),
            offset=_felt(_require(o, "offset", path), f"{path}.offset"),
        )

    def flatten(self) -> List[int]:
        return [self.selector, self.offset]


@dataclass(frozen=True)
class CompiledEntryPoint:
    selector: FieldElement
    offset: FieldElement
    builtins: Tuple[str, ...] = field(default_factory=tuple)

    @staticmethod
    def from_obj(o: Mapping[str, Any], path: str = "entry_point") -> "CompiledEntryPoint":
        return CompiledEntryPoint(
            selector=_felt(_require(o, "selector", path), f"{path}.selector"),
            offset=_felt(_require(o, "offset", path), f"{path}.offset"),
            builtins=_names(_require(o, "builtins", path), f"{path}.builtins"),
        )


@dataclass(frozen=True)
class SierraEntryPoint:
    selector: FieldElement
    function_idx: FieldElement

    @staticmethod
    def from_obj(o: Mapping[str, Any], path: str = "entry_point") -> "SierraEntryPoint":
        return SierraEntryPoint(
            selector=_felt(_require(o, "selector", path), f"{path}.selector"),
            function_idx=_felt(_require(o, "function_idx", path), f"{path}.function_idx"),
        )

    def flatten(self) -> List[int]:
        return [self.selector, self.function_idx]


@dataclass(frozen=True)
class EntryPointsByType:
    external: Tuple[Any, ...] = ()
    l1_handler: Tuple[Any, ...] = ()
    constructor: Tuple[Any, ...] = ()

    def get(self, kind: EntryPointType) -> Tuple[Any, ...]:
        return {
            EntryPointType.EXTERNAL: self.external,
            EntryPointType.L1_HANDLER: self.l1_handler,
            EntryPointType.CONSTRUCTOR: self.constructor,
        }[kind]

    def in_hash_order(self) -> Tuple[Tuple[Any, ...], ...]:
        return tuple(self.get(k) for k in ENTRY_POINT_ORDER)

    @staticmethod
    def from_obj(
        o: Mapping[str, Any],
        decode: Callable[[Mapping[str, Any], str], E],
        path: str = "entry_points_by_type",
    ) -> "EntryPointsByType":
        decode_guard(isinstance(o, Mapping), msg="expected an object", path=path)
        tables = []
        for kind in ENTRY_POINT_ORDER:
            sub = f"{path}.{kind.value}"
            raw = _require(o, kind.value, path)
            decode_guard(isinstance(raw, (list, tuple)), msg="expected an array", path=sub)
            tables.append(tuple(decode(ep, f"{sub}[{i}]") for i, ep in enumerate(raw)))
        return EntryPointsByType(*tables)


# ---- classes ----

@dataclass(frozen=True)
class LegacyContractClass:
    abi: Any
    program: Mapping[str, Any]
    entry_points_by_type: EntryPointsByType
    builtins: Tuple[str, ...]
    data: Tuple[FieldElement, ...]

    @staticmethod
    def from_obj(o: Mapping[str, Any]) -> "LegacyContractClass":
        program = _require(o, "program", "$")
        decode_guard(isinstance(program, Mapping), msg="expected an object", path="program")
        return LegacyContractClass(
            abi=o.get("abi"),
            program=program,
            entry_points_by_type=EntryPointsByType.from_obj(
                _require(o, "entry_points_by_type", "$"), LegacyEntryPoint.from_obj
            ),
            builtins=_names(_require(program, "builtins", "program"), "program.builtins"),
            data=_felts(_require(program, "data", "program"), "program.data"),
        )


@dataclass(frozen=True)
class SierraContractClass:
    sierra_program: Tuple[FieldElement, ...]
    entry_points_by_type: EntryPointsByType
    abi: Any
    contract_class_version: Optional[str] = None

    @staticmethod
    def from_obj(o: Mapping[str, Any]) -> "SierraContractClass":
        return SierraContractClass(
            sierra_program=_felts(_require(o, SIERRA_PROGRAM_FIELD, "$"), SIERRA_PROGRAM_FIELD),
            entry_points_by_type=EntryPointsByType.from_obj(
                _require(o, "entry_points_by_type", "$"), SierraEntryPoint.from_obj
            ),
            abi=_require(o, "abi", "$"),
            contract_class_version=o.get("contract_class_version"),
        )


@dataclass(frozen=True)
class CompiledClass:
    bytecode: Tuple[FieldElement, ...]
    entry_points_by_type: EntryPointsByType
    prime: Optional[str] = None
    compiler_version: Optional[str] = None

    @staticmethod
    def from_obj(o: Mapping[str, Any]) -> "CompiledClass":
        return CompiledClass(
            bytecode=_felts(_require(o, "bytecode", "$"), "bytecode"),
            entry_points_by_type=EntryPointsByType.from_obj(
                _require(o, "entry_points_by_type", "$"), CompiledEntryPoint.from_obj
            ),
            prime=o.get("prime"),
            compiler_version=o.get("compiler_version"),
        )


ContractClass = Union[LegacyContractClass, SierraContractClass]


def load_obj(contract: Any) -> Mapping[str, Any]:
    """Accept raw text (parsed here) or an already-parsed mapping."""
    if isinstance(contract, (str, bytes, bytearray)):
        contract = parse(contract)
    if not isinstance(contract, Mapping):
        raise ClassDecodeError("contract class must be a JSON object", path="$")
    return contract


def decode_contract_class(contract: Any) -> ContractClass:
    """Decide the class variant once and decode it."""
    if isinstance(contract, (LegacyContractClass, SierraContractClass)):
        return contract
    obj = load_obj(contract)
    if SIERRA_PROGRAM_FIELD in obj:
        return SierraContractClass.from_obj(obj)
    return LegacyContractClass.from_obj(obj)


def decode_compiled_class(casm: Any) -> CompiledClass:
    if isinstance(casm, CompiledClass):
        return casm
    return CompiledClass.from_obj(load_obj(casm))


__all__ = [
    "EntryPointType",
    "ENTRY_POINT_ORDER",
    "LegacyEntryPoint",
    "CompiledEntryPoint",
    "SierraEntryPoint",
    "EntryPointsByType",
    "LegacyContractClass",
    "SierraContractClass",
    "CompiledClass",
    "ContractClass",
    "load_obj",
    "decode_contract_class",
    "decode_compiled_class",
]
