"""
class_hash.sierra
=================

Next-generation (Cairo 1) hashes. Both schemas are poseidon sponges over a
versioned vector.

Compiled class (CASM)::

    sponge(
        short("COMPILED_CLASS_V1"),
        sponge(flat [selector, offset, sponge(short(b) for b in builtins)] of EXTERNAL),
        ... L1_HANDLER,
        ... CONSTRUCTOR,
        sponge(bytecode),
    )

Contract class (Sierra, declare)::

    sponge(
        short("CONTRACT_CLASS_V0.1.0"),
        sponge(flat [selector, function_idx] of EXTERNAL),
        ... L1_HANDLER,
        ... CONSTRUCTOR,
        keccak250(format_spaces(stringify(abi))),
        sponge(sierra_program),
    )

Builtins are not part of the Sierra entry points; they only exist once the
program is compiled.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List

from .constants import COMPILED_CLASS_VERSION, CONTRACT_CLASS_VERSION
from .crypto import poseidon_many_int
from .encoding.canonical import abi_text, hash_text
from .felt import encode_short_string
from .types import (CompiledClass, CompiledEntryPoint, SierraContractClass,
                    SierraEntryPoint, decode_compiled_class, load_obj)

log = logging.getLogger(__name__)


def _version(literal: str) -> int:
    return int(encode_short_string(literal), 16)


def hash_builtins(builtins: Iterable[str]) -> int:
    return poseidon_many_int(int(encode_short_string(b), 16) for b in builtins)


def _compiled_entry_points_hash(table: "tuple[CompiledEntryPoint, ...]") -> int:
    flat: List[int] = []
    for ep in table:
        flat.extend((ep.selector, ep.offset, hash_builtins(ep.builtins)))
    return poseidon_many_int(flat)


def _sierra_entry_points_hash(table: "tuple[SierraEntryPoint, ...]") -> int:
    flat: List[int] = []
    for ep in table:
        flat.extend(ep.flatten())
    return poseidon_many_int(flat)


def compute_abi_hash(abi: Any) -> int:
    """keccak-250 of the pass-through canonical text of `abi`."""
    return hash_text(abi_text(abi))


def compute_compiled_class_hash(casm: Any) -> str:
    """Compiled (CASM) class hash. Accepts a decoded class, a mapping or JSON text."""
    cls: CompiledClass = decode_compiled_class(casm)
    external, l1_handler, constructor = cls.entry_points_by_type.in_hash_order()

    result = hex(
        poseidon_many_int(
            [
                _version(COMPILED_CLASS_VERSION),
                _compiled_entry_points_hash(external),
                _compiled_entry_points_hash(l1_handler),
                _compiled_entry_points_hash(constructor),
                poseidon_many_int(cls.bytecode),
            ]
        )
    )
    log.debug(
        "compiled class hash computed",
        extra={"compiled_class_hash": result, "bytecode_len": len(cls.bytecode)},
    )
    return result


def compute_sierra_contract_class_hash(sierra: Any) -> str:
    """Sierra contract class hash. Accepts a decoded class, a mapping or JSON text."""
    if isinstance(sierra, SierraContractClass):
        cls = sierra
    else:
        cls = SierraContractClass.from_obj(load_obj(sierra))
    external, l1_handler, constructor = cls.entry_points_by_type.in_hash_order()

    result = hex(
        poseidon_many_int(
            [
                _version(CONTRACT_CLASS_VERSION),
                _sierra_entry_points_hash(external),
                _sierra_entry_points_hash(l1_handler),
                _sierra_entry_points_hash(constructor),
                compute_abi_hash(cls.abi),
                poseidon_many_int(cls.sierra_program),
            ]
        )
    )
    log.debug(
        "sierra class hash computed",
        extra={"class_hash": result, "program_len": len(cls.sierra_program)},
    )
    return result


__all__ = [
    "hash_builtins",
    "compute_abi_hash",
    "compute_compiled_class_hash",
    "compute_sierra_contract_class_hash",
]
