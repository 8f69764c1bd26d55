"""
class_hash.legacy
=================

Class hash of legacy (Cairo 0) compiled contracts.

    class_hash = chain(
        API_VERSION,
        chain(flat [selector, offset] of EXTERNAL),
        chain(flat [selector, offset] of L1_HANDLER),
        chain(flat [selector, offset] of CONSTRUCTOR),
        chain(short_string(b) for b in program.builtins),
        hinted_class_hash({abi, program}),
        chain(program.data),
    )

where ``chain`` is `compute_hash_on_elements` (so the seven values are
followed by an implicit length element). The hinted class hash is the
250-bit keccak of the canonical text produced by
`class_hash.encoding.hinted_input_text`.
"""

from __future__ import annotations

import logging
from typing import Any, List

from .constants import API_VERSION
from .encoding.canonical import hash_text, hinted_input_text
from .felt import encode_short_string
from .sequence import chain_int
from .types import LegacyContractClass, LegacyEntryPoint, load_obj

log = logging.getLogger(__name__)


def _as_legacy(contract: Any) -> LegacyContractClass:
    if isinstance(contract, LegacyContractClass):
        return contract
    return LegacyContractClass.from_obj(load_obj(contract))


def _entry_points_hash(table: "tuple[LegacyEntryPoint, ...]") -> int:
    flat: List[int] = []
    for ep in table:
        flat.extend(ep.flatten())
    return chain_int(flat)


def _hinted_int(contract: LegacyContractClass) -> int:
    return hash_text(hinted_input_text(contract.abi, contract.program))


def compute_hinted_class_hash(contract: Any) -> str:
    """
    Hinted class hash of a legacy class: keccak-250 of the canonical
    ``{abi, program}`` text. Accepts a decoded class, a mapping or JSON text.
    """
    return hex(_hinted_int(_as_legacy(contract)))


def compute_legacy_contract_class_hash(contract: Any) -> str:
    """Class hash of a legacy compiled contract. Returns hex."""
    cls = _as_legacy(contract)
    external, l1_handler, constructor = cls.entry_points_by_type.in_hash_order()

    parts = [
        API_VERSION,
        _entry_points_hash(external),
        _entry_points_hash(l1_handler),
        _entry_points_hash(constructor),
        chain_int([encode_short_string(b) for b in cls.builtins]),
        _hinted_int(cls),
        chain_int(cls.data),
    ]
    result = hex(chain_int(parts))
    log.debug(
        "legacy class hash computed",
        extra={
            "class_hash": result,
            "entry_points": len(external) + len(l1_handler) + len(constructor),
            "data_len": len(cls.data),
        },
    )
    return result


__all__ = ["compute_hinted_class_hash", "compute_legacy_contract_class_hash"]
