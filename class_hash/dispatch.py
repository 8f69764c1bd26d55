"""
Route a contract class to its hasher.

The variant is decided once by `decode_contract_class` (Sierra when
``sierra_program`` is present, legacy otherwise). A legacy-shaped input that
lacks legacy fields fails with ClassDecodeError; there is no fallback hash.
"""

from __future__ import annotations

import logging
from typing import Any

from .legacy import compute_legacy_contract_class_hash
from .sierra import compute_sierra_contract_class_hash
from .types import (ContractClass, LegacyContractClass, SierraContractClass,
                    decode_contract_class)

log = logging.getLogger(__name__)


def class_kind(cls: ContractClass) -> str:
    return "sierra" if isinstance(cls, SierraContractClass) else "legacy"


def compute_class_hash(cls: ContractClass) -> str:
    if isinstance(cls, SierraContractClass):
        return compute_sierra_contract_class_hash(cls)
    if isinstance(cls, LegacyContractClass):
        return compute_legacy_contract_class_hash(cls)
    raise TypeError(f"not a decoded contract class: {type(cls).__name__}")


def compute_contract_class_hash(contract: Any) -> str:
    """Class hash of a legacy or Sierra class given as a mapping or JSON text."""
    cls = decode_contract_class(contract)
    result = compute_class_hash(cls)
    log.debug("class hash dispatched", extra={"kind": class_kind(cls), "class_hash": result})
    return result


__all__ = ["class_kind", "compute_class_hash", "compute_contract_class_hash"]
