"""
class_hash.address: deterministic contract addresses

    address = chain(
        short("STARKNET_CONTRACT_ADDRESS"),
        deployer_address,
        salt,
        class_hash,
        chain(compile_calldata(constructor_calldata)),
    ) mod ADDR_BOUND

``chain`` is `compute_hash_on_elements`. The result is always below
ADDR_BOUND and returned as hex.
"""

from __future__ import annotations

import logging
from typing import Optional

from .calldata import RawArgs, compile_calldata
from .constants import ADDR_BOUND, CONTRACT_ADDRESS_PREFIX
from .felt import BigNumberish, FieldElement, encode_short_string
from .sequence import chain_int

log = logging.getLogger(__name__)

CONTRACT_ADDRESS_PREFIX_FELT = FieldElement(encode_short_string(CONTRACT_ADDRESS_PREFIX))


def calculate_contract_address_from_hash(
    salt: BigNumberish,
    class_hash: BigNumberish,
    constructor_calldata: Optional[RawArgs],
    deployer_address: BigNumberish = 0,
) -> str:
    """Address a class will be deployed at, as hex."""
    compiled = compile_calldata(constructor_calldata)
    calldata_hash = chain_int(compiled)

    h = chain_int(
        [
            CONTRACT_ADDRESS_PREFIX_FELT,
            FieldElement(deployer_address),
            FieldElement(salt),
            FieldElement(class_hash),
            calldata_hash,
        ]
    )
    address = hex(h % ADDR_BOUND)
    log.debug(
        "contract address derived",
        extra={"address": address, "calldata_len": len(compiled)},
    )
    return address


__all__ = ["CONTRACT_ADDRESS_PREFIX_FELT", "calculate_contract_address_from_hash"]
