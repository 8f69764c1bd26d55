"""
Network-fixed constants consumed by the hashers.

Every value here is part of the consensus hash contract; changing any of them
produces hashes the network will not recognize.
"""

from __future__ import annotations

# Prime of the field all elements live in: 2^251 + 17 * 2^192 + 1
FIELD_PRIME: int = 2**251 + 17 * 2**192 + 1

# Contract addresses are reduced below this bound.
ADDR_BOUND: int = 2**251 - 256

# Text digests (keccak) keep only the low 250 bits.
MASK_250: int = 2**250 - 1

# Legacy (Cairo 0) class hash API version.
API_VERSION: int = 0

COMPILED_CLASS_VERSION: str = "COMPILED_CLASS_V1"
CONTRACT_CLASS_VERSION: str = "CONTRACT_CLASS_V0.1.0"

CONTRACT_ADDRESS_PREFIX: str = "STARKNET_CONTRACT_ADDRESS"

SHORT_STRING_MAX_LEN: int = 31


__all__ = [
    "FIELD_PRIME",
    "ADDR_BOUND",
    "MASK_250",
    "API_VERSION",
    "COMPILED_CLASS_VERSION",
    "CONTRACT_CLASS_VERSION",
    "CONTRACT_ADDRESS_PREFIX",
    "SHORT_STRING_MAX_LEN",
]
