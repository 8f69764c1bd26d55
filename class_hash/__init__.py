"""
class_hash: contract class hashes and deployment addresses.

Computes, offline and deterministically, the values a field-element chain
recomputes when a contract class is declared or deployed:

- legacy (Cairo 0) class hash and its hinted class hash
- Sierra contract class hash and compiled (CASM) class hash
- contract addresses from (deployer, salt, class hash, constructor calldata)

Public surface:
- compute_contract_class_hash(contract)          legacy or Sierra, parsed or text
- compute_legacy_contract_class_hash(contract)
- compute_hinted_class_hash(contract)
- compute_sierra_contract_class_hash(sierra)
- compute_compiled_class_hash(casm)
- calculate_contract_address_from_hash(salt, class_hash, calldata, deployer)
- compute_hash_on_elements / compute_poseidon_hash_on_elements
- compute_pedersen_hash / compute_poseidon_hash
"""

from .address import calculate_contract_address_from_hash
from .crypto import (compute_pedersen_hash, compute_poseidon_hash,
                     get_selector_from_name, starknet_keccak)
from .dispatch import compute_contract_class_hash
from .felt import FieldElement, decode_short_string, encode_short_string
from .legacy import (compute_hinted_class_hash,
                     compute_legacy_contract_class_hash)
from .sequence import (compute_hash_on_elements,
                       compute_pedersen_hash_on_elements,
                       compute_poseidon_hash_on_elements)
from .sierra import (compute_compiled_class_hash,
                     compute_sierra_contract_class_hash)
from .version import __version__

__all__ = [
    "__version__",
    "FieldElement",
    "encode_short_string",
    "decode_short_string",
    "compute_pedersen_hash",
    "compute_poseidon_hash",
    "starknet_keccak",
    "get_selector_from_name",
    "compute_hash_on_elements",
    "compute_pedersen_hash_on_elements",
    "compute_poseidon_hash_on_elements",
    "compute_hinted_class_hash",
    "compute_legacy_contract_class_hash",
    "compute_sierra_contract_class_hash",
    "compute_compiled_class_hash",
    "compute_contract_class_hash",
    "calculate_contract_address_from_hash",
]
