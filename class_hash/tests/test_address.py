"""
Contract address derivation.

Properties:
- address is the chained hash of prefix, deployer, salt, class hash and the
  chained calldata hash, reduced below ADDR_BOUND
- structured and pre-flattened calldata agree
"""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from class_hash.address import (CONTRACT_ADDRESS_PREFIX_FELT,
                                calculate_contract_address_from_hash)
from class_hash.constants import ADDR_BOUND, FIELD_PRIME
from class_hash.felt import encode_short_string
from class_hash.sequence import chain_int, compute_hash_on_elements

CLASS_HASH = "0x2b31e19e45c06f29234e06e2ee98a9966479ba3067f8785ed972794fdb0065c"
felts = st.integers(min_value=0, max_value=FIELD_PRIME - 1)


def test_prefix_is_short_string():
    assert hex(CONTRACT_ADDRESS_PREFIX_FELT) == encode_short_string("STARKNET_CONTRACT_ADDRESS")


def test_address_composition():
    calldata = [1, "0x2"]
    expected = int(
        compute_hash_on_elements(
            [
                CONTRACT_ADDRESS_PREFIX_FELT,
                "0x5",
                "0x1",
                CLASS_HASH,
                compute_hash_on_elements([1, 2]),
            ]
        ),
        16,
    ) % ADDR_BOUND
    got = calculate_contract_address_from_hash("0x1", CLASS_HASH, calldata, "0x5")
    assert got == hex(expected)


def test_default_deployer_is_zero():
    assert calculate_contract_address_from_hash(7, CLASS_HASH, []) == (
        calculate_contract_address_from_hash(7, CLASS_HASH, [], 0)
    )
    assert calculate_contract_address_from_hash(7, CLASS_HASH, None) == (
        calculate_contract_address_from_hash(7, CLASS_HASH, [])
    )


def test_structured_and_flat_calldata_agree():
    structured = {"owner": "0x3", "supply": {"low": 1000, "high": 0}}
    flat = ["0x3", 1000, 0]
    assert calculate_contract_address_from_hash(1, CLASS_HASH, structured) == (
        calculate_contract_address_from_hash(1, CLASS_HASH, flat)
    )


def test_salt_changes_address():
    a = calculate_contract_address_from_hash(1, CLASS_HASH, [])
    b = calculate_contract_address_from_hash(2, CLASS_HASH, [])
    assert a != b


@settings(max_examples=20, deadline=None)
@given(salt=felts, class_hash=felts, deployer=felts, calldata=st.lists(felts, max_size=4))
def test_address_is_below_bound(salt, class_hash, deployer, calldata):
    address = calculate_contract_address_from_hash(salt, class_hash, calldata, deployer)
    assert address.startswith("0x")
    value = int(address, 16)
    assert 0 <= value < ADDR_BOUND
    raw = chain_int([CONTRACT_ADDRESS_PREFIX_FELT, deployer, salt, class_hash, chain_int(calldata)])
    assert value == raw % ADDR_BOUND
