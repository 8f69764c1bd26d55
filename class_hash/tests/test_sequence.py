"""
Chained (pedersen) and sponge (poseidon) reductions.

Properties:
- chain([]) == pedersen(0, 0)
- chain is the explicit left fold followed by the length element
- chain is order-sensitive; sponge separates lengths
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from class_hash.constants import FIELD_PRIME
from class_hash.crypto import compute_pedersen_hash
from class_hash.errors import FeltRangeError
from class_hash.sequence import (compute_hash_on_elements,
                                 compute_pedersen_hash_on_elements,
                                 compute_poseidon_hash_on_elements)
from class_hash.tests import PEDERSEN_ZERO

felts = st.integers(min_value=0, max_value=FIELD_PRIME - 1)


def test_chain_of_empty_sequence_is_pedersen_zero():
    assert compute_hash_on_elements([]) == compute_pedersen_hash(0, 0)
    assert compute_hash_on_elements([]) == PEDERSEN_ZERO


def test_chain_is_fold_plus_length():
    data = [1, "0x2", "3"]
    acc = "0x0"
    for x in data:
        acc = compute_pedersen_hash(acc, x)
    expected = compute_pedersen_hash(acc, len(data))
    assert compute_hash_on_elements(data) == expected


def test_pedersen_alias():
    assert compute_pedersen_hash_on_elements is compute_hash_on_elements


def test_chain_is_length_sensitive():
    # [0] folds to pedersen(pedersen(0, 0), 1), not pedersen(0, 0)
    assert compute_hash_on_elements([0]) != compute_hash_on_elements([])


@settings(max_examples=25, deadline=None)
@given(st.lists(felts, min_size=2, max_size=6, unique=True))
def test_chain_is_order_sensitive(data):
    rotated = data[1:] + data[:1]
    assert compute_hash_on_elements(data) != compute_hash_on_elements(rotated)


@settings(max_examples=25, deadline=None)
@given(felts)
def test_sponge_separates_lengths(x):
    assert compute_poseidon_hash_on_elements([x]) != compute_poseidon_hash_on_elements([x, x])


def test_reducers_reject_out_of_field_elements():
    with pytest.raises(FeltRangeError):
        compute_hash_on_elements([1, FIELD_PRIME])
    with pytest.raises(FeltRangeError):
        compute_poseidon_hash_on_elements([-1])
