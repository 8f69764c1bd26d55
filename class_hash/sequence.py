"""
Multi-element reductions reused by every class-hash schema.

compute_hash_on_elements
    Chained pairwise hash A: acc = 0; acc = H(acc, x) for each x; then
    acc = H(acc, len). Order- and length-sensitive.

compute_poseidon_hash_on_elements
    One sponge call over the whole sequence; the sponge distinguishes
    lengths internally, so nothing is appended.
"""

from __future__ import annotations

from typing import Sequence

from .crypto import pedersen_int, poseidon_hash_many
from .felt import BigNumberish, FieldElement


def chain_int(data: Sequence[BigNumberish]) -> int:
    acc = 0
    for x in data:
        acc = pedersen_int(acc, FieldElement(x))
    return pedersen_int(acc, len(data))


def compute_hash_on_elements(data: Sequence[BigNumberish]) -> str:
    """Chained pedersen hash of `data` with trailing length, as hex."""
    return hex(chain_int(data))


compute_pedersen_hash_on_elements = compute_hash_on_elements


def compute_poseidon_hash_on_elements(data: Sequence[BigNumberish]) -> str:
    """Sponge (poseidon) hash of `data`, as hex."""
    return hex(poseidon_hash_many(data))


__all__ = [
    "chain_int",
    "compute_hash_on_elements",
    "compute_pedersen_hash_on_elements",
    "compute_poseidon_hash_on_elements",
]
