"""
class_hash.crypto
=================

Thin normalization over the network's one-way primitives:

- compute_pedersen_hash(a, b)   pairwise hash A   (crypto-cpp-py)
- compute_poseidon_hash(a, b)   pairwise hash B   (poseidon-py)
- poseidon_hash_many(values)    sponge over a sequence (poseidon-py)
- starknet_keccak(data)         keccak-256 masked to 250 bits (pycryptodome)

Inputs go through `FieldElement`, so anything outside the field is rejected
before it reaches a primitive. Pairwise results are canonical hex text.
"""

from __future__ import annotations

from typing import Iterable, List

from Crypto.Hash import keccak as _keccak
from crypto_cpp_py.cpp_bindings import cpp_hash as _pedersen
from poseidon_py.poseidon_hash import poseidon_hash as _poseidon
from poseidon_py.poseidon_hash import poseidon_hash_many as _poseidon_many

from .constants import MASK_250
from .felt import BigNumberish, FieldElement


def pedersen_int(a: int, b: int) -> int:
    return _pedersen(int(a), int(b))


def poseidon_many_int(values: Iterable[int]) -> int:
    return _poseidon_many([int(v) for v in values])


def compute_pedersen_hash(a: BigNumberish, b: BigNumberish) -> str:
    """Pairwise hash A of two field elements, as hex."""
    return hex(pedersen_int(FieldElement(a), FieldElement(b)))


def compute_poseidon_hash(a: BigNumberish, b: BigNumberish) -> str:
    """Pairwise hash B of two field elements, as hex."""
    return hex(_poseidon(int(FieldElement(a)), int(FieldElement(b))))


def poseidon_hash_many(values: Iterable[BigNumberish]) -> int:
    items: List[int] = [int(FieldElement(v)) for v in values]
    return _poseidon_many(items)


def keccak256(data: bytes) -> bytes:
    """Keccak-256 digest (Ethereum-style, pre-NIST padding)."""
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError("keccak256 expects bytes-like input")
    return _keccak.new(digest_bits=256, data=bytes(data)).digest()


def starknet_keccak(data: bytes) -> int:
    """Keccak-256 of `data` keeping the low 250 bits, so it fits the field."""
    return int.from_bytes(keccak256(data), "big") & MASK_250


_DEFAULT_ENTRY_POINTS = ("__default__", "__l1_default__")


def get_selector_from_name(name: str) -> str:
    """Entry-point selector for a function name, as hex. Default entry points map to 0."""
    if name in _DEFAULT_ENTRY_POINTS:
        return "0x0"
    return hex(starknet_keccak(name.encode("ascii")))


__all__ = [
    "compute_pedersen_hash",
    "compute_poseidon_hash",
    "poseidon_hash_many",
    "pedersen_int",
    "poseidon_many_int",
    "keccak256",
    "starknet_keccak",
    "get_selector_from_name",
]
