"""
Text canonicalization used as hash input.

Re-exports the helpers from `class_hash.encoding.canonical`.
"""

from .canonical import (HINTED_HASH_FIELDS, OMIT, abi_text,
                        format_spaces, hash_text, hinted_input_text,
                        legacy_replacer, parse, stringify)

__all__ = [
    "OMIT",
    "HINTED_HASH_FIELDS",
    "parse",
    "legacy_replacer",
    "stringify",
    "format_spaces",
    "hash_text",
    "hinted_input_text",
    "abi_text",
]
