"""
Common helpers for the class_hash test-suite.

Import from tests like:

    from class_hash.tests import FIXTURES_DIR, read_fixture, read_fixture_text
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from class_hash.encoding.canonical import parse

THIS_FILE = Path(__file__).resolve()
TESTS_DIR = THIS_FILE.parent
FIXTURES_DIR = TESTS_DIR / "fixtures"

# pedersen(0, 0), i.e. the chained hash of an empty sequence
PEDERSEN_ZERO = "0x49ee3eba8c1600700ee1b87eb599f16716b0b1022947733551fde4050ca6804"


def fixture_path(name: str) -> Path:
    return FIXTURES_DIR / name


def read_fixture_text(name: str) -> str:
    return fixture_path(name).read_text(encoding="utf-8")


def read_fixture(name: str) -> Any:
    """Parse a JSON fixture with the same lossless parser the library uses."""
    return parse(read_fixture_text(name))


__all__ = [
    "FIXTURES_DIR",
    "PEDERSEN_ZERO",
    "fixture_path",
    "read_fixture",
    "read_fixture_text",
]
