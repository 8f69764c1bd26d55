from __future__ import annotations

import json

import pytest

from class_hash.constants import FIELD_PRIME
from class_hash.dispatch import (class_kind, compute_class_hash,
                                 compute_contract_class_hash)
from class_hash.errors import ClassDecodeError, FeltRangeError
from class_hash.legacy import compute_legacy_contract_class_hash
from class_hash.sierra import compute_sierra_contract_class_hash
from class_hash.tests import read_fixture, read_fixture_text
from class_hash.types import (LegacyContractClass, SierraContractClass,
                              decode_contract_class)


@pytest.mark.parametrize(
    "name, kind",
    [
        ("legacy_minimal.json", LegacyContractClass),
        ("legacy_small.json", LegacyContractClass),
        ("sierra_minimal.json", SierraContractClass),
        ("sierra_small.json", SierraContractClass),
    ],
)
def test_variant_is_decided_by_sierra_program(name, kind):
    assert isinstance(decode_contract_class(read_fixture(name)), kind)


def test_dispatch_matches_direct_hashers():
    legacy = read_fixture("legacy_small.json")
    sierra = read_fixture("sierra_small.json")
    assert compute_contract_class_hash(legacy) == compute_legacy_contract_class_hash(legacy)
    assert compute_contract_class_hash(sierra) == compute_sierra_contract_class_hash(sierra)


@pytest.mark.parametrize("name", ["legacy_small.json", "sierra_small.json"])
def test_text_and_parsed_input_agree(name):
    text = read_fixture_text(name)
    obj = read_fixture(name)
    assert compute_contract_class_hash(text) == compute_contract_class_hash(obj)
    assert compute_contract_class_hash(text.encode("utf-8")) == compute_contract_class_hash(obj)


def test_decoded_class_passes_through():
    cls = decode_contract_class(read_fixture("sierra_minimal.json"))
    assert decode_contract_class(cls) is cls
    assert class_kind(cls) == "sierra"
    assert compute_class_hash(cls) == compute_contract_class_hash(read_fixture("sierra_minimal.json"))


def test_compute_class_hash_rejects_raw_input():
    with pytest.raises(TypeError):
        compute_class_hash({"abi": []})  # type: ignore[arg-type]


def test_legacy_shape_without_program_is_rejected():
    with pytest.raises(ClassDecodeError) as ei:
        compute_contract_class_hash({"abi": [], "entry_points_by_type": {}})
    assert ei.value.to_dict()["code"] == "CLASS_DECODE"


def test_non_object_is_rejected():
    with pytest.raises(ClassDecodeError):
        compute_contract_class_hash("[]")


def test_malformed_text_raises_json_error():
    with pytest.raises(json.JSONDecodeError):
        compute_contract_class_hash('{"sierra_program": [')


def test_out_of_field_program_word():
    contract = read_fixture("sierra_minimal.json")
    contract["sierra_program"] = ["0x1", hex(FIELD_PRIME)]
    with pytest.raises(FeltRangeError):
        compute_contract_class_hash(contract)


def test_malformed_program_word_reports_path():
    contract = read_fixture("sierra_minimal.json")
    contract["sierra_program"] = ["0x1", "0xzz"]
    with pytest.raises(ClassDecodeError) as ei:
        compute_contract_class_hash(contract)
    assert ei.value.ctx["path"] == "sierra_program[1]"


def test_fractional_numbers_hash_the_same_from_text_and_host_objects():
    text = read_fixture_text("legacy_minimal.json").replace(
        '"hints": {}', '"hints": {}, "ratio": 1.0, "scale": 1e5', 1
    )
    assert '"ratio": 1.0' in text
    via_text = compute_contract_class_hash(text)
    assert via_text == compute_contract_class_hash(json.loads(text))

    integral = text.replace('"ratio": 1.0, "scale": 1e5', '"ratio": 1, "scale": 100000')
    assert via_text == compute_contract_class_hash(integral)
