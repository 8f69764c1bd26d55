"""
Canonical JSON text: member order, filtering rules, quote tracking and
number formatting.
"""

from __future__ import annotations

import json

import pytest

from class_hash.crypto import starknet_keccak
from class_hash.encoding.canonical import (OMIT, abi_text,
                                           format_spaces, hash_text,
                                           hinted_input_text, legacy_replacer,
                                           parse, stringify)
from class_hash.errors import CanonicalizationError


def test_stringify_is_compact_and_keeps_authored_order():
    obj = {"b": 1, "a": [1, 2], "c": "x:y,z"}
    assert stringify(obj) == '{"b":1,"a":[1,2],"c":"x:y,z"}'


def test_format_spaces_only_outside_strings():
    text = stringify({"b": 1, "a": [1, 2], "c": "x:y,z"})
    assert format_spaces(text) == '{"b": 1, "a": [1, 2], "c": "x:y,z"}'


def test_escaped_quote_does_not_toggle_string_state():
    text = stringify({"k": 'a"b,c:d'})
    assert text == r'{"k":"a\"b,c:d"}'
    assert format_spaces(text) == r'{"k": "a\"b,c:d"}'


def test_format_spaces_on_raw_text():
    assert format_spaces('[1,{"a":"b"}]') == '[1, {"a": "b"}]'
    assert format_spaces('"a,b"') == '"a,b"'


def test_filtering_drops_empty_attributes_only():
    assert stringify({"attributes": [], "x": 1}, legacy_replacer) == '{"x":1}'
    assert stringify({"attributes": [1], "x": 1}, legacy_replacer) == '{"attributes":[1],"x":1}'
    assert stringify({"accessible_scopes": [], "x": 1}, legacy_replacer) == '{"x":1}'
    # only an empty *list* is dropped; a null attributes member stays as null
    assert stringify({"attributes": None}, legacy_replacer) == '{"attributes":null}'


def test_filtering_forces_debug_info_to_null():
    obj = {"debug_info": {"file_contents": {"a.cairo": "..."}}, "x": 1}
    assert stringify(obj, legacy_replacer) == '{"debug_info":null,"x":1}'
    assert stringify({"debug_info": None}, legacy_replacer) == '{"debug_info":null}'


def test_filtering_drops_null_members_at_any_depth():
    obj = {"outer": {"gone": None, "kept": 0, "inner": {"attributes": [], "z": False}}}
    assert stringify(obj, legacy_replacer) == '{"outer":{"kept":0,"inner":{"z":false}}}'


def test_filtering_keeps_nulls_inside_arrays():
    assert stringify({"a": [None, 1]}, legacy_replacer) == '{"a":[null,1]}'


def test_custom_replacer_omitting_array_items_renders_null():
    def drop_ones(key, value):
        return OMIT if value == 1 else value

    assert stringify([1, 2], drop_ones) == "[null,2]"


def test_pass_through_keeps_every_member():
    obj = {"attributes": [], "debug_info": {"a": 1}, "n": None}
    assert stringify(obj) == '{"attributes":[],"debug_info":{"a":1},"n":null}'


def test_non_ascii_is_kept_verbatim():
    assert stringify({"s": "é✓"}) == '{"s":"é✓"}'
    assert stringify({"s": "line\nbreak"}) == '{"s":"line\\nbreak"}'


def test_parsed_numbers_match_host_numbers():
    text = '{"a":1.0,"b":1e5,"c":12345678901234567890123,"d":-0.5}'
    obj = parse(text)
    assert obj == json.loads(text)
    assert obj["c"] == 12345678901234567890123
    assert stringify(obj) == '{"a":1,"b":100000,"c":12345678901234567890123,"d":-0.5}'


@pytest.mark.parametrize(
    "value, text",
    [
        (1e21, "1e+21"),
        (1.5e22, "1.5e+22"),
        (1e20, "100000000000000000000"),
        (1e-7, "1e-7"),
        (1.5e-7, "1.5e-7"),
        (0.000001, "0.000001"),
        (123.456, "123.456"),
        (-2.5, "-2.5"),
        (-0.0, "0"),
        (float("inf"), "null"),
    ],
)
def test_floats_use_number_to_string_form(value, text):
    assert stringify([value]) == f"[{text}]"


def test_host_floats_follow_reference_formatting():
    assert stringify([1.0, 0.5, float("nan")]) == "[1,0.5,null]"


def test_malformed_text_raises_json_error():
    with pytest.raises(json.JSONDecodeError):
        parse('{"abi": [}')


def test_unsupported_values_are_rejected():
    with pytest.raises(CanonicalizationError) as ei:
        stringify({"a": {1, 2}})
    assert ei.value.ctx["path"] == ".a"
    with pytest.raises(CanonicalizationError):
        stringify({1: "int key"})


def test_hinted_input_uses_fixed_wrapper_order():
    text = hinted_input_text(abi=[], program={"z": 1, "a": None})
    assert text == '{"abi": [], "program": {"z": 1}}'


def test_hinted_input_omits_null_abi():
    assert hinted_input_text(abi=None, program={}) == '{"program": {}}'


def test_abi_text_is_pass_through_with_spaces():
    abi = [{"type": "function", "name": "get", "outputs": [{"type": "core::felt252"}], "doc": None}]
    assert abi_text(abi) == (
        '[{"type": "function", "name": "get", "outputs": [{"type": "core::felt252"}], "doc": null}]'
    )


def test_hash_text_is_keccak_of_utf8():
    assert hash_text("[]") == starknet_keccak(b"[]")
    assert hash_text("é") == starknet_keccak("é".encode("utf-8"))
