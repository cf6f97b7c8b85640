# tests/test_compare.py

import copy
import json

import pytest

from contract_config.contracts.abi import parse_abi
from contract_config.contracts.compare import compare_contract_abi, find_abi_mismatch
from contract_config.core.errors import (
    MismatchedConstructorsError,
    MismatchedOuterEventsError,
    MismatchedOuterMethodsError,
)

from .conftest import FLIP_ABI, VOW_ABI


def _parse(entries):
    return parse_abi(json.dumps(entries))


def _without(entries, name):
    return [entry for entry in entries if entry.get("name") != name]


def test_identical_abis_match():
    assert find_abi_mismatch(_parse(FLIP_ABI), _parse(FLIP_ABI)) is None
    compare_contract_abi(_parse(VOW_ABI), _parse(VOW_ABI))


def test_constructor_mismatch():
    with pytest.raises(MismatchedConstructorsError) as exc_info:
        compare_contract_abi(_parse(FLIP_ABI), _parse(VOW_ABI))

    error = exc_info.value
    assert error.constructor_one == "constructor(address vat_, bytes32 ilk_) returns()"
    assert error.constructor_two == "constructor(address vat_, address flapper_, address flopper_) returns()"
    assert "constructors don't match" in str(error)


def test_constructor_checked_before_methods():
    other = copy.deepcopy(VOW_ABI)
    other[0]["inputs"] = []
    other = _without(other, "heal")

    assert isinstance(find_abi_mismatch(_parse(VOW_ABI), _parse(other)), MismatchedConstructorsError)


def test_differing_method_signature():
    other = copy.deepcopy(FLIP_ABI)
    other[1]["outputs"] = []

    error = find_abi_mismatch(_parse(FLIP_ABI), _parse(other))

    assert isinstance(error, MismatchedOuterMethodsError)
    assert error.method == "kick"
    assert error.method_one.endswith("returns(uint256 id)")
    assert error.method_two.endswith("returns()")
    assert "outer methods don't match for method kick" in str(error)


def test_method_missing_from_second_abi():
    error = find_abi_mismatch(_parse(FLIP_ABI), _parse(_without(FLIP_ABI, "bids")))

    assert isinstance(error, MismatchedOuterMethodsError)
    assert error.method == "bids"
    assert error.method_two == ""


def test_extra_method_in_second_abi_is_ignored():
    assert find_abi_mismatch(_parse(_without(FLIP_ABI, "bids")), _parse(FLIP_ABI)) is None


def test_extra_method_in_second_abi_fails_in_strict_mode():
    error = find_abi_mismatch(_parse(_without(FLIP_ABI, "bids")), _parse(FLIP_ABI), strict=True)

    assert isinstance(error, MismatchedOuterMethodsError)
    assert error.method == "bids"
    assert error.method_one == ""
    assert error.method_two.startswith("function bids(")


def test_extra_event_in_second_abi_fails_in_strict_mode():
    error = find_abi_mismatch(_parse(_without(FLIP_ABI, "Kick")), _parse(FLIP_ABI), strict=True)

    assert isinstance(error, MismatchedOuterEventsError)
    assert error.event == "Kick"


def test_first_mismatch_is_lexicographic():
    other = copy.deepcopy(FLIP_ABI)
    for entry in other:
        if entry.get("name") in ("kick", "bids"):
            entry["stateMutability"] = "payable"

    error = find_abi_mismatch(_parse(FLIP_ABI), _parse(other))
    assert error.method == "bids"


def test_methods_checked_before_events():
    other = copy.deepcopy(FLIP_ABI)
    other[1]["inputs"] = other[1]["inputs"][:2]
    other[3]["inputs"][0]["indexed"] = True

    assert isinstance(find_abi_mismatch(_parse(FLIP_ABI), _parse(other)), MismatchedOuterMethodsError)


def test_differing_event_reports_both_signatures():
    other = copy.deepcopy(FLIP_ABI)
    other[3]["inputs"][0]["indexed"] = True

    error = find_abi_mismatch(_parse(FLIP_ABI), _parse(other))

    assert isinstance(error, MismatchedOuterEventsError)
    assert error.event == "Kick"
    assert error.event_one.startswith("event Kick(uint256 id,")
    assert error.event_two.startswith("event Kick(uint256 indexed id,")
    assert error.event_one != error.event_two
