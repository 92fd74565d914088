import pytest

from core.validation import input_check


def test_all_required_fields_present():
    record = {"first_name": "Ronald", "last_name": "Firbank", "industry_connected": 1}
    assert input_check(record, "first_name", "last_name", "industry_connected") is None


def test_missing_field_is_reported():
    assert input_check({"first_name": "Ronald"}, "first_name", "last_name") == "No last_name specified."


@pytest.mark.parametrize("value", ["", "   ", "\t\n", None])
def test_blank_values_fail(value):
    assert input_check({"email": value}, "email") == "No email specified."


def test_first_failure_wins():
    assert input_check({}, "voter_id", "candidate_id") == "No voter_id specified."


@pytest.mark.parametrize("value", [0, False, 0.0, "x", " a "])
def test_falsy_non_string_values_pass(value):
    assert input_check({"party_id": value}, "party_id") is None


def test_unlisted_fields_are_ignored():
    assert input_check({"email": "a@b.com", "age": ""}, "email") is None


def test_no_required_fields():
    assert input_check(None) is None
    assert input_check({}) is None
