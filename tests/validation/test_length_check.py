"""Tests for the LengthCheck validation."""

import pytest

from business_id.validation.checks.length import LengthCheck
from conftest import LENGTH_REASON


@pytest.mark.parametrize(
    "business_id",
    ["12345678", "1234567890", "", "1", "0204819-8 "],
    ids=["too_short", "too_long", "empty", "single_char", "trailing_space"],
)
def test_length_fail(business_id):
    """Any length other than 9 fails with the length reason."""
    result = LengthCheck().validate(business_id)

    assert result.check_id == "length"
    assert result.passed is False
    assert result.messages == [LENGTH_REASON]


@pytest.mark.parametrize(
    "business_id",
    ["123456789", "0204819-8", "ABCDEFGH½", "---------"],
    ids=["digits", "valid_id", "non_ascii", "separators"],
)
def test_length_pass(business_id):
    """Length counts characters regardless of their content."""
    result = LengthCheck().validate(business_id)

    assert result.passed is True
    assert result.messages == []
    assert result.fail_count == 0


def test_length_counts_characters_not_bytes():
    """A 9-character string with multi-byte characters has the right length."""
    business_id = "½½½½½½½-½"
    assert len(business_id.encode("utf-8")) > 9
    assert LengthCheck().validate(business_id).passed is True
