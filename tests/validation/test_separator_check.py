"""Tests for the SeparatorCheck validation.

The separator is expected in the second-to-last position for any length.
"""

import pytest

from business_id.validation.checks.separator import SeparatorCheck
from conftest import SEPARATOR_REASON


@pytest.mark.parametrize(
    "business_id",
    ["1234567.8", "-------0-", "123456789", "12", "ABCDEFGH½"],
    ids=["wrong_character", "wrong_position", "no_separator", "two_chars", "letter"],
)
def test_separator_fail(business_id):
    """A character other than '-' before the check digit fails with a reason."""
    result = SeparatorCheck().validate(business_id)

    assert result.check_id == "separator"
    assert result.passed is False
    assert result.messages == [SEPARATOR_REASON]


@pytest.mark.parametrize(
    "business_id",
    ["0204819-8", "---------", "-0", "123-4", "12345678901-2"],
    ids=["valid_id", "all_separators", "shortest", "short", "long"],
)
def test_separator_pass(business_id):
    """The separator is found relative to the end, whatever the length."""
    result = SeparatorCheck().validate(business_id)

    assert result.passed is True
    assert result.messages == []


@pytest.mark.parametrize("business_id", ["", "-"], ids=["empty", "single_char"])
def test_separator_too_short_fails_silently(business_id):
    """Strings shorter than two characters fail without adding a reason."""
    result = SeparatorCheck().validate(business_id)

    assert result.passed is False
    assert result.messages == []
