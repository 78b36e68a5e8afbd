"""Tests for the ChecksumCheck validation and check digit calculation."""

import pytest

from business_id.validation.checks.checksum import ChecksumCheck, calculate_check_digit
from conftest import CHECKSUM_ONE_REASON


def test_checksum_pass(valid_business_id):
    """Known valid business ids have a correct check digit."""
    result = ChecksumCheck().validate(valid_business_id)

    assert result.check_id == "checksum"
    assert result.passed is True
    assert result.messages == []


@pytest.mark.parametrize(
    "business_id, expected_messages",
    [
        ("0204819-9", ["Checksum 9 is not correct, should be 8"]),
        ("1234567-1", [CHECKSUM_ONE_REASON]),
        (
            "A20481.1",
            [CHECKSUM_ONE_REASON, "Checksum 1 is not correct, should be 2"],
        ),
        ("12345678", ["Checksum 8 is not correct, should be 2"]),
        ("1234567A8", ["Checksum 8 is not correct, should be 1"]),
        ("0000006-0", ["Checksum 0 is not correct, should be 10"]),
        ("1", [CHECKSUM_ONE_REASON, "Checksum 1 is not correct, should be 0"]),
        ("020481٩-8", ["Checksum 8 is not correct, should be 4"]),
    ],
    ids=[
        "mismatch",
        "one_is_forbidden_even_when_calculated",
        "one_and_mismatch",
        "short_id",
        "letter_separator",
        "remainder_one",
        "single_char",
        "non_ascii_base_digit_skipped",
    ],
)
def test_checksum_fail(business_id, expected_messages):
    """Failures carry the forbidden-one and mismatch reasons in that order."""
    result = ChecksumCheck().validate(business_id)

    assert result.passed is False
    assert result.messages == expected_messages


@pytest.mark.parametrize(
    "business_id",
    ["", "0204819-A", "---------", "0204819-½", "٠٢٠٤٨١٩-٨"],
    ids=["empty", "letter", "separator", "fraction", "non_ascii_digit"],
)
def test_checksum_unreadable_fails_silently(business_id):
    """An unreadable check digit fails the check without a reason."""
    result = ChecksumCheck().validate(business_id)

    assert result.passed is False
    assert result.messages == []


@pytest.mark.parametrize(
    "base, expected",
    [
        ("0204819", 8),
        ("2542362", 4),
        ("0112038", 9),
        ("0000000", 0),
        ("0000006", 10),
        ("1234567", 1),
    ],
)
def test_calculate_check_digit(base, expected):
    """calculate_check_digit() returns the raw expected value, including 1 and 10."""
    assert calculate_check_digit(base) == expected


@pytest.mark.parametrize(
    "base",
    ["", "020481", "02048190", "020481A", "020481٩", "0204819-"],
    ids=["empty", "too_short", "too_long", "letter", "non_ascii_digit", "with_separator"],
)
def test_calculate_check_digit_invalid_base(base):
    """Bases that are not exactly 7 ASCII digits are rejected."""
    with pytest.raises(ValueError, match="Invalid business id base"):
        calculate_check_digit(base)


def test_checksum_accepts_calculated_check_digit():
    """For any base with a usable check digit, base-digit passes the checksum check."""
    check = ChecksumCheck()
    checked = 0
    for n in range(0, 10_000_000, 123_457):
        base = f"{n:07d}"
        check_digit = calculate_check_digit(base)
        if check_digit in (1, 10):
            continue
        result = check.validate(f"{base}-{check_digit}")
        assert result.passed is True, base
        assert result.messages == [], base
        checked += 1

    assert checked > 0
