"""Checksum validation check.

The last character is a check digit computed from the 7 digits before the
separator with a mod-11 weighted sum:

    sum       = Σ digit[i] * CHECKSUM_MULTIPLIERS[i]   (i = 0 is next to the separator)
    remainder = sum % 11
    expected  = 0 if remainder == 0 else 11 - remainder

A check digit of 1 is never valid. Characters that are not digits contribute
nothing to the sum; reporting them is the digit check's job.
"""

from __future__ import annotations

from typing import Optional

from ..config import (
    CHECKSUM_BASE_LENGTH,
    CHECKSUM_DIGITS,
    CHECKSUM_MODULUS,
    CHECKSUM_MULTIPLIERS,
    FORBIDDEN_CHECK_DIGIT,
    SEPARATOR_OFFSET_FROM_END,
    get_message,
)
from ..models import CheckResult


def _digit_value(char: str) -> Optional[int]:
    """Parse a single ASCII digit, or return None."""
    if len(char) == 1 and char in CHECKSUM_DIGITS:
        return int(char)
    return None


def _expected_from_remainder(remainder: int) -> int:
    return 0 if remainder == 0 else CHECKSUM_MODULUS - remainder


def _weighted_remainder(business_id: str) -> int:
    """Weighted sum modulo 11 over the digits preceding the separator position."""
    total = 0
    last_base_index = len(business_id) - SEPARATOR_OFFSET_FROM_END - 1
    for i, multiplier in enumerate(CHECKSUM_MULTIPLIERS):
        index = last_base_index - i
        if index < 0:
            continue
        digit = _digit_value(business_id[index])
        if digit is not None:
            total += digit * multiplier
    return total % CHECKSUM_MODULUS


def calculate_check_digit(base: str) -> int:
    """Calculate the check digit for a 7-digit business id base.

    Args:
        base: The 7 digits preceding the separator (e.g., "0204819").

    Returns:
        The expected check digit. Results of 1 and 10 mean the base cannot
        form a valid business id.

    Raises:
        ValueError: If base is not exactly 7 ASCII digits.

    Examples:
        >>> calculate_check_digit("0204819")
        8
        >>> calculate_check_digit("2542362")
        4
    """
    if len(base) != CHECKSUM_BASE_LENGTH or any(_digit_value(c) is None for c in base):
        raise ValueError(
            f"Invalid business id base: {base!r}. Expected {CHECKSUM_BASE_LENGTH} digits."
        )
    # Pad with a placeholder separator and check digit so indices match a full id
    return _expected_from_remainder(_weighted_remainder(base + "-0"))


class ChecksumCheck:
    """Validate the check digit against the weighted sum of the base digits."""

    check_id = "checksum"

    def validate(self, business_id: str) -> CheckResult:
        """Compare the actual check digit with the calculated one.

        Args:
            business_id: Value to validate.

        Returns:
            Failed result without messages if the check digit cannot be read.
            Otherwise a result that may carry both the "cannot be 1" and the
            mismatch reasons at once.
        """
        actual = _digit_value(business_id[-1]) if business_id else None
        if actual is None:
            return CheckResult(check_id=self.check_id, passed=False)

        messages = []
        if actual == FORBIDDEN_CHECK_DIGIT:
            messages.append(get_message("checksum_one"))

        expected = _expected_from_remainder(_weighted_remainder(business_id))
        if actual != expected:
            messages.append(get_message("checksum_mismatch", actual=actual, expected=expected))

        return CheckResult(check_id=self.check_id, passed=not messages, messages=messages)
