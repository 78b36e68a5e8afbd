"""Separator validation check.

The separator '-' is expected in the second-to-last position, independent of
the total length. Strings shorter than two characters have no such position;
the check fails silently for them because the length check already reports it.
"""

from __future__ import annotations

from ..config import SEPARATOR, get_message, get_separator_index
from ..models import CheckResult


class SeparatorCheck:
    """Validate that the separator is in the second-to-last position."""

    check_id = "separator"

    def validate(self, business_id: str) -> CheckResult:
        """Check the character before the check digit.

        Args:
            business_id: Value to validate.

        Returns:
            Passed result if the separator is in place, failed result otherwise.
            The failed result has no message when the string is too short.
        """
        index = get_separator_index(business_id)
        if index < 0:
            return CheckResult(check_id=self.check_id, passed=False)

        if business_id[index] == SEPARATOR:
            return CheckResult(check_id=self.check_id, passed=True)

        return CheckResult(
            check_id=self.check_id,
            passed=False,
            messages=[get_message("separator")],
        )
