"""Digit validation check.

Every position except the separator position must hold a decimal digit.
The separator position is skipped whatever character it holds; the separator
check owns it. Any Unicode decimal digit (category Nd) is accepted, so '½' is
rejected while e.g. Arabic-Indic digits are not.
"""

from __future__ import annotations

from ..config import get_message, get_separator_index
from ..models import CheckResult


class DigitsCheck:
    """Validate that all non-separator characters are digits."""

    check_id = "digits"

    def validate(self, business_id: str) -> CheckResult:
        """Report each non-digit character with its 1-based position.

        Args:
            business_id: Value to validate.

        Returns:
            CheckResult with one message per offending character, in index order.
        """
        separator_index = get_separator_index(business_id)

        messages = []
        for index, char in enumerate(business_id):
            if index == separator_index:
                continue
            if not char.isdecimal():
                messages.append(get_message("digit", char=char, position=index + 1))

        return CheckResult(check_id=self.check_id, passed=not messages, messages=messages)
