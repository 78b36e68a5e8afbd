"""Length validation check.

A business id is exactly 9 characters long. Length is counted in characters,
not bytes, so non-ASCII input is measured the same way as ASCII.
"""

from __future__ import annotations

from ..config import BUSINESS_ID_LENGTH, get_message
from ..models import CheckResult


class LengthCheck:
    """Validate that the business id has the expected length."""

    check_id = "length"

    def validate(self, business_id: str) -> CheckResult:
        if len(business_id) == BUSINESS_ID_LENGTH:
            return CheckResult(check_id=self.check_id, passed=True)

        return CheckResult(
            check_id=self.check_id,
            passed=False,
            messages=[get_message("length")],
        )
