"""Validation checks base interface.

This module defines the protocol (interface) that all validation checks must implement.
Each check validates one rule of the business id format (length, separator position,
digits, checksum) and reports every violation it finds.

Checks never raise for malformed input: a violation is a failed CheckResult whose
messages explain it. Checks are independent of each other and always run, so a
single validation reports all reasons at once.

To implement a new validation check:

1. Create a new file in this directory (e.g., `my_check.py`)
2. Define a class that implements the ValidationCheck protocol
3. Add the message template to config.py
4. Add the check to the ALL_CHECKS list in registry.py

Example:
    ```python
    # checks/my_check.py
    from ..config import get_message
    from ..models import CheckResult

    class MyCheck:
        check_id = "my_check"

        def validate(self, business_id: str) -> CheckResult:
            # Validation logic here
            return CheckResult(check_id=self.check_id, passed=True)
    ```
"""

from __future__ import annotations

from typing import Protocol

from ..models import CheckResult


class ValidationCheck(Protocol):
    """Protocol defining the interface for validation checks.

    Use duck typing (Protocol) for flexibility - no need to inherit from a base class.

    Attributes:
        check_id: Stable identifier reported in CheckResult.check_id.
    """

    check_id: str

    def validate(self, business_id: str) -> CheckResult:
        """Run the validation check.

        Args:
            business_id: The value to validate. Never None; the null case is
                handled before any check runs.

        Returns:
            A single CheckResult. Failed results list one message per violation.

        Examples:
            >>> result = check.validate("0204819-8")
            >>> result.passed
            True
        """
        ...


__all__ = ["ValidationCheck"]
