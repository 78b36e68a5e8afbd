"""Validation check registry and runner.

This module orchestrates validation checks:
- ALL_CHECKS: List of all validation check instances, in reporting order
- validate_business_id(): Runs every check and returns a ValidationResult
- print_report(): Displays validation results to console
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .checks.checksum import ChecksumCheck
from .checks.digits import DigitsCheck
from .checks.length import LengthCheck
from .checks.separator import SeparatorCheck
from .config import get_message
from .models import CheckResult, ValidationResult

logger = logging.getLogger(__name__)

NULL_CHECK_ID = "not_null"

# Registry of all validation checks
# Order defines the order of reasons in ValidationResult.reasons
ALL_CHECKS = [
    LengthCheck(),
    SeparatorCheck(),
    DigitsCheck(),
    ChecksumCheck(),
]


def validate_business_id(business_id: Optional[str]) -> ValidationResult:
    """Run all validation checks on a business id.

    Every check runs regardless of earlier failures so that the result lists
    all reasons at once. Only a None value stops validation early.

    Args:
        business_id: The value to validate.

    Returns:
        A new ValidationResult. The function keeps no state between calls.

    Raises:
        TypeError: If business_id is neither a string nor None.

    Examples:
        >>> result = validate_business_id("A20481.1")
        >>> result.is_valid
        False
        >>> result.reasons[0]
        'BusinessId length is not 9 characters'
    """
    if business_id is None:
        logger.debug("Business id is None, skipping remaining checks")
        return ValidationResult(
            business_id=None,
            results=[
                CheckResult(
                    check_id=NULL_CHECK_ID,
                    passed=False,
                    messages=[get_message(NULL_CHECK_ID)],
                )
            ],
        )

    if not isinstance(business_id, str):
        raise TypeError(
            f"Business id must be a string or None, got {type(business_id).__name__}"
        )

    results: List[CheckResult] = []
    for check in ALL_CHECKS:
        result = check.validate(business_id)
        logger.debug(
            "Check %s on %r: passed=%s, %d reasons",
            result.check_id,
            business_id,
            result.passed,
            result.fail_count,
        )
        results.append(result)

    return ValidationResult(business_id=business_id, results=results)


def print_report(result: ValidationResult) -> None:
    """Print validation result to console.

    Displays a summary followed by the reasons of all failed checks.

    Examples:
        >>> print_report(validate_business_id("0204819-9"))
        Validation Summary:
          Business ID: '0204819-9'
          Verdict: INVALID
          Checks: 4 executed (3 passed, 1 failed)

        Check Details:
        ❌ checksum: 1 reasons
           - Checksum 9 is not correct, should be 8
    """
    print(result.to_console_summary())
