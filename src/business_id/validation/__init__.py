"""Validation system for Finnish business ids.

This module provides the validation framework:

- **Models**: CheckResult, ValidationResult - validation result data structures
- **Checks**: One check per format rule (see validation/checks/)
- **Config**: Format constants and reason messages (import from .config)
- **Registry**: validate_business_id(), print_report() - check orchestration
- **Specification**: BusinessIdSpecification - is_satisfied_by() style access

Public API:
    CheckResult: Outcome of one rule with its reasons
    ValidationResult: Verdict and ordered reasons for one business id
    validate_business_id: Run every check on a business id
    print_report: Display validation results to console
    BusinessIdSpecification: Stateful wrapper keeping the latest reasons
    calculate_check_digit: Check digit for a 7-digit base

Usage:
    >>> from business_id.validation import validate_business_id, print_report
    >>> result = validate_business_id("0204819-8")
    >>> result.is_valid
    True
    >>> print_report(result)
"""

from __future__ import annotations

from .checks.checksum import calculate_check_digit
from .models import CheckResult, ValidationResult
from .registry import print_report, validate_business_id
from .specification import BusinessIdSpecification, Specification

__all__ = [
    # Data models
    "CheckResult",
    "ValidationResult",
    # Runner functions
    "validate_business_id",
    "print_report",
    "calculate_check_digit",
    # Specification
    "Specification",
    "BusinessIdSpecification",
]
