"""Finnish Business ID (Y-tunnus) validation tools.

The package validates business ids of the form ``NNNNNNN-C`` and reports every
reason an id fails validation instead of stopping at the first one.
"""

__all__ = [
    "__version__",
    "BusinessIdSpecification",
    "CheckResult",
    "ValidationResult",
    "calculate_check_digit",
    "validate_business_id",
]

__version__ = "0.1.0"

from .validation import (  # noqa: E402
    BusinessIdSpecification,
    CheckResult,
    ValidationResult,
    calculate_check_digit,
    validate_business_id,
)
