"""Specification-style access to business id validation.

`BusinessIdSpecification` answers `is_satisfied_by()` and keeps the reasons of
its most recent call in `reasons_for_dissatisfaction`. Each call replaces the
previous reasons entirely.

The instance holds state between the two calls, so share one instance across
threads only with external locking. `validate_business_id()` is stateless and
safe to call concurrently.
"""

from __future__ import annotations

from typing import List, Optional, Protocol, Sequence, TypeVar

from .models import ValidationResult
from .registry import validate_business_id

T_contra = TypeVar("T_contra", contravariant=True)


class Specification(Protocol[T_contra]):
    """A predicate that can explain why an entity does not satisfy it."""

    @property
    def reasons_for_dissatisfaction(self) -> Sequence[str]:
        """Reasons collected by the most recent is_satisfied_by() call."""
        ...

    def is_satisfied_by(self, entity: T_contra) -> bool:
        ...


class BusinessIdSpecification:
    """Determine whether a string is a valid Finnish business id.

    Examples:
        >>> spec = BusinessIdSpecification()
        >>> spec.is_satisfied_by("0204819-9")
        False
        >>> spec.reasons_for_dissatisfaction
        ['Checksum 9 is not correct, should be 8']
        >>> spec.is_satisfied_by("0204819-8")
        True
        >>> spec.reasons_for_dissatisfaction
        []
    """

    def __init__(self) -> None:
        self._last_result: Optional[ValidationResult] = None

    @property
    def last_result(self) -> Optional[ValidationResult]:
        """Full result of the most recent call, or None before the first call."""
        return self._last_result

    @property
    def reasons_for_dissatisfaction(self) -> List[str]:
        if self._last_result is None:
            return []
        return self._last_result.reasons

    def is_satisfied_by(self, entity: Optional[str]) -> bool:
        self._last_result = validate_business_id(entity)
        return self._last_result.is_valid
