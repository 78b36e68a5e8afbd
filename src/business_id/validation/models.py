"""Validation data models.

This module defines core data structures for validation results:
- CheckResult: Outcome of a single validation rule
- ValidationResult: Verdict and ordered reasons for one business id
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class CheckResult:
    """Result of a single validation check.

    Attributes:
        check_id: Unique identifier for the check (e.g., "separator").
        passed: True if the rule is satisfied, False otherwise.
        messages: Reasons for dissatisfaction, in the order they were found.

    A failed check may carry no messages when another check already reports
    the underlying problem (e.g. a string too short to hold a separator).

    Examples:
        >>> CheckResult(
        ...     check_id="digits",
        ...     passed=False,
        ...     messages=["Character A at position 1 is not a digit"],
        ... )
    """

    check_id: str
    passed: bool
    messages: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate field constraints."""
        if self.passed and self.messages:
            raise ValueError("passed=True requires no messages")

    @property
    def fail_count(self) -> int:
        """Number of reasons reported by this check."""
        return len(self.messages)


@dataclass(frozen=True)
class ValidationResult:
    """Verdict and reasons for a single business id.

    Attributes:
        business_id: The validated value, exactly as given (may be None).
        results: Check results in execution order.

    Examples:
        >>> result = validate_business_id("0204819-9")
        >>> result.is_valid
        False
        >>> result.reasons
        ['Checksum 9 is not correct, should be 8']
    """

    business_id: Optional[str]
    results: List[CheckResult] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """True iff a value was given and every check passed."""
        if self.business_id is None:
            return False
        return all(r.passed for r in self.results)

    @property
    def reasons(self) -> List[str]:
        """All reasons for dissatisfaction, ordered by check and position."""
        return [msg for r in self.results for msg in r.messages]

    def get_failed_checks(self) -> List[CheckResult]:
        """Get all failed checks in execution order."""
        return [r for r in self.results if not r.passed]

    def _display_id(self) -> str:
        return "<null>" if self.business_id is None else repr(self.business_id)

    def summary(self) -> str:
        """Generate a concise text summary of the validation.

        Examples:
            >>> print(validate_business_id("0204819-8").summary())
            Validation Summary:
              Business ID: '0204819-8'
              Verdict: VALID
              Checks: 4 executed (4 passed, 0 failed)
        """
        total = len(self.results)
        passed = sum(1 for r in self.results if r.passed)
        failed = total - passed
        verdict = "VALID" if self.is_valid else "INVALID"

        return (
            f"Validation Summary:\n"
            f"  Business ID: {self._display_id()}\n"
            f"  Verdict: {verdict}\n"
            f"  Checks: {total} executed ({passed} passed, {failed} failed)"
        )

    def to_console_summary(self) -> str:
        """Generate the summary followed by every failed check and its reasons."""
        lines = [self.summary(), ""]

        failed_checks = self.get_failed_checks()
        if not failed_checks:
            lines.append("✅ All validation checks passed!")
            return "\n".join(lines)

        lines.append("Check Details:")
        for result in failed_checks:
            lines.append(f"❌ {result.check_id}: {result.fail_count} reasons")
            for msg in result.messages:
                lines.append(f"   - {msg}")

        return "\n".join(lines)

    def to_markdown(self) -> str:
        """Generate a detailed Markdown validation report.

        Returns:
            Formatted Markdown string including:
            - Header with the business id and timestamp
            - Summary section with pass/fail counts
            - Passed checks list
            - Failed checks with their reasons
        """
        from datetime import datetime

        total = len(self.results)
        passed_checks = [r for r in self.results if r.passed]
        failed_checks = self.get_failed_checks()

        lines = [
            f"# Validation Report: {self._display_id()}",
            "",
            f"**Verdict:** {'VALID ✅' if self.is_valid else 'INVALID ❌'}",
            f"**Generated:** {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}",
            "",
            "## Summary",
            "",
            f"- **Total Rules:** {total}",
            f"- **Passed:** {len(passed_checks)}",
            f"- **Failed:** {len(failed_checks)}",
            f"- **Reasons:** {len(self.reasons)}",
            "",
        ]

        if passed_checks:
            lines.append("## ✅ Passed Checks")
            lines.append("")
            for result in passed_checks:
                lines.append(f"- **{result.check_id}**")
            lines.append("")

        if not failed_checks:
            lines.append("## ✅ All Checks Passed")
            lines.append("")
            lines.append("No validation issues found.")
            lines.append("")
        else:
            lines.append("## ❌ Failed Checks")
            lines.append("")
            for result in failed_checks:
                lines.append(f"### ❌ {result.check_id} ({result.fail_count} reasons)")
                lines.append("")
                if not result.messages:
                    lines.append("- Reported by another check")
                for msg in result.messages:
                    lines.append(f"- {msg}")
                lines.append("")

        return "\n".join(lines)

    def to_json(self) -> str:
        """Generate a detailed JSON validation report."""
        import json
        from datetime import datetime

        failed_checks = self.get_failed_checks()

        report_data = {
            "metadata": {
                "business_id": self.business_id,
                "generated_at": datetime.now().isoformat(),
            },
            "summary": {
                "total_rules": len(self.results),
                "passed": len(self.results) - len(failed_checks),
                "failed": len(failed_checks),
            },
            "valid": self.is_valid,
            "reasons": self.reasons,
            "checks": [
                {
                    "check_id": r.check_id,
                    "passed": r.passed,
                    "messages": r.messages,
                }
                for r in self.results
            ],
        }
        return json.dumps(report_data, indent=2, ensure_ascii=False)
