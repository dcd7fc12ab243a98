"""
errors/aggregator.py - Aggregate and report errors

Used where every problem should be reported at once rather than failing
fast: malformed parameter rows, and the full-aircraft diagnostic pass.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .taxonomy import EstimationError, ErrorCategory, ErrorSeverity


@dataclass
class ErrorReport:
    """Aggregated error report."""

    # Counts
    total_errors: int = 0
    by_severity: Dict[str, int] = field(default_factory=dict)
    by_category: Dict[str, int] = field(default_factory=dict)

    # Symbols that must be added to the parameter table
    missing_symbols: List[str] = field(default_factory=list)

    # Summary
    summary: str = ""

    # All errors
    all_errors: List[EstimationError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.total_errors == 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_errors": self.total_errors,
            "by_severity": self.by_severity,
            "by_category": self.by_category,
            "missing_symbols": self.missing_symbols,
            "summary": self.summary,
            "errors": [e.to_dict() for e in self.all_errors],
        }


class ErrorAggregator:
    """
    Aggregates errors from multiple sources.
    """

    def __init__(self):
        self._errors: List[EstimationError] = []

    def add(self, error: EstimationError) -> None:
        """Add an error."""
        self._errors.append(error)

    def get_by_category(self, category: ErrorCategory) -> List[EstimationError]:
        return [e for e in self._errors if e.category == category]

    def has_errors(self) -> bool:
        """Check if any errors (not just warnings)."""
        return any(
            e.severity in [ErrorSeverity.ERROR, ErrorSeverity.CRITICAL]
            for e in self._errors
        )

    @property
    def errors(self) -> List[EstimationError]:
        return list(self._errors)

    def generate_report(self) -> ErrorReport:
        """Generate aggregated report."""
        report = ErrorReport(total_errors=len(self._errors))

        for severity in ErrorSeverity:
            count = sum(1 for e in self._errors if e.severity == severity)
            if count > 0:
                report.by_severity[severity.value] = count

        for category in ErrorCategory:
            count = sum(1 for e in self._errors if e.category == category)
            if count > 0:
                report.by_category[category.value] = count

        missing = set()
        for e in self.get_by_category(ErrorCategory.PARAMETER):
            missing.update(e.symbols)
        report.missing_symbols = sorted(missing)

        critical = report.by_severity.get("critical", 0)
        if critical:
            report.summary = f"{critical} critical error(s) require immediate attention"
        elif report.by_severity.get("error", 0) > 0:
            report.summary = f"{report.by_severity['error']} error(s) found"
        elif report.by_severity.get("warning", 0) > 0:
            report.summary = f"{report.by_severity['warning']} warning(s) found"
        else:
            report.summary = "No significant issues"

        report.all_errors = self._errors.copy()

        return report
