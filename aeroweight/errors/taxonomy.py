"""
errors/taxonomy.py - Error classification for weight & balance estimation

Every failure the estimator can produce is described by an EstimationError
record. Records travel inside a Result (see core/result.py) instead of being
raised, so callers can tell missing data apart from programming errors.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple
from enum import Enum


class ErrorSeverity(Enum):
    """Error severity levels."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Error categories."""
    # Parameter table problems (1xxx)
    PARAMETER = "parameter"

    # Geometry / numerical problems (2xxx)
    GEOMETRY = "geometry"

    # Physically meaningless results (3xxx)
    PHYSICS = "physics"


class ErrorCode(Enum):
    """Specific error codes."""

    # Parameter (1xxx)
    PAR_MISSING = 1001
    PAR_MALFORMED = 1002

    # Geometry (2xxx)
    GEO_INVALID = 2001

    # Physics (3xxx)
    PHY_NEGATIVE_WEIGHT = 3001
    PHY_NON_FINITE = 3002


@dataclass(frozen=True)
class EstimationError:
    """Structured error representation."""

    code: ErrorCode = ErrorCode.PAR_MISSING
    category: ErrorCategory = ErrorCategory.PARAMETER
    severity: ErrorSeverity = ErrorSeverity.ERROR

    message: str = ""

    # Leaf component (or loader/file) that produced the error
    source: str = ""
    # Component path from the aircraft down to the source, e.g. "aircraft/wings/nacelle"
    path: str = ""

    # Symbols involved (absent or malformed parameters)
    symbols: Tuple[str, ...] = ()

    actual_value: Any = None

    def within(self, parent: str) -> "EstimationError":
        """Return a copy whose path is nested under ``parent``."""
        path = f"{parent}/{self.path}" if self.path else parent
        return EstimationError(
            code=self.code,
            category=self.category,
            severity=self.severity,
            message=self.message,
            source=self.source,
            path=path,
            symbols=self.symbols,
            actual_value=self.actual_value,
        )

    def describe(self) -> str:
        """One-line human readable description."""
        where = self.path or self.source
        text = f"[{self.code.name}] {where}: {self.message}"
        if self.symbols:
            text += f" (symbols: {', '.join(self.symbols)})"
        return text

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code.value,
            "name": self.code.name,
            "category": self.category.value,
            "severity": self.severity.value,
            "message": self.message,
            "source": self.source,
            "path": self.path,
            "symbols": list(self.symbols),
            "actual_value": self.actual_value,
        }


class EstimationFailed(Exception):
    """Raised when a caller unwraps a failed Result."""

    def __init__(self, error: EstimationError):
        super().__init__(error.describe())
        self.error = error


class ParameterParseError(Exception):
    """Raised by the parameter loader when any row is malformed."""

    def __init__(self, errors: List[EstimationError]):
        self.errors = list(errors)
        lines = "\n".join(f"  {e.describe()}" for e in self.errors)
        super().__init__(f"{len(self.errors)} malformed parameter row(s):\n{lines}")


class ConfigurationError(Exception):
    """Raised when configuration values cannot be interpreted."""
    pass


def create_missing_parameter_error(
    source: str,
    symbols: List[str],
) -> EstimationError:
    """Factory for absent-parameter errors."""
    return EstimationError(
        code=ErrorCode.PAR_MISSING,
        category=ErrorCategory.PARAMETER,
        severity=ErrorSeverity.ERROR,
        message=f"missing parameter(s): {', '.join(symbols)}",
        source=source,
        path=source,
        symbols=tuple(symbols),
    )


def create_malformed_parameter_error(
    message: str,
    source: str,
    symbol: Optional[str] = None,
    actual: Any = None,
) -> EstimationError:
    """Factory for parse failures at load time."""
    return EstimationError(
        code=ErrorCode.PAR_MALFORMED,
        category=ErrorCategory.PARAMETER,
        severity=ErrorSeverity.ERROR,
        message=message,
        source=source,
        symbols=(symbol,) if symbol else (),
        actual_value=actual,
    )


def create_geometry_error(
    message: str,
    source: str,
    actual: Any = None,
) -> EstimationError:
    """Factory for zero/negative denominators and other undefined geometry."""
    return EstimationError(
        code=ErrorCode.GEO_INVALID,
        category=ErrorCategory.GEOMETRY,
        severity=ErrorSeverity.ERROR,
        message=message,
        source=source,
        path=source,
        actual_value=actual,
    )


def create_negative_weight_error(
    source: str,
    weight: float,
) -> EstimationError:
    """Factory for non-negativity violations."""
    return EstimationError(
        code=ErrorCode.PHY_NEGATIVE_WEIGHT,
        category=ErrorCategory.PHYSICS,
        severity=ErrorSeverity.CRITICAL,
        message=f"computed weight is negative: {weight!r} lb",
        source=source,
        path=source,
        actual_value=weight,
    )


def create_non_finite_error(
    source: str,
    value: Any,
) -> EstimationError:
    """Factory for NaN / infinite weights."""
    return EstimationError(
        code=ErrorCode.PHY_NON_FINITE,
        category=ErrorCategory.PHYSICS,
        severity=ErrorSeverity.CRITICAL,
        message=f"computed weight is not a finite number: {value!r}",
        source=source,
        path=source,
        actual_value=value,
    )
