"""
errors/ - Error taxonomy for weight & balance estimation

Structured error records carried inside Result values, plus an aggregator
for reporting many problems in one pass.
"""

from .taxonomy import (
    ErrorSeverity,
    ErrorCategory,
    ErrorCode,
    EstimationError,
    EstimationFailed,
    ParameterParseError,
    ConfigurationError,
    create_missing_parameter_error,
    create_malformed_parameter_error,
    create_geometry_error,
    create_negative_weight_error,
    create_non_finite_error,
)

from .aggregator import (
    ErrorReport,
    ErrorAggregator,
)

__all__ = [
    # Taxonomy
    "ErrorSeverity",
    "ErrorCategory",
    "ErrorCode",
    "EstimationError",
    "EstimationFailed",
    "ParameterParseError",
    "ConfigurationError",
    "create_missing_parameter_error",
    "create_malformed_parameter_error",
    "create_geometry_error",
    "create_negative_weight_error",
    "create_non_finite_error",
    # Aggregator
    "ErrorReport",
    "ErrorAggregator",
]
