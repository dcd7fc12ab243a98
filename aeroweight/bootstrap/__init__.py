"""
bootstrap/ - Configuration and command line entry point
"""

from .config import (
    DesignPointConfig,
    PolicyConfig,
    ReportConfig,
    LoggingConfig,
    EstimatorConfig,
    load_config,
    get_config,
)

from .entrypoints import (
    setup_logging,
    cli_main,
    main,
)

__all__ = [
    "DesignPointConfig",
    "PolicyConfig",
    "ReportConfig",
    "LoggingConfig",
    "EstimatorConfig",
    "load_config",
    "get_config",
    "setup_logging",
    "cli_main",
    "main",
]
