"""
bootstrap/config.py - Estimator configuration

Provides configuration loading from files, environment variables, and defaults.
Command line flags override whatever is loaded here.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional
from pathlib import Path
import os
import json
import logging

from aeroweight.errors import ConfigurationError

logger = logging.getLogger("bootstrap.config")

ENV_PREFIX = "AEROWEIGHT_"

MASS_UNITS = ("lb", "kg")
OUTPUT_FORMATS = ("text", "json")
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _env(name: str, default: str, convert: Callable[[str], Any] = str) -> Any:
    """Read AEROWEIGHT_<name>, converting and reporting bad values."""
    key = f"{ENV_PREFIX}{name}"
    raw = os.getenv(key, default)
    try:
        return convert(raw)
    except ValueError as e:
        raise ConfigurationError(f"Invalid value for {key}: {raw!r} ({e})") from e


def _flag(raw: str) -> bool:
    return raw.lower() == "true"


def _choice(options) -> Callable[[str], str]:
    def convert(raw: str) -> str:
        value = raw.lower()
        if value not in options:
            raise ValueError(f"expected one of {', '.join(options)}")
        return value
    return convert


@dataclass
class DesignPointConfig:
    """Aircraft-level scalars every weight formula is evaluated at."""

    design_gross_weight_lb: float = 84350.0
    ultimate_load_factor: float = 3.75  # 1.5 x limit load factor

    @classmethod
    def from_env(cls) -> "DesignPointConfig":
        return cls(
            design_gross_weight_lb=_env("DESIGN_GROSS_WEIGHT", "84350.0", float),
            ultimate_load_factor=_env("ULTIMATE_LOAD_FACTOR", "3.75", float),
        )


@dataclass
class PolicyConfig:
    """Weight checking policy."""

    allow_negative_weight: bool = False

    @classmethod
    def from_env(cls) -> "PolicyConfig":
        return cls(
            allow_negative_weight=_env("ALLOW_NEGATIVE_WEIGHT", "false", _flag),
        )


@dataclass
class ReportConfig:
    """Report output settings."""

    mass_unit: str = "lb"
    output_format: str = "text"
    precision: int = 2

    @classmethod
    def from_env(cls) -> "ReportConfig":
        return cls(
            mass_unit=_env("MASS_UNIT", "lb", _choice(MASS_UNITS)),
            output_format=_env("OUTPUT_FORMAT", "text", _choice(OUTPUT_FORMATS)),
            precision=_env("PRECISION", "2", int),
        )


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"
    format: str = DEFAULT_LOG_FORMAT
    log_file: Optional[str] = None
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        return cls(
            level=_env("LOG_LEVEL", "WARNING"),
            format=_env("LOG_FORMAT", DEFAULT_LOG_FORMAT),
            log_file=os.getenv(f"{ENV_PREFIX}LOG_FILE"),
            json_logs=_env("JSON_LOGS", "false", _flag),
        )


@dataclass
class EstimatorConfig:
    """Root configuration for the estimator."""

    design_point: DesignPointConfig = field(default_factory=DesignPointConfig)
    policy: PolicyConfig = field(default_factory=PolicyConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> "EstimatorConfig":
        """Create configuration from environment variables."""
        config = cls(
            design_point=DesignPointConfig.from_env(),
            policy=PolicyConfig.from_env(),
            report=ReportConfig.from_env(),
            logging=LoggingConfig.from_env(),
        )
        config.validate()
        return config

    @classmethod
    def from_file(cls, filepath: str) -> "EstimatorConfig":
        """Load configuration from JSON file."""
        path = Path(filepath)
        if not path.exists():
            logger.warning(f"Config file not found: {filepath}, using environment")
            return cls.from_env()

        try:
            with open(path) as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Config file {filepath} is not valid JSON: {e}") from e

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> "EstimatorConfig":
        """Create config from dictionary, on top of the environment."""
        config = cls.from_env()

        for section in ("design_point", "policy", "report", "logging"):
            if section not in data:
                continue
            target = getattr(config, section)
            for key, value in data[section].items():
                if hasattr(target, key):
                    setattr(target, key, value)
                else:
                    logger.warning(f"Ignoring unknown config key: {section}.{key}")

        config.validate()
        return config

    def validate(self) -> None:
        """Raise ConfigurationError for values no estimate can run with."""
        if self.report.mass_unit not in MASS_UNITS:
            raise ConfigurationError(f"report.mass_unit must be one of {MASS_UNITS}")
        if self.report.output_format not in OUTPUT_FORMATS:
            raise ConfigurationError(f"report.output_format must be one of {OUTPUT_FORMATS}")
        for name in ("design_gross_weight_lb", "ultimate_load_factor"):
            value = getattr(self.design_point, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigurationError(f"design_point.{name} must be a number, got {value!r}")
        precision = self.report.precision
        if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
            raise ConfigurationError(
                f"report.precision must be a non-negative integer, got {precision!r}"
            )
        for name, value in (
            ("policy.allow_negative_weight", self.policy.allow_negative_weight),
            ("logging.json_logs", self.logging.json_logs),
        ):
            if not isinstance(value, bool):
                raise ConfigurationError(f"{name} must be true or false, got {value!r}")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize config to dictionary."""
        return {
            "design_point": {
                "design_gross_weight_lb": self.design_point.design_gross_weight_lb,
                "ultimate_load_factor": self.design_point.ultimate_load_factor,
            },
            "policy": {
                "allow_negative_weight": self.policy.allow_negative_weight,
            },
            "report": {
                "mass_unit": self.report.mass_unit,
                "output_format": self.report.output_format,
                "precision": self.report.precision,
            },
            "logging": {
                "level": self.logging.level,
                "format": self.logging.format,
                "log_file": self.logging.log_file,
                "json_logs": self.logging.json_logs,
            },
        }


# Global config instance
_config: Optional[EstimatorConfig] = None


def load_config(filepath: str = None) -> EstimatorConfig:
    """
    Load configuration from file or environment.

    Args:
        filepath: Optional path to JSON config file

    Returns:
        EstimatorConfig instance
    """
    global _config

    if filepath:
        _config = EstimatorConfig.from_file(filepath)
    else:
        # Try default locations
        default_paths = [
            "./aeroweight.json",
            os.path.expanduser("~/.aeroweight/config.json"),
        ]

        for path in default_paths:
            if Path(path).exists():
                logger.info(f"Loading config from: {path}")
                _config = EstimatorConfig.from_file(path)
                return _config

        # Fall back to environment
        _config = EstimatorConfig.from_env()

    logger.info(
        f"Configuration loaded: W_dg={_config.design_point.design_gross_weight_lb} lb, "
        f"N_z={_config.design_point.ultimate_load_factor}"
    )
    return _config


def get_config() -> EstimatorConfig:
    """Get current configuration, loading if needed."""
    global _config
    if _config is None:
        _config = load_config()
    return _config
