"""
bootstrap/entrypoints.py - Command line entry point

    aeroweight [options] PARAMS.csv [PARAMS.csv ...]

Loads the parameter table, builds the aircraft, and prints empty weight
and CG.

Exit codes:
    0  success
    1  estimation failure (missing parameter, invalid geometry, ...)
    2  input or configuration error (unreadable or malformed parameters)
"""

from __future__ import annotations
from typing import List, Optional
import argparse
import json
import logging
import sys

from aeroweight.core.parameters import ParameterSet, load_parameters
from aeroweight.core.units import UnitConverter
from aeroweight.errors import ConfigurationError, ErrorReport, ParameterParseError
from aeroweight.weight import Aircraft, ComponentEstimate, WeightBalanceSummary, WeightPolicy
from .config import DEFAULT_LOG_FORMAT, EstimatorConfig, MASS_UNITS, OUTPUT_FORMATS, load_config

logger = logging.getLogger("bootstrap.entrypoints")

EXIT_OK = 0
EXIT_ESTIMATION_FAILED = 1
EXIT_INPUT_ERROR = 2

_HANDLER_MARK = "_aeroweight_handler"


def setup_logging(
    level: str = "WARNING",
    log_file: str = None,
    json_format: bool = False,
    log_format: str = DEFAULT_LOG_FORMAT,
) -> None:
    """
    Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional log file path
        json_format: Use JSON format for logs
        log_format: Format string for text logs
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    if json_format:
        class JSONFormatter(logging.Formatter):
            def format(self, record):
                return json.dumps({
                    "timestamp": self.formatTime(record),
                    "level": record.levelname,
                    "logger": record.name,
                    "message": record.getMessage(),
                })

        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(log_format)

    root_logger = logging.getLogger()
    # Replace handlers from an earlier call in the same process
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            root_logger.removeHandler(handler)
            handler.close()

    # Console handler; stdout is reserved for the report
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)
    setattr(console_handler, _HANDLER_MARK, True)

    root_logger.setLevel(log_level)
    root_logger.addHandler(console_handler)

    # File handler
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(log_level)
        setattr(file_handler, _HANDLER_MARK, True)
        root_logger.addHandler(file_handler)


# =============================================================================
# REPORT FORMATTING
# =============================================================================

def _mass(value_lb: float, unit: str) -> float:
    return UnitConverter.normalize(value_lb, "lb", unit)


def _format_breakdown(
    estimate: ComponentEstimate,
    unit: str,
    precision: int,
    depth: int = 0,
) -> List[str]:
    label = "  " * depth + estimate.name
    lines = [
        f"{label:<32} {_mass(estimate.weight_lb, unit):>12.{precision}f} {unit}"
        f"   x={estimate.cg.x:.{precision}f} ft"
    ]
    for child in estimate.children:
        lines.extend(_format_breakdown(child, unit, precision, depth + 1))
    return lines


def format_summary(
    summary: WeightBalanceSummary,
    unit: str = "lb",
    precision: int = 2,
    full: bool = False,
    breakdown: bool = False,
) -> str:
    """Human readable weight & balance report."""
    p = precision
    lines = [
        f"Empty weight: {_mass(summary.total_weight_lb, unit):.{p}f} {unit} "
        f"({summary.empty_weight_fraction * 100:.1f}% of design gross weight)",
        f"CG x: {summary.cg.x:.{p}f} ft",
    ]
    if full:
        lines.append(f"CG y: {summary.cg.y:.{p}f} ft")
        lines.append(f"CG z: {summary.cg.z:.{p}f} ft")

    if breakdown:
        lines.append("")
        for component in summary.components:
            lines.extend(_format_breakdown(component, unit, p))
        lines.append("")
        for group, group_summary in summary.group_summaries.items():
            lines.append(
                f"{group_summary.name:<32} "
                f"{_mass(group_summary.total_weight_lb, unit):>12.{p}f} {unit}"
                f"   {summary.get_group_percentage(group):5.1f}%"
            )
    return "\n".join(lines)


def summary_to_json(summary: WeightBalanceSummary, unit: str = "lb") -> str:
    data = summary.to_dict()
    if unit != "lb":
        data["empty_weight"][f"weight_{unit}"] = round(_mass(summary.total_weight_lb, unit), 6)
    return json.dumps(data, indent=2, sort_keys=True)


def format_report(report: ErrorReport) -> str:
    """Diagnostic report for --check."""
    lines = [e.describe() for e in report.all_errors]
    if report.missing_symbols:
        lines.append(f"Missing symbols: {', '.join(report.missing_symbols)}")
    lines.append(report.summary)
    return "\n".join(lines)


# =============================================================================
# CLI
# =============================================================================

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Aircraft class II weight & balance estimator",
        prog="aeroweight",
    )

    parser.add_argument(
        "parameter_files",
        nargs="*",
        metavar="PARAMS.csv",
        help="Parameter list(s); later files override earlier ones",
    )
    parser.add_argument(
        "-c", "--config",
        help="Path to configuration file",
        default=None,
    )
    parser.add_argument(
        "--w-dg",
        type=float,
        help="Design gross weight (lb)",
        default=None,
    )
    parser.add_argument(
        "--n-z",
        type=float,
        help="Ultimate load factor",
        default=None,
    )
    parser.add_argument(
        "--full",
        action="store_true",
        help="Also print CG y and z",
    )
    parser.add_argument(
        "--breakdown",
        action="store_true",
        help="Print per-component and per-group breakdown",
    )
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format",
    )
    parser.add_argument(
        "--mass-unit",
        choices=MASS_UNITS,
        default=None,
        help="Unit for reported weights",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Report every missing or invalid parameter instead of stopping at the first",
    )
    parser.add_argument(
        "--list-symbols",
        action="store_true",
        help="List every parameter symbol the model reads",
    )
    parser.add_argument(
        "--allow-negative-weight",
        action="store_true",
        help="Warn about negative component weights instead of failing",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log level",
    )
    parser.add_argument(
        "--log-file",
        help="Log file path",
        default=None,
    )
    return parser


def _apply_overrides(config: EstimatorConfig, parsed: argparse.Namespace) -> None:
    """CLI flags take precedence over the loaded configuration."""
    if parsed.w_dg is not None:
        config.design_point.design_gross_weight_lb = parsed.w_dg
    if parsed.n_z is not None:
        config.design_point.ultimate_load_factor = parsed.n_z
    if parsed.allow_negative_weight:
        config.policy.allow_negative_weight = True
    if parsed.format:
        config.report.output_format = parsed.format
    if parsed.mass_unit:
        config.report.mass_unit = parsed.mass_unit
    if parsed.verbose:
        config.logging.level = "DEBUG"
    elif parsed.log_level:
        config.logging.level = parsed.log_level
    if parsed.log_file:
        config.logging.log_file = parsed.log_file


def cli_main(args: Optional[List[str]] = None) -> int:
    """
    CLI entry point.

    Args:
        args: Command line arguments (defaults to sys.argv)

    Returns:
        Exit code
    """
    parsed = _build_parser().parse_args(args)

    try:
        config = load_config(parsed.config)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    _apply_overrides(config, parsed)

    setup_logging(
        level=config.logging.level,
        log_file=config.logging.log_file,
        json_format=config.logging.json_logs,
        log_format=config.logging.format,
    )

    if parsed.list_symbols:
        for symbol in Aircraft.from_parameters(ParameterSet()).required_symbols():
            print(symbol)
        return EXIT_OK

    if not parsed.parameter_files:
        print("No parameter file given", file=sys.stderr)
        return EXIT_INPUT_ERROR

    try:
        parameters = load_parameters(*parsed.parameter_files)
    except FileNotFoundError as e:
        print(f"Parameter file not found: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    except ParameterParseError as e:
        print(str(e), file=sys.stderr)
        return EXIT_INPUT_ERROR

    policy = WeightPolicy(allow_negative_weight=config.policy.allow_negative_weight)
    aircraft = Aircraft.from_parameters(parameters, policy)
    w_dg = config.design_point.design_gross_weight_lb
    n_z = config.design_point.ultimate_load_factor

    if parsed.check:
        report = aircraft.diagnose(w_dg, n_z)
        if config.report.output_format == "json":
            print(json.dumps(report.to_dict(), indent=2, sort_keys=True, default=str))
        else:
            print(format_report(report))
        return EXIT_OK if report.ok else EXIT_ESTIMATION_FAILED

    result = aircraft.compute(w_dg, n_z)
    if result.is_failure:
        print(f"Estimation failed: {result.error.describe()}", file=sys.stderr)
        return EXIT_ESTIMATION_FAILED

    unit = config.report.mass_unit
    if config.report.output_format == "json":
        print(summary_to_json(result.value, unit))
    else:
        print(format_summary(
            result.value,
            unit=unit,
            precision=config.report.precision,
            full=parsed.full,
            breakdown=parsed.breakdown,
        ))
    return EXIT_OK


def main():
    """Main entry point for the package."""
    sys.exit(cli_main(sys.argv[1:]))


if __name__ == "__main__":
    main()
