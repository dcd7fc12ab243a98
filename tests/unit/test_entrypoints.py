"""
Unit tests for the command line entry point.
"""

import json
import logging

import pytest

from aeroweight.bootstrap.entrypoints import (
    EXIT_ESTIMATION_FAILED,
    EXIT_INPUT_ERROR,
    EXIT_OK,
    cli_main,
    setup_logging,
)


def _marked_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, "_aeroweight_handler", False)]


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Drop handlers cli_main installs so they do not outlive capsys."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in _marked_handlers():
        root.removeHandler(handler)
        handler.close()
    root.setLevel(level)


class TestTextReport:
    """Tests for the default text output."""

    def test_success(self, jet_csv, capsys):
        assert cli_main([str(jet_csv)]) == EXIT_OK
        out = capsys.readouterr().out
        assert out.startswith("Empty weight: ")
        assert "of design gross weight" in out
        assert "CG x: " in out
        assert "CG y: " not in out

    def test_full(self, jet_csv, capsys):
        assert cli_main([str(jet_csv), "--full"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "CG y: " in out
        assert "CG z: " in out

    def test_breakdown(self, jet_csv, capsys):
        assert cli_main([str(jet_csv), "--breakdown"]) == EXIT_OK
        out = capsys.readouterr().out
        for name in ("wings", "fuselage", "tailplane", "wing_structure", "avionics"):
            assert name in out
        assert "Fixed Equipment" in out

    def test_mass_unit_kg(self, jet_csv, capsys):
        assert cli_main([str(jet_csv), "--mass-unit", "kg"]) == EXIT_OK
        first_line = capsys.readouterr().out.splitlines()[0]
        assert " kg " in first_line


class TestJsonReport:
    """Tests for --format json."""

    def test_json(self, jet_csv, capsys):
        assert cli_main([str(jet_csv), "--format", "json"]) == EXIT_OK
        data = json.loads(capsys.readouterr().out)
        assert data["design_point"]["design_gross_weight_lb"] == 84350.0
        assert data["empty_weight"]["weight_lb"] > 0
        assert [c["name"] for c in data["components"]] == ["wings", "fuselage", "tailplane"]

    def test_json_kg(self, jet_csv, capsys):
        assert cli_main([str(jet_csv), "--format", "json", "--mass-unit", "kg"]) == EXIT_OK
        empty = json.loads(capsys.readouterr().out)["empty_weight"]
        assert empty["weight_kg"] == pytest.approx(empty["weight_lb"] * 0.453592, rel=1e-6)

    def test_design_point_override(self, jet_csv, capsys):
        assert cli_main([str(jet_csv), "--format", "json", "--w-dg", "90000", "--n-z", "4.5"]) == EXIT_OK
        design_point = json.loads(capsys.readouterr().out)["design_point"]
        assert design_point == {"design_gross_weight_lb": 90000.0, "ultimate_load_factor": 4.5}

    def test_config_file(self, jet_csv, tmp_path, capsys):
        config = tmp_path / "run.json"
        config.write_text(json.dumps({"report": {"output_format": "json"}}))
        assert cli_main([str(jet_csv), "-c", str(config)]) == EXIT_OK
        assert "empty_weight" in json.loads(capsys.readouterr().out)


class TestFailures:
    """Tests for exit codes on bad input."""

    def test_no_file(self, capsys):
        assert cli_main([]) == EXIT_INPUT_ERROR
        assert "No parameter file given" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        assert cli_main([str(tmp_path / "absent.csv")]) == EXIT_INPUT_ERROR
        assert "not found" in capsys.readouterr().err

    def test_malformed_file(self, write_csv, capsys):
        path = write_csv("symbol,value\ns_w,abc\n")
        assert cli_main([str(path)]) == EXIT_INPUT_ERROR
        assert "malformed parameter row" in capsys.readouterr().err

    def test_undecodable_file(self, tmp_path, capsys):
        path = tmp_path / "latin.csv"
        path.write_bytes(b"symbol,value\ns_w,1000\n\xff\xfe,3\n")
        assert cli_main([str(path)]) == EXIT_INPUT_ERROR
        assert "not valid UTF-8" in capsys.readouterr().err

    def test_estimation_failure(self, write_csv, capsys):
        path = write_csv({"s_w": 1000.0})
        assert cli_main([str(path)]) == EXIT_ESTIMATION_FAILED
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Estimation failed: [PAR_MISSING]" in captured.err

    def test_invalid_config(self, jet_csv, tmp_path, capsys):
        config = tmp_path / "broken.json"
        config.write_text("{")
        assert cli_main([str(jet_csv), "-c", str(config)]) == EXIT_INPUT_ERROR
        assert "Configuration error" in capsys.readouterr().err


class TestCheckAndSymbols:
    """Tests for --check and --list-symbols."""

    def test_check_ok(self, jet_csv, capsys):
        assert cli_main([str(jet_csv), "--check"]) == EXIT_OK
        assert "No significant issues" in capsys.readouterr().out

    def test_check_reports_missing(self, write_csv, capsys):
        path = write_csv({"s_w": 1000.0})
        assert cli_main([str(path), "--check"]) == EXIT_ESTIMATION_FAILED
        out = capsys.readouterr().out
        assert "Missing symbols: " in out
        assert "w_uav" in out

    def test_check_json(self, write_csv, capsys):
        path = write_csv({"s_w": 1000.0})
        assert cli_main([str(path), "--check", "--format", "json"]) == EXIT_ESTIMATION_FAILED
        data = json.loads(capsys.readouterr().out)
        assert data["total_errors"] > 0
        assert "s_w" not in data["missing_symbols"]

    def test_list_symbols(self, capsys):
        assert cli_main(["--list-symbols"]) == EXIT_OK
        symbols = capsys.readouterr().out.split()
        assert "s_w" in symbols
        assert "x_cg_apu" in symbols
        assert len(symbols) == len(set(symbols))


class TestSetupLogging:
    """Tests for logging setup."""

    def test_repeated_setup_replaces_handlers(self):
        setup_logging("INFO")
        setup_logging("DEBUG")
        assert len(_marked_handlers()) == 1
        assert logging.getLogger().level == logging.DEBUG

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "run.log"
        setup_logging("INFO", log_file=str(log_file))
        assert len(_marked_handlers()) == 2
        logging.getLogger("aeroweight.test").info("hello")
        for handler in _marked_handlers():
            handler.flush()
        assert "hello" in log_file.read_text()

    def test_log_format(self, tmp_path):
        log_file = tmp_path / "run.log"
        setup_logging("INFO", log_file=str(log_file), log_format="%(levelname)s|%(message)s")
        logging.getLogger("aeroweight.test").info("formatted")
        for handler in _marked_handlers():
            handler.flush()
        assert log_file.read_text().strip() == "INFO|formatted"

    def test_cli_uses_configured_format(self, jet_csv, tmp_path, capsys):
        log_file = tmp_path / "cli.log"
        config = tmp_path / "run.json"
        config.write_text(json.dumps({"logging": {
            "level": "INFO",
            "format": "AW %(levelname)s %(message)s",
            "log_file": str(log_file),
        }}))
        assert cli_main([str(jet_csv), "-c", str(config)]) == EXIT_OK
        for handler in _marked_handlers():
            handler.flush()
        lines = log_file.read_text().splitlines()
        assert lines
        assert all(line.startswith("AW ") for line in lines)

    def test_unknown_level_defaults_to_warning(self):
        setup_logging("LOUD")
        assert logging.getLogger().level == logging.WARNING
