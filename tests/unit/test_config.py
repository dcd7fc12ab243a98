"""
Unit tests for bootstrap configuration.
"""

import json
import logging

import pytest

from aeroweight.bootstrap import config as config_module
from aeroweight.bootstrap.config import (
    EstimatorConfig,
    get_config,
    load_config,
)
from aeroweight.errors import ConfigurationError


class TestDefaults:
    """Tests for configuration without files or environment."""

    def test_design_point(self):
        config = EstimatorConfig.from_env()
        assert config.design_point.design_gross_weight_lb == 84350.0
        assert config.design_point.ultimate_load_factor == 3.75

    def test_report_and_logging(self):
        config = EstimatorConfig.from_env()
        assert config.report.mass_unit == "lb"
        assert config.report.output_format == "text"
        assert config.report.precision == 2
        assert config.logging.level == "WARNING"
        assert config.logging.log_file is None
        assert config.policy.allow_negative_weight is False


class TestEnvironment:
    """Tests for AEROWEIGHT_* overrides."""

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("AEROWEIGHT_DESIGN_GROSS_WEIGHT", "60000")
        monkeypatch.setenv("AEROWEIGHT_MASS_UNIT", "KG")
        monkeypatch.setenv("AEROWEIGHT_ALLOW_NEGATIVE_WEIGHT", "true")
        monkeypatch.setenv("AEROWEIGHT_LOG_FILE", "/tmp/aeroweight.log")
        config = EstimatorConfig.from_env()
        assert config.design_point.design_gross_weight_lb == 60000.0
        assert config.report.mass_unit == "kg"
        assert config.policy.allow_negative_weight is True
        assert config.logging.log_file == "/tmp/aeroweight.log"

    def test_invalid_number(self, monkeypatch):
        monkeypatch.setenv("AEROWEIGHT_ULTIMATE_LOAD_FACTOR", "high")
        with pytest.raises(ConfigurationError, match="AEROWEIGHT_ULTIMATE_LOAD_FACTOR"):
            EstimatorConfig.from_env()

    def test_negative_precision(self, monkeypatch):
        monkeypatch.setenv("AEROWEIGHT_PRECISION", "-1")
        with pytest.raises(ConfigurationError, match="report.precision"):
            EstimatorConfig.from_env()

    def test_invalid_choice(self, monkeypatch):
        monkeypatch.setenv("AEROWEIGHT_OUTPUT_FORMAT", "xml")
        with pytest.raises(ConfigurationError):
            EstimatorConfig.from_env()


class TestConfigFile:
    """Tests for JSON configuration files."""

    def test_from_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({
            "design_point": {"design_gross_weight_lb": 50000.0},
            "report": {"output_format": "json", "precision": 4},
        }))
        config = EstimatorConfig.from_file(str(path))
        assert config.design_point.design_gross_weight_lb == 50000.0
        assert config.design_point.ultimate_load_factor == 3.75
        assert config.report.output_format == "json"
        assert config.report.precision == 4

    def test_file_on_top_of_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("AEROWEIGHT_ULTIMATE_LOAD_FACTOR", "4.5")
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"report": {"mass_unit": "kg"}}))
        config = EstimatorConfig.from_file(str(path))
        assert config.design_point.ultimate_load_factor == 4.5
        assert config.report.mass_unit == "kg"

    def test_missing_file_falls_back(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING, logger="bootstrap.config"):
            config = EstimatorConfig.from_file(str(tmp_path / "absent.json"))
        assert config.design_point.design_gross_weight_lb == 84350.0
        assert "Config file not found" in caplog.text

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")
        with pytest.raises(ConfigurationError, match="not valid JSON"):
            EstimatorConfig.from_file(str(path))

    def test_unknown_key_ignored(self, tmp_path, caplog):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"report": {"colour": "red"}}))
        with caplog.at_level(logging.WARNING, logger="bootstrap.config"):
            config = EstimatorConfig.from_file(str(path))
        assert not hasattr(config.report, "colour")
        assert "report.colour" in caplog.text

    def test_invalid_values_rejected(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"design_point": {"ultimate_load_factor": "high"}}))
        with pytest.raises(ConfigurationError, match="ultimate_load_factor"):
            EstimatorConfig.from_file(str(path))

    @pytest.mark.parametrize("section, key, value", [
        ("report", "precision", "2"),
        ("report", "precision", -1),
        ("report", "precision", True),
        ("policy", "allow_negative_weight", "yes"),
        ("logging", "json_logs", 1),
    ])
    def test_wrong_typed_values_rejected(self, tmp_path, section, key, value):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({section: {key: value}}))
        with pytest.raises(ConfigurationError, match=f"{section}.{key}"):
            EstimatorConfig.from_file(str(path))

    def test_log_format_from_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"logging": {"format": "%(levelname)s %(message)s"}}))
        config = EstimatorConfig.from_file(str(path))
        assert config.logging.format == "%(levelname)s %(message)s"

    def test_to_dict_round_trip(self):
        config = EstimatorConfig()
        config.report.precision = 3
        restored = EstimatorConfig._from_dict(config.to_dict())
        assert restored.to_dict() == config.to_dict()


class TestLoadConfig:
    """Tests for the global configuration."""

    def test_environment_fallback(self):
        config = load_config()
        assert config.design_point.design_gross_weight_lb == 84350.0
        assert get_config() is config

    def test_default_location(self, tmp_path):
        (tmp_path / "aeroweight.json").write_text(
            json.dumps({"design_point": {"ultimate_load_factor": 5.0}})
        )
        assert load_config().design_point.ultimate_load_factor == 5.0

    def test_home_location(self, tmp_path):
        home_dir = tmp_path / ".aeroweight"
        home_dir.mkdir()
        (home_dir / "config.json").write_text(json.dumps({"report": {"mass_unit": "kg"}}))
        assert load_config().report.mass_unit == "kg"

    def test_get_config_loads_once(self):
        assert config_module._config is None
        first = get_config()
        assert get_config() is first
