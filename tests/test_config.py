"""Tests for configuration loading and validation."""

from pathlib import Path

import pytest
import yaml

from doccov.utils.config import (
    AppConfig,
    ConfigError,
    CoverageConfig,
    CoverageLimits,
    LoggingConfig,
    OutputConfig,
    load_config,
)


class TestAppConfigDefaults:
    """Tests for AppConfig with all defaults."""

    def test_default_construction(self) -> None:
        config = AppConfig()
        assert isinstance(config.coverage, CoverageConfig)
        assert isinstance(config.output, OutputConfig)
        assert isinstance(config.logging, LoggingConfig)

    def test_default_coverage(self) -> None:
        config = AppConfig()
        assert config.coverage.public_only is False
        assert config.coverage.limits == CoverageLimits()

    def test_default_output(self) -> None:
        config = AppConfig()
        assert config.output.default_format == "console"
        assert config.output.output_name == "doc-coverage"

    def test_coverage_config_is_immutable(self) -> None:
        config = CoverageConfig()
        with pytest.raises(AttributeError):
            config.public_only = True


class TestLoadConfig:
    """Tests for the load_config function."""

    def test_load_default_config(self) -> None:
        config = load_config()
        assert isinstance(config, AppConfig)
        assert config.coverage.public_only is False
        assert config.logging.level == "INFO"

    def test_load_from_explicit_path(self, tmp_path: Path) -> None:
        config_data = {
            "coverage": {
                "public_only": True,
                "limits": {"min_package": 50, "min_method": 25.5},
            },
            "output": {"default_format": "html", "output_name": "report"},
            "logging": {"level": "DEBUG"},
        }
        config_file = tmp_path / "test_config.yaml"
        with open(config_file, "w") as f:
            yaml.dump(config_data, f)

        config = load_config(str(config_file))
        assert config.coverage.public_only is True
        assert config.coverage.limits == CoverageLimits(50.0, 0.0, 0.0, 25.5)
        assert config.output.default_format == "html"
        assert config.output.output_name == "report"
        assert config.output.output_dir == "."
        assert config.logging.level == "DEBUG"

    def test_load_nonexistent_returns_defaults(self, tmp_path: Path) -> None:
        config = load_config(str(tmp_path / "nonexistent.yaml"))
        assert config == AppConfig()

    def test_load_empty_file_returns_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")
        config = load_config(str(config_file))
        assert config == AppConfig()

    def test_invalid_limit(self, tmp_path: Path) -> None:
        config_file = tmp_path / "bad.yaml"
        config_file.write_text(yaml.dump({"coverage": {"limits": {"min_class": -1}}}))
        with pytest.raises(ConfigError, match="min_class"):
            load_config(str(config_file))
