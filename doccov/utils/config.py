"""Configuration loader and validator for the documentation coverage tool.

Loads settings from configs/config.yaml and provides typed access
to all configuration sections via dataclasses.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence

import yaml

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "configs" / "config.yaml"

_LIMIT_FIELDS = ("min_package", "min_interface", "min_class", "min_method")


class ConfigError(ValueError):
    """Raised when a configuration value is invalid."""


@dataclass(frozen=True)
class CoverageLimits:
    """Minimum coverage percentages required per element level.

    Attributes:
        min_package: Minimum coverage for each package.
        min_interface: Minimum coverage for each interface.
        min_class: Minimum coverage for each class, enum or annotation type.
        min_method: Minimum coverage for each method or constructor.
    """

    min_package: float = 0.0
    min_interface: float = 0.0
    min_class: float = 0.0
    min_method: float = 0.0

    @classmethod
    def from_values(cls, values: Sequence) -> "CoverageLimits":
        """Build limits from four values in package/interface/class/method order.

        Args:
            values: Four numbers or numeric strings.

        Returns:
            A CoverageLimits instance.

        Raises:
            ConfigError: If the number of values is wrong, or a value is not
                a number between 0 and 100.
        """
        if len(values) != len(_LIMIT_FIELDS):
            raise ConfigError(
                f"Expected {len(_LIMIT_FIELDS)} minimum coverage values, "
                f"got {len(values)}"
            )

        parsed = []
        for name, value in zip(_LIMIT_FIELDS, values):
            try:
                number = float(value)
            except (TypeError, ValueError):
                raise ConfigError(f"{name} is not a number: {value!r}") from None
            if not 0.0 <= number <= 100.0:
                raise ConfigError(f"{name} must be between 0 and 100: {number}")
            parsed.append(number)
        return cls(*parsed)


@dataclass(frozen=True)
class CoverageConfig:
    """Options that change how coverage is counted.

    Attributes:
        public_only: Count only public types and members.
        limits: Minimum coverage percentages to enforce.
    """

    public_only: bool = False
    limits: CoverageLimits = field(default_factory=CoverageLimits)


@dataclass
class OutputConfig:
    """Configuration for coverage report output."""

    default_format: str = "console"
    output_dir: str = "."
    output_name: str = "doc-coverage"


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: Optional[str] = None


@dataclass
class AppConfig:
    """Top-level application configuration."""

    coverage: CoverageConfig = field(default_factory=CoverageConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _build_limits(data: dict) -> CoverageLimits:
    """Build CoverageLimits from a dictionary.

    Args:
        data: Dictionary with any of the min_* keys.

    Returns:
        A validated CoverageLimits instance.
    """
    return CoverageLimits.from_values([data.get(name, 0.0) for name in _LIMIT_FIELDS])


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """Load application configuration from a YAML file.

    Reads the YAML config file and constructs a fully typed AppConfig
    object. Falls back to defaults for any missing values.

    Args:
        config_path: Path to the YAML config file. If None, uses the
            default path at configs/config.yaml.

    Returns:
        A fully populated AppConfig instance.

    Raises:
        yaml.YAMLError: If the config file contains invalid YAML.
        ConfigError: If a coverage limit is invalid.
    """
    path = Path(config_path) if config_path else _DEFAULT_CONFIG_PATH

    if not path.exists():
        logger.warning("Config file not found at %s, using defaults", path)
        return AppConfig()

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    logger.info("Loaded configuration from %s", path)

    coverage_data = raw.get("coverage", {})
    coverage_config = CoverageConfig(
        public_only=coverage_data.get("public_only", False),
        limits=_build_limits(coverage_data.get("limits", {})),
    )

    output_data = raw.get("output", {})
    output_config = OutputConfig(
        default_format=output_data.get("default_format", "console"),
        output_dir=output_data.get("output_dir", "."),
        output_name=output_data.get("output_name", "doc-coverage"),
    )

    logging_data = raw.get("logging", {})
    logging_config = LoggingConfig(
        level=logging_data.get("level", "INFO"),
        format=logging_data.get(
            "format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        ),
        file=logging_data.get("file"),
    )

    return AppConfig(
        coverage=coverage_config,
        output=output_config,
        logging=logging_config,
    )
