"""Configuration loading for the flight path engine."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from configs.validator import validate_config
from exceptions import InvalidConfigError
from flightpath.chart import ChartLayout
from flightpath.generator import GeneratorSettings
from log_config.logger import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).with_name("default.yaml")
SECTIONS = ("generator", "canvas", "serializer", "chart", "logging", "upload")


@dataclass(frozen=True)
class CanvasSettings:
    lateral_px_per_ft: float


@dataclass(frozen=True)
class SerializerConfig:
    name: str
    precision: int


@dataclass(frozen=True)
class LoggingConfig:
    level: str
    logs_dir: Optional[str]


@dataclass(frozen=True)
class UploadConfig:
    enabled: bool
    api_base: str
    api_key: str
    report_path: str = "/flight-path/anchors"
    timeout_s: float = 10.0


@dataclass(frozen=True)
class AppConfig:
    generator: GeneratorSettings
    canvas: CanvasSettings
    serializer: SerializerConfig
    chart: ChartLayout
    logging: LoggingConfig
    upload: UploadConfig


def load_config(path: Optional[Path] = None) -> AppConfig:
    """Load and validate configuration from YAML file.

    Args:
        path: Path to configuration file (packaged default.yaml when None)

    Returns:
        Validated AppConfig instance

    Raises:
        ConfigError: If configuration is invalid or cannot be loaded
    """
    path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    try:
        logger.info(f"Loading configuration from {path}")
        if not path.exists():
            raise InvalidConfigError(f"Configuration file not found: {path}")

        data = yaml.safe_load(path.read_text()) or {}
        if not isinstance(data, dict):
            raise InvalidConfigError(f"Configuration root must be a mapping: {path}")
        for section in SECTIONS:
            if data.get(section) is None:
                data[section] = {}

        # Validate against JSON Schema (fills defaults)
        validate_config(data)

    except yaml.YAMLError as e:
        logger.error(f"Failed to parse YAML configuration: {e}")
        raise InvalidConfigError(f"Failed to parse configuration file: {e}")

    return config_from_dict(data)


def config_from_dict(data: dict) -> AppConfig:
    """Build an AppConfig from an already validated dictionary."""
    try:
        config = AppConfig(
            generator=GeneratorSettings(**data["generator"]),
            canvas=CanvasSettings(**data["canvas"]),
            serializer=SerializerConfig(**data["serializer"]),
            chart=ChartLayout(**data["chart"]),
            logging=LoggingConfig(**data["logging"]),
            upload=UploadConfig(**data["upload"]),
        )
    except (KeyError, TypeError, ValueError) as e:
        logger.error(f"Failed to construct configuration objects: {e}")
        raise InvalidConfigError(f"Failed to construct configuration: {e}")

    logger.info(
        f"Configuration loaded: {config.serializer.name} serializer, "
        f"{config.generator.sample_count} samples per curve"
    )
    return config
