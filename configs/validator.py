"""Configuration validation using JSON Schema."""

from __future__ import annotations

from typing import Any, Dict

import jsonschema
from jsonschema import Draft7Validator, validators

from exceptions import ConfigValidationError
from log_config.logger import get_logger

logger = get_logger(__name__)

# JSON Schema for default.yaml configuration
CONFIG_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "properties": {
        "generator": {
            "type": "object",
            "properties": {
                "sample_count": {"type": "integer", "minimum": 2, "maximum": 500, "default": 24},
                "turn_ft_per_point": {"type": "number", "minimum": 0, "maximum": 100, "default": 8.0},
                "fade_ft_per_point": {"type": "number", "minimum": 0, "maximum": 100, "default": 10.0},
                "release_bias_ft": {"type": "number", "exclusiveMinimum": 0, "maximum": 200, "default": 20.0},
                "bias_ramp": {"type": "number", "minimum": 0.0, "maximum": 1.0, "default": 0.35},
                "reference_carry_ft": {"type": "number", "exclusiveMinimum": 0, "maximum": 1000, "default": 250.0},
                "fallback_distance_ft": {"type": "number", "exclusiveMinimum": 0, "maximum": 400, "default": 100.0},
            },
        },
        "canvas": {
            "type": "object",
            "properties": {
                "lateral_px_per_ft": {"type": "number", "exclusiveMinimum": 0, "maximum": 10, "default": 0.5},
            },
        },
        "serializer": {
            "type": "object",
            "properties": {
                "name": {"type": "string", "enum": ["svg_cubic", "svg_polyline", "points"], "default": "svg_cubic"},
                "precision": {"type": "integer", "minimum": 0, "maximum": 6, "default": 2},
            },
        },
        "chart": {
            "type": "object",
            "properties": {
                "width": {"type": "number", "exclusiveMinimum": 0, "default": 240.0},
                "height": {"type": "number", "exclusiveMinimum": 0, "default": 300.0},
                "left_margin": {"type": "number", "minimum": 0, "default": 40.0},
                "top_margin": {"type": "number", "minimum": 0, "default": 20.0},
                "tee_offset": {"type": "number", "minimum": 0, "default": 20.0},
                "marker_count": {"type": "integer", "minimum": 1, "maximum": 20, "default": 4},
            },
        },
        "logging": {
            "type": "object",
            "properties": {
                "level": {
                    "type": "string",
                    "enum": ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"],
                    "default": "INFO",
                },
                "logs_dir": {"type": ["string", "null"], "default": None},
            },
        },
        "upload": {
            "type": "object",
            "properties": {
                "enabled": {"type": "boolean", "default": False},
                "api_base": {"type": "string", "default": ""},
                "api_key": {"type": "string", "default": ""},
                "report_path": {"type": "string", "pattern": "^/", "default": "/flight-path/anchors"},
                "timeout_s": {"type": "number", "exclusiveMinimum": 0, "maximum": 120, "default": 10.0},
            },
        },
    },
}


def extend_with_default(validator_class):
    """Extend JSON Schema validator to set default values."""
    validate_properties = validator_class.VALIDATORS["properties"]

    def set_defaults(validator, properties, instance, schema):
        for prop, subschema in properties.items():
            if "default" in subschema:
                instance.setdefault(prop, subschema["default"])

        for error in validate_properties(validator, properties, instance, schema):
            yield error

    return validators.extend(validator_class, {"properties": set_defaults})


DefaultValidatingValidator = extend_with_default(Draft7Validator)


def validate_config(config: Dict[str, Any]) -> None:
    """Validate configuration against JSON Schema, filling in defaults.

    Args:
        config: Configuration dictionary (mutated in place with defaults)

    Raises:
        ConfigValidationError: If configuration is invalid
    """
    try:
        validator = DefaultValidatingValidator(CONFIG_SCHEMA)
        errors = list(validator.iter_errors(config))

        if errors:
            error_messages = []
            for error in errors:
                path = " -> ".join(str(p) for p in error.path) if error.path else "root"
                error_messages.append(f"{path}: {error.message}")

            logger.error(f"Configuration validation failed with {len(errors)} errors")
            for msg in error_messages:
                logger.error(f"  - {msg}")

            raise ConfigValidationError(
                f"Configuration validation failed with {len(errors)} error(s). See logs for details.",
                validation_errors=error_messages,
            )

        logger.debug("Configuration validation passed")

    except jsonschema.exceptions.SchemaError as e:
        logger.error(f"Invalid schema: {e}")
        raise ConfigValidationError(f"Invalid schema definition: {e}")


__all__ = ["validate_config", "CONFIG_SCHEMA"]
