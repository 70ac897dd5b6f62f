"""Configuration validation utilities."""

from dataclasses import dataclass, fields
from typing import Any

from .defaults import DemoParams, LoggingParams, StructureParams

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

SECTION_FIELDS = {
    "structures": {f.name for f in fields(StructureParams)},
    "logging": {f.name for f in fields(LoggingParams)},
    "demo": {f.name for f in fields(DemoParams)},
}


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_int_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple)) and all(_is_int(v) for v in value)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_structure_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate data structure parameters."""
        errors = []

        if "strict_empty" in params:
            value = params["strict_empty"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="strict_empty",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in VALID_LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(VALID_LOG_LEVELS)}",
                    value=value
                ))

        for flag in ("format_json", "include_timestamp"):
            if flag in params and not isinstance(params[flag], bool):
                errors.append(ValidationError(
                    field=flag,
                    message="Must be a boolean",
                    value=params[flag]
                ))

        return errors

    @staticmethod
    def validate_demo_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate demonstration parameters."""
        errors = []

        for name in ("sample_list", "zip_with_list"):
            if name in params and not _is_int_sequence(params[name]):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a sequence of integers",
                    value=params[name]
                ))

        if "drop_count" in params:
            value = params["drop_count"]
            if not _is_int(value) or value < 0:
                errors.append(ValidationError(
                    field="drop_count",
                    message="Must be a non-negative integer",
                    value=value
                ))

        for name in ("drop_while_below", "head_value"):
            if name in params and not _is_int(params[name]):
                errors.append(ValidationError(
                    field=name,
                    message="Must be an integer",
                    value=params[name]
                ))

        return errors

    @staticmethod
    def validate_known_fields(config: dict[str, Any]) -> list[ValidationError]:
        """Reject sections and fields that no configuration dataclass declares."""
        errors = []

        for section, params in config.items():
            if section not in SECTION_FIELDS:
                errors.append(ValidationError(
                    field=section,
                    message="Unknown configuration section",
                    value=params
                ))
                continue
            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=params
                ))
                continue
            for name in params:
                if name not in SECTION_FIELDS[section]:
                    errors.append(ValidationError(
                        field=f"{section}.{name}",
                        message="Unknown configuration field",
                        value=params[name]
                    ))

        return errors

    @classmethod
    def validate_config(cls, config: dict[str, Any]) -> list[ValidationError]:
        """Validate a complete merged configuration dictionary."""
        errors = cls.validate_known_fields(config)
        if errors:
            return errors

        if "structures" in config:
            errors.extend(cls.validate_structure_params(config["structures"]))

        if "logging" in config:
            errors.extend(cls.validate_logging_params(config["logging"]))

        if "demo" in config:
            errors.extend(cls.validate_demo_params(config["demo"]))

        return errors
