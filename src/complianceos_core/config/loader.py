"""ComplianceOS configuration loader."""

import os
import re
import typing
from dataclasses import fields
from pathlib import Path
from typing import Any

import yaml

from complianceos_core.errors import create_error
from complianceos_core.types import ValidationIssue, ValidationResult

from .models import ComplianceConfig

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off", ""}


def resolve_env_vars(value: str) -> str:
    """Resolve environment variable references in string.

    Supports:
    - ${VAR} - Required, error if not set
    - ${VAR:-default} - With default value
    - ${VAR:?error message} - Required with custom error

    Args:
        value: String with potential env var references

    Returns:
        String with env vars resolved

    Raises:
        ComplianceError: If required var not set
    """
    pattern = r"\$\{([^}:]+)(?::([?-])([^}]*))?\}"

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        operator = match.group(2)  # '-' or '?' or None
        operand = match.group(3)  # default value or error message

        env_value = os.environ.get(var_name)

        if env_value is not None:
            return env_value

        if operator == "-":
            return operand or ""
        elif operator == "?":
            error_msg = operand or f"Required environment variable {var_name} not set"
            raise create_error("CONFIG_INVALID", detail=error_msg)
        else:
            raise create_error(
                "CONFIG_INVALID",
                detail=f"Required environment variable {var_name} not set",
            )

    return re.sub(pattern, replacer, value)


def parse_bool(value: Any) -> bool:
    """Interpret a config or environment value as a boolean.

    Raises:
        ValueError: If the value is not a recognisable boolean
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise ValueError(f"Not a boolean value: {value!r}")


def _is_bool_like(value: Any) -> bool:
    try:
        parse_bool(value)
    except ValueError:
        return False
    return True


def _resolve_env_vars_recursive(data: Any) -> Any:
    if isinstance(data, dict):
        return {k: _resolve_env_vars_recursive(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [_resolve_env_vars_recursive(item) for item in data]
    elif isinstance(data, str):
        return resolve_env_vars(data)
    else:
        return data


class ConfigLoader:
    """Load and validate ComplianceOS configuration."""

    VALID_SECTIONS = {"edition", "flags", "logging", "api", "advisor"}

    def __init__(self, logger: Any = None):
        """Initialize config loader.

        Args:
            logger: Optional ComplianceLogger instance
        """
        self._config: ComplianceConfig | None = None
        self._config_path: Path | None = None
        self._logger = logger

    def load(self, path: str | Path | None = None, use_defaults: bool = True) -> ComplianceConfig:
        """Load configuration from file.

        Resolution order if path not specified:
        1. COMPLIANCEOS_CONFIG_PATH environment variable
        2. ./complianceos.yaml
        3. ~/.complianceos/config.yaml
        4. If use_defaults=True and no file found, use default configuration

        Args:
            path: Optional path to config file
            use_defaults: If True, use default config when no file found

        Returns:
            Loaded ComplianceConfig instance

        Raises:
            ComplianceError: If file not found (when use_defaults=False) or invalid
        """
        if path is None:
            path = self._resolve_config_path()

        config_path = Path(path)

        if not config_path.exists():
            if use_defaults:
                return self.load_defaults()
            raise create_error(
                "CONFIG_INVALID",
                detail=f"Configuration file not found: {config_path}",
            )

        try:
            with config_path.open() as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise create_error(
                "CONFIG_INVALID",
                detail=f"Invalid YAML in config file: {e}",
            ) from e

        if not isinstance(data, dict):
            raise create_error(
                "CONFIG_INVALID",
                detail="Configuration root must be a mapping",
            )

        data = _resolve_env_vars_recursive(data)

        return self.load_from_dict(data, config_path)

    def load_defaults(self) -> ComplianceConfig:
        """Load default configuration without a file."""
        return self.load_from_dict({})

    def load_from_dict(
        self, data: dict[str, Any], config_path: Path | None = None
    ) -> ComplianceConfig:
        """Load configuration from dictionary.

        Args:
            data: Configuration dictionary
            config_path: Optional path to config file (for tracking)

        Returns:
            Loaded ComplianceConfig instance

        Raises:
            ComplianceError: If configuration is invalid
        """
        validation = self.validate(data)
        if not validation.valid:
            error_messages = [f"- {issue.path}: {issue.message}" for issue in validation.errors]
            raise create_error(
                "CONFIG_INVALID",
                detail="Configuration validation failed:\n" + "\n".join(error_messages),
            )

        try:
            config = self._dict_to_config(data)
        except (TypeError, ValueError) as e:
            raise create_error(
                "CONFIG_INVALID",
                detail=f"Failed to parse configuration: {e}",
            ) from e

        self._config = config
        self._config_path = config_path

        return config

    def validate(self, data: dict[str, Any]) -> ValidationResult:
        """Validate config data without loading.

        Args:
            data: Configuration dictionary

        Returns:
            ValidationResult with errors and warnings
        """
        errors: list[ValidationIssue] = []
        warnings: list[ValidationIssue] = []

        for key in data:
            if key not in self.VALID_SECTIONS:
                warnings.append(
                    ValidationIssue(
                        path=key,
                        message=f"Unknown configuration key: {key}",
                        severity="warning",
                    )
                )

        for section in self.VALID_SECTIONS:
            if section in data and not isinstance(data[section], dict):
                errors.append(
                    ValidationIssue(path=section, message=f"{section} must be a dictionary")
                )

        edition = data.get("edition")
        if isinstance(edition, dict) and "disable_premium" in edition:
            if not _is_bool_like(edition["disable_premium"]):
                errors.append(
                    ValidationIssue(
                        path="edition.disable_premium",
                        message="disable_premium must be a boolean",
                    )
                )

        flags = data.get("flags")
        if isinstance(flags, dict):
            errors.extend(self._validate_flag_record("flags.defaults", flags.get("defaults", {})))
            overrides = flags.get("overrides", {})
            if not isinstance(overrides, dict):
                errors.append(
                    ValidationIssue(
                        path="flags.overrides", message="overrides must be a dictionary"
                    )
                )
            else:
                for tenant_id, record in overrides.items():
                    errors.extend(
                        self._validate_flag_record(f"flags.overrides.{tenant_id}", record)
                    )

        return ValidationResult(valid=True, errors=errors, warnings=warnings)

    def _validate_flag_record(self, path: str, record: Any) -> list[ValidationIssue]:
        if not isinstance(record, dict):
            return [ValidationIssue(path=path, message="must be a dictionary of booleans")]

        # Capability names are checked when the flag resolver is seeded.
        issues = []
        for name, value in record.items():
            if not _is_bool_like(value):
                issues.append(
                    ValidationIssue(path=f"{path}.{name}", message="must be a boolean")
                )
        return issues

    @property
    def is_loaded(self) -> bool:
        return self._config is not None

    def get(self) -> ComplianceConfig:
        """Get current configuration.

        Raises:
            ComplianceError: If configuration not loaded
        """
        if self._config is None:
            raise create_error("CONFIG_INVALID", detail="Configuration not loaded")
        return self._config

    def _resolve_config_path(self) -> Path:
        env_path = os.environ.get("COMPLIANCEOS_CONFIG_PATH")
        if env_path:
            return Path(env_path)

        local_path = Path("complianceos.yaml")
        if local_path.exists():
            return local_path

        home_path = Path.home() / ".complianceos" / "config.yaml"
        if home_path.exists():
            return home_path

        return local_path

    def _dict_to_config(self, data: dict[str, Any]) -> ComplianceConfig:
        kwargs: dict[str, Any] = {}

        for f in fields(ComplianceConfig):
            if f.name in data:
                kwargs[f.name] = self._convert_field(f.type, data[f.name])

        return ComplianceConfig(**kwargs)

    def _convert_field(self, field_type: Any, value: Any) -> Any:
        """Convert field value to appropriate type.

        Args:
            field_type: Expected field type
            value: Value to convert

        Returns:
            Converted value
        """
        if value is None:
            return None

        origin = typing.get_origin(field_type)

        if origin is list:
            if not isinstance(value, list):
                return value
            args = typing.get_args(field_type)
            if args:
                return [self._convert_field(args[0], item) for item in value]
            return value

        if origin is dict:
            if not isinstance(value, dict):
                return value
            args = typing.get_args(field_type)
            if args and len(args) == 2:
                value_type = args[1]
                return {str(k): self._convert_field(value_type, v) for k, v in value.items()}
            return value

        if hasattr(field_type, "__dataclass_fields__"):
            if isinstance(value, dict):
                kwargs = {}
                for f in fields(field_type):
                    if f.name in value:
                        kwargs[f.name] = self._convert_field(f.type, value[f.name])
                return field_type(**kwargs)
            return value

        if field_type is bool:
            return parse_bool(value)

        if field_type is int and isinstance(value, str):
            return int(value)

        if hasattr(field_type, "__mro__") and any(
            base.__name__ == "Enum" for base in field_type.__mro__
        ):
            if isinstance(value, str):
                return field_type(value)
            return value

        return value


# Convenience singleton
_default_loader: ConfigLoader | None = None


def get_config_loader() -> ConfigLoader:
    """Get default config loader singleton."""
    global _default_loader  # noqa: PLW0603
    if _default_loader is None:
        _default_loader = ConfigLoader()
    return _default_loader
