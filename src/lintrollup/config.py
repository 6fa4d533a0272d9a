# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Configuration loading for lintrollup.

Settings live in ``lintrollup.toml`` or ``.lintrollup.toml``, either at the top
level of the file or nested under ``[tool.lintrollup]`` so the same table can
sit inside ``pyproject.toml``.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import ClassVar, Final, cast

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from lintrollup._internal.exceptions import LintrollupValidationError
from lintrollup._internal.logging_utils import LOG_LEVELS, structured_extra
from lintrollup.core.model_types import LogComponent, LogFormat, UnknownSeverityPolicy

logger: logging.Logger = logging.getLogger("lintrollup.config")

CONFIG_FILENAMES: Final[tuple[str, ...]] = ("lintrollup.toml", ".lintrollup.toml")


class ConfigValidationError(LintrollupValidationError):
    """Raised when configuration data contains invalid values."""


class InvalidConfigFileError(ConfigValidationError):
    """Raised when a configuration file fails schema validation."""

    def __init__(self, path: Path, error: ValidationError) -> None:
        self.path = path
        self.error = error
        super().__init__(f"Invalid lintrollup configuration in {path}: {error}")


class ConfigReadError(ConfigValidationError):
    """Raised when a configuration file cannot be read or parsed as TOML."""

    def __init__(self, path: Path, error: Exception) -> None:
        self.path = path
        self.error = error
        super().__init__(f"Unable to read lintrollup configuration {path}: {error}")


class AggregatorConfig(BaseModel):
    """Settings applied when aggregating messages and configuring logging.

    Attributes:
        unknown_severity: Handling of severities outside the known scale.
        log_format: Output format passed to ``configure_logging``.
        log_level: Verbosity passed to ``configure_logging``.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid", frozen=True)

    unknown_severity: UnknownSeverityPolicy = UnknownSeverityPolicy.IGNORE
    log_format: LogFormat = LogFormat.TEXT
    log_level: str = "info"

    @field_validator("unknown_severity", mode="before")
    @classmethod
    def normalise_policy(cls, value: object) -> object:
        if isinstance(value, str):
            return UnknownSeverityPolicy.from_str(value)
        return value

    @field_validator("log_format", mode="before")
    @classmethod
    def normalise_format(cls, value: object) -> object:
        if isinstance(value, str):
            return LogFormat.from_str(value)
        return value

    @field_validator("log_level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        level = value.strip().lower()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


def _read_table(path: Path) -> dict[str, object]:
    try:
        raw_map: dict[str, object] = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigReadError(path, exc) from exc
    tool_obj = raw_map.get("tool")
    if isinstance(tool_obj, dict):
        tool_section = cast("dict[str, object]", tool_obj).get("lintrollup")
        if isinstance(tool_section, dict):
            return cast("dict[str, object]", tool_section)
    return raw_map


def load_config(explicit_path: Path | None = None) -> AggregatorConfig:
    """Load lintrollup configuration from a TOML file or use defaults.

    When ``explicit_path`` is given only that file is considered; otherwise
    ``lintrollup.toml`` and ``.lintrollup.toml`` in the current directory are
    checked in that order. The first existing file wins.

    Args:
        explicit_path: Optional path to a configuration file.

    Returns:
        The validated configuration, or defaults when no file exists.

    Raises:
        ConfigReadError: If the file cannot be read or is not valid TOML.
        InvalidConfigFileError: If the file contents fail validation.
    """
    search_order: list[Path] = []
    if explicit_path:
        search_order.append(explicit_path)
    else:
        search_order.extend(Path(name) for name in CONFIG_FILENAMES)

    for candidate in search_order:
        if not candidate.exists():
            continue
        raw_map = _read_table(candidate)
        try:
            config = AggregatorConfig.model_validate(raw_map)
        except ValidationError as exc:
            raise InvalidConfigFileError(candidate, exc) from exc
        logger.debug(
            "Loaded configuration from %s",
            candidate,
            extra=structured_extra(LogComponent.CONFIG, path=candidate),
        )
        return config

    return AggregatorConfig()


__all__ = [
    "CONFIG_FILENAMES",
    "AggregatorConfig",
    "ConfigReadError",
    "ConfigValidationError",
    "InvalidConfigFileError",
    "load_config",
]
