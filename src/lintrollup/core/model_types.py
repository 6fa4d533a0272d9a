# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

from __future__ import annotations

from enum import IntEnum, StrEnum
from typing import Final


class Severity(IntEnum):
    """Closed severity scale shared with the rule engine that emits messages."""

    IGNORE = 0
    WARNING = 1
    ERROR = 2

    @classmethod
    def from_str(cls, raw: str) -> Severity:
        value = raw.strip().lower()
        alias = _SEVERITY_ALIASES.get(value)
        if alias is not None:
            return alias
        try:
            return cls(int(value))
        except ValueError as exc:
            raise ValueError(f"Unknown severity '{raw}'") from exc

    @classmethod
    def classify(cls, raw: object) -> Severity | None:
        """Return the matching severity, or ``None`` when ``raw`` is outside the scale.

        Only integers (and ``Severity`` members) are recognised. Booleans and
        numeric strings are not coerced.
        """
        if isinstance(raw, Severity):
            return raw
        if isinstance(raw, bool) or not isinstance(raw, int):
            return None
        try:
            return cls(raw)
        except ValueError:
            return None


_SEVERITY_ALIASES: Final[dict[str, Severity]] = {
    "ignore": Severity.IGNORE,
    "off": Severity.IGNORE,
    "warning": Severity.WARNING,
    "warn": Severity.WARNING,
    "error": Severity.ERROR,
}


class UnknownSeverityPolicy(StrEnum):
    IGNORE = "ignore"
    WARN = "warn"
    FAIL = "fail"

    @classmethod
    def from_str(cls, raw: str) -> UnknownSeverityPolicy:
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unknown severity policy '{raw}'") from exc


class LogFormat(StrEnum):
    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_str(cls, raw: str) -> LogFormat:
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unknown log format '{raw}'") from exc


class LogComponent(StrEnum):
    AGGREGATE = "aggregate"
    CONFIG = "config"
    MESSAGES = "messages"

    @classmethod
    def from_str(cls, raw: str) -> LogComponent:
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unknown log component '{raw}'") from exc


__all__ = ["LogComponent", "LogFormat", "Severity", "UnknownSeverityPolicy"]
