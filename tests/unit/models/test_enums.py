# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Unit tests for Models Enums."""

from __future__ import annotations

import pytest

from lintrollup.core.model_types import LogComponent, LogFormat, Severity, UnknownSeverityPolicy

pytestmark = pytest.mark.unit


def test_severity_values_match_rule_engine_scale() -> None:
    assert [int(member) for member in Severity] == [0, 1, 2]
    assert Severity.IGNORE == 0
    assert Severity.WARNING == 1
    assert Severity.ERROR == 2


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (Severity.ERROR, Severity.ERROR),
        (0, Severity.IGNORE),
        (1, Severity.WARNING),
        (2, Severity.ERROR),
        (3, None),
        (-1, None),
        ("2", None),
        (2.0, None),
        (True, None),
        (None, None),
    ],
)
def test_severity_classify(raw: object, expected: Severity | None) -> None:
    assert Severity.classify(raw) is expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (" error ", Severity.ERROR),
        ("WARN", Severity.WARNING),
        ("warning", Severity.WARNING),
        ("ignore", Severity.IGNORE),
        ("off", Severity.IGNORE),
        ("1", Severity.WARNING),
    ],
)
def test_severity_from_str(raw: str, expected: Severity) -> None:
    assert Severity.from_str(raw) is expected


@pytest.mark.parametrize("raw", ["fatal", "3", ""])
def test_severity_from_str_rejects_unknown(raw: str) -> None:
    with pytest.raises(ValueError, match="Unknown severity"):
        _ = Severity.from_str(raw)


def test_str_enums_round_trip() -> None:
    assert UnknownSeverityPolicy.from_str(" Warn ") is UnknownSeverityPolicy.WARN
    assert LogFormat.from_str("JSON") is LogFormat.JSON
    assert LogComponent.from_str("messages") is LogComponent.MESSAGES
    with pytest.raises(ValueError, match="Unknown severity policy"):
        _ = UnknownSeverityPolicy.from_str("explode")
    with pytest.raises(ValueError, match="Unknown log format"):
        _ = LogFormat.from_str("xml")
