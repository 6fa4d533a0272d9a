# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

from __future__ import annotations

import pytest

from lintrollup.core.model_types import Severity, UnknownSeverityPolicy
from lintrollup.messages import (
    MessageModel,
    MessagePayloadError,
    aggregate_payloads,
    message_from_payload,
    parse_messages,
)
from tests.fixtures.builders import build_payload


def test_message_from_payload_maps_camel_case_fields() -> None:
    message = message_from_payload(build_payload(isFixable=True, moduleId="my-app/index"))
    assert message.rule == "no-bare-strings"
    assert message.severity is Severity.ERROR
    assert message.file_path == "app/templates/index.hbs"
    assert message.module_id == "my-app/index"
    assert message.is_fixable is True
    assert message.source == "Hello"
    assert (message.line, message.column) == (3, 5)


def test_message_from_payload_accepts_snake_case_fields() -> None:
    payload = build_payload(is_fixable=True)
    payload["file_path"] = payload.pop("filePath")
    message = message_from_payload(payload)
    assert message.file_path == "app/templates/index.hbs"
    assert message.is_fixable is True


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("error", Severity.ERROR),
        ("warn", Severity.WARNING),
        ("Warning", Severity.WARNING),
        ("off", Severity.IGNORE),
        ("0", Severity.IGNORE),
        (1, Severity.WARNING),
    ],
)
def test_message_from_payload_normalises_severity(raw: object, expected: Severity) -> None:
    assert message_from_payload(build_payload(severity=raw)).severity is expected


def test_message_from_payload_keeps_unknown_integer_severity() -> None:
    message = message_from_payload(build_payload(severity=4))
    assert message.severity == 4
    assert not isinstance(message.severity, Severity)


@pytest.mark.parametrize(
    "payload",
    [
        build_payload(severity=True),
        build_payload(severity="fatal"),
        build_payload(endLine=4),
        {"severity": 2, "message": "missing rule", "line": 1, "column": 1},
    ],
)
def test_message_from_payload_rejects_invalid_payloads(payload: dict[str, object]) -> None:
    with pytest.raises(MessagePayloadError):
        _ = message_from_payload(payload)


def test_parse_messages_reports_failing_index() -> None:
    payloads = [build_payload(), build_payload(line="not-a-number")]
    with pytest.raises(MessagePayloadError) as excinfo:
        _ = parse_messages(payloads)
    assert excinfo.value.index == 1
    assert "index 1" in str(excinfo.value)


def test_message_model_serialises_with_camel_case_aliases() -> None:
    model = MessageModel.model_validate(build_payload(isFixable=True))
    dumped = model.model_dump(by_alias=True, exclude_none=True)
    assert dumped["filePath"] == "app/templates/index.hbs"
    assert dumped["isFixable"] is True
    assert "moduleId" not in dumped


def test_aggregate_payloads_round_trips_to_payload_view() -> None:
    payloads = [
        build_payload(filePath="a.hbs", severity=2, isFixable=True),
        build_payload(filePath=None, moduleId="b", severity=1),
        build_payload(filePath="a.hbs", severity=0),
    ]
    result = aggregate_payloads(payloads)
    view = result.to_payload()
    assert view["errorCount"] == 1
    assert view["warningCount"] == 1
    assert view["fixableErrorCount"] == 1
    assert view["fixableWarningCount"] == 0
    assert list(view["files"]) == ["a.hbs", "b"]
    assert view["files"]["b"]["filePath"] == "b"
    assert [item["severity"] for item in view["files"]["a.hbs"]["messages"]] == [2, 0]


def test_aggregate_payloads_honours_unknown_severity_policy() -> None:
    from lintrollup.aggregate import UnknownSeverityError

    with pytest.raises(UnknownSeverityError):
        _ = aggregate_payloads(
            [build_payload(severity=3)],
            unknown_severity=UnknownSeverityPolicy.FAIL,
        )
