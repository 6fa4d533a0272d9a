# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Validation of raw message payloads emitted by the rule engine.

The rule engine reports messages as camelCase mappings (``filePath``,
``moduleId``, ``isFixable``). ``MessageModel`` validates those mappings with
Pydantic and converts them into immutable ``Message`` records so they can be
passed to ``aggregate``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from lintrollup._internal.exceptions import LintrollupValidationError
from lintrollup._internal.logging_utils import structured_extra
from lintrollup.aggregate import aggregate
from lintrollup.core.model_types import LogComponent, Severity, UnknownSeverityPolicy
from lintrollup.core.type_aliases import RuleName
from lintrollup.core.types import Message

if TYPE_CHECKING:
    from lintrollup.core.summary_types import LintResult

logger: logging.Logger = logging.getLogger("lintrollup.messages")

STRICT_MODEL_CONFIG: ConfigDict = ConfigDict(extra="forbid")


class MessagePayloadError(LintrollupValidationError):
    """Raised when a raw message payload fails validation."""

    def __init__(self, index: int, error: ValidationError) -> None:
        """Initialise the error with the payload position and validation details.

        Args:
            index: Zero-based position of the payload in the input sequence.
            error: Pydantic validation error describing the failure.
        """
        self.index = index
        self.error = error
        super().__init__(f"Invalid message payload at index {index}: {error}")


def alias_field(
    camel_name: str,
    snake_name: str,
    *,
    default: object = ...,
) -> Any:  # noqa: ANN401 # JUSTIFIED: Pydantic field annotations expect Any
    """Return a Field accepting both the camelCase and snake_case key.

    Serialisation uses the camelCase name so round-tripped payloads keep the
    rule engine's shape.
    """
    return Field(
        default=default,
        validation_alias=AliasChoices(camel_name, snake_name),
        serialization_alias=camel_name,
    )


class MessageModel(BaseModel):
    """Pydantic model for one rule engine message payload.

    ``severity`` accepts an integer or a severity name. Integers outside the
    known scale are kept verbatim so the aggregator can apply its unknown
    severity policy.
    """

    model_config: ClassVar[ConfigDict] = STRICT_MODEL_CONFIG

    rule: str
    severity: int
    message: str
    line: int
    column: int
    file_path: str | None = alias_field("filePath", "file_path", default=None)
    module_id: str | None = alias_field("moduleId", "module_id", default=None)
    source: Any = None
    is_fixable: bool = alias_field("isFixable", "is_fixable", default=False)

    @field_validator("severity", mode="before")
    @classmethod
    def coerce_severity(cls, value: object) -> object:
        if isinstance(value, bool):
            raise ValueError("severity must be an integer or severity name, not a boolean")
        if isinstance(value, str):
            return int(Severity.from_str(value))
        return value

    def to_message(self) -> Message:
        severity = Severity.classify(self.severity)
        return Message(
            rule=RuleName(self.rule),
            severity=self.severity if severity is None else severity,
            message=self.message,
            line=self.line,
            column=self.column,
            file_path=self.file_path,
            module_id=self.module_id,
            source=self.source,
            is_fixable=self.is_fixable,
        )


def _validate(payload: Mapping[str, object], index: int) -> Message:
    try:
        model = MessageModel.model_validate(payload)
    except ValidationError as exc:
        raise MessagePayloadError(index, exc) from exc
    return model.to_message()


def message_from_payload(payload: Mapping[str, object]) -> Message:
    """Validate a single payload and return the corresponding ``Message``.

    Raises:
        MessagePayloadError: If the payload does not match ``MessageModel``.
    """
    return _validate(payload, 0)


def parse_messages(payloads: Iterable[Mapping[str, object]]) -> list[Message]:
    """Validate payloads in order and return the resulting messages.

    Raises:
        MessagePayloadError: For the first payload that fails validation; no
            partial list is returned.
    """
    messages = [_validate(payload, index) for index, payload in enumerate(payloads)]
    logger.debug(
        "Parsed %d message payloads",
        len(messages),
        extra=structured_extra(LogComponent.MESSAGES, details={"messages": len(messages)}),
    )
    return messages


def aggregate_payloads(
    payloads: Iterable[Mapping[str, object]],
    *,
    unknown_severity: UnknownSeverityPolicy = UnknownSeverityPolicy.IGNORE,
) -> LintResult:
    """Validate raw payloads and aggregate them in one call."""
    return aggregate(parse_messages(payloads), unknown_severity=unknown_severity)


__all__ = [
    "MessageModel",
    "MessagePayloadError",
    "aggregate_payloads",
    "message_from_payload",
    "parse_messages",
]
