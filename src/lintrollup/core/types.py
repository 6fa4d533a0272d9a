# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Core data classes for lint messages.

``Message`` is the record the rule engine produces for every diagnostic
occurrence. It is immutable; aggregation only reads it and stores references
to it inside the per-file results.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypedDict, cast

from lintrollup._internal.exceptions import LintrollupValidationError

from .model_types import Severity
from .type_aliases import FileKey

if TYPE_CHECKING:
    from lintrollup.json import JSONValue

    from .type_aliases import RuleName


class MalformedMessageError(LintrollupValidationError):
    """Raised when a message carries neither a file path nor a module id."""

    def __init__(self, message: Message) -> None:
        """Initialise the error with the offending message.

        Args:
            message: Message that could not be assigned to a file.
        """
        self.lint_message = message
        super().__init__(
            f"Message from rule '{message.rule}' at {message.line}:{message.column} "
            "has neither a file path nor a module id"
        )


class MessagePayload(TypedDict, total=False):
    rule: str
    severity: int
    filePath: str
    moduleId: str
    message: str
    line: int
    column: int
    source: JSONValue
    isFixable: bool


@dataclass(slots=True, frozen=True)
class Message:
    """Immutable dataclass representing a single lint diagnostic occurrence.

    Attributes:
        rule: Identifier of the rule that produced the occurrence.
        severity: Severity reported by the rule. Values outside ``Severity``
            are kept as plain integers so they can pass through aggregation.
        message: Human-readable diagnostic text.
        line: Line number where the diagnostic occurs (1-indexed).
        column: Column number where the diagnostic occurs (1-indexed).
        file_path: Path of the file the message belongs to.
        module_id: Module identifier used when no file path is available.
        source: Offending snippet or rule-specific payload, never inspected.
        is_fixable: Whether tooling can correct the occurrence automatically.
    """

    rule: RuleName
    severity: Severity | int
    message: str
    line: int
    column: int
    file_path: str | None = None
    module_id: str | None = None
    source: object = None
    is_fixable: bool = False

    @property
    def grouping_key(self) -> FileKey:
        """Return the file key, preferring ``file_path`` over ``module_id``.

        Raises:
            MalformedMessageError: If neither identifier is a non-empty string.
        """
        if self.file_path:
            return FileKey(self.file_path)
        if self.module_id:
            return FileKey(self.module_id)
        raise MalformedMessageError(self)

    def to_payload(self) -> MessagePayload:
        """Render the message using the rule engine's camelCase field names.

        Optional fields are omitted when unset.
        """
        payload: MessagePayload = {
            "rule": str(self.rule),
            "severity": int(self.severity),
            "message": self.message,
            "line": self.line,
            "column": self.column,
        }
        if self.file_path is not None:
            payload["filePath"] = self.file_path
        if self.module_id is not None:
            payload["moduleId"] = self.module_id
        if self.source is not None:
            payload["source"] = cast("JSONValue", self.source)
        if self.is_fixable:
            payload["isFixable"] = True
        return payload


__all__ = ["MalformedMessageError", "Message", "MessagePayload"]
