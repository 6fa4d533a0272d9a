# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Per-file and whole-run aggregation results.

``FileResult`` and ``LintResult`` are the structures downstream consumers read
to gate CI runs, count fixable diagnostics, and display messages per file. The
``to_payload`` views use the camelCase field names the rule engine and its
formatters already understand.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypedDict

if TYPE_CHECKING:
    from .type_aliases import FileKey
    from .types import Message, MessagePayload


class FileResultPayload(TypedDict):
    filePath: str
    messages: list[MessagePayload]
    errorCount: int
    warningCount: int
    fixableErrorCount: int
    fixableWarningCount: int


class LintResultPayload(TypedDict):
    files: dict[str, FileResultPayload]
    errorCount: int
    warningCount: int
    fixableErrorCount: int
    fixableWarningCount: int


def _default_messages() -> list[Message]:
    return []


@dataclass(slots=True)
class FileResult:
    """Messages and severity tallies for one file.

    Attributes:
        file_path: Grouping key of the file, even when it came from a module id.
        messages: Every message for the file in input order, including ignored
            and unknown-severity messages that are not counted.
        error_count: Number of error-severity messages.
        warning_count: Number of warning-severity messages.
        fixable_error_count: Error-severity messages flagged as fixable.
        fixable_warning_count: Warning-severity messages flagged as fixable.
    """

    file_path: FileKey
    messages: list[Message] = field(default_factory=_default_messages)
    error_count: int = 0
    warning_count: int = 0
    fixable_error_count: int = 0
    fixable_warning_count: int = 0

    def to_payload(self) -> FileResultPayload:
        return {
            "filePath": str(self.file_path),
            "messages": [message.to_payload() for message in self.messages],
            "errorCount": self.error_count,
            "warningCount": self.warning_count,
            "fixableErrorCount": self.fixable_error_count,
            "fixableWarningCount": self.fixable_warning_count,
        }


def _default_files() -> dict[FileKey, FileResult]:
    return {}


@dataclass(slots=True)
class LintResult:
    """Complete aggregation output: per-file results plus grand totals.

    The four totals always equal the sums of the matching per-file counters.
    ``files`` keeps first-seen insertion order.
    """

    files: dict[FileKey, FileResult] = field(default_factory=_default_files)
    error_count: int = 0
    warning_count: int = 0
    fixable_error_count: int = 0
    fixable_warning_count: int = 0

    @property
    def total_messages(self) -> int:
        """Number of messages recorded across all files, counted or not."""
        return sum(len(result.messages) for result in self.files.values())

    @property
    def has_errors(self) -> bool:
        return self.error_count > 0

    @property
    def has_warnings(self) -> bool:
        return self.warning_count > 0

    def to_payload(self) -> LintResultPayload:
        return {
            "files": {str(key): result.to_payload() for key, result in self.files.items()},
            "errorCount": self.error_count,
            "warningCount": self.warning_count,
            "fixableErrorCount": self.fixable_error_count,
            "fixableWarningCount": self.fixable_warning_count,
        }


__all__ = ["FileResult", "FileResultPayload", "LintResult", "LintResultPayload"]
