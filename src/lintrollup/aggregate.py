# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Fold a flat stream of lint messages into per-file results and totals."""

from __future__ import annotations

import logging
from collections import Counter
from typing import TYPE_CHECKING

from lintrollup._internal.exceptions import LintrollupValidationError
from lintrollup._internal.logging_utils import structured_extra
from lintrollup.core.model_types import LogComponent, Severity, UnknownSeverityPolicy
from lintrollup.core.summary_types import FileResult, LintResult

if TYPE_CHECKING:
    from collections.abc import Iterable

    from lintrollup.core.type_aliases import FileKey
    from lintrollup.core.types import Message

logger: logging.Logger = logging.getLogger("lintrollup.aggregate")


class UnknownSeverityError(LintrollupValidationError):
    """Raised when a message severity is outside the recognised scale."""

    def __init__(self, message: Message) -> None:
        """Initialise the error with the offending message.

        Args:
            message: Message whose severity could not be classified.
        """
        self.lint_message = message
        super().__init__(
            f"Message from rule '{message.rule}' has unknown severity {message.severity!r}"
        )


def _ensure_file_result(files: dict[FileKey, FileResult], key: FileKey) -> FileResult:
    result = files.get(key)
    if result is None:
        result = FileResult(file_path=key)
        files[key] = result
    return result


def _handle_unknown_severity(message: Message, policy: UnknownSeverityPolicy) -> None:
    match policy:
        case UnknownSeverityPolicy.FAIL:
            raise UnknownSeverityError(message)
        case UnknownSeverityPolicy.WARN:
            logger.warning(
                "Unknown severity %r from rule '%s'; message recorded but not counted",
                message.severity,
                message.rule,
                extra=structured_extra(
                    LogComponent.AGGREGATE,
                    path=message.grouping_key,
                    rule=str(message.rule),
                ),
            )
        case UnknownSeverityPolicy.IGNORE:
            pass


def aggregate(
    messages: Iterable[Message],
    *,
    unknown_severity: UnknownSeverityPolicy = UnknownSeverityPolicy.IGNORE,
) -> LintResult:
    """Group messages by file and tally severities and fixability.

    Every message is appended to its file's result in input order before it is
    classified, so ignored and unknown-severity messages are kept but counted
    toward nothing. Messages for the same file need not be contiguous.

    Args:
        messages: Messages in the order the rule engine produced them.
        unknown_severity: What to do with a severity outside ``Severity``.
            ``ignore`` records the message silently, ``warn`` also logs a
            warning, ``fail`` rejects the whole aggregation.

    Returns:
        A freshly built ``LintResult``; ``files`` keeps first-seen order.

    Raises:
        MalformedMessageError: If a message has neither a file path nor a
            module id.
        UnknownSeverityError: If ``unknown_severity`` is ``fail`` and a message
            carries an unrecognised severity.
    """
    files: dict[FileKey, FileResult] = {}
    totals = LintResult(files=files)

    for message in messages:
        file_result = _ensure_file_result(files, message.grouping_key)
        file_result.messages.append(message)

        match Severity.classify(message.severity):
            case Severity.IGNORE:
                continue
            case Severity.ERROR:
                file_result.error_count += 1
                totals.error_count += 1
                if message.is_fixable:
                    file_result.fixable_error_count += 1
                    totals.fixable_error_count += 1
            case Severity.WARNING:
                file_result.warning_count += 1
                totals.warning_count += 1
                if message.is_fixable:
                    file_result.fixable_warning_count += 1
                    totals.fixable_warning_count += 1
            case None:
                _handle_unknown_severity(message, unknown_severity)

    counts: Counter[Severity] = Counter(
        {Severity.ERROR: totals.error_count, Severity.WARNING: totals.warning_count}
    )
    logger.debug(
        "Aggregated %d messages across %d files (%d errors, %d warnings)",
        totals.total_messages,
        len(files),
        totals.error_count,
        totals.warning_count,
        extra=structured_extra(LogComponent.AGGREGATE, counts=counts, files=len(files)),
    )
    return totals


__all__ = ["UnknownSeverityError", "aggregate"]
