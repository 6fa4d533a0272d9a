# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

from __future__ import annotations

from collections.abc import Mapping
from typing import NewType

from lintrollup._internal.exceptions import (
    LintrollupError,
    LintrollupTypeError,
    LintrollupValidationError,
)
from lintrollup.aggregate import UnknownSeverityError
from lintrollup.config import ConfigReadError, ConfigValidationError, InvalidConfigFileError
from lintrollup.core.types import MalformedMessageError
from lintrollup.messages import MessagePayloadError

ErrorCode = NewType("ErrorCode", str)

_ERROR_CODES: dict[type[BaseException], ErrorCode] = {
    LintrollupError: ErrorCode("LR000"),
    LintrollupValidationError: ErrorCode("LR100"),
    LintrollupTypeError: ErrorCode("LR101"),
    MalformedMessageError: ErrorCode("LR200"),
    UnknownSeverityError: ErrorCode("LR201"),
    MessagePayloadError: ErrorCode("LR202"),
    ConfigValidationError: ErrorCode("LR300"),
    InvalidConfigFileError: ErrorCode("LR301"),
    ConfigReadError: ErrorCode("LR302"),
}


def error_code_for(exc: BaseException) -> ErrorCode:
    """Return a stable error code for a structured lintrollup exception."""

    for cls in type(exc).__mro__:
        code = _ERROR_CODES.get(cls)
        if code:
            return code
    return ErrorCode("LR000")


def error_code_catalog() -> Mapping[str, ErrorCode]:
    """Return a stable mapping of fully-qualified exception names to error codes."""

    result: dict[str, ErrorCode] = {}
    for exc_type, code in _ERROR_CODES.items():
        key = f"{exc_type.__module__}.{exc_type.__name__}"
        result[key] = code
    return result


__all__ = ["ErrorCode", "error_code_catalog", "error_code_for"]
