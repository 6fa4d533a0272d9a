"""Public exception types re-exported from the internal package."""

from __future__ import annotations

from lintrollup._internal.exceptions import (
    LintrollupError,
    LintrollupTypeError,
    LintrollupValidationError,
)

__all__ = ["LintrollupError", "LintrollupTypeError", "LintrollupValidationError"]
