# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Common exception hierarchy for lintrollup."""

from __future__ import annotations

__all__ = ["LintrollupError", "LintrollupTypeError", "LintrollupValidationError"]


class LintrollupError(Exception):
    """Base error for all lintrollup exceptions."""


class LintrollupValidationError(LintrollupError, ValueError):
    """Raised when input data fails validation checks."""


class LintrollupTypeError(LintrollupError, TypeError):
    """Raised when input data has an unexpected type."""
