# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Logging utilities exposed for library users."""

from __future__ import annotations

from lintrollup._internal.logging_utils import (
    LOG_FORMATS,
    LOG_LEVELS,
    LogConfig,
    StructuredLogExtra,
    configure_logging,
    structured_extra,
)

__all__ = [
    "LOG_FORMATS",
    "LOG_LEVELS",
    "LogConfig",
    "StructuredLogExtra",
    "configure_logging",
    "structured_extra",
]
