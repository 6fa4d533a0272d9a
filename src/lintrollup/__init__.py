# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""lintrollup - lint result aggregation.

Reduces the flat stream of messages produced by lint rules into per-file
results with error, warning and fixable counts, plus grand totals for CI
gating and editor tooling.
"""

from __future__ import annotations

from lintrollup._internal.error_codes import error_code_catalog, error_code_for
from lintrollup._internal.exceptions import (
    LintrollupError,
    LintrollupTypeError,
    LintrollupValidationError,
)
from lintrollup._internal.logging_utils import configure_logging

from .aggregate import UnknownSeverityError, aggregate
from .config import AggregatorConfig, load_config
from .core.model_types import Severity, UnknownSeverityPolicy
from .core.summary_types import FileResult, LintResult
from .core.types import MalformedMessageError, Message
from .messages import MessagePayloadError, aggregate_payloads, parse_messages

__all__ = [
    "__version__",
    "AggregatorConfig",
    "FileResult",
    "LintResult",
    "LintrollupError",
    "LintrollupTypeError",
    "LintrollupValidationError",
    "MalformedMessageError",
    "Message",
    "MessagePayloadError",
    "Severity",
    "UnknownSeverityError",
    "UnknownSeverityPolicy",
    "aggregate",
    "aggregate_payloads",
    "configure_logging",
    "error_code_catalog",
    "error_code_for",
    "load_config",
    "parse_messages",
]

__version__ = "0.1.0"
