# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Common Hypothesis strategies."""

from __future__ import annotations

from .common import file_keys, messages, severities

__all__ = ["file_keys", "messages", "severities"]
