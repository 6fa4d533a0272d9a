# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Typed aliases used across lintrollup internals."""

from __future__ import annotations

from typing import NewType

FileKey = NewType("FileKey", str)
RuleName = NewType("RuleName", str)

__all__ = ["FileKey", "RuleName"]
