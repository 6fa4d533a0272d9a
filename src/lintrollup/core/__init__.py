# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Core type definitions and data structures for lintrollup.

- Model types: the closed severity enumeration and policy/format enums
- Type aliases: ``NewType`` wrappers for file keys and rule names
- Core types: the immutable ``Message`` record
- Summary types: per-file and whole-run aggregation results
"""

from __future__ import annotations

from . import model_types, summary_types, type_aliases, types
