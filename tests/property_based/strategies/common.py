# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Shared Hypothesis strategies for property-based tests."""

from __future__ import annotations

from hypothesis import strategies as st

from lintrollup.core.model_types import Severity
from lintrollup.core.type_aliases import RuleName
from lintrollup.core.types import Message

__all__ = ["file_keys", "messages", "severities"]


def file_keys() -> st.SearchStrategy[str]:
    """Return a strategy drawing from a small pool of file keys so groups collide."""
    return st.sampled_from(["a.hbs", "b.hbs", "pkg/c.hbs", "my-app/templates/d"])


def severities() -> st.SearchStrategy[Severity | int]:
    """Known severities plus the occasional out-of-range integer."""
    return st.one_of(st.sampled_from(list(Severity)), st.integers(min_value=3, max_value=9))


@st.composite
def _message(draw: st.DrawFn) -> Message:
    key = draw(file_keys())
    use_module_id = draw(st.booleans())
    return Message(
        rule=RuleName(draw(st.sampled_from(["no-bare-strings", "block-indentation", "quotes"]))),
        severity=draw(severities()),
        message=draw(st.text(max_size=10)),
        line=draw(st.integers(min_value=1, max_value=500)),
        column=draw(st.integers(min_value=0, max_value=120)),
        file_path=None if use_module_id else key,
        module_id=key if use_module_id else draw(st.none() | file_keys()),
        is_fixable=draw(st.booleans()),
    )


def messages(max_size: int = 40) -> st.SearchStrategy[list[Message]]:
    """Return lists of messages spread over a handful of files."""
    return st.lists(_message(), max_size=max_size)
