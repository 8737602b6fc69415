"""Whitespace normalization for text comparisons."""

from __future__ import annotations

import re

WHITESPACE_RUN = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    """
    Collapse every run of whitespace to a single space and trim both ends.

    Example:
        collapse_whitespace("\\n  Welcome to\\n  QUnit ")  # "Welcome to QUnit"
    """
    return WHITESPACE_RUN.sub(" ", text).strip(" ")
