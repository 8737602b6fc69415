"""
Typed data structures for DOM assertion suites.

This module contains all enums and dataclasses that represent
the internal typed structure of a parsed suite.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum


# ─────────────────────────────────────────────────────────────────────────────
# Enums
# ─────────────────────────────────────────────────────────────────────────────

class AssertOp(str, Enum):
    """Supported assertion operators."""
    EXISTS = "exists"
    DOES_NOT_EXIST = "does_not_exist"
    IS_FOCUSED = "is_focused"
    IS_NOT_FOCUSED = "is_not_focused"
    HAS_CLASS = "has_class"
    HAS_TEXT = "has_text"
    HAS_TEXT_CONTAINING = "has_text_containing"
    HAS_VALUE = "has_value"


# ─────────────────────────────────────────────────────────────────────────────
# Document
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class DocumentConfig:
    """Where the HTML under test comes from and how to scope it."""
    path: str | None = None  # Relative to the suite file
    html: str | None = None  # Inline document, alternative to path
    parser: str = "html.parser"
    root: str | None = None  # Selector narrowing the search root
    focus: str | None = None  # Selector of the focused element

    @property
    def source(self) -> str:
        return self.path if self.path is not None else "<inline>"


# ─────────────────────────────────────────────────────────────────────────────
# Steps
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class AssertCheck:
    """Assertion check configuration."""
    op: AssertOp
    value: str | None = None  # Literal expectation
    pattern: re.Pattern | None = None  # Regex expectation
    count: int | None = None  # exists only
    message: str | None = None

    @property
    def expected(self) -> str | re.Pattern | None:
        return self.pattern if self.pattern is not None else self.value


@dataclass
class AssertStep:
    """A single DOM assertion against a target."""
    id: str
    target: str | None  # None means an absent target
    check: AssertCheck


# ─────────────────────────────────────────────────────────────────────────────
# Suite
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class Suite:
    """Fully parsed and validated suite."""
    version: int
    name: str
    document: DocumentConfig
    steps: list[AssertStep] = field(default_factory=list)
