"""
Assertion result and expectation models.

This module defines the record every assertion produces, the
tagged expectation type used to dispatch literal vs. pattern
comparisons, and the options accepted by existence checks.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .errors import ExpectationError, OptionsError

# Sentinel stored as `expected` when exists() is called without a count
NON_ZERO = "non-zero"


@dataclass(frozen=True)
class AssertionResult:
    """
    Result of a single DOM assertion.

    Attributes:
        result: Whether the assertion passed
        actual: What was actually observed (text, value, count, ...)
        expected: What was expected (literal, pattern source, count, ...)
        message: Human-readable description of the assertion
    """
    result: bool
    message: str
    actual: Any = None
    expected: Any = None

    def __post_init__(self) -> None:
        if not self.message:
            raise ValueError("AssertionResult.message must not be empty")

    @property
    def passed(self) -> bool:
        return self.result

    @property
    def failed(self) -> bool:
        return not self.result

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "result": self.result,
            "actual": self.actual,
            "expected": self.expected,
            "message": self.message,
        }

    def __str__(self) -> str:
        """Format as a human-readable string."""
        if self.result:
            return f"✅ PASS: {self.message}"

        lines = [f"❌ FAIL: {self.message}"]

        if self.expected is not None:
            lines.append(f"   Expected: {_format_value(self.expected)}")

        if self.actual is not None:
            lines.append(f"   Actual:   {_format_value(self.actual)}")

        return "\n".join(lines)

    @classmethod
    def passed_result(
        cls,
        message: str,
        actual: Any = None,
        expected: Any = None,
    ) -> AssertionResult:
        """Create a passing result."""
        return cls(result=True, message=message, actual=actual, expected=expected)

    @classmethod
    def failed_result(
        cls,
        message: str,
        actual: Any = None,
        expected: Any = None,
    ) -> AssertionResult:
        """Create a failing result."""
        return cls(result=False, message=message, actual=actual, expected=expected)


class ExpectationKind(str, Enum):
    """How an expected value is compared."""
    LITERAL = "literal"
    PATTERN = "pattern"


@dataclass(frozen=True)
class Expectation:
    """
    An expected value tagged with its comparison kind.

    Literal expectations hold a ``str``, pattern expectations hold a
    compiled ``re.Pattern``. Use ``Expectation.of()`` to build one from
    whatever the caller passed.
    """
    kind: ExpectationKind
    value: str | re.Pattern

    @classmethod
    def of(cls, value: Any) -> Expectation:
        if isinstance(value, Expectation):
            return value
        if isinstance(value, re.Pattern):
            return cls(ExpectationKind.PATTERN, value)
        if isinstance(value, str):
            return cls(ExpectationKind.LITERAL, value)
        raise ExpectationError(
            f"Expected a string or compiled pattern, got {type(value).__name__}: {value!r}"
        )

    @property
    def is_pattern(self) -> bool:
        return self.kind == ExpectationKind.PATTERN

    @property
    def source(self) -> str:
        """The literal text, or the pattern source for patterns."""
        if isinstance(self.value, re.Pattern):
            return self.value.pattern
        return self.value


@dataclass(frozen=True)
class ExistsOptions:
    """Options for existence checks. ``count=None`` means "at least one"."""
    count: int | None = None

    def __post_init__(self) -> None:
        count = self.count
        if count is None:
            return
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise OptionsError(f"Unexpected Parameter: count={count!r}")

    @classmethod
    def coerce(
        cls, options: ExistsOptions | Mapping[str, Any] | None
    ) -> ExistsOptions:
        if options is None:
            return cls()
        if isinstance(options, ExistsOptions):
            return options
        if isinstance(options, Mapping):
            unknown = set(options) - {"count"}
            if unknown:
                raise OptionsError(f"Unexpected option(s): {', '.join(sorted(unknown))}")
            return cls(count=options.get("count"))
        raise OptionsError(f"Unexpected Parameter: {options!r}")


def _format_value(value: Any, max_length: int = 100) -> str:
    """Format a value for display, truncating if too long."""
    if value is None:
        return "null"

    if isinstance(value, (list, dict)):
        try:
            formatted = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError):
            formatted = repr(value)
    else:
        formatted = repr(value)

    if len(formatted) > max_length:
        return formatted[: max_length - 3] + "..."

    return formatted
