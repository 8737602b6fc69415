"""
Predicate evaluators for DOM assertions.

Each evaluator takes already-resolved element state plus the expected
value and returns an AssertionResult. None of them touch a scope, so
they can be exercised without a document.
"""

from __future__ import annotations

from typing import Any

from . import messages
from .models import NON_ZERO, AssertionResult, Expectation, ExistsOptions
from .text import collapse_whitespace


def evaluate_exists(
    elements: list[Any],
    description: str,
    count: int | None = None,
    message: str | None = None,
) -> AssertionResult:
    """
    Check how many elements matched.

    Without ``count`` the check passes for any non-zero number of
    matches; with ``count`` it passes only for exactly that many.
    """
    # Validates count
    count = ExistsOptions(count=count).count
    actual = len(elements)

    if count is None:
        result = actual > 0
        expected: Any = NON_ZERO
    else:
        result = actual == count
        expected = count

    return AssertionResult(
        result=result,
        actual=actual,
        expected=expected,
        message=message or messages.exists_message(description, count),
    )


def evaluate_focused(
    element: Any,
    active: Any,
    description: str,
    active_description: str | None = None,
    message: str | None = None,
) -> AssertionResult:
    """Pass iff ``element`` is the active element (identity, not equality)."""
    result = element is not None and element is active
    return AssertionResult(
        result=result,
        actual=active_description,
        expected=description,
        message=message or messages.focused_message(description),
    )


def evaluate_not_focused(
    element: Any,
    active: Any,
    description: str,
    active_description: str | None = None,
    message: str | None = None,
) -> AssertionResult:
    """Pass iff ``element`` is not the active element."""
    result = element is None or element is not active
    return AssertionResult(
        result=result,
        actual=active_description,
        expected=description,
        message=message or messages.not_focused_message(description),
    )


def evaluate_text(
    text: str,
    expected: Expectation,
    description: str,
    message: str | None = None,
) -> AssertionResult:
    """
    Compare an element's text content.

    Patterns are searched in the raw text. Literals are compared after
    collapsing whitespace on both sides.
    """
    if expected.is_pattern:
        return AssertionResult(
            result=expected.value.search(text) is not None,
            actual=text,
            expected=expected.source,
            message=message or messages.has_text_message(description, expected),
        )

    normalized = Expectation.of(collapse_whitespace(expected.value))
    actual = collapse_whitespace(text)
    return AssertionResult(
        result=actual == normalized.value,
        actual=actual,
        expected=normalized.value,
        message=message or messages.has_text_message(description, normalized),
    )


def evaluate_text_containing(
    text: str,
    fragment: str,
    description: str,
    message: str | None = None,
) -> AssertionResult:
    """Substring check on the raw, non-normalized text."""
    return AssertionResult(
        result=fragment in text,
        actual=text,
        expected=fragment,
        message=message or messages.has_text_containing_message(description, fragment),
    )


def evaluate_value(
    value: str | None,
    expected: Expectation,
    description: str,
    message: str | None = None,
) -> AssertionResult:
    """Compare a form value exactly, or search it with a pattern."""
    if value is None:
        result = False
    elif expected.is_pattern:
        result = expected.value.search(value) is not None
    else:
        result = value == expected.value

    return AssertionResult(
        result=result,
        actual=value,
        expected=expected.source,
        message=message or messages.has_value_message(description, expected),
    )


def evaluate_class(
    classes: list[str],
    expected: str,
    description: str,
    message: str | None = None,
) -> AssertionResult:
    """Pass iff ``expected`` is one of the class tokens."""
    return AssertionResult(
        result=expected in classes,
        actual=" ".join(classes),
        expected=expected,
        message=message or messages.has_class_message(description, expected),
    )
