"""
Default assertion messages.

Every function takes the target description (and the expected value,
where there is one) explicitly, so evaluators never build messages
inline.
"""

from __future__ import annotations

from .models import Expectation


def exists_message(description: str, count: int | None = None) -> str:
    """Phrase an existence check, with singular/plural count wording."""
    if count is None:
        return f"Element {description} exists"
    if count == 0:
        return f"Element {description} does not exist"
    if count == 1:
        return f"Element {description} exists once"
    if count == 2:
        return f"Element {description} exists twice"
    return f"Element {description} exists {count} times"


def focused_message(description: str) -> str:
    return f"Element {description} is focused"


def not_focused_message(description: str) -> str:
    return f"Element {description} is not focused"


def has_class_message(description: str, expected: str) -> str:
    return f'Element {description} has CSS class "{expected}"'


def has_text_message(description: str, expected: Expectation) -> str:
    if expected.is_pattern:
        return f"Element {description} has text matching {format_pattern(expected)}"
    return f'Element {description} has text "{expected.source}"'


def has_text_containing_message(description: str, text: str) -> str:
    return f'Element {description} has text containing "{text}"'


def has_value_message(description: str, expected: Expectation) -> str:
    if expected.is_pattern:
        return f"Element {description} has value matching {format_pattern(expected)}"
    return f'Element {description} has value "{expected.source}"'


def format_pattern(expected: Expectation) -> str:
    """Render a pattern expectation as ``/source/``."""
    return f"/{expected.source}/"
