"""
Assertion targets and their resolution.

A target is what an assertion operates on: a CSS selector, a direct
element handle, or nothing at all. This module turns raw caller input
into a tagged target, renders targets for messages, and resolves them
against a search scope.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

from . import messages
from .errors import TargetError
from .models import AssertionResult

if TYPE_CHECKING:
    from ..scope import BaseScope

logger = logging.getLogger(__name__)

UNKNOWN = "<unknown>"
MAX_DESCRIPTION_LENGTH = 60


# ─────────────────────────────────────────────────────────────────────────────
# Target variants
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Selector:
    """A CSS selector evaluated against the scope."""
    selector: str


@dataclass(frozen=True, eq=False)
class ElementHandle:
    """A direct reference to an element; compared by identity."""
    element: Any


@dataclass(frozen=True)
class Absent:
    """No target at all (e.g. a lookup that returned None)."""


Target = Union[Selector, ElementHandle, Absent]


def to_target(value: Any, scope: BaseScope) -> Target:
    """
    Coerce raw caller input into a Target.

    Args:
        value: Selector string, element handle, None, or a Target
        scope: Scope used to recognise element handles

    Raises:
        TargetError: If ``value`` has an unsupported shape
    """
    if isinstance(value, (Selector, ElementHandle, Absent)):
        return value
    if value is None:
        return Absent()
    if isinstance(value, str):
        return Selector(value)
    if scope.is_element(value):
        return ElementHandle(value)
    raise TargetError(f"Unexpected Parameter: {value!r}")


# ─────────────────────────────────────────────────────────────────────────────
# Description
# ─────────────────────────────────────────────────────────────────────────────

def describe_target(target: Target, scope: BaseScope) -> str:
    """Render a target for use in assertion messages."""
    if isinstance(target, Selector):
        return target.selector or UNKNOWN
    if isinstance(target, ElementHandle):
        return describe_element(target.element, scope)
    if isinstance(target, Absent):
        return UNKNOWN
    raise TargetError(f"Unexpected Parameter: {target!r}")


def describe_element(element: Any, scope: BaseScope) -> str:
    """
    Compact structural rendering of an element: ``tag#id.class1.class2``.

    Long renderings are truncated with a trailing ``...``.
    """
    description = scope.tag_name(element)

    element_id = scope.element_id(element)
    if element_id:
        description += f"#{element_id}"

    classes = scope.class_list(element)
    if classes:
        description += "." + ".".join(classes)

    if len(description) > MAX_DESCRIPTION_LENGTH:
        return description[: MAX_DESCRIPTION_LENGTH - 3] + "..."
    return description


# ─────────────────────────────────────────────────────────────────────────────
# Resolution
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Resolution:
    """
    Outcome of resolving a target to a single element.

    Exactly one of ``element`` and ``failure`` is set.
    """
    element: Any = None
    failure: AssertionResult | None = None

    @property
    def found(self) -> bool:
        return self.failure is None


def resolve_element(target: Target, scope: BaseScope) -> Resolution:
    """
    Resolve a target to the single element an assertion will inspect.

    A missing element is not an error: it yields a failing
    ``"Element <target> exists"`` result for the caller to report.

    Raises:
        TargetError: If ``target`` is not a Target variant
        SelectorError: If the selector cannot be parsed
    """
    if isinstance(target, Absent):
        logger.debug("Resolving absent target")
        return Resolution(failure=_not_found(UNKNOWN))

    if isinstance(target, Selector):
        element = scope.query_first(target.selector)
        if element is None:
            logger.debug(f"No element matches {target.selector!r}")
            return Resolution(failure=_not_found(target.selector or UNKNOWN))
        return Resolution(element=element)

    if isinstance(target, ElementHandle):
        return Resolution(element=target.element)

    raise TargetError(f"Unexpected Parameter: {target!r}")


def resolve_all(target: Target, scope: BaseScope) -> list[Any]:
    """
    Resolve a target to every element it matches.

    Raises:
        TargetError: If ``target`` is not a Target variant
        SelectorError: If the selector cannot be parsed
    """
    if isinstance(target, Absent):
        return []
    if isinstance(target, Selector):
        return scope.query_all(target.selector)
    if isinstance(target, ElementHandle):
        return [target.element]
    raise TargetError(f"Unexpected Parameter: {target!r}")


def _not_found(description: str) -> AssertionResult:
    return AssertionResult.failed_result(message=messages.exists_message(description))
