"""
DOM Assertion Engine

This package resolves assertion targets (CSS selectors, element
handles, or nothing) against a search scope and evaluates predicates
on the resulting element(s).

Supported assertions:
    - exists: At least one, or exactly ``count``, matching elements
    - does_not_exist: No matching element
    - is_focused / is_not_focused: Element is (not) the focused element
    - has_class: Element has a CSS class token
    - has_text: Text equals (whitespace-collapsed) or matches a pattern
    - has_text_containing: Raw text contains a substring
    - has_value: Form value equals (exactly) or matches a pattern

Usage:
    from domassert.assertions import DOMAssertions
    from domassert.scope import SoupScope

    scope = SoupScope.from_html(html)
    results = []

    DOMAssertions("#title", scope, results.append).has_text("Welcome to QUnit")
    DOMAssertions(".missing", scope, results.append).does_not_exist()

    for result in results:
        print(result)
"""

# Models
from .models import NON_ZERO, AssertionResult, Expectation, ExpectationKind, ExistsOptions

# Errors
from .errors import (
    DomAssertError,
    ExpectationError,
    OptionsError,
    ScopeError,
    SelectorError,
    TargetError,
)

# Targets
from .targets import (
    UNKNOWN,
    Absent,
    ElementHandle,
    Resolution,
    Selector,
    Target,
    describe_element,
    describe_target,
    resolve_all,
    resolve_element,
    to_target,
)

# Text normalization
from .text import collapse_whitespace

# Facade
from .dom import AssertionContext, DOMAssertions, ResultSink

__all__ = [
    # Models
    "AssertionResult",
    "Expectation",
    "ExpectationKind",
    "ExistsOptions",
    "NON_ZERO",
    # Errors
    "DomAssertError",
    "TargetError",
    "ExpectationError",
    "OptionsError",
    "SelectorError",
    "ScopeError",
    # Targets
    "Target",
    "Selector",
    "ElementHandle",
    "Absent",
    "UNKNOWN",
    "Resolution",
    "to_target",
    "describe_target",
    "describe_element",
    "resolve_element",
    "resolve_all",
    # Text normalization
    "collapse_whitespace",
    # Facade
    "DOMAssertions",
    "AssertionContext",
    "ResultSink",
]
