"""
Exceptions for contract violations.

Assertion failures are never raised; they are reported as failing
AssertionResult values. The exceptions below signal caller bugs:
an unsupported target or expected value, bad options, or a selector
that cannot be parsed.
"""

from __future__ import annotations


class DomAssertError(Exception):
    """Base class for all domassert contract violations."""


class TargetError(DomAssertError, TypeError):
    """Target is neither a selector, an element handle, nor absent."""


class ExpectationError(DomAssertError, TypeError):
    """Expected value is neither a string nor a compiled pattern."""


class OptionsError(DomAssertError, TypeError):
    """Assertion options have an unknown key or an invalid value."""


class SelectorError(DomAssertError, ValueError):
    """Selector could not be parsed by the structural query engine."""

    def __init__(self, selector: str, reason: str):
        self.selector = selector
        self.reason = reason
        super().__init__(f"Invalid selector {selector!r}: {reason}")


class ScopeError(DomAssertError, ValueError):
    """A search scope could not be built from its configuration."""
