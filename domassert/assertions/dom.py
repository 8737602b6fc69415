"""
The public DOM assertion facade.

``DOMAssertions`` binds a target, a search scope and a result sink,
and exposes one method per assertion kind. Every method pushes exactly
one AssertionResult to the sink and returns it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from . import evaluators
from .errors import ExpectationError
from .models import AssertionResult, Expectation, ExistsOptions
from .targets import (
    Resolution,
    Target,
    describe_element,
    describe_target,
    resolve_all,
    resolve_element,
    to_target,
)

if TYPE_CHECKING:
    from ..scope import BaseScope

logger = logging.getLogger(__name__)

ResultSink = Callable[[AssertionResult], None]


class DOMAssertions:
    """
    Assertions about the element(s) a target resolves to.

    Example:
        results = []
        scope = SoupScope.from_html(html)

        DOMAssertions("#title", scope, results.append).has_text("Welcome to QUnit")
        DOMAssertions(".choice", scope, results.append).exists({"count": 4})
        DOMAssertions("input.username", scope, results.append).has_value(re.compile("^H"))

        assert all(r.passed for r in results)
    """

    def __init__(self, target: Any, scope: BaseScope, sink: ResultSink):
        """
        Args:
            target: CSS selector, element handle, None, or a Target
            scope: Scope selectors are evaluated against
            sink: Callable receiving every AssertionResult

        Raises:
            TargetError: If ``target`` has an unsupported shape
        """
        self.target: Target = to_target(target, scope)
        self.scope = scope
        self.sink = sink

    @property
    def target_description(self) -> str:
        return describe_target(self.target, self.scope)

    def exists(
        self,
        options: ExistsOptions | Mapping[str, Any] | str | None = None,
        message: str | None = None,
    ) -> AssertionResult:
        """
        Assert that an element (or ``count`` elements) matching the target exists.

        A string in place of ``options`` is taken as the message.

        Example:
            dom("#title").exists()
            dom(".choice").exists({"count": 4})
        """
        if isinstance(options, str):
            options, message = None, options
        count = ExistsOptions.coerce(options).count

        elements = resolve_all(self.target, self.scope)
        logger.debug(f"exists: {self.target_description} matched {len(elements)}, count={count}")
        return self._push(
            evaluators.evaluate_exists(elements, self.target_description, count, message)
        )

    def does_not_exist(self, message: str | None = None) -> AssertionResult:
        """
        Assert that no element matching the target exists.

        Example:
            dom(".should-not-exist").does_not_exist()
        """
        return self.exists(ExistsOptions(count=0), message)

    def is_focused(self, message: str | None = None) -> AssertionResult:
        """
        Assert that the target element is the document's focused element.

        Example:
            dom("input.email").is_focused()
        """
        resolution = self._resolve()
        if not resolution.found:
            return resolution.failure
        element = resolution.element

        active = self.scope.active_element()
        return self._push(
            evaluators.evaluate_focused(
                element,
                active,
                self.target_description,
                self._describe_active(active),
                message,
            )
        )

    def is_not_focused(self, message: str | None = None) -> AssertionResult:
        """
        Assert that the target element is not the document's focused element.

        Example:
            dom('input[type="password"]').is_not_focused()
        """
        resolution = self._resolve()
        if not resolution.found:
            return resolution.failure
        element = resolution.element

        active = self.scope.active_element()
        return self._push(
            evaluators.evaluate_not_focused(
                element,
                active,
                self.target_description,
                self._describe_active(active),
                message,
            )
        )

    def has_class(self, expected: str, message: str | None = None) -> AssertionResult:
        """
        Assert that the target element has the CSS class ``expected``.

        Example:
            dom('input[type="password"]').has_class("secret-password-input")
        """
        _require_str(expected, "has_class")
        resolution = self._resolve()
        if not resolution.found:
            return resolution.failure
        element = resolution.element

        return self._push(
            evaluators.evaluate_class(
                self.scope.class_list(element), expected, self.target_description, message
            )
        )

    def has_text(self, expected: Any, message: str | None = None) -> AssertionResult:
        """
        Assert that the target element's text matches ``expected``.

        String expectations are compared with whitespace collapsed on both
        sides; compiled patterns are searched in the raw text.

        Example:
            # <h2 id="title">
            #   Welcome to <b>QUnit</b>
            # </h2>
            dom("#title").has_text("Welcome to QUnit")
            dom(".foo").has_text(re.compile(r"[12]\\d{3}"))
        """
        expectation = Expectation.of(expected)
        resolution = self._resolve()
        if not resolution.found:
            return resolution.failure
        element = resolution.element

        return self._push(
            evaluators.evaluate_text(
                self.scope.text_content(element), expectation, self.target_description, message
            )
        )

    def has_text_containing(self, text: str, message: str | None = None) -> AssertionResult:
        """
        Assert that the target element's raw text contains ``text``.

        Example:
            dom("#title").has_text_containing("Welcome")
        """
        _require_str(text, "has_text_containing")
        resolution = self._resolve()
        if not resolution.found:
            return resolution.failure
        element = resolution.element

        return self._push(
            evaluators.evaluate_text_containing(
                self.scope.text_content(element), text, self.target_description, message
            )
        )

    def has_value(self, expected: Any, message: str | None = None) -> AssertionResult:
        """
        Assert that the target form control's value equals or matches ``expected``.

        Example:
            dom("input.username").has_value("HSimpson")
        """
        expectation = Expectation.of(expected)
        resolution = self._resolve()
        if not resolution.found:
            return resolution.failure
        element = resolution.element

        return self._push(
            evaluators.evaluate_value(
                self.scope.form_value(element), expectation, self.target_description, message
            )
        )

    def _push(self, result: AssertionResult) -> AssertionResult:
        self.sink(result)
        return result

    def _resolve(self) -> Resolution:
        """Resolve the target, pushing the failure when no element is found."""
        resolution = resolve_element(self.target, self.scope)
        if not resolution.found:
            self._push(resolution.failure)
        return resolution

    def _describe_active(self, active: Any) -> str | None:
        if active is None:
            return None
        return describe_element(active, self.scope)


class AssertionContext:
    """
    Binds a scope and a result sink so targets can be asserted on tersely.

    Example:
        context = AssertionContext(scope, reporter_sink)
        context.dom("#title").has_text("Welcome")
        context.dom("li", root=scope.query_first("#menu")).exists({"count": 3})
    """

    def __init__(self, scope: BaseScope, sink: ResultSink):
        self.scope = scope
        self.sink = sink

    def dom(self, target: Any = None, root: Any = None) -> DOMAssertions:
        """
        Create assertions for ``target``, optionally searching only inside ``root``.

        Focus is always read from the whole document.
        """
        scope = self.scope
        if root is not None:
            if not scope.is_element(root) or not hasattr(scope, "within"):
                raise TypeError(f"Cannot narrow scope to {root!r}")
            scope = scope.within(root)
        return DOMAssertions(target, scope, self.sink)


def _require_str(value: Any, method: str) -> None:
    if not isinstance(value, str):
        raise ExpectationError(
            f"{method}() expects a string, got {type(value).__name__}: {value!r}"
        )
