"""
domassert - DOM Assertions for Test Suites

This package resolves assertion targets (CSS selectors or element
handles) against an HTML document and evaluates predicates on them,
producing structured pass/fail results.

Subpackages:
    - assertions: Target resolution, predicate evaluators, DOMAssertions facade
    - scope: Search scopes (BeautifulSoup-backed)
    - schema_parsing: Parse and validate YAML assertion suites
    - reporting: Run reports and result tracking

Usage:
    from domassert import DOMAssertions, SoupScope

    scope = SoupScope.from_html(html)
    results = []

    dom = DOMAssertions("#title", scope, results.append)
    dom.exists()
    dom.has_text("Welcome to QUnit")

    for result in results:
        print(result)
"""

__version__ = "0.1.0"

# Re-export assertions for convenience
from .assertions import (
    # Models
    AssertionResult,
    Expectation,
    ExpectationKind,
    ExistsOptions,
    NON_ZERO,
    # Errors
    DomAssertError,
    TargetError,
    ExpectationError,
    OptionsError,
    SelectorError,
    ScopeError,
    # Targets
    Target,
    Selector,
    ElementHandle,
    Absent,
    describe_target,
    resolve_element,
    resolve_all,
    # Text normalization
    collapse_whitespace,
    # Facade
    DOMAssertions,
    AssertionContext,
    ResultSink,
)

# Re-export scopes for convenience
from .scope import BaseScope, SoupScope, create_scope

# Re-export schema_parsing for convenience
from .schema_parsing import (
    load_suite,
    validate_suite_yaml,
    Suite,
    DocumentConfig,
    AssertStep,
    AssertCheck,
    AssertOp,
    ValidationResult,
    ValidationError,
    SuiteValidator,
)

# Re-export reporting for convenience
from .reporting import (
    RunReport,
    RunStatus,
    StepRecord,
    StepStatus,
    compute_suite_hash,
    Reporter,
)

__all__ = [
    # Package info
    "__version__",
    # Assertions - Models
    "AssertionResult",
    "Expectation",
    "ExpectationKind",
    "ExistsOptions",
    "NON_ZERO",
    # Assertions - Errors
    "DomAssertError",
    "TargetError",
    "ExpectationError",
    "OptionsError",
    "SelectorError",
    "ScopeError",
    # Assertions - Targets
    "Target",
    "Selector",
    "ElementHandle",
    "Absent",
    "describe_target",
    "resolve_element",
    "resolve_all",
    # Assertions - Text normalization
    "collapse_whitespace",
    # Assertions - Facade
    "DOMAssertions",
    "AssertionContext",
    "ResultSink",
    # Scope
    "BaseScope",
    "SoupScope",
    "create_scope",
    # Schema parsing
    "load_suite",
    "validate_suite_yaml",
    "Suite",
    "DocumentConfig",
    "AssertStep",
    "AssertCheck",
    "AssertOp",
    "ValidationResult",
    "ValidationError",
    "SuiteValidator",
    # Reporting
    "RunReport",
    "RunStatus",
    "StepRecord",
    "StepStatus",
    "compute_suite_hash",
    "Reporter",
]
