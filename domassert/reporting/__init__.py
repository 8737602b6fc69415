"""
Reporting for DOM Assertion Suite Runs

This package provides reporting capabilities for capturing complete
records of suite runs.

Features:
    - Run metadata (ID, timestamp, suite info, document source)
    - Step-by-step records with timing
    - Every AssertionResult a step pushed
    - Error and failure messages
    - JSON serialization
    - Human-readable summaries

Usage:
    from domassert.schema_parsing import load_suite
    from domassert.reporting import Reporter

    suite, _ = load_suite("suites/login.yaml")
    reporter = Reporter.from_suite(suite)

    reporter.start_run()

    reporter.start_step("title")
    reporter.push_result("title", result)
    reporter.complete_step("title")

    report = reporter.finish_run()
    print(report.summary())

    reporter.save_json("reports/run.json")
"""

# Models
from .models import (
    RunReport,
    RunStatus,
    StepRecord,
    StepStatus,
    compute_suite_hash,
)

# Reporter
from .reporter import Reporter

__all__ = [
    # Models
    "RunReport",
    "RunStatus",
    "StepRecord",
    "StepStatus",
    "compute_suite_hash",
    # Reporter
    "Reporter",
]
