"""
Reporter: builds a RunReport while a suite runs.

The Reporter is also the assertion result sink for suite runs:
``sink_for(step_id)`` returns a callable that DOMAssertions pushes into.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .models import RunReport, StepRecord, StepStatus, compute_suite_hash

if TYPE_CHECKING:
    from ..assertions import AssertionResult, ResultSink
    from ..schema_parsing import AssertCheck, Suite

logger = logging.getLogger(__name__)

NO_RESULT = "Assertion pushed no result"


class Reporter:
    """
    Records step outcomes for one suite run.

    Example:
        suite, _ = load_suite("suites/login.yaml")
        reporter = Reporter.from_suite(suite)
        reporter.start_run()

        reporter.start_step("title")
        DOMAssertions("#title", scope, reporter.sink_for("title")).has_text("Welcome")
        reporter.complete_step("title")

        print(reporter.finish_run().summary())
    """

    def __init__(self, report: RunReport):
        self.report = report

    @classmethod
    def from_suite(cls, suite: Suite, run_id: str | None = None) -> Reporter:
        """Create a Reporter with one pending StepRecord per suite step."""
        report = RunReport(
            suite_name=suite.name,
            suite_version=suite.version,
            suite_hash=compute_suite_hash(_suite_to_dict(suite)),
            document_source=suite.document.source,
        )
        if run_id:
            report.run_id = run_id

        for step in suite.steps:
            report.add_step(StepRecord(
                step_id=step.id,
                assertion_type=step.check.op.value,
                target=step.target,
                expected_value=_declared_expectation(step.check),
            ))
        return cls(report)

    # ─────────────────────────────────────────────────────────────────────
    # Run lifecycle
    # ─────────────────────────────────────────────────────────────────────

    def start_run(self) -> None:
        self.report.start()
        logger.info(f"Run {self.report.run_id} started: {self.report.suite_name}")

    def finish_run(self) -> RunReport:
        """Complete the report and return it."""
        self.report.complete()
        logger.info(
            f"Run {self.report.run_id} finished: {self.report.status.value} "
            f"({self.report.passed_steps}/{self.report.total_steps} passed)"
        )
        return self.report

    def fail_run(self, error_message: str) -> None:
        """Record a run-level error and skip every step that has not run."""
        logger.warning(f"Run {self.report.run_id} aborted: {error_message}")
        self.report.error_message = error_message
        for step in self.report.steps:
            if not step.is_finished:
                self.skip_step(step.step_id, reason=error_message)

    # ─────────────────────────────────────────────────────────────────────
    # Step lifecycle
    # ─────────────────────────────────────────────────────────────────────

    def start_step(self, step_id: str) -> StepRecord | None:
        step = self.report.get_step(step_id)
        if step:
            step.start()
        return step

    def push_result(self, step_id: str, result: AssertionResult) -> StepRecord | None:
        """Record one AssertionResult against a step. Unknown ids are ignored."""
        step = self.report.get_step(step_id)
        if step:
            step.record(result.to_dict())
        else:
            logger.debug(f"Dropping result for unknown step {step_id!r}")
        return step

    def sink_for(self, step_id: str) -> ResultSink:
        """Return a result sink that records into ``step_id``."""
        return lambda result: self.push_result(step_id, result)

    def complete_step(self, step_id: str) -> StepRecord | None:
        """
        Settle a step from the results pushed to it.

        A step passes only if it received at least one result and every
        result passed. A step with no results is an error.
        """
        step = self.report.get_step(step_id)
        if not step:
            return None

        status = step.outcome()
        if status is None:
            return self.complete_step_error(step_id, NO_RESULT)
        step.complete(status)
        return step

    def complete_step_error(
        self,
        step_id: str,
        error_message: str,
        error_details: dict[str, Any] | None = None,
    ) -> StepRecord | None:
        """Mark a step as errored: the assertion could not be evaluated."""
        step = self.report.get_step(step_id)
        if step:
            step.error_message = error_message
            step.error_details = error_details
            step.complete(StepStatus.ERROR)
        return step

    def skip_step(self, step_id: str, reason: str | None = None) -> StepRecord | None:
        step = self.report.get_step(step_id)
        if step:
            if reason:
                step.failure_message = f"Skipped: {reason}"
            step.complete(StepStatus.SKIPPED)
        return step

    # ─────────────────────────────────────────────────────────────────────
    # Output
    # ─────────────────────────────────────────────────────────────────────

    def save_json(self, path: str | Path) -> Path:
        """Write the report as JSON, creating parent directories."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.report.to_json(), encoding="utf-8")
        logger.info(f"Report written to {path}")
        return path


def _declared_expectation(check: AssertCheck) -> Any:
    """What the suite file says the step expects, before anything runs."""
    if check.pattern is not None:
        return check.pattern.pattern
    if check.count is not None:
        return check.count
    return check.value


def _suite_to_dict(suite: Suite) -> dict[str, Any]:
    """Plain-dict form of a suite, used for hashing."""
    document = suite.document
    return {
        "version": suite.version,
        "name": suite.name,
        "document": {
            "path": document.path,
            "html": document.html,
            "parser": document.parser,
            "root": document.root,
            "focus": document.focus,
        },
        "steps": [
            {
                "id": step.id,
                "target": step.target,
                "check": {
                    "op": step.check.op.value,
                    "value": step.check.value,
                    "pattern": _declared_expectation(step.check) if step.check.pattern else None,
                    "count": step.check.count,
                    "message": step.check.message,
                },
            }
            for step in suite.steps
        ],
    }
