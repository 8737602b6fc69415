"""
Run report models.

A RunReport holds one StepRecord per suite step. Each record keeps every
AssertionResult the step pushed (as dicts) plus the step's timing and
final status.
"""

from __future__ import annotations

import hashlib
import json
import uuid
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class StepStatus(str, Enum):
    """Lifecycle state of a single assertion step."""
    PENDING = "pending"
    RUNNING = "running"
    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"
    SKIPPED = "skipped"


class RunStatus(str, Enum):
    """Overall outcome of a suite run."""
    PENDING = "pending"
    RUNNING = "running"
    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"


STATUS_ICONS = {
    "pending": "⏳",
    "running": "🔄",
    "passed": "✅",
    "failed": "❌",
    "error": "⚠️",
    "skipped": "⏭️",
}

RULE = "─" * 59
DOUBLE_RULE = "═" * 59


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _elapsed_ms(start: datetime | None, end: datetime | None) -> float | None:
    if start is None or end is None:
        return None
    return (end - start).total_seconds() * 1000


# ─────────────────────────────────────────────────────────────────────────────
# Step records
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class StepRecord:
    """
    Record of one suite step: a single assertion against one target.

    ``results`` holds the serialized AssertionResults the step pushed, in
    push order. ``actual_value`` mirrors the most recent result, and
    ``failure_message`` the first failing one.
    """
    step_id: str
    assertion_type: str  # AssertOp value, e.g. "has_text"
    target: str | None = None
    status: StepStatus = StepStatus.PENDING

    started_at: datetime | None = None
    ended_at: datetime | None = None

    expected_value: Any = None
    actual_value: Any = None
    results: list[dict[str, Any]] = field(default_factory=list)

    failure_message: str | None = None
    error_message: str | None = None
    error_details: dict[str, Any] | None = None

    @property
    def duration_ms(self) -> float | None:
        return _elapsed_ms(self.started_at, self.ended_at)

    @property
    def is_finished(self) -> bool:
        return self.status not in (StepStatus.PENDING, StepStatus.RUNNING)

    def start(self) -> None:
        self.status = StepStatus.RUNNING
        self.started_at = _now()

    def record(self, result: dict[str, Any]) -> None:
        """Append a serialized AssertionResult and refresh the observed values."""
        self.results.append(result)
        self.actual_value = result.get("actual")
        if result.get("expected") is not None:
            self.expected_value = result["expected"]
        if not result["result"] and self.failure_message is None:
            self.failure_message = result["message"]

    def outcome(self) -> StepStatus | None:
        """
        Status implied by the recorded results.

        None when nothing was recorded, which callers treat as an error.
        """
        if not self.results:
            return None
        if all(r["result"] for r in self.results):
            return StepStatus.PASSED
        return StepStatus.FAILED

    def complete(self, status: StepStatus) -> None:
        self.status = status
        self.ended_at = _now()

    def to_dict(self) -> dict[str, Any]:
        return {
            "step_id": self.step_id,
            "assertion_type": self.assertion_type,
            "target": self.target,
            "status": self.status.value,
            "timing": {
                "started_at": _iso(self.started_at),
                "ended_at": _iso(self.ended_at),
                "duration_ms": self.duration_ms,
            },
            "expected_value": _jsonable(self.expected_value),
            "actual_value": _jsonable(self.actual_value),
            "results": [{k: _jsonable(v) for k, v in r.items()} for r in self.results],
            "failure_message": self.failure_message,
            "error_message": self.error_message,
            "error_details": self.error_details,
        }


# ─────────────────────────────────────────────────────────────────────────────
# Run report
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class RunReport:
    """
    Complete record of running one suite against one document.

    ``error_message`` is set when the run could not execute its steps
    at all, e.g. when the document failed to load.
    """
    run_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    suite_name: str = ""
    suite_version: int = 1
    suite_hash: str = ""
    document_source: str = ""

    status: RunStatus = RunStatus.PENDING
    error_message: str | None = None

    started_at: datetime = field(default_factory=_now)
    ended_at: datetime | None = None

    steps: list[StepRecord] = field(default_factory=list)
    counts: Counter = field(default_factory=Counter)

    @property
    def duration_ms(self) -> float | None:
        return _elapsed_ms(self.started_at, self.ended_at)

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    @property
    def passed_steps(self) -> int:
        return self.counts[StepStatus.PASSED]

    @property
    def failed_steps(self) -> int:
        return self.counts[StepStatus.FAILED]

    @property
    def error_steps(self) -> int:
        return self.counts[StepStatus.ERROR]

    @property
    def skipped_steps(self) -> int:
        return self.counts[StepStatus.SKIPPED]

    def start(self) -> None:
        self.status = RunStatus.RUNNING
        self.started_at = _now()

    def complete(self) -> None:
        """Freeze the step counts and derive the run status from them."""
        self.ended_at = _now()
        self.counts = Counter(step.status for step in self.steps)

        if self.error_message or self.error_steps:
            self.status = RunStatus.ERROR
        elif self.failed_steps:
            self.status = RunStatus.FAILED
        else:
            self.status = RunStatus.PASSED

    def add_step(self, step: StepRecord) -> None:
        self.steps.append(step)

    def get_step(self, step_id: str) -> StepRecord | None:
        return next((s for s in self.steps if s.step_id == step_id), None)

    def to_dict(self) -> dict[str, Any]:
        return {
            "run_id": self.run_id,
            "suite": {
                "name": self.suite_name,
                "version": self.suite_version,
                "hash": self.suite_hash,
            },
            "document_source": self.document_source,
            "status": self.status.value,
            "error_message": self.error_message,
            "started_at": _iso(self.started_at),
            "ended_at": _iso(self.ended_at),
            "duration_ms": self.duration_ms,
            "summary": {
                "total": self.total_steps,
                "passed": self.passed_steps,
                "failed": self.failed_steps,
                "errors": self.error_steps,
                "skipped": self.skipped_steps,
            },
            "steps": [step.to_dict() for step in self.steps],
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, default=str)

    def summary(self) -> str:
        """Plain-text summary, one line per step plus failure details."""
        duration = f"{self.duration_ms:.0f}ms" if self.duration_ms is not None else "N/A"
        lines = [
            DOUBLE_RULE,
            f"  {self.suite_name}  ({self.document_source})",
            DOUBLE_RULE,
            f"  Run:      {self.run_id}",
            f"  Status:   {STATUS_ICONS[self.status.value]} {self.status.value.upper()}",
            f"  Duration: {duration}",
            RULE,
            f"  {self.passed_steps}/{self.total_steps} passed, {self.failed_steps} failed, "
            f"{self.error_steps} errors, {self.skipped_steps} skipped",
            RULE,
        ]
        if self.error_message:
            lines.append(f"  ⚠️  {self.error_message}")

        for step in self.steps:
            target = step.target if step.target is not None else "<unknown>"
            lines.append(f"  {STATUS_ICONS[step.status.value]} [{step.step_id}] {step.assertion_type} {target}")
            if step.status == StepStatus.FAILED:
                lines.append(f"      └─ {step.failure_message}")
                lines.append(f"         expected: {step.expected_value!r}")
                lines.append(f"         actual:   {step.actual_value!r}")
            elif step.error_message:
                lines.append(f"      └─ Error: {step.error_message}")
            elif step.failure_message:
                lines.append(f"      └─ {step.failure_message}")

        lines.append(DOUBLE_RULE)
        return "\n".join(lines)


def compute_suite_hash(suite_dict: dict[str, Any]) -> str:
    """Short SHA-256 fingerprint of a suite, stable across key order."""
    serialized = json.dumps(suite_dict, sort_keys=True, default=str)
    return hashlib.sha256(serialized.encode()).hexdigest()[:12]


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


def _jsonable(value: Any) -> Any:
    try:
        json.dumps(value)
    except (TypeError, ValueError):
        return str(value)
    return value
