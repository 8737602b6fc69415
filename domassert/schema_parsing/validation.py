"""
Schema validation for DOM assertion suites.

This module contains the validation logic that checks raw parsed YAML
against the suite schema and reports errors with helpful messages.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from ..scope.soup import SUPPORTED_PARSERS
from .models import AssertOp

# Optional check fields each operator accepts
OP_FIELDS: dict[AssertOp, frozenset[str]] = {
    AssertOp.EXISTS: frozenset({"count"}),
    AssertOp.DOES_NOT_EXIST: frozenset(),
    AssertOp.IS_FOCUSED: frozenset(),
    AssertOp.IS_NOT_FOCUSED: frozenset(),
    AssertOp.HAS_CLASS: frozenset({"value"}),
    AssertOp.HAS_TEXT: frozenset({"value", "pattern"}),
    AssertOp.HAS_TEXT_CONTAINING: frozenset({"value"}),
    AssertOp.HAS_VALUE: frozenset({"value", "pattern"}),
}


# ─────────────────────────────────────────────────────────────────────────────
# Validation Result Types
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class ValidationError:
    """Represents a single validation error with context."""
    path: str  # e.g., "steps[0].check.op"
    message: str
    value: Any = None
    suggestion: str | None = None

    def __str__(self) -> str:
        parts = [f"❌ {self.path}: {self.message}"]
        if self.value is not None:
            parts.append(f"   Got: {repr(self.value)}")
        if self.suggestion:
            parts.append(f"   💡 {self.suggestion}")
        return "\n".join(parts)


@dataclass
class ValidationResult:
    """Result of schema validation."""
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def add_error(
        self,
        path: str,
        message: str,
        value: Any = None,
        suggestion: str | None = None
    ) -> None:
        self.errors.append(ValidationError(path, message, value, suggestion))

    def __str__(self) -> str:
        if self.is_valid:
            return "✅ Schema validation passed"
        lines = [f"Schema validation failed with {len(self.errors)} error(s):\n"]
        lines.extend(str(e) for e in self.errors)
        return "\n".join(lines)


# ─────────────────────────────────────────────────────────────────────────────
# Suite Validator
# ─────────────────────────────────────────────────────────────────────────────

class SuiteValidator:
    """Validates raw parsed YAML against the suite schema."""

    REQUIRED_TOP_LEVEL = {"version", "name", "document", "steps"}
    OPTIONAL_TOP_LEVEL: set[str] = set()
    DOCUMENT_KEYS = {"path", "html", "parser", "root", "focus"}
    CHECK_KEYS = {"op", "value", "pattern", "count", "message"}

    def __init__(self, data: dict[str, Any]):
        self.data = data
        self.result = ValidationResult()
        self.step_ids: set[str] = set()

    def validate(self) -> ValidationResult:
        """Run all validation checks and return result."""
        self._validate_top_level()
        if not self.result.is_valid:
            return self.result

        self._validate_version()
        self._validate_name()
        self._validate_document()
        self._validate_steps()

        return self.result

    def _validate_top_level(self) -> None:
        """Check required and unknown top-level keys."""
        keys = set(self.data.keys())
        missing = self.REQUIRED_TOP_LEVEL - keys
        unknown = keys - self.REQUIRED_TOP_LEVEL - self.OPTIONAL_TOP_LEVEL

        for key in sorted(missing):
            self.result.add_error(
                key,
                f"Required field '{key}' is missing",
                suggestion=f"Add '{key}:' to your suite file"
            )

        for key in sorted(unknown, key=str):
            self.result.add_error(
                str(key),
                f"Unknown top-level field '{key}'",
                suggestion=f"Valid fields are: {', '.join(sorted(self.REQUIRED_TOP_LEVEL | self.OPTIONAL_TOP_LEVEL))}"
            )

    def _validate_version(self) -> None:
        version = self.data.get("version")
        if not isinstance(version, int) or isinstance(version, bool):
            self.result.add_error(
                "version",
                "Must be an integer",
                value=version,
                suggestion="Use 'version: 1'"
            )
        elif version < 1:
            self.result.add_error(
                "version",
                "Must be >= 1",
                value=version
            )

    def _validate_name(self) -> None:
        name = self.data.get("name")
        if not isinstance(name, str):
            self.result.add_error(
                "name",
                "Must be a string",
                value=name
            )
        elif not name.strip():
            self.result.add_error(
                "name",
                "Cannot be empty",
                suggestion="Provide a descriptive name for your suite"
            )

    def _validate_document(self) -> None:
        document = self.data.get("document")
        if not isinstance(document, dict):
            self.result.add_error(
                "document",
                "Must be an object",
                value=document
            )
            return

        for key in sorted(set(document) - self.DOCUMENT_KEYS, key=str):
            self.result.add_error(
                f"document.{key}",
                "Unknown document field",
                suggestion=f"Valid fields are: {', '.join(sorted(self.DOCUMENT_KEYS))}"
            )

        has_path = document.get("path") is not None
        has_html = document.get("html") is not None
        if has_path == has_html:
            self.result.add_error(
                "document",
                "Exactly one of 'path' or 'html' is required",
                suggestion="Add 'path: page.html' or 'html: \"<div>...</div>\"'"
            )

        for key in ("path", "html", "root", "focus"):
            value = document.get(key)
            if value is not None and not isinstance(value, str):
                self.result.add_error(
                    f"document.{key}",
                    "Must be a string",
                    value=value
                )

        parser = document.get("parser")
        if parser is not None and parser not in SUPPORTED_PARSERS:
            self.result.add_error(
                "document.parser",
                "Unsupported HTML parser",
                value=parser,
                suggestion=f"Valid parsers: {', '.join(SUPPORTED_PARSERS)}"
            )

    def _validate_steps(self) -> None:
        steps = self.data.get("steps")
        if not isinstance(steps, list):
            self.result.add_error(
                "steps",
                "Must be a list",
                value=steps
            )
            return

        if len(steps) == 0:
            self.result.add_error(
                "steps",
                "Must contain at least one step",
                suggestion="Add at least one assertion step"
            )
            return

        for i, step in enumerate(steps):
            self._validate_step(i, step)

    def _validate_step(self, index: int, step: Any) -> None:
        path = f"steps[{index}]"

        if not isinstance(step, dict):
            self.result.add_error(
                path,
                "Step must be an object",
                value=step
            )
            return

        # Check required fields
        step_id = step.get("id")
        if not step_id:
            self.result.add_error(
                f"{path}.id",
                "Step must have an 'id' field",
                suggestion="Add a unique identifier like 'id: title_text'"
            )
        elif not isinstance(step_id, str):
            self.result.add_error(
                f"{path}.id",
                "Step id must be a string",
                value=step_id
            )
        elif step_id in self.step_ids:
            self.result.add_error(
                f"{path}.id",
                "Duplicate step id",
                value=step_id,
                suggestion="Each step must have a unique id"
            )
        else:
            self.step_ids.add(step_id)

        if "target" not in step:
            self.result.add_error(
                f"{path}.target",
                "Step must have a 'target' field",
                suggestion="Use a CSS selector, or 'target: null' for an absent target"
            )
        elif step["target"] is not None and not isinstance(step["target"], str):
            self.result.add_error(
                f"{path}.target",
                "Target must be a string (CSS selector) or null",
                value=step["target"]
            )

        self._validate_check(path, step.get("check"))

    def _validate_check(self, path: str, check: Any) -> None:
        path = f"{path}.check"
        if not isinstance(check, dict) or not check:
            self.result.add_error(path, "Step requires a 'check' object", value=check)
            return

        for key in sorted(set(check) - self.CHECK_KEYS, key=str):
            self.result.add_error(
                f"{path}.{key}",
                "Unknown check field",
                suggestion=f"Valid fields are: {', '.join(sorted(self.CHECK_KEYS))}"
            )

        try:
            op = AssertOp(check.get("op"))
        except ValueError:
            self.result.add_error(
                f"{path}.op",
                "Invalid assertion operator",
                value=check.get("op"),
                suggestion=f"Valid operators: {', '.join(o.value for o in AssertOp)}"
            )
            return

        accepted = OP_FIELDS[op]
        for key in ("value", "pattern", "count"):
            if key in check and key not in accepted:
                self.result.add_error(
                    f"{path}.{key}",
                    f"Operator '{op.value}' does not take a '{key}'",
                    suggestion=_accepting_ops(key),
                )

        if "value" in accepted and "pattern" in accepted:
            if ("value" in check) == ("pattern" in check):
                self.result.add_error(
                    path,
                    f"Operator '{op.value}' requires exactly one of 'value' or 'pattern'"
                )
        elif "value" in accepted and "value" not in check:
            self.result.add_error(
                f"{path}.value",
                f"Operator '{op.value}' requires a 'value' field"
            )

        if "value" in check and "value" in accepted and not isinstance(check["value"], str):
            self.result.add_error(
                f"{path}.value",
                "Value must be a string",
                value=check["value"],
                suggestion="Quote numbers, e.g. value: \"42\""
            )

        if "pattern" in check and "pattern" in accepted:
            self._validate_pattern(f"{path}.pattern", check["pattern"])

        if "count" in check and "count" in accepted:
            count = check["count"]
            if not isinstance(count, int) or isinstance(count, bool) or count < 0:
                self.result.add_error(f"{path}.count", "Must be a non-negative integer", value=count)

        message = check.get("message")
        if message is not None and not isinstance(message, str):
            self.result.add_error(f"{path}.message", "Message must be a string", value=message)

    def _validate_pattern(self, path: str, pattern: Any) -> None:
        if not isinstance(pattern, str):
            self.result.add_error(path, "Pattern must be a string (regular expression)", value=pattern)
            return
        try:
            re.compile(pattern)
        except re.error as e:
            self.result.add_error(path, f"Invalid regular expression: {e}", value=pattern)


def _accepting_ops(key: str) -> str:
    ops = [op.value for op, fields in OP_FIELDS.items() if key in fields]
    return f"'{key}' is accepted by: {', '.join(ops)}"
