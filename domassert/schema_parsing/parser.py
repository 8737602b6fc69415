"""
Schema parser for DOM assertion suites.

This module converts validated YAML data into typed Suite structures.
"""

from __future__ import annotations

import re
from typing import Any

from .models import AssertCheck, AssertOp, AssertStep, DocumentConfig, Suite


class SuiteParser:
    """Parses and converts validated YAML to typed Suite structure."""

    def __init__(self, data: dict[str, Any]):
        self.data = data

    def parse(self) -> Suite:
        """Convert validated data to typed Suite."""
        return Suite(
            version=self.data["version"],
            name=self.data["name"],
            document=self._parse_document(),
            steps=self._parse_steps(),
        )

    def _parse_document(self) -> DocumentConfig:
        document = self.data["document"]
        return DocumentConfig(
            path=document.get("path"),
            html=document.get("html"),
            parser=document.get("parser", "html.parser"),
            root=document.get("root"),
            focus=document.get("focus"),
        )

    def _parse_steps(self) -> list[AssertStep]:
        return [self._parse_step(step) for step in self.data.get("steps", [])]

    def _parse_step(self, step: dict) -> AssertStep:
        check_data = step["check"]
        pattern = check_data.get("pattern")
        check = AssertCheck(
            op=AssertOp(check_data["op"]),
            value=check_data.get("value"),
            pattern=re.compile(pattern) if pattern is not None else None,
            count=check_data.get("count"),
            message=check_data.get("message"),
        )
        return AssertStep(
            id=step["id"],
            target=step.get("target"),
            check=check,
        )
