"""
Loading suites from YAML files or strings.

Both entry points return ``(suite, result)``; ``suite`` is None whenever
``result`` carries errors.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .models import Suite
from .parser import SuiteParser
from .validation import SuiteValidator, ValidationResult

logger = logging.getLogger(__name__)

YAML_HINT = "Check YAML formatting (indentation, colons, quoting of selectors)"


def load_suite(path: str | Path) -> tuple[Suite | None, ValidationResult]:
    """
    Load and validate a suite file.

    Example:
        suite, result = load_suite("suites/login.yaml")
        if not result.is_valid:
            print(result)
            raise SystemExit(1)
    """
    path = Path(path)
    if not path.is_file():
        return _failure(str(path), "File not found", suggestion="Check the file path is correct")

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        return _failure(str(path), f"Cannot read file: {e}")

    logger.debug(f"Loading suite from {path}")
    return _load_text(text, str(path))


def validate_suite_yaml(yaml_string: str) -> tuple[Suite | None, ValidationResult]:
    """Validate and parse a suite given as a YAML string."""
    return _load_text(yaml_string, "yaml")


def _load_text(text: str, source: str) -> tuple[Suite | None, ValidationResult]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        return _failure(source, f"Invalid YAML syntax: {e}", suggestion=YAML_HINT)

    if not isinstance(data, dict):
        return _failure(
            source,
            "Content must be a YAML object (not a list or scalar)",
            value=type(data).__name__,
        )

    result = SuiteValidator(data).validate()
    if not result.is_valid:
        logger.debug(f"{source}: {len(result.errors)} validation error(s)")
        return None, result
    return SuiteParser(data).parse(), result


def _failure(path: str, message: str, **details: Any) -> tuple[None, ValidationResult]:
    result = ValidationResult()
    result.add_error(path, message, **details)
    return None, result
