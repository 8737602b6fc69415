"""Tests for whitespace normalization."""

import pytest

from domassert.assertions import collapse_whitespace


@pytest.mark.parametrize(
    "raw, expected",
    [
        (" Welcome to  QUnit ", "Welcome to QUnit"),
        ("\n    Welcome to QUnit\n  ", "Welcome to QUnit"),
        ("a\t\tb\r\nc", "a b c"),
        ("already clean", "already clean"),
        ("   ", ""),
        ("", ""),
        ("a  b", "a b"),
    ],
)
def test_collapse_whitespace(raw, expected):
    assert collapse_whitespace(raw) == expected


@pytest.mark.parametrize("raw", [" x  y ", "\n\n a \t b \n", "plain", ""])
def test_collapse_whitespace_is_idempotent(raw):
    once = collapse_whitespace(raw)
    assert collapse_whitespace(once) == once
