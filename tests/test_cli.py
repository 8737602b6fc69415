"""Tests for the domassert CLI and suite runner."""

import textwrap

import pytest
from typer.testing import CliRunner

from domassert import __version__
from domassert.cli import app, run_suite
from domassert.reporting import RunStatus, StepStatus
from domassert.schema_parsing import load_suite


runner = CliRunner()

LOGIN_HTML = """
<form id="login">
  <h1 id="title">Welcome   back</h1>
  <input class="username form-control" value="HSimpson">
  <input class="email" type="email">
  <button type="submit">Sign in</button>
</form>
"""

PASSING_SUITE = textwrap.dedent(
    """
    version: 1
    name: Login
    document:
      path: login.html
      focus: input.email
    steps:
      - id: title
        target: "#title"
        check:
          op: has_text
          value: Welcome back
      - id: inputs
        target: input
        check:
          op: exists
          count: 2
      - id: focus
        target: input.email
        check:
          op: is_focused
      - id: username
        target: input.username
        check:
          op: has_value
          pattern: "^H"
    """
)


@pytest.fixture
def suite_dir(tmp_path):
    (tmp_path / "login.html").write_text(LOGIN_HTML)
    (tmp_path / "pass.yaml").write_text(PASSING_SUITE)
    (tmp_path / "fail.yaml").write_text(
        PASSING_SUITE.replace("value: Welcome back", "value: Goodbye")
    )
    (tmp_path / "invalid.yaml").write_text(
        PASSING_SUITE.replace("op: is_focused", "op: is_visible")
    )
    return tmp_path


# --- run ---


def test_run_passing_suite(suite_dir):
    result = runner.invoke(app, ["run", str(suite_dir / "pass.yaml"), "--no-report"])
    assert result.exit_code == 0, result.output
    assert "PASSED" in result.output


def test_run_failing_suite(suite_dir):
    result = runner.invoke(app, ["run", str(suite_dir / "fail.yaml"), "--no-report"])
    assert result.exit_code == 1
    assert 'Element #title has text "Goodbye"' in result.output


def test_run_invalid_suite(suite_dir):
    result = runner.invoke(app, ["run", str(suite_dir / "invalid.yaml"), "--no-report"])
    assert result.exit_code == 1
    assert "Invalid assertion operator" in result.output


def test_run_json_output(suite_dir):
    result = runner.invoke(
        app, ["run", str(suite_dir / "pass.yaml"), "--no-report", "--quiet", "--output", "json"]
    )
    assert result.exit_code == 0, result.output
    assert '"status": "passed"' in result.output


def test_run_writes_report(suite_dir):
    report_dir = suite_dir / "reports"
    result = runner.invoke(
        app, ["run", str(suite_dir / "pass.yaml"), "--quiet", "--report-dir", str(report_dir)]
    )
    assert result.exit_code == 0, result.output
    assert len(list(report_dir.glob("*.json"))) == 1


# --- validate / info / version ---


def test_validate_valid_suite(suite_dir):
    result = runner.invoke(app, ["validate", str(suite_dir / "pass.yaml")])
    assert result.exit_code == 0, result.output
    assert "Valid suite" in result.output


def test_validate_invalid_suite(suite_dir):
    result = runner.invoke(app, ["validate", str(suite_dir / "invalid.yaml")])
    assert result.exit_code == 1
    assert "steps[2].check.op" in result.output


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_info():
    result = runner.invoke(app, ["info"])
    assert result.exit_code == 0
    assert "has_text_containing" in result.output


# --- run_suite ---


def test_run_suite_records_each_step(suite_dir):
    suite, validation = load_suite(suite_dir / "fail.yaml")
    assert validation.is_valid

    report = run_suite(suite, base_dir=suite_dir, quiet=True).report
    assert report.status == RunStatus.FAILED
    assert report.get_step("title").status == StepStatus.FAILED
    assert report.get_step("title").actual_value == "Welcome back"
    assert report.get_step("inputs").status == StepStatus.PASSED
    assert report.get_step("focus").status == StepStatus.PASSED


def test_run_suite_missing_document(suite_dir):
    suite, _ = load_suite(suite_dir / "pass.yaml")
    report = run_suite(suite, base_dir=suite_dir / "elsewhere", quiet=True).report
    assert report.status == RunStatus.ERROR
    assert report.skipped_steps == len(suite.steps)


def test_run_suite_invalid_selector_is_step_error(tmp_path):
    (tmp_path / "suite.yaml").write_text(
        textwrap.dedent(
            """
            version: 1
            name: Broken selector
            document:
              html: "<p>hi</p>"
            steps:
              - id: broken
                target: "p[[["
                check:
                  op: exists
              - id: fine
                target: p
                check:
                  op: has_text
                  value: hi
            """
        )
    )
    suite, validation = load_suite(tmp_path / "suite.yaml")
    assert validation.is_valid

    report = run_suite(suite, quiet=True).report
    assert report.status == RunStatus.ERROR
    assert report.get_step("broken").status == StepStatus.ERROR
    assert report.get_step("broken").error_message.startswith("SelectorError")
    assert report.get_step("broken").error_details == {"exception": "SelectorError", "target": "p[[["}
    assert report.get_step("fine").status == StepStatus.PASSED


def test_run_suite_does_not_hide_internal_errors(suite_dir, monkeypatch):
    def broken(self, expected, message=None):
        raise ValueError("internal bug")

    monkeypatch.setattr("domassert.cli.DOMAssertions.has_text", broken)
    suite, _ = load_suite(suite_dir / "pass.yaml")
    with pytest.raises(ValueError, match="internal bug"):
        run_suite(suite, base_dir=suite_dir, quiet=True)
