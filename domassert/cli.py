#!/usr/bin/env python3
"""
domassert CLI - DOM assertion suites for static HTML

Usage:
    domassert run <suite.yaml> [OPTIONS]
    domassert validate <suite.yaml>
    domassert --version
"""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from . import __version__
from .assertions import AssertionResult, DOMAssertions, DomAssertError, ExistsOptions
from .reporting import Reporter, RunStatus, StepStatus
from .schema_parsing import AssertOp, AssertStep, Suite, ValidationResult, load_suite
from .scope import BaseScope, create_scope

app = typer.Typer(
    name="domassert",
    help="🔎 domassert - DOM assertion suites for static HTML",
    add_completion=False,
)
console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"🔎 domassert v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True,
        help="Show version and exit"
    ),
):
    """
    🔎 domassert - DOM assertion suites for static HTML

    Check HTML documents with declarative YAML suites.
    """
    pass


def configure_logging(debug: bool) -> None:
    """Route library logging through Rich when --debug is set."""
    if not debug:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def print_validation_errors(validation: ValidationResult) -> None:
    console.print("\n[red]❌ Validation failed:[/red]")
    console.print(str(validation), markup=False)


def run_step(step: AssertStep, scope: BaseScope, sink) -> AssertionResult:
    """Execute one suite step against the scope, pushing results to sink."""
    dom = DOMAssertions(step.target, scope, sink)
    check = step.check

    if check.op == AssertOp.EXISTS:
        return dom.exists(ExistsOptions(count=check.count), check.message)
    elif check.op == AssertOp.DOES_NOT_EXIST:
        return dom.does_not_exist(check.message)
    elif check.op == AssertOp.IS_FOCUSED:
        return dom.is_focused(check.message)
    elif check.op == AssertOp.IS_NOT_FOCUSED:
        return dom.is_not_focused(check.message)
    elif check.op == AssertOp.HAS_CLASS:
        return dom.has_class(check.value, check.message)
    elif check.op == AssertOp.HAS_TEXT:
        return dom.has_text(check.expected, check.message)
    elif check.op == AssertOp.HAS_TEXT_CONTAINING:
        return dom.has_text_containing(check.value, check.message)
    elif check.op == AssertOp.HAS_VALUE:
        return dom.has_value(check.expected, check.message)
    else:
        raise ValueError(f"Unknown assertion op: {check.op}")


def run_suite(
    suite: Suite,
    base_dir: Path | None = None,
    verbose: bool = True,
    quiet: bool = False,
) -> Reporter:
    """Execute a suite and return the reporter with results."""
    reporter = Reporter.from_suite(suite)
    reporter.start_run()

    if verbose and not quiet:
        console.print(f"\n{'='*60}")
        console.print(f"  [bold]Running:[/bold] {escape(suite.name)}")
        console.print(f"  [bold]Document:[/bold] {escape(suite.document.source)}")
        console.print(f"  [bold]Steps:[/bold] {len(suite.steps)}")
        console.print(f"{'='*60}\n")

    try:
        scope = create_scope(suite.document, base_dir=base_dir)
    except DomAssertError as e:
        reporter.fail_run(str(e))
        if not quiet:
            console.print(f"[red]❌ Cannot load document:[/red] {escape(str(e))}")
        reporter.finish_run()
        return reporter

    for step in suite.steps:
        if verbose and not quiet:
            console.print(f"▶ [bold]Step:[/bold] {escape(step.id)} ({step.check.op.value} on {escape(repr(step.target))})")

        reporter.start_step(step.id)

        try:
            run_step(step, scope, reporter.sink_for(step.id))
        except DomAssertError as e:
            reporter.complete_step_error(
                step.id,
                f"{type(e).__name__}: {e}",
                error_details={"exception": type(e).__name__, "target": step.target},
            )
            if not quiet:
                console.print(f"  [red]⚠️  Error:[/red] {type(e).__name__}: {escape(str(e))}")
            continue

        record = reporter.complete_step(step.id)
        if record.status == StepStatus.PASSED:
            if verbose and not quiet:
                console.print(f"  [green]✅ Passed[/green]")
        elif not quiet:
            console.print(f"  [red]❌ Failed:[/red] {escape(str(record.failure_message))}")
            if verbose:
                console.print(f"     expected: {escape(repr(record.expected_value))}")
                console.print(f"     actual:   {escape(repr(record.actual_value))}")

    reporter.finish_run()
    return reporter


@app.command()
def run(
    suite_file: Path = typer.Argument(
        ...,
        help="Path to the suite YAML file",
        exists=True,
        readable=True,
    ),
    verbose: bool = typer.Option(
        True, "--verbose/--no-verbose", "-V",
        help="Show detailed step output"
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q",
        help="Only show errors and final status"
    ),
    output: str = typer.Option(
        "text", "--output", "-o",
        help="Output format: text or json"
    ),
    report_dir: Path = typer.Option(
        Path("reports"), "--report-dir", "-r",
        help="Directory to save JSON reports"
    ),
    no_report: bool = typer.Option(
        False, "--no-report",
        help="Don't save a JSON report file"
    ),
    debug: bool = typer.Option(
        False, "--debug",
        help="Show debug logging"
    ),
):
    """
    Run a DOM assertion suite.

    Load the document, run every assertion step,
    and generate a run report.
    """
    configure_logging(debug)

    if not quiet:
        console.print(f"\n📄 Loading suite: {escape(str(suite_file))}")

    suite, validation = load_suite(suite_file)

    if not validation.is_valid:
        print_validation_errors(validation)
        raise typer.Exit(code=1)

    if not quiet:
        console.print(f"   [green]✅ Valid suite:[/green] {escape(suite.name)}")

    reporter = run_suite(suite, base_dir=suite_file.parent, verbose=verbose, quiet=quiet)
    report = reporter.report

    if output == "json":
        console.print_json(data=report.to_dict())
    elif not quiet:
        console.print("\n" + report.summary(), markup=False)

    if not no_report:
        report_path = report_dir / f"{report.run_id}.json"
        reporter.save_json(report_path)
        if not quiet:
            console.print(f"\n📁 Report saved: {report_path}")

    raise typer.Exit(code=0 if report.status == RunStatus.PASSED else 1)


@app.command()
def validate(
    suite_file: Path = typer.Argument(
        ...,
        help="Path to the suite YAML file",
        exists=True,
        readable=True,
    ),
):
    """
    Validate a suite YAML file.

    Check the schema and report any errors without running the suite.
    """
    console.print(f"\n📄 Validating: {escape(str(suite_file))}")

    suite, validation = load_suite(suite_file)

    if validation.is_valid:
        console.print(f"\n[green]✅ Valid suite:[/green] {escape(suite.name)}")
        console.print(f"   Document: {escape(suite.document.source)}")
        console.print(f"   Steps: {len(suite.steps)}")

        table = Table(title="Steps")
        table.add_column("ID", style="cyan")
        table.add_column("Target", style="magenta")
        table.add_column("Check")
        table.add_column("Expected")

        for step in suite.steps:
            check = step.check
            if check.pattern is not None:
                expected = f"/{check.pattern.pattern}/"
            elif check.count is not None:
                expected = f"count={check.count}"
            else:
                expected = check.value or ""
            table.add_row(
                escape(step.id),
                escape(step.target or "<unknown>"),
                check.op.value,
                escape(expected),
            )

        console.print()
        console.print(table)
        raise typer.Exit(code=0)

    print_validation_errors(validation)
    raise typer.Exit(code=1)


@app.command()
def info():
    """
    Show information about domassert.
    """
    console.print(f"""
🔎 [bold]domassert[/bold] v{__version__}

DOM assertion suites for static HTML

[bold]Assertions:[/bold]
  • exists / does_not_exist (with optional count)
  • is_focused / is_not_focused
  • has_class
  • has_text (whitespace-collapsed or regex) / has_text_containing
  • has_value (exact or regex)

[bold]Quick Start:[/bold]
  domassert run suites/login.yaml
  domassert validate suites/login.yaml
""")


if __name__ == "__main__":
    app()
