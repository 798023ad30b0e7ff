import sys
from pathlib import Path
from typing import Optional

import typer

from botsniff import __version__
from botsniff.aggregation import filter_report
from botsniff.config import (
    default_format,
    default_min_confidence,
    load_env,
    parse_format,
    parse_min_confidence,
)
from botsniff.detectors.base import Confidence
from botsniff.exceptions import BotSniffError
from botsniff.logging_setup import setup_logging
from botsniff.scanner import scan_commit_range, scan_text
from botsniff.ui import findings_to_json, print_error, render_findings, render_report, report_to_json

# Exit codes
EXIT_NO_AI = 0
EXIT_AI = 1
EXIT_ERROR = 2

app = typer.Typer(help="Detect AI coding tool involvement in Git history and text.", add_completion=False)


def _fail(message: str) -> typer.Exit:
    print_error(message)
    return typer.Exit(code=EXIT_ERROR)


def scan_cmd(
    repo_path: str = typer.Argument(".", help="Path to the Git repository"),
    commit_range: str = typer.Option("", "--range", help="Commit range in BASE..HEAD format"),
    output_format: Optional[str] = typer.Option(None, "--format", help="Output format: json or text"),
    min_confidence: Optional[str] = typer.Option(
        None, "--min-confidence", help="Minimum confidence: low, medium, high (or 1, 2, 3)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Scan commits for AI involvement. Exits 1 when any commit carries a signal."""
    setup_logging(verbose)
    try:
        fmt = parse_format(output_format or default_format())
        threshold = parse_min_confidence(min_confidence or default_min_confidence())
        report = scan_commit_range(repo_path, commit_range)
    except BotSniffError as e:
        raise _fail(str(e)) from e

    if threshold > Confidence.LOW:
        report = filter_report(report, threshold)

    if fmt == "json":
        print(report_to_json(report))
    else:
        render_report(report)

    raise typer.Exit(code=EXIT_AI if report.summary.ai_commits > 0 else EXIT_NO_AI)


# `commits` is the older name of the command
app.command(name="scan")(scan_cmd)
app.command(name="commits", hidden=True)(scan_cmd)


@app.command(name="text")
def text_cmd(
    output_format: Optional[str] = typer.Option(None, "--format", help="Output format: json or text"),
    input_path: str = typer.Option("-", "--input", help="Input file path, or - for stdin"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Scan free text (PR body, comments) for AI tool mentions."""
    setup_logging(verbose)
    try:
        fmt = parse_format(output_format or default_format())
    except BotSniffError as e:
        raise _fail(str(e)) from e

    try:
        if input_path == "-":
            text = sys.stdin.read()
        else:
            text = Path(input_path).read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise _fail(f"reading input: {e}") from e

    findings = scan_text(text)

    if fmt == "json":
        print(findings_to_json(findings))
    else:
        render_findings(findings)

    raise typer.Exit(code=EXIT_AI if findings else EXIT_NO_AI)


@app.command(name="version")
def version_cmd():
    """Print the botsniff version."""
    print(f"botsniff {__version__}")


def main():
    load_env()
    app()


if __name__ == "__main__":
    main()
