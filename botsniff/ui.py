import json
from typing import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from botsniff.detectors.base import Confidence, Finding
from botsniff.models import Report

console = Console()
err_console = Console(stderr=True)

_CONFIDENCE_STYLES = {
    Confidence.HIGH: "bold red",
    Confidence.MEDIUM: "yellow",
    Confidence.LOW: "cyan",
}


def report_to_json(report: Report) -> str:
    return json.dumps(report.to_dict(), indent=2)


def findings_to_json(findings: Sequence[Finding]) -> str:
    return json.dumps({"findings": [f.to_dict() for f in findings]}, indent=2)


def format_finding(finding: Finding) -> str:
    style = _CONFIDENCE_STYLES.get(finding.confidence, "white")
    return (
        f"[{style}]\\[{finding.confidence}][/{style}] "
        f"[bold]{escape(finding.tool)}[/bold] ({finding.detector}): {escape(finding.detail)}"
    )


def build_tools_table(tool_counts: dict) -> Table:
    table = Table(title="Tools detected", show_header=True, header_style="bold magenta")
    table.add_column("Tool", width=28)
    table.add_column("Findings", justify="right")
    for tool in sorted(tool_counts):
        table.add_row(escape(tool), str(tool_counts[tool]))
    return table


def render_report(report: Report) -> None:
    summary = report.summary
    console.print(
        f"Scanned [bold]{summary.total_commits}[/bold] commits, "
        f"[bold]{summary.ai_commits}[/bold] with AI signals\n"
    )

    if summary.ai_commits == 0:
        console.print("[green]No AI involvement detected.[/green]")
        return

    console.print(build_tools_table(summary.tool_counts))
    console.print()

    for result in report.commits:
        if not result.is_ai:
            continue
        console.print(f"[bold]Commit[/bold] [dim]{result.hash[:12]}[/dim]")
        for finding in result.findings:
            console.print("  " + format_finding(finding))


def render_findings(findings: Sequence[Finding]) -> None:
    if not findings:
        console.print("[green]No AI involvement detected.[/green]")
        return

    console.print(f"Found {len(findings)} AI signal(s):")
    for finding in findings:
        console.print("  " + format_finding(finding))


def print_error(message: str) -> None:
    err_console.print(f"[bold red]Error[/bold red]: {escape(message)}")
