"""
Report Aggregator
─────────────────
Folds per-commit findings into summary counters.

  total_commits — number of commit results
  ai_commits    — results with at least one finding
  tool_counts   — finding occurrences per tool name
  by_confidence — finding occurrences per confidence name (low/medium/high)

The fold only counts, so commit order never changes the summary. Filtering
rebuilds the report from the surviving findings instead of subtracting.
"""

from collections import Counter
from typing import Iterable

from botsniff.detectors.base import Confidence
from botsniff.models import CommitResult, Report, Summary


def summarize(results: Iterable[CommitResult]) -> Summary:
    total = 0
    ai_commits = 0
    tools = Counter()
    levels = Counter()

    for result in results:
        total += 1
        if result.is_ai:
            ai_commits += 1
        for finding in result.findings:
            tools[finding.tool] += 1
            levels[str(finding.confidence)] += 1

    return Summary(
        total_commits=total,
        ai_commits=ai_commits,
        tool_counts=dict(tools),
        by_confidence=dict(levels),
    )


def build_report(results: Iterable[CommitResult]) -> Report:
    commits = tuple(results)
    return Report(commits=commits, summary=summarize(commits))


def filter_report(report: Report, min_confidence) -> Report:
    """New report keeping only findings at or above min_confidence."""
    threshold = Confidence.parse(min_confidence)
    kept = [
        CommitResult(
            hash=result.hash,
            findings=tuple(f for f in result.findings if f.confidence >= threshold),
        )
        for result in report.commits
    ]
    return build_report(kept)
