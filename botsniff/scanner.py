import logging
from typing import List, Optional, Sequence

from botsniff.aggregation import build_report
from botsniff.detectors import DetectionInput, Detector, Finding, all_detectors
from botsniff.git_client import Commit, get_commit, list_commits
from botsniff.models import CommitResult, Report

logger = logging.getLogger(__name__)


def run_detectors(input: DetectionInput, detectors: Sequence[Detector]) -> List[Finding]:
    """Run every detector in order and concatenate their findings.

    A detector blowing up costs only its own findings; the rest still run.
    """
    findings = []
    for detector in detectors:
        try:
            findings.extend(detector.detect(input) or [])
        except Exception:
            logger.exception("detector %s failed on %s", detector.name, input.commit_hash or "text input")
    return findings


def scan_one_commit(commit: Commit, detectors: Sequence[Detector]) -> CommitResult:
    input = DetectionInput(
        commit_hash=commit.hash,
        commit_email=commit.committer_email,
        commit_message=commit.message,
    )
    return CommitResult(hash=commit.hash, findings=tuple(run_detectors(input, detectors)))


def scan_commit_range(
    repo_path: str = ".",
    commit_range: str = "",
    detectors: Optional[Sequence[Detector]] = None,
) -> Report:
    """Scan every commit in commit_range ('' or 'BASE..HEAD') and aggregate a report."""
    detectors = all_detectors() if detectors is None else detectors
    commits = list_commits(repo_path, commit_range)
    logger.debug("scanning %d commits with %d detectors", len(commits), len(detectors))

    results = [scan_one_commit(c, detectors) for c in commits]
    report = build_report(results)
    logger.debug(
        "scan finished: %d/%d commits with AI signals",
        report.summary.ai_commits, report.summary.total_commits,
    )
    return report


def scan_commit(repo_path: str, rev: str, detectors: Optional[Sequence[Detector]] = None) -> CommitResult:
    detectors = all_detectors() if detectors is None else detectors
    return scan_one_commit(get_commit(repo_path, rev), detectors)


def scan_text(text: str, detectors: Optional[Sequence[Detector]] = None) -> List[Finding]:
    """Run all detectors over free text (PR bodies, comments, ...)."""
    detectors = all_detectors() if detectors is None else detectors
    return run_detectors(DetectionInput(text=text or ""), detectors)
