"""Rule-based detectors for AI coding tool involvement."""

from typing import List

from botsniff.detectors.base import Confidence, DetectionInput, Detector, Finding
from botsniff.detectors.coauthor import CoAuthorDetector
from botsniff.detectors.committer import CommitterDetector
from botsniff.detectors.message import MessageDetector
from botsniff.detectors.toolmention import ToolMentionDetector


def all_detectors() -> List[Detector]:
    """Every detector, in the order their findings are reported."""
    return [
        CommitterDetector(),
        CoAuthorDetector(),
        MessageDetector(),
        ToolMentionDetector(),
    ]


__all__ = [
    "Confidence",
    "DetectionInput",
    "Detector",
    "Finding",
    "CommitterDetector",
    "CoAuthorDetector",
    "MessageDetector",
    "ToolMentionDetector",
    "all_detectors",
]
