"""Scan results: per-commit findings and the report built from them."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple

from botsniff.detectors.base import Finding


@dataclass(frozen=True)
class CommitResult:
    hash: str
    findings: Tuple[Finding, ...] = ()

    @property
    def is_ai(self) -> bool:
        return bool(self.findings)

    def to_dict(self) -> dict:
        return {"hash": self.hash, "findings": [f.to_dict() for f in self.findings]}

    @classmethod
    def from_dict(cls, data: dict) -> "CommitResult":
        return cls(
            hash=data["hash"],
            findings=tuple(Finding.from_dict(f) for f in data.get("findings") or []),
        )


@dataclass(frozen=True)
class Summary:
    """Counters derived from a list of CommitResults. Built by aggregation.summarize."""
    total_commits: int = 0
    ai_commits: int = 0
    tool_counts: Mapping[str, int] = field(default_factory=dict)
    by_confidence: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self):
        # counters are read-only views, like the detector catalogs
        object.__setattr__(self, "tool_counts", MappingProxyType(dict(self.tool_counts)))
        object.__setattr__(self, "by_confidence", MappingProxyType(dict(self.by_confidence)))

    def __hash__(self) -> int:
        return hash((
            self.total_commits,
            self.ai_commits,
            frozenset(self.tool_counts.items()),
            frozenset(self.by_confidence.items()),
        ))

    def to_dict(self) -> dict:
        return {
            "total_commits": self.total_commits,
            "ai_commits": self.ai_commits,
            "tool_counts": dict(self.tool_counts),
            "by_confidence": dict(self.by_confidence),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Summary":
        return cls(
            total_commits=int(data.get("total_commits", 0)),
            ai_commits=int(data.get("ai_commits", 0)),
            tool_counts=dict(data.get("tool_counts") or {}),
            by_confidence=dict(data.get("by_confidence") or {}),
        )


@dataclass(frozen=True)
class Report:
    commits: Tuple[CommitResult, ...]
    summary: Summary

    def to_dict(self) -> dict:
        return {
            "commits": [c.to_dict() for c in self.commits],
            "summary": self.summary.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Report":
        return cls(
            commits=tuple(CommitResult.from_dict(c) for c in data.get("commits") or []),
            summary=Summary.from_dict(data.get("summary") or {}),
        )
