"""
Detection primitives
────────────────────
Every detector reads a DetectionInput and hands back a list of Findings.
Confidence tiers:
  LOW    (1) — a tool name shows up in unstructured text
  MEDIUM (2) — the commit message follows a tool's structural signature
  HIGH   (3) — bot account email or co-author trailer with a known AI email
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Union

from botsniff.exceptions import ConfigError


_CONFIDENCE_NAMES = {1: "low", 2: "medium", 3: "high"}


class Confidence(IntEnum):
    LOW = 1
    MEDIUM = 2
    HIGH = 3

    def __str__(self) -> str:
        return _CONFIDENCE_NAMES[self.value]

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)

    @classmethod
    def parse(cls, value: Union[str, int, "Confidence"]) -> "Confidence":
        """Accepts low/medium/high or 1/2/3, case-insensitive."""
        if isinstance(value, Confidence):
            return value
        key = str(value).strip().lower()
        for level in cls:
            if key in (str(level), str(level.value)):
                return level
        raise ConfigError(f"invalid confidence {value!r}: use low/1, medium/2, or high/3")


@dataclass(frozen=True)
class Finding:
    detector: str
    tool: str
    confidence: Confidence
    detail: str

    def to_dict(self) -> dict:
        return {
            "detector": self.detector,
            "tool": self.tool,
            "confidence": int(self.confidence),
            "detail": self.detail,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Finding":
        return cls(
            detector=data["detector"],
            tool=data["tool"],
            confidence=Confidence(int(data["confidence"])),
            detail=data.get("detail", ""),
        )


@dataclass(frozen=True)
class DetectionInput:
    """One scan target. Detectors only look at the fields they care about."""
    commit_hash: str = ""
    commit_email: str = ""
    commit_message: str = ""
    text: str = ""
    repo_path: str = ""


class Detector:
    name = "detector"

    def detect(self, input: DetectionInput) -> List[Finding]:
        raise NotImplementedError

    def _finding(self, tool: str, confidence: Confidence, detail: str) -> Finding:
        return Finding(detector=self.name, tool=tool, confidence=confidence, detail=detail)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"
