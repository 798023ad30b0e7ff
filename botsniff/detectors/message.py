from typing import Callable, List, NamedTuple

from botsniff.detectors.base import Confidence, DetectionInput, Detector, Finding


class _MessagePattern(NamedTuple):
    tool: str
    check: Callable[[str], bool]


# Order matters: findings come out in this order.
# The aider prefix is case-insensitive, the Claude Code footer is matched verbatim.
_MESSAGE_PATTERNS = (
    _MessagePattern("Aider", lambda msg: msg.lower().startswith("aider:")),
    _MessagePattern("Claude Code", lambda msg: "Generated with Claude Code" in msg),
)


class MessageDetector(Detector):
    name = "message"

    def detect(self, input: DetectionInput) -> List[Finding]:
        message = input.commit_message or ""
        if not message:
            return []

        return [
            self._finding(p.tool, Confidence.MEDIUM, f"commit message matches {p.tool} pattern")
            for p in _MESSAGE_PATTERNS
            if p.check(message)
        ]
