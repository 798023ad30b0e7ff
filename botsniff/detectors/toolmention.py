"""
Tool Mention Engine
───────────────────
Weakest signal we have: somebody typed the name of an AI coding tool.
Names are matched on ASCII whole-word boundaries, so "cursory" is not "Cursor"
but "用Claude写" still counts.
Aliases overlap on purpose ("Claude Code" and "Claude" both fire on the
same sentence) and each one yields its own Low finding.
"""

import re
from typing import List

from botsniff.detectors.base import Confidence, DetectionInput, Detector, Finding


_TOOL_NAMES = (
    "Claude Code",
    "Claude",
    "GitHub Copilot",
    "Copilot",
    "Cursor",
    "Aider",
    "OpenAI Codex",
    "Codex",
    "Gemini Code Assist",
    "Amazon Q Developer",
    "Amazon Q",
    "Devin",
    "Cline",
    "Continue.dev",
    "Sourcegraph Cody",
    "Cody",
    "JetBrains AI",
    "CodeRabbit",
    "ChatGPT",
    "GPT-4",
    "Windsurf",
)

TOOL_PATTERNS = tuple(
    (name, re.compile(r"\b" + re.escape(name) + r"\b", re.IGNORECASE | re.ASCII))
    for name in _TOOL_NAMES
)


def _combined_text(input: DetectionInput) -> str:
    parts = [part for part in (input.text, input.commit_message) if part]
    return "\n".join(parts)


class ToolMentionDetector(Detector):
    name = "toolmention"

    def detect(self, input: DetectionInput) -> List[Finding]:
        text = _combined_text(input)
        if not text.strip():
            return []

        findings = []
        seen = set()
        for tool, pattern in TOOL_PATTERNS:
            if tool in seen or not pattern.search(text):
                continue
            seen.add(tool)
            findings.append(self._finding(tool, Confidence.LOW, f"text mentions {tool}"))
        return findings
