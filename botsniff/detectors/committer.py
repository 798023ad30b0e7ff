"""
Committer Identity Engine
─────────────────────────
Flags commits whose committer email belongs to a known AI bot account.

GitHub noreply addresses look like <numeric-id>+<username>@users.noreply.github.com.
Bots get renamed but the numeric account id stays put, so besides the exact
email table we keep an index keyed by that numeric prefix.
"""

from types import MappingProxyType
from typing import List, Mapping, Tuple

from botsniff.detectors.base import Confidence, DetectionInput, Detector, Finding


_NOREPLY_SUFFIX = "@users.noreply.github.com"

_KNOWN_AGENT_COMMITTERS = {
    "209825114+claude[bot]@users.noreply.github.com":                  "Claude",
    "215619710+anthropic-claude[bot]@users.noreply.github.com":        "Claude (Anthropic)",
    "208546643+claude-code-action[bot]@users.noreply.github.com":      "Claude Code Action",
    "198982749+copilot@users.noreply.github.com":                      "GitHub Copilot (agent)",
    "167198135+copilot[bot]@users.noreply.github.com":                 "GitHub Copilot (chat)",
    "206951365+cursor[bot]@users.noreply.github.com":                  "Cursor",
    "215057067+openai-codex[bot]@users.noreply.github.com":            "OpenAI Codex",
    "199175422+chatgpt-codex-connector[bot]@users.noreply.github.com": "Codex via ChatGPT",
    "176961590+gemini-code-assist[bot]@users.noreply.github.com":      "Gemini Code Assist",
    "208079219+amazon-q-developer[bot]@users.noreply.github.com":      "Amazon Q Developer",
    "158243242+devin-ai-integration[bot]@users.noreply.github.com":    "Devin",
    "205137888+cline[bot]@users.noreply.github.com":                   "Cline",
    "230936708+continue[bot]@users.noreply.github.com":                "Continue.dev",
    "201248094+sourcegraph-cody[bot]@users.noreply.github.com":        "Sourcegraph Cody",
    "220155983+jetbrains-ai[bot]@users.noreply.github.com":            "JetBrains AI",
    "136622811+coderabbitai[bot]@users.noreply.github.com":            "CodeRabbit",
}


def _numeric_prefix(email: str) -> str:
    """'123+name@users.noreply.github.com' -> '123', anything else -> ''."""
    head, plus, _ = email.partition("+")
    if plus and head.isdigit():
        return head
    return ""


def _build_tables(emails: Mapping[str, str]) -> Tuple[Mapping[str, str], Mapping[str, str]]:
    exact = {email.strip().lower(): tool for email, tool in emails.items()}
    by_prefix = {}
    for email, tool in exact.items():
        prefix = _numeric_prefix(email)
        if prefix:
            by_prefix[prefix] = tool
    return MappingProxyType(exact), MappingProxyType(by_prefix)


# Both tables come from the same catalog so they can never drift apart.
KNOWN_AGENT_COMMITTERS, NUMERIC_PREFIX_INDEX = _build_tables(_KNOWN_AGENT_COMMITTERS)


class CommitterDetector(Detector):
    name = "committer"

    def detect(self, input: DetectionInput) -> List[Finding]:
        email = (input.commit_email or "").strip().lower()
        if not email:
            return []

        tool = KNOWN_AGENT_COMMITTERS.get(email)
        if tool:
            return [self._finding(
                tool, Confidence.HIGH,
                f"committer email {email} matches known AI bot",
            )]

        if email.endswith(_NOREPLY_SUFFIX):
            prefix = _numeric_prefix(email)
            tool = NUMERIC_PREFIX_INDEX.get(prefix) if prefix else None
            if tool:
                return [self._finding(
                    tool, Confidence.HIGH,
                    f"committer email numeric prefix {prefix} matches known AI bot "
                    f"(username may have changed)",
                )]

        return []
