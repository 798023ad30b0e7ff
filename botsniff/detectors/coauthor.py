import re
from types import MappingProxyType
from typing import List

from botsniff.detectors.base import Confidence, DetectionInput, Detector, Finding


KNOWN_COAUTHOR_EMAILS = MappingProxyType({
    "noreply@anthropic.com":  "Claude Code",
    "cursoragent@cursor.com": "Cursor",
    "noreply@aider.chat":     "Aider",
})

# Co-Authored-By: Display Name <email>
_COAUTHOR_TRAILER = re.compile(r"^co-authored-by:\s*[^<]*<([^>]+)>", re.IGNORECASE | re.MULTILINE)


class CoAuthorDetector(Detector):
    """One High finding per distinct AI tool named in Co-Authored-By trailers."""

    name = "coauthor"

    def detect(self, input: DetectionInput) -> List[Finding]:
        message = input.commit_message or ""
        if not message:
            return []

        findings = []
        seen = set()
        for match in _COAUTHOR_TRAILER.finditer(message):
            email = match.group(1).strip().lower()
            tool = KNOWN_COAUTHOR_EMAILS.get(email)
            if tool is None or tool in seen:
                continue
            seen.add(tool)
            findings.append(self._finding(
                tool, Confidence.HIGH,
                f"Co-Authored-By trailer with email {email}",
            ))
        return findings
