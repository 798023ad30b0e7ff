import pytest

from botsniff.detectors import (
    CoAuthorDetector,
    CommitterDetector,
    Confidence,
    DetectionInput,
    MessageDetector,
    ToolMentionDetector,
    all_detectors,
)
from botsniff.detectors.committer import KNOWN_AGENT_COMMITTERS, NUMERIC_PREFIX_INDEX
from botsniff.exceptions import ConfigError


def _tools(findings):
    return [f.tool for f in findings]


class TestConfidence:
    def test_ordering(self):
        assert Confidence.LOW < Confidence.MEDIUM < Confidence.HIGH
        assert Confidence.HIGH >= Confidence.MEDIUM

    def test_string_names(self):
        assert [str(c) for c in Confidence] == ["low", "medium", "high"]
        assert f"{Confidence.MEDIUM}" == "medium"

    @pytest.mark.parametrize("value,expected", [
        ("low", Confidence.LOW),
        (" Medium ", Confidence.MEDIUM),
        ("HIGH", Confidence.HIGH),
        ("1", Confidence.LOW),
        ("3", Confidence.HIGH),
        (2, Confidence.MEDIUM),
    ])
    def test_parse(self, value, expected):
        assert Confidence.parse(value) is expected

    @pytest.mark.parametrize("value", ["", "critical", "0", "4"])
    def test_parse_rejects_unknown(self, value):
        with pytest.raises(ConfigError):
            Confidence.parse(value)


class TestCommitterDetector:
    @pytest.mark.parametrize("email,tool", sorted(KNOWN_AGENT_COMMITTERS.items()))
    def test_every_known_email(self, email, tool):
        findings = CommitterDetector().detect(DetectionInput(commit_email=f"  {email.upper()} "))
        assert len(findings) == 1
        assert findings[0].tool == tool
        assert findings[0].confidence is Confidence.HIGH
        assert findings[0].detector == "committer"
        assert email in findings[0].detail

    def test_renamed_bot_matches_numeric_prefix(self):
        findings = CommitterDetector().detect(
            DetectionInput(commit_email="209825114+claude-renamed[bot]@users.noreply.github.com")
        )
        assert _tools(findings) == ["Claude"]
        assert "username may have changed" in findings[0].detail

    @pytest.mark.parametrize("email", [
        "999999999+claude[bot]@users.noreply.github.com",
        "209825114+claude[bot]@example.com",
        "human@example.com",
        "claude[bot]@users.noreply.github.com",
        "",
        "   ",
    ])
    def test_no_match(self, email):
        assert CommitterDetector().detect(DetectionInput(commit_email=email)) == []

    def test_prefix_index_covers_catalog(self):
        assert len(NUMERIC_PREFIX_INDEX) == len(KNOWN_AGENT_COMMITTERS)
        assert NUMERIC_PREFIX_INDEX["136622811"] == "CodeRabbit"


class TestCoAuthorDetector:
    def test_ai_trailer_with_human_coauthor(self):
        msg = (
            "feat: add thing\n\n"
            "Co-Authored-By: Jane Doe <jane@example.com>\n"
            "Co-Authored-By: Claude <noreply@anthropic.com>\n"
        )
        findings = CoAuthorDetector().detect(DetectionInput(commit_message=msg))
        assert _tools(findings) == ["Claude Code"]
        assert findings[0].confidence is Confidence.HIGH
        assert "noreply@anthropic.com" in findings[0].detail

    def test_repeated_tool_collapses(self):
        msg = (
            "fix\n\n"
            "co-authored-by: Claude Opus <NoReply@Anthropic.com>\n"
            "Co-Authored-By: Claude Sonnet < noreply@anthropic.com >\n"
            "Co-Authored-By: aider (gpt-4) <noreply@aider.chat>\n"
        )
        findings = CoAuthorDetector().detect(DetectionInput(commit_message=msg))
        assert _tools(findings) == ["Claude Code", "Aider"]

    def test_trailer_must_start_line(self):
        msg = "mention Co-Authored-By: Claude <noreply@anthropic.com> inline"
        assert CoAuthorDetector().detect(DetectionInput(commit_message=msg)) == []

    def test_empty_message(self):
        assert CoAuthorDetector().detect(DetectionInput()) == []


class TestMessageDetector:
    def test_aider_prefix(self):
        findings = MessageDetector().detect(DetectionInput(commit_message="aider: fix bug"))
        assert _tools(findings) == ["Aider"]
        assert findings[0].confidence is Confidence.MEDIUM

    def test_aider_prefix_is_case_insensitive(self):
        assert _tools(MessageDetector().detect(DetectionInput(commit_message="AIDER: fix"))) == ["Aider"]

    @pytest.mark.parametrize("msg", ["fix the aider: thing", "raider: fix", ""])
    def test_aider_not_prefix(self, msg):
        assert MessageDetector().detect(DetectionInput(commit_message=msg)) == []

    def test_claude_footer_is_case_sensitive(self):
        detector = MessageDetector()
        hit = detector.detect(DetectionInput(commit_message="x\n\n🤖 Generated with Claude Code"))
        assert _tools(hit) == ["Claude Code"]
        assert detector.detect(DetectionInput(commit_message="generated with claude code")) == []

    def test_both_patterns(self):
        msg = "aider: tweak\n\nGenerated with Claude Code"
        assert _tools(MessageDetector().detect(DetectionInput(commit_message=msg))) == ["Aider", "Claude Code"]


class TestToolMentionDetector:
    def test_claude_mention(self):
        findings = ToolMentionDetector().detect(DetectionInput(text="I used Claude to write this"))
        assert _tools(findings) == ["Claude"]
        assert findings[0].confidence is Confidence.LOW

    def test_word_boundary(self):
        assert ToolMentionDetector().detect(DetectionInput(text="cursory review")) == []

    def test_name_between_cjk_characters(self):
        findings = ToolMentionDetector().detect(DetectionInput(text="这个补丁是用Claude写的"))
        assert _tools(findings) == ["Claude"]

    def test_accented_letters_count_as_boundaries(self):
        findings = ToolMentionDetector().detect(DetectionInput(text="éCursoré"))
        assert _tools(findings) == ["Cursor"]

    def test_overlapping_aliases_both_fire(self):
        findings = ToolMentionDetector().detect(DetectionInput(text="Generated with Claude Code"))
        assert _tools(findings) == ["Claude Code", "Claude"]

    def test_text_and_message_are_combined(self):
        findings = ToolMentionDetector().detect(
            DetectionInput(text="written with copilot", commit_message="reviewed by CodeRabbit")
        )
        assert _tools(findings) == ["Copilot", "CodeRabbit"]

    def test_dotted_and_hyphenated_names(self):
        findings = ToolMentionDetector().detect(DetectionInput(text="Continue.dev and GPT-4 helped"))
        assert _tools(findings) == ["Continue.dev", "GPT-4"]

    @pytest.mark.parametrize("text", ["", "   \n\t"])
    def test_blank(self, text):
        assert ToolMentionDetector().detect(DetectionInput(text=text)) == []


def test_registry_order():
    assert [d.name for d in all_detectors()] == ["committer", "coauthor", "message", "toolmention"]
