"""Tests for reply parsing and result normalization."""

import json

import pytest

from news_verifier.errors import InvalidReasoningOutput
from news_verifier.normalize import normalize_result, parse_reply, strip_code_fence

LABELS = ["bbc", "cnn", "abc", "guardian"]

FULL_REPLY = {
    "bbcVerified": True,
    "bbcSimilarity": 82,
    "bbcArticles": [
        {
            "title": "Strikes hit Gaza",
            "similarity": 82,
            "url": "https://www.bbc.com/news/1",
            "publishDate": "2026-02-01",
            "excerpt": "Overnight strikes were reported.",
        }
    ],
    "cnnVerified": False,
    "cnnSimilarity": 0,
    "cnnArticles": [],
    "abcVerified": True,
    "abcSimilarity": 70,
    "abcArticles": [],
    "guardianVerified": False,
    "guardianSimilarity": 10,
    "guardianArticles": [],
    "legitimacyScore": 68,
    "topics": ["Gaza conflict"],
    "locations": ["Gaza City"],
    "dates": ["2026-02-01"],
    "credibilityIndicators": ["Reported by BBC"],
    "redFlags": [],
    "overallAssessment": "Partially corroborated.",
}


class TestStripCodeFence:
    """Tests for strip_code_fence."""

    def test_json_tagged_fence(self):
        assert strip_code_fence('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_untagged_fence(self):
        assert strip_code_fence('```\n{"a": 1}\n```') == '{"a": 1}'

    def test_uppercase_tag_and_surrounding_whitespace(self):
        assert strip_code_fence('  ```JSON\n{"a": 1}\n```  \n') == '{"a": 1}'

    def test_plain_text_untouched(self):
        assert strip_code_fence(' {"a": 1} ') == '{"a": 1}'


class TestParseReply:
    """Tests for parse_reply."""

    def test_parses_fenced_json(self):
        assert parse_reply('```json\n{"a": 1}\n```') == {"a": 1}

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "not json",
            '{"bbcVerified": true,',
            "```json\n{broken\n```",
            '{"legitimacyScore": ' + "9" * 5000 + "}",
            '{"topics": ' + "[" * 100_000 + "]" * 100_000 + "}",
        ],
        ids=["empty", "prose", "truncated", "fenced-broken", "oversized-integer", "deep-nesting"],
    )
    def test_invalid_json_raises(self, text):
        with pytest.raises(InvalidReasoningOutput) as exc_info:
            parse_reply(text)
        assert exc_info.value.message == "Invalid JSON response from reasoning service"


class TestNormalizeResult:
    """Tests for normalize_result."""

    def test_full_reply(self):
        result = normalize_result(json.dumps(FULL_REPLY), LABELS)

        assert result.outlets["bbc"].verified is True
        assert result.outlets["bbc"].similarity == 82
        assert result.outlets["bbc"].articles[0].publish_date == "2026-02-01"
        assert result.outlets["guardian"].similarity == 10
        assert result.legitimacy_score == 68
        assert result.locations == ["Gaza City"]
        assert result.overall_assessment == "Partially corroborated."

    def test_fenced_reply_matches_plain(self):
        plain = normalize_result(json.dumps(FULL_REPLY), LABELS)
        fenced = normalize_result(f"```json\n{json.dumps(FULL_REPLY)}\n```", LABELS)
        assert fenced == plain

    @pytest.mark.parametrize("text", ["{}", "[]", "null", "42", '"text"'])
    def test_non_object_or_empty_gives_defaults(self, text):
        payload = normalize_result(text, LABELS).to_payload()

        assert len(payload) == 4 * 3 + 7
        for label in LABELS:
            assert payload[f"{label}Verified"] is False
            assert payload[f"{label}Similarity"] == 0
            assert payload[f"{label}Articles"] == []
        assert payload["legitimacyScore"] == 0
        assert payload["topics"] == []
        assert payload["redFlags"] == []
        assert payload["overallAssessment"] == ""

    def test_coerces_wrong_types(self):
        reply = {
            "bbcVerified": "yes",
            "bbcSimilarity": "85",
            "cnnVerified": 0,
            "cnnSimilarity": "abc",
            "abcSimilarity": None,
            "abcArticles": "not a list",
            "guardianArticles": [
                {"title": "T", "similarity": "70", "url": "u", "publishDate": "d"},
                "junk",
                3,
            ],
            "legitimacyScore": " 55.5 ",
            "topics": "Gaza",
            "locations": ["Gaza", 3, None],
            "overallAssessment": 42,
        }

        result = normalize_result(json.dumps(reply), LABELS)

        assert result.outlets["bbc"].verified is True
        assert result.outlets["bbc"].similarity == 85.0
        assert result.outlets["cnn"].verified is False
        assert result.outlets["cnn"].similarity == 0
        assert result.outlets["abc"].similarity == 0
        assert result.outlets["abc"].articles == []
        matches = result.outlets["guardian"].articles
        assert len(matches) == 1
        assert matches[0].similarity == 70.0
        assert matches[0].excerpt == ""
        assert result.legitimacy_score == 55.5
        assert result.topics == []
        assert result.locations == ["Gaza"]
        assert result.overall_assessment == ""

    def test_non_finite_scores_become_zero(self):
        result = normalize_result('{"legitimacyScore": NaN, "bbcSimilarity": Infinity}', LABELS)

        assert result.legitimacy_score == 0
        assert result.outlets["bbc"].similarity == 0

    def test_unknown_keys_ignored(self):
        result = normalize_result('{"foxVerified": true, "extra": 1}', LABELS)

        assert set(result.outlets) == set(LABELS)
        assert "foxVerified" not in result.to_payload()

    def test_payload_is_flat_camel_case(self):
        payload = normalize_result(json.dumps(FULL_REPLY), LABELS).to_payload()

        assert payload["bbcArticles"][0] == FULL_REPLY["bbcArticles"][0]
        assert payload["credibilityIndicators"] == ["Reported by BBC"]

    def test_renormalizing_payload_is_stable(self):
        messy = '```json\n{"bbcVerified": 1, "bbcSimilarity": "77", "topics": "x"}\n```'
        first = normalize_result(messy, LABELS)
        second = normalize_result(json.dumps(first.to_payload()), LABELS)

        assert second == first
