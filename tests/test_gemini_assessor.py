"""
Tests for the Gemini assessor, using a fake client instead of the network.
"""

import json
from types import SimpleNamespace

import pytest

from conftest import make_docs
from visa_genius.core.entities.applicant import ApplicantProfile
from visa_genius.core.exceptions import AssessorError, MissingDocumentsError
from visa_genius.infrastructure.llm.gemini_assessor import (
    GeminiAssessor,
    parse_analysis,
    strip_code_fences,
)

REPLY = {
    "score": 72.6,
    "plain": "Likely",
    "reasons": ["Solid funds"],
    "docs": [{"name": "Passport", "ok": True, "note": "Readable"}],
    "twin": {"confidence": 64, "traits": ["Student", "First trip"]},
    "countries": [{"name": "Canada", "score": 140, "flag": "🇨🇦", "reason": "Good fit"}],
    "risk": [{"label": "Finances", "value": 30}],
}


class FakeModels:
    def __init__(self, text=None, error=None):
        self.text = text
        self.error = error
        self.calls = []

    def generate_content(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        return SimpleNamespace(text=self.text)


def _assessor(text=None, error=None) -> GeminiAssessor:
    return GeminiAssessor(client=SimpleNamespace(models=FakeModels(text, error)))


class TestStripCodeFences:
    def test_plain_json_untouched(self):
        assert strip_code_fences('{"a": 1}') == '{"a": 1}'

    def test_fenced_json(self):
        assert strip_code_fences('```json\n{"a": 1}\n```') == '{"a": 1}'


class TestParseAnalysis:
    def test_normalises_reply(self):
        result = parse_analysis(REPLY, ApplicantProfile(name="Asha"))
        assert result.score == 73
        assert result.twin.name == "Asha"
        assert result.twin.confidence == 64
        assert result.countries[0].score == 100
        assert result.docs[0].score_impact == 0

    def test_missing_plain_uses_band(self):
        result = parse_analysis({"score": 40}, ApplicantProfile())
        assert result.plain == "Unlikely"
        assert result.reasons == []
        assert result.twin.name == "Applicant"

    @pytest.mark.parametrize("plain,expected", [
        ("High", "Highly likely"),
        ("Moderate", "Highly likely"),
        (["Likely"], "Highly likely"),
        ("Borderline", "Borderline"),
    ])
    def test_band_outside_contract_replaced(self, plain, expected):
        result = parse_analysis({"score": 80, "plain": plain}, ApplicantProfile())
        assert result.plain == expected
        assert result.plain in {"Unlikely", "Borderline", "Likely", "Highly likely"}

    @pytest.mark.parametrize("data", [[],{"plain": "Likely"}, {"score": "high"}])
    def test_unusable_reply(self, data):
        with pytest.raises(AssessorError):
            parse_analysis(data, ApplicantProfile())


class TestGeminiAssessor:
    def test_assess_with_fenced_reply(self):
        assessor = _assessor(text="```json\n" + json.dumps(REPLY) + "\n```")
        result = assessor.assess(ApplicantProfile(name="Asha", dest_country="Canada"), make_docs())
        assert result.score == 73
        call = assessor.client.models.calls[0]
        assert call["model"] == "gemini-2.0-flash"
        assert "Destination country: Canada" in call["contents"][0]

    def test_invalid_json(self):
        with pytest.raises(AssessorError):
            _assessor(text="not json").assess(ApplicantProfile(), make_docs())

    def test_provider_error(self):
        with pytest.raises(AssessorError):
            _assessor(error=RuntimeError("quota")).assess(ApplicantProfile(), make_docs())

    def test_missing_documents_checked_before_call(self):
        assessor = _assessor(text=json.dumps(REPLY))
        with pytest.raises(MissingDocumentsError):
            assessor.assess(ApplicantProfile(), make_docs(offer=None))
        assert assessor.client.models.calls == []
