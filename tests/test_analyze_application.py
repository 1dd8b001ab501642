"""
Tests for the end-to-end heuristic pipeline.
Covers:
    ✓ Strong applicant (score clamped to 100)
    ✓ Low funds + tiny bank statement
    ✓ Unsupported file type
    ✓ Missing documents precondition
    ✓ Public result shape
"""

import pytest

from conftest import make_doc, make_docs
from visa_genius.core.entities.applicant import ApplicantProfile
from visa_genius.core.exceptions import MissingDocumentsError


def _assess(use_case, profile: dict, **doc_overrides):
    return use_case.assess(ApplicantProfile.from_mapping(profile), make_docs(**doc_overrides))


class TestScenarios:
    def test_strong_applicant(self, use_case):
        result = _assess(use_case, {"funds": 200000, "education": "Masters", "past_visa": "3+", "purpose": "Study"})
        assert result.score == 100
        assert result.plain == "Highly likely"
        assert [r.value for r in result.risk] == [20, 25, 25, 20]
        assert all(d.ok for d in result.docs)
        assert [c.score for c in result.countries] == [100, 92, 100]
        assert result.twin.traits == ["Experienced traveller", "Low risk profile"]

    def test_low_funds_small_bank_statement(self, use_case):
        result = _assess(
            use_case,
            {"funds": 20000, "past_visa": "None"},
            bank=make_doc("bank", "statement.pdf", size_kb=10),
        )
        bank = result.docs[1]
        assert bank.name == "Bank statement"
        assert bank.ok is False
        assert bank.note == "too small / possibly corrupted"
        assert result.score == 50
        assert result.plain == "Borderline"
        assert "Low declared funds – risk on finances" in result.reasons
        assert "No prior visa history – neutral or slightly risky" in result.reasons
        assert result.reasons[-1] == "One or more documents look weak or invalid"
        assert [r.value for r in result.risk] == [60, 50, 60, 40]

    def test_unsupported_passport_type(self, use_case):
        result = _assess(use_case, {"funds": 100000}, passport=make_doc("passport", "passport.docx", size_kb=500))
        passport = result.docs[0]
        assert passport.ok is False
        assert passport.note == "unsupported file type"
        # 50 - 20 + 20 + 15
        assert result.score == 65

    def test_documents_validated_in_fixed_order(self, use_case):
        result = _assess(use_case, {})
        assert [d.name for d in result.docs] == ["Passport", "Bank statement", "Offer letter"]

    def test_deterministic(self, use_case):
        profile = {"name": "Asha", "funds": "75000", "education": "PhD", "past_visa": "1-2"}
        assert _assess(use_case, profile).to_dict() == _assess(use_case, profile).to_dict()


class TestPrecondition:
    @pytest.mark.parametrize("missing", ["passport", "bank", "offer"])
    def test_missing_single_document(self, use_case, missing, validator, monkeypatch):
        calls = []
        monkeypatch.setattr(validator, "validate", lambda d: calls.append(d))
        with pytest.raises(MissingDocumentsError) as exc:
            _assess(use_case, {"funds": 200000}, **{missing: None})
        assert exc.value.missing == (missing,)
        assert calls == []

    def test_all_missing(self, use_case):
        with pytest.raises(MissingDocumentsError) as exc:
            use_case.assess(ApplicantProfile(), {})
        assert exc.value.missing == ("passport", "bank", "offer")
        assert "Missing required documents" in str(exc.value)


class TestResultShape:
    def test_public_dict(self, use_case):
        data = _assess(use_case, {"name": "Asha", "funds": 100000}).to_dict()
        assert set(data) == {"score", "plain", "reasons", "docs", "twin", "countries", "risk"}
        assert all(set(d) == {"name", "ok", "note"} for d in data["docs"])
        assert data["twin"] == {
            "name": "Asha", "confidence": 80,
            "traits": ["Experienced traveller", "Low risk profile"],
        }
        assert all(set(c) == {"name", "score", "flag", "reason"} for c in data["countries"])
        assert all(set(r) == {"label", "value"} for r in data["risk"])
