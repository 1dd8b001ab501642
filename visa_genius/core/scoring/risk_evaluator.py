"""
Risk Evaluator — four independent risk buckets for the dashboard bars.
"""
from typing import List, Sequence

from visa_genius.core.entities.analysis_result import RiskItem
from visa_genius.core.entities.applicant import ApplicantProfile
from visa_genius.core.entities.document import DocumentAssessment

LOW_RISK_PURPOSES = {"Study", "Work"}


def funds_risk(score: int) -> int:
    """Derived from the final score, not from the raw funds."""
    if score >= 80:
        return 20
    if score >= 60:
        return 35
    return 60


def docs_risk(docs: Sequence[DocumentAssessment]) -> int:
    bad = sum(1 for d in docs if not d.ok)
    if bad == 0:
        return 25
    if bad == 1:
        return 50
    return 70


def travel_risk(profile: ApplicantProfile) -> int:
    return 60 if profile.past_visa == "None" else 25


def purpose_risk(profile: ApplicantProfile) -> int:
    return 20 if profile.purpose in LOW_RISK_PURPOSES else 40


class RiskEvaluator:
    """Finances, Docs, Travel History, Purpose — always in this order."""

    def evaluate(
        self,
        score: int,
        docs: Sequence[DocumentAssessment],
        profile: ApplicantProfile,
    ) -> List[RiskItem]:
        return [
            RiskItem(label="Finances", value=funds_risk(score)),
            RiskItem(label="Docs", value=docs_risk(docs)),
            RiskItem(label="Travel History", value=travel_risk(profile)),
            RiskItem(label="Purpose", value=purpose_risk(profile)),
        ]
