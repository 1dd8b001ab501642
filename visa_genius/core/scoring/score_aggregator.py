"""
Score Aggregator — profile + document adjustments into a single score.

Starts from a neutral base of 50, adds every document's score impact,
applies independent profile adjustments (funds, education, travel
history), clamps to [0, 100] and maps the result to a band.
"""
from typing import List, Sequence

from visa_genius.core.entities.analysis_result import ScoreResult
from visa_genius.core.entities.applicant import ApplicantProfile
from visa_genius.core.entities.document import DocumentAssessment

BASE_SCORE = 50

HIGH_FUNDS = 150000
LOW_FUNDS = 50000
ADVANCED_EDUCATION = {"Masters", "PhD"}

# Highest threshold first
BANDS = [
    (75, "Highly likely"),
    (60, "Likely"),
    (45, "Borderline"),
]
LOWEST_BAND = "Unlikely"
BAND_LABELS = {label for _, label in BANDS} | {LOWEST_BAND}


def clamp(value: int, low: int = 0, high: int = 100) -> int:
    return max(low, min(high, value))


def band_for(score: int) -> str:
    """Qualitative band for a clamped score."""
    for threshold, label in BANDS:
        if score >= threshold:
            return label
    return LOWEST_BAND


class ScoreAggregator:
    """Combines document verdicts and profile fields into a ScoreResult."""

    def aggregate(
        self,
        profile: ApplicantProfile,
        docs: Sequence[DocumentAssessment],
    ) -> ScoreResult:
        score = BASE_SCORE + sum(d.score_impact for d in docs)

        # funds
        if profile.funds > HIGH_FUNDS:
            score += 10
        elif profile.funds < LOW_FUNDS:
            score -= 10

        # education
        if profile.education in ADVANCED_EDUCATION:
            score += 5

        # past visa
        if profile.past_visa == "3+":
            score += 5
        elif profile.past_visa == "None":
            score -= 5

        score = clamp(score)
        return ScoreResult(score=score, plain=band_for(score), reasons=self._reasons(profile, docs))

    def _reasons(self, profile: ApplicantProfile, docs: Sequence[DocumentAssessment]) -> List[str]:
        reasons = []

        if profile.funds > HIGH_FUNDS:
            reasons.append("Strong financial capacity")
        elif profile.funds < LOW_FUNDS:
            reasons.append("Low declared funds – risk on finances")
        else:
            reasons.append("Funds appear moderate for stay")

        if profile.education in ADVANCED_EDUCATION:
            reasons.append("Advanced education supports purpose")

        if profile.past_visa == "3+":
            reasons.append("Good travel history – positive signal")
        elif profile.past_visa == "None":
            reasons.append("No prior visa history – neutral or slightly risky")

        if any(not d.ok for d in docs):
            reasons.append("One or more documents look weak or invalid")

        return reasons
