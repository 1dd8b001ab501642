"""
Twin Summarizer — short "digital twin" of the applicant.
"""
from visa_genius.core.entities.analysis_result import TwinSummary
from visa_genius.core.entities.applicant import ApplicantProfile

DEFAULT_NAME = "Applicant"
TWIN_CONFIDENCE = 80
LOW_RISK_SCORE = 70


class TwinSummarizer:

    def summarize(self, profile: ApplicantProfile, score: int) -> TwinSummary:
        return TwinSummary(
            name=profile.name or DEFAULT_NAME,
            confidence=TWIN_CONFIDENCE,
            traits=[
                "Low travel history" if profile.past_visa == "None" else "Experienced traveller",
                "Low risk profile" if score >= LOW_RISK_SCORE else "Medium risk profile",
            ],
        )
