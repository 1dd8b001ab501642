"""
Entity: Analysis Result

Consolidated verdict of the whole pipeline
(documents + score + risk + countries + twin). Domain aggregate.
"""

from dataclasses import dataclass, field

from visa_genius.core.entities.document import DocumentAssessment


@dataclass
class ScoreResult:
    """Aggregate score with its qualitative band and reasons."""
    score: int                    # 0 to 100
    plain: str                    # "Unlikely", "Borderline", "Likely", "Highly likely"
    reasons: list[str] = field(default_factory=list)


@dataclass
class RiskItem:
    label: str                    # "Finances", "Docs", "Travel History", "Purpose"
    value: int                    # 0 (no risk) to 100


@dataclass
class CountryAssessment:
    name: str
    score: int
    flag: str
    reason: str


@dataclass
class TwinSummary:
    """Short "digital twin" characterising the applicant."""
    name: str
    confidence: int
    traits: list[str] = field(default_factory=list)


@dataclass
class AnalysisResult:
    """Full verdict returned to the caller."""
    score: int
    plain: str
    reasons: list[str] = field(default_factory=list)
    docs: list[DocumentAssessment] = field(default_factory=list)
    twin: TwinSummary | None = None
    countries: list[CountryAssessment] = field(default_factory=list)
    risk: list[RiskItem] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Public shape. Document score impacts are stripped."""
        return {
            "score": self.score,
            "plain": self.plain,
            "reasons": list(self.reasons),
            "docs": [d.to_dict() for d in self.docs],
            "twin": {
                "name": self.twin.name,
                "confidence": self.twin.confidence,
                "traits": list(self.twin.traits),
            } if self.twin else None,
            "countries": [
                {"name": c.name, "score": c.score, "flag": c.flag, "reason": c.reason}
                for c in self.countries
            ],
            "risk": [{"label": r.label, "value": r.value} for r in self.risk],
        }
