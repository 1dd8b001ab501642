"""
Country Comparator — fixed multi-country comparison.

Each country score is a static offset of the aggregate score. The
applicant's declared destination is not consulted.
"""
from typing import List

from visa_genius.core.entities.analysis_result import CountryAssessment
from visa_genius.core.scoring.score_aggregator import clamp

# (name, offset, flag, reason)
COUNTRIES = [
    ("Canada", 3, "🇨🇦", "Study funds okay; program alignment good."),
    ("UK", -8, "🇬🇧", "Needs stronger financial and document history."),
    ("Australia", 5, "🇦🇺", "Profile matches skill/education demand."),
]


class CountryComparator:

    def compare(self, score: int) -> List[CountryAssessment]:
        return [
            CountryAssessment(name=name, score=clamp(score + offset), flag=flag, reason=reason)
            for name, offset, flag, reason in COUNTRIES
        ]
