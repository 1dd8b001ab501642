"""
Use Case: Analyze Application.

Orchestrates: Precondition → Documents → Score → (Risk, Countries, Twin) → Result
Measures the latency of each stage.
"""

import logging
import time
from collections.abc import Mapping

from visa_genius.core.entities.analysis_result import AnalysisResult
from visa_genius.core.entities.applicant import ApplicantProfile
from visa_genius.core.entities.document import DocumentDescriptor
from visa_genius.core.interfaces.assessor import IAssessor, require_documents
from visa_genius.core.interfaces.document_validator import IDocumentValidator
from visa_genius.core.scoring.country_comparator import CountryComparator
from visa_genius.core.scoring.risk_evaluator import RiskEvaluator
from visa_genius.core.scoring.score_aggregator import ScoreAggregator
from visa_genius.core.scoring.twin_summarizer import TwinSummarizer

logger = logging.getLogger(__name__)


class AnalyzeApplicationUseCase(IAssessor):
    """
    Use Case: profile + documents → deterministic verdict.

    Dependency Injection: the document validator comes through the
    constructor. The scoring components are pure and default to the
    standard implementations.
    """

    PIPELINE_VERSION = "1.0.0"
    name = "heuristic"

    def __init__(
        self,
        document_validator: IDocumentValidator,
        score_aggregator: ScoreAggregator | None = None,
        risk_evaluator: RiskEvaluator | None = None,
        country_comparator: CountryComparator | None = None,
        twin_summarizer: TwinSummarizer | None = None,
    ):
        self._validator = document_validator
        self._aggregator = score_aggregator or ScoreAggregator()
        self._risk = risk_evaluator or RiskEvaluator()
        self._countries = country_comparator or CountryComparator()
        self._twin = twin_summarizer or TwinSummarizer()

    def assess(
        self,
        profile: ApplicantProfile,
        documents: Mapping[str, DocumentDescriptor | None],
    ) -> AnalysisResult:
        """
        Run the full pipeline.

        1. Precondition — passport, bank and offer must all be present
        2. Validate each document (passport, bank, offer)
        3. Aggregate score, band and reasons
        4. Risk buckets, country comparison and twin
        5. Assemble the result
        """
        required = require_documents(documents)

        stage_latencies: dict[str, float] = {}
        t_start = time.perf_counter()

        # ── 1. Documents ───────────────────────────────────
        t0 = time.perf_counter()
        docs = [self._validator.validate(d) for d in required]
        stage_latencies["docs_ms"] = round((time.perf_counter() - t0) * 1000, 3)

        # ── 2. Score ───────────────────────────────────────
        t0 = time.perf_counter()
        score_info = self._aggregator.aggregate(profile, docs)
        stage_latencies["score_ms"] = round((time.perf_counter() - t0) * 1000, 3)

        # ── 3. Risk / Countries / Twin ─────────────────────
        t0 = time.perf_counter()
        risk = self._risk.evaluate(score_info.score, docs, profile)
        countries = self._countries.compare(score_info.score)
        twin = self._twin.summarize(profile, score_info.score)
        stage_latencies["derive_ms"] = round((time.perf_counter() - t0) * 1000, 3)

        result = AnalysisResult(
            score=score_info.score,
            plain=score_info.plain,
            reasons=score_info.reasons,
            docs=docs,
            twin=twin,
            countries=countries,
            risk=risk,
        )

        total_ms = round((time.perf_counter() - t_start) * 1000, 3)
        logger.debug(f"Stage latencies: {stage_latencies} (total {total_ms} ms)")
        logger.info(f"Verdict for {twin.name}: {result.score} ({result.plain})")
        return result
