"""
Gemini Assessor — delegates the whole assessment to a generative model.

Sends the applicant profile plus the raw uploaded documents to Gemini and
normalises the JSON reply into the same AnalysisResult contract as the
local heuristic pipeline.

Uses the `google-genai` SDK (not the deprecated `google-generativeai`).
"""
import json
import logging
import time
from collections.abc import Mapping
from typing import Any, Dict, List, Optional

from google import genai
from google.genai import types

from visa_genius.core.entities.analysis_result import (
    AnalysisResult,
    CountryAssessment,
    RiskItem,
    TwinSummary,
)
from visa_genius.core.entities.applicant import ApplicantProfile
from visa_genius.core.entities.document import DocumentAssessment, DocumentDescriptor
from visa_genius.core.exceptions import AssessorError
from visa_genius.core.interfaces.assessor import IAssessor, require_documents
from visa_genius.core.scoring.score_aggregator import BAND_LABELS, band_for, clamp
from visa_genius.core.scoring.twin_summarizer import DEFAULT_NAME

logger = logging.getLogger(__name__)


SYSTEM_PROMPT = """You are an expert Visa Officer AI. Analyze the visa application based on the profile details and the provided documents.

IMPORTANT: Respond ONLY with a JSON object, no markdown, no backticks, no extra text.

Your task is to:
1. Validate the documents (check if they seem authentic, readable, and relevant to the profile).
2. Identify what documents were provided (e.g., Passport, Bank Statement).
3. Calculate a "Visa Success Probability" score (0-100) based on the strength of the profile and documents.
4. Provide specific reasons for the score.
5. Identify any risks.
6. Compare the profile against typical requirements for the destination country.

Output JSON format:
{
    "score": number (0-100),
    "plain": "Unlikely" | "Borderline" | "Likely" | "Highly likely",
    "reasons": ["reason 1", "reason 2"],
    "docs": [
        {"name": "Document Name (identified)", "ok": boolean, "note": "Validation note"}
    ],
    "twin": {
        "name": "Applicant Name",
        "confidence": number (0-100 confidence in analysis),
        "traits": ["trait 1", "trait 2"]
    },
    "countries": [
        {"name": "Country", "score": number, "flag": "FlagEmoji", "reason": "Specific reason"}
    ],
    "risk": [
        {"label": "Finances", "value": number (0-100 risk)},
        {"label": "Docs", "value": number},
        {"label": "Travel History", "value": number},
        {"label": "Purpose", "value": number}
    ]
}
"""


def strip_code_fences(raw: str) -> str:
    """Remove a surrounding ```json ... ``` block if the model added one."""
    raw = raw.strip()
    if raw.startswith("```"):
        lines = raw.split("\n")
        raw = "\n".join(lines[1:])  # drop the opening fence line
        if raw.rstrip().endswith("```"):
            raw = raw.rstrip()[:-3]
        raw = raw.strip()
    return raw


def _as_int(value: Any, default: int = 0) -> int:
    try:
        return clamp(int(round(float(value))))
    except (TypeError, ValueError, OverflowError):
        return default


def _as_str_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [str(v) for v in value if v is not None]


def _as_dict_list(value: Any) -> List[Dict]:
    if not isinstance(value, list):
        return []
    return [v for v in value if isinstance(v, dict)]


def parse_analysis(data: Any, profile: ApplicantProfile) -> AnalysisResult:
    """
    Normalise the model's JSON into an AnalysisResult.

    Scores are clamped to [0, 100] integers, an unknown band is replaced
    by the band of the score, missing collections become empty and the
    twin falls back to the profile name.
    Raises AssessorError when there is no usable score.
    """
    if not isinstance(data, dict):
        raise AssessorError(f"Model returned {type(data).__name__}, expected an object")
    if "score" not in data:
        raise AssessorError("Model response has no score")
    try:
        score = clamp(int(round(float(data["score"]))))
    except (TypeError, ValueError, OverflowError) as e:
        raise AssessorError(f"Model returned a non-numeric score: {data['score']!r}") from e

    twin_data = data.get("twin") if isinstance(data.get("twin"), dict) else {}
    twin = TwinSummary(
        name=str(twin_data.get("name") or profile.name or DEFAULT_NAME),
        confidence=_as_int(twin_data.get("confidence")),
        traits=_as_str_list(twin_data.get("traits")),
    )

    plain = data.get("plain")
    if not isinstance(plain, str) or plain not in BAND_LABELS:
        plain = band_for(score)

    return AnalysisResult(
        score=score,
        plain=plain,
        reasons=_as_str_list(data.get("reasons")),
        docs=[
            DocumentAssessment(
                name=str(d.get("name", "")),
                ok=bool(d.get("ok", False)),
                note=str(d.get("note", "")),
            )
            for d in _as_dict_list(data.get("docs"))
        ],
        twin=twin,
        countries=[
            CountryAssessment(
                name=str(c.get("name", "")),
                score=_as_int(c.get("score")),
                flag=str(c.get("flag", "")),
                reason=str(c.get("reason", "")),
            )
            for c in _as_dict_list(data.get("countries"))
        ],
        risk=[
            RiskItem(label=str(r.get("label", "")), value=_as_int(r.get("value")))
            for r in _as_dict_list(data.get("risk"))
        ],
    )


class GeminiAssessor(IAssessor):
    """Gemini-powered assessment of a full visa application."""

    name = "llm"

    def __init__(
        self,
        api_key: str = "",
        model_name: str = "gemini-2.0-flash",
        client: Optional[Any] = None,
    ):
        self.model_name = model_name
        self.client = client if client is not None else genai.Client(api_key=api_key)

    def assess(
        self,
        profile: ApplicantProfile,
        documents: Mapping[str, DocumentDescriptor | None],
    ) -> AnalysisResult:
        required = require_documents(documents)
        t0 = time.perf_counter()

        contents = [SYSTEM_PROMPT + "\n\n" + self._build_prompt(profile, required)]
        for doc in required:
            if doc.content:
                contents.append(types.Part.from_bytes(
                    data=doc.content,
                    mime_type=doc.content_type or "application/octet-stream",
                ))

        try:
            response = self.client.models.generate_content(
                model=self.model_name,
                contents=contents,
                config={
                    "temperature": 0.2,
                    "response_mime_type": "application/json",
                },
            )
        except Exception as e:
            logger.error(f"Gemini request failed: {e}")
            raise AssessorError(f"LLM error: {e}") from e

        raw = strip_code_fences(response.text or "")
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Failed to parse Gemini response: {raw[:200]}")
            raise AssessorError(f"JSON parse error: {e}") from e

        result = parse_analysis(data, profile)
        latency = (time.perf_counter() - t0) * 1000
        logger.info(f"Gemini verdict for {result.twin.name}: {result.score} in {latency:.1f} ms")
        return result

    def _build_prompt(self, profile: ApplicantProfile, documents: List[DocumentDescriptor]) -> str:
        """Build the user prompt with profile and upload details."""
        parts = ["## Profile Details", json.dumps(profile.to_dict(), indent=2)]

        parts.append(f"\n## Documents ({len(documents)} uploaded, attached in this order)")
        for doc in documents:
            parts.append(f"  - {doc.display_name}: {doc.original_name} ({doc.size_bytes} bytes)")

        parts.append(f"\nDestination country: {profile.dest_country or 'Destination Country'}")
        return "\n".join(parts)
