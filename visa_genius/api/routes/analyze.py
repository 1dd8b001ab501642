"""
Route: POST /analyze — Upload documents + profile and get a visa verdict.
"""

import asyncio
import json
import logging

from fastapi import APIRouter, File, Form, HTTPException, Query, UploadFile

from visa_genius.api.schemas.responses import AnalysisResponse
from visa_genius.config.settings import get_settings
from visa_genius.core.entities.applicant import ApplicantProfile
from visa_genius.core.entities.document import DocumentDescriptor, DocumentRole
from visa_genius.core.exceptions import (
    AssessorError,
    AssessorUnavailableError,
    MissingDocumentsError,
    ProfileError,
)
from visa_genius.core.interfaces.assessor import IAssessor
from visa_genius.core.use_cases.analyze_application import AnalyzeApplicationUseCase
from visa_genius.infrastructure.llm.gemini_assessor import GeminiAssessor
from visa_genius.infrastructure.rules.document_rules import MetadataDocumentValidator

logger = logging.getLogger(__name__)

router = APIRouter()

# Lazy singletons
_use_case = None
_llm_assessor = None


def _get_use_case() -> AnalyzeApplicationUseCase:
    """Factory — build the heuristic pipeline with concrete adapters."""
    global _use_case
    if _use_case is None:
        _use_case = AnalyzeApplicationUseCase(document_validator=MetadataDocumentValidator())
    return _use_case


def _get_llm() -> GeminiAssessor | None:
    """Get the Gemini assessor if enabled."""
    global _llm_assessor
    settings = get_settings()
    if not settings.llm_enabled or not settings.gemini_api_key:
        return None
    if _llm_assessor is None:
        _llm_assessor = GeminiAssessor(
            api_key=settings.gemini_api_key,
            model_name=settings.gemini_model,
        )
    return _llm_assessor


def get_assessor(name: str | None = None) -> IAssessor:
    """Resolve an assessor by name, falling back to the configured default."""
    name = (name or get_settings().default_assessor).lower()
    if name == "heuristic":
        return _get_use_case()
    if name == "llm":
        llm = _get_llm()
        if llm is None:
            raise AssessorUnavailableError("LLM assessor not configured. Set GEMINI_API_KEY in .env")
        return llm
    raise AssessorUnavailableError(f"Unknown assessor: '{name}'")


def parse_profile(raw: str | None) -> ApplicantProfile:
    """Decode the JSON profile form field."""
    try:
        data = json.loads(raw or "{}")
    except json.JSONDecodeError as e:
        raise ProfileError(f"Profile is not valid JSON: {e.msg}") from e
    return ApplicantProfile.from_mapping(data)


async def _read_document(role: DocumentRole, file: UploadFile | None) -> DocumentDescriptor | None:
    if file is None:
        return None
    limit = get_settings().max_upload_bytes
    if file.size is not None and file.size > limit:
        raise HTTPException(status_code=413, detail=f"File too large: {file.filename}")
    # Never buffer more than one byte past the limit
    content = await file.read(limit + 1)
    if len(content) > limit:
        raise HTTPException(status_code=413, detail=f"File too large: {file.filename}")
    return DocumentDescriptor(
        role=role,
        original_name=file.filename or "",
        size_bytes=len(content),
        content=content,
        content_type=file.content_type or "",
    )


@router.post("/analyze", response_model=AnalysisResponse)
async def analyze_application(
    passport: UploadFile | None = File(None),
    bank: UploadFile | None = File(None),
    offer: UploadFile | None = File(None),
    profile: str = Form("{}"),
    assessor: str | None = Query(None, description="heuristic | llm"),
):
    """
    Analyze a visa application.

    Upload passport, bank statement and offer letter plus a JSON profile
    and receive:
    - Score (0-100) and band
    - Reasons
    - Per-document validation
    - Digital twin, country comparison and risk breakdown
    """
    try:
        applicant = parse_profile(profile)
    except ProfileError as e:
        raise HTTPException(status_code=400, detail=f"Malformed profile: {e}")

    documents = {
        role.value: await _read_document(role, upload)
        for role, upload in (
            (DocumentRole.PASSPORT, passport),
            (DocumentRole.BANK, bank),
            (DocumentRole.OFFER, offer),
        )
    }

    logger.info(f"Analyzing profile: {applicant.name or '(unnamed)'}")
    logger.info(f"Files received: {[d.original_name for d in documents.values() if d]}")

    try:
        selected = get_assessor(assessor)
        logger.info(f"Assessor: {selected.name}")
        if isinstance(selected, GeminiAssessor):
            timeout = get_settings().llm_timeout_seconds
            result = await asyncio.wait_for(
                asyncio.to_thread(selected.assess, applicant, documents),
                timeout=timeout,
            )
        else:
            result = selected.assess(applicant, documents)
    except MissingDocumentsError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except AssessorUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except asyncio.TimeoutError:
        logger.warning("LLM assessor timed out")
        raise HTTPException(status_code=504, detail="LLM assessment timed out")
    except AssessorError as e:
        raise HTTPException(status_code=502, detail=str(e))
    except Exception:
        logger.exception("Internal error analyzing profile")
        raise HTTPException(status_code=500, detail="Internal error analyzing profile")

    return AnalysisResponse.model_validate(result.to_dict())
