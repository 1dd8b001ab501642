"""
FastAPI Application — Visa Genius.

Architecture:
  - Heuristic pipeline (metadata document rules + deterministic scoring)
  - Optional Gemini assessor behind the same result contract
  - Stateless: nothing is stored between requests
"""

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from visa_genius.api.routes.analyze import _get_llm, router as analyze_router
from visa_genius.api.schemas.responses import HealthResponse
from visa_genius.config.settings import get_settings

VERSION = "1.0.0"

logger = logging.getLogger(__name__)

settings = get_settings()
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Visa Genius",
    description="Visa approval assessment from an applicant profile and uploaded documents.",
    version=VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register analyze routes
app.include_router(analyze_router, prefix="/api", tags=["Analysis"])


@app.get("/", response_class=PlainTextResponse)
async def root():
    return "Visa Genius Backend Running"


# ── Health ──
@app.get("/health", response_model=HealthResponse)
async def health():
    current = get_settings()
    return HealthResponse(
        status="ok",
        version=VERSION,
        assessor=current.default_assessor,
        llm_enabled=_get_llm() is not None,
    )


def run():
    """Console entry point: serve the API with uvicorn."""
    current = get_settings()
    logger.info(f"Visa Genius backend running on http://{current.api_host}:{current.api_port}")
    uvicorn.run(app, host=current.api_host, port=current.api_port, log_level=current.log_level.lower())
