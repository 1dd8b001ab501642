"""
Pydantic schemas — Response models for the API.
"""

from pydantic import BaseModel


class DocResponse(BaseModel):
    name: str
    ok: bool
    note: str


class TwinResponse(BaseModel):
    name: str
    confidence: int
    traits: list[str]


class CountryResponse(BaseModel):
    name: str
    score: int
    flag: str
    reason: str


class RiskResponse(BaseModel):
    label: str
    value: int


class AnalysisResponse(BaseModel):
    score: int
    plain: str
    reasons: list[str]
    docs: list[DocResponse]
    twin: TwinResponse | None = None
    countries: list[CountryResponse]
    risk: list[RiskResponse]


class HealthResponse(BaseModel):
    status: str
    version: str
    assessor: str
    llm_enabled: bool
