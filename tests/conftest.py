"""
Shared fixtures: document sets and the heuristic pipeline.
"""

import pytest

from visa_genius.core.entities.document import DocumentDescriptor, DocumentRole
from visa_genius.core.use_cases.analyze_application import AnalyzeApplicationUseCase
from visa_genius.infrastructure.rules.document_rules import MetadataDocumentValidator

KB = 1024


def make_doc(role: str, name: str | None = None, size_kb: float = 200) -> DocumentDescriptor:
    return DocumentDescriptor(
        role=DocumentRole.parse(role),
        original_name=name if name is not None else f"{role}.pdf",
        size_bytes=int(size_kb * KB),
    )


def make_docs(**overrides) -> dict:
    """Valid passport/bank/offer PDFs; pass role=DocumentDescriptor|None to override."""
    docs = {role: make_doc(role) for role in ("passport", "bank", "offer")}
    docs.update(overrides)
    return docs


@pytest.fixture
def validator() -> MetadataDocumentValidator:
    return MetadataDocumentValidator()


@pytest.fixture
def use_case(validator) -> AnalyzeApplicationUseCase:
    return AnalyzeApplicationUseCase(document_validator=validator)
