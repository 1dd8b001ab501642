"""
Contract: Assessor

Turns an applicant profile and the uploaded documents into an
AnalysisResult. The local heuristic pipeline and the Gemini-backed
assessor both implement this contract.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping

from visa_genius.core.entities.analysis_result import AnalysisResult
from visa_genius.core.entities.applicant import ApplicantProfile
from visa_genius.core.entities.document import DocumentDescriptor, REQUIRED_ROLES
from visa_genius.core.exceptions import MissingDocumentsError


def require_documents(documents: Mapping[str, DocumentDescriptor | None]) -> list[DocumentDescriptor]:
    """
    Check that every required slot holds a document.

    Returns the required descriptors in validation order
    (passport, bank, offer). Raises MissingDocumentsError otherwise.
    """
    missing = tuple(role.value for role in REQUIRED_ROLES if documents.get(role.value) is None)
    if missing:
        raise MissingDocumentsError(missing)
    return [documents[role.value] for role in REQUIRED_ROLES]


class IAssessor(ABC):
    """
    Port: Assessor

    Every implementation enforces the required-documents precondition
    before doing any work and never returns a partial result.
    """

    name: str = ""

    @abstractmethod
    def assess(
        self,
        profile: ApplicantProfile,
        documents: Mapping[str, DocumentDescriptor | None],
    ) -> AnalysisResult:
        """
        Assess one application.

        Args:
            profile: Validated applicant profile.
            documents: Slot name ("passport", "bank", "offer") -> descriptor.

        Returns:
            AnalysisResult with score, band, reasons, docs, twin, countries, risk.

        Raises:
            MissingDocumentsError: a required slot is empty.
            AssessorError: the backend failed.
        """
        ...
