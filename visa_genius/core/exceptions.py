"""
Domain errors raised by the assessment pipeline and its adapters.

Soft document failures (bad extension, tiny file) are NOT errors: they are
recorded as ok=False on the DocumentAssessment and flow through scoring.
"""


class AssessmentError(Exception):
    """Base class for every rejected assessment request."""


class MissingDocumentsError(AssessmentError):
    """One or more required document slots were not provided."""

    def __init__(self, missing: tuple[str, ...]):
        self.missing = tuple(missing)
        super().__init__(
            "Missing required documents. Please upload passport, bank statement, "
            f"and offer letter. Missing: {', '.join(self.missing)}"
        )


class ProfileError(AssessmentError):
    """The applicant profile payload could not be parsed."""


class AssessorError(AssessmentError):
    """An assessor backend failed to produce a result."""


class AssessorUnavailableError(AssessorError):
    """The requested assessor is not configured."""
