"""
Contract: Document Validator

Classifies one uploaded document against static rules for its
declared role. Implementations must not read the file content.
"""

from abc import ABC, abstractmethod

from visa_genius.core.entities.document import DocumentAssessment, DocumentDescriptor


class IDocumentValidator(ABC):
    """
    Port: Document Validator

    Produces an ok/not-ok verdict, a human readable note and the
    internal score impact for a single document.
    """

    @abstractmethod
    def validate(self, document: DocumentDescriptor) -> DocumentAssessment:
        """
        Validate a single document.

        Args:
            document: Descriptor with role, original name and size.

        Returns:
            DocumentAssessment with verdict, note and score impact.
        """
        ...
