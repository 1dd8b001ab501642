"""
Metadata-only Document Rules.

Validates an uploaded document from its declared extension and byte size:
- Allowed file type (PDF or image)
- Minimum size (tiny files are likely corrupted or incomplete)
- Role-specific acceptance (passport, bank statement, offer letter)

No content is read, so forged or mismatched documents cannot be detected.
"""
import logging
from typing import Callable, List, Optional, Tuple

from visa_genius.core.entities.document import (
    DocumentAssessment,
    DocumentDescriptor,
    DocumentRole,
)
from visa_genius.core.interfaces.document_validator import IDocumentValidator

logger = logging.getLogger(__name__)


ALLOWED_EXTENSIONS = {".pdf", ".jpg", ".jpeg", ".png"}
MIN_SIZE_KB = 30

UNSUPPORTED_TYPE_IMPACT = -20
TOO_SMALL_IMPACT = -15

# role -> (score impact, note) once type and size checks pass
ROLE_ACCEPTANCE = {
    DocumentRole.PASSPORT: (15, "Passport file looks valid (size & type OK)."),
    DocumentRole.BANK: (20, "Bank statement file looks valid. Balance & history assumed OK."),
    DocumentRole.OFFER: (15, "Offer letter file looks valid. Institution & dates not verified."),
}
GENERIC_ACCEPTANCE = (5, "Document uploaded successfully.")

Rule = Callable[[DocumentDescriptor], Optional[Tuple[bool, str, int]]]


class MetadataDocumentValidator(IDocumentValidator):
    """
    Document validation — 3 rules, first match wins:
    1. File type (extension in the allowed set, case-insensitive)
    2. Minimum size (>= 30 KB)
    3. Role acceptance (impact depends on the declared role)
    """

    RULES_VERSION = "docs-v1.0"

    def __init__(self, min_size_kb: float = MIN_SIZE_KB):
        self._min_size_kb = min_size_kb
        self._rules: List[Tuple[str, Rule]] = [
            ("FILE_TYPE", self._rule_file_type),
            ("MIN_SIZE", self._rule_min_size),
            ("ROLE_ACCEPTANCE", self._rule_role_acceptance),
        ]

    def validate(self, document: DocumentDescriptor) -> DocumentAssessment:
        """Apply the rules in order and return the first verdict."""
        for rule_id, rule_fn in self._rules:
            verdict = rule_fn(document)
            if verdict is None:
                continue
            ok, note, impact = verdict
            if not ok:
                logger.info(f"{document.display_name} failed {rule_id}: {note}")
            return DocumentAssessment(
                name=document.display_name,
                ok=ok,
                note=note,
                score_impact=impact,
            )
        raise RuntimeError("No document rule matched")  # role acceptance always matches

    # ── Rules (each returns (ok, note, impact) or None to fall through) ──

    def _rule_file_type(self, document: DocumentDescriptor) -> Optional[Tuple[bool, str, int]]:
        if document.extension not in ALLOWED_EXTENSIONS:
            return (False, "unsupported file type", UNSUPPORTED_TYPE_IMPACT)
        return None

    def _rule_min_size(self, document: DocumentDescriptor) -> Optional[Tuple[bool, str, int]]:
        if document.size_bytes / 1024 < self._min_size_kb:
            return (False, "too small / possibly corrupted", TOO_SMALL_IMPACT)
        return None

    def _rule_role_acceptance(self, document: DocumentDescriptor) -> Optional[Tuple[bool, str, int]]:
        impact, note = ROLE_ACCEPTANCE.get(document.role, GENERIC_ACCEPTANCE)
        return (True, note, impact)
