"""
Entity: Document

Metadata of one uploaded file and its validation verdict.
Pure model, no framework or storage dependency.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import PurePath


class DocumentRole(str, Enum):
    PASSPORT = "passport"
    BANK = "bank"
    OFFER = "offer"
    OTHER = "other"

    @classmethod
    def parse(cls, value: "str | DocumentRole") -> "DocumentRole":
        """Map a slot name to a role; unknown slots become OTHER."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.OTHER


# Slots the pipeline requires, in validation order
REQUIRED_ROLES: tuple[DocumentRole, ...] = (
    DocumentRole.PASSPORT,
    DocumentRole.BANK,
    DocumentRole.OFFER,
)

DISPLAY_NAMES = {
    DocumentRole.PASSPORT: "Passport",
    DocumentRole.BANK: "Bank statement",
    DocumentRole.OFFER: "Offer letter",
    DocumentRole.OTHER: "Document",
}


@dataclass
class DocumentDescriptor:
    """One uploaded file, as seen by the engine."""
    role: DocumentRole
    original_name: str = ""
    size_bytes: int = 0
    content: bytes | None = field(default=None, repr=False)   # only read by the LLM assessor
    content_type: str = ""

    @property
    def extension(self) -> str:
        """Lower-cased suffix of the original file name, e.g. '.pdf'."""
        return PurePath(self.original_name or "").suffix.lower()

    @property
    def display_name(self) -> str:
        return DISPLAY_NAMES[self.role]


@dataclass
class DocumentAssessment:
    """Validation verdict for a single document."""
    name: str                 # ex: "Passport"
    ok: bool
    note: str
    score_impact: int = 0     # internal, never exposed to callers

    def to_dict(self) -> dict:
        return {"name": self.name, "ok": self.ok, "note": self.note}
