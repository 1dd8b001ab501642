"""
Applicant Simulation — run sample applicants through the heuristic pipeline.

Builds a handful of profiles and document sets (valid, tiny, wrong type)
and prints the verdict, reasons and risk bars for each one.
"""
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from visa_genius.core.entities.applicant import ApplicantProfile
from visa_genius.core.entities.document import DocumentDescriptor, DocumentRole
from visa_genius.core.use_cases.analyze_application import AnalyzeApplicationUseCase
from visa_genius.infrastructure.rules.document_rules import MetadataDocumentValidator

KB = 1024


def docs(passport=("passport.pdf", 200 * KB), bank=("bank.pdf", 200 * KB), offer=("offer.pdf", 200 * KB)):
    return {
        "passport": DocumentDescriptor(DocumentRole.PASSPORT, *passport),
        "bank": DocumentDescriptor(DocumentRole.BANK, *bank),
        "offer": DocumentDescriptor(DocumentRole.OFFER, *offer),
    }


SAMPLES = [
    ("STRONG STUDENT", {"name": "Asha", "funds": 200000, "education": "Masters",
                        "past_visa": "3+", "purpose": "Study", "dest_country": "Canada"}, docs()),
    ("LOW FUNDS, TINY BANK FILE", {"name": "Ravi", "funds": "20000", "past_visa": "None",
                                   "purpose": "Tourism"}, docs(bank=("bank.pdf", 10 * KB))),
    ("WRONG FILE TYPES", {"name": "Mina", "funds": "90000", "education": "Bachelors",
                          "past_visa": "1-2", "purpose": "Work"},
     docs(passport=("passport.docx", 300 * KB), offer=("offer.txt", 80 * KB))),
    ("EMPTY PROFILE", {}, docs()),
]


def main():
    use_case = AnalyzeApplicationUseCase(document_validator=MetadataDocumentValidator())

    print("=" * 70)
    print("  Visa Genius — Heuristic Pipeline Simulation")
    print("=" * 70)

    for label, raw_profile, documents in SAMPLES:
        result = use_case.assess(ApplicantProfile.from_mapping(raw_profile), documents)

        print(f"\n{'─'*70}")
        print(f"  {label}: {result.score}/100 — {result.plain}")
        print(f"{'─'*70}")
        for d in result.docs:
            print(f"  [{'OK' if d.ok else 'XX'}] {d.name}: {d.note}")
        for r in result.reasons:
            print(f"  • {r}")
        print("  Risk: " + ", ".join(f"{r.label}={r.value}" for r in result.risk))
        print("  Countries: " + ", ".join(f"{c.name}={c.score}" for c in result.countries))
        print(f"  Twin: {result.twin.name} ({', '.join(result.twin.traits)})")


if __name__ == "__main__":
    main()
