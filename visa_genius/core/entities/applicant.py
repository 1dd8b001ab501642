"""
Entity: Applicant Profile

Explicit schema for the profile record submitted with an application.
Every field is optional; absent values fall back to neutral defaults
(empty string, zero funds).
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from visa_genius.core.exceptions import ProfileError

_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")


def parse_funds(value: Any) -> int:
    """
    Read declared funds as an integer.

    Strings are read up to the first non-digit ("150000.50" -> 150000,
    "12k" -> 12); numbers are truncated toward zero. Anything else,
    including missing or non-numeric input, counts as 0.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return 0
        return int(value)
    match = _INT_PREFIX.match(str(value))
    return int(match.group(1)) if match else 0


@dataclass(frozen=True)
class ApplicantProfile:
    """Applicant profile as consumed by the scoring engine."""
    name: str = ""
    age: str = ""
    passport_country: str = ""
    dest_country: str = ""
    purpose: str = ""             # Study / Work / Tourism / Family / Other
    funds: int = 0                # monthly declared funds
    education: str = ""           # High School / Bachelors / Masters / PhD / Other
    past_visa: str = ""           # None / 1-2 / 3+

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "ApplicantProfile":
        """
        Validate a raw profile mapping once, at pipeline entry.

        Unknown keys are ignored. Raises ProfileError when ``data`` is not
        a mapping.
        """
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ProfileError(f"Profile must be an object, got {type(data).__name__}")

        values: dict[str, Any] = {}
        for f in fields(cls):
            raw = data.get(f.name)
            if f.name == "funds":
                values["funds"] = parse_funds(raw)
            elif raw is None:
                values[f.name] = ""
            elif isinstance(raw, (str, int, float)):
                values[f.name] = str(raw)
            else:
                raise ProfileError(f"Profile field '{f.name}' must be a string")
        return cls(**values)

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}
