"""
Data models for business profiles and name suggestions.
"""

import re
from dataclasses import dataclass, asdict
from typing import Any

DOMAIN_SUFFIX = ".com"

INDUSTRIES = [
    "Technology", "Healthcare", "Finance", "Education", "Entertainment",
    "Food & Beverage", "Travel", "Fashion", "Real Estate", "Other",
]

_WHITESPACE_RE = re.compile(r"\s+")


def derive_domain(name: str) -> str:
    """Lowercase the name, drop all whitespace and append the .com suffix."""
    return _WHITESPACE_RE.sub("", name.lower()) + DOMAIN_SUFFIX


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


@dataclass(frozen=True)
class BusinessProfile:
    """Business description entered in the form."""

    keywords: str
    industry: str = ""
    target_audience: str = ""
    company_values: str = ""
    company_description: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BusinessProfile":
        """Build a profile from the form's camelCase JSON payload."""
        return cls(
            keywords=_text(data.get("keywords")),
            industry=_text(data.get("industry")),
            target_audience=_text(data.get("targetAudience")),
            company_values=_text(data.get("companyValues")),
            company_description=_text(data.get("companyDescription")),
        )

    def has_keywords(self) -> bool:
        return bool(self.keywords.strip())


@dataclass(frozen=True)
class NameCandidate:
    """A name returned by the model, before its domain is checked."""

    name: str

    @property
    def domain(self) -> str:
        return derive_domain(self.name)


@dataclass(frozen=True)
class NameSuggestion:
    """A candidate name with its derived domain and availability."""

    name: str
    domain: str
    available: bool = False

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)
