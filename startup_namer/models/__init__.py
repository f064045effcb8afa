# Domain models - business profile and name suggestions
from .suggestion import (
    BusinessProfile,
    NameCandidate,
    NameSuggestion,
    derive_domain,
    DOMAIN_SUFFIX,
    INDUSTRIES,
)

__all__ = [
    "BusinessProfile",
    "NameCandidate",
    "NameSuggestion",
    "derive_domain",
    "DOMAIN_SUFFIX",
    "INDUSTRIES",
]
