"""
Domain Services Package

Architectural Intent:
- Contains domain services implementing selection and normalization logic
"""

from azticket.domain.services.candidate_resolver import (
    CandidateResolver,
    candidates_from_records,
    match_candidates,
    sort_for_menu,
)
from azticket.domain.services.normalizer import (
    normalize_country,
    normalize_severity,
    normalize_time_zone,
)

__all__ = [
    "CandidateResolver",
    "candidates_from_records",
    "match_candidates",
    "sort_for_menu",
    "normalize_country",
    "normalize_severity",
    "normalize_time_zone",
]
