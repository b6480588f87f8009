"""
Candidate Value Object

Architectural Intent:
- Immutable value object for a selectable item returned by a provider listing
- Two kinds: support services and the problem classifications of a service
- A classification keeps the short name of its owning service so it can be
  traced back to the listing it came from
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class CandidateKind(Enum):
    SERVICE = "service"
    PROBLEM_CLASSIFICATION = "problem classification"


@dataclass(frozen=True)
class Candidate:
    """
    Value Object representing one entry of a service or classification listing.
    """
    id: str
    display_name: str
    short_name: str = ""
    kind: CandidateKind = CandidateKind.SERVICE
    service_short_name: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Candidate id cannot be empty")
        if not self.display_name:
            raise ValueError("Candidate display name cannot be empty")
        if not self.short_name:
            object.__setattr__(self, "short_name", self.id.rstrip("/").rsplit("/", 1)[-1])

    def __str__(self) -> str:
        return f"{self.display_name} ({self.short_name})"

    @staticmethod
    def from_record(
        record: dict[str, Any],
        kind: CandidateKind = CandidateKind.SERVICE,
        service_short_name: Optional[str] = None,
    ) -> "Candidate":
        """
        Builds a Candidate from a listing record shaped like
        {"id": ..., "name": ..., "displayName": ...}.
        """
        candidate_id = str(record.get("id") or "")
        display_name = str(record.get("displayName") or record.get("name") or candidate_id)
        return Candidate(
            id=candidate_id,
            display_name=display_name,
            short_name=str(record.get("name") or ""),
            kind=kind,
            service_short_name=service_short_name,
        )
