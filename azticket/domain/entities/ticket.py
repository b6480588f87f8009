"""
Ticket Module

Architectural Intent:
- TicketRequest is assembled once per session and never mutated; the
  submitter derives a named copy at submission time
- TicketResult is what the provider returned (or the preview in dry-run) and
  is what gets written to the optional output file
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Optional

from azticket.domain.errors import MissingFieldError
from azticket.domain.value_objects.contact_info import ContactInfo
from azticket.domain.value_objects.severity import Severity


@dataclass(frozen=True)
class TicketRequest:
    title: str
    description: str
    service_id: str
    problem_classification_id: str
    severity: Severity
    contact: ContactInfo
    subscription_id: Optional[str] = None
    generated_ticket_name: Optional[str] = None

    def missing_field(self) -> Optional[str]:
        """First empty required field, or None when the request is complete."""
        for name in ("title", "description", "service_id", "problem_classification_id"):
            if not (getattr(self, name) or "").strip():
                return name
        missing = self.contact.missing_fields()
        return missing[0] if missing else None

    def validate(self) -> None:
        name = self.missing_field()
        if name is not None:
            raise MissingFieldError(name)

    def with_ticket_name(self, name: str) -> TicketRequest:
        return replace(self, generated_ticket_name=name)

    def to_dict(self) -> dict[str, Any]:
        return {
            "ticket_name": self.generated_ticket_name,
            "subscription_id": self.subscription_id,
            "title": self.title,
            "description": self.description,
            "service_id": self.service_id,
            "problem_classification_id": self.problem_classification_id,
            "severity": self.severity.value,
            "contact": self.contact.to_dict(),
        }


@dataclass(frozen=True)
class TicketResult:
    ticket_id: str
    status: str
    payload: dict[str, Any] = field(default_factory=dict)
    dry_run: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "ticket_id": self.ticket_id,
            "status": self.status,
            "dry_run": self.dry_run,
            "payload": self.payload,
        }
