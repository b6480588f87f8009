"""
Ticket DTOs

Architectural Intent:
- Data Transfer Objects for the ticket filing use case boundary
- TicketOptions carries everything the operator supplied up front (CLI flags
  or the guided wrapper); None means "not supplied"
- SessionDefaults is the explicit set of fallback contact values, loaded from
  configuration and passed into the use cases
"""

from dataclasses import dataclass
from typing import Optional

from azticket.domain.value_objects.contact_info import ContactMethod


@dataclass(frozen=True)
class SessionDefaults:
    time_zone: str = "Pacific Standard Time"
    country: str = "USA"
    language: str = "en-US"
    contact_method: str = "email"
    phone_number: str = ""
    first_name: str = ""
    last_name: str = ""
    email: str = ""

    def __post_init__(self) -> None:
        ContactMethod.parse(self.contact_method)


@dataclass(frozen=True)
class TicketOptions:
    subscription_id: Optional[str] = None
    severity: Optional[str] = None
    service_id: Optional[str] = None
    service_pattern: Optional[str] = None
    classification_id: Optional[str] = None
    classification_pattern: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    contact_first_name: Optional[str] = None
    contact_last_name: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    contact_country: Optional[str] = None
    contact_timezone: Optional[str] = None
    contact_language: Optional[str] = None
    contact_method: Optional[str] = None
    non_interactive: bool = False
    auto_pick_first: bool = False
    dry_run: bool = False
    prompt_for_fields: bool = True

    def __post_init__(self) -> None:
        if self.contact_method:
            ContactMethod.parse(self.contact_method)

    @property
    def interactive(self) -> bool:
        return not self.non_interactive
