"""
Contact Info Value Object

Architectural Intent:
- Immutable contact details attached to a support ticket
- Country and time zone are stored in the canonical form the provider expects;
  normalized() produces that form and is idempotent
"""

from dataclasses import dataclass, replace
from enum import Enum

from azticket.domain.services.normalizer import normalize_country, normalize_time_zone


class ContactMethod(Enum):
    EMAIL = "email"
    PHONE = "phone"

    def __str__(self) -> str:
        return self.value

    @staticmethod
    def parse(raw: str) -> "ContactMethod":
        value = (raw or "").strip().lower()
        for method in ContactMethod:
            if method.value == value:
                return method
        raise ValueError(f"Contact method must be 'email' or 'phone', got {raw!r}")


# (field name on ContactInfo, name reported when missing)
REQUIRED_CONTACT_FIELDS = (
    ("first_name", "contact_first_name"),
    ("last_name", "contact_last_name"),
    ("email", "contact_email"),
    ("phone_number", "contact_phone"),
    ("country", "contact_country"),
    ("time_zone", "contact_timezone"),
)


@dataclass(frozen=True)
class ContactInfo:
    first_name: str
    last_name: str
    email: str
    phone_number: str
    country: str
    time_zone: str
    language: str = "en-US"
    method: ContactMethod = ContactMethod.EMAIL

    def normalized(self) -> "ContactInfo":
        return replace(
            self,
            country=normalize_country(self.country),
            time_zone=normalize_time_zone(self.time_zone),
        )

    def missing_fields(self) -> list[str]:
        """Names of empty required fields, in a stable order."""
        return [
            reported
            for attr, reported in REQUIRED_CONTACT_FIELDS
            if not (getattr(self, attr) or "").strip()
        ]

    def to_dict(self) -> dict[str, str]:
        return {
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email,
            "phone_number": self.phone_number,
            "country": self.country,
            "time_zone": self.time_zone,
            "language": self.language,
            "method": self.method.value,
        }
