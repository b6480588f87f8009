"""
Submit Ticket Use Case

Architectural Intent:
- Turns a validated TicketRequest into one provider create call
- Names the ticket from the current UTC time at second precision
- Dry-run returns the named request as a preview and never calls the provider

Failure Handling:
- RemoteError from the provider propagates unchanged
- When the provider output says the highest-critical tier is not available on
  the subscription's support plan, a retry hint is logged and attached to the
  error
"""

import logging
from datetime import datetime, UTC
from typing import Any, Callable, Optional

from azticket.domain.entities.ticket import TicketRequest, TicketResult
from azticket.domain.errors import RemoteError
from azticket.domain.ports.support_provider_port import SupportProviderPort
from azticket.domain.value_objects.severity import Severity

logger = logging.getLogger(__name__)

TICKET_NAME_FORMAT = "ticket-%Y%m%d%H%M%S"

_PLAN_RESTRICTION_MARKERS = (
    "not allowed",
    "not eligible",
    "not available",
    "not supported",
    "support plan",
)

PLAN_RESTRICTION_HINT = (
    f"Severity '{Severity.HIGHEST_CRITICAL}' is not available on this "
    "subscription's support plan. Retry with --severity A (critical) or lower."
)


def is_plan_restriction(raw_output: str) -> bool:
    text = raw_output.lower()
    if Severity.HIGHEST_CRITICAL.value not in text:
        return False
    return any(marker in text for marker in _PLAN_RESTRICTION_MARKERS)


def parse_ticket_response(response: dict[str, Any], fallback_id: str) -> TicketResult:
    """Read ticket id and status from a flat or ARM-style nested response."""
    properties = response.get("properties")
    if not isinstance(properties, dict):
        properties = {}
    ticket_id = (
        response.get("supportTicketId")
        or properties.get("supportTicketId")
        or response.get("name")
        or fallback_id
    )
    status = response.get("status") or properties.get("status") or "Unknown"
    return TicketResult(ticket_id=str(ticket_id), status=str(status), payload=response)


class TicketSubmitter:
    def __init__(
        self,
        provider: SupportProviderPort,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.provider = provider
        self._clock = clock or (lambda: datetime.now(UTC))

    def generate_ticket_name(self) -> str:
        return self._clock().strftime(TICKET_NAME_FORMAT)

    def build_arguments(self, request: TicketRequest) -> dict[str, str]:
        contact = request.contact
        arguments = {
            "ticket-name": request.generated_ticket_name or self.generate_ticket_name(),
            "title": request.title,
            "description": request.description,
            "problem-classification": request.problem_classification_id,
            "severity": request.severity.value,
            "contact-first-name": contact.first_name,
            "contact-last-name": contact.last_name,
            "contact-method": contact.method.value,
            "contact-email": contact.email,
            "contact-phone-number": contact.phone_number,
            "contact-timezone": contact.time_zone,
            "contact-country": contact.country,
            "contact-language": contact.language,
            "advanced-diagnostic-consent": "Yes",
        }
        if request.subscription_id:
            arguments["subscription"] = request.subscription_id
        return arguments

    async def submit(self, request: TicketRequest, dry_run: bool = False) -> TicketResult:
        request.validate()
        named = request.with_ticket_name(self.generate_ticket_name())
        arguments = self.build_arguments(named)

        if dry_run:
            logger.info("Dry run: skipping ticket creation for %s", named.generated_ticket_name)
            return TicketResult(
                ticket_id=named.generated_ticket_name,
                status="DryRun",
                payload=named.to_dict(),
                dry_run=True,
            )

        logger.info(
            "Creating ticket %s [severity=%s, classification=%s]",
            named.generated_ticket_name,
            named.severity,
            named.problem_classification_id,
        )
        try:
            response = await self.provider.create_ticket(arguments)
        except RemoteError as e:
            if is_plan_restriction(e.raw_output):
                e.hint = PLAN_RESTRICTION_HINT
                logger.warning(PLAN_RESTRICTION_HINT)
            raise

        result = parse_ticket_response(response, fallback_id=named.generated_ticket_name)
        logger.info("Ticket %s created with status %s", result.ticket_id, result.status)
        return result
