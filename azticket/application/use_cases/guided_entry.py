"""
Guided Ticket Entry Use Case

Architectural Intent:
- Reduced-field front end for operators who do not want to pass flags
- Asks for subscription, text, severity and personal contact details; time
  zone, country, language and contact method come from SessionDefaults
- Service and classification are always picked from numbered menus by the
  FileSupportTicket session it delegates to
- Answers left blank are not asked again; the session reports the first
  still-empty required field with MissingFieldError
"""

import logging

from azticket.application.dtos.ticket_dtos import SessionDefaults, TicketOptions
from azticket.application.use_cases.file_support_ticket import FileSupportTicket
from azticket.domain.entities.ticket import TicketResult
from azticket.domain.ports.prompt_port import PromptPort

logger = logging.getLogger(__name__)

GUIDED_SEVERITY_PROMPT = "Severity [A=critical, B=moderate, C=minimal] (default C): "


class GuidedTicketEntry:
    def __init__(
        self,
        prompt: PromptPort,
        session: FileSupportTicket,
        defaults: SessionDefaults,
    ) -> None:
        self.prompt = prompt
        self.session = session
        self.defaults = defaults

    async def _ask(self, label: str, default: str = "") -> str:
        suffix = f" [{default}]" if default else ""
        answer = (await self.prompt.ask(f"{label}{suffix}: ")).strip()
        return answer or default

    async def execute(self, dry_run: bool = False) -> TicketResult:
        await self.prompt.display("Azure support ticket: guided entry")

        subscription_id = await self._ask("Subscription ID (blank for current account)")
        title = await self._ask("Title")
        description = await self._ask("Description")
        severity = (await self.prompt.ask(GUIDED_SEVERITY_PROMPT)).strip() or "C"
        first_name = await self._ask("Contact first name", self.defaults.first_name)
        last_name = await self._ask("Contact last name", self.defaults.last_name)
        email = await self._ask("Contact email", self.defaults.email)
        phone = await self._ask("Contact phone", self.defaults.phone_number)

        options = TicketOptions(
            subscription_id=subscription_id or None,
            severity=severity,
            title=title or None,
            description=description or None,
            contact_first_name=first_name,
            contact_last_name=last_name,
            contact_email=email,
            contact_phone=phone,
            contact_country=self.defaults.country,
            contact_timezone=self.defaults.time_zone,
            contact_language=self.defaults.language,
            contact_method=self.defaults.contact_method,
            non_interactive=False,
            dry_run=dry_run,
            prompt_for_fields=False,
        )
        logger.info("Guided entry collected fields; selecting service and classification")
        return await self.session.execute(options)
