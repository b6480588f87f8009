"""
File Support Ticket Use Case

Architectural Intent:
- Drives one ticket filing session end to end
- Resolves a support service, then one of its problem classifications, then
  collects and normalizes severity, contact and text fields, and hands the
  assembled TicketRequest to the TicketSubmitter

Session States:
INIT -> SERVICES_FETCHED -> SERVICE_RESOLVED -> CLASSIFICATIONS_FETCHED
     -> CLASSIFICATION_RESOLVED -> FIELDS_COLLECTED -> SUBMITTED
     -> SUCCEEDED | FAILED

Every failure is fatal: the state moves to FAILED and the error propagates.
"""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Optional

from azticket.application.dtos.ticket_dtos import SessionDefaults, TicketOptions
from azticket.application.use_cases.submit_ticket import TicketSubmitter
from azticket.domain.entities.ticket import TicketRequest, TicketResult
from azticket.domain.errors import FetchFailedError
from azticket.domain.ports.prompt_port import PromptPort
from azticket.domain.ports.support_provider_port import SupportProviderPort
from azticket.domain.services.candidate_resolver import (
    CandidateResolver,
    candidates_from_records,
)
from azticket.domain.services.normalizer import normalize_severity
from azticket.domain.value_objects.candidate import Candidate, CandidateKind
from azticket.domain.value_objects.contact_info import ContactInfo, ContactMethod
from azticket.domain.value_objects.severity import Severity

logger = logging.getLogger(__name__)

SEVERITY_PROMPT = (
    "Severity [A=critical, B=moderate, C=minimal, 1=highest critical impact] "
    "(default C): "
)


class SessionState(Enum):
    INIT = auto()
    SERVICES_FETCHED = auto()
    SERVICE_RESOLVED = auto()
    CLASSIFICATIONS_FETCHED = auto()
    CLASSIFICATION_RESOLVED = auto()
    FIELDS_COLLECTED = auto()
    SUBMITTED = auto()
    SUCCEEDED = auto()
    FAILED = auto()


class FileSupportTicket:
    def __init__(
        self,
        provider: SupportProviderPort,
        prompt: PromptPort,
        resolver: CandidateResolver,
        submitter: TicketSubmitter,
        defaults: Optional[SessionDefaults] = None,
    ) -> None:
        self.provider = provider
        self.prompt = prompt
        self.resolver = resolver
        self.submitter = submitter
        self.defaults = defaults or SessionDefaults()
        self.state = SessionState.INIT
        self.service: Optional[Candidate] = None
        self.classification: Optional[Candidate] = None
        self.request: Optional[TicketRequest] = None

    def _advance(self, state: SessionState) -> None:
        logger.info("Session state %s -> %s", self.state.name, state.name)
        self.state = state

    async def execute(self, options: TicketOptions) -> TicketResult:
        self.state = SessionState.INIT
        self.service = self.classification = self.request = None
        interactive = options.interactive

        try:
            await self.provider.ensure_prerequisites(allow_login=interactive)

            services = await self._fetch_services()
            self._advance(SessionState.SERVICES_FETCHED)

            self.service = await self.resolver.resolve(
                services,
                explicit_id=options.service_id,
                pattern=options.service_pattern,
                interactive=interactive,
                auto_pick_first=options.auto_pick_first,
                match_short_name=True,
                label="service",
            )
            self._advance(SessionState.SERVICE_RESOLVED)

            classifications = await self._fetch_classifications(self.service)
            self._advance(SessionState.CLASSIFICATIONS_FETCHED)

            self.classification = await self.resolver.resolve(
                classifications,
                explicit_id=options.classification_id,
                pattern=options.classification_pattern,
                interactive=interactive,
                auto_pick_first=options.auto_pick_first,
                label="problem classification",
            )
            self._advance(SessionState.CLASSIFICATION_RESOLVED)

            self.request = await self._collect_fields(options)
            self._advance(SessionState.FIELDS_COLLECTED)

            self._advance(SessionState.SUBMITTED)
            result = await self.submitter.submit(self.request, dry_run=options.dry_run)
        except Exception:
            self._advance(SessionState.FAILED)
            raise

        self._advance(SessionState.SUCCEEDED)
        return result

    async def _fetch_services(self) -> list[Candidate]:
        records = await self.provider.list_services()
        if not records:
            raise FetchFailedError("No support services were returned")
        return candidates_from_records(records, CandidateKind.SERVICE)

    async def _fetch_classifications(self, service: Candidate) -> list[Candidate]:
        records = await self.provider.list_problem_classifications(service.short_name)
        if not records:
            raise FetchFailedError(
                f"No problem classifications were returned for service '{service.short_name}'"
            )
        return candidates_from_records(
            records,
            CandidateKind.PROBLEM_CLASSIFICATION,
            service_short_name=service.short_name,
        )

    async def _resolve_severity(self, raw: Optional[str], interactive: bool) -> Severity:
        if raw:
            return normalize_severity(raw)
        if not interactive:
            return Severity.MINIMAL
        answer = (await self.prompt.ask(SEVERITY_PROMPT)).strip()
        if not answer:
            return Severity.MINIMAL
        return normalize_severity(answer)

    async def _field(
        self, supplied: Optional[str], default: str, label: str, interactive: bool
    ) -> str:
        """Supplied value, else an operator answer, else the default."""
        value = (supplied or "").strip()
        if value:
            return value
        if interactive:
            suffix = f" [{default}]" if default else ""
            value = (await self.prompt.ask(f"{label}{suffix}: ")).strip()
        return value or default

    async def _collect_fields(self, options: TicketOptions) -> TicketRequest:
        # Menus stay interactive; field prompts can be turned off by callers
        # that already asked for them.
        interactive = options.interactive and options.prompt_for_fields
        defaults = self.defaults

        severity = await self._resolve_severity(options.severity, interactive)

        default_title = f"{self.service.display_name} - {self.classification.display_name}"
        title = await self._field(options.title, default_title, "Title", interactive)
        description = await self._field(options.description, "", "Description", interactive)

        contact = ContactInfo(
            first_name=await self._field(
                options.contact_first_name, defaults.first_name, "Contact first name", interactive
            ),
            last_name=await self._field(
                options.contact_last_name, defaults.last_name, "Contact last name", interactive
            ),
            email=await self._field(
                options.contact_email, defaults.email, "Contact email", interactive
            ),
            phone_number=await self._field(
                options.contact_phone, defaults.phone_number, "Contact phone", interactive
            ),
            country=await self._field(
                options.contact_country, defaults.country, "Contact country", interactive
            ),
            time_zone=await self._field(
                options.contact_timezone, defaults.time_zone, "Contact time zone", interactive
            ),
            language=options.contact_language or defaults.language,
            method=ContactMethod.parse(options.contact_method or defaults.contact_method),
        ).normalized()

        request = TicketRequest(
            title=title,
            description=description,
            service_id=self.service.id,
            problem_classification_id=self.classification.id,
            severity=severity,
            contact=contact,
            subscription_id=options.subscription_id or None,
        )
        request.validate()
        return request
