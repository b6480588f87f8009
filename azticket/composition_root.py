"""
Composition Root

Architectural Intent:
- Dependency injection composition root for azticket
- Single place where the adapters and use cases are wired together
- No adapter instantiation should occur outside this module

Design Decisions:
- Uses a simple dataclass container instead of a DI framework
- The prompt adapter is injectable so a scripted adapter can replace the
  console in tests
"""

from dataclasses import dataclass
from typing import Optional

from azticket.application.use_cases.file_support_ticket import FileSupportTicket
from azticket.application.use_cases.guided_entry import GuidedTicketEntry
from azticket.application.use_cases.list_catalog import ListClassifications, ListServices
from azticket.application.use_cases.submit_ticket import TicketSubmitter
from azticket.domain.ports.prompt_port import PromptPort
from azticket.domain.services.candidate_resolver import CandidateResolver
from azticket.infrastructure.adapters.azure_cli_adapter import AzureSupportCliAdapter
from azticket.infrastructure.adapters.console_prompt_adapter import ConsolePromptAdapter
from azticket.infrastructure.config import AzTicketConfig
from azticket.infrastructure.repositories.result_file_repository import JsonResultFileRepository
from azticket.infrastructure.telemetry.otel_exporter import OTELExporter


@dataclass
class TicketContainer:
    """DI container holding all wired dependencies."""

    config: AzTicketConfig
    provider: AzureSupportCliAdapter
    prompt: PromptPort
    resolver: CandidateResolver
    submitter: TicketSubmitter
    file_ticket: FileSupportTicket
    guided_entry: GuidedTicketEntry
    list_services: ListServices
    list_classifications: ListClassifications
    result_repository: JsonResultFileRepository
    telemetry: OTELExporter


def create_container(
    config: Optional[AzTicketConfig] = None,
    prompt: Optional[PromptPort] = None,
) -> TicketContainer:
    """Create and wire all dependencies."""
    config = config or AzTicketConfig()
    prompt = prompt or ConsolePromptAdapter()

    provider = AzureSupportCliAdapter(
        executable=config.azure.executable,
        extension=config.azure.extension,
        auto_install_extension=config.azure.auto_install_extension,
    )
    resolver = CandidateResolver(prompt)
    submitter = TicketSubmitter(provider)
    file_ticket = FileSupportTicket(provider, prompt, resolver, submitter, config.defaults)
    guided_entry = GuidedTicketEntry(prompt, file_ticket, config.defaults)

    return TicketContainer(
        config=config,
        provider=provider,
        prompt=prompt,
        resolver=resolver,
        submitter=submitter,
        file_ticket=file_ticket,
        guided_entry=guided_entry,
        list_services=ListServices(provider),
        list_classifications=ListClassifications(provider),
        result_repository=JsonResultFileRepository(),
        telemetry=OTELExporter(config.telemetry),
    )
