"""
Catalog Listing Use Cases

Architectural Intent:
- Read-only views of the provider's service and classification listings
- Lets operators find ids and patterns before filing a ticket
"""

from azticket.domain.errors import FetchFailedError
from azticket.domain.ports.support_provider_port import SupportProviderPort
from azticket.domain.services.candidate_resolver import candidates_from_records, sort_for_menu
from azticket.domain.value_objects.candidate import Candidate, CandidateKind


class ListServices:
    def __init__(self, provider: SupportProviderPort) -> None:
        self.provider = provider

    async def execute(self) -> list[Candidate]:
        await self.provider.ensure_prerequisites(allow_login=False)
        records = await self.provider.list_services()
        if not records:
            raise FetchFailedError("No support services were returned")
        return sort_for_menu(candidates_from_records(records))


class ListClassifications:
    def __init__(self, provider: SupportProviderPort) -> None:
        self.provider = provider

    async def execute(self, service_name: str) -> list[Candidate]:
        await self.provider.ensure_prerequisites(allow_login=False)
        records = await self.provider.list_problem_classifications(service_name)
        if not records:
            raise FetchFailedError(
                f"No problem classifications were returned for service '{service_name}'"
            )
        return sort_for_menu(
            candidates_from_records(records, CandidateKind.PROBLEM_CLASSIFICATION, service_name)
        )
