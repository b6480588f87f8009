"""Global test configuration.

Provides a fake support provider and scripted prompt fixtures so use cases can
run without the Azure CLI or a terminal.
"""

import pytest

from azticket.application.dtos.ticket_dtos import SessionDefaults
from azticket.application.use_cases.file_support_ticket import FileSupportTicket
from azticket.application.use_cases.submit_ticket import TicketSubmitter
from azticket.domain.errors import RemoteError
from azticket.domain.services.candidate_resolver import CandidateResolver
from azticket.infrastructure.adapters.scripted_prompt_adapter import ScriptedPromptAdapter

SERVICES = [
    {
        "id": "/providers/Microsoft.Support/services/virtual-machines",
        "name": "virtual-machines",
        "displayName": "Virtual Machines",
    },
    {
        "id": "/providers/Microsoft.Support/services/storage",
        "name": "storage",
        "displayName": "Storage Account",
    },
    {
        "id": "/providers/Microsoft.Support/services/aks",
        "name": "aks",
        "displayName": "Kubernetes Service",
    },
]

CLASSIFICATIONS = {
    "virtual-machines": [
        {
            "id": "/providers/Microsoft.Support/services/virtual-machines/problemClassifications/start",
            "name": "start",
            "displayName": "Cannot start VM",
        },
        {
            "id": "/providers/Microsoft.Support/services/virtual-machines/problemClassifications/rdp",
            "name": "rdp",
            "displayName": "Cannot connect with RDP",
        },
    ],
    "storage": [
        {
            "id": "/providers/Microsoft.Support/services/storage/problemClassifications/perf",
            "name": "perf",
            "displayName": "Performance",
        },
    ],
}


class FakeSupportProvider:
    """In-memory SupportProviderPort that records every call."""

    def __init__(self, services=None, classifications=None, create_error=None):
        self.services = SERVICES if services is None else services
        self.classifications = CLASSIFICATIONS if classifications is None else classifications
        self.create_error = create_error
        self.prerequisite_calls: list[bool] = []
        self.classification_requests: list[str] = []
        self.created: list[dict[str, str]] = []

    async def ensure_prerequisites(self, allow_login: bool = True) -> None:
        self.prerequisite_calls.append(allow_login)

    async def list_services(self):
        return list(self.services)

    async def list_problem_classifications(self, service_name: str):
        self.classification_requests.append(service_name)
        return list(self.classifications.get(service_name, []))

    async def create_ticket(self, arguments):
        self.created.append(dict(arguments))
        if self.create_error is not None:
            raise self.create_error
        return {
            "name": arguments["ticket-name"],
            "supportTicketId": "2410190010000001",
            "status": "Open",
        }

    def format_create_command(self, arguments):
        return "az support tickets create " + " ".join(
            f"--{k} {v}" for k, v in arguments.items()
        )


@pytest.fixture
def provider():
    return FakeSupportProvider()


@pytest.fixture
def make_session():
    """Build a FileSupportTicket around a provider and scripted answers."""

    def _make(provider=None, answers=(), defaults=None):
        provider = provider or FakeSupportProvider()
        prompt = ScriptedPromptAdapter(answers)
        submitter = TicketSubmitter(provider)
        session = FileSupportTicket(
            provider,
            prompt,
            CandidateResolver(prompt),
            submitter,
            defaults or SessionDefaults(),
        )
        return session, provider, prompt

    return _make


@pytest.fixture
def plan_restriction_error():
    return RemoteError(
        1,
        "ERROR: (BadRequest) Severity 'HighestCriticalImpact' is not allowed for "
        "the support plan of this subscription.",
    )


@pytest.fixture
def provider_factory():
    return FakeSupportProvider
