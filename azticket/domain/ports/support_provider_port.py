"""
Support Provider Port

Architectural Intent:
- Port interface for the cloud provider's support API
- Abstracts login checks, service and classification listings, and ticket
  creation
- Implemented by the Azure CLI adapter

Design Decisions:
- Uses Protocol for structural typing (no inheritance needed)
- Listings return raw records ({"id", "name", "displayName"}) in provider order
- create_ticket takes a flat argument map so the request assembly stays in the
  application layer
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SupportProviderPort(Protocol):
    """Port for support ticket operations."""

    async def ensure_prerequisites(self, allow_login: bool = True) -> None:
        """Raise PrerequisiteMissingError unless the provider is usable."""
        ...

    async def list_services(self) -> list[dict[str, Any]]:
        """List support services in provider order."""
        ...

    async def list_problem_classifications(self, service_name: str) -> list[dict[str, Any]]:
        """List problem classifications of one service in provider order."""
        ...

    async def create_ticket(self, arguments: dict[str, str]) -> dict[str, Any]:
        """Create a ticket. Raises RemoteError on failure."""
        ...

    def format_create_command(self, arguments: dict[str, str]) -> str:
        """Render the create call for display without running it."""
        ...
