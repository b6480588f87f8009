"""
Domain Ports Package

Architectural Intent:
- Contains port interfaces (abstract contracts) for external dependencies
- Ports define what the domain needs, adapters implement how
- Follows Hexagonal Architecture principles
"""

from azticket.domain.ports.prompt_port import PromptPort
from azticket.domain.ports.support_provider_port import SupportProviderPort

__all__ = [
    "PromptPort",
    "SupportProviderPort",
]
