"""
Prompt Port

Architectural Intent:
- Port for the operator's terminal: ask for a line of text, show a message
- Every ask() is a suspension point, so interactive loops can be driven by a
  scripted sequence of answers in tests

Design Decisions:
- Uses Protocol for structural typing (no inheritance needed)
- ask() raises EOFError when no more input is available
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class PromptPort(Protocol):
    """Port for interactive operator input."""

    async def ask(self, message: str) -> str:
        """Show the message and return one line of input (without newline)."""
        ...

    async def display(self, message: str) -> None:
        """Show an informational message."""
        ...
