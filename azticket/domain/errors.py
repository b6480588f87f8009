"""
Workflow Errors

Architectural Intent:
- One exception type per failure class of a ticket filing session
- Every error is fatal to the current run; the CLI turns any
  TicketWorkflowError into a single message and a non-zero exit status
"""

from typing import Optional, Sequence


class TicketWorkflowError(Exception):
    pass


class PrerequisiteMissingError(TicketWorkflowError):
    """The provider CLI, its extension, or a login session is missing."""


class FetchFailedError(TicketWorkflowError):
    """A listing call failed or returned nothing."""


class CandidateNotFoundError(TicketWorkflowError):
    pass


class AmbiguousMatchError(TicketWorkflowError):
    def __init__(self, label: str, pattern: str, matches: Sequence[str]) -> None:
        self.label = label
        self.pattern = pattern
        self.matches = list(matches)
        listed = "\n".join(f"  - {name}" for name in self.matches)
        super().__init__(
            f"Pattern '{pattern}' matched {len(self.matches)} {label}s; "
            f"refine the pattern or pass --auto-pick-first:\n{listed}"
        )


class MissingSelectorError(TicketWorkflowError):
    pass


class MissingFieldError(TicketWorkflowError):
    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"Required field '{field_name}' is empty")


class RemoteError(TicketWorkflowError):
    def __init__(self, exit_code: int, raw_output: str, hint: Optional[str] = None) -> None:
        self.exit_code = exit_code
        self.raw_output = raw_output
        self.hint = hint
        super().__init__(f"Ticket creation failed (exit code {exit_code}): {raw_output.strip()}")
