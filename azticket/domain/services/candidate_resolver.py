"""
Candidate Resolver Service

Architectural Intent:
- Domain service that turns an operator's selection into exactly one
  Candidate from a provider listing
- Used twice per session: once for the support service, once for the
  problem classification of that service

Resolution Precedence:
1. Explicit identifier, used verbatim (not validated against the listing)
2. Case-insensitive substring pattern on the display name (and the short name
   when requested)
3. Numbered menu sorted by display name, re-prompting until a valid index

Ambiguity:
- Several pattern matches fail with AmbiguousMatchError listing every match,
  unless auto_pick_first is set, in which case the first match in listing
  order wins
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from azticket.domain.errors import (
    AmbiguousMatchError,
    CandidateNotFoundError,
    FetchFailedError,
    MissingSelectorError,
)
from azticket.domain.ports.prompt_port import PromptPort
from azticket.domain.value_objects.candidate import Candidate, CandidateKind

logger = logging.getLogger(__name__)


def match_candidates(
    candidates: Sequence[Candidate], pattern: str, match_short_name: bool = False
) -> list[Candidate]:
    """Return candidates containing pattern, preserving listing order."""
    needle = pattern.strip().lower()
    matches = []
    for candidate in candidates:
        if needle in candidate.display_name.lower():
            matches.append(candidate)
        elif match_short_name and needle in candidate.short_name.lower():
            matches.append(candidate)
    return matches


def sort_for_menu(candidates: Sequence[Candidate]) -> list[Candidate]:
    return sorted(candidates, key=lambda c: c.display_name.lower())


def candidates_from_records(
    records: Sequence[dict[str, Any]],
    kind: CandidateKind = CandidateKind.SERVICE,
    service_short_name: Optional[str] = None,
) -> list[Candidate]:
    """Convert a provider listing, rejecting records without an id or name."""
    candidates = []
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise FetchFailedError(
                f"Malformed {kind.value} listing entry #{index + 1}: {record!r}"
            )
        try:
            candidates.append(Candidate.from_record(record, kind, service_short_name))
        except ValueError as e:
            raise FetchFailedError(
                f"Malformed {kind.value} listing entry #{index + 1} ({e}): {record!r}"
            ) from e
    return candidates


class CandidateResolver:
    def __init__(self, prompt: PromptPort) -> None:
        self.prompt = prompt

    async def resolve(
        self,
        candidates: Sequence[Candidate],
        *,
        explicit_id: Optional[str] = None,
        pattern: Optional[str] = None,
        interactive: bool = True,
        auto_pick_first: bool = False,
        match_short_name: bool = False,
        label: str = "candidate",
    ) -> Candidate:
        if not candidates:
            raise CandidateNotFoundError(f"No {label}s available to choose from")

        if explicit_id:
            return self._from_explicit_id(candidates, explicit_id)

        if pattern:
            return self._from_pattern(
                candidates, pattern, auto_pick_first, match_short_name, label
            )

        if not interactive:
            raise MissingSelectorError(
                f"Non-interactive mode requires a {label} id or pattern"
            )

        return await self._from_menu(candidates, label)

    def _from_explicit_id(
        self, candidates: Sequence[Candidate], explicit_id: str
    ) -> Candidate:
        for candidate in candidates:
            if candidate.id == explicit_id:
                return candidate
        # Not listed: the id is still used as given.
        template = candidates[0]
        logger.info("Using explicit id %s without a listing match", explicit_id)
        return Candidate(
            id=explicit_id,
            display_name=explicit_id,
            kind=template.kind,
            service_short_name=template.service_short_name,
        )

    def _from_pattern(
        self,
        candidates: Sequence[Candidate],
        pattern: str,
        auto_pick_first: bool,
        match_short_name: bool,
        label: str,
    ) -> Candidate:
        matches = match_candidates(candidates, pattern, match_short_name)
        if not matches:
            raise CandidateNotFoundError(f"No {label} matches pattern '{pattern}'")
        if len(matches) > 1:
            if not auto_pick_first:
                raise AmbiguousMatchError(label, pattern, [m.display_name for m in matches])
            logger.warning(
                "Pattern '%s' matched %d %ss, picking the first: %s",
                pattern,
                len(matches),
                label,
                matches[0].display_name,
            )
        logger.info("Resolved %s '%s' -> %s", label, pattern, matches[0].id)
        return matches[0]

    async def _from_menu(self, candidates: Sequence[Candidate], label: str) -> Candidate:
        ordered = sort_for_menu(candidates)
        lines = [f"Available {label}s:"]
        lines.extend(
            f"  {index}) {candidate.display_name}"
            for index, candidate in enumerate(ordered, start=1)
        )
        await self.prompt.display("\n".join(lines))

        while True:
            answer = (await self.prompt.ask(f"Select a {label} [1-{len(ordered)}]: ")).strip()
            if answer.isdigit() and 1 <= int(answer) <= len(ordered):
                choice = ordered[int(answer) - 1]
                logger.info("Selected %s #%s -> %s", label, answer, choice.id)
                return choice
            await self.prompt.display(
                f"Invalid selection '{answer}'. Enter a number between 1 and {len(ordered)}."
            )
