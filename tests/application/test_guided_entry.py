"""Tests for the GuidedTicketEntry wrapper."""

import pytest

from azticket.application.dtos.ticket_dtos import SessionDefaults
from azticket.application.use_cases.guided_entry import GuidedTicketEntry
from azticket.domain.errors import FetchFailedError, MissingFieldError


def _answers(severity=""):
    return [
        "",                   # subscription -> current account
        "Disk latency",       # title
        "p99 over 200ms",     # description
        severity,             # severity
        "Ada",                # first name
        "Lovelace",           # last name
        "ada@example.com",    # email
        "+1 555 0100",        # phone
        "1",                  # service menu: Kubernetes Service
    ]


def _guided(make_session, answers, defaults=None, provider=None):
    defaults = defaults or SessionDefaults()
    session, provider, prompt = make_session(provider=provider, answers=answers, defaults=defaults)
    return GuidedTicketEntry(prompt, session, defaults), session, provider, prompt


class TestGuidedTicketEntry:
    @pytest.mark.asyncio
    async def test_collects_fields_and_uses_menus(self, make_session, provider_factory):
        provider = provider_factory(
            classifications={
                "aks": [{"id": "svc/aks/pc/nodes", "name": "nodes", "displayName": "Node pools"}]
            }
        )
        answers = _answers("B") + ["1"]
        entry, _, provider, prompt = _guided(make_session, answers, provider=provider)

        result = await entry.execute()

        assert prompt.remaining == 0
        assert result.status == "Open"
        sent = provider.created[0]
        assert sent["problem-classification"] == "svc/aks/pc/nodes"
        assert sent["severity"] == "moderate"
        assert sent["title"] == "Disk latency"
        assert "subscription" not in sent
        assert provider.prerequisite_calls == [True]

    @pytest.mark.asyncio
    async def test_fixed_defaults_applied(self, make_session, provider_factory):
        provider = provider_factory(
            classifications={
                "aks": [{"id": "svc/aks/pc/nodes", "name": "nodes", "displayName": "Node pools"}]
            }
        )
        defaults = SessionDefaults(time_zone="IST", country="IN", language="en-IN", contact_method="phone")
        entry, _, provider, _ = _guided(
            make_session, _answers() + ["1"], defaults=defaults, provider=provider
        )

        await entry.execute()

        sent = provider.created[0]
        assert sent["severity"] == "minimal"
        assert sent["contact-timezone"] == "India Standard Time"
        assert sent["contact-country"] == "IND"
        assert sent["contact-language"] == "en-IN"
        assert sent["contact-method"] == "phone"

    @pytest.mark.asyncio
    async def test_subscription_forwarded(self, make_session, provider_factory):
        provider = provider_factory(
            classifications={
                "aks": [{"id": "svc/aks/pc/nodes", "name": "nodes", "displayName": "Node pools"}]
            }
        )
        answers = ["sub-42"] + _answers()[1:] + ["1"]
        entry, _, provider, _ = _guided(make_session, answers, provider=provider)

        await entry.execute()

        assert provider.created[0]["subscription"] == "sub-42"

    @pytest.mark.asyncio
    async def test_dry_run(self, make_session, provider_factory):
        provider = provider_factory(
            classifications={
                "aks": [{"id": "svc/aks/pc/nodes", "name": "nodes", "displayName": "Node pools"}]
            }
        )
        entry, _, provider, _ = _guided(make_session, _answers() + ["1"], provider=provider)

        result = await entry.execute(dry_run=True)

        assert result.dry_run is True
        assert provider.created == []

    @pytest.mark.asyncio
    async def test_session_failure_propagates(self, make_session, provider_factory):
        entry, _, _, _ = _guided(
            make_session, _answers(), provider=provider_factory(classifications={})
        )
        with pytest.raises(FetchFailedError):
            await entry.execute()

    @pytest.mark.asyncio
    async def test_blank_answers_not_asked_twice(self, make_session, provider_factory):
        provider = provider_factory(
            classifications={
                "aks": [{"id": "svc/aks/pc/nodes", "name": "nodes", "displayName": "Node pools"}]
            }
        )
        answers = _answers()
        answers[2] = ""  # description left blank
        entry, session, provider, prompt = _guided(
            make_session, answers + ["1"], provider=provider
        )

        with pytest.raises(MissingFieldError, match="description"):
            await entry.execute()

        assert prompt.remaining == 0
        assert [q for q in prompt.asked if q.startswith("Description")] == ["Description: "]
        assert provider.created == []

    @pytest.mark.asyncio
    async def test_blank_title_uses_selection_default(self, make_session, provider_factory):
        provider = provider_factory(
            classifications={
                "aks": [{"id": "svc/aks/pc/nodes", "name": "nodes", "displayName": "Node pools"}]
            }
        )
        answers = _answers()
        answers[1] = ""
        entry, _, provider, prompt = _guided(make_session, answers + ["1"], provider=provider)

        await entry.execute()

        assert prompt.remaining == 0
        assert provider.created[0]["title"] == "Kubernetes Service - Node pools"
