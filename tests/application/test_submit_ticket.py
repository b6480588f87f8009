"""Tests for the TicketSubmitter use case."""

from datetime import datetime, UTC
from unittest.mock import AsyncMock, MagicMock

import pytest

from azticket.application.use_cases.submit_ticket import (
    PLAN_RESTRICTION_HINT,
    TicketSubmitter,
    is_plan_restriction,
    parse_ticket_response,
)
from azticket.domain.entities.ticket import TicketRequest
from azticket.domain.errors import MissingFieldError, RemoteError
from azticket.domain.value_objects.contact_info import ContactInfo, ContactMethod
from azticket.domain.value_objects.severity import Severity

FIXED_NOW = datetime(2026, 10, 19, 14, 30, 5, tzinfo=UTC)


def _request(**overrides):
    values = dict(
        title="VM will not start",
        description="Allocation failure",
        service_id="svc/vm",
        problem_classification_id="svc/vm/pc/start",
        severity=Severity.MODERATE,
        contact=ContactInfo(
            first_name="Ada",
            last_name="Lovelace",
            email="ada@example.com",
            phone_number="+1 555 0100",
            country="USA",
            time_zone="Pacific Standard Time",
            method=ContactMethod.PHONE,
        ),
    )
    values.update(overrides)
    return TicketRequest(**values)


def _make_submitter(response=None, side_effect=None):
    provider = MagicMock()
    provider.create_ticket = AsyncMock(return_value=response, side_effect=side_effect)
    return TicketSubmitter(provider, clock=lambda: FIXED_NOW), provider


class TestTicketName:
    def test_second_precision_timestamp(self):
        submitter, _ = _make_submitter()
        assert submitter.generate_ticket_name() == "ticket-20261019143005"

    def test_default_clock(self):
        submitter = TicketSubmitter(MagicMock())
        assert submitter.generate_ticket_name().startswith("ticket-")
        assert len(submitter.generate_ticket_name()) == len("ticket-YYYYmmddHHMMSS")


class TestBuildArguments:
    def test_all_fields_present(self):
        submitter, _ = _make_submitter()
        arguments = submitter.build_arguments(_request().with_ticket_name("ticket-1"))
        assert arguments == {
            "ticket-name": "ticket-1",
            "title": "VM will not start",
            "description": "Allocation failure",
            "problem-classification": "svc/vm/pc/start",
            "severity": "moderate",
            "contact-first-name": "Ada",
            "contact-last-name": "Lovelace",
            "contact-method": "phone",
            "contact-email": "ada@example.com",
            "contact-phone-number": "+1 555 0100",
            "contact-timezone": "Pacific Standard Time",
            "contact-country": "USA",
            "contact-language": "en-US",
            "advanced-diagnostic-consent": "Yes",
        }

    def test_subscription_included_when_set(self):
        submitter, _ = _make_submitter()
        arguments = submitter.build_arguments(_request(subscription_id="sub-123"))
        assert arguments["subscription"] == "sub-123"


class TestSubmit:
    @pytest.mark.asyncio
    async def test_dry_run_makes_no_remote_call(self):
        submitter, provider = _make_submitter()
        request = _request()

        result = await submitter.submit(request, dry_run=True)

        provider.create_ticket.assert_not_awaited()
        assert result.dry_run is True
        assert result.status == "DryRun"
        assert result.ticket_id == "ticket-20261019143005"
        assert result.payload == request.with_ticket_name("ticket-20261019143005").to_dict()

    @pytest.mark.asyncio
    async def test_submit_calls_provider_once(self):
        submitter, provider = _make_submitter(
            response={"name": "ticket-20261019143005", "supportTicketId": "99", "status": "Open"}
        )

        result = await submitter.submit(_request())

        provider.create_ticket.assert_awaited_once()
        sent = provider.create_ticket.await_args.args[0]
        assert sent["ticket-name"] == "ticket-20261019143005"
        assert result.ticket_id == "99"
        assert result.status == "Open"
        assert result.dry_run is False

    @pytest.mark.asyncio
    async def test_incomplete_request_rejected_before_call(self):
        submitter, provider = _make_submitter()
        with pytest.raises(MissingFieldError):
            await submitter.submit(_request(title=""))
        provider.create_ticket.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_remote_error_propagates(self):
        submitter, _ = _make_submitter(side_effect=RemoteError(2, "ERROR: quota"))
        with pytest.raises(RemoteError) as exc_info:
            await submitter.submit(_request())
        assert exc_info.value.exit_code == 2
        assert exc_info.value.hint is None

    @pytest.mark.asyncio
    async def test_plan_restriction_adds_hint(self, plan_restriction_error, caplog):
        submitter, _ = _make_submitter(side_effect=plan_restriction_error)
        with pytest.raises(RemoteError) as exc_info:
            await submitter.submit(_request(severity=Severity.HIGHEST_CRITICAL))
        assert exc_info.value.hint == PLAN_RESTRICTION_HINT
        assert "Retry with --severity A" in caplog.text


class TestResponseParsing:
    def test_flat_response(self):
        result = parse_ticket_response({"supportTicketId": "1", "status": "Open"}, "fallback")
        assert (result.ticket_id, result.status) == ("1", "Open")

    def test_nested_properties(self):
        result = parse_ticket_response(
            {"name": "t", "properties": {"supportTicketId": "2", "status": "Updating"}},
            "fallback",
        )
        assert (result.ticket_id, result.status) == ("2", "Updating")

    def test_fallback(self):
        result = parse_ticket_response({}, "ticket-x")
        assert (result.ticket_id, result.status) == ("ticket-x", "Unknown")


class TestPlanRestriction:
    def test_detects_restriction(self):
        assert is_plan_restriction(
            "Severity HighestCriticalImpact is not eligible under your support plan"
        )

    def test_ignores_other_errors(self):
        assert not is_plan_restriction("Invalid contact email")
        assert not is_plan_restriction("HighestCriticalImpact ticket queued")
