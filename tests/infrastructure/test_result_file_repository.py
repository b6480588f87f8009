"""Tests for JsonResultFileRepository."""

import json

from azticket.domain.entities.ticket import TicketResult
from azticket.infrastructure.repositories.result_file_repository import JsonResultFileRepository


class TestJsonResultFileRepository:
    def test_save_creates_parents(self, tmp_path):
        repo = JsonResultFileRepository()
        result = TicketResult(ticket_id="123", status="Open", payload={"name": "ticket-1"})

        path = repo.save(result, str(tmp_path / "nested" / "dir" / "ticket.json"))

        assert path.exists()
        assert json.loads(path.read_text()) == result.to_dict()

    def test_load_roundtrip(self, tmp_path):
        repo = JsonResultFileRepository()
        target = str(tmp_path / "ticket.json")
        repo.save(TicketResult(ticket_id="9", status="DryRun", dry_run=True), target)

        data = repo.load(target)
        assert data["dry_run"] is True
        assert data["ticket_id"] == "9"
