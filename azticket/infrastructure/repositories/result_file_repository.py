"""
Result File Repository

Architectural Intent:
- Writes a TicketResult to the optional --output-file as indented JSON
- The only thing the tool persists
"""

import json
import logging
from pathlib import Path
from typing import Any

from azticket.domain.entities.ticket import TicketResult

logger = logging.getLogger(__name__)


class JsonResultFileRepository:
    def save(self, result: TicketResult, path: str) -> Path:
        output_path = Path(path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with output_path.open("w", encoding="utf-8") as f:
            json.dump(result.to_dict(), f, indent=2, ensure_ascii=False)
            f.write("\n")
        logger.info("Ticket result written to %s", output_path)
        return output_path

    def load(self, path: str) -> dict[str, Any]:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
