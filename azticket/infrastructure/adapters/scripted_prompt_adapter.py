"""
Scripted Prompt Adapter

Architectural Intent:
- PromptPort implementation that replays a fixed list of answers
- Drives interactive sessions from tests and from answer files without a
  terminal; records every question and message for inspection
"""

from typing import Iterable


class ScriptedPromptAdapter:
    def __init__(self, answers: Iterable[str] = ()) -> None:
        self._answers = list(answers)
        self.asked: list[str] = []
        self.displayed: list[str] = []

    @property
    def remaining(self) -> int:
        return len(self._answers)

    async def ask(self, message: str) -> str:
        self.asked.append(message)
        if not self._answers:
            raise EOFError(f"No scripted answer left for prompt: {message!r}")
        return self._answers.pop(0)

    async def display(self, message: str) -> None:
        self.displayed.append(message)
