"""
Console Prompt Adapter

Architectural Intent:
- Infrastructure adapter implementing PromptPort on the process terminal
- input() runs on the event loop thread; prompts are sequential and nothing
  else is scheduled while the operator types
- asyncio.run only cancels the main task on the first Ctrl-C, which a
  blocking read never observes, so the default SIGINT handler is restored
  for the duration of the read and KeyboardInterrupt reaches the CLI
"""

import signal
import threading


class ConsolePromptAdapter:
    async def ask(self, message: str) -> str:
        if threading.current_thread() is not threading.main_thread():
            return input(message)
        previous = signal.signal(signal.SIGINT, signal.default_int_handler)
        try:
            return input(message)
        finally:
            signal.signal(signal.SIGINT, previous)

    async def display(self, message: str) -> None:
        print(message)
