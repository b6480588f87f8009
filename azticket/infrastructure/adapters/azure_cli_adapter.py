"""
Azure Support CLI Adapter

Architectural Intent:
- Implements SupportProviderPort on top of the Azure CLI and its "support"
  extension
- Uses subprocess for az CLI operations wrapped in async, one blocking call at
  a time

Commands:
  az version
  az extension show|add --name support
  az account show / az login
  az support services list
  az support services problem-classifications list --service-name <name>
  az support tickets create --ticket-name ... --advanced-diagnostic-consent Yes

Security:
- Arguments are passed as lists (no shell=True); previews are shlex-quoted
"""

import asyncio
import json
import logging
import shlex
import subprocess
from typing import Any

from azticket.domain.errors import (
    FetchFailedError,
    PrerequisiteMissingError,
    RemoteError,
)

logger = logging.getLogger(__name__)

INSTALL_URL = "https://aka.ms/installazurecli"


class AzureSupportCliAdapter:
    def __init__(
        self,
        executable: str = "az",
        extension: str = "support",
        auto_install_extension: bool = True,
    ) -> None:
        self.executable = executable
        self.extension = extension
        self.auto_install_extension = auto_install_extension

    def _run(self, args: list[str], capture: bool = True) -> subprocess.CompletedProcess:
        cmd = [self.executable, *args]
        logger.debug("Running: %s", shlex.join(cmd))
        try:
            return subprocess.run(cmd, capture_output=capture, text=True)
        except FileNotFoundError:
            raise PrerequisiteMissingError(
                f"Azure CLI ('{self.executable}') not found. Install it from {INSTALL_URL}"
            )

    async def _run_async(self, args: list[str], capture: bool = True) -> subprocess.CompletedProcess:
        return await asyncio.get_event_loop().run_in_executor(
            None, lambda: self._run(args, capture)
        )

    async def ensure_prerequisites(self, allow_login: bool = True) -> None:
        version = await self._run_async(["version", "--output", "json"])
        if version.returncode != 0:
            raise PrerequisiteMissingError(
                f"Azure CLI ('{self.executable}') is not working: {version.stderr.strip()}"
            )

        extension = await self._run_async(
            ["extension", "show", "--name", self.extension, "--output", "json"]
        )
        if extension.returncode != 0:
            if not self.auto_install_extension:
                raise PrerequisiteMissingError(
                    f"Azure CLI extension '{self.extension}' is missing. "
                    f"Run 'az extension add --name {self.extension}'"
                )
            logger.info("Installing Azure CLI extension '%s'", self.extension)
            added = await self._run_async(["extension", "add", "--name", self.extension, "--yes"])
            if added.returncode != 0:
                raise PrerequisiteMissingError(
                    f"Could not install Azure CLI extension '{self.extension}': "
                    f"{added.stderr.strip()}"
                )

        account = await self._run_async(["account", "show", "--output", "json"])
        if account.returncode == 0:
            return
        if not allow_login:
            raise PrerequisiteMissingError("Not logged in to Azure. Run 'az login' and retry.")

        logger.info("No Azure login session found, starting 'az login'")
        login = await self._run_async(["login"], capture=False)
        if login.returncode != 0:
            raise PrerequisiteMissingError("Azure login failed. Run 'az login' and retry.")

    async def _list(self, args: list[str], what: str) -> list[dict[str, Any]]:
        result = await self._run_async([*args, "--output", "json"])
        if result.returncode != 0:
            raise FetchFailedError(
                f"Listing {what} failed (exit code {result.returncode}): {result.stderr.strip()}"
            )
        try:
            records = json.loads(result.stdout or "[]")
        except json.JSONDecodeError as e:
            raise FetchFailedError(f"Listing {what} returned invalid JSON: {e}")
        if not isinstance(records, list):
            raise FetchFailedError(f"Listing {what} returned {type(records).__name__}, expected a list")
        logger.debug("Fetched %d %s", len(records), what)
        return records

    async def list_services(self) -> list[dict[str, Any]]:
        return await self._list(["support", "services", "list"], "services")

    async def list_problem_classifications(self, service_name: str) -> list[dict[str, Any]]:
        return await self._list(
            [
                "support",
                "services",
                "problem-classifications",
                "list",
                "--service-name",
                service_name,
            ],
            "problem classifications",
        )

    def _create_args(self, arguments: dict[str, str]) -> list[str]:
        args = ["support", "tickets", "create"]
        for key, value in arguments.items():
            args.extend([f"--{key}", value])
        return args

    def format_create_command(self, arguments: dict[str, str]) -> str:
        return shlex.join([self.executable, *self._create_args(arguments)])

    async def create_ticket(self, arguments: dict[str, str]) -> dict[str, Any]:
        result = await self._run_async([*self._create_args(arguments), "--output", "json"])
        if result.returncode != 0:
            raise RemoteError(
                result.returncode,
                "\n".join(part for part in (result.stderr, result.stdout) if part).strip(),
            )
        try:
            response = json.loads(result.stdout)
        except json.JSONDecodeError:
            logger.warning("Ticket creation returned non-JSON output")
            return {"raw_output": result.stdout}
        if not isinstance(response, dict):
            return {"value": response}
        return response
