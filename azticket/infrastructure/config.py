"""
Configuration Module

Architectural Intent:
- Centralized configuration loading from a JSON file
- Provides typed access to contact defaults, Azure CLI and telemetry settings
- Falls back to sensible defaults when config file is absent
- Environment variables override file-based config

Design Decisions:
- Config is a frozen dataclass for immutability after load
- Nested config sections map to sub-dataclasses
- Contact defaults are the SessionDefaults DTO itself, so the loaded value is
  passed straight into the use cases
"""

from __future__ import annotations

import dataclasses
import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

from azticket.application.dtos.ticket_dtos import SessionDefaults

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "azticket.json"
_TOP_LEVEL_KEYS = ("log_level", "json_logs")


@dataclass(frozen=True)
class AzureCliConfig:
    """Azure CLI invocation settings."""
    executable: str = "az"
    extension: str = "support"
    auto_install_extension: bool = True


@dataclass(frozen=True)
class TelemetryConfig:
    """OpenTelemetry configuration."""
    endpoint: str = ""
    service_name: str = "azticket"
    environment: str = "development"
    insecure: bool = False

    def __post_init__(self) -> None:
        if self.endpoint:
            parsed = urlparse(self.endpoint)
            is_localhost = parsed.hostname in ("localhost", "127.0.0.1", "::1")
            if parsed.scheme == "http" and not is_localhost and not self.insecure:
                raise ValueError(
                    f"Non-localhost HTTP endpoint '{self.endpoint}' requires "
                    "insecure=True or use https://"
                )


@dataclass(frozen=True)
class AzTicketConfig:
    """Root configuration for azticket."""
    defaults: SessionDefaults = field(default_factory=SessionDefaults)
    azure: AzureCliConfig = field(default_factory=AzureCliConfig)
    telemetry: TelemetryConfig = field(default_factory=TelemetryConfig)
    log_level: str = "WARNING"
    json_logs: bool = False


def _env_override(data: dict, prefix: str = "AZTICKET") -> dict:
    """Override config values with environment variables.

    Environment variables follow the pattern AZTICKET_SECTION_KEY.
    For example: AZTICKET_DEFAULTS_COUNTRY=DEU, AZTICKET_TELEMETRY_ENDPOINT=https://otel:4317
    Top-level keys use AZTICKET_KEY, e.g. AZTICKET_LOG_LEVEL=DEBUG.
    """
    for key, value in os.environ.items():
        if not key.startswith(f"{prefix}_"):
            continue
        rest = key[len(prefix) + 1:].lower()
        if rest in _TOP_LEVEL_KEYS:
            data[rest] = value
            continue
        parts = rest.split("_", 1)
        if len(parts) == 2:
            section, field_name = parts
            if not isinstance(data.get(section), dict):
                data[section] = {}
            data[section][field_name] = value
    return data


def _parse_config_file(path: Path) -> dict:
    """Parse a JSON config file. Returns empty dict on failure."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.debug("Config file not found: %s", path)
        return {}
    except json.JSONDecodeError as e:
        logger.warning("Invalid config file %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Config file %s must hold a JSON object", path)
        return {}
    return data


def _as_bool(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")
    return bool(value)


def _build_sub_config(cls, data: dict):
    """Build a sub-config dataclass from a dict, ignoring unknown keys."""
    fields = {f.name: f for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in data.items() if k in fields}

    for name, value in filtered.items():
        field_type = fields[name].type
        if field_type in (bool, "bool"):
            filtered[name] = _as_bool(value)
        elif field_type in (str, "str") and not isinstance(value, str):
            filtered[name] = str(value)

    return cls(**filtered)


def load_config(
    path: Optional[str] = None,
    env_prefix: str = "AZTICKET",
) -> AzTicketConfig:
    """Load configuration from file and environment variables.

    Priority (highest to lowest):
    1. Environment variables (AZTICKET_SECTION_KEY)
    2. Config file values
    3. Defaults

    Args:
        path: Path to config file (JSON). Defaults to azticket.json in CWD.
        env_prefix: Environment variable prefix. Defaults to AZTICKET.
    """
    config_path = Path(path) if path else Path(DEFAULT_CONFIG_FILE)
    data = _parse_config_file(config_path)
    data = _env_override(data, env_prefix)

    return AzTicketConfig(
        defaults=_build_sub_config(SessionDefaults, data.get("defaults", {})),
        azure=_build_sub_config(AzureCliConfig, data.get("azure", {})),
        telemetry=_build_sub_config(TelemetryConfig, data.get("telemetry", {})),
        log_level=str(data.get("log_level", "WARNING")),
        json_logs=_as_bool(data.get("json_logs", False)),
    )
