"""CF CLI target and lookup-route settings."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import toml  # type: ignore[import-untyped]

from lookup_route.errors import ConfigurationError
from lookup_route.inventory.client import DEFAULT_TIMEOUT_SECONDS
from lookup_route.resolver.enricher import DEFAULT_MAX_BATCH_SIZE, MAX_BATCH_SIZE_LIMIT

CF_HOME_ENV_VAR = "CF_HOME"
MAX_BATCH_SIZE_ENV_VAR = "LOOKUP_ROUTE_MAX_BATCH_SIZE"
MAX_WORKERS_ENV_VAR = "LOOKUP_ROUTE_MAX_WORKERS"
TIMEOUT_ENV_VAR = "LOOKUP_ROUTE_TIMEOUT"


def cf_config_path() -> Path:
    """Return the cf CLI config.json, honouring CF_HOME."""
    cf_home = os.getenv(CF_HOME_ENV_VAR, "").strip()
    base = Path(cf_home).expanduser() if cf_home else Path.home()
    return base / ".cf" / "config.json"


@dataclass(slots=True)
class CfTarget:
    """API endpoint and token written by ``cf api`` / ``cf login``."""

    api_endpoint: str
    access_token: str
    skip_ssl_validation: bool = False
    organization: str | None = None
    space: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CfTarget":
        endpoint = data.get("Target")
        if not isinstance(endpoint, str) or not endpoint.strip():
            raise ConfigurationError("no API endpoint set")

        token = data.get("AccessToken")
        if not isinstance(token, str) or not token.strip():
            raise ConfigurationError("not logged in, please run 'cf login'")

        org_fields = data.get("OrganizationFields")
        space_fields = data.get("SpaceFields")
        org_name = org_fields.get("Name") if isinstance(org_fields, dict) else None
        space_name = space_fields.get("Name") if isinstance(space_fields, dict) else None
        return cls(
            api_endpoint=endpoint.strip(),
            access_token=token.strip(),
            skip_ssl_validation=bool(data.get("SSLDisabled", False)),
            organization=org_name or None,
            space=space_name or None,
        )


def load_cf_target(path: Path | None = None) -> CfTarget:
    """Load the current cf CLI target.

    Raises:
        ConfigurationError: If no API endpoint is set or nobody is logged in
    """
    config_path = path or cf_config_path()
    if not config_path.exists():
        raise ConfigurationError("no API endpoint set")

    try:
        payload = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise ConfigurationError(f"Failed to read {config_path}: {exc}") from exc

    if not isinstance(payload, dict):
        raise ConfigurationError("no API endpoint set")
    return CfTarget.from_dict(payload)


@dataclass(slots=True)
class LookupSettings:
    """Tunables for batching and the HTTP transport."""

    max_batch_size: int = DEFAULT_MAX_BATCH_SIZE
    max_workers: int = 1
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def validate(self) -> "LookupSettings":
        if not 1 <= self.max_batch_size <= MAX_BATCH_SIZE_LIMIT:
            raise ConfigurationError(
                f"max_batch_size must be between 1 and {MAX_BATCH_SIZE_LIMIT}, got {self.max_batch_size}"
            )
        if self.max_workers < 1:
            raise ConfigurationError(f"max_workers must be at least 1, got {self.max_workers}")
        if self.timeout_seconds <= 0:
            raise ConfigurationError(f"timeout_seconds must be positive, got {self.timeout_seconds}")
        return self

    def to_dict(self) -> dict[str, object]:
        return {
            "max_batch_size": self.max_batch_size,
            "max_workers": self.max_workers,
            "timeout_seconds": self.timeout_seconds,
        }


def _coerce(key: str, value: Any, kind: type) -> Any:
    if isinstance(value, bool):
        raise ConfigurationError(f"Invalid value for {key}: {value!r}")
    if kind is int and isinstance(value, float) and not value.is_integer():
        raise ConfigurationError(f"Invalid value for {key}: {value!r}")
    try:
        return kind(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Invalid value for {key}: {value!r}") from exc


class LookupConfig:
    """Manage ~/.lookup-route/config.toml"""

    def __init__(self, config_dir: Path | None = None) -> None:
        self.config_dir = config_dir or Path.home() / ".lookup-route"
        self.config_file = self.config_dir / "config.toml"

    def _load_section(self) -> dict[str, Any]:
        if not self.config_file.exists():
            return {}
        try:
            config: dict[str, Any] = toml.load(self.config_file)
        except (toml.TomlDecodeError, OSError) as exc:
            raise ConfigurationError(f"Failed to parse {self.config_file}: {exc}") from exc
        section = config.get("lookup")
        return section if isinstance(section, dict) else {}

    def get_settings(self) -> LookupSettings:
        """Settings from the config file, overridden by environment variables."""
        section = self._load_section()
        settings = LookupSettings()

        if "max_batch_size" in section:
            settings.max_batch_size = _coerce("max_batch_size", section["max_batch_size"], int)
        if "max_workers" in section:
            settings.max_workers = _coerce("max_workers", section["max_workers"], int)
        if "timeout_seconds" in section:
            settings.timeout_seconds = _coerce("timeout_seconds", section["timeout_seconds"], float)

        env_batch = os.getenv(MAX_BATCH_SIZE_ENV_VAR, "").strip()
        if env_batch:
            settings.max_batch_size = _coerce(MAX_BATCH_SIZE_ENV_VAR, env_batch, int)
        env_workers = os.getenv(MAX_WORKERS_ENV_VAR, "").strip()
        if env_workers:
            settings.max_workers = _coerce(MAX_WORKERS_ENV_VAR, env_workers, int)
        env_timeout = os.getenv(TIMEOUT_ENV_VAR, "").strip()
        if env_timeout:
            settings.timeout_seconds = _coerce(TIMEOUT_ENV_VAR, env_timeout, float)

        return settings.validate()
