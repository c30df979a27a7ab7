"""Client configuration.

- Centralizes the environment variables (pydantic-settings) read by the
  facade, the endpoints and the CLI.
- Resolution order: explicit arguments, environment (`STRIPE_*`), the
  project `.env`, then the per-user `.env` written by `stripe-facade doctor setup`.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from stripe_facade.core.errors import ConfigError
from stripe_facade.version import VERSION

DEFAULT_API_VERSION = "2016-07-06"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "stripe-facade"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "stripe-facade"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "stripe-facade"
    return Path.home() / ".config" / "stripe-facade"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Write or update variables in the user's global .env."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# stripe-facade user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class Config(BaseSettings):
    """Credentials and transport settings shared by every endpoint.

    `api_key`, `api_version` and `idempotency_key` may be reassigned after
    construction; assignments are validated.
    """

    model_config = SettingsConfigDict(
        env_prefix="STRIPE_",
        extra="ignore",
        case_sensitive=False,
        validate_assignment=True,
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_key: str | None = Field(
        default=None,
        description="Secret (sk_*) or restricted (rk_*) API key.",
    )
    api_version: str = Field(
        default=DEFAULT_API_VERSION,
        min_length=1,
        description="Value of the Stripe-Version header.",
    )
    idempotency_key: str | None = Field(
        default=None,
        description="Sent as Idempotency-Key on every request while set.",
    )

    api_base: str = Field(
        default="https://api.stripe.com",
        min_length=8,
        description="Base URL of the REST API.",
    )
    uploads_base: str = Field(
        default="https://uploads.stripe.com",
        min_length=8,
        description="Base URL used for file uploads.",
    )
    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout per request (seconds).",
    )

    log_level: str = Field(
        default="WARNING",
        description="structlog level for request/response events.",
    )
    log_json: bool = Field(
        default=False,
        description="Render log events as JSON lines.",
    )

    @model_validator(mode="after")
    def _require_api_key(self) -> "Config":
        if not self.api_key:
            raise ConfigError("The Stripe API key is not defined!")
        return self

    @property
    def version(self) -> str:
        return VERSION
