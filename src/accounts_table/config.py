from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import TypeVar

from dotenv import load_dotenv

DEFAULT_PAGE_SIZE = 5

Number = TypeVar("Number", int, float)


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class TableConfig:
    api_base_url: str | None = None
    page_size: int = DEFAULT_PAGE_SIZE
    connect_timeout_seconds: float = 5.0
    read_timeout_seconds: float = 10.0
    retries: int = 3
    retry_backoff_seconds: float = 0.3
    verify_ssl: bool = True
    log_level: str = "INFO"

    @property
    def uses_remote_source(self) -> bool:
        return bool(self.api_base_url)


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_number(name: str, default: Number, minimum: Number, *, allow_minimum: bool = True) -> Number:
    """Read a numeric setting of the same type as ``default`` and bound-check it."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    cast = type(default)
    try:
        value = cast(raw.strip())
    except ValueError as exc:
        kind = "an integer" if cast is int else "a number"
        raise ConfigError(f"Invalid {name}: expected {kind}, got {raw!r}") from exc
    if value < minimum or (value == minimum and not allow_minimum):
        bound = ">=" if allow_minimum else ">"
        raise ConfigError(f"Invalid {name}: expected {bound} {minimum}, got {value}")
    return value


def load_config(env_file: str | None = None) -> TableConfig:
    """Load config from environment with optional .env override.

    Without ``ACCOUNTS_TABLE_API_BASE_URL`` the table runs on the bundled
    sample accounts instead of the users endpoint.
    """
    load_dotenv(env_file)
    defaults = TableConfig()

    log_level = (os.getenv("ACCOUNTS_TABLE_LOG_LEVEL") or defaults.log_level).strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError(f"Invalid ACCOUNTS_TABLE_LOG_LEVEL: unknown level {log_level!r}")

    return TableConfig(
        api_base_url=(os.getenv("ACCOUNTS_TABLE_API_BASE_URL") or "").strip().rstrip("/") or None,
        page_size=_env_number("ACCOUNTS_TABLE_PAGE_SIZE", defaults.page_size, 1),
        connect_timeout_seconds=_env_number(
            "ACCOUNTS_TABLE_CONNECT_TIMEOUT_SECONDS", defaults.connect_timeout_seconds, 0.0, allow_minimum=False
        ),
        read_timeout_seconds=_env_number(
            "ACCOUNTS_TABLE_READ_TIMEOUT_SECONDS", defaults.read_timeout_seconds, 0.0, allow_minimum=False
        ),
        retries=_env_number("ACCOUNTS_TABLE_RETRIES", defaults.retries, 0),
        retry_backoff_seconds=_env_number("ACCOUNTS_TABLE_RETRY_BACKOFF_SECONDS", defaults.retry_backoff_seconds, 0.0),
        verify_ssl=_env_flag("ACCOUNTS_TABLE_VERIFY_SSL", defaults.verify_ssl),
        log_level=log_level,
    )
