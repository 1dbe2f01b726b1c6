"""Configuration helpers for the Lark webhook notifier."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple
from urllib.parse import urlparse

from dotenv import load_dotenv


DEFAULT_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "INFO"

load_dotenv()


class ConfigError(ValueError):
    """Raised when required input is missing or malformed."""


@dataclass(slots=True)
class Settings:
    """Runtime configuration loaded from environment variables."""

    webhook_url: Optional[str] = None
    secret: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "Settings":
        """Create settings from environment variables."""

        return cls(
            webhook_url=_get_str("LARK_WEBHOOK_URL"),
            secret=_get_str("LARK_SECRET", strip=False),
            timeout=_get_float("LARK_TIMEOUT", DEFAULT_TIMEOUT),
            log_level=_get_log_level("LARK_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        )


@dataclass(frozen=True, slots=True)
class NotificationRequest:
    """Everything needed to send a single notification."""

    webhook_url: str
    secret: Optional[str]
    title: str
    content: str
    keywords: Tuple[str, ...] = ()


def parse_keywords(raw: Optional[str]) -> Tuple[str, ...]:
    """Split a comma separated keyword list, dropping blank items."""

    if not raw:
        return ()
    return tuple(item.strip() for item in raw.split(",") if item.strip())


def build_request(
    settings: Settings,
    title: str,
    content: str,
    webhook_url: Optional[str] = None,
    secret: Optional[str] = None,
    keywords: Optional[Sequence[str]] = None,
) -> NotificationRequest:
    """Merge explicit values over ``settings`` into a :class:`NotificationRequest`.

    Explicit arguments win over the environment. A blank secret means the
    message is sent unsigned.
    """

    url = (webhook_url or settings.webhook_url or "").strip()
    if not url:
        raise ConfigError(
            "Missing webhook URL: pass --webhook-url or set LARK_WEBHOOK_URL"
        )
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigError(f"Webhook URL must be an http(s) URL, got {url!r}")

    effective_secret = secret if secret is not None else settings.secret
    if effective_secret is not None and not effective_secret.strip():
        effective_secret = None

    return NotificationRequest(
        webhook_url=url,
        secret=effective_secret,
        title=title,
        content=content,
        keywords=tuple(keywords or ()),
    )


def _get_str(var_name: str, strip: bool = True) -> Optional[str]:
    """Read a string environment variable, treating blank values as unset."""

    value = os.getenv(var_name)
    if value is None or not value.strip():
        return None
    return value.strip() if strip else value


def _get_float(var_name: str, default: float) -> float:
    """Read a positive float environment variable, falling back to ``default`` when unset."""

    raw_value = os.getenv(var_name)
    if raw_value is None or not raw_value.strip():
        return default
    try:
        value = float(raw_value)
    except ValueError as exc:
        raise ConfigError(f"{var_name} must be a number, got {raw_value!r}") from exc
    if value <= 0:
        raise ConfigError(f"{var_name} must be greater than zero, got {raw_value!r}")
    return value


def _get_log_level(var_name: str, default: str) -> str:
    """Read a logging level name such as ``INFO`` or ``DEBUG``."""

    level = (os.getenv(var_name) or default).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"{var_name} must be a logging level name, got {level!r}")
    return level
