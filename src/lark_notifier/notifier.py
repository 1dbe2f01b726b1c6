"""Webhook integration for delivering messages to a Lark custom bot."""

from __future__ import annotations

import logging
from typing import Any, Dict

import requests

from .config import DEFAULT_TIMEOUT

LOGGER = logging.getLogger(__name__)


class NotificationError(RuntimeError):
    """Raised when the Lark webhook call fails."""


def send_message(
    payload: Dict[str, Any],
    webhook_url: str,
    timeout: float = DEFAULT_TIMEOUT,
) -> Dict[str, Any]:
    """POST ``payload`` to the webhook and return the decoded response body.

    Both HTTP errors and a non-zero ``code`` in the response body are treated
    as failures. Nothing is retried.
    """

    try:
        response = requests.post(webhook_url, json=payload, timeout=timeout)
    except requests.RequestException as exc:
        raise NotificationError(f"Failed to reach Lark webhook: {exc}") from exc

    if not 200 <= response.status_code < 300:
        raise NotificationError(
            f"Failed to send notification: {response.status_code} {response.text}"
        )

    try:
        body = response.json()
    except ValueError:
        LOGGER.debug("Webhook returned a non-JSON body: %r", response.text)
        return {}
    if not isinstance(body, dict):
        return {}

    # Older bot endpoints answer with StatusCode/StatusMessage instead of code/msg
    code = body.get("code", body.get("StatusCode", 0))
    if code not in (0, None):
        message = body.get("msg") or body.get("StatusMessage") or "unknown error"
        raise NotificationError(f"Lark rejected the message (code {code}): {message}")

    LOGGER.debug("Webhook response: %s", body)
    return body
