"""Status classification and error-envelope decoding shared by all calls."""

from __future__ import annotations

import json
from typing import Any


def _is_success(status_code: int) -> bool:
    """Return *True* when *status_code* starts with ``"20"``.

    This is a prefix test, not a 2xx range: 200-209 succeed while 210-299
    are treated as failures.
    """
    return str(status_code).startswith("20")


def _error_message(body: str) -> str:
    """Extract ``error.message`` from an ARM error envelope.

    Falls back to the raw *body* when it is not JSON or lacks the envelope.
    """
    try:
        data = json.loads(body)
    except ValueError:
        return body
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict) and isinstance(error.get("message"), str):
            return error["message"]
    return body


def _is_retryable(message: str) -> bool:
    """Return *True* when the provider flags the failure as transient."""
    return "retryable error" in message.lower()


def _value_list(body: Any) -> list:
    """Return the ``value`` array of an ARM list response; empty for an empty body."""
    return (body or {}).get("value", [])
