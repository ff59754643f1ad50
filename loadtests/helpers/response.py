"""Response error extraction for load test observability.

Printeez answers every failed request with ``{"error": "msg"}``. Domain
validation raised outside the order workflow may carry a field mapping
instead: ``{"error": {"field": ["msg"]}}``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response


def extract_error_detail(response: Response) -> str:
    """Extract a human-readable error message from an API error response.

    Returns a compact string suitable for Locust failure messages and log lines.
    """
    try:
        body = response.json()
    except ValueError:
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict):
        return " | ".join(f"{k}: {', '.join(v) if isinstance(v, list) else v}" for k, v in error.items())
    if error is not None:
        return str(error)

    return str(body)[:300]


def is_stock_rejection(response: Response) -> bool:
    """True when a 400 is the expected outcome of losing a race for stock."""
    return response.status_code == 400 and extract_error_detail(response).startswith("Insufficient stock")
