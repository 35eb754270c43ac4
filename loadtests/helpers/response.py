"""Response error extraction for load test observability.

Parses storefront API error responses into human-readable messages.
Handles two response shapes:

- Domain and request validation errors (400): {"message": "...", "errors": {...} or [...]}
- Not found and server errors (404/500): {"message": "..."}
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
        # Not JSON, return raw text truncated
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    if not isinstance(body, dict) or "message" not in body:
        return str(body)[:300]

    errors = body.get("errors")
    # Request validation: [{"loc": [...], "msg": "..."}]
    if isinstance(errors, list):
        parts = []
        for err in errors:
            loc = ".".join(str(p) for p in err.get("loc", []))
            msg = err.get("msg", str(err))
            parts.append(f"{loc}: {msg}" if loc else msg)
        return " | ".join(parts) or body["message"]

    # Domain validation: {"field": ["msg", ...]}
    if isinstance(errors, dict):
        return " | ".join(f"{k}: {', '.join(map(str, v)) if isinstance(v, list) else v}" for k, v in errors.items())

    return str(body["message"])
