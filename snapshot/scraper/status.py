"""Classification of the main document's HTTP status code."""

from __future__ import annotations

from typing import List, Optional

from snapshot.scraper.models import DocumentStatus, StatusCategory

_SUCCESS = StatusCategory("SUCCESSFUL", "Site is accessible.", is_error=False)
_REDIRECT = StatusCategory(
    "REDIRECTION", "Site is redirecting to another address.", is_error=False
)
_FORBIDDEN = StatusCategory(
    "FORBIDDEN", "Access denied (WAF or Bot Protection).", is_error=True
)
_NOT_FOUND = StatusCategory("NOT FOUND", "Page does not exist.", is_error=True)
_SERVER_ERROR = StatusCategory(
    "SERVER ERROR", "Target site is down or faulty.", is_error=True
)
_UNKNOWN = StatusCategory("UNKNOWN STATUS", "Unrecognised status code.", is_error=True)


def classify_status(code: int, text: str = "") -> Optional[StatusCategory]:
    """Return the category for *code*, or ``None`` when no response was seen.

    A code of ``0`` means the main document never answered.  Generic client
    errors carry the server's own status text as their message.
    """
    if code == 0:
        return None
    if 200 <= code < 300:
        return _SUCCESS
    if 300 <= code < 400:
        return _REDIRECT
    if code == 403:
        return _FORBIDDEN
    if code == 404:
        return _NOT_FOUND
    if 400 <= code < 500:
        return StatusCategory("CLIENT ERROR", text or "Client error.", is_error=True)
    if code >= 500:
        return _SERVER_ERROR
    return _UNKNOWN


def describe_status(status: Optional[DocumentStatus]) -> List[str]:
    """Render the report lines printed after navigation."""
    if status is None:
        return []
    category = classify_status(status.code, status.text)
    if category is None:
        return []

    lines = [f"Request network: {status.code} ({status.text})"]
    if category is _SUCCESS:
        lines.append(f"Request {category.label}: {category.message}")
    elif category is _UNKNOWN:
        lines.append(f"Request {category.label}: {status.code}")
    else:
        lines.append(f"Request {category.label} ({status.code}): {category.message}")
    return lines
