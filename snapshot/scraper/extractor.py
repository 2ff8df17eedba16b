"""Artifact extraction from a loaded page.

Each function issues one request against the page and either returns the
artifact or raises :class:`~snapshot.errors.ExtractionError`.
"""

from __future__ import annotations

import json
from typing import List

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page

from snapshot.errors import ExtractionError

# SVG anchors expose ``href`` as an SVGAnimatedString, hence ``baseVal``.
_LINKS_SCRIPT = """() => JSON.stringify(
  Array.from(document.querySelectorAll('a'))
    .map(a => {
      if (typeof a.href === 'object' && a.href !== null) {
        return a.href.baseVal;
      }
      return a.href;
    })
    .filter(href => typeof href === 'string' && href !== '')
)"""


def extract_html(page: Page) -> str:
    """Return the serialised outer HTML of the ``<html>`` element."""
    try:
        return page.locator("html").evaluate("el => el.outerHTML")
    except PlaywrightError as exc:
        raise ExtractionError("html", str(exc)) from exc


def capture_screenshot(page: Page) -> bytes:
    """Return a full-page PNG screenshot."""
    try:
        return page.screenshot(full_page=True, type="png")
    except PlaywrightError as exc:
        raise ExtractionError("screenshot", str(exc)) from exc


def decode_links(payload: str) -> List[str]:
    """Decode the JSON string produced by the link script.

    Raises:
        ExtractionError: If *payload* is not a JSON array of strings.
    """
    try:
        links = json.loads(payload)
    except (json.JSONDecodeError, TypeError) as exc:
        raise ExtractionError("links", f"error unmarshaling JSON: {exc}") from exc
    if not isinstance(links, list) or not all(isinstance(link, str) for link in links):
        raise ExtractionError("links", "expected a JSON array of strings")
    return links


def extract_links(page: Page) -> List[str]:
    """Return every non-empty anchor ``href`` in document order."""
    try:
        payload = page.evaluate(_LINKS_SCRIPT)
    except PlaywrightError as exc:
        raise ExtractionError("links", f"error extracting links: {exc}") from exc
    return decode_links(payload)
