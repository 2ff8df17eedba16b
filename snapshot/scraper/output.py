"""Output folder naming and artifact file writes."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import List, Optional
from urllib.parse import urlparse

from snapshot.errors import InvalidURLError

HTML_FILENAME = "page.html"
SCREENSHOT_FILENAME = "screenshot.png"
LINKS_FILENAME = "links.txt"

TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"


def parse_target(url: str) -> str:
    """Validate *url* and return its hostname.

    Raises:
        InvalidURLError: If *url* cannot be parsed, or is an http(s) URL
            without a host.
    """
    try:
        parsed = urlparse(url)
        hostname = parsed.hostname or ""
    except ValueError as exc:
        raise InvalidURLError(f"Invalid URL: {url!r} ({exc})") from exc

    if not parsed.scheme:
        raise InvalidURLError(f"Invalid URL: {url!r} (missing scheme, e.g. https://)")
    if parsed.scheme in ("http", "https") and not hostname:
        raise InvalidURLError(f"Invalid URL: {url!r} (missing host)")
    return hostname


def build_output_dir(url: str, root: Path, now: Optional[datetime] = None) -> Path:
    """Return ``<root>/<timestamp>_<hostname>`` for *url*.

    The directory is not created here.
    """
    hostname = parse_target(url)
    timestamp = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
    return Path(root) / f"{timestamp}_{hostname}"


def write_html(folder: Path, html: str) -> Path:
    path = folder / HTML_FILENAME
    path.write_text(html, encoding="utf-8")
    return path


def write_screenshot(folder: Path, image: bytes) -> Path:
    path = folder / SCREENSHOT_FILENAME
    path.write_bytes(image)
    return path


def write_links(folder: Path, links: List[str]) -> Path:
    """Write one link per line, without a trailing newline."""
    path = folder / LINKS_FILENAME
    path.write_text("\n".join(links), encoding="utf-8")
    return path
