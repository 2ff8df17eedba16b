"""Capture pipeline: a single URL to an output folder of artifacts.

``capture_url`` runs the whole workflow:

    validate URL → create folder → launch browser → navigate → HTML →
    screenshot → links
"""

from __future__ import annotations

import sys
from typing import Callable, Optional

from snapshot.config import Settings, settings
from snapshot.errors import ExtractionError, NavigationError, OutputError
from snapshot.scraper.browser import navigate, open_page
from snapshot.scraper.extractor import capture_screenshot, extract_html, extract_links
from snapshot.scraper.models import CaptureResult, DocumentStatus
from snapshot.scraper.output import (
    build_output_dir,
    write_html,
    write_links,
    write_screenshot,
)
from snapshot.scraper.status import classify_status, describe_status

Echo = Callable[[str], None]


def _print_err(message: str) -> None:
    print(message, file=sys.stderr)


def _report_status(status: Optional[DocumentStatus], echo: Echo, echo_err: Echo) -> None:
    """Print the status report; error categories go to *echo_err*."""
    lines = describe_status(status)
    if not lines:
        return
    echo(lines[0])
    category = classify_status(status.code, status.text)
    sink = echo_err if category.is_error else echo
    for line in lines[1:]:
        sink(line)


def _record_failure(result: CaptureResult, artifact: str, exc: Exception, echo_err: Echo) -> None:
    message = exc.detail if isinstance(exc, ExtractionError) else str(exc)
    result.failures[artifact] = message
    echo_err(f"[snapshot] ✗ Failed to save {artifact}: {message}")


def capture_url(
    url: str,
    config: Optional[Settings] = None,
    echo: Echo = print,
    echo_err: Echo = _print_err,
) -> CaptureResult:
    """Load *url* in a headless browser and save its artifacts.

    Pipeline:
        1. :func:`~snapshot.scraper.output.build_output_dir` — timestamped
           folder under ``config.output_dir``.
        2. :func:`~snapshot.scraper.browser.navigate` — load the page and
           report the main document status.
        3. HTML, screenshot and links are extracted and written one after the
           other.  A failing step is logged and recorded in
           ``CaptureResult.failures``; the remaining steps still run.

    Args:
        url: The page to capture.
        config: Settings to use; defaults to the module-level ``settings``.
        echo: Sink for progress lines.
        echo_err: Sink for failures and error-class status reports; defaults
            to stderr.

    Returns:
        A :class:`~snapshot.scraper.models.CaptureResult` describing what was
        written.

    Raises:
        InvalidURLError: If *url* is not a usable address.
        OutputError: If the output folder cannot be created.
        BrowserError: If Chromium cannot be started or its page set up.
        NavigationError: If the page cannot be loaded.
    """
    config = config or settings

    # ------------------------------------------------------------------
    # 1 — Output folder
    # ------------------------------------------------------------------
    folder = build_output_dir(url, config.output_dir)
    try:
        config.ensure_output_dir()
        folder.mkdir(exist_ok=True)
    except OSError as exc:
        raise OutputError(f"Failed to create directory {folder}: {exc}") from exc
    echo(f"[snapshot] Output folder created: {folder}")

    result = CaptureResult(url=url, output_dir=folder)

    with open_page(config) as page:
        # --------------------------------------------------------------
        # 2 — Navigate (fatal on failure, after reporting the status)
        # --------------------------------------------------------------
        echo(f"[snapshot] Navigating to {url}")
        try:
            result.status = navigate(page, url)
        except NavigationError as exc:
            _report_status(exc.status, echo, echo_err)
            raise
        _report_status(result.status, echo, echo_err)

        # --------------------------------------------------------------
        # 3 — Artifacts, each independent of the others
        # --------------------------------------------------------------
        try:
            path = write_html(folder, extract_html(page))
            result.saved["html"] = path
            echo(f"[snapshot] HTML content saved to {path}")
        except (ExtractionError, OSError) as exc:
            _record_failure(result, "html", exc, echo_err)

        try:
            path = write_screenshot(folder, capture_screenshot(page))
            result.saved["screenshot"] = path
            echo(f"[snapshot] Screenshot saved to {path}")
        except (ExtractionError, OSError) as exc:
            _record_failure(result, "screenshot", exc, echo_err)

        try:
            links = extract_links(page)
            path = write_links(folder, links)
            result.saved["links"] = path
            result.link_count = len(links)
            echo(f"[snapshot] Saved {len(links)} links to {path}")
        except (ExtractionError, OSError) as exc:
            _record_failure(result, "links", exc, echo_err)

    return result
