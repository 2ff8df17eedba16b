"""Headless Chromium session and navigation with status capture."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page, Response, sync_playwright

from snapshot.config import Settings
from snapshot.errors import BrowserError, NavigationError
from snapshot.scraper.models import DocumentStatus


@contextmanager
def open_page(config: Settings) -> Iterator[Page]:
    """Launch Chromium and yield a single page configured from *config*.

    Any engine failure while starting Playwright or setting up the page is
    raised as :class:`~snapshot.errors.BrowserError`.  The browser and the
    Playwright driver are always shut down on exit, including when the body
    raises.
    """
    try:
        pw = sync_playwright().start()
    except PlaywrightError as exc:
        raise BrowserError(f"Failed to start Playwright: {exc}") from exc

    browser = None
    try:
        try:
            browser = pw.chromium.launch(
                headless=config.headless,
                args=config.browser_args,
            )
            context = browser.new_context(
                user_agent=config.user_agent,
                viewport={"width": config.viewport_width, "height": config.viewport_height},
                ignore_https_errors=config.ignore_https_errors,
            )
            page = context.new_page()
            page.set_default_timeout(config.timeout_ms)
            page.set_default_navigation_timeout(config.timeout_ms)
        except PlaywrightError as exc:
            raise BrowserError(f"Failed to open a browser page: {exc}") from exc
        yield page
    finally:
        if browser is not None:
            browser.close()
        pw.stop()


def _status_of(response: Response) -> DocumentStatus:
    return DocumentStatus(code=response.status, text=response.status_text)


def navigate(page: Page, url: str) -> Optional[DocumentStatus]:
    """Navigate *page* to *url* and return the main document status.

    A ``response`` listener is registered before navigating and records every
    document response of the main frame; the last one wins, so a redirect
    chain reports its final hop.

    Raises:
        NavigationError: If the browser fails to load the page.  The status
            seen so far is attached to the exception.
    """
    seen: dict[str, DocumentStatus] = {}

    def on_response(response: Response) -> None:
        if response.request.resource_type != "document":
            return
        if response.frame != page.main_frame:
            return
        seen["main"] = _status_of(response)

    page.on("response", on_response)
    try:
        response = page.goto(url)
    except PlaywrightError as exc:
        raise NavigationError(f"Failed to navigate to {url}: {exc}", seen.get("main")) from exc
    finally:
        page.remove_listener("response", on_response)

    if "main" not in seen and response is not None:
        seen["main"] = _status_of(response)
    return seen.get("main")
