"""Tests for the browser session and main document status capture.

For ``navigate`` the Playwright ``Page`` is replaced by a small fake that
stores the ``response`` listener and replays responses when ``goto`` is
called.  For ``open_page`` the ``sync_playwright`` driver is a ``MagicMock``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Optional
from unittest.mock import MagicMock

import pytest
from playwright.sync_api import Error as PlaywrightError

from snapshot.config import Settings
from snapshot.errors import BrowserError, NavigationError
from snapshot.scraper.browser import navigate, open_page
from snapshot.scraper.models import DocumentStatus


def _response(status: int, text: str, resource_type: str = "document", frame=None) -> MagicMock:
    response = MagicMock()
    response.status = status
    response.status_text = text
    response.request.resource_type = resource_type
    response.frame = frame
    return response


class FakePage:
    """Records listeners and replays *responses* during ``goto``."""

    def __init__(self, responses: List[MagicMock], returned=None, error: Optional[Exception] = None):
        self.main_frame = object()
        self._responses = responses
        self._returned = returned
        self._error = error
        self.listeners: dict[str, List[Callable]] = {}
        self.visited: List[str] = []

    def on(self, event: str, handler: Callable) -> None:
        self.listeners.setdefault(event, []).append(handler)

    def remove_listener(self, event: str, handler: Callable) -> None:
        self.listeners[event].remove(handler)

    def goto(self, url: str):
        self.visited.append(url)
        for response in self._responses:
            if response.frame is None:
                response.frame = self.main_frame
            for handler in list(self.listeners.get("response", [])):
                handler(response)
        if self._error is not None:
            raise self._error
        return self._returned


class TestNavigate:
    def test_records_main_document_status(self) -> None:
        page = FakePage([_response(200, "OK")])
        status = navigate(page, "https://example.com")

        assert status == DocumentStatus(code=200, text="OK")
        assert page.visited == ["https://example.com"]

    def test_navigates_exactly_once(self) -> None:
        page = FakePage([_response(200, "OK")])
        navigate(page, "https://example.com")
        assert len(page.visited) == 1

    def test_ignores_subresources(self) -> None:
        page = FakePage([
            _response(200, "OK"),
            _response(404, "Not Found", resource_type="image"),
            _response(500, "Error", resource_type="script"),
        ])
        assert navigate(page, "https://example.com").code == 200

    def test_ignores_child_frame_documents(self) -> None:
        page = FakePage([
            _response(200, "OK"),
            _response(403, "Forbidden", frame=object()),
        ])
        assert navigate(page, "https://example.com").code == 200

    def test_redirect_chain_reports_final_document(self) -> None:
        page = FakePage([_response(301, "Moved Permanently"), _response(200, "OK")])
        assert navigate(page, "http://example.com").code == 200

    def test_listener_removed_after_navigation(self) -> None:
        page = FakePage([_response(200, "OK")])
        navigate(page, "https://example.com")
        assert page.listeners["response"] == []

    def test_falls_back_to_goto_response(self) -> None:
        page = FakePage([], returned=_response(204, "No Content"))
        assert navigate(page, "https://example.com") == DocumentStatus(204, "No Content")

    def test_no_response_returns_none(self) -> None:
        page = FakePage([])
        assert navigate(page, "about:blank") is None

    def test_failure_raises_with_status_seen(self) -> None:
        page = FakePage([_response(503, "Service Unavailable")], error=PlaywrightError("net::ERR_ABORTED"))

        with pytest.raises(NavigationError) as info:
            navigate(page, "https://example.com")

        assert info.value.status == DocumentStatus(503, "Service Unavailable")
        assert page.listeners["response"] == []

    def test_failure_without_response_has_no_status(self) -> None:
        page = FakePage([], error=PlaywrightError("net::ERR_NAME_NOT_RESOLVED"))

        with pytest.raises(NavigationError) as info:
            navigate(page, "https://does-not-exist.invalid")

        assert info.value.status is None
        assert "ERR_NAME_NOT_RESOLVED" in str(info.value)


# ---------------------------------------------------------------------------
# open_page
# ---------------------------------------------------------------------------

@pytest.fixture
def fake_playwright(monkeypatch):
    """Patch ``sync_playwright`` so ``start()`` returns a ``MagicMock`` driver."""
    pw = MagicMock(name="playwright")
    starter = MagicMock(name="sync_playwright")
    starter.return_value.start.return_value = pw
    monkeypatch.setattr("snapshot.scraper.browser.sync_playwright", starter)
    return pw


class TestOpenPage:
    def test_launch_and_context_use_settings(self, fake_playwright) -> None:
        config = Settings(
            output_dir=Path("unused"),
            user_agent="TestAgent/1.0",
            viewport_width=800,
            viewport_height=600,
            headless=True,
            ignore_https_errors=True,
            disable_http2=True,
        )
        browser = fake_playwright.chromium.launch.return_value
        context = browser.new_context.return_value

        with open_page(config) as page:
            assert page is context.new_page.return_value

        fake_playwright.chromium.launch.assert_called_once_with(
            headless=True,
            args=["--disable-http2", "--ignore-certificate-errors"],
        )
        browser.new_context.assert_called_once_with(
            user_agent="TestAgent/1.0",
            viewport={"width": 800, "height": 600},
            ignore_https_errors=True,
        )

    def test_timeout_applied_to_both_defaults(self, fake_playwright) -> None:
        config = Settings(output_dir=Path("unused"), navigation_timeout=30.0)

        with open_page(config) as page:
            page.set_default_timeout.assert_called_once_with(30_000.0)
            page.set_default_navigation_timeout.assert_called_once_with(30_000.0)

    def test_headed_mode_passed_through(self, fake_playwright) -> None:
        config = Settings(
            output_dir=Path("unused"),
            headless=False,
            disable_http2=False,
            ignore_https_errors=False,
        )

        with open_page(config):
            pass

        fake_playwright.chromium.launch.assert_called_once_with(headless=False, args=[])

    def test_browser_closed_on_normal_exit(self, fake_playwright) -> None:
        with open_page(Settings(output_dir=Path("unused"))):
            pass

        fake_playwright.chromium.launch.return_value.close.assert_called_once()
        fake_playwright.stop.assert_called_once()

    def test_browser_closed_when_body_raises(self, fake_playwright) -> None:
        with pytest.raises(RuntimeError):
            with open_page(Settings(output_dir=Path("unused"))):
                raise RuntimeError("body failed")

        fake_playwright.chromium.launch.return_value.close.assert_called_once()
        fake_playwright.stop.assert_called_once()

    def test_launch_failure_becomes_browser_error(self, fake_playwright) -> None:
        fake_playwright.chromium.launch.side_effect = PlaywrightError("Executable doesn't exist")

        with pytest.raises(BrowserError, match="Executable doesn't exist"):
            with open_page(Settings(output_dir=Path("unused"))):
                pass

        fake_playwright.stop.assert_called_once()

    def test_context_failure_becomes_browser_error(self, fake_playwright) -> None:
        browser = fake_playwright.chromium.launch.return_value
        browser.new_context.side_effect = PlaywrightError("Target closed")

        with pytest.raises(BrowserError, match="Target closed"):
            with open_page(Settings(output_dir=Path("unused"))):
                pass

        browser.close.assert_called_once()
        fake_playwright.stop.assert_called_once()

    def test_page_setup_failure_becomes_browser_error(self, fake_playwright) -> None:
        context = fake_playwright.chromium.launch.return_value.new_context.return_value
        context.new_page.return_value.set_default_timeout.side_effect = PlaywrightError("closed")

        with pytest.raises(BrowserError):
            with open_page(Settings(output_dir=Path("unused"))):
                pass

    def test_driver_start_failure_becomes_browser_error(self, monkeypatch) -> None:
        starter = MagicMock(name="sync_playwright")
        starter.return_value.start.side_effect = PlaywrightError("driver missing")
        monkeypatch.setattr("snapshot.scraper.browser.sync_playwright", starter)

        with pytest.raises(BrowserError, match="driver missing"):
            with open_page(Settings(output_dir=Path("unused"))):
                pass
