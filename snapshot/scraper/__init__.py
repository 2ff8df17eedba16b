"""Scraper package — browser session, navigation status and artifact extraction."""

from snapshot.scraper.browser import navigate, open_page
from snapshot.scraper.extractor import capture_screenshot, extract_html, extract_links
from snapshot.scraper.models import CaptureResult, DocumentStatus, StatusCategory
from snapshot.scraper.status import classify_status, describe_status

__all__ = [
    "open_page",
    "navigate",
    "extract_html",
    "capture_screenshot",
    "extract_links",
    "classify_status",
    "describe_status",
    "CaptureResult",
    "DocumentStatus",
    "StatusCategory",
]
