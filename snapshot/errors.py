"""Exceptions raised by the capture pipeline."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from snapshot.scraper.models import DocumentStatus


class SnapshotError(Exception):
    """Base class for every error raised by Page Snapshot."""


class InvalidURLError(SnapshotError):
    """The target URL could not be parsed or lacks a scheme or host."""


class NavigationError(SnapshotError):
    """The browser failed to load the target page.

    ``status`` holds whatever main document response was seen before the
    failure (``None`` when the server never answered).
    """

    def __init__(self, message: str, status: Optional[DocumentStatus] = None) -> None:
        super().__init__(message)
        self.status = status


class ExtractionError(SnapshotError):
    """A single artifact (HTML, screenshot or links) could not be produced."""

    def __init__(self, artifact: str, message: str) -> None:
        super().__init__(f"{artifact}: {message}")
        self.artifact = artifact
        self.detail = message


class BrowserError(SnapshotError):
    """The headless browser could not be started or its page set up."""


class OutputError(SnapshotError):
    """The output folder could not be created."""
