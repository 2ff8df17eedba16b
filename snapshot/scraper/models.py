"""Data models for the capture pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional


@dataclass
class DocumentStatus:
    """HTTP status of the main document response for a navigation."""

    code: int
    text: str = ""


@dataclass
class StatusCategory:
    """Human-readable classification of an HTTP status code."""

    label: str
    message: str
    is_error: bool


@dataclass
class CaptureResult:
    """Outcome of a single capture run.

    ``saved`` maps an artifact name (``html``, ``screenshot``, ``links``) to the
    file it was written to; ``failures`` maps it to the error message instead.
    """

    url: str
    output_dir: Path
    status: Optional[DocumentStatus] = None
    saved: Dict[str, Path] = field(default_factory=dict)
    failures: Dict[str, str] = field(default_factory=dict)
    link_count: int = 0

    @property
    def ok(self) -> bool:
        return not self.failures
