"""Centralised settings for Page Snapshot.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

_DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, "
    "like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    output_dir: Path = field(
        default_factory=lambda: Path(os.environ.get("SNAPSHOT_OUTPUT_DIR", "scraped_data"))
    )

    # ------------------------------------------------------------------
    # Browser
    # ------------------------------------------------------------------
    navigation_timeout: float = field(
        default_factory=lambda: float(os.environ.get("NAVIGATION_TIMEOUT", "120.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get("BROWSER_USER_AGENT", _DEFAULT_USER_AGENT)
    )
    viewport_width: int = field(
        default_factory=lambda: int(os.environ.get("VIEWPORT_WIDTH", "1920"))
    )
    viewport_height: int = field(
        default_factory=lambda: int(os.environ.get("VIEWPORT_HEIGHT", "1080"))
    )
    headless: bool = field(default_factory=lambda: _env_flag("BROWSER_HEADLESS", True))
    # Chromium flags; see browser_args
    ignore_https_errors: bool = field(
        default_factory=lambda: _env_flag("IGNORE_HTTPS_ERRORS", True)
    )
    disable_http2: bool = field(default_factory=lambda: _env_flag("DISABLE_HTTP2", True))

    @property
    def timeout_ms(self) -> float:
        """Navigation timeout in milliseconds, as Playwright expects it."""
        return self.navigation_timeout * 1000

    @property
    def browser_args(self) -> list[str]:
        """Chromium command-line flags derived from the boolean settings."""
        args: list[str] = []
        if self.disable_http2:
            args.append("--disable-http2")
        if self.ignore_https_errors:
            args.append("--ignore-certificate-errors")
        return args

    def ensure_output_dir(self) -> None:
        """Create the root output directory if it does not exist."""
        self.output_dir.mkdir(parents=True, exist_ok=True)


# Module-level singleton — import this everywhere:
#   from snapshot.config import settings
settings = Settings()
