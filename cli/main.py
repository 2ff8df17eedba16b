"""Page Snapshot CLI — capture one URL into a timestamped folder.

Usage:
    python cli/main.py https://example.com
    snapshot https://example.com --output captures --timeout 60

Writes ``page.html``, ``screenshot.png`` and ``links.txt`` into
``<output>/<YYYY-MM-DD_HH-MM-SS>_<hostname>/``.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from snapshot.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working
# directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from dataclasses import replace
from typing import Optional

import typer

from snapshot.config import settings
from snapshot.errors import SnapshotError
from snapshot.runner import capture_url

app = typer.Typer(
    name="snapshot",
    help="Capture the HTML, a full-page screenshot and the links of a web page.",
    add_completion=False,
)


def _echo_err(message: str) -> None:
    typer.echo(message, err=True)


@app.command()
def capture(
    url: str = typer.Argument(..., help="URL of the page to capture."),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Root folder for captures (default: $SNAPSHOT_OUTPUT_DIR)."
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", help="Browser timeout in seconds (default: $NAVIGATION_TIMEOUT)."
    ),
    headed: bool = typer.Option(False, "--headed", help="Show the browser window."),
) -> None:
    """Navigate to URL and save page.html, screenshot.png and links.txt."""
    config = settings
    if output is not None:
        config = replace(config, output_dir=output)
    if timeout is not None:
        config = replace(config, navigation_timeout=timeout)
    if headed:
        config = replace(config, headless=False)

    try:
        result = capture_url(url, config=config, echo=typer.echo, echo_err=_echo_err)
    except SnapshotError as exc:
        typer.echo(f"❌ {exc}", err=True)
        raise typer.Exit(code=1)

    if result.ok:
        typer.echo(f"✅ Capture complete: {result.output_dir}")
    else:
        failed = ", ".join(sorted(result.failures))
        typer.echo(f"⚠️  Capture finished with failures ({failed}): {result.output_dir}", err=True)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
