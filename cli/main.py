"""eTrack scraper CLI — entry-point for scraping and inspecting results pages.

Usage:
    python cli/main.py --help

Commands:
    scrape   → walk every page of a live search and print records as JSON
    parse    → read a saved results page offline
    fields   → list the column headings each field accepts
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from etrack.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import json
from dataclasses import asdict
from typing import Optional

import httpx
import typer

from etrack.scraper.exceptions import PagerNotFoundError, ScraperError

app = typer.Typer(
    name="etrack",
    help="Scrape planning applications from TechnologyOne eTrack portals.",
    no_args_is_help=True,
)


def _echo_record(record) -> None:
    typer.echo(json.dumps(asdict(record)))


# ---------------------------------------------------------------------------
# Live scrape
# ---------------------------------------------------------------------------
@app.command("scrape")
def scrape(
    url: str = typer.Option(..., help="First page of eTrack search results."),
    max_pages: Optional[int] = typer.Option(
        None, "--max-pages", help="Stop after this many pages (0 = no limit)."
    ),
    webguest: Optional[str] = typer.Option(
        None, "--webguest", help="Guest marker used in detail links."
    ),
) -> None:
    """Walk every results page and print one JSON record per line."""
    from etrack.runner import iter_records

    total = 0
    try:
        for record in iter_records(url, max_pages=max_pages, webguest=webguest):
            _echo_record(record)
            total += 1
    except (ScraperError, httpx.HTTPError) as e:
        typer.echo(f"❌ Error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"[scrape] ✅ {total} record(s).", err=True)


# ---------------------------------------------------------------------------
# Offline parse
# ---------------------------------------------------------------------------
@app.command("parse")
def parse(
    file: Path = typer.Option(..., "--file", help="Saved results page (HTML)."),
    url: str = typer.Option(..., help="URL the page was served from."),
) -> None:
    """Print the records and pager state of a saved results page."""
    from etrack.scraper.document import parse_html
    from etrack.scraper.index import scrape_page
    from etrack.scraper.pager import advance, pager_state

    if not file.exists():
        typer.echo(f"❌ No such file: {file}", err=True)
        raise typer.Exit(code=1)

    doc = parse_html(file.read_text(encoding="utf-8"), url)
    try:
        records = list(scrape_page(doc))
        for record in records:
            _echo_record(record)
        typer.echo(f"[parse] Records : {len(records)}", err=True)

        try:
            current, entries = pager_state(doc)
        except PagerNotFoundError:
            typer.echo("[parse] Pager   : (none)", err=True)
            return
        labels = " ".join(entry.text for entry in entries)
        typer.echo(f"[parse] Pager   : {labels}  (current {current})", err=True)

        action = advance(doc)
    except ScraperError as e:
        typer.echo(f"❌ Error: {e}", err=True)
        raise typer.Exit(code=1)

    if action is None:
        typer.echo("[parse] Next    : (last page)", err=True)
    else:
        typer.echo(
            f"[parse] Next    : page {action.target_page} via {action.method} {action.url}",
            err=True,
        )


# ---------------------------------------------------------------------------
# Field vocabulary
# ---------------------------------------------------------------------------
@app.command("fields")
def fields() -> None:
    """List every canonical field and the column headings mapped to it."""
    from etrack.scraper.fields import accepted_headers

    for canonical, headers in accepted_headers().items():
        typer.echo(f"  {canonical.value:<22} {', '.join(headers)}")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
