"""Records from a single page of eTrack search results."""

from __future__ import annotations

from typing import Iterator, Optional

from etrack.config import settings
from etrack.scraper.models import Record, ResultsPage
from etrack.scraper.records import build_record
from etrack.scraper.table import extract_rows


def scrape_page(
    doc: ResultsPage,
    webguest: Optional[str] = None,
    view: Optional[str] = None,
    detail_path: Optional[str] = None,
) -> Iterator[Record]:
    """Yield a :class:`Record` for every application listed on *doc*.

    Detail-link parameters default to the values in
    :data:`etrack.config.settings`.
    """
    webguest = webguest or settings.etrack_webguest
    view = view or settings.etrack_detail_view
    detail_path = detail_path or settings.etrack_detail_path

    for row in extract_rows(doc):
        yield build_record(row, doc.url, webguest, view, detail_path)
