"""Cell extraction from eTrack ``table.grid`` results.

Portals lay results out in one of two ways:

* a single grid with a header row and one data row per application;
* one small two-column grid per application, each row a heading/value pair.

:func:`extract_rows` tells them apart by counting grids and yields a raw
``{heading: text}`` mapping per application either way.
"""

from __future__ import annotations

from typing import Dict, Iterator, Optional

from bs4 import Tag

from etrack.scraper.exceptions import TableNotFoundError
from etrack.scraper.models import ResultsPage

GRID_SELECTOR = "table.grid"

# Rows of a GridView that never carry data.
_CHROME_ROW_CLASSES = {"headerRow", "pagerRow", "footerRow"}

RawRow = Dict[str, str]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _cell_text(cell: Tag) -> str:
    return cell.get_text().strip()


def _own_rows(table: Tag) -> Iterator[Tag]:
    """Rows of *table* itself, skipping rows of tables nested inside it.

    GridView renders the pager as a nested table inside ``tr.pagerRow``.
    """
    for tr in table.find_all("tr"):
        if tr.find_parent("table") is table:
            yield tr


def _header_row(table: Tag) -> Optional[Tag]:
    header = table.select_one("tr.headerRow")
    if header is not None:
        return header
    for tr in _own_rows(table):
        if tr.find("th") is not None:
            return tr
    return None


def _key_value_row(table: Tag) -> RawRow:
    """Fold a two-column heading/value grid into a single raw row."""
    row: RawRow = {}
    for tr in table.find_all("tr"):
        cells = tr.find_all("td")
        if len(cells) < 2:
            continue
        row[_cell_text(cells[0])] = _cell_text(cells[1])
    return row


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_table(table: Tag) -> Iterator[RawRow]:
    """Yield one raw row per data row of a conventional header/data grid.

    Headings come from ``tr.headerRow`` (or the first row holding ``<th>``
    cells).  A row is data when it is not header, pager or footer chrome and
    has exactly one cell per heading.  Any other row is skipped without
    error: GridView renders its "no records" message and spacer rows as a
    single spanning cell.

    Raises:
        TableNotFoundError: If the grid has no header row.
    """
    header = _header_row(table)
    if header is None:
        raise TableNotFoundError("Results grid has no header row")
    headings = [_cell_text(cell) for cell in header.find_all(["th", "td"])]
    return _data_rows(table, header, headings)


def _data_rows(table: Tag, header: Tag, headings: list[str]) -> Iterator[RawRow]:
    for tr in _own_rows(table):
        if tr is header or _CHROME_ROW_CLASSES.intersection(tr.get("class") or []):
            continue
        cells = tr.find_all("td", recursive=False)
        if len(cells) != len(headings):
            continue
        yield dict(zip(headings, (_cell_text(cell) for cell in cells)))


def extract_rows(doc: ResultsPage) -> Iterator[RawRow]:
    """Yield a raw ``{heading: text}`` row for every application on *doc*.

    The shape of the page is decided immediately; rows are produced lazily.
    Nothing is cached, so calling this again on the same page yields the same
    rows.

    Raises:
        TableNotFoundError: If *doc* has no ``table.grid`` at all.
    """
    tables = doc.select(GRID_SELECTOR)
    if not tables:
        raise TableNotFoundError(f"Couldn't find a results table on {doc.url}")

    if len(tables) > 1:
        # One heading/value grid per application
        return (_key_value_row(table) for table in tables)

    return extract_table(tables[0])
