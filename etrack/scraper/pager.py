"""Pagination over an eTrack results grid.

The pager row shows the current page as a ``<span>`` and a window of other
pages as links.  Pages outside the window are collapsed behind a ``...`` link
at either end, which jumps to the page just beyond the window::

    ...  11  12  [13]  14  15  ...

Nothing is remembered between pages: every query reads the document again.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from bs4 import Tag

from etrack.scraper.exceptions import PagerNotFoundError
from etrack.scraper.models import NavigationAction, PagerEntry, ResultsPage
from etrack.scraper.postback import postback_action

PAGER_ROW_SELECTOR = "tr.pagerRow"


def _pager_row(doc: ResultsPage) -> Optional[Tag]:
    # Grids with a pager above and below repeat the same row; read the first.
    return doc.soup.select_one(PAGER_ROW_SELECTOR)


def current_page_number(doc: ResultsPage) -> int:
    """Return the page number the pager marks as current.

    Raises:
        PagerNotFoundError: If there is no pager row, it has no current-page
            indicator, or the indicator is not a number.
    """
    row = _pager_row(doc)
    if row is None:
        raise PagerNotFoundError(f"No pager row on {doc.url}")

    text = "".join(span.get_text() for span in row.select("td span")).strip()
    if not text.isdecimal():
        raise PagerNotFoundError(f"No current page number in pager row (got {text!r})")
    return int(text)


def pager_entries(doc: ResultsPage) -> List[PagerEntry]:
    """Every link and span in the pager row, in the order they are shown."""
    row = _pager_row(doc)
    if row is None:
        return []
    return [
        PagerEntry(text=control.get_text().strip(), element=control)
        for control in row.select("td a, td span")
    ]


def pager_state(doc: ResultsPage) -> Tuple[int, List[PagerEntry]]:
    """Current page number and visible entries, read fresh from *doc*."""
    return current_page_number(doc), pager_entries(doc)


def select_entry(entries: Sequence[PagerEntry], target: int) -> Optional[PagerEntry]:
    """Pick the entry that leads to page *target*, if any is shown.

    The visible page numbers span ``min_page..max_page`` (both 0 when no
    entry is a number).  Resolution, in order:

    a. one before the window, behind a leading ``...`` → that ellipsis;
    b. inside the window → the entry labelled with *target*, if present;
    c. one after the window, behind a trailing ``...`` → that ellipsis;
    d. anything else → ``None``.
    """
    if not entries:
        return None

    numbers = [entry.number for entry in entries if not entry.is_ellipsis]
    numbers = [n for n in numbers if n is not None]
    min_page = min(numbers, default=0)
    max_page = max(numbers, default=0)

    if target == min_page - 1 and entries[0].is_ellipsis:
        return entries[0]
    if min_page <= target <= max_page:
        wanted = str(target)
        return next((entry for entry in entries if entry.text == wanted), None)
    if target == max_page + 1 and entries[-1].is_ellipsis:
        return entries[-1]
    return None


def find_control_for_page(doc: ResultsPage, target: int) -> Optional[Tag]:
    """Return the pager element leading to page *target* (if it's there)."""
    entry = select_entry(pager_entries(doc), target)
    if entry is None:
        return None
    return entry.element


def advance(doc: ResultsPage) -> Optional[NavigationAction]:
    """Build the request for the page after the current one.

    Returns ``None`` when the pager offers no way forward, i.e. *doc* is the
    last page.

    Raises:
        PagerNotFoundError: If *doc* has no pager row.
        PostbackError: If the control found cannot be activated.
    """
    target = current_page_number(doc) + 1
    control = find_control_for_page(doc, target)
    if control is None:
        return None
    return postback_action(doc, control, target_page=target)
