"""High-level runner that walks every page of an eTrack search.

``iter_records`` is the single public function in this module.  It wires
together the fetcher, the page scraper and the pager, and prints a short
progress log to stderr so stdout stays free for the records themselves.
"""

from __future__ import annotations

import sys
import time
from typing import Iterator, Optional

import httpx

from etrack.config import settings
from etrack.scraper.document import parse_page
from etrack.scraper.exceptions import PagerNotFoundError
from etrack.scraper.fetcher import fetch_url, open_client, submit
from etrack.scraper.index import scrape_page
from etrack.scraper.models import Record, ResultsPage
from etrack.scraper.pager import advance, current_page_number


def _log(message: str) -> None:
    print(f"[scrape] {message}", file=sys.stderr)


def _page_number(doc: ResultsPage) -> Optional[int]:
    try:
        return current_page_number(doc)
    except PagerNotFoundError:
        return None


def iter_records(
    url: str,
    max_pages: Optional[int] = None,
    webguest: Optional[str] = None,
    client: Optional[httpx.Client] = None,
) -> Iterator[Record]:
    """Yield every record of the search whose first results page is *url*.

    Pages are requested one after another: each postback needs the form
    state of the page before it.  The walk stops when:

    * the pager offers no next page;
    * the page has no pager row at all (a single page of results);
    * *max_pages* pages have been read (``None`` → ``settings.max_pages``,
      ``0`` → no limit);
    * a postback does not move past the page it was sent from.

    Args:
        url: First page of search results.
        max_pages: Page cap for this walk.
        webguest: Override for the detail-link guest marker.
        client: Shared HTTP client.  A private one is opened (and closed)
            when omitted.

    Raises:
        httpx.HTTPStatusError: If any page request fails.
        ScraperError: If a page cannot be read.
    """
    if max_pages is None:
        max_pages = settings.max_pages

    own_client = client is None
    if client is None:
        client = open_client()

    try:
        _log(f"Fetching {url!r} …")
        raw = fetch_url(url, client)
        pages_read = 0
        previous: Optional[int] = None

        while True:
            doc = parse_page(raw)
            page_no = _page_number(doc)

            if previous is not None and page_no is not None and page_no <= previous:
                _log(f"postback returned page {page_no} again; stopping.")
                return

            count = 0
            for record in scrape_page(doc, webguest=webguest):
                count += 1
                yield record
            pages_read += 1
            _log(f"page {page_no or pages_read}: {count} record(s).")

            if max_pages and pages_read >= max_pages:
                _log(f"reached page limit ({max_pages}).")
                return

            if page_no is None:
                _log("no pager row; single page of results.")
                return

            action = advance(doc)
            if action is None:
                _log("last page reached.")
                return

            previous = page_no
            time.sleep(settings.rate_limit_delay)
            raw = submit(action, client)
    finally:
        if own_client:
            client.close()
