"""HTTP fetcher for eTrack results pages and pager postbacks.

A traversal should share one client: the portal keeps the search in an
ASP.NET session cookie, so postbacks sent without it land on an empty page.
"""

from __future__ import annotations

from typing import Optional

import httpx

from etrack.config import settings
from etrack.scraper.models import NavigationAction, RawPage


def open_client() -> httpx.Client:
    """Return a configured :class:`httpx.Client`.  The caller closes it."""
    return httpx.Client(
        headers={"User-Agent": settings.user_agent},
        timeout=settings.request_timeout,
        follow_redirects=True,
    )


def _to_raw_page(response: httpx.Response) -> RawPage:
    response.raise_for_status()
    # The final URL after redirects is the base for relative links.
    return RawPage(
        url=str(response.url),
        html=response.text,
        status_code=response.status_code,
    )


def fetch_url(url: str, client: Optional[httpx.Client] = None) -> RawPage:
    """GET *url* and return a :class:`RawPage`.

    Uses *client* when given, otherwise a short-lived one.

    Raises:
        httpx.HTTPStatusError: If the server returns a 4xx/5xx status code.
    """
    if client is None:
        with open_client() as own_client:
            return fetch_url(url, own_client)
    return _to_raw_page(client.get(url))


def submit(action: NavigationAction, client: httpx.Client) -> RawPage:
    """Send the request described by *action* and return the resulting page.

    Raises:
        httpx.HTTPStatusError: If the server returns a 4xx/5xx status code.
    """
    if action.method == "GET":
        response = client.get(action.url, params=action.data or None)
    else:
        response = client.request(action.method, action.url, data=action.data)
    return _to_raw_page(response)
