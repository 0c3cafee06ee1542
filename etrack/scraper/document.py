"""Turns a :class:`RawPage` into a queryable :class:`ResultsPage`."""

from __future__ import annotations

from bs4 import BeautifulSoup

from etrack.scraper.models import RawPage, ResultsPage


def parse_page(raw: RawPage) -> ResultsPage:
    """Parse *raw* HTML, keeping its URL as the base URI."""
    return ResultsPage(url=raw.url, soup=BeautifulSoup(raw.html, "html.parser"))


def parse_html(html: str, url: str) -> ResultsPage:
    """Parse an HTML string that was not fetched through :mod:`fetcher`."""
    return parse_page(RawPage(url=url, html=html, status_code=200))
