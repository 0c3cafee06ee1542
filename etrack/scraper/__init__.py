"""Scraper package — eTrack results extraction & pagination."""

from etrack.scraper.document import parse_html, parse_page
from etrack.scraper.exceptions import (
    InvalidDateError,
    MissingFieldError,
    PagerNotFoundError,
    PostbackError,
    ScraperError,
    TableNotFoundError,
    UnknownFieldError,
)
from etrack.scraper.fetcher import fetch_url, open_client, submit
from etrack.scraper.fields import CanonicalField, normalise_name
from etrack.scraper.index import scrape_page
from etrack.scraper.models import NavigationAction, PagerEntry, RawPage, Record, ResultsPage
from etrack.scraper.pager import advance, current_page_number, find_control_for_page
from etrack.scraper.records import build_record
from etrack.scraper.table import extract_rows

__all__ = [
    "parse_html",
    "parse_page",
    "fetch_url",
    "open_client",
    "submit",
    "normalise_name",
    "extract_rows",
    "build_record",
    "scrape_page",
    "current_page_number",
    "find_control_for_page",
    "advance",
    "CanonicalField",
    "NavigationAction",
    "PagerEntry",
    "RawPage",
    "Record",
    "ResultsPage",
    "ScraperError",
    "TableNotFoundError",
    "UnknownFieldError",
    "MissingFieldError",
    "InvalidDateError",
    "PagerNotFoundError",
    "PostbackError",
]
