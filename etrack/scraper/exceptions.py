"""Errors raised while reading an eTrack results page."""

from __future__ import annotations


class ScraperError(Exception):
    """Base class for everything the scraper raises on a malformed page."""


class TableNotFoundError(ScraperError):
    """The page has no ``table.grid``, so it is not a results listing."""


class UnknownFieldError(ScraperError):
    """A column header that none of the known portal variants use."""

    def __init__(self, header: str, value: str) -> None:
        super().__init__(f"Unknown name {header!r} with value {value!r}")
        self.header = header
        self.value = value


class MissingFieldError(ScraperError):
    """A required field has no column in the row."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Row has no column for required field {field!r}")
        self.field = field


class InvalidDateError(ScraperError):
    """A received date that is not ``DD/MM/YYYY``."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Expected a DD/MM/YYYY date, got {value!r}")
        self.value = value


class PagerNotFoundError(ScraperError):
    """The pager row, or its current-page indicator, is missing."""


class PostbackError(ScraperError):
    """A pager control that cannot be turned into a request."""
