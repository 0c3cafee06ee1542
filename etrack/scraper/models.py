"""Data models for the scraper pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from bs4 import BeautifulSoup, Tag

ELLIPSIS = "..."


@dataclass
class RawPage:
    """The raw HTTP response for a single results page fetch."""

    url: str
    html: str
    status_code: int


@dataclass(eq=False)
class ResultsPage:
    """A parsed results page and the URL it was served from.

    ``url`` is the base URI used to resolve relative links (detail pages,
    postback form actions).
    """

    url: str
    soup: BeautifulSoup

    def select(self, selector: str) -> List[Tag]:
        """Return every element matching the CSS *selector*, in document order."""
        return self.soup.select(selector)


@dataclass(frozen=True)
class Record:
    """One planning application, in the shape every portal variant maps to."""

    council_reference: str
    address: Optional[str]
    description: Optional[str]
    info_url: str
    date_received: str


@dataclass
class PagerEntry:
    """A single control in the pager row: a page number or an ellipsis.

    ``element`` is the ``<a>`` or ``<span>`` the entry was read from; it is
    ``None`` for entries built by hand.
    """

    text: str
    element: Optional[Tag] = None

    @property
    def is_ellipsis(self) -> bool:
        return self.text == ELLIPSIS

    @property
    def number(self) -> Optional[int]:
        """The page number shown, or ``None`` for an ellipsis or other label."""
        if self.text.isdecimal():
            return int(self.text)
        return None


@dataclass
class NavigationAction:
    """A request that activates a pager control and returns the next page."""

    url: str
    method: str = "POST"
    data: Dict[str, str] = field(default_factory=dict)
    target_page: Optional[int] = None
