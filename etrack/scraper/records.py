"""Reshapes raw table rows into :class:`Record` objects."""

from __future__ import annotations

import re
from datetime import datetime
from typing import Mapping, Optional
from urllib.parse import urlencode, urljoin

from etrack.scraper.exceptions import InvalidDateError, MissingFieldError
from etrack.scraper.fields import CanonicalField, normalise_row
from etrack.scraper.models import Record

DEFAULT_WEBGUEST = "P1.WEBGUEST"
DEFAULT_DETAIL_VIEW = "$P1.ETR.APPDET.VIW"
DEFAULT_DETAIL_PATH = "eTrackApplicationDetails.aspx"

_DATE_RE = re.compile(r"\d{2}/\d{2}/\d{4}")
_WHITESPACE_RE = re.compile(r"\s+")


def _required(fields: Mapping[CanonicalField, str], name: CanonicalField) -> str:
    try:
        return fields[name]
    except KeyError:
        raise MissingFieldError(name.value) from None


def parse_date_received(value: str) -> str:
    """Convert a ``DD/MM/YYYY`` date to ISO format.

    No other format is accepted.

    Raises:
        InvalidDateError: If *value* is not exactly ``DD/MM/YYYY`` or is not a
            real calendar date.
    """
    if not _DATE_RE.fullmatch(value):
        raise InvalidDateError(value)
    try:
        return datetime.strptime(value, "%d/%m/%Y").date().isoformat()
    except ValueError:
        raise InvalidDateError(value) from None


def unescape_reference(value: str) -> str:
    """Undo the portal doubling up backslashes in application references."""
    return value.replace("\\\\", "\\")


def squeeze_whitespace(value: str) -> str:
    return _WHITESPACE_RE.sub(" ", value)


def detail_url(
    base_uri: str,
    council_reference: str,
    webguest: str = DEFAULT_WEBGUEST,
    view: str = DEFAULT_DETAIL_VIEW,
    detail_path: str = DEFAULT_DETAIL_PATH,
) -> str:
    """Absolute URL of the application detail page for *council_reference*.

    ``r`` and ``f`` give guest access to the page without a login or session.
    Parameters are written in sorted order, as the portal's own links are.
    """
    params = {
        "r": webguest,
        "f": view,
        "ApplicationId": council_reference,
    }
    query = urlencode(sorted(params.items()))
    return urljoin(base_uri, f"{detail_path}?{query}")


def build_record(
    row: Mapping[str, str],
    base_uri: str,
    webguest: str = DEFAULT_WEBGUEST,
    view: str = DEFAULT_DETAIL_VIEW,
    detail_path: str = DEFAULT_DETAIL_PATH,
) -> Record:
    """Build a :class:`Record` from one raw ``{heading: text}`` row.

    Args:
        row: Raw row as produced by :func:`~etrack.scraper.table.extract_rows`.
        base_uri: URL of the results page, used to resolve ``info_url``.
        webguest: Guest session marker for the detail link.
        view: Detail view identifier for the detail link.
        detail_path: Detail page path relative to *base_uri*.

    Raises:
        UnknownFieldError: If any heading in *row* is not recognised.
        MissingFieldError: If the reference or received date column is absent.
        InvalidDateError: If the received date is not ``DD/MM/YYYY``.
    """
    fields = normalise_row(row)

    council_reference = unescape_reference(
        _required(fields, CanonicalField.COUNCIL_REFERENCE)
    )
    date_received = parse_date_received(_required(fields, CanonicalField.DATE_RECEIVED))

    description: Optional[str] = fields.get(CanonicalField.DESCRIPTION)
    if description is not None:
        description = squeeze_whitespace(description)

    return Record(
        council_reference=council_reference,
        address=fields.get(CanonicalField.ADDRESS),
        description=description,
        info_url=detail_url(base_uri, council_reference, webguest, view, detail_path),
        date_received=date_received,
    )
