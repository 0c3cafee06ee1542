"""Column-name normalisation across eTrack portal variants.

Every council runs the same portal with its own column headings.  This
module maps each heading we have seen to one :class:`CanonicalField`.  An
unseen heading raises :class:`UnknownFieldError` rather than being dropped,
so a new portal variant shows up as a failure instead of missing data.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Mapping, Tuple

from etrack.scraper.exceptions import UnknownFieldError


class CanonicalField(str, Enum):
    COUNCIL_REFERENCE = "council_reference"
    DATE_RECEIVED = "date_received"
    DESCRIPTION = "description"
    ADDRESS = "address"
    GROUP_DESCRIPTION = "group_description"
    CATEGORY_DESCRIPTION = "category_description"
    APPLICANT_NAMES = "applicant_names"
    STATUS = "status"
    APPLICATION_TYPE = "application_type"
    PROJECT_TYPE = "project_type"
    # Can hold address and description, in no consistent order. Kept whole.
    DETAILS = "details"
    WORK_COMMENCED = "work_commenced"
    DETERMINED_DATE = "determined_date"
    WARD = "ward"
    DEVELOPMENT_COST = "development_cost"
    PRIORITY = "priority"
    NUMBER_OF_OBJECTIONS = "number_of_objections"
    PROPERTY_ID = "property_id"


_ACCEPTED_HEADERS: Dict[CanonicalField, Tuple[str, ...]] = {
    CanonicalField.COUNCIL_REFERENCE: (
        "Application Link",
        "ID",
        "Application Number",
        "Application ID",
        "Application",
        "Permit No.",
    ),
    CanonicalField.DATE_RECEIVED: (
        "Lodgement Date",
        "Lodged",
        "Submitted Date",
        "Date Received",
        "Application Received",
    ),
    CanonicalField.DESCRIPTION: ("Description", "Proposal"),
    CanonicalField.ADDRESS: (
        "Formatted Address",
        "Property Address",
        "Address",
        "Site Address",
    ),
    CanonicalField.GROUP_DESCRIPTION: ("Group Description", "Group"),
    CanonicalField.CATEGORY_DESCRIPTION: (
        "Category Description",
        "Category",
        "Classification",
    ),
    CanonicalField.APPLICANT_NAMES: (
        "Applicant Names",
        "Applicant",
        "Applicant Name(s)",
        "Applicant Details",
    ),
    CanonicalField.STATUS: (
        "Status",
        "Stage/Decision",
        "Decision",
        "Current Stage or Decision",
        "Stage",
    ),
    CanonicalField.APPLICATION_TYPE: ("Application Type", "Application Group"),
    CanonicalField.PROJECT_TYPE: ("Project Type",),
    CanonicalField.DETAILS: ("Details",),
    CanonicalField.WORK_COMMENCED: ("Work Commenced",),
    CanonicalField.DETERMINED_DATE: (
        "Determined Date",
        "Date Determined",
        "Determination Date",
    ),
    CanonicalField.WARD: ("Ward",),
    CanonicalField.DEVELOPMENT_COST: ("Development Cost", "Estimated Cost"),
    CanonicalField.PRIORITY: ("Priority",),
    CanonicalField.NUMBER_OF_OBJECTIONS: ("Objections Received",),
    CanonicalField.PROPERTY_ID: ("Property ID",),
}

_FIELD_BY_HEADER: Dict[str, CanonicalField] = {
    header: canonical
    for canonical, headers in _ACCEPTED_HEADERS.items()
    for header in headers
}


def normalise_name(header: str, value: str) -> CanonicalField:
    """Return the canonical field for the column *header*.

    *value* is only used in the error message, to help identify which
    portal produced the heading.

    Raises:
        UnknownFieldError: If *header* is not a heading any known variant uses.
    """
    try:
        return _FIELD_BY_HEADER[header]
    except KeyError:
        raise UnknownFieldError(header, value) from None


def normalise_row(row: Mapping[str, str]) -> Dict[CanonicalField, str]:
    """Re-key a raw row by canonical field.  Later columns win on a clash."""
    return {normalise_name(header, value): value for header, value in row.items()}


def accepted_headers() -> Dict[CanonicalField, Tuple[str, ...]]:
    """Every canonical field with the headings that map to it."""
    return dict(_ACCEPTED_HEADERS)
