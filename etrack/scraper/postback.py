"""ASP.NET postback requests for eTrack pager controls.

Pager links look like::

    <a href="javascript:__doPostBack('ctl00$Content$...$grdWebGridTabularView','Page$5')">5</a>

Following one means resubmitting the page's form with ``__EVENTTARGET`` and
``__EVENTARGUMENT`` set to the two quoted arguments, along with the hidden
view-state fields the server needs to rebuild the grid.
"""

from __future__ import annotations

import re
from typing import Dict, Optional, Tuple
from urllib.parse import urljoin

from bs4 import Tag

from etrack.scraper.exceptions import PostbackError
from etrack.scraper.models import NavigationAction, ResultsPage

_POSTBACK_RE = re.compile(r"__doPostBack\(\s*'([^']*)'\s*,\s*'([^']*)'\s*\)")

# Input types that are never submitted with a form unless clicked.
_SKIPPED_INPUT_TYPES = {"submit", "button", "image", "reset", "file"}


def parse_postback_href(href: str) -> Optional[Tuple[str, str]]:
    """Return ``(event_target, event_argument)`` for a ``__doPostBack`` href."""
    match = _POSTBACK_RE.search(href)
    if match is None:
        return None
    return match.group(1), match.group(2)


def form_fields(form: Tag) -> Dict[str, str]:
    """Collect the name/value pairs a browser would submit for *form*."""
    data: Dict[str, str] = {}

    for inp in form.find_all("input"):
        name = inp.get("name")
        input_type = (inp.get("type") or "text").lower()
        if not name or input_type in _SKIPPED_INPUT_TYPES:
            continue
        if input_type in ("checkbox", "radio") and not inp.has_attr("checked"):
            continue
        data[name] = inp.get("value", "on" if input_type in ("checkbox", "radio") else "")

    for select in form.find_all("select"):
        name = select.get("name")
        if not name:
            continue
        option = select.find("option", selected=True) or select.find("option")
        if option is not None:
            data[name] = option.get("value", option.get_text())

    for textarea in form.find_all("textarea"):
        name = textarea.get("name")
        if name:
            data[name] = textarea.get_text()

    return data


def postback_action(
    doc: ResultsPage,
    control: Tag,
    target_page: Optional[int] = None,
) -> NavigationAction:
    """Build the request that activates the pager *control* on *doc*.

    Raises:
        PostbackError: If *control* has no href, or it is a postback and
            there is no form on the page to submit.
    """
    href = (control.get("href") or "").strip()
    if not href:
        raise PostbackError(f"Pager control {control.get_text().strip()!r} is not a link")

    postback = parse_postback_href(href)
    if postback is None:
        return NavigationAction(
            url=urljoin(doc.url, href),
            method="GET",
            target_page=target_page,
        )

    form = control.find_parent("form") or doc.soup.find("form")
    if form is None:
        raise PostbackError(f"No form to post back to on {doc.url}")

    event_target, event_argument = postback
    data = form_fields(form)
    data["__EVENTTARGET"] = event_target
    data["__EVENTARGUMENT"] = event_argument

    return NavigationAction(
        url=urljoin(doc.url, form.get("action") or doc.url),
        method=(form.get("method") or "POST").upper(),
        data=data,
        target_page=target_page,
    )
