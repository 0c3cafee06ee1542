"""Tests for results-table shape detection and cell extraction."""

from __future__ import annotations

import pytest

from etrack.scraper.document import parse_html
from etrack.scraper.exceptions import TableNotFoundError
from etrack.scraper.table import extract_rows, extract_table

_URL = "https://etrack.example.gov.au/eTrack/eTrackApplicationSearchResults.aspx"

# ---------------------------------------------------------------------------
# Fixtures / constants
# ---------------------------------------------------------------------------

_GRID_HTML = """\
<html><body>
<table class="grid">
  <tr class="headerRow">
    <th><a href="javascript:__doPostBack('grid','Sort$Ref')">Application Number</a></th>
    <th>Address</th><th>Description</th><th>Date Received</th>
  </tr>
  <tr class="normalRow">
    <td><a href="#">DA-123</a></td><td> 1 Main St </td><td>Demolish shed</td><td>01/02/2023</td>
  </tr>
  <tr class="alternateRow">
    <td>DA-124</td><td>2 High St</td><td>New pool</td><td>03/02/2023</td>
  </tr>
  <tr class="pagerRow">
    <td colspan="4"><table><tr>
      <td><span>1</span></td><td><a href="#">2</a></td><td><a href="#">3</a></td><td><a href="#">4</a></td>
    </tr></table></td>
  </tr>
</table>
</body></html>
"""

_KEY_VALUE_HTML = """\
<html><body>
<table class="grid">
  <tr><td>Application ID</td><td> DA-1 </td></tr>
  <tr><td>Lodged</td><td>05/06/2022</td></tr>
  <tr><td>Site Address</td><td>1 Main St</td></tr>
</table>
<table class="grid">
  <tr><td>Site Address</td><td>2 High St</td></tr>
  <tr><td>Application ID</td><td>DA-2</td></tr>
  <tr><td colspan="2">&nbsp;</td></tr>
  <tr><td>Lodged</td><td>06/06/2022</td></tr>
</table>
</body></html>
"""

_NO_GRID_HTML = "<html><body><p>Your search returned no results.</p></body></html>"


class TestSingleGrid:
    def test_one_row_per_data_row(self) -> None:
        rows = list(extract_rows(parse_html(_GRID_HTML, _URL)))
        assert rows == [
            {
                "Application Number": "DA-123",
                "Address": "1 Main St",
                "Description": "Demolish shed",
                "Date Received": "01/02/2023",
            },
            {
                "Application Number": "DA-124",
                "Address": "2 High St",
                "Description": "New pool",
                "Date Received": "03/02/2023",
            },
        ]

    def test_pager_row_is_not_data(self) -> None:
        # The nested pager table has four cells, the same as the header.
        rows = list(extract_rows(parse_html(_GRID_HTML, _URL)))
        assert all(row["Application Number"].startswith("DA-") for row in rows)

    def test_header_row_from_th_without_class(self) -> None:
        html = """\
<table class="grid">
  <tr><th>ID</th><th>Lodged</th></tr>
  <tr><td>DA-9</td><td>09/09/2021</td></tr>
</table>
"""
        rows = list(extract_rows(parse_html(html, _URL)))
        assert rows == [{"ID": "DA-9", "Lodged": "09/09/2021"}]

    def test_grid_without_header_raises(self) -> None:
        html = '<table class="grid"><tr><td>DA-9</td></tr></table>'
        doc = parse_html(html, _URL)
        with pytest.raises(TableNotFoundError):
            extract_table(doc.select("table.grid")[0])

    def test_rows_of_other_shapes_skipped(self) -> None:
        html = """\
<table class="grid">
  <tr class="headerRow"><th>ID</th><th>Lodged</th></tr>
  <tr><td colspan="2">No records to display.</td></tr>
  <tr><td>DA-9</td><td>09/09/2021</td></tr>
  <tr><td>DA-10</td><td>10/09/2021</td><td>extra</td></tr>
</table>
"""
        rows = list(extract_rows(parse_html(html, _URL)))
        assert rows == [{"ID": "DA-9", "Lodged": "09/09/2021"}]

    def test_empty_grid_yields_nothing(self) -> None:
        html = '<table class="grid"><tr class="headerRow"><th>ID</th></tr></table>'
        assert list(extract_rows(parse_html(html, _URL))) == []


class TestKeyValueGrids:
    def test_one_row_per_table(self) -> None:
        rows = list(extract_rows(parse_html(_KEY_VALUE_HTML, _URL)))
        assert len(rows) == 2

    def test_row_order_within_table_does_not_matter(self) -> None:
        rows = list(extract_rows(parse_html(_KEY_VALUE_HTML, _URL)))
        assert rows[0] == {
            "Application ID": "DA-1",
            "Lodged": "05/06/2022",
            "Site Address": "1 Main St",
        }
        assert rows[1] == {
            "Application ID": "DA-2",
            "Lodged": "06/06/2022",
            "Site Address": "2 High St",
        }


class TestNoGrid:
    def test_raises_before_iteration(self) -> None:
        with pytest.raises(TableNotFoundError):
            extract_rows(parse_html(_NO_GRID_HTML, _URL))


class TestRepeatability:
    @pytest.mark.parametrize("html", [_GRID_HTML, _KEY_VALUE_HTML])
    def test_extracting_twice_gives_equal_rows(self, html: str) -> None:
        doc = parse_html(html, _URL)
        assert list(extract_rows(doc)) == list(extract_rows(doc))
