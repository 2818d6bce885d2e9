"""Tests for page shape classification."""

import unittest

from bs4 import BeautifulSoup

from refusal_crawler.classifier import classify
from refusal_crawler.models import PageKind


def _page(content: str) -> BeautifulSoup:
    """Wrap content in the site template: boilerplate nav plus the user region."""
    html = (
        "<html><body>"
        '<div id="nav"><ul><li><a href="/home">Home</a></li></ul>'
        '<table class="new_layout"><tr><td>site footer</td></tr></table></div>'
        f'<span id="user_provided">{content}</span>'
        "</body></html>"
    )
    return BeautifulSoup(html, "html.parser")


DETAILS = (
    '<table id="details">'
    "<tr><th>Firm Name</th><td>ACME</td></tr>"
    "<tr><td><table><tr><th>Code</th></tr><tr><td>A1</td></tr></table></td></tr>"
    "</table>"
)


class TestClassify(unittest.TestCase):
    """Verify each page shape and the precedence between them."""

    def test_list_navigation_is_link_index(self):
        page = _page('<ul><li><a href="ir_detail.cfm?id=1">1</a></li></ul>')
        self.assertEqual(classify(page), PageKind.LINK_INDEX)

    def test_new_layout_table_is_table_link_index(self):
        page = _page('<table class="new_layout"><tr><td><a href="x.cfm">x</a></td></tr></table>')
        self.assertEqual(classify(page), PageKind.TABLE_LINK_INDEX)

    def test_country_table_is_table_link_index(self):
        page = _page('<table id="country"><tr><td><a href="x.cfm">x</a></td></tr></table>')
        self.assertEqual(classify(page), PageKind.TABLE_LINK_INDEX)

    def test_details_table_is_detail(self):
        self.assertEqual(classify(_page(DETAILS)), PageKind.DETAIL)

    def test_no_marker_is_unknown(self):
        page = _page("<p>No refusals for this month.</p><table><tr><td>1</td></tr></table>")
        self.assertEqual(classify(page), PageKind.UNKNOWN)

    def test_markers_outside_user_region_are_ignored(self):
        """The template's own list and table must not make a page an index."""
        self.assertEqual(classify(_page("")), PageKind.UNKNOWN)

    def test_list_wins_over_details(self):
        """A page with both a list and a details table is an index, never a detail page."""
        page = _page('<ul><li><a href="a.cfm">a</a></li></ul>' + DETAILS)
        self.assertEqual(classify(page), PageKind.LINK_INDEX)

    def test_list_wins_over_table_navigation(self):
        page = _page('<ul><li>a</li></ul><table id="country"><tr><td>b</td></tr></table>')
        self.assertEqual(classify(page), PageKind.LINK_INDEX)

    def test_table_navigation_wins_over_details(self):
        page = _page('<table class="new_layout"><tr><td>b</td></tr></table>' + DETAILS)
        self.assertEqual(classify(page), PageKind.TABLE_LINK_INDEX)

    def test_classify_is_idempotent(self):
        """Classifying does not change the tree, so repeated calls agree."""
        page = _page(DETAILS)
        before = str(page)
        self.assertEqual(classify(page), classify(page))
        self.assertEqual(str(page), before)


if __name__ == "__main__":
    unittest.main()
