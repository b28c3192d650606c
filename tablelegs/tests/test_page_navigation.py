# Copyright © The Tablelegs Developers
# See the AUTHORS file at the top-level directory of this distribution
#
# This file is part of Tablelegs. It is subject to the license terms
# in the LICENSE file found in the top-level directory of this
# distribution. No part of Tablelegs, including this file, may be copied,
# modified, propagated, or distributed except according to the terms
# contained in the LICENSE file.

"""Tests for the page navigation widget."""

from django.http import QueryDict

from tablelegs.page_navigation import PageNavigation
from tablelegs.paginator import Paginator
from tablelegs.test.django import BaseDjangoTestCase


class PageNavigationTests(BaseDjangoTestCase):
    """Tests for :py:class:`PageNavigation`."""

    def widget(
        self, count: int, number: int, query: str = "sort_key=name"
    ) -> PageNavigation:
        """Build a widget for a page."""
        paginator = Paginator(list(range(count)), 1, params=QueryDict(query))
        return PageNavigation(paginator.page(number))

    def test_single_page(self) -> None:
        """Nothing is rendered with only one page."""
        self.assertEqual(self.widget(1, 1).render(), "")
        self.assertEqual(self.render_widget(self.widget(1, 1)), "")

    def test_render(self) -> None:
        """Test rendering links to other pages."""
        tree = self.assertHTMLValid(self.render_widget(self.widget(3, 2)))
        ul = self.assertHasElement(tree, "//ul[@class='pagination']")
        items = ul.xpath("li")
        self.assertEqual(
            [self.get_node_text_normalized(li) for li in items],
            ["«", "1", "2", "3", "»"],
        )
        prev = self.assertHasElement(tree, "//a[@rel='prev']")
        self.assertEqual(prev.get("href"), "?sort_key=name&page=1")
        next_ = self.assertHasElement(tree, "//a[@rel='next']")
        self.assertEqual(next_.get("href"), "?sort_key=name&page=3")
        current = self.assertHasElement(tree, "//li[@aria-current='page']")
        self.assertEqual(self.get_node_text_normalized(current), "2")
        self.assertEqual(current.xpath("a"), [])

    def test_render_ends(self) -> None:
        """The first and last pages have no previous or next link."""
        tree = self.assertHTMLValid(self.render_widget(self.widget(3, 1)))
        self.assertEqual(tree.xpath("//a[@rel='prev']"), [])
        self.assertHasElement(tree, "//a[@rel='next']")

        tree = self.assertHTMLValid(self.render_widget(self.widget(3, 3)))
        self.assertHasElement(tree, "//a[@rel='prev']")
        self.assertEqual(tree.xpath("//a[@rel='next']"), [])

    def test_render_elided(self) -> None:
        """Long page ranges show ellipses."""
        widget = self.widget(20, 10, query="")
        tree = self.assertHTMLValid(self.render_widget(widget))
        disabled = tree.xpath("//li[@class='page-item disabled']")
        self.assertEqual(len(disabled), 2)
        for li in disabled:
            self.assertEqual(li.xpath("a"), [])
        links = [a.get("href") for a in tree.xpath("//a[not(@rel)]")]
        self.assertEqual(
            links,
            [f"?page={n}" for n in (1, 2, 7, 8, 9, 11, 12, 13, 19, 20)],
        )
