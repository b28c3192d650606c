# Copyright © The Tablelegs Developers
# See the AUTHORS file at the top-level directory of this distribution
#
# This file is part of Tablelegs. It is subject to the license terms
# in the LICENSE file found in the top-level directory of this
# distribution. No part of Tablelegs, including this file, may be copied,
# modified, propagated, or distributed except according to the terms
# contained in the LICENSE file.

"""Tests for the registration of custom sorting and filtering."""

from tablelegs.databases import SortOrder
from tablelegs.overrides import (
    FILTER_HANDLER_ATTR,
    SORTER_ATTR,
    collect_handlers,
    filter_handler,
    sorter,
)
from tablelegs.test.django import BaseDjangoTestCase


class Base:
    """Class with registered handlers."""

    @sorter("name")
    def sort_name(self, order: SortOrder) -> None:
        """Sort by name."""

    @sorter("age")
    def sort_age(self, order: SortOrder) -> None:
        """Sort by age."""

    @filter_handler("Status", "Not active")
    def inactive(self) -> None:
        """Show inactive rows."""


class Derived(Base):
    """Subclass replacing some handlers."""

    @sorter("name")
    def sort_full_name(self, order: SortOrder) -> None:
        """Sort by full name."""

    def sort_age(self, order: SortOrder) -> None:
        """Override without registration."""


class OverridesTests(BaseDjangoTestCase):
    """Tests for override registration."""

    def test_sorter(self) -> None:
        """sorter marks the method with its sort key."""
        self.assertEqual(getattr(Base.sort_name, SORTER_ATTR), "name")

    def test_filter_handler(self) -> None:
        """filter_handler stores filter and option keys."""
        self.assertEqual(
            getattr(Base.inactive, FILTER_HANDLER_ATTR),
            ("status", "not_active"),
        )

    def test_collect_handlers(self) -> None:
        """Handlers are collected by key."""
        self.assertEqual(
            collect_handlers(Base, SORTER_ATTR),
            {"name": "sort_name", "age": "sort_age"},
        )
        self.assertEqual(
            collect_handlers(Base, FILTER_HANDLER_ATTR),
            {("status", "not_active"): "inactive"},
        )

    def test_collect_handlers_inheritance(self) -> None:
        """Subclasses can replace the handler for a key."""
        self.assertEqual(
            collect_handlers(Derived, SORTER_ATTR),
            {"name": "sort_full_name", "age": "sort_age"},
        )

    def test_collect_no_handlers(self) -> None:
        """Classes without handlers have an empty registry."""
        self.assertEqual(collect_handlers(object, SORTER_ATTR), {})
