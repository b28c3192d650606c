# Copyright © The Tablelegs Developers
# See the AUTHORS file at the top-level directory of this distribution
#
# This file is part of Tablelegs. It is subject to the license terms
# in the LICENSE file found in the top-level directory of this
# distribution. No part of Tablelegs, including this file, may be copied,
# modified, propagated, or distributed except according to the terms
# contained in the LICENSE file.

"""Tests for tables presenting lists of records."""

from collections import namedtuple
from datetime import date, datetime
from types import SimpleNamespace
from typing import Any

from tablelegs.databases import IndexedList, SortOrder
from tablelegs.exceptions import ComparisonError
from tablelegs.test.django import BaseDjangoTestCase

Record = namedtuple("Record", ["name", "age"])


class IndexedListTests(BaseDjangoTestCase):
    """Tests for :py:class:`IndexedList`."""

    def people(self) -> list[dict[str, Any]]:
        """Return sample records."""
        return [
            {"name": "Bob", "age": 30},
            {"name": "alice", "age": 20},
            {"name": "Carol", "age": 40},
        ]

    def test_sort_mappings(self) -> None:
        """Mappings are sorted by key lookup."""
        db = IndexedList(self.people())
        db.sort("age", SortOrder.DESC)
        self.assertEqual([p["age"] for p in db.fetch_all()], [40, 30, 20])
        db.sort("name", SortOrder.ASC)
        self.assertEqual(
            [p["name"] for p in db.fetch_all()], ["alice", "Bob", "Carol"]
        )

    def test_sort_objects(self) -> None:
        """Objects are sorted by attribute lookup."""
        db = IndexedList([SimpleNamespace(**p) for p in self.people()])
        db.sort("age", SortOrder.ASC)
        self.assertEqual([p.age for p in db.fetch_all()], [20, 30, 40])

    def test_sort_namedtuples(self) -> None:
        """Named tuples are sorted by field."""
        db = IndexedList([Record("b", 2), Record("a", 1)])
        db.sort("name", SortOrder.ASC)
        self.assertEqual(db.fetch_all(), [Record("a", 1), Record("b", 2)])

    def test_sort_desc_reverses(self) -> None:
        """Descending order is the reverse of ascending order."""
        db = IndexedList([{"name": f"item{i}"} for i in (3, 12, 1, 7, 20)])
        db.sort("name", SortOrder.ASC)
        ascending = db.fetch_all()
        db.sort("name", SortOrder.DESC)
        self.assertEqual(db.fetch_all(), ascending[::-1])

    def test_sort_natural(self) -> None:
        """Fields with numbers are sorted in natural order."""
        db = IndexedList([{"name": "item10"}, {"name": "item2"}])
        db.sort("name", SortOrder.ASC)
        self.assertEqual(
            [p["name"] for p in db.fetch_all()], ["item2", "item10"]
        )

    def test_sort_signs_and_fractions(self) -> None:
        """Negative numbers and fractions sort by numeric value."""
        db = IndexedList([{"t": 3}, {"t": -5}, {"t": 0}, {"t": 1.5}])
        db.sort("t", SortOrder.ASC)
        self.assertEqual([p["t"] for p in db.fetch_all()], [-5, 0, 1.5, 3])
        db.sort("t", SortOrder.DESC)
        self.assertEqual([p["t"] for p in db.fetch_all()], [3, 1.5, 0, -5])

    def test_sort_dates(self) -> None:
        """Date fields sort chronologically."""
        db = IndexedList([{"d": date(2024, 3, 1)}, {"d": date(2023, 1, 1)}])
        db.sort("d", SortOrder.ASC)
        self.assertEqual(
            [p["d"] for p in db.fetch_all()],
            [date(2023, 1, 1), date(2024, 3, 1)],
        )

    def test_sort_incomparable_values(self) -> None:
        """Field values that cannot be compared raise ComparisonError."""
        db = IndexedList(
            [{"d": date(2024, 1, 1)}, {"d": datetime(2024, 1, 1)}]
        )
        with self.assertRaisesRegex(ComparisonError, r"Cannot sort by 'd'"):
            db.sort("d", SortOrder.ASC)

    def test_sort_empty(self) -> None:
        """An empty list can be sorted by any key."""
        db = IndexedList([])
        db.sort("name", SortOrder.ASC)
        self.assertEqual(db.fetch_all(), [])

    def test_sort_mixed_shapes(self) -> None:
        """Mappings and objects cannot be sorted together."""
        db = IndexedList([{"name": "a"}, SimpleNamespace(name="b")])
        with self.assertRaisesRegex(ComparisonError, r"mixing mappings"):
            db.sort("name", SortOrder.ASC)

    def test_sort_without_fields(self) -> None:
        """Elements without named fields cannot be sorted."""
        for elements in ([1, 2], ["a", "b"], [[1], [2]], [(1,), (2,)]):
            with self.subTest(elements=elements):
                db = IndexedList(elements)
                with self.assertRaisesRegex(
                    ComparisonError, r"Can only sort by keys or properties"
                ):
                    db.sort("name", SortOrder.ASC)

    def test_sort_missing_field(self) -> None:
        """Records must all have the sorted field."""
        db = IndexedList([{"name": "a"}, {"age": 1}])
        with self.assertRaisesRegex(ComparisonError, r"field missing"):
            db.sort("name", SortOrder.ASC)

    def test_sort_composite_field(self) -> None:
        """Composite field values cannot be sorted."""
        db = IndexedList([{"name": ["a"]}, {"name": "b"}])
        with self.assertRaisesRegex(
            ComparisonError, r"list values are not comparable"
        ):
            db.sort("name", SortOrder.ASC)

    def test_sort_does_not_change_input(self) -> None:
        """The list passed to the constructor is not modified."""
        people = self.people()
        db = IndexedList(people)
        db.sort("age", SortOrder.ASC)
        self.assertEqual([p["age"] for p in people], [30, 20, 40])

    def test_count_is_empty(self) -> None:
        """is_empty is true exactly when there are no rows."""
        for data in ([], self.people()):
            with self.subTest(data=data):
                db = IndexedList(data)
                self.assertEqual(db.count(), len(data))
                self.assertEqual(db.is_empty(), db.fetch_all() == [])

    def test_filter(self) -> None:
        """filter keeps records matching a predicate."""
        db = IndexedList(self.people())
        db.filter(lambda p: p["age"] >= 30)
        self.assertEqual(
            [p["name"] for p in db.fetch_all()], ["Bob", "Carol"]
        )

    def test_paginate(self) -> None:
        """Page p holds rows [(p-1)n, pn), and the last one the remainder."""
        rows = [{"n": i} for i in range(7)]
        db = IndexedList(rows)
        pages = ((1, rows[0:3]), (2, rows[3:6]), (3, rows[6:]))
        for number, expected in pages:
            with self.subTest(number=number):
                page = db.paginate(3, page=number)
                self.assertEqual(list(page.items), expected)
                self.assertEqual(page.page_number, number)
                self.assertEqual(page.page_size, 3)
