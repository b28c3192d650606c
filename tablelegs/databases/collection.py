# Copyright © The Tablelegs Developers
# See the AUTHORS file at the top-level directory of this distribution
#
# This file is part of Tablelegs. It is subject to the license terms
# in the LICENSE file found in the top-level directory of this
# distribution. No part of Tablelegs, including this file, may be copied,
# modified, propagated, or distributed except according to the terms
# contained in the LICENSE file.

"""Tables presenting collection objects provided by the application."""

from collections.abc import Callable, Sequence
from typing import Any, Protocol, runtime_checkable

from django.http import QueryDict

from tablelegs.databases.base import Database, SortOrder
from tablelegs.paginator import CollectionPaginator


@runtime_checkable
class HostCollection(Protocol):
    """
    Ordered collection with its own sorting and pagination.

    Applications can pass any object implementing these methods to a table,
    and the table will use them instead of reimplementing them.
    """

    def sort_by(self, key: str, descending: bool = False) -> "HostCollection":
        """Return a copy of the collection sorted by ``key``."""

    def filter(self, predicate: Callable[[Any], bool]) -> "HostCollection":
        """Return a copy of the collection with matching elements only."""

    def for_page(self, page: int, per_page: int) -> Sequence[Any]:
        """Return the elements in the given 1-based page."""

    def count(self) -> int:
        """Return the number of elements."""

    def is_empty(self) -> bool:
        """Check if the collection has no elements."""

    def all(self) -> list[Any]:
        """Return all elements, in order."""


class ExternalCollection(Database):
    """Delegate all operations to a :py:class:`HostCollection`."""

    db: HostCollection

    def sort(self, key: str, order: SortOrder) -> None:
        """Sort using the collection's own sorting."""
        self.db = self.db.sort_by(key, descending=order.reverse)

    def fetch_all(self) -> list[Any]:
        """Return all elements of the collection."""
        return self.db.all()

    def count(self) -> int:
        """Return the collection size."""
        return self.db.count()

    def is_empty(self) -> bool:
        """Check if the collection is empty."""
        return self.db.is_empty()

    def filter(self, predicate: Callable[[Any], bool]) -> None:
        """Keep only the elements for which ``predicate`` is true."""
        self.db = self.db.filter(predicate)

    def get_paginator(
        self,
        per_page: int,
        *,
        columns: Sequence[str] = ("*",),  # noqa: U100
        params: QueryDict | None = None,
        page_name: str | None = None,
        orphans: int = 0,
        allow_empty_first_page: bool = True,
    ) -> CollectionPaginator:
        """Return a Paginator using the collection's own pagination."""
        return CollectionPaginator(
            self.db,
            per_page,
            params=params,
            page_name=page_name,
            orphans=orphans,
            allow_empty_first_page=allow_empty_first_page,
        )
