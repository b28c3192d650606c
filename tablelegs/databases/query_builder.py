# Copyright © The Tablelegs Developers
# See the AUTHORS file at the top-level directory of this distribution
#
# This file is part of Tablelegs. It is subject to the license terms
# in the LICENSE file found in the top-level directory of this
# distribution. No part of Tablelegs, including this file, may be copied,
# modified, propagated, or distributed except according to the terms
# contained in the LICENSE file.

"""Tables presenting Django QuerySets."""

from collections.abc import Sequence
from typing import Any

from django.core.exceptions import FieldError
from django.db.models import F, Model, QuerySet
from django.db.models.constants import LOOKUP_SEP
from django.db.models.manager import BaseManager
from django.http import QueryDict

from tablelegs.databases.base import Database, SortOrder
from tablelegs.exceptions import ComparisonError
from tablelegs.paginator import Paginator


class QueryBuilderSource(Database):
    """
    Present the results of a QuerySet.

    Sorting and filtering only build the query: it is run when rows are
    counted or fetched.
    """

    db: QuerySet[Any, Any]

    forwarded_methods = frozenset(
        {
            "aggregate",
            "annotate",
            "distinct",
            "exclude",
            "exists",
            "prefetch_related",
            "select_related",
            "values",
            "values_list",
        }
    )

    def __init__(
        self, db: "QuerySet[Any, Any] | BaseManager[Model]"
    ) -> None:
        """Wrap a QuerySet, or all the objects of a manager."""
        if isinstance(db, BaseManager):
            db = db.all()
        super().__init__(db)

    def sort(self, key: str, order: SortOrder) -> None:
        """
        Order the query by the field ``key``.

        The primary key is used to break ties, so that the ordering is total
        and descending order is the exact reverse of ascending order.

        :raises ComparisonError: if ``key`` is neither an annotation nor a
                                 path to a model field
        """
        query = self.db.query
        if key not in query.annotations:
            try:
                query.names_to_path(
                    key.split(LOOKUP_SEP),
                    query.get_meta(),
                    fail_on_missing=True,
                )
            except FieldError as e:
                raise ComparisonError(f"Cannot sort by {key!r}: {e}") from e

        if order.reverse:
            self.db = self.db.order_by(F(key).desc(), F("pk").desc())
        else:
            self.db = self.db.order_by(F(key).asc(), F("pk").asc())

    def fetch_all(self) -> list[Any]:
        """Run the query and return all results."""
        return list(self.db)

    def count(self) -> int:
        """Count results in the database."""
        return self.db.count()

    def is_empty(self) -> bool:
        """Check for results without fetching them."""
        return not self.db.exists()

    def filter(self, *args: Any, **kwargs: Any) -> None:
        """Narrow the query using :py:meth:`QuerySet.filter` arguments."""
        self.db = self.db.filter(*args, **kwargs)

    def get_paginator(
        self,
        per_page: int,
        *,
        columns: Sequence[str] = ("*",),
        params: QueryDict | None = None,
        page_name: str | None = None,
        orphans: int = 0,
        allow_empty_first_page: bool = True,
    ) -> Paginator:
        """
        Return a Paginator over the query.

        Django paginates QuerySets with a count query and a sliced query.
        Unless ``columns`` is ``("*",)``, only the given fields are loaded.
        """
        queryset = self.db
        if tuple(columns) != ("*",):
            queryset = queryset.only(*columns)
        return Paginator(
            queryset,
            per_page,
            params=params,
            page_name=page_name,
            orphans=orphans,
            allow_empty_first_page=allow_empty_first_page,
        )
