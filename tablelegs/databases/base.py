# Copyright © The Tablelegs Developers
# See the AUTHORS file at the top-level directory of this distribution
#
# This file is part of Tablelegs. It is subject to the license terms
# in the LICENSE file found in the top-level directory of this
# distribution. No part of Tablelegs, including this file, may be copied,
# modified, propagated, or distributed except according to the terms
# contained in the LICENSE file.

"""Common interface for the data sources behind a table."""

import abc
from collections.abc import Sequence
from enum import StrEnum
from typing import Any, ClassVar, NamedTuple

from django.http import QueryDict

from tablelegs.exceptions import MethodNotFound
from tablelegs.paginator import Page, Paginator


class SortOrder(StrEnum):
    """Direction in which rows are sorted."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: Any) -> "SortOrder | None":
        """Parse a query string value, returning None if it is not valid."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None

    @property
    def reverse(self) -> bool:
        """Check if sorting in this direction reverses the natural order."""
        return self == SortOrder.DESC

    @property
    def flipped(self) -> "SortOrder":
        """Return the opposite sort order."""
        return SortOrder.ASC if self == SortOrder.DESC else SortOrder.DESC


class KeyValueRow(NamedTuple):
    """A row of a table presenting a mapping."""

    key: Any
    value: str


class Database(abc.ABC):
    """
    Wrapper giving a uniform interface to a raw dataset.

    Sorting and filtering replace the wrapped dataset with a reordered or
    narrowed copy: the raw value passed to the constructor is never changed.
    """

    #: Names of methods of the wrapped dataset that can be called through
    #: the wrapper
    forwarded_methods: ClassVar[frozenset[str]] = frozenset()

    def __init__(self, db: Any) -> None:
        """Wrap the raw dataset."""
        #: The wrapped dataset
        self.db = db

    def __repr__(self) -> str:
        """Return a debugging representation."""
        return f"{self.__class__.__name__}({self.db!r})"

    def __getattr__(self, name: str) -> Any:
        """Forward whitelisted method lookups to the wrapped dataset."""
        if name.startswith("_") or name == "db":
            raise AttributeError(name)
        if name in self.forwarded_methods:
            return getattr(self.db, name)
        raise MethodNotFound(
            f"Call to undefined method {self.__class__.__name__}.{name}()"
        )

    @abc.abstractmethod
    def sort(self, key: str, order: SortOrder) -> None:
        """Sort the dataset by ``key``."""

    @abc.abstractmethod
    def fetch_all(self) -> Sequence[Any]:
        """Return all rows in the dataset, in their current order."""

    @abc.abstractmethod
    def count(self) -> int:
        """Return the number of rows in the dataset."""

    @abc.abstractmethod
    def is_empty(self) -> bool:
        """Check if the dataset has no rows."""

    @abc.abstractmethod
    def filter(self, *args: Any, **kwargs: Any) -> None:
        """Narrow the dataset to the rows matching the arguments."""

    def get_paginator(
        self,
        per_page: int,
        *,
        columns: Sequence[str] = ("*",),  # noqa: U100
        params: QueryDict | None = None,
        page_name: str | None = None,
        orphans: int = 0,
        allow_empty_first_page: bool = True,
    ) -> Paginator:
        """Return a Paginator over the dataset."""
        return Paginator(
            self.fetch_all(),
            per_page,
            params=params,
            page_name=page_name,
            orphans=orphans,
            allow_empty_first_page=allow_empty_first_page,
        )

    def paginate(
        self,
        per_page: int,
        columns: Sequence[str] = ("*",),
        page_name: str | None = None,
        page: int | str | None = None,
        *,
        params: QueryDict | None = None,
    ) -> Page:
        """
        Return one page of rows.

        :param per_page: number of rows per page
        :param columns: columns to load, for data sources that support it
        :param page_name: query string argument selecting the page
        :param page: page number. If None, it is looked up in ``params``
        :param params: query string arguments of the current request
        """
        paginator = self.get_paginator(
            per_page, columns=columns, params=params, page_name=page_name
        )
        return paginator.resolve_page(page)
