# Copyright © The Tablelegs Developers
# See the AUTHORS file at the top-level directory of this distribution
#
# This file is part of Tablelegs. It is subject to the license terms
# in the LICENSE file found in the top-level directory of this
# distribution. No part of Tablelegs, including this file, may be copied,
# modified, propagated, or distributed except according to the terms
# contained in the LICENSE file.

"""Pagination of table rows."""

from collections.abc import Sequence
from functools import cached_property
from typing import Any, TYPE_CHECKING

from django.core import paginator as django_paginator
from django.http import QueryDict

from tablelegs.conf import get_setting

if TYPE_CHECKING:
    from tablelegs.databases.collection import HostCollection


class Page(django_paginator.Page):
    """
    One page of rows.

    This extends Django's Page with the names used by table templates, and
    with links to other pages that preserve the current query string.
    """

    paginator: "Paginator"

    @property
    def items(self) -> Sequence[Any]:
        """Return the rows in this page."""
        return self.object_list

    @property
    def total_count(self) -> int:
        """Return the number of rows across all pages."""
        return self.paginator.count

    @property
    def page_size(self) -> int:
        """Return the maximum number of rows in a page."""
        return int(self.paginator.per_page)

    @property
    def page_number(self) -> int:
        """Return the 1-based number of this page."""
        return self.number

    @property
    def query_string(self) -> str:
        """Return the query string selecting this page."""
        return self.paginator.page_query_string(self.number)

    @property
    def url(self) -> str:
        """Return the relative URL selecting this page."""
        return self.paginator.page_url(self.number)

    @property
    def next_page_url(self) -> str | None:
        """Return the URL of the next page, or None if this is the last."""
        if not self.has_next():
            return None
        return self.paginator.page_url(self.next_page_number())

    @property
    def previous_page_url(self) -> str | None:
        """Return the URL of the previous page, or None on the first page."""
        if not self.has_previous():
            return None
        return self.paginator.page_url(self.previous_page_number())

    @cached_property
    def elided_page_range(self) -> list[int | str]:
        """Return page numbers to show in navigation, with ellipses."""
        return list(self.paginator.get_elided_page_range(self.number))


class Paginator(django_paginator.Paginator):
    """Paginator generating page links that keep the current query string."""

    def __init__(
        self,
        object_list: Any,
        per_page: int,
        *,
        params: QueryDict | None = None,
        page_name: str | None = None,
        orphans: int = 0,
        allow_empty_first_page: bool = True,
    ) -> None:
        """
        Build the Paginator.

        :param object_list: rows to paginate, passed to Django's Paginator
        :param per_page: number of rows per page
        :param params: query string arguments of the current request, kept in
                       page links
        :param page_name: query string argument used to select the page
        :param orphans: passed to Django's Paginator
        :param allow_empty_first_page: passed to Django's Paginator
        """
        super().__init__(
            object_list,
            per_page,
            orphans=orphans,
            allow_empty_first_page=allow_empty_first_page,
        )
        self.params = params if params is not None else QueryDict()
        self.page_name = page_name or get_setting("PAGE_NAME")

    def _get_page(self, *args: Any, **kwargs: Any) -> Page:
        """Return our Page subclass."""
        return Page(*args, **kwargs)

    def page_query_string(self, number: int) -> str:
        """Return the query string selecting the given page."""
        query = self.params.copy()
        query[self.page_name] = str(number)
        return query.urlencode()

    def page_url(self, number: int) -> str:
        """Return the relative URL selecting the given page."""
        return "?" + self.page_query_string(number)

    def resolve_page(self, page: int | str | None = None) -> Page:
        """
        Return the requested page.

        If ``page`` is None, it is looked up in the query string. Missing or
        malformed page numbers select the first page, and numbers past the
        end select the last one.
        """
        if page is None:
            page = self.params.get(self.page_name)
        return self.get_page(page)


class CollectionPaginator(Paginator):
    """Paginator using the native pagination of a host collection."""

    object_list: "HostCollection"

    def page(self, number: int | str) -> Page:
        """Return a page, asking the collection for its rows."""
        number = self.validate_number(number)
        rows = self.object_list.for_page(number, int(self.per_page))
        return self._get_page(list(rows), number, self)
