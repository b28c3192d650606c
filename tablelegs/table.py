# Copyright © The Tablelegs Developers
# See the AUTHORS file at the top-level directory of this distribution
#
# This file is part of Tablelegs. It is subject to the license terms
# in the LICENSE file found in the top-level directory of this
# distribution. No part of Tablelegs, including this file, may be copied,
# modified, propagated, or distributed except according to the terms
# contained in the LICENSE file.

"""Tabular presentation of heterogeneous data sources."""

import logging
from collections.abc import Callable, Sequence
from functools import cached_property
from typing import Any, ClassVar, TypeVar

from django.http import HttpRequest

from tablelegs.columns import Column, Columns, TableHead
from tablelegs.conf import get_setting
from tablelegs.databases import Database, SortOrder, make_database
from tablelegs.exceptions import ConfigurationError, MethodNotFound
from tablelegs.filters import Filter, Filters
from tablelegs.overrides import (
    FILTER_HANDLER_ATTR,
    SORTER_ATTR,
    collect_handlers,
)
from tablelegs.page_navigation import PageNavigation
from tablelegs.paginator import Page, Paginator
from tablelegs.utils import parse_positive_int
from tablelegs.widgets import Widget

log = logging.getLogger(__name__)

Declared = TypeVar("Declared", Column, Filter)

#: Database methods that can be called on the table
DATABASE_METHODS = frozenset(
    {"count", "fetch_all", "filter", "is_empty", "sort"}
)


class Table:
    """
    Definition of a sortable, filterable, paginated table.

    Subclasses declare columns and filters as class members::

        class PeopleTable(Table):
            name = Column("Name")
            age = Column("Age")
            avatar = Column("Avatar", sortable=False)
            filter_status = Filter("Status", options=["Active", "Banned"])
            default_sort_key = "name"

    A table is instantiated for each request, with the data to present. The
    constructor reads sorting and filtering arguments from the query string
    and applies them to the data.
    """

    #: Columns declaratively defined in subclass definitions,
    #: collected by __init_subclass__
    column_definitions: ClassVar[dict[str, Column]] = {}

    #: Filters declaratively defined in subclass definitions,
    #: collected by __init_subclass__
    filter_definitions: ClassVar[dict[str, Filter]] = {}

    #: Names of methods implementing custom sorting, indexed by sort key
    sort_handlers: ClassVar[dict[str, str]] = {}

    #: Names of methods implementing filter options, indexed by
    #: (filter key, option key)
    filter_handlers: ClassVar[dict[tuple[str, str], str]] = {}

    #: Data source class to use instead of inferring it from the data
    database_class: type[Database] | None = None

    #: Widget class rendering the page navigation
    presenter_class: Callable[[Page], Widget] = PageNavigation

    #: Default sort key. If None, use the first sortable column
    default_sort_key: str | None = None

    #: Default sort order
    default_sort_order: SortOrder = SortOrder.ASC

    #: Default number of rows per page. If None, use the TABLELEGS_PER_PAGE
    #: setting
    per_page: int | None = None

    #: Key the current request is sorted by
    sort_key: str | None

    #: Sort order of the current request
    sort_order: SortOrder

    @classmethod
    def _collect_declarative(
        cls,
        member_class: type[Declared],
        collected_name: str,
        *,
        prefix: str | None = None,
    ) -> None:
        """
        Collect declaratively defined members.

        :param member_class: members need to be an instance of this class
        :param collected_name: class member with a dictionary of collected
                               members, indexed by name
        :param prefix: if defined, enforce that member names begin with this
                       prefix
        """
        # Definitions keep their declaration order, base classes first
        definitions: dict[str, Declared] = {}
        for base in cls.__bases__:
            if not issubclass(base, Table):
                continue
            definitions.update(getattr(base, collected_name, {}))

        for name, member in cls.__dict__.items():
            if not isinstance(member, member_class):
                continue
            if prefix is not None and not name.startswith(prefix):
                raise ConfigurationError(
                    f"{name} = {member.__class__.__name__}(…):"
                    f" assigned name does not start with {prefix!r}"
                )
            definitions[member.name] = member

        setattr(cls, collected_name, definitions)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Collect column, filter and handler definitions."""
        super().__init_subclass__(**kwargs)
        cls._collect_declarative(Column, "column_definitions")
        cls._collect_declarative(
            Filter, "filter_definitions", prefix="filter_"
        )
        cls.sort_handlers = collect_handlers(cls, SORTER_ATTR)
        cls.filter_handlers = collect_handlers(cls, FILTER_HANDLER_ATTR)

    def __init__(
        self,
        request: HttpRequest,
        object_list: Any,
        *,
        prefix: str = "",
        default_sort_key: str | None = None,
        default_sort_order: SortOrder | str | None = None,
    ) -> None:
        """
        Build the table and apply sorting and filtering.

        :param request: the current request object
        :param object_list: the data to present: a mapping, a sequence, a
                            host collection or a QuerySet
        :param prefix: the query string prefix for table arguments (set this
                       if you show multiple tables in the same page)
        :param default_sort_key: override the default sort key
        :param default_sort_order: override the default sort order
        :raises ConfigurationError: if the table definition is inconsistent,
                                    or no data source can present
                                    ``object_list``
        :raises ArgumentError: if ``object_list`` is a scalar value
        """
        #: Current request
        self.request = request

        #: Query string argument prefix
        self.prefix = f"{prefix}-" if prefix else ""

        # Override definition defaults with constructor arguments
        if default_sort_key is not None:
            self.default_sort_key = default_sort_key
        if default_sort_order is not None:
            self.default_sort_order = default_sort_order

        #: Column headers
        self.columns = Columns(self)

        #: Filters
        self.filters = Filters(self)

        # Allow subclasses to programmatically add to the table definition
        self.init()

        self._post_init()

        #: Data source for the rows
        self.database: Database = make_database(
            object_list, self.database_class
        )

        self.sort_key, self.sort_order = self._resolve_sort()
        self._run_sorting()
        self._run_filters()

    def __getattr__(self, name: str) -> Any:
        """Forward data source methods."""
        database = self.__dict__.get("database")
        if name.startswith("_") or database is None:
            raise AttributeError(name)
        if name in DATABASE_METHODS or name in database.forwarded_methods:
            return getattr(database, name)
        raise MethodNotFound(
            f"Call to undefined method {self.__class__.__name__}.{name}()"
        )

    def init(self) -> None:
        """
        Set up Table attributes.

        This instantiates declaratively defined columns and filters, and can
        be extended by subclasses to add more.
        """
        for name, column in self.column_definitions.items():
            self.add_column(name, column)

        for filter_ in self.filter_definitions.values():
            self.add_filter(filter_)

    def add_column(self, name: str, column: Column) -> None:
        """Add a column to the table."""
        if not hasattr(column, "name"):
            column.name = name
        self.columns.add(name, column)

    def add_filter(self, filter_: Filter) -> None:
        """Add a filter to the table."""
        self.filters.add(filter_)

    def _post_init(self) -> None:
        """Validate the table definition once it is complete."""
        sort_keys = self.sort_keys
        if self.default_sort_key is None:
            self.default_sort_key = sort_keys[0] if sort_keys else None
        elif self.default_sort_key not in sort_keys:
            raise ConfigurationError(
                f"default_sort_key {self.default_sort_key!r}"
                " does not match a sortable column or a sorter"
            )

        default_sort_order = SortOrder.parse(self.default_sort_order)
        if default_sort_order is None:
            raise ConfigurationError(
                f"default_sort_order {self.default_sort_order!r}"
                " is not 'asc' or 'desc'"
            )
        self.default_sort_order = default_sort_order

        for (filter_key, option_key), method in self.filter_handlers.items():
            try:
                filter_ = self.filters[filter_key].filter
            except KeyError:
                raise ConfigurationError(
                    f"{method}() handles unknown filter {filter_key!r}"
                )
            if option_key not in filter_.options:
                raise ConfigurationError(
                    f"{method}() handles unknown option {option_key!r}"
                    f" of filter {filter_key!r}"
                )

    @cached_property
    def sort_keys(self) -> list[str]:
        """Return all the keys the table can be sorted by."""
        keys = self.columns.sort_keys
        keys.extend(k for k in self.sort_handlers if k not in keys)
        return keys

    def field_name(self, name: str) -> str:
        """Return the query string field name for a table argument."""
        return self.prefix + name

    def _resolve_sort(self) -> tuple[str | None, SortOrder]:
        """Compute sort key and order from the query string and defaults."""
        sort_key = self.default_sort_key
        requested_key = self.request.GET.get(self.field_name("sort_key"))
        if requested_key:
            if requested_key in self.sort_keys:
                sort_key = requested_key
            else:
                log.debug(
                    "Ignoring unknown sort key %r, sorting by %r",
                    requested_key,
                    sort_key,
                )

        sort_order = self.default_sort_order
        requested_order = self.request.GET.get(self.field_name("sort_order"))
        if requested_order:
            if (parsed := SortOrder.parse(requested_order)) is not None:
                sort_order = parsed
            else:
                log.debug("Ignoring invalid sort order %r", requested_order)

        return sort_key, sort_order

    def _run_sorting(self) -> None:
        """Sort the data source using a sorter, or generic sorting."""
        if self.sort_key is None:
            return
        if (method := self.sort_handlers.get(self.sort_key)) is not None:
            getattr(self, method)(self.sort_order)
        else:
            self.database.sort(self.sort_key, self.sort_order)

    def _run_filters(self) -> None:
        """Run the handlers of the selected filter options."""
        for bound_filter in self.filters:
            if (option := bound_filter.value) is None:
                continue
            method = self.filter_handlers.get((bound_filter.key, option))
            if method is not None:
                getattr(self, method)()

    def is_sort_order(self, sort_order: SortOrder | str) -> bool:
        """Check if the table is sorted in the given order."""
        return SortOrder.parse(sort_order) == self.sort_order

    @property
    def rows(self) -> Sequence[Any]:
        """Return all rows, sorted and filtered."""
        return self.database.fetch_all()

    def resolve_per_page(self, per_page: int | None = None) -> int:
        """
        Compute the number of rows per page.

        A valid ``per_page`` query string argument takes precedence over the
        ``per_page`` argument, which takes precedence over the table default.
        The query string argument is capped to the ``MAX_PER_PAGE`` setting.
        """
        field_name = self.field_name("per_page")
        requested = self.request.GET.get(field_name)
        if (parsed := parse_positive_int(requested)) is not None:
            max_per_page = get_setting("MAX_PER_PAGE")
            if max_per_page is not None and parsed > max_per_page:
                log.debug(
                    "Capping %s %d to %d", field_name, parsed, max_per_page
                )
                return int(max_per_page)
            return parsed
        if requested is not None:
            log.debug("Ignoring invalid %s %r", field_name, requested)
        if per_page is not None:
            return per_page
        if self.per_page is not None:
            return self.per_page
        return int(get_setting("PER_PAGE"))

    def get_paginator(
        self,
        per_page: int | None = None,
        *,
        columns: Sequence[str] = ("*",),
        page_name: str | None = None,
        orphans: int = 0,
        allow_empty_first_page: bool = True,
    ) -> Paginator:
        """Return the Paginator for this table."""
        return self.database.get_paginator(
            self.resolve_per_page(per_page),
            columns=columns,
            params=self.request.GET,
            page_name=self.field_name(page_name or get_setting("PAGE_NAME")),
            orphans=orphans,
            allow_empty_first_page=allow_empty_first_page,
        )

    def paginate(
        self,
        per_page: int | None = None,
        columns: Sequence[str] = ("*",),
        page_name: str | None = None,
        page: int | str | None = None,
    ) -> Page:
        """
        Return one page of rows.

        :param per_page: rows per page, see :py:meth:`resolve_per_page`
        :param columns: columns to load, for data sources that support it
        :param page_name: query string argument selecting the page
        :param page: page number. If None, it is taken from the query string
        """
        return self.get_paginator(
            per_page, columns=columns, page_name=page_name
        ).resolve_page(page)

    @cached_property
    def page_obj(self) -> Page:
        """Return the current page using default pagination settings."""
        return self.paginate()

    @cached_property
    def page_navigation(self) -> Widget:
        """Return the presenter widget for the current page."""
        return self.presenter_class(self.page_obj)

    @cached_property
    def thead(self) -> TableHead:
        """Return a standard <thead> widget."""
        return TableHead(self)
