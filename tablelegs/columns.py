# Copyright © The Tablelegs Developers
# See the AUTHORS file at the top-level directory of this distribution
#
# This file is part of Tablelegs. It is subject to the license terms
# in the LICENSE file found in the top-level directory of this
# distribution. No part of Tablelegs, including this file, may be copied,
# modified, propagated, or distributed except according to the terms
# contained in the LICENSE file.

"""Table column definition and rendering."""

from collections.abc import Iterator
from typing import Any, TYPE_CHECKING

from tablelegs.databases import SortOrder
from tablelegs.widgets import TemplateWidget

if TYPE_CHECKING:
    from tablelegs.table import Table


class Column:
    """
    A table column definition.

    The column name defaults to the name of the table member it is assigned
    to. Pass ``name`` to use names like ``type``, which would shadow a
    builtin.
    """

    #: Column name, used to look the column up in the table
    name: str
    #: Column title
    title: str

    def __init__(
        self,
        title: str,
        *,
        key: str | None = None,
        sortable: bool = True,
        name: str | None = None,
    ) -> None:
        """
        Store the column definition.

        :param title: human-readable column name
        :param key: sort key for the column. Defaults to the column name
        :param sortable: set to False for columns that cannot be sorted
        :param name: column name, if different from the attribute name
        """
        if name is not None:
            self.name = name
        self.title = title
        self.sortable = sortable
        self._key = key

    @property
    def key(self) -> str | None:
        """Return the sort key, or None if the column cannot be sorted."""
        if not self.sortable:
            return None
        return self._key if self._key is not None else self.name

    def __set_name__(self, owner: type, name: str) -> None:  # noqa: U100
        """Default the column name to the table member name."""
        if not hasattr(self, "name"):
            self.name = name


class BoundColumn(TemplateWidget):
    """A column header for the current request."""

    template_name = "tablelegs/_column_header.html"

    def __init__(self, column: Column, table: "Table") -> None:
        """Bind the column definition to a table."""
        self.column = column
        self.table = table

    def __str__(self) -> str:
        """Return the column name."""
        return self.name

    def __repr__(self) -> str:
        """Return a debugging representation."""
        return f"BoundColumn({self.name!r})"

    @property
    def name(self) -> str:
        """Return the column name."""
        return self.column.name

    @property
    def title(self) -> str:
        """Return the column title."""
        return self.column.title

    @property
    def key(self) -> str | None:
        """Return the column sort key."""
        return self.column.key

    @property
    def is_sortable(self) -> bool:
        """Check if the column can be sorted."""
        return self.key is not None

    @property
    def is_current_sort_key(self) -> bool:
        """Check if the table is sorted by this column."""
        return self.is_sortable and self.key == self.table.sort_key

    @property
    def next_sort_order(self) -> SortOrder:
        """Return the sort order requested by clicking the header."""
        if self.is_current_sort_key:
            return self.table.sort_order.flipped
        return self.table.default_sort_order

    @property
    def query_string(self) -> str | None:
        """
        Return the query string sorting by this column.

        If the table is currently sorted by this column, the sort order is
        reversed. All other query string arguments are preserved.
        """
        if self.key is None:
            return None
        query = self.table.request.GET.copy()
        query[self.table.field_name("sort_key")] = self.key
        query[self.table.field_name("sort_order")] = str(self.next_sort_order)
        return query.urlencode()

    @property
    def url(self) -> str | None:
        """Return the relative URL sorting by this column."""
        if (query_string := self.query_string) is None:
            return None
        return "?" + query_string

    @property
    def sort_indicator(self) -> str:
        """Return an arrow showing the sort order, if sorted by this column."""
        if not self.is_current_sort_key:
            return ""
        return "▼" if self.table.sort_order.reverse else "▲"

    def get_context_data(self) -> dict[str, Any]:
        """Return context for rendering."""
        return {"column": self}


class Columns:
    """All columns for a table."""

    def __init__(self, table: "Table"):
        """Columns for a table."""
        self.table = table
        self.columns: dict[str, BoundColumn] = {}

    def add(self, name: str, column: Column) -> BoundColumn:
        """Add a column definition."""
        bc = BoundColumn(column, self.table)
        self.columns[name] = bc
        return bc

    def __getitem__(self, name: str) -> BoundColumn:
        """Get a column by name."""
        return self.columns[name]

    def __iter__(self) -> Iterator[BoundColumn]:
        """Iterate all columns."""
        return iter(self.columns.values())

    def __len__(self) -> int:
        """Return the number of columns."""
        return len(self.columns)

    @property
    def sort_keys(self) -> list[str]:
        """Return the sort keys of sortable columns, in column order."""
        return [c.key for c in self.columns.values() if c.key is not None]


class TableHead(TemplateWidget):
    """Render a standard table header, with column headers and filters."""

    template_name = "tablelegs/_table_header.html"

    def __init__(self, table: "Table") -> None:
        """Build a TableHead widget."""
        self.table = table

    def get_context_data(self) -> dict[str, Any]:
        """Return context for rendering."""
        return {"table": self.table}
