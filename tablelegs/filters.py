# Copyright © The Tablelegs Developers
# See the AUTHORS file at the top-level directory of this distribution
#
# This file is part of Tablelegs. It is subject to the license terms
# in the LICENSE file found in the top-level directory of this
# distribution. No part of Tablelegs, including this file, may be copied,
# modified, propagated, or distributed except according to the terms
# contained in the LICENSE file.

"""Table filtering by a fixed set of options."""

import logging
from collections.abc import Collection, Iterable, Iterator
from functools import cached_property
from typing import Any, NamedTuple, TYPE_CHECKING

from tablelegs.exceptions import ConfigurationError
from tablelegs.utils import slugify
from tablelegs.widgets import TemplateWidget

if TYPE_CHECKING:
    from tablelegs.table import Table

log = logging.getLogger(__name__)


class FilterOption(NamedTuple):
    """One option of a filter."""

    #: URL-friendly key
    key: str
    #: Human-readable name
    label: str


class Filter:
    """
    A filter selecting one option among a fixed set.

    The filter key used in the query string is derived from the label, and
    so are the option keys.
    """

    #: Key of the filter in the table and in the query string
    name: str
    label: str
    #: Options indexed by key, in declaration order
    options: dict[str, FilterOption]

    def __init__(self, label: str, *, options: Iterable[str]) -> None:
        """
        Store the filter definition.

        :param label: human-readable filter name
        :param options: human-readable names of the options
        :raises ConfigurationError: if two options map to the same key
        """
        self.name = slugify(label)
        self.label = label
        self.options = {}
        for option_label in options:
            option = FilterOption(
                key=slugify(option_label), label=option_label
            )
            if (existing := self.options.get(option.key)) is not None:
                raise ConfigurationError(
                    f"filter {label!r}: options {existing.label!r}"
                    f" and {option_label!r} have the same key {option.key!r}"
                )
            self.options[option.key] = option

    @property
    def key(self) -> str:
        """Return the query string key for the filter."""
        return self.name


class BoundFilterOption(NamedTuple):
    """A filter option with its state for the current request."""

    key: str
    label: str
    active: bool
    url: str


class BoundFilter:
    """A Filter bound to a table."""

    def __init__(self, filter_: Filter, filters: "Filters") -> None:
        """Build from filter and table filters definition."""
        self.filter = filter_
        self.filters = filters

    def __repr__(self) -> str:
        """Return a debugging representation."""
        return f"BoundFilter({self.key!r})"

    @property
    def key(self) -> str:
        """Return the filter key."""
        return self.filter.key

    @property
    def name(self) -> str:
        """Return the filter label."""
        return self.filter.label

    label = name

    @cached_property
    def field_name(self) -> str:
        """Return the query string field used by this filter."""
        return self.filters.table.field_name(self.key)

    @property
    def options(self) -> dict[str, str]:
        """Return option labels indexed by option key."""
        return {
            key: option.label for key, option in self.filter.options.items()
        }

    @cached_property
    def value(self) -> str | None:
        """
        Return the key of the option selected in the query string.

        Values that do not match any option are ignored.
        """
        raw = self.filters.table.request.GET.get(self.field_name)
        if not raw:
            return None
        key = slugify(raw)
        if key not in self.filter.options:
            log.debug("Ignoring unknown value %r for filter %r", raw, self.key)
            return None
        return key

    @property
    def active(self) -> bool:
        """Check if an option of the filter is selected."""
        return self.value is not None

    def is_active(self, option: str) -> bool:
        """Check if the given option is selected."""
        return self.value is not None and self.value == slugify(option)

    @cached_property
    def qs_remove(self) -> str:
        """Query string that can be used to remove this filter."""
        query = self.filters.table.request.GET.copy()
        query.pop(self.field_name, None)
        return query.urlencode()

    def activation_query_string(self, option: str) -> str:
        """
        Return the query string toggling an option.

        If the option is selected, the query string deselects it, else it
        selects it. All other query string arguments are preserved.
        """
        if self.is_active(option):
            return self.qs_remove
        query = self.filters.table.request.GET.copy()
        query[self.field_name] = slugify(option)
        return query.urlencode()

    def activation_url(self, option: str) -> str:
        """Return the relative URL toggling an option."""
        return "?" + self.activation_query_string(option)

    @cached_property
    def choices(self) -> list[BoundFilterOption]:
        """Return all options with their state, for use in templates."""
        return [
            BoundFilterOption(
                key=option.key,
                label=option.label,
                active=self.is_active(option.key),
                url=self.activation_url(option.key),
            )
            for option in self.filter.options.values()
        ]


class Filters(TemplateWidget):
    """Filter definitions for a table."""

    template_name = "tablelegs/_filters.html"

    def __init__(self, table: "Table") -> None:
        """Instantiate for the given table."""
        self.table = table

        #: Filters configured for the table
        self.options: dict[str, BoundFilter] = {}

    def __bool__(self) -> bool:
        """Return True if there are filters defined."""
        return bool(self.options)

    def __iter__(self) -> Iterator[BoundFilter]:
        """Iterate all filters."""
        return iter(self.options.values())

    def __getitem__(self, key: str) -> BoundFilter:
        """Get a filter by key."""
        return self.options[key]

    @property
    def active(self) -> Collection[BoundFilter]:
        """Return all filters with a selected option."""
        return [f for f in self.options.values() if f.active]

    @cached_property
    def qs_clear_filters(self) -> str:
        """Query string clearing all filters of this table."""
        query = self.table.request.GET.copy()
        for f in self.options.values():
            query.pop(f.field_name, None)
        return query.urlencode()

    def add(self, filter_: Filter) -> BoundFilter:
        """
        Add a new filter.

        :raises ConfigurationError: if a filter with the same key exists
        """
        if (existing := self.options.get(filter_.key)) is not None:
            raise ConfigurationError(
                f"filters {existing.name!r} and {filter_.label!r}"
                f" have the same key {filter_.key!r}"
            )
        bound = BoundFilter(filter_, self)
        self.options[filter_.key] = bound
        return bound

    def get_context_data(self) -> dict[str, Any]:
        """Get context for widget rendering."""
        return {"filters": self, "table": self.table}
