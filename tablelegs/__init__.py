# Copyright © The Tablelegs Developers
# See the AUTHORS file at the top-level directory of this distribution
#
# This file is part of Tablelegs. It is subject to the license terms
# in the LICENSE file found in the top-level directory of this
# distribution. No part of Tablelegs, including this file, may be copied,
# modified, propagated, or distributed except according to the terms
# contained in the LICENSE file.

"""Sortable, filterable, paginated tables for Django."""

from tablelegs.columns import Column
from tablelegs.databases import (
    Database,
    ExternalCollection,
    HostCollection,
    IndexedList,
    KeyValueRow,
    KeyedMap,
    QueryBuilderSource,
    SortOrder,
    make_database,
)
from tablelegs.exceptions import (
    ArgumentError,
    ComparisonError,
    ConfigurationError,
    MethodNotFound,
)
from tablelegs.filters import Filter
from tablelegs.overrides import filter_handler, sorter
from tablelegs.paginator import Page, Paginator
from tablelegs.table import Table

__all__ = [
    "ArgumentError",
    "Column",
    "ComparisonError",
    "ConfigurationError",
    "Database",
    "ExternalCollection",
    "Filter",
    "HostCollection",
    "IndexedList",
    "KeyValueRow",
    "KeyedMap",
    "MethodNotFound",
    "Page",
    "Paginator",
    "QueryBuilderSource",
    "SortOrder",
    "Table",
    "filter_handler",
    "make_database",
    "sorter",
]
