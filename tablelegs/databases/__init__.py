# Copyright © The Tablelegs Developers
# See the AUTHORS file at the top-level directory of this distribution
#
# This file is part of Tablelegs. It is subject to the license terms
# in the LICENSE file found in the top-level directory of this
# distribution. No part of Tablelegs, including this file, may be copied,
# modified, propagated, or distributed except according to the terms
# contained in the LICENSE file.

"""Data sources for tables."""

import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from django.db.models import QuerySet
from django.db.models.manager import BaseManager

from tablelegs.databases.base import Database, KeyValueRow, SortOrder
from tablelegs.databases.collection import ExternalCollection, HostCollection
from tablelegs.databases.indexed_list import IndexedList
from tablelegs.databases.keyed_map import KeyedMap
from tablelegs.databases.query_builder import QueryBuilderSource
from tablelegs.exceptions import ArgumentError, ConfigurationError

log = logging.getLogger(__name__)

__all__ = [
    "Database",
    "ExternalCollection",
    "HostCollection",
    "IndexedList",
    "KeyValueRow",
    "KeyedMap",
    "QueryBuilderSource",
    "SortOrder",
    "make_database",
]


def _is_index_keyed(mapping: Mapping[Any, Any]) -> bool:
    """Check if a non-empty mapping has exactly the keys ``0…len-1``."""
    if not mapping:
        return False
    return list(mapping.keys()) == list(range(len(mapping)))


def make_database(
    raw: Any, database_class: type[Database] | None = None
) -> Database:
    """
    Wrap a raw dataset in the matching Database class.

    :param raw: the dataset to present
    :param database_class: if set, use this class instead of inferring it
                           from the type of ``raw``
    :raises ConfigurationError: if ``raw`` is an object type that no
                                Database class can handle
    :raises ArgumentError: if ``raw`` is a scalar value
    """
    if database_class is not None:
        return database_class(raw)

    database: Database
    match raw:
        case QuerySet() | BaseManager():
            database = QueryBuilderSource(raw)
        case HostCollection():
            database = ExternalCollection(raw)
        case Mapping() if _is_index_keyed(raw):
            database = IndexedList(raw.values())
        case Mapping():
            database = KeyedMap(raw)
        case list() | tuple():
            database = IndexedList(raw)
        case str() | bytes() | int() | float() | Decimal() | None:
            raise ArgumentError(
                "Table data must be a mapping, a sequence or an object,"
                f" not {type(raw).__name__}"
            )
        case _:
            raise ConfigurationError(
                f"No data source class can handle {type(raw).__name__}"
                " objects: set database_class in the table definition"
            )

    log.debug(
        "Presenting %s using %s",
        type(raw).__name__,
        database.__class__.__name__,
    )
    return database
