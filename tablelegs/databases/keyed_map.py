# Copyright © The Tablelegs Developers
# See the AUTHORS file at the top-level directory of this distribution
#
# This file is part of Tablelegs. It is subject to the license terms
# in the LICENSE file found in the top-level directory of this
# distribution. No part of Tablelegs, including this file, may be copied,
# modified, propagated, or distributed except according to the terms
# contained in the LICENSE file.

"""Tables presenting the items of a mapping."""

from collections.abc import Callable, Mapping
from pprint import pformat
from typing import Any

from tablelegs.databases.base import Database, KeyValueRow, SortOrder
from tablelegs.exceptions import ComparisonError
from tablelegs.utils import is_scalar, natural_key


class KeyedMap(Database):
    """
    Present a mapping as ``(key, value)`` rows.

    Rows can be sorted by ``key``, or by value using any other sort key.
    """

    db: dict[Any, Any]

    def __init__(self, db: Mapping[Any, Any]) -> None:
        """Wrap a copy of the mapping."""
        super().__init__(dict(db))

    def sort(self, key: str, order: SortOrder) -> None:
        """
        Sort by mapping key if ``key`` is ``"key"``, else by value.

        Keys compare in natural order, values in case-insensitive natural
        order.

        :raises ComparisonError: if sorting by value and some values are
                                 not scalars, or if the keys or values
                                 cannot be compared with each other
        """
        items = list(self.db.items())
        if key == "key":
            index, casefold, label = 0, False, "key"
        else:
            index, casefold, label = 1, True, "value"
            for item_key, value in items:
                if not is_scalar(value):
                    raise ComparisonError(
                        f"Cannot sort by value: value for {item_key!r}"
                        f" is a {type(value).__name__}"
                    )
        try:
            items.sort(
                key=lambda item: natural_key(item[index], casefold=casefold),
                reverse=order.reverse,
            )
        except TypeError as e:
            raise ComparisonError(f"Cannot sort by {label}: {e}") from e
        self.db = dict(items)

    def fetch_all(self) -> list[KeyValueRow]:
        """
        Return ``(key, value)`` rows.

        Values that are not strings are pretty-printed, so that every value
        can be rendered as text.
        """
        return [
            KeyValueRow(
                key=key,
                value=value if isinstance(value, str) else pformat(value),
            )
            for key, value in self.db.items()
        ]

    def count(self) -> int:
        """Return the number of items."""
        return len(self.db)

    def is_empty(self) -> bool:
        """Check if the mapping has no items."""
        return not self.db

    def filter(self, predicate: Callable[[Any, Any], bool]) -> None:
        """Keep only the items for which ``predicate(key, value)`` is true."""
        self.db = {
            key: value
            for key, value in self.db.items()
            if predicate(key, value)
        }
