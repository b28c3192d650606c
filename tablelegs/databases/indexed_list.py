# Copyright © The Tablelegs Developers
# See the AUTHORS file at the top-level directory of this distribution
#
# This file is part of Tablelegs. It is subject to the license terms
# in the LICENSE file found in the top-level directory of this
# distribution. No part of Tablelegs, including this file, may be copied,
# modified, propagated, or distributed except according to the terms
# contained in the LICENSE file.

"""Tables presenting a list of records."""

from collections.abc import Callable, Iterable, Mapping, Sequence, Set
from decimal import Decimal
from typing import Any

from tablelegs.databases.base import Database, SortOrder
from tablelegs.exceptions import ComparisonError
from tablelegs.utils import NaturalKey, is_scalar, natural_key


def _record_shape(element: Any) -> str:
    """
    Classify a list element by how its fields are accessed.

    :returns: ``"mapping"`` for elements accessed by key, ``"object"`` for
              elements accessed by attribute
    :raises ComparisonError: if the element has no named fields
    """
    match element:
        case Mapping():
            return "mapping"
        case tuple() if hasattr(element, "_fields"):
            # Named tuples
            return "object"
        case None | str() | bytes() | int() | float() | Decimal():
            pass
        case Sequence() | Set():
            pass
        case _:
            return "object"
    raise ComparisonError(
        "Can only sort by keys or properties of records,"
        f" not of {type(element).__name__} elements"
    )


class IndexedList(Database):
    """
    Present a list of records, one per row.

    Records are either all mappings, sorted by key lookup, or all objects,
    sorted by attribute lookup.
    """

    db: list[Any]

    def __init__(self, db: Iterable[Any]) -> None:
        """Wrap a copy of the sequence."""
        super().__init__(list(db))

    def _field_getter(self, key: str) -> Callable[[Any], NaturalKey]:
        """Return a function computing the sort key of a record."""
        shapes = {_record_shape(element) for element in self.db}
        if len(shapes) > 1:
            raise ComparisonError(
                "Cannot sort a list mixing mappings and objects"
            )

        def get_field(element: Any) -> NaturalKey:
            try:
                if isinstance(element, Mapping):
                    value = element[key]
                else:
                    value = getattr(element, key)
            except (KeyError, AttributeError) as e:
                raise ComparisonError(
                    f"Cannot sort by {key!r}: field missing in {element!r}"
                ) from e
            if not is_scalar(value):
                raise ComparisonError(
                    f"Cannot sort by {key!r}:"
                    f" {type(value).__name__} values are not comparable"
                )
            return natural_key(value)

        return get_field

    def sort(self, key: str, order: SortOrder) -> None:
        """
        Sort records by the field ``key``, in case-insensitive natural order.

        :raises ComparisonError: if records have no named fields, have
                                 different shapes, lack the field, or have
                                 values in it that cannot be compared
        """
        get_field = self._field_getter(key)
        try:
            self.db = sorted(self.db, key=get_field, reverse=order.reverse)
        except ComparisonError:
            raise
        except TypeError as e:
            raise ComparisonError(f"Cannot sort by {key!r}: {e}") from e

    def fetch_all(self) -> list[Any]:
        """Return all records."""
        return self.db

    def count(self) -> int:
        """Return the number of records."""
        return len(self.db)

    def is_empty(self) -> bool:
        """Check if there are no records."""
        return not self.db

    def filter(self, predicate: Callable[[Any], bool]) -> None:
        """Keep only the records for which ``predicate`` is true."""
        self.db = [element for element in self.db if predicate(element)]
