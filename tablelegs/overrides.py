# Copyright © The Tablelegs Developers
# See the AUTHORS file at the top-level directory of this distribution
#
# This file is part of Tablelegs. It is subject to the license terms
# in the LICENSE file found in the top-level directory of this
# distribution. No part of Tablelegs, including this file, may be copied,
# modified, propagated, or distributed except according to the terms
# contained in the LICENSE file.

"""
Registration of custom sorting and filtering logic on tables.

Table methods decorated with :py:func:`sorter` replace the generic sorting
of the data source for a sort key, and methods decorated with
:py:func:`filter_handler` run when a filter option is selected::

    class PeopleTable(Table):
        name = Column("Name")
        filter_status = Filter("Status", options=["Active", "Banned"])

        @sorter("name")
        def sort_by_full_name(self, order: SortOrder) -> None:
            self.database.sort("last_name", order)

        @filter_handler("Status", "Banned")
        def only_banned(self) -> None:
            self.database.filter(banned=True)
"""

from collections.abc import Callable
from typing import Any, TypeVar

from tablelegs.utils import slugify

F = TypeVar("F", bound=Callable[..., Any])

#: Function attribute storing the sort key handled by a method
SORTER_ATTR = "_tablelegs_sorter"

#: Function attribute storing the (filter, option) pair handled by a method
FILTER_HANDLER_ATTR = "_tablelegs_filter_handler"


def sorter(key: str) -> Callable[[F], F]:
    """Mark a table method as the sorting logic for ``key``."""

    def decorator(func: F) -> F:
        setattr(func, SORTER_ATTR, key)
        return func

    return decorator


def filter_handler(filter_name: str, option: str) -> Callable[[F], F]:
    """
    Mark a table method as the filtering logic for a filter option.

    Filter and option can be given either as display names or as keys.
    """

    def decorator(func: F) -> F:
        setattr(
            func, FILTER_HANDLER_ATTR, (slugify(filter_name), slugify(option))
        )
        return func

    return decorator


def collect_handlers(cls: type, attr: str) -> dict[Any, str]:
    """
    Collect marked methods of a class and its bases.

    :param cls: class to inspect
    :param attr: function attribute set by the registration decorator
    :returns: dict mapping the registered value to the method name
    """
    handlers: dict[Any, str] = {}
    # Walk the MRO from the most generic class, so that subclasses override
    # registrations of their bases
    for klass in reversed(cls.__mro__):
        for name, member in klass.__dict__.items():
            if not callable(member):
                continue
            if (value := getattr(member, attr, None)) is not None:
                handlers[value] = name
    return handlers
