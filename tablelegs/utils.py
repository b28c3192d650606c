# Copyright © The Tablelegs Developers
# See the AUTHORS file at the top-level directory of this distribution
#
# This file is part of Tablelegs. It is subject to the license terms
# in the LICENSE file found in the top-level directory of this
# distribution. No part of Tablelegs, including this file, may be copied,
# modified, propagated, or distributed except according to the terms
# contained in the LICENSE file.

"""Utility functions shared by tables and data sources."""

import re
from datetime import date, time, timedelta
from decimal import Decimal
from enum import Enum
from typing import Any, TypeAlias
from uuid import UUID

#: Sort key produced by natural_key
NaturalKey: TypeAlias = tuple[tuple[int, Any], ...]

_slug_re = re.compile(r"\W")
_digits_re = re.compile(r"(\d+)")

#: Types whose values compare as numbers
NUMERIC_TYPES = (int, float, Decimal)

#: Types whose values compare with their own ordering
ORDERED_TYPES = (date, time, timedelta, UUID)

#: Types whose values can be sorted
SCALAR_TYPES = (str, *NUMERIC_TYPES, *ORDERED_TYPES)


def slugify(name: str) -> str:
    """
    Turn a human name into a URL-friendly key.

    Non-word characters are replaced with underscores and the result is
    lowercased, so ``"Not active"`` becomes ``"not_active"``. Applying it to
    an existing key returns the key unchanged.
    """
    return _slug_re.sub("_", name).lower()


def is_scalar(value: Any) -> bool:
    """Check if a value can be compared with natural_key."""
    if isinstance(value, Enum):
        value = value.value
    return value is None or isinstance(value, SCALAR_TYPES)


def natural_key(value: Any, *, casefold: bool = True) -> NaturalKey:
    """
    Build a sort key implementing natural ordering.

    Numbers compare by value, and runs of digits in text compare as
    numbers, so ``"item2"`` sorts before ``"item10"`` and ``-5`` before
    ``1.25``. Dates, times, durations and UUIDs compare with their own
    ordering. Enum members compare by value. ``None`` sorts as the empty
    string.

    Keys are tuples of ``(rank, part)`` chunks: rank 0 for numbers, 1 for
    text, 2 for other ordered values. Numbers and text can share a column.
    Ordered values of incompatible types raise TypeError when compared.
    """
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, NUMERIC_TYPES) and not isinstance(value, bool):
        return ((0, value),)
    if isinstance(value, ORDERED_TYPES):
        return ((2, value),)

    text = "" if value is None else str(value)
    if casefold:
        text = text.casefold()
    chunks: list[tuple[int, Any]] = []
    for idx, chunk in enumerate(_digits_re.split(text)):
        if not chunk:
            continue
        # re.split puts captured digit runs at odd indices
        if idx % 2:
            chunks.append((0, int(chunk)))
        else:
            chunks.append((1, chunk))
    return tuple(chunks)


def parse_positive_int(value: Any) -> int | None:
    """Return value as a positive integer, or None if it is not one."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = int(value)
    except (TypeError, ValueError):
        return None
    if number < 1:
        return None
    return number
