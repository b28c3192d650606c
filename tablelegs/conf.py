# Copyright © The Tablelegs Developers
# See the AUTHORS file at the top-level directory of this distribution
#
# This file is part of Tablelegs. It is subject to the license terms
# in the LICENSE file found in the top-level directory of this
# distribution. No part of Tablelegs, including this file, may be copied,
# modified, propagated, or distributed except according to the terms
# contained in the LICENSE file.

"""Tablelegs settings, read from the Django configuration."""

from typing import Any

from django.conf import settings

#: Default values for settings not found in the Django configuration
DEFAULTS: dict[str, Any] = {
    # Number of rows per page, if the table does not say otherwise
    "PER_PAGE": 15,
    # Query string argument used to select the page
    "PAGE_NAME": "page",
    # Upper bound for per_page values requested in the query string, or
    # None for no bound
    "MAX_PER_PAGE": 500,
}


def get_setting(name: str) -> Any:
    """
    Look up a Tablelegs setting.

    The value is taken from ``settings.TABLELEGS_<name>`` if defined, and
    from :py:data:`DEFAULTS` otherwise.
    """
    return getattr(settings, f"TABLELEGS_{name}", DEFAULTS[name])
