# Copyright © The Tablelegs Developers
# See the AUTHORS file at the top-level directory of this distribution
#
# This file is part of Tablelegs. It is subject to the license terms
# in the LICENSE file found in the top-level directory of this
# distribution. No part of Tablelegs, including this file, may be copied,
# modified, propagated, or distributed except according to the terms
# contained in the LICENSE file.

"""Exceptions raised by Tablelegs."""

from django.core.exceptions import ImproperlyConfigured


class ConfigurationError(ImproperlyConfigured):
    """
    A table definition cannot work as declared.

    This is raised at table construction time, and signals a mistake in the
    integration code rather than in user input.
    """


class ArgumentError(TypeError):
    """The raw dataset is not something a table can present."""


class ComparisonError(TypeError):
    """Rows cannot be ordered because the sorted values are not comparable."""


class MethodNotFound(AttributeError):
    """A forwarded call has no target in the underlying data source."""
