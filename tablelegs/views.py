# Copyright © The Tablelegs Developers
# See the AUTHORS file at the top-level directory of this distribution
#
# This file is part of Tablelegs. It is subject to the license terms
# in the LICENSE file found in the top-level directory of this
# distribution. No part of Tablelegs, including this file, may be copied,
# modified, propagated, or distributed except according to the terms
# contained in the LICENSE file.

"""View mixins for tables."""

from typing import Any

from django.views.generic.list import MultipleObjectMixin

from tablelegs.conf import get_setting
from tablelegs.paginator import Paginator
from tablelegs.table import Table


class TableMixin(MultipleObjectMixin):
    """
    Mixin for ListViews presenting their object list with a Table.

    The table is built from the view's object list and added to the template
    context as ``table``. Pagination of the ListView uses the table
    paginator, so that page links preserve sorting and filtering.
    """

    #: Table class used to present the object list
    table_class: type[Table]

    #: Query string prefix for the table arguments
    table_prefix: str = ""

    _table: Table | None = None

    def get_table(self) -> Table:
        """Return the table for the current request, building it once."""
        if self._table is None:
            self._table = self.table_class(
                self.request, self.object_list, prefix=self.table_prefix
            )
            self.page_kwarg = self._table.field_name(
                get_setting("PAGE_NAME")
            )
        return self._table

    def get_paginate_by(self, queryset: Any) -> int:  # noqa: U100
        """Return the number of rows per page chosen by the table."""
        return self.get_table().resolve_per_page(self.paginate_by)

    def get_paginator(
        self,
        queryset: Any,  # noqa: U100
        per_page: int,
        orphans: int = 0,
        allow_empty_first_page: bool = True,
        **kwargs: Any,  # noqa: U100
    ) -> Paginator:
        """Return the paginator of the table."""
        return self.get_table().get_paginator(
            per_page,
            orphans=orphans,
            allow_empty_first_page=allow_empty_first_page,
        )

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:
        """Add the table to the template context."""
        context = super().get_context_data(**kwargs)
        context["table"] = self.get_table()
        return context
