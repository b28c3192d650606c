# Copyright © The Tablelegs Developers
# See the AUTHORS file at the top-level directory of this distribution
#
# This file is part of Tablelegs. It is subject to the license terms
# in the LICENSE file found in the top-level directory of this
# distribution. No part of Tablelegs, including this file, may be copied,
# modified, propagated, or distributed except according to the terms
# contained in the LICENSE file.

"""Page navigation widget."""

from django.template.context import BaseContext
from django.utils.html import format_html
from django.utils.safestring import SafeString, mark_safe

from tablelegs.paginator import Page
from tablelegs.widgets import Widget


class PageNavigation(Widget):
    """Render the page navigation bar for a page of rows."""

    def __init__(self, page: Page) -> None:
        """Build the PageNavigation widget."""
        self.page = page
        self.paginator = page.paginator

    def render(self, context: BaseContext | None = None) -> str:  # noqa: U100
        """Render the widget."""
        page = self.page
        chunks: list[SafeString] = []
        if self.paginator.num_pages > 1:
            chunks.append(SafeString("<nav aria-label='pagination'>"))
            chunks.append(SafeString("<ul class='pagination'>"))
            if (previous_url := page.previous_page_url) is not None:
                chunks.append(
                    format_html(
                        "<li class='page-item'>"
                        "<a class='page-link' rel='prev' href='{url}'>"
                        "&laquo;</a></li>",
                        url=previous_url,
                    )
                )
            for page_number in page.elided_page_range:
                if page_number == page.number:
                    chunks.append(
                        format_html(
                            "<li class='page-item active' aria-current='page'>"
                            "<span class='page-link'>{page_number}</span>"
                            "</li>",
                            page_number=page_number,
                        )
                    )
                elif page_number is self.paginator.ELLIPSIS:
                    chunks.append(
                        format_html(
                            "<li class='page-item disabled'>"
                            "<span class='page-link'>{page_number}</span>"
                            "</li>",
                            page_number=page_number,
                        )
                    )
                else:
                    chunks.append(
                        format_html(
                            "<li class='page-item'>"
                            "<a class='page-link' href='{url}'>"
                            "{page_number}</a>"
                            "</li>",
                            url=self.paginator.page_url(int(page_number)),
                            page_number=page_number,
                        )
                    )
            if (next_url := page.next_page_url) is not None:
                chunks.append(
                    format_html(
                        "<li class='page-item'>"
                        "<a class='page-link' rel='next' href='{url}'>"
                        "&raquo;</a></li>",
                        url=next_url,
                    )
                )
            chunks.append(SafeString("</ul>"))
            chunks.append(SafeString("</nav>"))
        return mark_safe(SafeString("\n").join(chunks))
