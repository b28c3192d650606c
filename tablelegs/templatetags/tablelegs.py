# Copyright © The Tablelegs Developers
# See the AUTHORS file at the top-level directory of this distribution
#
# This file is part of Tablelegs. It is subject to the license terms
# in the LICENSE file found in the top-level directory of this
# distribution. No part of Tablelegs, including this file, may be copied,
# modified, propagated, or distributed except according to the terms
# contained in the LICENSE file.

"""Template tag library to render Tablelegs widgets."""

import logging

from django import template
from django.conf import settings
from django.template import Context, Node, TemplateSyntaxError
from django.template.base import FilterExpression, Parser, Token
from django.utils.html import conditional_escape, format_html
from django.utils.safestring import SafeString

from tablelegs.widgets import Widget

log = logging.getLogger(__name__)

register = template.Library()


class WidgetNode(Node):
    """
    Render the argument of a ``{% widget %}`` tag.

    The argument is a :py:class:`Widget`, or a string that is escaped as
    needed. Any failure raises with DEBUG set. Otherwise it is logged, and
    a short error marker is rendered in place of the widget.
    """

    def __init__(self, value: FilterExpression) -> None:
        """Store the tag argument."""
        self.value = value

    @property
    def tag_source(self) -> str:
        """Return the tag as written in the template, for messages."""
        return f"{{% widget {self.value.token} %}}"

    def render_value(self, context: Context) -> str | SafeString:
        """
        Resolve the argument and render it.

        :raises ValueError: if the argument is undefined
        :raises TypeError: if the argument is neither a Widget nor a string
        """
        value = self.value.resolve(context, ignore_failures=True)
        match value:
            case Widget():
                return value.render(context)
            case str() if context.autoescape:
                return conditional_escape(value)
            case str():
                return value
            case None:
                raise ValueError(f"{self.value.token!r} is undefined")
            case _:
                raise TypeError(
                    f"{self.value.token!r} is a {type(value).__name__},"
                    " not a Widget or a string"
                )

    def render(self, context: Context) -> str | SafeString:
        """Render the template node."""
        try:
            return self.render_value(context)
        except Exception as e:
            if settings.DEBUG:
                e.add_note(f"while rendering {self.tag_source}")
                raise
            log.warning("%s failed to render", self.tag_source, exc_info=e)
            return format_html(
                "<span data-role='tablelegs-widget-error'"
                " class='bg-danger text-white'>{} failed to render</span>",
                self.value.token,
            )


@register.tag
def widget(parser: Parser, token: Token) -> WidgetNode:
    """Parse ``{% widget value %}``."""
    match token.split_contents():
        case [_, value]:
            return WidgetNode(parser.compile_filter(value))
        case _:
            raise TemplateSyntaxError(
                "{% widget %} requires exactly one argument"
            )
