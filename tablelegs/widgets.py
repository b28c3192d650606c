# Copyright © The Tablelegs Developers
# See the AUTHORS file at the top-level directory of this distribution
#
# This file is part of Tablelegs. It is subject to the license terms
# in the LICENSE file found in the top-level directory of this
# distribution. No part of Tablelegs, including this file, may be copied,
# modified, propagated, or distributed except according to the terms
# contained in the LICENSE file.

"""Base infrastructure for renderable table elements."""

import abc
from typing import Any

from django.template.context import Context


class Widget(abc.ABC):
    """Base class for template-renderable elements."""

    @abc.abstractmethod
    def render(self, context: Context) -> str:
        """Render the element."""


class TemplateWidget(Widget):
    """Widget rendered using a Django template."""

    template_name: str

    def get_context_data(self) -> dict[str, Any]:
        """Return context for rendering."""
        return {}

    def render(self, context: Context) -> str:
        """Render the widget template with the extra context."""
        assert context.template is not None
        template = context.template.engine.get_template(self.template_name)
        with context.update(self.get_context_data()):
            return template.render(context)
