# Copyright © The Tablelegs Developers
# See the AUTHORS file at the top-level directory of this distribution
#
# This file is part of Tablelegs. It is subject to the license terms
# in the LICENSE file found in the top-level directory of this
# distribution. No part of Tablelegs, including this file, may be copied,
# modified, propagated, or distributed except according to the terms
# contained in the LICENSE file.

"""Tests for Tablelegs settings."""

from django.conf import settings
from django.test import override_settings

from tablelegs.conf import DEFAULTS, get_setting
from tablelegs.test.django import BaseDjangoTestCase


class GetSettingTests(BaseDjangoTestCase):
    """Tests for :py:func:`get_setting`."""

    def test_configured(self) -> None:
        """Settings are read from the Django configuration."""
        self.assertEqual(get_setting("PER_PAGE"), 15)
        with override_settings(TABLELEGS_PAGE_NAME="p"):
            self.assertEqual(get_setting("PAGE_NAME"), "p")

    def test_default(self) -> None:
        """Missing settings use the defaults."""
        with override_settings():
            del settings.TABLELEGS_PER_PAGE
            self.assertEqual(get_setting("PER_PAGE"), DEFAULTS["PER_PAGE"])
        self.assertEqual(get_setting("PAGE_NAME"), "page")

    def test_unknown(self) -> None:
        """Unknown settings are an error."""
        with self.assertRaises(KeyError):
            get_setting("UNKNOWN")
