# SPDX-License-Identifier: AGPL-3.0-or-later
# pylint: disable=missing-module-docstring,disable=missing-class-docstring,invalid-name

import os
import pathlib
import unittest
from unittest.mock import patch

SETTINGS_FOLDER = pathlib.Path(__file__).parent / "unit" / "settings"


class ZimSuggestTestCase(unittest.TestCase):
    """Base test case of the unit tests, the settings are reloaded from
    ``SETTINGS_FILE`` in :origin:`tests/unit/settings/` for each test."""

    SETTINGS_FILE = "test_settings.yml"

    def setUp(self):
        environ = patch.dict(os.environ, {'ZIMSUGGEST_SETTINGS_PATH': str(SETTINGS_FOLDER / self.SETTINGS_FILE)})
        environ.start()
        self.addCleanup(environ.stop)

        import zimsuggest  # pylint: disable=import-outside-toplevel

        zimsuggest.init_settings()
