# SPDX-License-Identifier: AGPL-3.0-or-later
"""Exception types raised by zimsuggest modules."""


class ZimSuggestException(Exception):
    """Base zimsuggest exception."""


class ZimSuggestSettingsException(ZimSuggestException):
    """The settings file can't be read or contains values zimsuggest can't
    use.  ``filename`` is ``None`` when the values did not come from a
    file."""

    def __init__(self, message: str | Exception, filename: str | None = None):
        super().__init__(f"{filename}: {message}" if filename else str(message))
        self.filename = filename
