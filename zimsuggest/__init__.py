# SPDX-License-Identifier: AGPL-3.0-or-later
"""Suggestion list of the archive autocompleter.  Importing the package loads
the settings (:py:obj:`zimsuggest.config`) and sets up logging."""
from __future__ import annotations

import typing as t
import logging
import os
import sys

import coloredlogs

LOG_FORMAT_DEBUG: str = '%(levelname)-7s %(name)-30.30s: %(message)s'
LOG_FORMAT_PROD: str = '%(asctime)-15s %(levelname)s:%(name)s: %(message)s'

settings: dict[str, t.Any] = {}
"""Checked settings, see :py:obj:`zimsuggest.config.check_settings`."""

logger = logging.getLogger('zimsuggest')

_unset = object()


def init_settings():
    """(Re-)load the global ``settings`` and configure the ``zimsuggest``
    logger.  Translators created by
    :py:obj:`zimsuggest.i18n.get_default_translator` before this call keep
    their settings, the next call of that function returns a translator with
    the new ones."""

    from zimsuggest import config  # pylint: disable=import-outside-toplevel

    cfg, msg = config.load_settings()
    settings.clear()
    settings.update(config.check_settings(cfg))

    _init_logging(settings['debug'])
    logger.debug('%s, default locale %s', msg, settings['i18n']['default_locale'])


def get_setting(name: str, default: t.Any = _unset) -> t.Any:
    """Value of the dotted ``name`` (e.g. ``i18n.default_locale``).  Raises a
    :py:obj:`KeyError` if there is no such setting and no ``default``."""
    value: t.Any = settings
    for key in name.split('.'):
        if not isinstance(value, dict) or key not in value:
            if default is _unset:
                raise KeyError(name)
            return default
        value = value[key]
    return value


def _init_logging(debug: bool):
    if not debug:
        logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT_PROD)
        logger.setLevel(logging.WARNING)
        return

    level = os.environ.get('ZIMSUGGEST_DEBUG_LOG_LEVEL', 'DEBUG').upper()
    logger.setLevel(level)
    if sys.stdout.isatty() and os.getenv('TERM') not in ('dumb', 'unknown'):
        coloredlogs.install(level=level, logger=logger, fmt=LOG_FORMAT_DEBUG)
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT_DEBUG)


init_settings()
