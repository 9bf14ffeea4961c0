# SPDX-License-Identifier: AGPL-3.0-or-later
"""Settings of zimsuggest.  The defaults are read from
:origin:`zimsuggest/settings.yml`.  ``ZIMSUGGEST_SETTINGS_PATH`` names a YAML
file (or a folder with a ``settings.yml``) whose values override the defaults
key by key::

    debug: true
    i18n:
      default_locale: "it"
      locale_best_match:
        fur: "it"

:py:obj:`check_settings` normalizes the values.  Each value it can't use is
logged, a :py:obj:`ZimSuggestSettingsException` is raised after all values
have been checked.
"""
from __future__ import annotations

import typing as t
import errno
import logging
import os
from pathlib import Path

import babel
import yaml

from zimsuggest.exceptions import ZimSuggestSettingsException

SettingsType: t.TypeAlias = dict[str, t.Any]

logger = logging.getLogger('zimsuggest.config')

PACKAGE_DIR = Path(__file__).parent
DEFAULT_SETTINGS_FILE = PACKAGE_DIR / 'settings.yml'
BUNDLED_TRANSLATIONS = PACKAGE_DIR / 'translations'
MESSAGES_PO = Path('LC_MESSAGES') / 'messages.po'

_TRUE = ('1', 'true', 'on', 'yes')
_FALSE = ('0', 'false', 'off', 'no')


def read_yaml(file_name: str | Path) -> SettingsType:
    """Read the mapping in YAML file ``file_name``, an empty file is an empty
    mapping."""
    try:
        with open(file_name, 'r', encoding='utf-8') as f:
            cfg = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ZimSuggestSettingsException(e, str(file_name)) from e
    if cfg is None:
        return {}
    if not isinstance(cfg, dict):
        raise ZimSuggestSettingsException('settings have to be a mapping', str(file_name))
    return cfg


def user_settings_file() -> Path | None:
    """The file named by ``ZIMSUGGEST_SETTINGS_PATH``, or the ``settings.yml``
    in the folder it names.  ``None`` if the variable is unset or the folder has
    no ``settings.yml``; a path that does not exist raises
    :py:obj:`FileNotFoundError`."""
    value = os.environ.get('ZIMSUGGEST_SETTINGS_PATH')
    if not value:
        return None
    path = Path(value)
    if path.is_dir():
        path = path / 'settings.yml'
        return path if path.is_file() else None
    if not path.is_file():
        raise FileNotFoundError(errno.ENOENT, 'ZIMSUGGEST_SETTINGS_PATH does not exist', str(path))
    return path


def merge_settings(base: SettingsType, override: SettingsType) -> SettingsType:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            value = merge_settings(merged[key], value)
        merged[key] = value
    return merged


def load_settings() -> tuple[SettingsType, str]:
    """Returns the (unchecked) settings and a message naming where they came
    from."""
    cfg = read_yaml(DEFAULT_SETTINGS_FILE)
    cfg_file = user_settings_file()
    if cfg_file is None:
        return cfg, f"settings from {DEFAULT_SETTINGS_FILE}"
    return merge_settings(cfg, read_yaml(cfg_file)), f"settings from {DEFAULT_SETTINGS_FILE} and {cfg_file}"


def _to_bool(value: t.Any) -> bool:
    if isinstance(value, str):
        if value.lower() in _TRUE:
            return True
        if value.lower() in _FALSE:
            return False
    if isinstance(value, bool):
        return value
    raise ValueError(f"{value!r} is not a boolean")


def check_settings(cfg: SettingsType) -> SettingsType:
    """Returns the settings with all keys set:

    - ``debug``: bool, ``ZIMSUGGEST_DEBUG`` wins over the file
    - ``i18n.default_locale``: a locale known by babel, underscore delimited
      (``pt-BR`` becomes ``pt_BR``) and with a catalog in the translations
    - ``i18n.translations_path``: existing folder, empty selects
      :py:obj:`BUNDLED_TRANSLATIONS`
    - ``i18n.locale_best_match``: mapping of language code to locale
    """
    errors: list[str] = []

    try:
        debug = _to_bool(os.environ.get('ZIMSUGGEST_DEBUG', cfg.get('debug', False)))
    except ValueError as e:
        errors.append(f"debug: {e}")
        debug = False

    i18n: SettingsType = cfg.get('i18n') or {}

    default_locale = str(i18n.get('default_locale') or 'en').replace('-', '_')
    try:
        babel.Locale.parse(default_locale)
    except (ValueError, babel.UnknownLocaleError):
        errors.append(f"i18n.default_locale: {default_locale!r} is not a locale")

    translations_path = Path(i18n.get('translations_path') or BUNDLED_TRANSLATIONS)
    if not translations_path.is_dir():
        errors.append(f"i18n.translations_path: {translations_path} is not a folder")
    elif not (translations_path / default_locale / MESSAGES_PO).is_file():
        errors.append(f"i18n.translations_path: no message catalog for locale {default_locale!r}")

    best_match = i18n.get('locale_best_match') or {}
    if not isinstance(best_match, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in best_match.items()
    ):
        errors.append("i18n.locale_best_match: has to map language codes to locales")
        best_match = {}

    for error in errors:
        logger.error(error)
    if errors:
        raise ZimSuggestSettingsException(f"invalid settings ({len(errors)} error(s), see log)")

    return {
        'debug': debug,
        'i18n': {
            'default_locale': default_locale,
            'translations_path': str(translations_path),
            'locale_best_match': dict(best_match),
        },
    }
