# SPDX-License-Identifier: AGPL-3.0-or-later
"""Lookup of localized messages.  A :py:obj:`Translator` resolves a language
code and a message key to a localized template and substitutes the arguments
into it.  When there is no translation for the language, the message of the
default locale (English) is used, a lookup never fails.

The default implementation :py:obj:`CatalogTranslator` reads gettext message
catalogs::

    <translations_path>/<locale>/LC_MESSAGES/messages.po

The message key is the ``msgid``, the ``msgstr`` is a *python-format* string,
e.g.::

    msgid "search-pattern-suggestion"
    msgstr "containing '%(terms)s'..."

"""
from __future__ import annotations

import typing as t
import functools
from pathlib import Path

import babel
from babel.messages.catalog import Catalog
from babel.messages.pofile import read_po

from zimsuggest import get_setting, logger
from zimsuggest.config import MESSAGES_PO

logger = logger.getChild('i18n')


class Translator(t.Protocol):  # pylint: disable=too-few-public-methods
    """Capability used by :py:obj:`zimsuggest.suggestions.SuggestionList` to
    localize its labels."""

    def translate(self, language_code: str, message_key: str, args: dict[str, str] | None = None) -> str: ...


class BaseTranslator:
    """Locale fallback shared by the translators, subclasses implement
    :py:obj:`BaseTranslator.get_template`."""

    def __init__(self, default_locale: str | None = None, locale_best_match: dict[str, str] | None = None):
        if default_locale is None:
            default_locale = get_setting('i18n.default_locale', 'en')
        if locale_best_match is None:
            locale_best_match = get_setting('i18n.locale_best_match', {})
        self.default_locale: str = default_locale.replace('-', '_')
        self.locale_best_match: dict[str, str] = locale_best_match

    def get_template(self, locale_name: str, message_key: str) -> str | None:
        """Returns the untranslated template of ``message_key`` in locale
        ``locale_name`` (underscore delimited) or ``None``."""
        raise NotImplementedError()

    def locale_candidates(self, language_code: str) -> list[str]:
        """Locale names to try for ``language_code``, the most specific first
        and the default locale last.

        - ``pt-BR`` --> ``['pt_BR', 'pt', 'en']``
        - ``xx`` (unknown to babel) --> ``['xx', 'en']``
        """
        code = self.locale_best_match.get(language_code, language_code).replace('-', '_')
        candidates: list[str] = []

        locale = None
        if code:
            try:
                locale = babel.Locale.parse(code)
            except (ValueError, babel.UnknownLocaleError):
                logger.debug('%r is not a locale known by babel', code)

        if locale is not None:
            candidates.append(str(locale))
            if locale.script:
                candidates.append(f'{locale.language}_{locale.script}')
            candidates.append(locale.language)
        if code:
            candidates.append(code)
        candidates.append(self.default_locale)

        # keep order, drop duplicates
        return list(dict.fromkeys(candidates))

    def translate(self, language_code: str, message_key: str, args: dict[str, str] | None = None) -> str:
        candidates = self.locale_candidates(language_code)
        for locale_name in candidates:
            template = self.get_template(locale_name, message_key)
            if template is None:
                continue
            # a template with positional placeholders formats the whole dict
            if args and not all(f'%({name})s' in template for name in args):
                logger.error('translation of %r in locale %s lacks %s', message_key, locale_name, _placeholders(args))
                continue
            try:
                text = template % args if args else template
            except (KeyError, ValueError, TypeError) as e:
                logger.error('invalid translation of %r in locale %s: %s', message_key, locale_name, e)
                continue
            if locale_name != candidates[0]:
                logger.debug('no translation of %r for %r, using locale %s', message_key, language_code, locale_name)
            return text

        logger.debug('no translation of %r in locales %s', message_key, candidates)
        return message_key


def _placeholders(args: dict[str, str]) -> str:
    return ', '.join(f'%({name})s' for name in args)


class StaticTranslator(BaseTranslator):
    """Translator with the templates given in a mapping::

        StaticTranslator({
            'en': {'search-pattern-suggestion': "containing '%(terms)s'..."},
            'it': {'search-pattern-suggestion': "contenente '%(terms)s'..."},
        })
    """

    def __init__(self, messages: dict[str, dict[str, str]], default_locale: str = 'en', **kwargs: t.Any):
        super().__init__(default_locale=default_locale, **kwargs)
        self.messages = {k.replace('-', '_'): v for k, v in messages.items()}

    def get_template(self, locale_name: str, message_key: str) -> str | None:
        return self.messages.get(locale_name, {}).get(message_key) or None


class CatalogTranslator(BaseTranslator):
    """Translator reading the gettext catalogs in ``translations_path``
    (default: setting ``i18n.translations_path``).  Each catalog is parsed once
    by the first lookup in its locale."""

    def __init__(self, translations_path: str | Path | None = None, **kwargs: t.Any):
        super().__init__(**kwargs)
        if translations_path is None:
            translations_path = get_setting('i18n.translations_path')
        self.translations_path = Path(translations_path)
        self._catalogs: dict[str, Catalog | None] = {}

    def available_locales(self) -> list[str]:
        return sorted(p.name for p in self.translations_path.iterdir() if (p / MESSAGES_PO).is_file())

    def get_catalog(self, locale_name: str) -> Catalog | None:
        if locale_name not in self._catalogs:
            self._catalogs[locale_name] = self._load_catalog(locale_name)
        return self._catalogs[locale_name]

    def _load_catalog(self, locale_name: str) -> Catalog | None:
        po_file = self.translations_path / locale_name / MESSAGES_PO
        if not po_file.is_file():
            return None
        logger.debug('load message catalog %s', po_file)
        with open(po_file, 'rb') as f:
            return read_po(f, domain='messages')

    def get_template(self, locale_name: str, message_key: str) -> str | None:
        catalog = self.get_catalog(locale_name)
        if catalog is None:
            return None
        message = catalog.get(message_key)
        if message is None or message.fuzzy or not message.string:
            return None
        return message.string  # type: ignore


def get_default_translator() -> CatalogTranslator:
    """The :py:obj:`CatalogTranslator` configured by the current ``i18n``
    settings.  Calls with unchanged settings share one translator (and its
    parsed catalogs), after :py:obj:`zimsuggest.init_settings` loaded other
    values a new translator is returned."""
    i18n = get_setting('i18n')
    return _catalog_translator(
        i18n['translations_path'],
        i18n['default_locale'],
        tuple(sorted(i18n['locale_best_match'].items())),
    )


@functools.cache
def _catalog_translator(
    translations_path: str, default_locale: str, locale_best_match: tuple[tuple[str, str], ...]
) -> CatalogTranslator:
    return CatalogTranslator(
        translations_path, default_locale=default_locale, locale_best_match=dict(locale_best_match)
    )
