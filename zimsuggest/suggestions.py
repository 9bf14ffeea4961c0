# SPDX-License-Identifier: AGPL-3.0-or-later
"""The suggestion list of the autocompleter.  A :py:obj:`SuggestionList` is
filled while handling one suggestion request and rendered to the JSON array
the client side autocomplete widget consumes:

.. code:: json

   [
     {
       "value" : "Title",
       "label" : "Snippet",
       "kind" : "path"
         , "path" : "/PATH"
     },
     {
       "value" : "kiwi ",
       "label" : "containing &apos;kiwi&apos;...",
       "kind" : "pattern"

     }
   ]

The layout (``" : "`` separators, the comma in front of the ``path`` member,
the line of four spaces closing a *pattern* object) and the escaping of the
strings (:py:obj:`zimsuggest.utils.escape_for_json`) are fixed, clients depend
on the exact bytes.

.. autoclass:: SuggestionList
   :members:

"""
# pylint: disable=too-few-public-methods
from __future__ import annotations

__all__ = [
    "SuggestionKind",
    "SuggestionItem",
    "Suggestion",
    "PathSuggestion",
    "PatternSuggestion",
    "SuggestionList",
]

import enum
import typing as t
from typing import ClassVar

import msgspec

from zimsuggest import logger
from zimsuggest.utils import escape_for_json

if t.TYPE_CHECKING:
    from zimsuggest.i18n import Translator

logger = logger.getChild('suggestions')

PATTERN_MESSAGE_KEY = "search-pattern-suggestion"


class SuggestionKind(str, enum.Enum):
    """Discriminates the two shapes of a :py:obj:`Suggestion`."""

    PATH = "path"
    PATTERN = "pattern"


class SuggestionItem(msgspec.Struct, kw_only=True):
    """A title match as it is delivered by the search in an archive."""

    title: str
    path: str
    snippet: str = ""

    @property
    def has_snippet(self) -> bool:
        return bool(self.snippet)


class Suggestion(msgspec.Struct, kw_only=True, frozen=True):
    """Base class of the suggestion records, it is not intended to build
    instances of this class."""

    kind: ClassVar[SuggestionKind]

    value: str
    """Text that replaces the input when the user accepts the suggestion."""

    label: str
    """Text displayed in the list of suggestions."""

    def as_dict(self) -> dict[str, str]:
        """The record as it is rendered, ``kind`` follows ``label`` and
        precedes the fields of the subclass."""
        fields = msgspec.to_builtins(self)
        d = {'value': fields.pop('value'), 'label': fields.pop('label'), 'kind': self.kind.value}
        d.update(fields)
        return d


class PathSuggestion(Suggestion, kw_only=True, frozen=True):
    """Suggestion of an article in the archive."""

    kind = SuggestionKind.PATH

    path: str


class PatternSuggestion(Suggestion, kw_only=True, frozen=True):
    """Suggestion to search the full text for the typed terms."""

    kind = SuggestionKind.PATTERN


class SuggestionList:
    """Ordered collection of the suggestions of one request.

    :param translator: localizes the label of the full text search suggestion,
       default is :py:obj:`zimsuggest.i18n.get_default_translator`.

    The records are kept in the order they were added, nothing is sorted,
    merged or removed.  Instances are not meant to be filled by concurrent
    threads, :py:obj:`SuggestionList.render` only reads.
    """

    def __init__(self, translator: Translator | None = None):
        if translator is None:
            from zimsuggest.i18n import get_default_translator  # pylint: disable=import-outside-toplevel

            translator = get_default_translator()
        self.translator: Translator = translator
        self._suggestions: list[Suggestion] = []

    def __len__(self):
        return len(self._suggestions)

    def __bool__(self):
        return bool(self._suggestions)

    def __iter__(self) -> t.Iterator[Suggestion]:
        yield from self._suggestions

    def add_path_suggestion(self, title: str, path: str, snippet: str | None = None) -> None:
        """Add a suggestion of the article at ``path``.  The label is the
        ``snippet``, or the ``title`` if there is no snippet."""
        self._suggestions.append(PathSuggestion(value=title, label=snippet or title, path=path))

    def add(self, item: SuggestionItem) -> None:
        self.add_path_suggestion(item.title, item.path, item.snippet)

    def add_fulltext_search_suggestion(self, language_code: str, search_terms: str) -> None:
        """Add the suggestion to search the full text for ``search_terms``, the
        label is translated to ``language_code``.

        The value ends with one space, accepting the suggestion lets the user
        continue typing.
        """
        label = self.translator.translate(language_code, PATTERN_MESSAGE_KEY, {'terms': search_terms})
        value = search_terms.rstrip() + ' '
        self._suggestions.append(PatternSuggestion(value=value, label=label or value))

    def to_list(self) -> list[dict[str, str]]:
        """The suggestions as (unescaped) dictionaries."""
        return [s.as_dict() for s in self._suggestions]

    def render(self) -> str:
        """Render the suggestions to the JSON array (one object per suggestion
        in the order they were added).  An empty list is ``"[\\n]\\n"``."""
        logger.debug('render %i suggestion(s)', len(self._suggestions))
        if not self._suggestions:
            return '[\n]\n'
        return '[\n' + ',\n'.join(_render_suggestion(s) for s in self._suggestions) + '\n]\n'

    get_json = render


def _render_suggestion(suggestion: Suggestion) -> str:
    lines = [
        '  {',
        f'    "value" : "{escape_for_json(suggestion.value)}",',
        f'    "label" : "{escape_for_json(suggestion.label)}",',
        f'    "kind" : "{suggestion.kind.value}"',
    ]
    if isinstance(suggestion, PathSuggestion):
        lines.append(f'      , "path" : "{escape_for_json(suggestion.path)}"')
    else:
        lines.append('    ')
    lines.append('  }')
    return '\n'.join(lines)
