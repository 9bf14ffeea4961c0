# SPDX-License-Identifier: AGPL-3.0-or-later
"""Text helpers for the suggestion output."""

_HTML_ENTITIES = {
    ord('&'): '&amp;',
    ord('<'): '&lt;',
    ord('>'): '&gt;',
    ord("'"): '&apos;',
    ord('"'): '&quot;',
}


def escape_for_json(text: str) -> str:
    """Make ``text`` embeddable in a string literal of the suggestion JSON.

    Backslashes are doubled first, then the HTML special characters are
    replaced by their named entities:

    >>> print(escape_for_json('\\\\<>&\\'"'))
    \\\\&lt;&gt;&amp;&apos;&quot;

    Control characters (newline, tab, ...) pass unchanged, the caller must not
    hand them in when the output has to be strict JSON.
    """
    return text.replace('\\', '\\\\').translate(_HTML_ENTITIES)


def unescape_for_json(text: str) -> str:
    """Reverse of :py:obj:`escape_for_json`."""
    for entity, char in (('&lt;', '<'), ('&gt;', '>'), ('&apos;', "'"), ('&quot;', '"'), ('&amp;', '&')):
        text = text.replace(entity, char)
    return text.replace('\\\\', '\\')
