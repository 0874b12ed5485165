"""Java and JavaScript string literal escaping.

The escaper works on UTF-16 code units: control characters get their short
escape (``\\n``, ``\\t``...) or ``\\u00XX``, everything above U+007F becomes
``\\uXXXX`` with uppercase hex digits, and quotes and backslashes are
backslash-escaped. Code points above U+FFFF are written as a surrogate pair.

The unescaper is a small state machine over three states::

    NORMAL --'\\'--> PENDING_BACKSLASH --'u'--> PENDING_UNICODE (4 hex digits)

An unknown escape like ``\\q`` drops the backslash and keeps the character.
A backslash at the very end of the input is kept as-is.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterator

from . import flags
from .errors import MalformedEscapeError
from .utils import join_surrogates, require_sink, utf16_units

logger = logging.getLogger(__name__)

_NAMED_CONTROL_ESCAPES = {
    "\b": "\\b",
    "\n": "\\n",
    "\t": "\\t",
    "\f": "\\f",
    "\r": "\\r",
}

_UNESCAPES = {
    "\\": "\\",
    "'": "'",
    '"': '"',
    "r": "\r",
    "f": "\f",
    "t": "\t",
    "n": "\n",
    "b": "\b",
}

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

# Everything outside printable ASCII plus the characters that always need a backslash
_JAVA_SPECIALS = re.compile('[\x00-\x1f"\\\\\x80-\U0010ffff]')
_JAVASCRIPT_SPECIALS = re.compile("[\x00-\x1f\"'\\\\\x80-\U0010ffff]")


class Dialect:
    """Escaping rules for one target language."""

    __slots__ = ("escape_single_quotes", "name", "_specials")

    def __init__(self, name, escape_single_quotes=False):
        self.name = name
        self.escape_single_quotes = bool(escape_single_quotes)
        self._specials = _JAVASCRIPT_SPECIALS if self.escape_single_quotes else _JAVA_SPECIALS

    def __repr__(self):
        return f"Dialect({self.name!r}, escape_single_quotes={self.escape_single_quotes})"


JAVA = Dialect("java")
JAVASCRIPT = Dialect("javascript", escape_single_quotes=True)


def _escape_unit(ch: str, escape_single_quotes: bool) -> str:
    code = ord(ch)
    if code > 0x7F:
        # \uXXXX, \u0XXX and \u00XX are all four zero-padded digits
        return f"\\u{code:04X}"
    if code < 0x20:
        return _NAMED_CONTROL_ESCAPES.get(ch) or f"\\u{code:04X}"
    if ch == "'":
        return "\\'" if escape_single_quotes else "'"
    if ch == '"':
        return '\\"'
    if ch == "\\":
        return "\\\\"
    return ch


def _iter_escaped(text: str, dialect: Dialect) -> Iterator[str]:
    escape_single_quotes = dialect.escape_single_quotes
    pos = 0
    for match in dialect._specials.finditer(text):
        start = match.start()
        if start > pos:
            yield text[pos:start]
        for unit in utf16_units(match.group()):
            yield _escape_unit(unit, escape_single_quotes)
        pos = match.end()
    if pos < len(text):
        yield text[pos:]


def escape_literal(text: str | None, dialect: Dialect = JAVA) -> str | None:
    """Escape *text* for use inside a string literal of *dialect*.

    Returns None when *text* is None.
    """
    if text is None:
        return None
    return "".join(_iter_escaped(text, dialect))


def escape_literal_to(text: str | None, out: Any, dialect: Dialect = JAVA) -> None:
    """Write the escaped form of *text* to the sink *out*.

    The sink is validated first; a None *text* writes nothing.
    """
    write = require_sink(out)
    if text is None:
        return
    for chunk in _iter_escaped(text, dialect):
        write(chunk)


_NORMAL = 0
_PENDING_BACKSLASH = 1
_PENDING_UNICODE = 2


def _iter_unescaped(text: str) -> Iterator[str]:
    state = _NORMAL
    digits = ""
    i = 0
    length = len(text)
    while i < length:
        if state == _NORMAL:
            backslash = text.find("\\", i)
            if backslash == -1:
                yield text[i:]
                return
            if backslash > i:
                yield text[i:backslash]
            state = _PENDING_BACKSLASH
            i = backslash + 1
            continue

        ch = text[i]
        if state == _PENDING_BACKSLASH:
            if ch == "u":
                state = _PENDING_UNICODE
            else:
                yield _UNESCAPES.get(ch, ch)
                state = _NORMAL
        else:
            if ch not in _HEX_DIGITS:
                fragment = f"\\u{digits}{ch}"
                logger.debug("invalid unicode escape %r at position %d", fragment, i)
                raise MalformedEscapeError("invalid-unicode-escape", position=i, fragment=fragment)
            digits += ch
            if len(digits) == 4:
                yield chr(int(digits, 16))
                digits = ""
                state = _NORMAL
        i += 1

    if state == _PENDING_BACKSLASH:
        yield "\\"
    elif state == _PENDING_UNICODE:
        fragment = f"\\u{digits}"
        logger.debug("truncated unicode escape %r at end of input", fragment)
        raise MalformedEscapeError("truncated-unicode-escape", position=length, fragment=fragment)


def _unescaped_chunks(text: str) -> Iterator[str]:
    chunks = _iter_unescaped(text)
    if flags.JOIN_SURROGATE_ESCAPES:
        return join_surrogates(chunks)
    return chunks


def unescape_literal(text: str | None) -> str | None:
    """Reverse escape_literal(); the same rules serve Java and JavaScript.

    Raises MalformedEscapeError for a ``\\u`` escape without four hex digits.
    """
    if text is None:
        return None
    return "".join(_unescaped_chunks(text))


def unescape_literal_to(text: str | None, out: Any) -> None:
    write = require_sink(out)
    if text is None:
        return
    for chunk in _unescaped_chunks(text):
        write(chunk)
