"""HTML 4.0 and XML character entity escaping.

An :class:`EntityTable` maps entity names to code points in both directions.
Escaping replaces every character that has a name in the table with
``&name;`` and every other non-ASCII character with ``&#decimal;``, so the
output is plain ASCII. Unescaping resolves named references (``&lt;``),
decimal references (``&#60;``) and hex references (``&#x3C;``). Anything
that does not resolve is copied through unchanged.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterable, Iterator

from .constants import HTML40_ENTITIES, XML_ENTITIES
from .entity_trie import Trie
from .errors import DuplicateEntityError
from .utils import require_sink

logger = logging.getLogger(__name__)

# Characters allowed between "&#" and ";"
_NUMERIC_LOOKAHEAD = 10
_DECIMAL_DIGITS = frozenset("0123456789")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def decode_numeric_reference(body: str) -> str | None:
    """Decode the part of a numeric reference between ``&#`` and ``;``.

    ``"60"`` and ``"x3C"`` both give ``"<"``. Returns None when *body* is not
    a valid decimal or hex number or is past U+10FFFF.
    """
    if body[:1] in ("x", "X"):
        digits = body[1:]
        allowed = _HEX_DIGITS
        base = 16
    else:
        digits = body
        allowed = _DECIMAL_DIGITS
        base = 10
    if not digits or not all(c in allowed for c in digits):
        return None
    codepoint = int(digits, base)
    if codepoint > 0x10FFFF:
        return None
    return chr(codepoint)


class EntityTable:
    """Immutable bidirectional mapping between entity names and code points."""

    __slots__ = ("name", "_codepoints", "_names", "_trie", "_specials")

    def __init__(self, entries: Iterable[tuple[str, int]] = (), name: str | None = None):
        self.name = name
        self._codepoints: dict[str, int] = {}
        self._names: dict[int, str] = {}
        self._trie = Trie()
        for entity_name, codepoint in entries:
            self._add(entity_name, codepoint)

        ascii_specials = "".join(
            re.escape(chr(codepoint)) for codepoint in sorted(self._names) if codepoint < 0x80
        )
        self._specials = re.compile(f"[{ascii_specials}\x80-\U0010ffff]")
        logger.debug("built entity table %s with %d entries", name, len(self._codepoints))

    def _add(self, entity_name: str, codepoint: int) -> None:
        if entity_name in self._codepoints:
            raise DuplicateEntityError(entity_name, self.name)
        self._codepoints[entity_name] = codepoint
        # First name registered for a code point is the one used for escaping
        self._names.setdefault(codepoint, entity_name)
        self._trie.insert(entity_name, codepoint)

    def __repr__(self):
        return f"EntityTable({self.name!r}, {len(self._codepoints)} entities)"

    def __len__(self):
        return len(self._codepoints)

    def __contains__(self, entity_name):
        return entity_name in self._codepoints

    def __iter__(self):
        return iter(self._codepoints)

    def lookup_name(self, codepoint: int) -> str | None:
        """Return the canonical entity name for *codepoint*, or None."""
        return self._names.get(codepoint)

    def lookup_codepoint(self, entity_name: str) -> int | None:
        """Return the code point for *entity_name* (case-sensitive), or None."""
        return self._codepoints.get(entity_name)

    def longest_match(self, text: str, start: int = 0) -> tuple[str, int] | None:
        """Find the longest entity name that starts at ``text[start]``.

        Returns ``(name, end_index)`` or None if no name matches there.
        """
        try:
            end, _ = self._trie.longest_prefix_item(text, start)
        except KeyError:
            return None
        return text[start:end], end

    # Escaping

    def _iter_escaped(self, text: str) -> Iterator[str]:
        pos = 0
        for match in self._specials.finditer(text):
            start = match.start()
            if start > pos:
                yield text[pos:start]
            codepoint = ord(match.group())
            entity_name = self._names.get(codepoint)
            if entity_name is not None:
                yield f"&{entity_name};"
            else:
                yield f"&#{codepoint};"
            pos = match.end()
        if pos < len(text):
            yield text[pos:]

    def escape(self, text: str | None) -> str | None:
        if text is None:
            return None
        return "".join(self._iter_escaped(text))

    def escape_to(self, text: str | None, out: Any) -> None:
        write = require_sink(out)
        if text is None:
            return
        for chunk in self._iter_escaped(text):
            write(chunk)

    # Unescaping

    def _resolve(self, text: str, amp: int) -> tuple[str | None, int]:
        """Resolve the reference starting at ``text[amp] == "&"``.

        Returns the decoded character and the index just past the ``;``, or
        ``(None, amp + 1)`` when the ``&`` is literal.
        """
        j = amp + 1
        if text.startswith("#", j):
            limit = min(len(text), j + 1 + _NUMERIC_LOOKAHEAD + 1)
            semicolon = text.find(";", j + 1, limit)
            if semicolon != -1:
                decoded = decode_numeric_reference(text[j + 1:semicolon])
                if decoded is not None:
                    return decoded, semicolon + 1
            return None, j

        match = self.longest_match(text, j)
        if match is not None:
            entity_name, end = match
            if text.startswith(";", end):
                return chr(self._codepoints[entity_name]), end + 1
        return None, j

    def _iter_unescaped(self, text: str) -> Iterator[str]:
        i = 0
        length = len(text)
        while i < length:
            amp = text.find("&", i)
            if amp == -1:
                yield text[i:]
                return
            if amp > i:
                yield text[i:amp]
            decoded, i = self._resolve(text, amp)
            if decoded is None:
                logger.debug("passing through unrecognized reference at position %d", amp)
                yield "&"
            else:
                yield decoded

    def unescape(self, text: str | None) -> str | None:
        if text is None:
            return None
        if "&" not in text:
            return text
        return "".join(self._iter_unescaped(text))

    def unescape_to(self, text: str | None, out: Any) -> None:
        write = require_sink(out)
        if text is None:
            return
        for chunk in self._iter_unescaped(text):
            write(chunk)


XML = EntityTable(XML_ENTITIES, name="xml")
HTML40 = EntityTable(HTML40_ENTITIES, name="html40")
