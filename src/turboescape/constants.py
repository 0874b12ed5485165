"""Static entity data for the XML and HTML 4.0 tables.

Entries are ``(name, codepoint)`` pairs. When two names share a code point
the first one listed is used for escaping.
"""

import html.entities

BASIC_ENTITIES = (
    ("quot", 0x22),  # " - double-quote
    ("amp", 0x26),  # & - ampersand
    ("lt", 0x3C),  # < - less-than
    ("gt", 0x3E),  # > - greater-than
)

APOS_ENTITIES = (
    ("apos", 0x27),  # XML apostrophe
)

XML_ENTITIES = BASIC_ENTITIES + APOS_ENTITIES

_XML_NAMES = frozenset(name for name, _ in XML_ENTITIES)

# html.entities.name2codepoint is the HTML 4.01 list: ISO-8859-1 characters,
# symbols and Greek letters, and the special set (OElig, ndash, euro...)
HTML40_ENTITIES = XML_ENTITIES + tuple(
    (name, codepoint)
    for name, codepoint in html.entities.name2codepoint.items()
    if name not in _XML_NAMES
)
