"""One-call escaping functions for Java, JavaScript, HTML, XML and SQL.

Every function that returns a string maps None to None. Every ``*_to``
variant writes to a sink (anything with ``write(str)``), raises
InvalidSinkError when the sink is missing and does nothing for None input.

    >>> escape_javascript("it's")
    "it\\\\'s"
    >>> unescape_html("&lt;Fran&ccedil;ais&gt;")
    '<Français>'
"""

from __future__ import annotations

from typing import Any

from .entities import HTML40, XML
from .literal import (
    JAVA,
    JAVASCRIPT,
    escape_literal,
    escape_literal_to,
    unescape_literal,
    unescape_literal_to,
)

# Java and JavaScript


def escape_java(text: str | None) -> str | None:
    """Escape *text* using Java string rules (single quotes stay as they are)."""
    return escape_literal(text, JAVA)


def escape_java_to(text: str | None, out: Any) -> None:
    escape_literal_to(text, out, JAVA)


def escape_javascript(text: str | None) -> str | None:
    """Escape *text* using JavaScript string rules (single quotes are escaped too)."""
    return escape_literal(text, JAVASCRIPT)


def escape_javascript_to(text: str | None, out: Any) -> None:
    escape_literal_to(text, out, JAVASCRIPT)


def unescape_java(text: str | None) -> str | None:
    return unescape_literal(text)


def unescape_java_to(text: str | None, out: Any) -> None:
    unescape_literal_to(text, out)


def unescape_javascript(text: str | None) -> str | None:
    return unescape_literal(text)


def unescape_javascript_to(text: str | None, out: Any) -> None:
    unescape_literal_to(text, out)


# HTML and XML


def escape_html(text: str | None) -> str | None:
    """Replace HTML 4.0 special and non-ASCII characters with entity references."""
    return HTML40.escape(text)


def escape_html_to(text: str | None, out: Any) -> None:
    HTML40.escape_to(text, out)


def unescape_html(text: str | None) -> str | None:
    """Resolve HTML 4.0 named and numeric references; unknown ones pass through."""
    return HTML40.unescape(text)


def unescape_html_to(text: str | None, out: Any) -> None:
    HTML40.unescape_to(text, out)


def escape_xml(text: str | None) -> str | None:
    """Escape the five XML entities; other non-ASCII characters become ``&#N;``."""
    return XML.escape(text)


def escape_xml_to(text: str | None, out: Any) -> None:
    XML.escape_to(text, out)


def unescape_xml(text: str | None) -> str | None:
    return XML.unescape(text)


def unescape_xml_to(text: str | None, out: Any) -> None:
    XML.unescape_to(text, out)


# SQL


def escape_sql(text: str | None) -> str | None:
    """Double single quotes for a SQL string literal. Does not handle LIKE wildcards."""
    if text is None:
        return None
    return text.replace("'", "''")
