from .entities import HTML40, XML, EntityTable
from .errors import DuplicateEntityError, EscapeError, InvalidSinkError, MalformedEscapeError
from .escaping import (
    escape_html,
    escape_html_to,
    escape_java,
    escape_java_to,
    escape_javascript,
    escape_javascript_to,
    escape_sql,
    escape_xml,
    escape_xml_to,
    unescape_html,
    unescape_html_to,
    unescape_java,
    unescape_java_to,
    unescape_javascript,
    unescape_javascript_to,
    unescape_xml,
    unescape_xml_to,
)
from .literal import JAVA, JAVASCRIPT, Dialect

__version__ = "0.1.0"

__all__ = [
    "HTML40",
    "JAVA",
    "JAVASCRIPT",
    "XML",
    "Dialect",
    "DuplicateEntityError",
    "EntityTable",
    "EscapeError",
    "InvalidSinkError",
    "MalformedEscapeError",
    "escape_html",
    "escape_html_to",
    "escape_java",
    "escape_java_to",
    "escape_javascript",
    "escape_javascript_to",
    "escape_sql",
    "escape_xml",
    "escape_xml_to",
    "unescape_html",
    "unescape_html_to",
    "unescape_java",
    "unescape_java_to",
    "unescape_javascript",
    "unescape_javascript_to",
    "unescape_xml",
    "unescape_xml_to",
]
