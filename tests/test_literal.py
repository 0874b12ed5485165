"""Tests for Java/JavaScript string literal escaping and unescaping."""

from __future__ import annotations

import io
import unittest
from unittest import mock

from turboescape import flags
from turboescape.errors import InvalidSinkError, MalformedEscapeError
from turboescape.literal import (
    JAVA,
    JAVASCRIPT,
    Dialect,
    escape_literal,
    escape_literal_to,
    unescape_literal,
    unescape_literal_to,
)


class FailingSink:
    def __init__(self):
        self.calls = 0

    def write(self, chunk):
        self.calls += 1
        raise OSError("disk full")


class TestEscapeLiteral(unittest.TestCase):
    def test_plain_ascii_is_unchanged(self) -> None:
        assert escape_literal("Hello, world!", JAVA) == "Hello, world!"

    def test_named_control_escapes(self) -> None:
        assert escape_literal("\t", JAVA) == "\\t"
        assert escape_literal("\b\n\f\r", JAVA) == "\\b\\n\\f\\r"

    def test_other_control_characters_use_unicode_escapes(self) -> None:
        assert escape_literal("\x00", JAVA) == "\\u0000"
        assert escape_literal("\x01", JAVA) == "\\u0001"
        assert escape_literal("\x0b", JAVA) == "\\u000B"
        assert escape_literal("\x1f", JAVA) == "\\u001F"

    def test_delete_character_passes_through(self) -> None:
        assert escape_literal("\x7f", JAVA) == "\x7f"

    def test_non_ascii_widths(self) -> None:
        assert escape_literal("\x80", JAVA) == "\\u0080"
        assert escape_literal("\u00e9", JAVA) == "\\u00E9"
        assert escape_literal("\u0100", JAVA) == "\\u0100"
        assert escape_literal("\u0fff", JAVA) == "\\u0FFF"
        assert escape_literal("\u1000", JAVA) == "\\u1000"
        assert escape_literal("\uffff", JAVA) == "\\uFFFF"

    def test_astral_characters_become_surrogate_pairs(self) -> None:
        assert escape_literal("\U0001f600", JAVA) == "\\uD83D\\uDE00"

    def test_quotes_and_backslash(self) -> None:
        assert escape_literal('say "hi"', JAVA) == 'say \\"hi\\"'
        assert escape_literal("C:\\temp", JAVA) == "C:\\\\temp"

    def test_single_quote_depends_on_dialect(self) -> None:
        assert escape_literal("it's", JAVA) == "it's"
        assert escape_literal("it's", JAVASCRIPT) == "it\\'s"

    def test_custom_dialect(self) -> None:
        dialect = Dialect("custom", escape_single_quotes=True)
        assert escape_literal("'", dialect) == "\\'"
        assert "custom" in repr(dialect)

    def test_none_is_none(self) -> None:
        assert escape_literal(None, JAVA) is None

    def test_empty_string(self) -> None:
        assert escape_literal("", JAVA) == ""


class TestEscapeLiteralTo(unittest.TestCase):
    def test_writes_to_sink(self) -> None:
        out = io.StringIO()
        escape_literal_to("a\tb'c", out, JAVASCRIPT)
        assert out.getvalue() == "a\\tb\\'c"

    def test_none_input_writes_nothing(self) -> None:
        out = io.StringIO()
        escape_literal_to(None, out, JAVA)
        assert out.getvalue() == ""

    def test_missing_sink_raises(self) -> None:
        with self.assertRaises(InvalidSinkError):
            escape_literal_to("abc", None, JAVA)

    def test_sink_is_checked_before_input(self) -> None:
        with self.assertRaises(InvalidSinkError):
            escape_literal_to(None, None, JAVA)

    def test_object_without_write_is_rejected(self) -> None:
        with self.assertRaises(InvalidSinkError):
            escape_literal_to("abc", object(), JAVA)

    def test_sink_failure_propagates(self) -> None:
        sink = FailingSink()
        with self.assertRaises(OSError):
            escape_literal_to("abc", sink, JAVA)
        assert sink.calls == 1


class TestUnescapeLiteral(unittest.TestCase):
    def test_plain_text_is_unchanged(self) -> None:
        assert unescape_literal("no escapes here") == "no escapes here"

    def test_simple_escapes(self) -> None:
        assert unescape_literal("\\t") == "\t"
        assert unescape_literal("\\b\\f\\n\\r") == "\b\f\n\r"
        assert unescape_literal("\\\\ \\' \\\"") == "\\ ' \""

    def test_unicode_escape(self) -> None:
        assert unescape_literal("caf\\u00e9") == "caf\u00e9"
        assert unescape_literal("\\u00E9\\u1000") == "\u00e9\u1000"

    def test_unknown_escape_drops_backslash(self) -> None:
        assert unescape_literal("\\q\\x41") == "qx41"

    def test_trailing_backslash_is_kept(self) -> None:
        assert unescape_literal("abc\\") == "abc\\"

    def test_escaped_backslash_at_end(self) -> None:
        assert unescape_literal("abc\\\\") == "abc\\"

    def test_invalid_hex_digit_raises(self) -> None:
        with self.assertRaises(MalformedEscapeError) as ctx:
            unescape_literal("ab\\u00G1")
        assert ctx.exception.code == "invalid-unicode-escape"
        assert ctx.exception.position == 6
        assert ctx.exception.fragment == "\\u00G"

    def test_truncated_escape_raises(self) -> None:
        with self.assertRaises(MalformedEscapeError) as ctx:
            unescape_literal("x\\u12")
        assert ctx.exception.code == "truncated-unicode-escape"
        assert ctx.exception.position == 5

    def test_surrogate_pair_is_joined(self) -> None:
        assert unescape_literal("\\uD83D\\uDE00!") == "\U0001f600!"

    def test_surrogate_pair_kept_apart_when_flag_is_off(self) -> None:
        with mock.patch.object(flags, "JOIN_SURROGATE_ESCAPES", False):
            assert unescape_literal("\\uD83D\\uDE00") == "\ud83d\ude00"

    def test_lone_high_surrogate_is_kept(self) -> None:
        assert unescape_literal("\\uD83Dx") == "\ud83dx"
        assert unescape_literal("\\uD83D") == "\ud83d"

    def test_none_is_none(self) -> None:
        assert unescape_literal(None) is None


class TestUnescapeLiteralTo(unittest.TestCase):
    def test_writes_to_sink(self) -> None:
        out = io.StringIO()
        unescape_literal_to("a\\tb", out)
        assert out.getvalue() == "a\tb"

    def test_none_input_writes_nothing(self) -> None:
        out = io.StringIO()
        unescape_literal_to(None, out)
        assert out.getvalue() == ""

    def test_missing_sink_raises(self) -> None:
        with self.assertRaises(InvalidSinkError):
            unescape_literal_to("abc", None)

    def test_output_before_error_stays_written(self) -> None:
        out = io.StringIO()
        with self.assertRaises(MalformedEscapeError):
            unescape_literal_to("ok\\uZZZZ", out)
        assert out.getvalue() == "ok"


class TestLiteralRoundTrip(unittest.TestCase):
    def test_basic_multilingual_plane(self) -> None:
        # Surrogates are excluded: a lone pair in the input is joined on the way back
        text = "".join(chr(code) for code in range(0xD800))
        text += "".join(chr(code) for code in range(0xE000, 0x10000))
        for dialect in (JAVA, JAVASCRIPT):
            assert unescape_literal(escape_literal(text, dialect)) == text

    def test_astral_characters(self) -> None:
        text = "emoji \U0001f600 and music \U0001d11e"
        assert unescape_literal(escape_literal(text, JAVA)) == text

    def test_backslash_heavy_text(self) -> None:
        text = "\\u0041 is not an escape here \\\\ \\"
        assert unescape_literal(escape_literal(text, JAVASCRIPT)) == text
