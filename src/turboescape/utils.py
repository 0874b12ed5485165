"""Helpers shared by the literal and entity engines."""

from __future__ import annotations

from typing import Any, Callable, Iterable

from .errors import InvalidSinkError


def require_sink(out: Any) -> Callable[[str], Any]:
    """Return ``out.write`` or raise InvalidSinkError if there is no usable sink."""
    if out is None:
        raise InvalidSinkError("The output sink must not be None")
    write = getattr(out, "write", None)
    if not callable(write):
        raise InvalidSinkError(f"Output sink {type(out).__name__} has no write() method")
    return write


def utf16_units(text: str) -> Iterable[str]:
    """Yield *text* as UTF-16 code units, splitting astral characters into surrogates."""
    for ch in text:
        code = ord(ch)
        if code > 0xFFFF:
            code -= 0x10000
            yield chr(0xD800 | (code >> 10))
            yield chr(0xDC00 | (code & 0x3FF))
        else:
            yield ch


def join_surrogates(chunks: Iterable[str]) -> Iterable[str]:
    """Combine a high surrogate ending one chunk with a low surrogate starting the next."""
    high = ""
    for chunk in chunks:
        if high:
            if "\udc00" <= chunk[0] <= "\udfff":
                code = 0x10000 + ((ord(high) - 0xD800) << 10) + (ord(chunk[0]) - 0xDC00)
                chunk = chr(code) + chunk[1:]
            else:
                chunk = high + chunk
            high = ""
        if "\ud800" <= chunk[-1] <= "\udbff":
            high = chunk[-1]
            chunk = chunk[:-1]
        if chunk:
            yield chunk
    if high:
        yield high
