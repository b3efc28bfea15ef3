#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Character classification, diagnostic formatting and numeric grammars

Everything in this module works on single byte values (``int``) or on
already-accumulated token text; none of it touches a stream.  The
verifier classes combine these helpers with the reader.

Numeric Grammars
----------------
Integers are ``[+-]?[0-9]+``, checked against a signed bit-width range
after conversion.

Decimals use a canonical form::

    -?(0|[1-9][0-9]*)\\.[0-9]*[1-9]

No leading zeros in the integer part (except a bare ``0``), a mandatory
decimal point, and at least one fractional digit whose last digit is
non-zero.  ``1.5`` and ``1.05`` are accepted, ``1.50``, ``00.1``,
``1.`` and ``.5`` are not.
"""

from __future__ import annotations

import re
import string

from inputverifier.utils.constants import (
    ASCII_MAX,
    CONTROL_LABEL,
    EOF,
    EOF_LABEL,
    NEW_LINE,
    NEW_LINE_LABEL,
    PRINTABLE_MAX,
    PRINTABLE_MIN,
    SPACE,
    UNDEFINED_LABEL,
    WHITE_SPACE_LABEL,
)

INTEGER_PATTERN: re.Pattern[str] = re.compile(r"[+-]?[0-9]+")
"""Textual form accepted for ``int`` and ``long`` tokens (full match)."""

DOUBLE_PATTERN: re.Pattern[str] = re.compile(
    r"-?(?:0|[1-9][0-9]*)\.(?P<fraction>[0-9]*[1-9])"
)
"""Canonical decimal form (full match); ``fraction`` captures the digits
after the decimal point."""

ELEMENT_PUNCTUATION: frozenset[int] = frozenset(
    ord(c) for c in string.punctuation if c not in "+-._"
)
"""Punctuation that ends a list element when the delimiter is printable."""


# ---------------------------------------------------------------------------
# Byte classification
# ---------------------------------------------------------------------------

def is_new_line(b: int) -> bool:
    return b == NEW_LINE


def is_space(b: int) -> bool:
    return b == SPACE


def is_printable(b: int) -> bool:
    """Return ``True`` if *b* may appear inside a token (33..126)"""
    return PRINTABLE_MIN <= b <= PRINTABLE_MAX


def element_stop_bytes(delimiter: int) -> frozenset[int]:
    """Bytes that end a list element read with *delimiter* between elements

    A whitespace or control delimiter already ends every token, so no
    extra stop bytes are needed.  A printable delimiter would otherwise
    be swallowed by the token before it, so it stops the element, and so
    does every other punctuation byte except the ones that occur inside
    numbers and identifiers (``+ - . _``).  This way a wrong delimiter is
    reported as the delimiter mismatch it is.

    Examples
    --------
    >>> element_stop_bytes(ord(" "))
    frozenset()
    >>> ord(";") in element_stop_bytes(ord(","))
    True
    >>> ord("-") in element_stop_bytes(ord(","))
    False
    """
    if not is_printable(delimiter):
        return frozenset()
    return ELEMENT_PUNCTUATION | {delimiter}


def to_readable_string(codepoint: int | str) -> str:
    """Describe a byte or character for use in a failure message

    Parameters
    ----------
    codepoint : int | str
        A byte value, :data:`~inputverifier.utils.constants.EOF`, or a
        one-character string (used for delimiters).

    Returns
    -------
    str
        ``"EOF"``, ``"undefined"``, ``"new line"``, ``"white space"``,
        ``"control character"``, or the character itself.

    Notes
    -----
    Validation is byte oriented, so a value above 127 is a lone byte of
    some multi-byte encoding and not a character on its own; it is
    reported as ``"undefined"``.

    Examples
    --------
    >>> to_readable_string(ord("a"))
    'a'
    >>> to_readable_string(10)
    'new line'
    >>> to_readable_string(-1)
    'EOF'
    """
    if isinstance(codepoint, str):
        codepoint = ord(codepoint)
    if codepoint == EOF:
        return EOF_LABEL
    if codepoint < 0 or codepoint > ASCII_MAX:
        return UNDEFINED_LABEL
    if is_new_line(codepoint):
        return NEW_LINE_LABEL
    ch = chr(codepoint)
    if ch.isspace():
        return WHITE_SPACE_LABEL
    if not ch.isprintable():
        return CONTROL_LABEL
    return ch


# ---------------------------------------------------------------------------
# Numeric conversion
# ---------------------------------------------------------------------------

def parse_integer(token: str, lower: int, upper: int) -> int:
    """Convert an integer token, enforcing a native bit-width range

    Parameters
    ----------
    token : str
        Token text as read from the stream.
    lower, upper : int
        Inclusive representable range (e.g. the signed 32-bit range).

    Returns
    -------
    int
        The converted value.

    Raises
    ------
    ValueError
        If *token* is not ``[+-]?[0-9]+`` or the value does not fit.

    Examples
    --------
    >>> parse_integer("-42", -128, 127)
    -42
    >>> parse_integer("+007", -128, 127)
    7
    """
    if INTEGER_PATTERN.fullmatch(token) is None:
        raise ValueError(f"{token!r} is not a base-10 integer")
    value = int(token)
    if not (lower <= value <= upper):
        raise ValueError(f"{token!r} does not fit in [{lower}, {upper}]")
    return value


def match_double(token: str) -> re.Match[str] | None:
    """Return the canonical-decimal match for *token*, or ``None``"""
    return DOUBLE_PATTERN.fullmatch(token)


def has_fraction_digits(match: re.Match[str], min_digits: int, max_digits: int) -> bool:
    """Check the number of digits after the decimal point of a decimal match

    The mandatory non-zero final digit counts as one of the digits, so a
    match always has at least one.
    """
    return min_digits <= len(match.group("fraction")) <= max_digits
