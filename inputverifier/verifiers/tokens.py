#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Token verifiers

A *token* is a maximal non-empty run of printable, non-space ASCII bytes
(``!`` through ``~``).  The first byte outside that range ends the
token and is pushed back, so ``"abc def"`` reads as the token ``abc``
with the space still pending.  Inside a list read with a printable
delimiter, the delimiter and other punctuation also end each element.

Token reads consume what they accumulate: when a token is read but then
fails a length, pattern or case check, its text is *not* restored to the
stream.
"""

from __future__ import annotations

import logging
import re

from inputverifier.utils.constants import EOF, EOF_LABEL, TOKEN_LABEL, CharacterClass
from inputverifier.utils.parsing import is_printable, to_readable_string
from inputverifier.utils.validation import validate_length
from inputverifier.verifiers.base import BaseVerifier

logger = logging.getLogger(__name__)

NO_STOP: frozenset[int] = frozenset()


class TokenVerifier(BaseVerifier):
    """Adds token, pattern-token and case-token reads to :class:`BaseVerifier`"""

    def _read_raw_token(self, stop: frozenset[int] = NO_STOP) -> str:
        reader = self._reader
        if not reader.has_next():
            raise self._failure(TOKEN_LABEL, EOF_LABEL)
        chars = bytearray()
        b = reader.read()
        while is_printable(b) and b not in stop:
            chars.append(b)
            b = reader.read()
        if b != EOF:
            reader.push_back(b)
        if not chars:
            raise self._failure(TOKEN_LABEL, to_readable_string(b))
        return chars.decode("ascii")

    def _read_token(
        self,
        length: int | None,
        pattern: re.Pattern[str] | None,
        stop: frozenset[int] = NO_STOP,
    ) -> str:
        token = self._read_raw_token(stop)
        if length is not None and len(token) != length:
            raise self._failure(
                f"Token with the length {length}",
                f"Token with the length {len(token)}",
            )
        if pattern is not None and pattern.fullmatch(token) is None:
            raise self._failure(f"token that matches with {pattern.pattern}.", token)
        return token

    def read_token(
        self,
        length: int | None = None,
        pattern: str | re.Pattern[str] | None = None,
    ) -> str:
        """Read one token, optionally checking its length or shape

        Parameters
        ----------
        length : int, optional
            Required number of characters.
        pattern : str | re.Pattern, optional
            Regular expression the *whole* token must match.

        Returns
        -------
        str
            The token text.

        Raises
        ------
        PreconditionError
            If *length* is not a non-negative int, for example a pattern
            passed positionally.  Checked before reading.
        VerificationError
            If no token starts at the current position (``expected="Token"``),
            if its length differs (both lengths are reported, not the
            text), or if it does not fully match *pattern* (the token is
            reported).

        Examples
        --------
        >>> from inputverifier import InputVerifier
        >>> v = InputVerifier.from_bytes(b"abc 12")
        >>> v.read_token(length=3)
        'abc'
        >>> v.expect_space()
        >>> v.read_token(pattern=r"[0-9]+")
        '12'
        """
        validate_length(length)
        return self._read_token(length, _compile(pattern))

    def read_tokens(
        self,
        size: int,
        delimiter: str,
        pattern: str | re.Pattern[str] | None = None,
    ) -> list[str]:
        """Read *size* tokens separated by exactly one *delimiter*

        There is no delimiter after the last token.  A wrong byte at a
        delimiter position fails with the readable forms of the expected
        delimiter and of the byte found (``"EOF"`` at end of stream); the
        byte is pushed back.

        With a printable *delimiter*, each element also ends at any other
        ASCII punctuation except ``+ - . _``, so elements cannot contain
        bytes such as ``/`` or ``;``: ``"a/b,c"`` fails at ``/`` with
        expected ``,``.  Whitespace delimiters keep the plain token rule.

        Examples
        --------
        >>> from inputverifier import InputVerifier
        >>> InputVerifier.from_bytes(b"ab,cd,ef").read_tokens(3, ",")
        ['ab', 'cd', 'ef']
        """
        regex = _compile(pattern)
        return self._read_sequence(size, delimiter, lambda stop: self._read_token(None, regex, stop))

    # -----------------------------------------------------------------------
    # Case-restricted tokens
    # -----------------------------------------------------------------------

    def _read_case_token(
        self,
        char_class: CharacterClass,
        length: int | None,
        stop: frozenset[int] = NO_STOP,
    ) -> str:
        token = self._read_raw_token(stop)
        if not all(char_class.contains(ord(c)) for c in token):
            raise self._failure(char_class.token_label, token)
        if length is not None and len(token) != length:
            raise self._failure(
                f"token with the length {length}",
                f"token with the length {len(token)}",
            )
        return token

    def read_lower_case_token(self, length: int | None = None) -> str:
        """Read a token made only of ``a``–``z``

        Raises
        ------
        VerificationError
            With ``expected="lower-case token"`` and the token as actual,
            or on a length mismatch when *length* is given.
        """
        validate_length(length)
        return self._read_case_token(CharacterClass.LOWER, length)

    def read_upper_case_token(self, length: int | None = None) -> str:
        """Read a token made only of ``A``–``Z``"""
        validate_length(length)
        return self._read_case_token(CharacterClass.UPPER, length)

    def read_lower_case_tokens(self, size: int, delimiter: str) -> list[str]:
        return self._read_sequence(
            size, delimiter, lambda stop: self._read_case_token(CharacterClass.LOWER, None, stop)
        )

    def read_upper_case_tokens(self, size: int, delimiter: str) -> list[str]:
        return self._read_sequence(
            size, delimiter, lambda stop: self._read_case_token(CharacterClass.UPPER, None, stop)
        )


def _compile(pattern: str | re.Pattern[str] | None) -> re.Pattern[str] | None:
    if isinstance(pattern, str):
        return re.compile(pattern)
    return pattern
