#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Base verifier: structural and single-character checks

Every verifier in :mod:`inputverifier.verifiers` inherits from
:class:`BaseVerifier`, which owns the
:class:`~inputverifier.io.reader.BufferedPushbackReader` and provides the
plumbing shared by all grammar checks:

* building and logging :class:`~inputverifier.exceptions.VerificationError`
  at the current line;
* checking a single delimiter byte between list elements;
* reading a delimiter-separated list of values.

Single-byte checks push the examined byte back before failing, so after a
failed ``expect_space()`` the offending byte is still the next one in the
stream.  Nothing is pushed back when the stream is already at EOF.

The layering is::

    BaseVerifier ← TokenVerifier ← NumberVerifier ← InputVerifier
"""

from __future__ import annotations

import logging
from typing import BinaryIO, Callable, TypeVar

from inputverifier.exceptions import VerificationError
from inputverifier.io.reader import BufferedPushbackReader
from inputverifier.utils.constants import (
    BUFFER_SIZE,
    EOF,
    EOF_LABEL,
    EOL_LABEL,
    SPACE_LABEL,
    CharacterClass,
)
from inputverifier.utils.parsing import (
    element_stop_bytes,
    is_new_line,
    is_space,
    to_readable_string,
)
from inputverifier.utils.validation import delimiter_to_byte, validate_size

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BaseVerifier:
    """Stream plumbing, structural checks and character checks

    Parameters
    ----------
    source : BinaryIO
        Binary byte source; see
        :class:`~inputverifier.io.reader.BufferedPushbackReader`.
    buffer_size : int, optional
        Block and pushback buffer capacity.

    Raises
    ------
    PreconditionError
        If *source* is ``None``.
    """

    def __init__(self, source: BinaryIO, *, buffer_size: int = BUFFER_SIZE) -> None:
        self._reader = BufferedPushbackReader(source, buffer_size=buffer_size)

    @property
    def line(self) -> int:
        """Current 1-indexed line number."""
        return self._reader.line

    def has_next(self) -> bool:
        """Return ``True`` unless the stream is at EOF"""
        return self._reader.has_next()

    # -----------------------------------------------------------------------
    # Diagnostics
    # -----------------------------------------------------------------------

    def _failure(self, expected: str, actual: str) -> VerificationError:
        error = VerificationError(self._reader.line, expected, actual)
        logger.debug(
            "Verification failed at line %d: expected %s, actual %.80s",
            error.line, error.expected, error.actual,
        )
        return error

    def _reject(self, b: int, expected: str) -> VerificationError:
        """Push *b* back (unless EOF) and describe it as the actual value"""
        if b != EOF:
            self._reader.push_back(b)
        return self._failure(expected, to_readable_string(b))

    # -----------------------------------------------------------------------
    # Structural validators
    # -----------------------------------------------------------------------

    def expect_end_of_stream(self) -> None:
        """Require the stream to be exhausted

        Raises
        ------
        VerificationError
            With ``expected="EOF"`` if any byte remains; that byte stays
            pending in the stream.
        """
        if self._reader.has_next():
            raise self._reject(self._reader.read(), EOF_LABEL)

    def expect_newline(self) -> None:
        """Consume exactly one ``\\n`` byte

        Raises
        ------
        VerificationError
            With ``expected="EOL"``.
        """
        self._expect_byte(is_new_line, EOL_LABEL)

    def expect_space(self) -> None:
        """Consume exactly one ASCII space byte

        Raises
        ------
        VerificationError
            With ``expected="Space"``.
        """
        self._expect_byte(is_space, SPACE_LABEL)

    def _expect_byte(self, accept: Callable[[int], bool], expected: str) -> int:
        if not self._reader.has_next():
            raise self._failure(expected, EOF_LABEL)
        b = self._reader.read()
        if not accept(b):
            raise self._reject(b, expected)
        return b

    def read_character(self, char_class: CharacterClass) -> str:
        """Read one character belonging to *char_class*

        Parameters
        ----------
        char_class : CharacterClass
            ``CharacterClass.LOWER`` (``a``–``z``) or
            ``CharacterClass.UPPER`` (``A``–``Z``).

        Returns
        -------
        str
            The character read.

        Raises
        ------
        VerificationError
            With ``expected="Lower-case character"`` or
            ``"Upper-case character"``; a mismatching byte is pushed back.

        Examples
        --------
        >>> from inputverifier import InputVerifier
        >>> InputVerifier.from_bytes(b"q").read_character(CharacterClass.LOWER)
        'q'
        """
        return chr(self._expect_byte(char_class.contains, char_class.label))

    def read_lower_case_character(self) -> str:
        return self.read_character(CharacterClass.LOWER)

    def read_upper_case_character(self) -> str:
        return self.read_character(CharacterClass.UPPER)

    # -----------------------------------------------------------------------
    # Sequences
    # -----------------------------------------------------------------------

    def _expect_delimiter(self, delimiter: int) -> None:
        b = self._reader.read()
        if b != delimiter:
            raise self._reject(b, to_readable_string(delimiter))

    def _read_sequence(
        self,
        size: int,
        delimiter: str,
        read_one: Callable[[frozenset[int]], T],
    ) -> list[T]:
        """Read *size* values with *read_one*, one *delimiter* between each

        *read_one* receives the bytes that must end each element (see
        :func:`~inputverifier.utils.parsing.element_stop_bytes`).
        Argument checks happen before the first byte is read.
        """
        validate_size(size)
        sep = delimiter_to_byte(delimiter)
        stop = element_stop_bytes(sep)
        values: list[T] = []
        for i in range(size):
            values.append(read_one(stop))
            if i < size - 1:
                self._expect_delimiter(sep)
        return values
