#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Public verifier facade

:class:`InputVerifier` combines every check from
:mod:`inputverifier.verifiers` and adds constructors for the usual byte
sources: standard input, an in-memory buffer, and a file path.

A typical checker reads the input in exactly the layout it must have and
finishes with :meth:`~InputVerifier.expect_end_of_stream`::

    v = InputVerifier.from_stdin()
    n = v.read_int(1, 100_000)
    v.expect_newline()
    v.read_ints(n, -10**9, 10**9, " ")
    v.expect_newline()
    v.expect_end_of_stream()
"""

from __future__ import annotations

import io
import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from inputverifier.utils.constants import BUFFER_SIZE
from inputverifier.verifiers.numbers import NumberVerifier

logger = logging.getLogger(__name__)


class InputVerifier(NumberVerifier):
    """Strict, position-tagged verifier over a binary byte source

    Parameters
    ----------
    source : BinaryIO
        Binary file-like object (``readinto`` or ``read``).  Borrowed:
        the verifier does not close it.
    buffer_size : int, optional
        Block and pushback buffer capacity (bytes).

    Raises
    ------
    PreconditionError
        If *source* is ``None``.

    Examples
    --------
    >>> v = InputVerifier.from_bytes(b"3\\nab cd ef\\n")
    >>> n = v.read_int(1, 10)
    >>> v.expect_newline()
    >>> v.read_lower_case_tokens(n, " ")
    ['ab', 'cd', 'ef']
    >>> v.expect_newline()
    >>> v.expect_end_of_stream()
    """

    @classmethod
    def from_stdin(cls, *, buffer_size: int = BUFFER_SIZE) -> InputVerifier:
        """Verify the process's standard input byte stream"""
        return cls(sys.stdin.buffer, buffer_size=buffer_size)

    @classmethod
    def from_bytes(cls, data: bytes, *, buffer_size: int = BUFFER_SIZE) -> InputVerifier:
        """Verify an in-memory byte string"""
        return cls(io.BytesIO(data), buffer_size=buffer_size)

    @classmethod
    @contextmanager
    def open(cls, path: Path | str, *, buffer_size: int = BUFFER_SIZE) -> Iterator[InputVerifier]:
        """Verify a file, closing it when the ``with`` block exits

        Parameters
        ----------
        path : Path | str
            File to open in binary mode.

        Raises
        ------
        OSError
            If the file cannot be opened.

        Examples
        --------
        >>> with InputVerifier.open("tests/01.in") as v:  # doctest: +SKIP
        ...     v.read_int(1, 10)
        """
        filepath = Path(path)
        logger.debug("Opening input file: %s", filepath)
        with filepath.open("rb") as fh:
            yield cls(fh, buffer_size=buffer_size)
