#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Block-buffered byte reader with pushback and line counting

:class:`BufferedPushbackReader` is the only object that talks to the
byte source.  It hands out one byte at a time from a preallocated block
buffer, lets a verifier return ("push back") bytes it looked at but
rejected, and counts the newline bytes it has delivered.

Line Counting
-------------
The counter starts at 1 and is incremented when a ``\\n`` is taken from
the block buffer.  Pushing that newline back does not decrement the
counter, and re-delivering it from the pushback stack does not
increment it again: every newline of the source is counted exactly once.
"""

from __future__ import annotations

import logging
from typing import BinaryIO

from inputverifier.exceptions import PreconditionError
from inputverifier.utils.constants import BUFFER_SIZE, EOF, NEW_LINE

logger = logging.getLogger(__name__)


class BufferedPushbackReader:
    """Single-byte reader over a blocking binary source

    Parameters
    ----------
    source : BinaryIO
        Binary file-like object.  ``readinto1`` is preferred so that a
        refill returns whatever a pipe has ready instead of blocking until
        the buffer is full; ``readinto`` and then ``read`` are the
        fallbacks.  The reader borrows the source and never closes it.
    buffer_size : int, optional
        Capacity of the block buffer and of the pushback stack.

    Raises
    ------
    PreconditionError
        If *source* is ``None`` or *buffer_size* is not positive.

    Notes
    -----
    Errors raised by the source (``OSError``) propagate unchanged.  The
    reader is not thread-safe.

    Examples
    --------
    >>> import io
    >>> reader = BufferedPushbackReader(io.BytesIO(b"a\\n"))
    >>> reader.read(), reader.read(), reader.line
    (97, 10, 2)
    >>> reader.push_back(10)
    >>> reader.read(), reader.line
    (10, 2)
    """

    def __init__(self, source: BinaryIO, *, buffer_size: int = BUFFER_SIZE) -> None:
        if source is None:
            raise PreconditionError("A byte source is required.")
        if buffer_size < 1:
            raise PreconditionError(f"Buffer size must be positive, got {buffer_size}.")

        self._source = source
        self._readinto = getattr(source, "readinto1", None) or getattr(source, "readinto", None)
        self._buf = bytearray(buffer_size)
        self._view = memoryview(self._buf)
        self._pos = 0
        self._len = 0
        self._pushback: list[int] = []
        self._pushback_capacity = buffer_size
        self._line = 1
        logger.debug("Created reader over %r (buffer_size=%d).", source, buffer_size)

    @property
    def line(self) -> int:
        """Current 1-indexed line number."""
        return self._line

    def _fill(self) -> int:
        if self._readinto is not None:
            n = self._readinto(self._view) or 0
        else:
            chunk = self._source.read(len(self._buf)) or b""
            n = len(chunk)
            self._buf[:n] = chunk
        self._pos = 0
        self._len = n
        if n:
            logger.debug("Buffered %d bytes at line %d.", n, self._line)
        else:
            logger.debug("Byte source exhausted at line %d.", self._line)
        return n

    def has_next(self) -> bool:
        """Return ``True`` if :meth:`read` would return a byte

        Pending pushback counts as available.  Otherwise the block buffer
        is refilled from the source if it is exhausted; nothing is
        consumed.
        """
        if self._pushback:
            return True
        if self._pos < self._len:
            return True
        return self._fill() > 0

    def read(self) -> int:
        """Return the next byte (``0..255``) or :data:`EOF`

        Pushed-back bytes are delivered first, most recent first.
        """
        if self._pushback:
            return self._pushback.pop()
        if not self.has_next():
            return EOF
        b = self._buf[self._pos]
        self._pos += 1
        if b == NEW_LINE:
            self._line += 1
        return b

    def push_back(self, b: int) -> None:
        """Make *b* the next byte returned by :meth:`read`

        Raises
        ------
        PreconditionError
            If *b* is :data:`EOF` or not a byte value, or if the pushback
            stack is full.
        """
        if not (0 <= b <= 0xFF):
            raise PreconditionError(f"Only bytes read from the source can be pushed back, got {b}.")
        if len(self._pushback) >= self._pushback_capacity:
            raise PreconditionError(
                f"Pushback buffer is full ({self._pushback_capacity} bytes)."
            )
        self._pushback.append(b)
