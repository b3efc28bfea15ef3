#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared pytest fixtures for inputverifier tests

Provides verifier factories over in-memory byte strings and byte sources
with unusual behaviour (``read``-only, failing, one byte per call, partial
chunks), so that tests never touch real standard input.
"""

from __future__ import annotations

import io
from typing import Callable

import pytest

from inputverifier import InputVerifier


class ReadOnlySource:
    """Byte source exposing only ``read``, returning one byte per call"""

    def __init__(self, data: bytes) -> None:
        self._data = data
        self._pos = 0

    def read(self, n: int) -> bytes:
        chunk = self._data[self._pos : self._pos + 1]
        self._pos += len(chunk)
        return chunk


class FailingSource(io.RawIOBase):
    """Byte source whose every read raises ``OSError``"""

    def readable(self) -> bool:
        return True

    def readinto(self, b) -> int:
        raise OSError("device not ready")


@pytest.fixture
def make_verifier() -> Callable[..., InputVerifier]:
    """Factory building an :class:`InputVerifier` over a byte string"""

    def _make(data: bytes, buffer_size: int = 1024) -> InputVerifier:
        return InputVerifier.from_bytes(data, buffer_size=buffer_size)

    return _make


@pytest.fixture
def read_only_source() -> type[ReadOnlySource]:
    return ReadOnlySource


@pytest.fixture
def failing_source() -> FailingSource:
    return FailingSource()


@pytest.fixture
def sample_input() -> bytes:
    """A small, well-formed judge input file

    Layout::

        N M
        a_1 ... a_N          (ints in [-100, 100])
        S                    (lower-case, length M)
        x y                  (decimals with 1-3 fractional digits)
    """
    return b"3 5\n-7 0 100\nhello\n0.5 -12.125\n"


class ChunkedSource(io.BufferedIOBase):
    """Buffered source that has at most two bytes ready per ``readinto1``

    ``readinto`` would block until the whole buffer is filled, like a
    ``BufferedReader`` over a pipe, so it is never expected to be called.
    """

    def __init__(self, data: bytes) -> None:
        self._data = data
        self._pos = 0
        self.chunks: list[int] = []

    def readable(self) -> bool:
        return True

    def readinto1(self, b) -> int:
        chunk = self._data[self._pos : self._pos + 2]
        b[: len(chunk)] = chunk
        self._pos += len(chunk)
        self.chunks.append(len(chunk))
        return len(chunk)

    def readinto(self, b) -> int:
        raise AssertionError("readinto blocks until the buffer is full")


@pytest.fixture
def chunked_source() -> type[ChunkedSource]:
    return ChunkedSource
