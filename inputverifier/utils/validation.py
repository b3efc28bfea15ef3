#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Argument checks for verifier calls

Every function here raises :class:`~inputverifier.exceptions.PreconditionError`
when the *caller* passed arguments that no input could ever satisfy.
They run before any byte is read, so a failing check leaves the stream
untouched.

Checked Constraints
-------------------
* Ranges must be non-empty (``min <= max``).
* Fractional digit-count ranges must be non-empty and allow at least one
  digit.
* Element counts and token lengths must be non-negative.
* Delimiters must be a single ASCII character.
"""

from __future__ import annotations

import logging

from inputverifier.exceptions import PreconditionError
from inputverifier.utils.constants import ASCII_MAX

logger = logging.getLogger(__name__)


def validate_range(min_inclusive: float, max_inclusive: float) -> None:
    """Verify that ``[min_inclusive, max_inclusive]`` is not empty

    Raises
    ------
    PreconditionError
        If *min_inclusive* is greater than *max_inclusive*.

    Examples
    --------
    >>> validate_range(0, 10)
    >>> validate_range(10, 0)  # doctest: +ELLIPSIS
    Traceback (most recent call last):
        ...
    inputverifier.exceptions.PreconditionError: ...
    """
    if min_inclusive > max_inclusive:
        raise PreconditionError(
            f"Empty range: [{min_inclusive}, {max_inclusive}]."
        )


def validate_digit_range(min_digits: int, max_digits: int) -> tuple[int, int]:
    """Verify a fractional digit-count range and normalise it

    A canonical decimal always has at least one digit after the point, so
    a lower bound below one is raised to one.

    Returns
    -------
    tuple[int, int]
        The effective ``(min_digits, max_digits)``.

    Raises
    ------
    PreconditionError
        If the range is empty or *max_digits* is below one.
    """
    if min_digits > max_digits:
        raise PreconditionError(
            f"Empty digit-count range: [{min_digits}, {max_digits}]."
        )
    if max_digits < 1:
        raise PreconditionError(
            f"A decimal has at least one digit after the point, "
            f"got at most {max_digits}."
        )
    return max(min_digits, 1), max_digits


def validate_size(size: int) -> None:
    """Verify that an element count is non-negative"""
    if size < 0:
        raise PreconditionError(f"Element count must be non-negative, got {size}.")


def validate_length(length: int | None) -> None:
    """Verify an optional token length

    Raises
    ------
    PreconditionError
        If *length* is given but is not a non-negative ``int``.  A pattern
        passed positionally in place of a length lands here.

    Examples
    --------
    >>> validate_length(None)
    >>> validate_length(3)
    >>> validate_length("abc")  # doctest: +ELLIPSIS
    Traceback (most recent call last):
        ...
    inputverifier.exceptions.PreconditionError: ...
    """
    if length is None:
        return
    if isinstance(length, bool) or not isinstance(length, int):
        raise PreconditionError(
            f"Token length must be an int, got {length!r}; "
            f"pass a pattern as pattern=."
        )
    if length < 0:
        raise PreconditionError(f"Token length must be non-negative, got {length}.")


def delimiter_to_byte(delimiter: str) -> int:
    """Return the byte value of a single-character ASCII delimiter

    Raises
    ------
    PreconditionError
        If *delimiter* is not exactly one ASCII character.

    Examples
    --------
    >>> delimiter_to_byte(",")
    44
    """
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise PreconditionError(
            f"Delimiter must be a single character, got {delimiter!r}."
        )
    b = ord(delimiter)
    if b > ASCII_MAX:
        raise PreconditionError(f"Delimiter must be ASCII, got {delimiter!r}.")
    logger.debug("Using delimiter byte 0x%02x.", b)
    return b
