#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Integer and decimal verifiers

Integers
--------
``read_int`` / ``read_long`` accept ``[+-]?[0-9]+`` tokens whose value
fits the signed 32-bit / 64-bit range; the ranged forms additionally
require ``min <= value <= max``.

Decimals
--------
``read_double`` accepts only the canonical decimal form described in
:mod:`inputverifier.utils.parsing` (no exponent, no leading zeros, no
trailing fractional zeros).  ``read_double_strict`` also bounds the
number of digits after the decimal point.

The list forms return NumPy arrays (``i4``, ``i8`` and ``f8``).
"""

from __future__ import annotations

import logging

import numpy as np

from inputverifier.utils.constants import INT_MAX, INT_MIN, LONG_MAX, LONG_MIN
from inputverifier.utils.parsing import has_fraction_digits, match_double, parse_integer
from inputverifier.utils.validation import validate_digit_range, validate_range
from inputverifier.verifiers.tokens import NO_STOP, TokenVerifier

logger = logging.getLogger(__name__)


class NumberVerifier(TokenVerifier):
    """Adds integer and decimal reads to :class:`TokenVerifier`"""

    # -----------------------------------------------------------------------
    # Integers
    # -----------------------------------------------------------------------

    def _read_integer(self, kind: str, lower: int, upper: int, stop: frozenset[int] = NO_STOP) -> int:
        token = self._read_raw_token(stop)
        try:
            return parse_integer(token, lower, upper)
        except ValueError as exc:
            raise self._failure(kind, token) from exc

    def _read_ranged_integer(
        self,
        kind: str,
        lower: int,
        upper: int,
        min_inclusive: int | None,
        max_inclusive: int | None,
        stop: frozenset[int] = NO_STOP,
    ) -> int:
        if min_inclusive is None and max_inclusive is None:
            return self._read_integer(kind, lower, upper, stop)
        lo = lower if min_inclusive is None else min_inclusive
        hi = upper if max_inclusive is None else max_inclusive
        validate_range(lo, hi)
        value = self._read_integer(kind, lower, upper, stop)
        if not (lo <= value <= hi):
            raise self._failure(f"{kind} in [{lo}, {hi}]", str(value))
        return value

    def read_long(self, min_inclusive: int | None = None, max_inclusive: int | None = None) -> int:
        """Read a signed 64-bit integer, optionally within ``[min, max]``

        Parameters
        ----------
        min_inclusive, max_inclusive : int, optional
            Closed interval the value must lie in.  An omitted bound
            defaults to the 64-bit limit.

        Returns
        -------
        int
            The value read.

        Raises
        ------
        PreconditionError
            If ``min_inclusive > max_inclusive`` (checked before reading).
        VerificationError
            With ``expected="long"`` and the token for a malformed or
            overflowing token, or ``expected="long in [min, max]"`` and
            the value for an out-of-range one.
        """
        return self._read_ranged_integer("long", LONG_MIN, LONG_MAX, min_inclusive, max_inclusive)

    def read_int(self, min_inclusive: int | None = None, max_inclusive: int | None = None) -> int:
        """Read a signed 32-bit integer, optionally within ``[min, max]``

        Same contract as :meth:`read_long`, with ``"int"`` wording.

        Examples
        --------
        >>> from inputverifier import InputVerifier
        >>> InputVerifier.from_bytes(b"7").read_int(0, 10)
        7
        """
        return self._read_ranged_integer("int", INT_MIN, INT_MAX, min_inclusive, max_inclusive)

    def read_longs(
        self,
        size: int,
        min_inclusive: int,
        max_inclusive: int,
        delimiter: str,
    ) -> np.ndarray:
        """Read *size* delimiter-separated ranged longs into an ``i8`` array"""
        validate_range(min_inclusive, max_inclusive)
        values = self._read_sequence(
            size, delimiter, lambda stop: self._read_ranged_integer(
                "long", LONG_MIN, LONG_MAX, min_inclusive, max_inclusive, stop
            )
        )
        return np.asarray(values, dtype="i8")

    def read_ints(
        self,
        size: int,
        min_inclusive: int,
        max_inclusive: int,
        delimiter: str,
    ) -> np.ndarray:
        """Read *size* delimiter-separated ranged ints into an ``i4`` array

        Examples
        --------
        >>> from inputverifier import InputVerifier
        >>> InputVerifier.from_bytes(b"1 2 3").read_ints(3, 0, 9, " ")
        array([1, 2, 3], dtype=int32)
        """
        validate_range(min_inclusive, max_inclusive)
        values = self._read_sequence(
            size, delimiter, lambda stop: self._read_ranged_integer(
                "int", INT_MIN, INT_MAX, min_inclusive, max_inclusive, stop
            )
        )
        return np.asarray(values, dtype="i4")

    # -----------------------------------------------------------------------
    # Decimals
    # -----------------------------------------------------------------------

    def _read_double(
        self,
        min_inclusive: float | None,
        max_inclusive: float | None,
        stop: frozenset[int] = NO_STOP,
    ) -> float:
        bounded = min_inclusive is not None or max_inclusive is not None
        lo = -np.inf if min_inclusive is None else min_inclusive
        hi = np.inf if max_inclusive is None else max_inclusive
        if bounded:
            validate_range(lo, hi)
        token = self._read_raw_token(stop)
        if match_double(token) is None:
            raise self._failure("double", token)
        value = float(token)
        if bounded and not (lo <= value <= hi):
            raise self._failure(f"double in [{lo:f}, {hi:f}]", repr(value))
        return value

    def read_double(
        self,
        min_inclusive: float | None = None,
        max_inclusive: float | None = None,
    ) -> float:
        """Read a canonical decimal, optionally within ``[min, max]``

        Parameters
        ----------
        min_inclusive, max_inclusive : float, optional
            Closed interval the value must lie in.  Omitted bounds are
            unbounded.

        Returns
        -------
        float
            The value read.

        Raises
        ------
        PreconditionError
            If ``min_inclusive > max_inclusive``.
        VerificationError
            With ``expected="double"`` and the token if it is not in
            canonical form, or ``expected="double in [min, max]"`` and the
            value if it is out of range.

        Examples
        --------
        >>> from inputverifier import InputVerifier
        >>> InputVerifier.from_bytes(b"1.5").read_double()
        1.5
        >>> InputVerifier.from_bytes(b"1.50").read_double()  # doctest: +ELLIPSIS
        Traceback (most recent call last):
            ...
        inputverifier.exceptions.VerificationError: ...
        """
        return self._read_double(min_inclusive, max_inclusive)

    def _read_double_strict(
        self,
        min_inclusive: float,
        max_inclusive: float,
        min_digits: int,
        max_digits: int,
        stop: frozenset[int] = NO_STOP,
    ) -> float:
        validate_range(min_inclusive, max_inclusive)
        low_digits, high_digits = validate_digit_range(min_digits, max_digits)
        expected = (
            f"a double value that has [{min_digits}, {max_digits}] digits after "
            f"the decimal point and is in [{min_inclusive:f}, {max_inclusive:f}]"
        )
        token = self._read_raw_token(stop)
        match = match_double(token)
        if match is None or not has_fraction_digits(match, low_digits, high_digits):
            raise self._failure(expected, token)
        value = float(token)
        if not (min_inclusive <= value <= max_inclusive):
            raise self._failure(expected, token)
        return value

    def read_double_strict(
        self,
        min_inclusive: float,
        max_inclusive: float,
        min_digits: int,
        max_digits: int,
    ) -> float:
        """Read a canonical decimal with a bounded number of fractional digits

        Parameters
        ----------
        min_inclusive, max_inclusive : float
            Closed interval the value must lie in.
        min_digits, max_digits : int
            Inclusive bounds on the number of digits after the decimal
            point.  The final (non-zero) digit counts.

        Raises
        ------
        PreconditionError
            If either range is empty or *max_digits* is below one.
        VerificationError
            If the token is not canonical, has the wrong number of
            fractional digits, or is out of range.  All three report the
            same combined ``expected`` text and the token as ``actual``.

        Examples
        --------
        >>> from inputverifier import InputVerifier
        >>> InputVerifier.from_bytes(b"1.23").read_double_strict(0.0, 10.0, 2, 2)
        1.23
        """
        return self._read_double_strict(min_inclusive, max_inclusive, min_digits, max_digits)

    def read_doubles(
        self,
        size: int,
        min_inclusive: float,
        max_inclusive: float,
        delimiter: str,
    ) -> np.ndarray:
        """Read *size* delimiter-separated ranged decimals into an ``f8`` array"""
        validate_range(min_inclusive, max_inclusive)
        values = self._read_sequence(
            size, delimiter, lambda stop: self._read_double(min_inclusive, max_inclusive, stop)
        )
        return np.asarray(values, dtype="f8")

    def read_doubles_strict(
        self,
        size: int,
        min_inclusive: float,
        max_inclusive: float,
        min_digits: int,
        max_digits: int,
        delimiter: str,
    ) -> np.ndarray:
        """Read *size* delimiter-separated strict decimals into an ``f8`` array"""
        validate_range(min_inclusive, max_inclusive)
        validate_digit_range(min_digits, max_digits)
        values = self._read_sequence(
            size,
            delimiter,
            lambda stop: self._read_double_strict(
                min_inclusive, max_inclusive, min_digits, max_digits, stop
            ),
        )
        return np.asarray(values, dtype="f8")
