#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Typed record describing a verification failure

The record is the payload of
:class:`~inputverifier.exceptions.VerificationError`; it is kept separate
so that callers collecting diagnostics (e.g. a judge reporting several
test files) can store and compare failures without holding exception
objects and their tracebacks.
"""

from __future__ import annotations

from dataclasses import dataclass

from inputverifier.utils.constants import (
    FAILURE_TEMPLATE,
    OMIT_PLACEHOLDER,
    OMIT_THRESHOLD,
)


@dataclass(frozen=True)
class VerificationFailure:
    """Position-tagged mismatch between input and grammar

    Parameters
    ----------
    line : int
        1-indexed line number at which the mismatch was detected.
    expected : str
        What the grammar required (format name, interval, delimiter or
        pattern).
    actual : str
        What was found: the literal byte or token, or a category label
        such as ``"new line"`` or ``"EOF"``.
    """

    line: int
    expected: str
    actual: str

    @classmethod
    def create(cls, line: int, expected: str, actual: str) -> VerificationFailure:
        """Build a record, replacing an over-long *actual* with ``"(omit)"``

        Examples
        --------
        >>> VerificationFailure.create(1, "int", "x" * 1000).actual
        '(omit)'
        """
        if len(actual) >= OMIT_THRESHOLD:
            actual = OMIT_PLACEHOLDER
        return cls(line=line, expected=expected, actual=actual)

    def render(self) -> str:
        return FAILURE_TEMPLATE.format(
            line=self.line, expected=self.expected, actual=self.actual
        )

    def __str__(self) -> str:
        return self.render()
