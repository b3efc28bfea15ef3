#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Custom exception hierarchy for the inputverifier package

All exceptions raised by inputverifier inherit from
:class:`InputVerifierError`.  Failures of the underlying byte source are
*not* wrapped: they surface as the ``OSError`` the source raised, so a
caller can always tell the three failure kinds apart.

Exception Hierarchy
-------------------
::

    InputVerifierError
    ├── VerificationError   # Input does not match the expected grammar
    └── PreconditionError   # Invalid arguments from the calling code
"""

from __future__ import annotations

from inputverifier.models.records import VerificationFailure


class InputVerifierError(Exception):
    """Base exception for all inputverifier errors

    Catching ``InputVerifierError`` catches both malformed input and
    misuse of the API, while I/O errors (``OSError``) propagate
    separately.
    """


class VerificationError(InputVerifierError):
    """Raised when the stream deviates from the expected grammar

    The message is the rendered :class:`VerificationFailure`::

        Verification failed at line 3.
            expected: int in [0, 10]
            actual: 11

    Parameters
    ----------
    line : int
        Line counter at the moment the mismatch was detected.
    expected : str
        Description of what the grammar required at this position.
    actual : str
        Description of what was found.  Values of
        :data:`~inputverifier.utils.constants.OMIT_THRESHOLD` characters
        or more are replaced by ``"(omit)"``.

    Attributes
    ----------
    failure : VerificationFailure
        The immutable failure record.
    """

    def __init__(self, line: int, expected: str, actual: str) -> None:
        self.failure = VerificationFailure.create(line, expected, actual)
        super().__init__(self.failure.render())

    @property
    def line(self) -> int:
        return self.failure.line

    @property
    def expected(self) -> str:
        return self.failure.expected

    @property
    def actual(self) -> str:
        return self.failure.actual


class PreconditionError(InputVerifierError, ValueError):
    """Raised when a verifier is called with arguments that can never match

    This is a programming error in the calling code, not a property of the
    input: an empty range (``min > max``), a negative element count, a
    delimiter that is not a single ASCII character, a missing byte source,
    or misuse of the pushback buffer.  It is raised before the stream is
    touched.

    Also a ``ValueError`` so that generic argument-checking code keeps
    working.
    """
