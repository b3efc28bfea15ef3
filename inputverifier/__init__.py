#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
inputverifier - strict-format input validation for judge test data

Read a byte stream token by token and assert that it matches an exact
grammar: where spaces and newlines go, character case, integer ranges,
canonical decimals with a bounded number of fractional digits, and field
counts.  The first deviation raises a
:class:`~inputverifier.exceptions.VerificationError` tagged with the line
number.

Modules
-------
io
    Block-buffered byte reader with pushback and line counting.
verifiers
    Structural, token and numeric grammar checks.
models
    Immutable failure record carried by verification errors.
utils
    Constants, classification and numeric grammars, argument checks.

Examples
--------
>>> from inputverifier import InputVerifier
>>> v = InputVerifier.from_bytes(b"2\\n0.5 1.25\\n")
>>> n = v.read_int(1, 10)
>>> v.expect_newline()
>>> v.read_doubles_strict(n, 0.0, 2.0, 1, 2, " ")
array([0.5 , 1.25])
>>> v.expect_newline()
>>> v.expect_end_of_stream()
"""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "Melek Derman"

from inputverifier.verifier import InputVerifier
from inputverifier.io.reader import BufferedPushbackReader
from inputverifier.models.records import VerificationFailure
from inputverifier.utils.constants import EOF, CharacterClass
from inputverifier.exceptions import (
    InputVerifierError,
    VerificationError,
    PreconditionError,
)

__all__ = [
    # Version
    "__version__",
    # Verifier
    "InputVerifier",
    "BufferedPushbackReader",
    "CharacterClass",
    "EOF",
    # Records
    "VerificationFailure",
    # Exceptions
    "InputVerifierError",
    "VerificationError",
    "PreconditionError",
]
