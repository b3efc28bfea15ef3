#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tunables, sentinels and diagnostic labels used across inputverifier

Byte values are handled as plain ``int`` in ``0..255``; the end of the
stream is the negative sentinel :data:`EOF` so that it can never collide
with a real byte.
"""

from __future__ import annotations

import enum

# ---------------------------------------------------------------------------
# Buffering
# ---------------------------------------------------------------------------

BUFFER_SIZE: int = 1024
"""Capacity of the primary buffer and of the pushback stack (bytes)."""

EOF: int = -1
"""Sentinel returned by the reader once the byte source is exhausted."""

# ---------------------------------------------------------------------------
# Diagnostics
# ---------------------------------------------------------------------------

OMIT_THRESHOLD: int = 1000
"""Rendered ``actual`` values at least this long are replaced in messages."""

OMIT_PLACEHOLDER: str = "(omit)"
"""Text substituted for an over-long ``actual`` value."""

FAILURE_TEMPLATE: str = "Verification failed at line {line}.\n\texpected: {expected}\n\tactual: {actual}"
"""Textual rendering of a verification failure."""

EOF_LABEL: str = "EOF"
EOL_LABEL: str = "EOL"
SPACE_LABEL: str = "Space"
TOKEN_LABEL: str = "Token"
UNDEFINED_LABEL: str = "undefined"
NEW_LINE_LABEL: str = "new line"
WHITE_SPACE_LABEL: str = "white space"
CONTROL_LABEL: str = "control character"

# ---------------------------------------------------------------------------
# Character classes
# ---------------------------------------------------------------------------

NEW_LINE: int = 0x0A
SPACE: int = 0x20

PRINTABLE_MIN: int = 0x21
"""Smallest byte that may appear inside a token (``!``)."""

PRINTABLE_MAX: int = 0x7E
"""Largest byte that may appear inside a token (``~``)."""

ASCII_MAX: int = 0x7F


class CharacterClass(enum.Enum):
    """Single-character classes accepted by ``read_character``

    The value is the inclusive byte range of the class; :attr:`label` is
    the wording used for the ``expected`` part of a failure.
    """

    LOWER = (ord("a"), ord("z"))
    UPPER = (ord("A"), ord("Z"))

    @property
    def label(self) -> str:
        return "Lower-case character" if self is CharacterClass.LOWER else "Upper-case character"

    @property
    def token_label(self) -> str:
        return "lower-case token" if self is CharacterClass.LOWER else "upper-case token"

    def contains(self, codepoint: int) -> bool:
        low, high = self.value
        return low <= codepoint <= high


# ---------------------------------------------------------------------------
# Integer bounds
# ---------------------------------------------------------------------------

INT_MIN: int = -(2 ** 31)
INT_MAX: int = 2 ** 31 - 1
LONG_MIN: int = -(2 ** 63)
LONG_MAX: int = 2 ** 63 - 1
