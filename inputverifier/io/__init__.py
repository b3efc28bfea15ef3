#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Byte-level input

Provides :class:`~inputverifier.io.reader.BufferedPushbackReader`, the
block-buffered reader every verifier is built on.
"""

from __future__ import annotations

from inputverifier.io.reader import BufferedPushbackReader

__all__ = ["BufferedPushbackReader"]
