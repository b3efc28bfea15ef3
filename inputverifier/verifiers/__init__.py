#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Grammar verifiers layered on the pushback reader

* :class:`~inputverifier.verifiers.base.BaseVerifier`: EOF, EOL, space
  and single-character checks
* :class:`~inputverifier.verifiers.tokens.TokenVerifier`: tokens,
  pattern tokens and case tokens
* :class:`~inputverifier.verifiers.numbers.NumberVerifier`: integers
  and canonical decimals
"""

from __future__ import annotations

from inputverifier.verifiers.base import BaseVerifier
from inputverifier.verifiers.tokens import TokenVerifier
from inputverifier.verifiers.numbers import NumberVerifier

__all__ = ["BaseVerifier", "TokenVerifier", "NumberVerifier"]
