#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Typed records produced by the verifiers

:class:`~inputverifier.models.records.VerificationFailure` is the
payload of every :class:`~inputverifier.exceptions.VerificationError`.
"""

from __future__ import annotations

from inputverifier.models.records import VerificationFailure

__all__ = ["VerificationFailure"]
