#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared utilities for parsing and validation

Constants, byte classification, diagnostic formatting, numeric grammars
and argument checks used by every verifier, kept here so that none of
the verifier modules duplicates them.
"""

from __future__ import annotations
