#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tests for token verifiers

Covers token boundaries, length and pattern checks, delimiter-separated
lists, and lower/upper-case tokens.
"""

from __future__ import annotations

import re

import pytest

from inputverifier.exceptions import PreconditionError, VerificationError


# -----------------------------------------------------------------------
# read_token
# -----------------------------------------------------------------------

class TestReadToken:
    """Tests for plain token reads"""

    def test_space_separated_round_trip(self, make_verifier) -> None:
        v = make_verifier(b"abc def ghi")
        tokens = [v.read_token()]
        for _ in range(2):
            v.expect_space()
            tokens.append(v.read_token())
        assert tokens == ["abc", "def", "ghi"]
        v.expect_end_of_stream()

    def test_terminator_is_pushed_back(self, make_verifier) -> None:
        v = make_verifier(b"ab\n")
        assert v.read_token() == "ab"
        v.expect_newline()

    def test_punctuation_is_part_of_token(self, make_verifier) -> None:
        assert make_verifier(b"a,b;c!~ x").read_token() == "a,b;c!~"

    def test_at_eof(self, make_verifier) -> None:
        with pytest.raises(VerificationError) as excinfo:
            make_verifier(b"").read_token()
        assert excinfo.value.expected == "Token"
        assert excinfo.value.actual == "EOF"

    def test_empty_token(self, make_verifier) -> None:
        v = make_verifier(b" abc")
        with pytest.raises(VerificationError) as excinfo:
            v.read_token()
        assert excinfo.value.expected == "Token"
        assert excinfo.value.actual == "white space"
        v.expect_space()
        assert v.read_token() == "abc"

    def test_length(self, make_verifier) -> None:
        assert make_verifier(b"abc").read_token(3) == "abc"

    def test_length_mismatch(self, make_verifier) -> None:
        with pytest.raises(VerificationError) as excinfo:
            make_verifier(b"abc").read_token(length=2)
        assert excinfo.value.expected == "Token with the length 2"
        assert excinfo.value.actual == "Token with the length 3"

    def test_pattern(self, make_verifier) -> None:
        assert make_verifier(b"abc123").read_token(pattern=r"[a-z]+[0-9]+") == "abc123"

    def test_compiled_pattern(self, make_verifier) -> None:
        assert make_verifier(b"A1").read_token(pattern=re.compile(r"[A-Z][0-9]")) == "A1"

    def test_pattern_must_match_fully(self, make_verifier) -> None:
        with pytest.raises(VerificationError) as excinfo:
            make_verifier(b"abc").read_token(pattern="ab")
        assert excinfo.value.expected == "token that matches with ab."
        assert excinfo.value.actual == "abc"

    def test_failed_token_is_consumed(self, make_verifier) -> None:
        v = make_verifier(b"abc\n")
        with pytest.raises(VerificationError):
            v.read_token(length=5)
        v.expect_newline()

    def test_pattern_passed_as_length(self, make_verifier) -> None:
        v = make_verifier(b"abc")
        with pytest.raises(PreconditionError):
            v.read_token(re.compile("abc"))
        assert v.read_token(pattern=re.compile("abc")) == "abc"

    @pytest.mark.parametrize("length", [-1, "3", 2.0, True])
    def test_bad_length(self, make_verifier, length) -> None:
        v = make_verifier(b"ab")
        with pytest.raises(PreconditionError):
            v.read_token(length)
        assert v.read_token() == "ab"


# -----------------------------------------------------------------------
# read_tokens
# -----------------------------------------------------------------------

class TestReadTokens:
    """Tests for delimiter-separated token lists"""

    def test_comma_separated(self, make_verifier) -> None:
        assert make_verifier(b"ab,cd,ef").read_tokens(3, ",") == ["ab", "cd", "ef"]

    def test_space_separated(self, make_verifier) -> None:
        assert make_verifier(b"a;b c,d").read_tokens(2, " ") == ["a;b", "c,d"]

    def test_wrong_delimiter(self, make_verifier) -> None:
        with pytest.raises(VerificationError) as excinfo:
            make_verifier(b"ab;cd,ef").read_tokens(3, ",")
        assert excinfo.value.expected == ","
        assert excinfo.value.actual == ";"

    def test_punctuation_ends_element(self, make_verifier) -> None:
        with pytest.raises(VerificationError) as excinfo:
            make_verifier(b"a/b,c").read_tokens(2, ",")
        assert excinfo.value.expected == ","
        assert excinfo.value.actual == "/"

    def test_space_delimiter_readable_form(self, make_verifier) -> None:
        with pytest.raises(VerificationError) as excinfo:
            make_verifier(b"ab\ncd").read_tokens(2, " ")
        assert excinfo.value.expected == "white space"
        assert excinfo.value.actual == "new line"

    def test_too_few_tokens(self, make_verifier) -> None:
        with pytest.raises(VerificationError) as excinfo:
            make_verifier(b"ab cd").read_tokens(3, " ")
        assert excinfo.value.actual == "EOF"

    def test_no_trailing_delimiter(self, make_verifier) -> None:
        v = make_verifier(b"ab cd ")
        assert v.read_tokens(2, " ") == ["ab", "cd"]
        with pytest.raises(VerificationError):
            v.expect_end_of_stream()

    def test_double_delimiter(self, make_verifier) -> None:
        with pytest.raises(VerificationError) as excinfo:
            make_verifier(b"ab,,cd").read_tokens(2, ",")
        assert excinfo.value.expected == "Token"
        assert excinfo.value.actual == ","

    def test_with_pattern(self, make_verifier) -> None:
        assert make_verifier(b"x1 y2").read_tokens(2, " ", pattern=r"[a-z][0-9]") == ["x1", "y2"]

    def test_with_pattern_mismatch(self, make_verifier) -> None:
        with pytest.raises(VerificationError) as excinfo:
            make_verifier(b"x1 yy").read_tokens(2, " ", r"[a-z][0-9]")
        assert excinfo.value.actual == "yy"

    def test_zero_tokens(self, make_verifier) -> None:
        v = make_verifier(b"")
        assert v.read_tokens(0, " ") == []

    def test_negative_size(self, make_verifier) -> None:
        with pytest.raises(PreconditionError):
            make_verifier(b"a").read_tokens(-1, " ")

    @pytest.mark.parametrize("delimiter", ["", "ab", "é"])
    def test_bad_delimiter(self, make_verifier, delimiter: str) -> None:
        v = make_verifier(b"a b")
        with pytest.raises(PreconditionError):
            v.read_tokens(2, delimiter)
        assert v.read_token() == "a"


# -----------------------------------------------------------------------
# Case tokens
# -----------------------------------------------------------------------

class TestCaseTokens:
    """Tests for lower/upper-case tokens"""

    def test_lower(self, make_verifier) -> None:
        assert make_verifier(b"hello").read_lower_case_token() == "hello"

    def test_lower_rejects_mixed(self, make_verifier) -> None:
        with pytest.raises(VerificationError) as excinfo:
            make_verifier(b"heLlo").read_lower_case_token()
        assert excinfo.value.expected == "lower-case token"
        assert excinfo.value.actual == "heLlo"

    def test_upper(self, make_verifier) -> None:
        assert make_verifier(b"ABC").read_upper_case_token(3) == "ABC"

    def test_upper_rejects_digits(self, make_verifier) -> None:
        with pytest.raises(VerificationError) as excinfo:
            make_verifier(b"AB1").read_upper_case_token()
        assert excinfo.value.expected == "upper-case token"

    def test_length_mismatch_wording(self, make_verifier) -> None:
        with pytest.raises(VerificationError) as excinfo:
            make_verifier(b"abcd").read_lower_case_token(3)
        assert excinfo.value.expected == "token with the length 3"
        assert excinfo.value.actual == "token with the length 4"

    @pytest.mark.parametrize("method", ["read_lower_case_token", "read_upper_case_token"])
    def test_negative_length(self, make_verifier, method: str) -> None:
        v = make_verifier(b"ab")
        with pytest.raises(PreconditionError):
            getattr(v, method)(-1)
        assert v.read_token() == "ab"

    def test_lower_list(self, make_verifier) -> None:
        assert make_verifier(b"ab cd").read_lower_case_tokens(2, " ") == ["ab", "cd"]

    def test_upper_list_with_comma(self, make_verifier) -> None:
        assert make_verifier(b"AB,CD,E").read_upper_case_tokens(3, ",") == ["AB", "CD", "E"]

    def test_upper_list_rejects_lower(self, make_verifier) -> None:
        with pytest.raises(VerificationError) as excinfo:
            make_verifier(b"AB cd").read_upper_case_tokens(2, " ")
        assert excinfo.value.actual == "cd"
