# Copyright 2026 LoxScan Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the token vocabulary and keyword table."""

import dataclasses

import pytest

from loxscan.scanner import KEYWORDS, Token, TokenType


class TestKeywordTable:
    def test_contains_all_reserved_words(self) -> None:
        assert set(KEYWORDS) == {
            "and",
            "class",
            "else",
            "false",
            "for",
            "fun",
            "if",
            "nil",
            "or",
            "print",
            "return",
            "super",
            "this",
            "true",
            "var",
            "while",
        }

    def test_spelling_matches_token_type_value(self) -> None:
        for spelling, token_type in KEYWORDS.items():
            assert token_type.value == spelling

    def test_identifier_is_not_a_keyword(self) -> None:
        assert TokenType.IDENTIFIER not in KEYWORDS.values()

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            KEYWORDS["let"] = TokenType.VAR  # type: ignore[index]

    def test_table_rejects_deletion(self) -> None:
        with pytest.raises(TypeError):
            del KEYWORDS["var"]  # type: ignore[attr-defined]


class TestToken:
    def test_token_is_immutable(self) -> None:
        token = Token(TokenType.IDENTIFIER, "x", None, 1, 0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            token.lexeme = "y"  # type: ignore[misc]

    def test_tokens_compare_by_value(self) -> None:
        assert Token(TokenType.NUMBER, "1", 1.0, 1, 0) == Token(TokenType.NUMBER, "1", 1.0, 1, 0)

    def test_str_number(self) -> None:
        assert str(Token(TokenType.NUMBER, "1.5", 1.5, 1, 0)) == "NUMBER 1.5 1.5"

    def test_str_identifier(self) -> None:
        assert str(Token(TokenType.IDENTIFIER, "x", None, 1, 0)) == "IDENTIFIER x None"

    def test_str_eof(self) -> None:
        assert str(Token(TokenType.EOF, "", None, 3, 10)) == "EOF  None"
