# Copyright 2026 LoxScan Contributors
# SPDX-License-Identifier: Apache-2.0

"""Scanner and token vocabulary for Lox source text."""

from loxscan.scanner.scanner import UNEXPECTED_CHARACTER, UNTERMINATED_STRING, Scanner, tokenize
from loxscan.scanner.tokens import KEYWORDS, Token, TokenType

__all__ = [
    "KEYWORDS",
    "Scanner",
    "Token",
    "TokenType",
    "UNEXPECTED_CHARACTER",
    "UNTERMINATED_STRING",
    "tokenize",
]
