# Copyright 2026 LoxScan Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for Lox source text.

Converts raw source text into a sequence of tokens for subsequent parsing.
Lexical errors are reported through an injected reporter and never raised.
"""

import logging

from loxscan.diagnostics import ErrorReporter
from loxscan.scanner.tokens import KEYWORDS, Token, TokenType

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

UNTERMINATED_STRING = "Unterminated string."
UNEXPECTED_CHARACTER = "Unexpected character."


class Scanner:
    """Single-pass scanner over one source unit.

    Args:
        source: The full text of a Lox script.
        reporter: Called once per lexical error with ``(line, message)``.
    """

    def __init__(self, source: str, reporter: ErrorReporter) -> None:
        self._source = source
        self._reporter = reporter
        self._tokens: list[Token] = []
        self._start = 0
        self._current = 0
        self._line = 1
        self._done = False

    def scan_tokens(self) -> list[Token]:
        """Scan the whole source and return all tokens including the terminal EOF.

        Repeated calls return the same list without rescanning.
        """
        if self._done:
            return self._tokens
        while not self._is_at_end():
            self._start = self._current
            self._scan_token()
        self._tokens.append(Token(TokenType.EOF, "", None, self._line, self._current))
        self._done = True
        logger.debug("Scanned %d tokens over %d lines", len(self._tokens), self._line)
        return self._tokens

    # ------------------------------------------------------------------
    # Low-level character access helpers
    # ------------------------------------------------------------------

    def _is_at_end(self) -> bool:
        return self._current >= len(self._source)

    def _advance(self) -> str:
        """Consume the current character and return it."""
        ch = self._source[self._current]
        self._current += 1
        return ch

    def _match(self, expected: str) -> bool:
        """Consume the current character only if it equals ``expected``."""
        if self._is_at_end() or self._source[self._current] != expected:
            return False
        self._current += 1
        return True

    def _peek(self) -> str:
        """Return the current character, or '' at end of input."""
        if self._is_at_end():
            return ""
        return self._source[self._current]

    def _peek_next(self) -> str:
        """Return the character one position ahead, or '' past end of input."""
        if self._current + 1 >= len(self._source):
            return ""
        return self._source[self._current + 1]

    def _add_token(self, token_type: TokenType, literal: float | str | None = None) -> None:
        lexeme = self._source[self._start : self._current]
        self._tokens.append(Token(token_type, lexeme, literal, self._line, self._start))

    def _error(self, message: str) -> None:
        logger.debug("Line %d: %s", self._line, message)
        self._reporter(self._line, message)

    # ------------------------------------------------------------------
    # Token scanning dispatcher
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        """Consume one lead character and dispatch on it."""
        ch = self._advance()

        if ch in _SINGLE_CHAR_TOKENS:
            self._add_token(_SINGLE_CHAR_TOKENS[ch])
        elif ch in _EQUAL_SUFFIXED_TOKENS:
            one_char, two_char = _EQUAL_SUFFIXED_TOKENS[ch]
            self._add_token(two_char if self._match("=") else one_char)
        elif ch == "/":
            if self._match("/"):
                self._skip_line_comment()
                return
            self._add_token(TokenType.SLASH)
        elif ch in " \r\t":
            pass
        elif ch == "\n":
            self._line += 1
        elif ch == '"':
            self._scan_string()
        elif _is_digit(ch):
            self._scan_number()
        elif _is_alpha(ch):
            self._scan_identifier_or_keyword()
        else:
            self._error(UNEXPECTED_CHARACTER)

    def _skip_line_comment(self) -> None:
        """Consume through end-of-line (exclusive of the newline itself)."""
        while self._peek() != "\n" and not self._is_at_end():
            self._advance()

    # ------------------------------------------------------------------
    # Literal scanners
    # ------------------------------------------------------------------

    def _scan_string(self) -> None:
        """Scan a double-quoted string literal; newlines are allowed, escapes are not processed."""
        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == "\n":
                self._line += 1
            self._advance()

        if self._is_at_end():
            self._error(UNTERMINATED_STRING)
            return

        self._advance()  # closing "
        self._add_token(TokenType.STRING, self._source[self._start + 1 : self._current - 1])

    def _scan_number(self) -> None:
        """Scan a number literal.

        The fractional part requires at least one digit after the dot; a bare
        trailing dot is left for the next token.
        """
        while _is_digit(self._peek()):
            self._advance()

        if self._peek() == "." and _is_digit(self._peek_next()):
            self._advance()  # consume the '.'
            while _is_digit(self._peek()):
                self._advance()

        self._add_token(TokenType.NUMBER, float(self._source[self._start : self._current]))

    def _scan_identifier_or_keyword(self) -> None:
        while _is_alphanumeric(self._peek()):
            self._advance()
        text = self._source[self._start : self._current]
        self._add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))


def tokenize(source: str, reporter: ErrorReporter) -> list[Token]:
    """Tokenize Lox source text into a sequence of tokens.

    Comments and whitespace are consumed and not included in the output.

    Args:
        source: The full text of a Lox script.
        reporter: Receives ``(line, message)`` for each lexical error.

    Returns:
        A list of Token objects ending with a single EOF token.
    """
    return Scanner(source, reporter).scan_tokens()


# ################
# Implementation
# ################

_SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# Lead character -> (token without '=', token with '=')
_EQUAL_SUFFIXED_TOKENS: dict[str, tuple[TokenType, TokenType]] = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_alpha(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z") or ch == "_"


def _is_alphanumeric(ch: str) -> bool:
    return _is_alpha(ch) or _is_digit(ch)
