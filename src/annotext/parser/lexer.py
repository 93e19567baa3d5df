# Copyright 2026 Annotext Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for annotation expressions.

Converts raw annotation text into a sequence of tokens for subsequent parsing.
"""

import enum
from dataclasses import dataclass

# ###############
# Public Interface
# ###############


class TokenType(enum.Enum):
    """All token types produced by the annotation lexer."""

    # Keywords
    TRUE = "true"
    FALSE = "false"

    # Symbols
    AT = "@"
    LPAREN = "("
    RPAREN = ")"
    COMMA = ","
    EQUALS = "="

    # Literals
    STRING = "STRING"
    RAW_STRING = "RAW_STRING"
    INTEGER = "INTEGER"
    FLOAT = "FLOAT"

    # Identifiers
    IDENTIFIER = "IDENTIFIER"

    # End of input
    EOF = "EOF"


@dataclass(frozen=True)
class Token:
    """A lexical token with its source location.

    Attributes:
        type: The kind of token.
        value: The raw text of the token (or decoded content for string tokens).
        line: 1-based line number where the token starts.
        column: 1-based column number where the token starts.
    """

    type: TokenType
    value: str
    line: int
    column: int


class AnnotationSyntaxError(Exception):
    """Base class for all errors raised while reading annotation text.

    Attributes:
        line: 1-based line number of the error.
        column: 1-based column number of the error.
    """

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(f"Line {line}, column {column}: {message}")
        self.line = line
        self.column = column


class LexerError(AnnotationSyntaxError):
    """Raised when the scanner encounters an invalid character or unterminated literal."""


def tokenize(source: str) -> list[Token]:
    """Tokenize annotation text into a sequence of tokens.

    Whitespace, including newlines, separates tokens and is not included in
    the output.

    Args:
        source: Text holding a single annotation expression.

    Returns:
        A list of Token objects ending with a single EOF token.

    Raises:
        LexerError: On unexpected characters or unterminated string literals.
    """
    return _Lexer(source).tokenize()


# ################
# Implementation
# ################

_KEYWORDS: dict[str, TokenType] = {
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
}

_SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "@": TokenType.AT,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ",": TokenType.COMMA,
    "=": TokenType.EQUALS,
}

_STRING_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "\\": "\\",
    '"': '"',
    "'": "'",
}


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


class _Lexer:
    """Internal scanner state machine."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line = 1
        self._column = 1
        self._tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """Run the scanner and return all tokens including the terminal EOF."""
        while self._pos < len(self._source):
            self._skip_whitespace()
            if self._pos >= len(self._source):
                break
            self._scan_token()
        self._tokens.append(Token(TokenType.EOF, "", self._line, self._column))
        return self._tokens

    # ------------------------------------------------------------------
    # Low-level character access helpers
    # ------------------------------------------------------------------

    def _current(self) -> str:
        """Return the character at the current position, or '' at end of input."""
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _peek(self) -> str:
        """Return the character one position ahead, or '' at end of input."""
        if self._pos + 1 < len(self._source):
            return self._source[self._pos + 1]
        return ""

    def _advance(self) -> str:
        """Consume the current character, update position tracking, and return it."""
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1
        return ch

    def _skip_whitespace(self) -> None:
        while self._pos < len(self._source) and self._current().isspace():
            self._advance()

    # ------------------------------------------------------------------
    # Token scanning dispatcher
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        """Dispatch to the appropriate handler based on the current character."""
        ch = self._current()
        line = self._line
        col = self._column

        if ch in _SINGLE_CHAR_TOKENS:
            self._advance()
            self._tokens.append(Token(_SINGLE_CHAR_TOKENS[ch], ch, line, col))
        elif ch in "\"'":
            self._scan_string(ch, line, col)
        elif ch == "`":
            self._scan_raw_string(line, col)
        elif _is_digit(ch) or (ch == "-" and _is_digit(self._peek())):
            self._scan_number(line, col)
        elif ch.isalpha() or ch == "_":
            self._scan_identifier_or_keyword(line, col)
        else:
            raise LexerError(f"Unexpected character: {ch!r}", line, col)

    # ------------------------------------------------------------------
    # Literal scanners
    # ------------------------------------------------------------------

    def _scan_string(self, quote: str, line: int, col: int) -> None:
        """Scan a single- or double-quoted string literal with escape sequences."""
        self._advance()  # opening quote
        chars: list[str] = []
        while self._pos < len(self._source):
            ch = self._current()
            if ch == quote:
                self._advance()  # closing quote
                self._tokens.append(Token(TokenType.STRING, "".join(chars), line, col))
                return
            if ch == "\n":
                raise LexerError("Unterminated string literal", line, col)
            if ch == "\\":
                self._advance()
                if self._pos >= len(self._source):
                    raise LexerError("Unterminated string literal", line, col)
                esc = self._current()
                if esc not in _STRING_ESCAPES:
                    raise LexerError(
                        f"Invalid escape sequence: '\\{esc}'",
                        self._line,
                        self._column,
                    )
                chars.append(_STRING_ESCAPES[esc])
                self._advance()
            else:
                chars.append(ch)
                self._advance()
        raise LexerError("Unterminated string literal", line, col)

    def _scan_raw_string(self, line: int, col: int) -> None:
        """Scan a backtick-quoted raw string. No escapes; may span lines."""
        self._advance()  # opening `
        start = self._pos
        while self._pos < len(self._source):
            if self._current() == "`":
                value = self._source[start : self._pos]
                self._advance()  # closing `
                self._tokens.append(Token(TokenType.RAW_STRING, value, line, col))
                return
            self._advance()
        raise LexerError("Unterminated raw string literal", line, col)

    def _scan_number(self, line: int, col: int) -> None:
        """Scan an integer or floating-point literal.

        A float has a fractional part with at least one digit on both sides of
        the decimal point, an exponent, or both.
        """
        start = self._pos
        is_float = False
        if self._current() == "-":
            self._advance()
        self._consume_digits()

        if self._current() == "." and _is_digit(self._peek()):
            is_float = True
            self._advance()  # consume the '.'
            self._consume_digits()

        if self._current() in ("e", "E"):
            offset = 2 if self._peek() in ("+", "-") else 1
            if self._pos + offset < len(self._source) and _is_digit(self._source[self._pos + offset]):
                is_float = True
                for _ in range(offset):
                    self._advance()
                self._consume_digits()

        value = self._source[start : self._pos]
        token_type = TokenType.FLOAT if is_float else TokenType.INTEGER
        self._tokens.append(Token(token_type, value, line, col))

    def _consume_digits(self) -> None:
        while self._pos < len(self._source) and _is_digit(self._current()):
            self._advance()

    def _scan_identifier_or_keyword(self, line: int, col: int) -> None:
        """Scan an identifier and map it to a keyword token type if applicable."""
        start = self._pos
        while self._pos < len(self._source) and (self._current().isalnum() or self._current() == "_"):
            self._advance()
        value = self._source[start : self._pos]
        token_type = _KEYWORDS.get(value, TokenType.IDENTIFIER)
        self._tokens.append(Token(token_type, value, line, col))
