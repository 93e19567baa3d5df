# Copyright 2026 Annotext Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recursive-descent parser for annotation expressions.

Grammar::

    annotation := '@' name '(' [ parameter (',' parameter)* ] ')'
    parameter  := name '=' literal
    literal    := STRING | RAW_STRING | INTEGER | FLOAT | 'true' | 'false'
"""

from annotext.model.annotation import Annotation
from annotext.model.values import BoolValue, FloatValue, IntValue, StringValue, Value
from annotext.parser.lexer import AnnotationSyntaxError, Token, TokenType, tokenize

# ###############
# Public Interface
# ###############


class ParseError(AnnotationSyntaxError):
    """Raised when the parser encounters a syntactically invalid construct."""


class NotAnAnnotationError(ParseError):
    """Raised when the text does not start with ``@`` and so holds no annotation."""


class DuplicateParameterError(ParseError):
    """Raised for a repeated parameter name when duplicates are disallowed.

    Attributes:
        parameter: The repeated parameter name.
    """

    def __init__(self, parameter: str, line: int, column: int) -> None:
        super().__init__(f"Duplicate parameter {parameter!r}", line, column)
        self.parameter = parameter


def parse(source: str, *, allow_duplicates: bool = True) -> Annotation:
    """Parse text holding exactly one annotation expression.

    Leading and trailing whitespace is ignored. Whitespace between tokens,
    including newlines, is allowed anywhere.

    Args:
        source: The annotation text, e.g. ``@Route(path="/orders")``.
        allow_duplicates: If True, a repeated parameter name overwrites the
            earlier value. If False, it raises DuplicateParameterError.

    Returns:
        The parsed Annotation.

    Raises:
        NotAnAnnotationError: If the trimmed text does not begin with ``@``.
        LexerError: If the text contains invalid characters or unterminated literals.
        ParseError: If the text is not a single well-formed annotation.
    """
    if not source.strip().startswith("@"):
        raise NotAnAnnotationError("Annotation not found in string", 1, 1)
    tokens = tokenize(source)
    return _Parser(tokens, allow_duplicates=allow_duplicates).parse()


# ################
# Implementation
# ################

_NAME_TYPES: frozenset[TokenType] = frozenset(
    {
        TokenType.IDENTIFIER,
        TokenType.TRUE,
        TokenType.FALSE,
    }
)


class _Parser:
    """Recursive-descent parser for annotation token streams."""

    def __init__(self, tokens: list[Token], *, allow_duplicates: bool) -> None:
        self._tokens = tokens
        self._pos = 0
        self._allow_duplicates = allow_duplicates

    def parse(self) -> Annotation:
        """Parse the full token stream and return an Annotation."""
        annotation = self._parse_annotation()
        tok = self._current()
        if tok.type != TokenType.EOF:
            raise ParseError(
                f"Unexpected {tok.value!r} after annotation",
                tok.line,
                tok.column,
            )
        return annotation

    # ------------------------------------------------------------------
    # Token access helpers
    # ------------------------------------------------------------------

    def _current(self) -> Token:
        """Return the current (un-consumed) token."""
        return self._tokens[self._pos]

    def _advance(self) -> Token:
        """Consume and return the current token, stopping at EOF."""
        tok = self._tokens[self._pos]
        if self._pos < len(self._tokens) - 1:
            self._pos += 1
        return tok

    def _expect(self, *types: TokenType) -> Token:
        """Consume the current token if it matches any of the given types.

        Raises ParseError if the current token does not match.
        """
        tok = self._current()
        if tok.type not in types:
            expected = ", ".join(repr(t.value) for t in types)
            raise ParseError(
                f"Expected {expected}, got {_describe(tok)}",
                tok.line,
                tok.column,
            )
        return self._advance()

    def _check(self, *types: TokenType) -> bool:
        """Return True if the current token matches any of the given types (without
        consuming).
        """
        return self._current().type in types

    def _expect_name_token(self) -> Token:
        """Consume the current token as a name.

        Accepts identifiers and the boolean keywords, which are plain names
        outside value position.
        """
        tok = self._current()
        if tok.type not in _NAME_TYPES:
            raise ParseError(
                f"Expected identifier, got {_describe(tok)}",
                tok.line,
                tok.column,
            )
        return self._advance()

    # ------------------------------------------------------------------
    # Annotation
    # ------------------------------------------------------------------

    def _parse_annotation(self) -> Annotation:
        """Parse: @<Name>( [<param> (, <param>)*] )"""
        self._expect(TokenType.AT)
        name_tok = self._expect_name_token()
        self._expect(TokenType.LPAREN)
        annotation = Annotation(name=name_tok.value)
        if not self._check(TokenType.RPAREN):
            self._parse_parameter(annotation)
            while self._check(TokenType.COMMA):
                self._advance()  # consume ,
                self._parse_parameter(annotation)
        self._expect(TokenType.RPAREN)
        return annotation

    def _parse_parameter(self, annotation: Annotation) -> None:
        """Parse: <name> = <literal> and store it on the annotation."""
        key_tok = self._expect_name_token()
        self._expect(TokenType.EQUALS)
        value = self._parse_literal()
        if not self._allow_duplicates and annotation.has(key_tok.value):
            raise DuplicateParameterError(key_tok.value, key_tok.line, key_tok.column)
        annotation.set(key_tok.value, value)

    # ------------------------------------------------------------------
    # Literals
    # ------------------------------------------------------------------

    def _parse_literal(self) -> Value:
        """Parse one literal, trying each literal kind in turn."""
        tok = self._expect(
            TokenType.STRING,
            TokenType.RAW_STRING,
            TokenType.INTEGER,
            TokenType.FLOAT,
            TokenType.TRUE,
            TokenType.FALSE,
        )
        if tok.type in (TokenType.STRING, TokenType.RAW_STRING):
            return StringValue(value=tok.value)
        if tok.type == TokenType.INTEGER:
            try:
                number = int(tok.value)
            except ValueError:
                raise ParseError("Integer literal too large", tok.line, tok.column) from None
            return IntValue(value=number)
        if tok.type == TokenType.FLOAT:
            return FloatValue(value=float(tok.value))
        return BoolValue(value=tok.type == TokenType.TRUE)


def _describe(tok: Token) -> str:
    """Return a readable description of a token for error messages."""
    if tok.type == TokenType.EOF:
        return "end of input"
    return repr(tok.value)
