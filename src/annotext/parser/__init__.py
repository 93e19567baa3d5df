# Copyright 2026 Annotext Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexer and parser for annotation expressions."""

from annotext.parser.lexer import AnnotationSyntaxError, LexerError
from annotext.parser.parser import DuplicateParameterError, NotAnAnnotationError, ParseError, parse

__all__ = [
    "parse",
    "AnnotationSyntaxError",
    "LexerError",
    "ParseError",
    "NotAnAnnotationError",
    "DuplicateParameterError",
]
