"""
AWKScript Lexer Package

Implements the lexical analyzer (tokenizer) for the AWKScript language.

Key Features:
- Keyword, one-character and two-character symbol lookup tables
- String and backtick pattern literals with backslash escaping
- Operator disambiguation for symbols a flat table cannot classify
- Line/column tracking on every token and diagnostic
- Abort-on-first-error diagnostics with error codes and hints
"""

from .tokens import (
    Token, TokenType, Operation, OperationInfo, SourceLocation,
    KEYWORDS, ONE_CHAR_SYMBOLS, TWO_CHAR_SYMBOLS,
    operation_info, token_type_for_operation,
)
from .cursor import Cursor, EOF_CHAR
from .lexer import Lexer, tokenize_string, tokenize_file
from .errors import (
    Diagnostic, LexerError, LexerWarning,
    UnrecognizedCharacterError, UnterminatedLiteralError,
)

__all__ = [
    "Lexer",
    "Cursor",
    "EOF_CHAR",
    "Token",
    "TokenType",
    "Operation",
    "OperationInfo",
    "SourceLocation",
    "KEYWORDS",
    "ONE_CHAR_SYMBOLS",
    "TWO_CHAR_SYMBOLS",
    "operation_info",
    "token_type_for_operation",
    "tokenize_string",
    "tokenize_file",
    "Diagnostic",
    "LexerError",
    "LexerWarning",
    "UnrecognizedCharacterError",
    "UnterminatedLiteralError",
]
