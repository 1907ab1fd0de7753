"""
AWKScript Front End

Lexical analysis for AWKScript, an AWK-like scripting language.

Architecture:
    awkscript/
    ├── lexer/           # Tokenization and lexical analysis
    └── cli.py           # awklex command: print the tokens of a script

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, LexerError, tokenize_string, tokenize_file

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "LexerError",
    "tokenize_string",
    "tokenize_file",

    # Version info
    "__version__",
    "__license__",
]
