"""
Error handling for the AWKScript lexer.

Lexical errors are fatal: the first one aborts the run. Warnings are
collected on the lexer and never stop it. Both are described by the same
Diagnostic record, rendered as

    error[L001] prog.awk:3:7: Unrecognized character: '@'
      = help: ...
"""

from dataclasses import dataclass
from typing import ClassVar, Iterable, Optional, Tuple

from .tokens import SourceLocation, ONE_CHAR_SYMBOLS, TWO_CHAR_SYMBOLS

# Error codes for categorization
ERROR_CODES = {
    "L001": "Unrecognized character",
    "L002": "Unterminated literal",
    "L003": "Suspicious numeric literal",
}


@dataclass(frozen=True)
class Diagnostic:
    """A located message with an error code and an optional hint."""
    message: str
    location: SourceLocation
    code: str
    help_text: Optional[str] = None
    suggestions: Tuple[str, ...] = ()

    severity: ClassVar[str] = "error"

    @property
    def line(self) -> int:
        return self.location.line

    @property
    def column(self) -> int:
        return self.location.column

    def __str__(self) -> str:
        text = f"{self.severity}[{self.code}] {self.location}: {self.message}\n"
        if self.help_text:
            text += f"  = help: {self.help_text}\n"
        return text


class LexerWarning(Diagnostic):
    """Non-fatal diagnostic recorded on Lexer.warnings."""
    severity = "warning"


class LexerError(Exception):
    """Fatal lexical error, described by its diagnostic."""

    def __init__(self, diagnostic: Diagnostic):
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic

    location = property(lambda self: self.diagnostic.location)
    line = property(lambda self: self.diagnostic.line)
    column = property(lambda self: self.diagnostic.column)
    code = property(lambda self: self.diagnostic.code)

    def __str__(self) -> str:
        return str(self.diagnostic)


class UnrecognizedCharacterError(LexerError):
    """No lexical rule matches the current character."""

    def __init__(self, char: str, location: SourceLocation,
                 help_text: Optional[str] = None, suggestions: Iterable[str] = ()):
        super().__init__(Diagnostic(
            f"Unrecognized character: {char!r}", location, "L001",
            help_text, tuple(suggestions)
        ))
        self.char = char


class UnterminatedLiteralError(LexerError):
    """A string or pattern literal ran into the end of input."""

    def __init__(self, delimiter: str, location: SourceLocation,
                 start: SourceLocation, help_text: Optional[str] = None):
        kind = "pattern" if delimiter == '`' else "string literal"
        super().__init__(Diagnostic(f"Unterminated {kind}", location, "L002", help_text))
        self.delimiter = delimiter
        self.start = start


def suggest_symbol_alternatives(char: str) -> Tuple[str, ...]:
    """Known symbols that start with `char`, two-character ones first."""
    candidates = [symbol for symbol in TWO_CHAR_SYMBOLS if symbol.startswith(char)]
    candidates += [symbol for symbol in ONE_CHAR_SYMBOLS if symbol == char]
    return tuple(sorted(candidates, key=lambda s: (-len(s), s)))


def create_unrecognized_character_error(char: str, location: SourceLocation) -> UnrecognizedCharacterError:
    suggestions = suggest_symbol_alternatives(char)

    if suggestions:
        help_text = f"did you mean {' or '.join(suggestions)}?"
    elif char.isprintable():
        help_text = f"{char!r} cannot appear outside a string, pattern or comment"
    else:
        help_text = f"non-printable character U+{ord(char):04X}"

    return UnrecognizedCharacterError(char, location, help_text, suggestions)


def create_unterminated_literal_error(
    delimiter: str, location: SourceLocation, start: SourceLocation
) -> UnterminatedLiteralError:
    return UnterminatedLiteralError(
        delimiter, location, start,
        help_text=(f"literal opened at line {start.line}, column {start.column} "
                   f"needs a closing {delimiter}")
    )


def create_number_warning(lexeme: str, location: SourceLocation) -> LexerWarning:
    """Warn about a number lexeme with more than one decimal point."""
    return LexerWarning(
        f"Numeric literal {lexeme!r} contains {lexeme.count('.')} decimal points",
        location, "L003",
        help_text="kept as a single NUMBER token"
    )
