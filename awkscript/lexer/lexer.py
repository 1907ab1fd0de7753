"""
AWKScript Lexer - turns script source into classified tokens.

The lexer drives a Cursor over the source and dispatches on the next
character to a specialized scanner. Scanning stops at the first lexical
error; there is no recovery.
"""

import logging
from typing import Iterator, List, Optional

from .cursor import Cursor
from .tokens import (
    Token, TokenType, Operation, SourceLocation,
    KEYWORDS, ONE_CHAR_SYMBOLS, TWO_CHAR_SYMBOLS
)
from .errors import (
    LexerWarning, create_unrecognized_character_error,
    create_unterminated_literal_error, create_number_warning
)

log = logging.getLogger(__name__)

WHITESPACE = ' \t\r'
DIGITS = '0123456789'
COMMENT_START = '#'
STRING_DELIMITER = '"'
PATTERN_DELIMITER = '`'
ESCAPE = '\\'

# Operators whose classification needs more than a flat table lookup.
# Keyed by leading character; each rule is (required next char, tag),
# where a next char of None means the leading character alone matches.
# Tried in order, after the two-character table has missed.
OPERATION_RULES = {
    '^': ((None, Operation.EXPONENT),),
    '*': (('=', Operation.MULTIPLY_ASSIGN),),
    '/': ((None, Operation.DIVIDE),),
    '%': (('=', Operation.MODULO_ASSIGN),),
    '+': (('=', Operation.ADD_ASSIGN), ('+', Operation.POSTINC)),
    '-': (('=', Operation.SUBTRACT_ASSIGN), ('-', Operation.POSTDEC)),
    '!': (('~', Operation.NOTMATCH), (None, Operation.NOT)),
    'i': (('n', Operation.IN),),
}


def is_digit(char: str) -> bool:
    """ASCII decimal digit. Superscripts and other numeric forms are not digits."""
    return char != '' and char in DIGITS


def is_word_char(char: str) -> bool:
    return char.isalpha() or is_digit(char) or char == '_'


class Lexer:
    """
    AWKScript lexical analyzer.

    Converts source text into an ordered list of tokens. Every token and
    every error carries a 1-based line and a 0-based column.
    """

    def __init__(self, source: str, filename: str = "<unknown>"):
        """
        Initialize the lexer with source text.

        Args:
            source: Complete, already decoded source text
            filename: Name of source file for error reporting
        """
        self.source = source
        self.filename = filename
        self.warnings: List[LexerWarning] = []

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source.

        Returns:
            List of tokens in source order

        Raises:
            UnrecognizedCharacterError: No rule matches a character
            UnterminatedLiteralError: A literal reaches end of input
        """
        return list(self.iter_tokens())

    def iter_tokens(self) -> Iterator[Token]:
        """
        Yield tokens one at a time.

        Each call scans from the beginning with its own cursor, so several
        iterators over the same lexer do not interfere. `warnings` holds
        the list of the most recently started run.
        """
        scanner = _Scanner(self.source, self.filename)
        self.warnings = scanner.warnings
        log.debug("Lexing %s (%d characters)", self.filename, len(self.source))

        count = 0
        for token in scanner.scan():
            count += 1
            yield token

        log.debug("Lexed %s: %d tokens, %d warnings", self.filename, count, len(scanner.warnings))

    def has_warnings(self) -> bool:
        """Check if the last run recorded any warnings."""
        return len(self.warnings) > 0


class _Scanner:
    """State of a single lexing run: cursor, line/column, warnings."""

    def __init__(self, source: str, filename: str):
        self.source = source
        self.filename = filename
        self.cursor = Cursor(source)
        self.line = 1
        self.column = 0
        self.warnings: List[LexerWarning] = []

    def scan(self) -> Iterator[Token]:
        cursor = self.cursor
        while not cursor.is_at_end():
            char = cursor.peek()

            if char in WHITESPACE:
                cursor.skip(1)
                self.column += 1
                continue

            if char == '\n':
                token = Token(TokenType.SEPARATOR, "", self._location())
                self._advance()
            elif char == COMMENT_START:
                self._skip_comment()
                continue
            elif char.isalpha():
                token = self._scan_word()
            elif is_digit(char):
                token = self._scan_number()
            elif char == STRING_DELIMITER:
                token = self._scan_literal(STRING_DELIMITER, TokenType.STRING_LITERAL)
            elif char == PATTERN_DELIMITER:
                token = self._scan_literal(PATTERN_DELIMITER, TokenType.PATTERN)
            else:
                token = self._scan_symbol()

            yield token

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.cursor.position)

    def _advance(self, visible: bool = True) -> str:
        """
        Consume one character, keeping line/column in step.

        An invisible character (the second half of an escape pair) moves
        the line on a newline but never the column.
        """
        char = self.cursor.consume()
        if char == '\n':
            self.line += 1
            self.column = 0
        elif visible:
            self.column += 1
        return char

    def _skip_comment(self):
        # Stop before the newline so it still produces a separator
        while not self.cursor.is_at_end() and self.cursor.peek() != '\n':
            self._advance()

    def _scan_word(self) -> Token:
        """Identifier or keyword: a letter followed by letters, digits, underscores."""
        location = self._location()
        start = self.cursor.position

        while not self.cursor.is_at_end() and is_word_char(self.cursor.peek()):
            self._advance()

        word = self.source[start:self.cursor.position]
        return Token(KEYWORDS.get(word, TokenType.WORD), word, location)

    def _scan_number(self) -> Token:
        """A run of digits and dots. No sign, exponent or dot-count check."""
        location = self._location()
        start = self.cursor.position

        while is_digit(self.cursor.peek()) or self.cursor.peek() == '.':
            self._advance()

        lexeme = self.source[start:self.cursor.position]
        if lexeme.count('.') > 1:
            warning = create_number_warning(lexeme, location)
            self.warnings.append(warning)
            log.warning("%s: %s", location, warning.message)

        return Token(TokenType.NUMBER, lexeme, location)

    def _scan_literal(self, delimiter: str, token_type: TokenType) -> Token:
        """
        Scan a delimited literal (string or pattern).

        A backslash drops itself and copies the next character verbatim,
        so the delimiter can be embedded. No other escapes are interpreted.
        The pair takes up one column.
        """
        start = self._location()
        self._advance()  # Opening delimiter

        chars = []
        while not self.cursor.is_at_end():
            char = self._advance()
            if char == delimiter:
                return Token(token_type, ''.join(chars), start)
            if char == ESCAPE:
                if self.cursor.is_at_end():
                    break
                chars.append(self._advance(visible=False))
            else:
                chars.append(char)

        raise create_unterminated_literal_error(delimiter, self._location(), start)

    def _scan_symbol(self) -> Token:
        """Two-character table, then operator rules, then one-character table."""
        location = self._location()

        pair = self.cursor.peek_string(2)
        if len(pair) == 2 and pair in TWO_CHAR_SYMBOLS:
            self._consume_symbol(2)
            return Token(TWO_CHAR_SYMBOLS[pair], pair, location)

        token = self._scan_operation(location)
        if token is not None:
            return token

        single = self.cursor.peek_string(1)
        if single in ONE_CHAR_SYMBOLS:
            self._consume_symbol(1)
            return Token(ONE_CHAR_SYMBOLS[single], single, location)

        raise create_unrecognized_character_error(single, location)

    def _scan_operation(self, location: SourceLocation) -> Optional[Token]:
        """
        Apply the per-character operator rules.

        Matches are reported as TWO_CHAR_SYMBOL even when only one
        character was consumed (`/`, `^`, `!`); the tag in `operation`
        tells them apart.
        """
        for follower, operation in OPERATION_RULES.get(self.cursor.peek(), ()):
            if follower is None:
                length = 1
            elif self.cursor.peek(1) == follower:
                length = 2
            else:
                continue

            text = self.cursor.peek_string(length)
            self._consume_symbol(length)
            return Token(TokenType.TWO_CHAR_SYMBOL, text, location, operation)

        return None

    def _consume_symbol(self, length: int):
        self.cursor.skip(length)
        self.column += length


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Raises:
        LexerError: If lexing fails
    """
    return Lexer(source, filename).tokenize()


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        LexerError: If lexing fails
        OSError: If the file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, filepath)
