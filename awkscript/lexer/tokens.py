"""
Token definitions for the AWKScript lexer.

This module defines everything a token can be classified as:
- Token kinds (generic classes, keywords, assignment/comparison operators)
- Operation tags with their precedence/arity metadata
- The keyword, one-character and two-character lookup tables

The tables are built once at import time and exposed read-only, so any
number of independent lexing runs can share them.
"""

from enum import Enum, auto
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional


class TokenType(Enum):
    """
    Enumeration of all token kinds produced by the lexer.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Generic classes
    # ========================================================================
    WORD = auto()                   # identifiers: x, count_2
    NUMBER = auto()                 # 42, 3.14
    SEPARATOR = auto()              # newline or ;
    STRING_LITERAL = auto()         # "text"
    PATTERN = auto()                # `regex`
    TWO_CHAR_SYMBOL = auto()        # >=, ++, && ...
    ONE_CHAR_SYMBOL = auto()        # {, (, + ...

    # ========================================================================
    # Keywords
    # ========================================================================
    WHILE = auto()
    IF = auto()
    DO = auto()
    FOR = auto()
    BREAK = auto()
    CONTINUE = auto()
    ELSE = auto()
    RETURN = auto()
    BEGIN = auto()
    END = auto()
    PRINT = auto()
    PRINTF = auto()
    NEXT = auto()
    IN = auto()
    DELETE = auto()
    GETLINE = auto()
    EXIT = auto()
    NEXTFILE = auto()
    FUNCTION = auto()

    # ========================================================================
    # Assignment and comparison operators
    # ========================================================================
    POSTINC = auto()                # x++
    POSTDEC = auto()                # x--
    PREINC = auto()                 # ++x
    PREDEC = auto()                 # --x
    EXPONENT_ASSIGN = auto()        # ^=
    MODULO_ASSIGN = auto()          # %=
    MULTIPLY_ASSIGN = auto()        # *=
    DIVIDE_ASSIGN = auto()          # /=
    ADD_ASSIGN = auto()             # +=
    SUBTRACT_ASSIGN = auto()        # -=
    NOTMATCH = auto()               # !~
    AND = auto()                    # &&
    OR = auto()                     # ||
    CONDITIONAL = auto()            # ?:
    ASSIGN = auto()                 # =

    # Short spellings, kept as aliases so both names compare equal
    EXP_ASSIGN = EXPONENT_ASSIGN
    MOD_ASSIGN = MODULO_ASSIGN
    MUL_ASSIGN = MULTIPLY_ASSIGN
    DIV_ASSIGN = DIVIDE_ASSIGN
    SUB_ASSIGN = SUBTRACT_ASSIGN


class Operation(Enum):
    """Operation tags recognized by the operator disambiguation layer."""

    EXPONENT = auto()
    MULTIPLY = auto()
    DIVIDE = auto()
    MODULO = auto()
    ADD = auto()
    SUBTRACT = auto()
    CONCATENATION = auto()
    LT = auto()
    LE = auto()
    GT = auto()
    GE = auto()
    EQ = auto()
    NE = auto()
    AND = auto()
    OR = auto()
    NOT = auto()
    MATCH = auto()
    NOTMATCH = auto()
    DOLLAR = auto()
    PREINC = auto()
    POSTINC = auto()
    PREDEC = auto()
    POSTDEC = auto()
    UNARYPOS = auto()
    UNARYNEG = auto()
    IN = auto()
    EXPONENT_ASSIGN = auto()
    MODULO_ASSIGN = auto()
    MULTIPLY_ASSIGN = auto()
    DIVIDE_ASSIGN = auto()
    ADD_ASSIGN = auto()
    SUBTRACT_ASSIGN = auto()
    CONDITIONAL = auto()
    ASSIGN = auto()


@dataclass(frozen=True)
class OperationInfo:
    """Static metadata attached to an operation tag."""
    symbol: str          # Source spelling ("" for concatenation)
    precedence: int      # Higher binds tighter (AWK grammar levels)
    arity: int
    right_assoc: bool = False


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source text.

    Lines are 1-based, columns are 0-based, offset is the index into the
    source string.
    """
    filename: str
    line: int
    column: int
    offset: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token.

    `text` holds the lexeme: literals have their delimiters stripped and
    escapes resolved, everything else keeps its raw spelling. `operation`
    is only set for tokens produced by the operator disambiguation layer.
    """
    type: TokenType
    text: str
    location: SourceLocation
    operation: Optional[Operation] = None

    @property
    def line(self) -> int:
        return self.location.line

    @property
    def column(self) -> int:
        return self.location.column

    def __str__(self) -> str:
        return f"{self.type.name}({self.text}) at line {self.line}, position {self.column}"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.text!r}, {self.location!r})"

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return self.type in _KEYWORD_TYPES

    @property
    def is_literal(self) -> bool:
        """Check if this token is a number, string or pattern literal."""
        return self.type in {TokenType.NUMBER, TokenType.STRING_LITERAL, TokenType.PATTERN}

    @property
    def is_symbol(self) -> bool:
        return self.type in {TokenType.ONE_CHAR_SYMBOL, TokenType.TWO_CHAR_SYMBOL}


# Lookup tables for keyword/symbol recognition. Built once, never mutated.

KEYWORDS: Mapping[str, TokenType] = MappingProxyType({
    "while": TokenType.WHILE,
    "if": TokenType.IF,
    "do": TokenType.DO,
    "for": TokenType.FOR,
    "break": TokenType.BREAK,
    "continue": TokenType.CONTINUE,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
    "BEGIN": TokenType.BEGIN,
    "END": TokenType.END,
    "print": TokenType.PRINT,
    "printf": TokenType.PRINTF,
    "next": TokenType.NEXT,
    "in": TokenType.IN,
    "delete": TokenType.DELETE,
    "getline": TokenType.GETLINE,
    "exit": TokenType.EXIT,
    "nextfile": TokenType.NEXTFILE,
    "function": TokenType.FUNCTION,
})

_KEYWORD_TYPES = frozenset(KEYWORDS.values())

TWO_CHAR_SYMBOLS: Mapping[str, TokenType] = MappingProxyType({
    # Comparison
    ">=": TokenType.TWO_CHAR_SYMBOL,
    "<=": TokenType.TWO_CHAR_SYMBOL,
    "==": TokenType.TWO_CHAR_SYMBOL,
    "!=": TokenType.TWO_CHAR_SYMBOL,

    # Increment / decrement
    "++": TokenType.TWO_CHAR_SYMBOL,
    "--": TokenType.TWO_CHAR_SYMBOL,

    # Compound assignment
    "^=": TokenType.TWO_CHAR_SYMBOL,
    "%=": TokenType.TWO_CHAR_SYMBOL,
    "*=": TokenType.TWO_CHAR_SYMBOL,
    "/=": TokenType.TWO_CHAR_SYMBOL,
    "+=": TokenType.TWO_CHAR_SYMBOL,
    "-=": TokenType.TWO_CHAR_SYMBOL,

    # Matching, logical, redirection
    "!~": TokenType.TWO_CHAR_SYMBOL,
    "&&": TokenType.TWO_CHAR_SYMBOL,
    "||": TokenType.TWO_CHAR_SYMBOL,
    ">>": TokenType.TWO_CHAR_SYMBOL,
})

ONE_CHAR_SYMBOLS: Mapping[str, TokenType] = MappingProxyType({
    # Grouping
    "{": TokenType.ONE_CHAR_SYMBOL,
    "}": TokenType.ONE_CHAR_SYMBOL,
    "[": TokenType.ONE_CHAR_SYMBOL,
    "]": TokenType.ONE_CHAR_SYMBOL,
    "(": TokenType.ONE_CHAR_SYMBOL,
    ")": TokenType.ONE_CHAR_SYMBOL,

    # Operators
    "$": TokenType.ONE_CHAR_SYMBOL,
    "~": TokenType.ONE_CHAR_SYMBOL,
    "=": TokenType.ONE_CHAR_SYMBOL,
    "<": TokenType.ONE_CHAR_SYMBOL,
    ">": TokenType.ONE_CHAR_SYMBOL,
    "!": TokenType.ONE_CHAR_SYMBOL,
    "+": TokenType.ONE_CHAR_SYMBOL,
    "^": TokenType.ONE_CHAR_SYMBOL,
    "-": TokenType.ONE_CHAR_SYMBOL,
    "?": TokenType.ONE_CHAR_SYMBOL,
    ":": TokenType.ONE_CHAR_SYMBOL,
    "*": TokenType.ONE_CHAR_SYMBOL,
    "/": TokenType.ONE_CHAR_SYMBOL,
    "%": TokenType.ONE_CHAR_SYMBOL,
    "|": TokenType.ONE_CHAR_SYMBOL,
    ",": TokenType.ONE_CHAR_SYMBOL,

    # Statement separator
    ";": TokenType.SEPARATOR,
})

# Precedence levels, lowest first:
#   0 assignment, 1 ?:, 2 ||, 3 &&, 4 in, 5 ~ !~, 6 relational,
#   7 concatenation, 8 additive, 9 multiplicative, 10 unary, 11 ^,
#   12 ++ --, 13 $
OPERATION_INFO: Mapping[Operation, OperationInfo] = MappingProxyType({
    Operation.EXPONENT: OperationInfo("^", 11, 2, right_assoc=True),
    Operation.MULTIPLY: OperationInfo("*", 9, 2),
    Operation.DIVIDE: OperationInfo("/", 9, 2),
    Operation.MODULO: OperationInfo("%", 9, 2),
    Operation.ADD: OperationInfo("+", 8, 2),
    Operation.SUBTRACT: OperationInfo("-", 8, 2),
    Operation.CONCATENATION: OperationInfo("", 7, 2),
    Operation.LT: OperationInfo("<", 6, 2),
    Operation.LE: OperationInfo("<=", 6, 2),
    Operation.GT: OperationInfo(">", 6, 2),
    Operation.GE: OperationInfo(">=", 6, 2),
    Operation.EQ: OperationInfo("==", 6, 2),
    Operation.NE: OperationInfo("!=", 6, 2),
    Operation.MATCH: OperationInfo("~", 5, 2),
    Operation.NOTMATCH: OperationInfo("!~", 5, 2),
    Operation.IN: OperationInfo("in", 4, 2),
    Operation.AND: OperationInfo("&&", 3, 2),
    Operation.OR: OperationInfo("||", 2, 2),
    Operation.CONDITIONAL: OperationInfo("?:", 1, 3, right_assoc=True),
    Operation.NOT: OperationInfo("!", 10, 1, right_assoc=True),
    Operation.UNARYPOS: OperationInfo("+", 10, 1, right_assoc=True),
    Operation.UNARYNEG: OperationInfo("-", 10, 1, right_assoc=True),
    Operation.PREINC: OperationInfo("++", 12, 1, right_assoc=True),
    Operation.PREDEC: OperationInfo("--", 12, 1, right_assoc=True),
    Operation.POSTINC: OperationInfo("++", 12, 1),
    Operation.POSTDEC: OperationInfo("--", 12, 1),
    Operation.DOLLAR: OperationInfo("$", 13, 1, right_assoc=True),
    Operation.ASSIGN: OperationInfo("=", 0, 2, right_assoc=True),
    Operation.EXPONENT_ASSIGN: OperationInfo("^=", 0, 2, right_assoc=True),
    Operation.MODULO_ASSIGN: OperationInfo("%=", 0, 2, right_assoc=True),
    Operation.MULTIPLY_ASSIGN: OperationInfo("*=", 0, 2, right_assoc=True),
    Operation.DIVIDE_ASSIGN: OperationInfo("/=", 0, 2, right_assoc=True),
    Operation.ADD_ASSIGN: OperationInfo("+=", 0, 2, right_assoc=True),
    Operation.SUBTRACT_ASSIGN: OperationInfo("-=", 0, 2, right_assoc=True),
})

_OPERATION_TOKEN_TYPES: Mapping[Operation, TokenType] = MappingProxyType({
    Operation.EXPONENT_ASSIGN: TokenType.EXPONENT_ASSIGN,
    Operation.MODULO_ASSIGN: TokenType.MODULO_ASSIGN,
    Operation.MULTIPLY_ASSIGN: TokenType.MULTIPLY_ASSIGN,
    Operation.DIVIDE_ASSIGN: TokenType.DIVIDE_ASSIGN,
    Operation.ADD_ASSIGN: TokenType.ADD_ASSIGN,
    Operation.SUBTRACT_ASSIGN: TokenType.SUBTRACT_ASSIGN,
    Operation.NOTMATCH: TokenType.NOTMATCH,
    Operation.AND: TokenType.AND,
    Operation.OR: TokenType.OR,
    Operation.CONDITIONAL: TokenType.CONDITIONAL,
    Operation.ASSIGN: TokenType.ASSIGN,
    Operation.POSTINC: TokenType.POSTINC,
    Operation.POSTDEC: TokenType.POSTDEC,
    Operation.PREINC: TokenType.PREINC,
    Operation.PREDEC: TokenType.PREDEC,
})


def operation_info(operation: Operation) -> OperationInfo:
    """Return the metadata registered for an operation tag."""
    return OPERATION_INFO[operation]


def token_type_for_operation(operation: Operation) -> Optional[TokenType]:
    """
    Map an operation tag to its dedicated token kind.

    Returns None for operations that have no token kind of their own
    (plain arithmetic, comparisons, unary operators, ...).
    """
    return _OPERATION_TOKEN_TYPES.get(operation)
