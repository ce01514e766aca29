"""
Tokenizer for integer arithmetic expressions.

Tokens are produced lazily: the tokenizer is an iterator that scans one token
per call to next(), so the evaluator pulls tokens only as it needs them.

Scanning stops at the first character that cannot start a token. The text
left over at that point is available as Tokenizer.remainder so the caller can
decide whether trailing garbage is an error.
"""

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator

from .errors import IntegerOverflowError
from .logging import get_logger

logger = get_logger(__name__)


class TokenType(Enum):
    """Token types for arithmetic expressions."""

    # Literals
    NUMBER = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    MULTIPLY = auto()
    DIVIDE = auto()
    POWER = auto()

    # Grouping
    LPAREN = auto()  # (
    RPAREN = auto()  # )


SYMBOLS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "^": TokenType.POWER,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}


@dataclass(frozen=True)
class Token:
    """
    A single lexical token.

    Attributes:
        type: The token type
        value: The integer payload for NUMBER tokens, None otherwise
    """

    type: TokenType
    value: int | None = None

    @classmethod
    def number(cls, value: int) -> "Token":
        return cls(TokenType.NUMBER, value)

    def __str__(self) -> str:
        if self.type == TokenType.NUMBER:
            return str(self.value)
        for symbol, token_type in SYMBOLS.items():
            if token_type == self.type:
                return symbol
        return self.type.name

    def __repr__(self) -> str:
        if self.type == TokenType.NUMBER:
            return f"Token({self.type.name}, {self.value})"
        return f"Token({self.type.name})"


class Tokenizer:
    """
    Lazily tokenizes an arithmetic expression.

    The tokenizer handles:
    - Non-negative integer literals (a maximal run of ASCII digits)
    - The operators + - * / ^
    - Parentheses

    Whitespace between tokens is skipped. Any other character ends the token
    stream; it is not consumed.
    """

    # Regex patterns for token matching
    PATTERNS = {
        "WHITESPACE": r"\s+",
        "NUMBER": r"[0-9]+",
        "SYMBOL": r"[-+*/^()]",
    }

    _pattern = re.compile("|".join(f"(?P<{name}>{p})" for name, p in PATTERNS.items()))

    def __init__(self, source: str, int_bits: int | None = None):
        """
        Initialize the tokenizer over a source string.

        Args:
            source: The expression text
            int_bits: Width of the signed integer type literals must fit,
                      or None for unbounded literals
        """
        self.source = source
        self.int_bits = int_bits
        self.pos = 0
        self._done = False

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        if self._done:
            raise StopIteration

        while True:
            match = self._pattern.match(self.source, self.pos)
            if match is None:
                # End of input or an unrecognised character
                self._done = True
                if self.pos < len(self.source):
                    logger.debug(
                        "Tokenizer halted at position %d: %r", self.pos, self.source[self.pos]
                    )
                raise StopIteration

            self.pos = match.end()
            kind = match.lastgroup
            text = match.group()

            if kind == "WHITESPACE":
                continue
            if kind == "NUMBER":
                return Token.number(self._parse_number(text))
            return Token(SYMBOLS[text])

    @property
    def remainder(self) -> str:
        """Unconsumed source text, ignoring surrounding whitespace."""
        return self.source[self.pos:].strip()

    def _parse_number(self, text: str) -> int:
        # Leading zeros never change the value; drop them before any length check
        digits = text.lstrip("0") or "0"
        if self.int_bits is not None:
            max_digits = len(str(1 << (self.int_bits - 1)))
            if len(digits) > max_digits:
                raise IntegerOverflowError(self.int_bits, literal=text)

        try:
            value = int(digits)
        except ValueError:
            # int() refuses digit strings past sys.get_int_max_str_digits()
            raise IntegerOverflowError(self.int_bits, literal=text) from None

        if self.int_bits is not None and value >= 1 << (self.int_bits - 1):
            raise IntegerOverflowError(self.int_bits, literal=text)
        return value


def tokenize(source: str, int_bits: int | None = None) -> Tokenizer:
    """
    Tokenize an expression.

    Args:
        source: The expression to tokenize
        int_bits: Integer width for literal range checks (None = unbounded)

    Returns:
        A lazy iterator of tokens
    """
    return Tokenizer(source, int_bits=int_bits)
