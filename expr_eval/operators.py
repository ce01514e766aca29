"""
Static operator metadata for the evaluator.

Each binary operator token maps to an OperatorConfig giving its precedence
(higher binds tighter), its associativity and the rule that combines two
integer operands. The table is closed: a token is a binary operator exactly
when its type appears in OPERATORS.

All rules use checked integer arithmetic. When a bit width is given, any
result outside the signed range of that width raises IntegerOverflowError.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from .errors import DivisionByZeroError, IntegerOverflowError, NegativeExponentError
from .tokenizer import TokenType


class Associativity(Enum):
    """Operator associativity."""

    LEFT = "left"
    RIGHT = "right"


ComputeRule = Callable[[int, int, Optional[int]], Optional[int]]


def int_bounds(bits: int) -> tuple[int, int]:
    """Return the (min, max) of a signed integer with the given width."""
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def check_range(value: int, bits: int | None) -> int:
    """
    Ensure value fits a signed integer of the given width.

    Args:
        value: The computed value
        bits: Integer width, or None for unbounded integers

    Returns:
        The value unchanged

    Raises:
        IntegerOverflowError: If the value is out of range
    """
    if bits is None:
        return value
    low, high = int_bounds(bits)
    if value < low or value > high:
        raise IntegerOverflowError(bits)
    return value


def _add(left: int, right: int, bits: int | None) -> int:
    return check_range(left + right, bits)


def _subtract(left: int, right: int, bits: int | None) -> int:
    return check_range(left - right, bits)


def _multiply(left: int, right: int, bits: int | None) -> int:
    return check_range(left * right, bits)


def _divide(left: int, right: int, bits: int | None) -> int:
    # Python's // floors; integer division here truncates toward zero
    if right == 0:
        raise DivisionByZeroError(left)
    quotient = abs(left) // abs(right)
    if (left < 0) != (right < 0):
        quotient = -quotient
    return check_range(quotient, bits)


def _power(base: int, exponent: int, bits: int | None) -> int:
    """
    Integer exponentiation by repeated squaring.

    Each partial product is range-checked, so an overflowing power fails
    without materialising the full result.
    """
    if exponent < 0:
        raise NegativeExponentError(base, exponent)

    result = 1
    while exponent:
        if exponent & 1:
            result = check_range(result * base, bits)
        exponent >>= 1
        if exponent:
            base = check_range(base * base, bits)
    return result


@dataclass(frozen=True)
class OperatorConfig:
    """Configuration for a binary operator."""

    symbol: str
    precedence: int
    associativity: Associativity
    compute: ComputeRule

    def next_min_precedence(self) -> int:
        """
        Minimum precedence for the right-hand operand.

        Left-associative operators raise the threshold so that an operator of
        equal precedence ends the right-hand side; right-associative operators
        keep it so that the right-hand side absorbs it.
        """
        if self.associativity == Associativity.LEFT:
            return self.precedence + 1
        return self.precedence

    def apply(self, left: int, right: int, bits: int | None = None) -> Optional[int]:
        """Combine two operands with this operator's rule."""
        return self.compute(left, right, bits)


OPERATORS: dict[TokenType, OperatorConfig] = {
    TokenType.PLUS: OperatorConfig("+", 1, Associativity.LEFT, _add),
    TokenType.MINUS: OperatorConfig("-", 1, Associativity.LEFT, _subtract),
    TokenType.MULTIPLY: OperatorConfig("*", 2, Associativity.LEFT, _multiply),
    TokenType.DIVIDE: OperatorConfig("/", 2, Associativity.LEFT, _divide),
    TokenType.POWER: OperatorConfig("^", 3, Associativity.RIGHT, _power),
}


def is_binary_operator(token_type: TokenType) -> bool:
    return token_type in OPERATORS
