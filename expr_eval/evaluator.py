"""
Precedence-climbing evaluator for integer arithmetic expressions.

The evaluator pulls tokens from a Tokenizer with one token of lookahead and
computes the value while it parses; no syntax tree is built. Operator
precedence is passed down the recursion as a minimum threshold, and
associativity decides whether that threshold is raised before the right-hand
operand is evaluated.
"""

from .config import Settings, get_settings
from .errors import ParseError
from .logging import get_logger
from .operators import OPERATORS, is_binary_operator
from .tokenizer import Token, TokenType, Tokenizer

logger = get_logger(__name__)


class Evaluator:
    """
    Evaluates a single expression.

    An Evaluator owns its tokenizer and cursor; it is used once and then
    discarded. Build a new one to evaluate the same source again.
    """

    def __init__(self, source: str, settings: Settings | None = None):
        """
        Initialize the evaluator.

        Args:
            source: The expression text
            settings: Evaluator settings (defaults to get_settings())
        """
        self.source = source
        self.settings = settings or get_settings()
        self.tokenizer = Tokenizer(source, int_bits=self.settings.int_bits)
        self._lookahead: Token | None = None
        self._peeked = False

    def peek(self) -> Token | None:
        """Return the next token without consuming it, or None at end of stream."""
        if not self._peeked:
            self._lookahead = next(self.tokenizer, None)
            self._peeked = True
        return self._lookahead

    def advance(self) -> Token | None:
        """Consume and return the next token."""
        token = self.peek()
        self._peeked = False
        self._lookahead = None
        return token

    def evaluate(self) -> int:
        """
        Evaluate the whole expression.

        Returns:
            The integer value

        Raises:
            ParseError: If the expression is malformed or has trailing input
            EvaluationError: If an operator fails (division by zero, overflow, ...)
        """
        result = self.compute_expr(1)

        trailing = self.peek()
        if trailing is not None:
            raise ParseError("Unexpected end of expr", {"token": str(trailing)})
        if self.settings.strict and self.tokenizer.remainder:
            raise ParseError("Unexpected end of expr", {"remainder": self.tokenizer.remainder})

        logger.debug("Evaluated %r = %d", self.source, result)
        return result

    def compute_atom(self) -> int:
        """
        Compute a number literal or a parenthesized sub-expression.

        Returns:
            The atom's value
        """
        token = self.peek()

        if token is not None and token.type == TokenType.NUMBER:
            self.advance()
            return token.value

        if token is not None and token.type == TokenType.LPAREN:
            self.advance()
            result = self.compute_expr(1)
            closing = self.advance()
            if closing is None or closing.type != TokenType.RPAREN:
                raise ParseError(
                    "Unexpected character",
                    {"expected": ")", "found": str(closing) if closing else None},
                )
            return result

        raise ParseError(
            "Expecting a number or left parenthesis",
            {"found": str(token) if token else None},
        )

    def compute_expr(self, min_precedence: int) -> int:
        """
        Compute an expression using precedence climbing.

        Args:
            min_precedence: Lowest operator precedence this call may consume

        Returns:
            The accumulated value
        """
        lhs = self.compute_atom()

        while True:
            token = self.peek()
            if token is None:
                break

            if not is_binary_operator(token.type):
                break

            operator = OPERATORS[token.type]
            if operator.precedence < min_precedence:
                break

            self.advance()
            rhs = self.compute_expr(operator.next_min_precedence())

            result = operator.apply(lhs, rhs, self.settings.int_bits)
            if result is None:
                raise ParseError("Unexpected expr", {"operator": operator.symbol})
            lhs = result

        return lhs


def evaluate(source: str, settings: Settings | None = None) -> int:
    """
    Evaluate an arithmetic expression.

    Args:
        source: The expression, e.g. "2 + 3 * 4"
        settings: Evaluator settings (defaults to get_settings())

    Returns:
        The integer result

    Raises:
        ExprError: If the expression cannot be evaluated

    Examples:
        >>> evaluate("2 ^ 3 ^ 2")
        512

        >>> evaluate("10 - 3 - 2")
        5
    """
    return Evaluator(source, settings).evaluate()
