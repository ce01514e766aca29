"""
Exceptions raised while tokenizing and evaluating expressions.

Every failure derives from ExprError so callers can catch a single type.
"""

from typing import Any, Dict, Optional


class ExprError(Exception):
    """Base exception for expression errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ParseError(ExprError):
    """Raised when the token stream does not form a valid expression"""


class EvaluationError(ExprError):
    """Raised when an operator cannot produce a value"""


class DivisionByZeroError(EvaluationError):
    """Raised for division by zero"""

    def __init__(self, dividend: int):
        super().__init__(
            message="Division by zero",
            details={"dividend": dividend}
        )


class NegativeExponentError(EvaluationError):
    """Raised when an integer power has a negative exponent"""

    def __init__(self, base: int, exponent: int):
        super().__init__(
            message=f"Negative exponent {exponent} is not allowed in integer arithmetic",
            details={"base": base, "exponent": exponent}
        )


class IntegerOverflowError(EvaluationError):
    """Raised when a literal or a result does not fit the integer width"""

    def __init__(self, bits: Optional[int], literal: Optional[str] = None):
        if literal is not None and len(literal) > 20:
            literal = f"{literal[:20]}... ({len(literal)} digits)"

        if literal is None:
            message = f"Integer overflow: result does not fit in {bits} bits"
        elif bits is None:
            message = f"Integer literal {literal} is too long to convert"
        else:
            message = f"Integer literal {literal} does not fit in {bits} bits"

        details: Dict[str, Any] = {"bits": bits}
        if literal is not None:
            details["literal"] = literal
        super().__init__(message=message, details=details)
