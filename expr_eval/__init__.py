"""
expr_eval - integer arithmetic expression evaluator.

This package tokenizes an expression lazily and evaluates it in a single
pass with a precedence-climbing recursive-descent evaluator.
"""

from .errors import (
    DivisionByZeroError,
    EvaluationError,
    ExprError,
    IntegerOverflowError,
    NegativeExponentError,
    ParseError,
)
from .tokenizer import Token, TokenType, Tokenizer, tokenize
from .operators import OPERATORS, Associativity, OperatorConfig
from .evaluator import Evaluator, evaluate
from .config import Settings, get_settings

__version__ = "0.1.0"

__all__ = [
    "ExprError",
    "ParseError",
    "EvaluationError",
    "DivisionByZeroError",
    "NegativeExponentError",
    "IntegerOverflowError",
    "Token",
    "TokenType",
    "Tokenizer",
    "tokenize",
    "OPERATORS",
    "Associativity",
    "OperatorConfig",
    "Evaluator",
    "evaluate",
    "Settings",
    "get_settings",
]
