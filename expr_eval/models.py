"""
Result models for reporting an evaluation outcome.
"""

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from .config import Settings
from .errors import ExprError
from .evaluator import evaluate


class ErrorInfo(BaseModel):
    """Description of a failed evaluation"""
    type: str = Field(..., description="Exception class name")
    message: str
    details: dict = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, error: ExprError) -> "ErrorInfo":
        return cls(type=error.__class__.__name__, message=error.message, details=error.details)


class EvaluationResult(BaseModel):
    """Outcome of evaluating one expression: either a value or an error"""
    expression: str
    value: Optional[int] = None
    error: Optional[ErrorInfo] = None

    @model_validator(mode="after")
    def check_exclusive(self) -> "EvaluationResult":
        """Exactly one of value and error is set"""
        if (self.value is None) == (self.error is None):
            raise ValueError("EvaluationResult needs exactly one of value or error")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def from_source(cls, source: str, settings: Optional[Settings] = None) -> "EvaluationResult":
        """Evaluate source and capture the value or the ExprError raised."""
        try:
            return cls(expression=source, value=evaluate(source, settings))
        except ExprError as e:
            return cls(expression=source, error=ErrorInfo.from_exception(e))
