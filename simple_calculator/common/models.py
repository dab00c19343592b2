"""Pydantic models for evaluation requests and their outcomes."""
from enum import Enum
import math
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from simple_calculator.common.operations import Operation


class ErrorKind(str, Enum):
    """The only two ways an evaluation can fail."""

    INVALID_INPUT = "invalid_input"
    DIVISION_BY_ZERO = "division_by_zero"


class EvaluationRequest(BaseModel):
    """Represents a single request to evaluate two operands with an operation."""

    model_config = ConfigDict(frozen=True)

    operand1: float = Field(..., description="First operand")
    operand2: float = Field(..., description="Second operand")
    operation: Operation = Field(..., description="Operation to apply")

    @field_validator("operand1", "operand2")
    def operand_must_be_finite(cls, v: float) -> float:
        """Ensure that operands are finite real numbers."""
        if not math.isfinite(v):
            raise ValueError("Operand must be a finite number")
        return v


class Outcome(BaseModel):
    """
    Tagged result of an evaluation: either a numeric value or an error kind.

    Exactly one of ``value`` and ``error`` is set.
    """

    model_config = ConfigDict(frozen=True)

    value: Optional[float] = Field(default=None, description="Numeric result of the evaluation")
    error: Optional[ErrorKind] = Field(default=None, description="Error kind if the evaluation failed")

    @model_validator(mode="after")
    def exactly_one_of_value_or_error(self) -> "Outcome":
        """Ensure an outcome is never both a result and an error, nor neither."""
        if (self.value is None) == (self.error is None):
            raise ValueError("Outcome must hold exactly one of value or error")
        return self

    @classmethod
    def success(cls, value: float) -> "Outcome":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind) -> "Outcome":
        return cls(error=kind)

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @property
    def is_division_by_zero(self) -> bool:
        return self.error is ErrorKind.DIVISION_BY_ZERO
