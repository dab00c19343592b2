"""Exceptions raised while parsing operands or computing a result."""
from simple_calculator.common.models import ErrorKind


class CalculatorError(ValueError):
    """Base class for errors that are reported to the caller as an Outcome."""

    kind: ErrorKind

    def __init__(self, message: str, kind: ErrorKind) -> None:
        super().__init__(message)
        self.kind = kind


class InvalidInputError(CalculatorError):
    """One or both operands could not be parsed as a number."""

    def __init__(self, message: str = "Invalid operand") -> None:
        super().__init__(message, ErrorKind.INVALID_INPUT)


class DivisionByZeroError(CalculatorError):
    """Divide was requested with a zero divisor."""

    def __init__(self, message: str = "Division by zero") -> None:
        super().__init__(message, ErrorKind.DIVISION_BY_ZERO)
