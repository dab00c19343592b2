"""Test classes EvaluationRequest and Outcome."""
from pydantic import ValidationError
import pytest

from simple_calculator.common.models import ErrorKind, EvaluationRequest, Outcome
from simple_calculator.common.operations import Operation


def test_evaluation_request_valid() -> None:
    """Test that a valid EvaluationRequest can be created."""
    req = EvaluationRequest(operand1=3, operand2=4.5, operation=Operation.ADD)
    assert req.operand1 == 3.0
    assert isinstance(req.operand1, float)
    assert req.operation is Operation.ADD


def test_evaluation_request_operation_from_symbol() -> None:
    """Operations can be given by their symbol value."""
    req = EvaluationRequest(operand1=1, operand2=2, operation="x")
    assert req.operation is Operation.MULTIPLY


@pytest.mark.parametrize("operand", [float("inf"), float("-inf"), float("nan")])
def test_evaluation_request_rejects_non_finite(operand) -> None:
    """Test that non-finite operands raise a validation error."""
    with pytest.raises(ValidationError):
        EvaluationRequest(operand1=operand, operand2=1.0, operation=Operation.ADD)


def test_evaluation_request_invalid_operation() -> None:
    """Test that an unknown operation raises a validation error."""
    with pytest.raises(ValidationError):
        EvaluationRequest(operand1=1.0, operand2=1.0, operation="%")


def test_outcome_success() -> None:
    """A successful outcome holds a value and no error."""
    outcome = Outcome.success(7.0)
    assert outcome.value == 7.0
    assert outcome.error is None
    assert not outcome.is_error
    assert not outcome.is_division_by_zero


def test_outcome_failure() -> None:
    """A failed outcome holds an error kind and no value."""
    outcome = Outcome.failure(ErrorKind.DIVISION_BY_ZERO)
    assert outcome.value is None
    assert outcome.is_error
    assert outcome.is_division_by_zero


def test_outcome_cannot_be_both() -> None:
    """An outcome is never both a result and an error."""
    with pytest.raises(ValidationError):
        Outcome(value=1.0, error=ErrorKind.INVALID_INPUT)


def test_outcome_cannot_be_empty() -> None:
    """An outcome must hold either a result or an error."""
    with pytest.raises(ValidationError):
        Outcome()


def test_outcome_is_frozen() -> None:
    """Outcomes cannot be modified once created."""
    outcome = Outcome.success(1.0)
    with pytest.raises(ValidationError):
        outcome.value = 2.0
