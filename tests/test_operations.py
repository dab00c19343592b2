"""Test the Operation registry."""
import pytest

from simple_calculator.common.operations import OPERATORS, Operation, symbol_of


@pytest.mark.parametrize("operation,symbol", [
    (Operation.ADD, "+"),
    (Operation.SUBTRACT, "-"),
    (Operation.MULTIPLY, "x"),
    (Operation.DIVIDE, "/"),
])
def test_symbol_of(operation, symbol) -> None:
    """symbol_of maps every operation to its display symbol."""
    assert symbol_of(operation) == symbol
    assert operation.symbol == symbol


def test_registry_is_closed() -> None:
    """Exactly four operations exist, each with a distinct symbol."""
    assert len(Operation) == 4
    assert len({op.symbol for op in Operation}) == 4


def test_every_operation_has_a_function() -> None:
    """The dispatch table covers all operations."""
    assert set(OPERATORS) == set(Operation)


@pytest.mark.parametrize("name,expected", [
    ("add", Operation.ADD),
    ("ADD", Operation.ADD),
    ("+", Operation.ADD),
    ("subtract", Operation.SUBTRACT),
    ("-", Operation.SUBTRACT),
    ("Multiply", Operation.MULTIPLY),
    ("x", Operation.MULTIPLY),
    ("X", Operation.MULTIPLY),
    ("*", Operation.MULTIPLY),
    ("divide", Operation.DIVIDE),
    (" / ", Operation.DIVIDE),
])
def test_from_name(name, expected) -> None:
    """from_name accepts member names and symbols."""
    assert Operation.from_name(name) is expected


@pytest.mark.parametrize("name", ["modulo", "%", ""])
def test_from_name_unknown(name) -> None:
    """from_name raises ValueError for unknown operations."""
    with pytest.raises(ValueError):
        Operation.from_name(name)
