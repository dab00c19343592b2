"""Registry of the binary arithmetic operations supported by the calculator."""
from collections.abc import Callable as ABCCallable
from enum import Enum
import operator
from typing import Callable


# Type alias for operator functions (taking two floats, returning a float)
OperatorFn: ABCCallable[[float, float], float] = Callable[[float, float], float]


class Operation(Enum):
    """
    Closed set of binary operations, each carrying its display symbol.

    The enum value is the symbol used to compose the expression line
    (e.g. "3 + 4"). Members are constants: no operation can be created
    or mutated at runtime.
    """

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "x"
    DIVIDE = "/"

    @property
    def symbol(self) -> str:
        """Display symbol of the operation."""
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "Operation":
        """
        Look up an operation by member name or by symbol, ignoring case.

        "*" is accepted as an alias of the multiplication symbol.

        :param str name: Operation name ("add") or symbol ("+")

        :return: Matching operation
        :rtype: Operation
        :raises ValueError: If no operation matches
        """
        key = name.strip()
        if key == "*":
            return cls.MULTIPLY
        for member in cls:
            if key.upper() == member.name or key.lower() == member.value:
                return member
        raise ValueError(f"Unknown operation: {name!r}")


def symbol_of(operation: Operation) -> str:
    """Return the display symbol of an operation."""
    return operation.symbol


# Mapping of each operation to its binary function
OPERATORS: dict[Operation, OperatorFn] = {
    Operation.ADD: operator.add,
    Operation.SUBTRACT: operator.sub,
    Operation.MULTIPLY: operator.mul,
    Operation.DIVIDE: operator.truediv,
}
