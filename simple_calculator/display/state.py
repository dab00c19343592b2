"""Derived display state of the calculator."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from simple_calculator.common.config import DEFAULT_SETTINGS, DisplaySettings
from simple_calculator.common.models import ErrorKind, Outcome
from simple_calculator.common.operations import Operation
from simple_calculator.engine.evaluator import evaluate_text


def format_outcome(outcome: Outcome, settings: DisplaySettings = DEFAULT_SETTINGS) -> str:
    """
    Render an outcome as the text of the result line.

    :param Outcome outcome: Outcome to render
    :param DisplaySettings settings: Strings used for rendering

    :return: Result line, e.g. "= 7.0" or "Division by zero"
    :rtype: str
    """
    if outcome.error is ErrorKind.INVALID_INPUT:
        return settings.invalid_input_message
    if outcome.error is ErrorKind.DIVISION_BY_ZERO:
        return settings.division_by_zero_message
    return f"{settings.result_prefix}{outcome.value!r}"


class DisplayState(BaseModel):
    """
    Snapshot of everything the front-end renders.

    Every change returns a new snapshot. Changes to an operand field go
    through ``on_input_change`` before the snapshot is returned, so the
    reset of the result line happens before the next render.
    """

    model_config = ConfigDict(frozen=True)

    operand1: str = Field(default="", description="Raw text of the first operand field")
    operand2: str = Field(default="", description="Raw text of the second operand field")
    operation: Operation = Field(default=Operation.ADD, description="Selected operation")
    result_text: str = Field(default="", description="Text of the result line")
    outcome: Optional[Outcome] = Field(default=None, description="Last computed outcome")
    settings: DisplaySettings = Field(default=DEFAULT_SETTINGS, description="Rendering strings")

    def on_input_change(self) -> "DisplayState":
        """Clear the result when both operand fields are empty."""
        if not self.operand1 and not self.operand2:
            return self.model_copy(update={"result_text": "", "outcome": None})
        return self

    def with_operand1(self, text: str) -> "DisplayState":
        return self.model_copy(update={"operand1": text}).on_input_change()

    def with_operand2(self, text: str) -> "DisplayState":
        return self.model_copy(update={"operand2": text}).on_input_change()

    def with_operation(self, operation: Operation) -> "DisplayState":
        return self.model_copy(update={"operation": operation})

    def calculate(self) -> "DisplayState":
        """
        Evaluate the current operands and store the rendered outcome.

        :return: New state holding the outcome and its result line
        :rtype: DisplayState
        """
        outcome = evaluate_text(self.operand1, self.operand2, self.operation)
        return self.model_copy(
            update={"outcome": outcome, "result_text": format_outcome(outcome, self.settings)}
        )

    @property
    def expression_text(self) -> str:
        """Expression line; the symbol is shown only once operand1 is filled in."""
        symbol = f" {self.operation.symbol} " if self.operand1 else ""
        return f"{self.operand1}{symbol}{self.operand2}"

    @property
    def is_alert(self) -> bool:
        """Whether the result line reports a division by zero."""
        return self.outcome is not None and self.outcome.is_division_by_zero
