"""Evaluate a binary arithmetic operation over two operands."""
from simple_calculator.common.errors import CalculatorError, DivisionByZeroError, InvalidInputError
from simple_calculator.common.logger import logger
from simple_calculator.common.models import EvaluationRequest, Outcome
from simple_calculator.common.operations import OPERATORS, Operation
from simple_calculator.common.parser import OperandParser


class Evaluator:
    """
    Stateless evaluator of one operation over two operands.

    Lifecycle of a request:
        - ``compute`` dispatches to the arithmetic function of the operation
          and raises on a zero divisor before dividing
        - ``evaluate`` wraps ``compute`` and reports any error as an Outcome
          instead of raising it
    """

    @staticmethod
    def compute(operand1: float, operand2: float, operation: Operation) -> float:
        """
        Compute the result of the operation using native float arithmetic.

        :param float operand1: First operand
        :param float operand2: Second operand
        :param Operation operation: Operation to apply

        :return: Computed result
        :rtype: float
        :raises DivisionByZeroError: If the operation is DIVIDE and operand2 is 0.0
        """
        # Checked before dividing, 0 / 0 included
        if operation is Operation.DIVIDE and operand2 == 0.0:
            raise DivisionByZeroError()
        return OPERATORS[operation](operand1, operand2)

    @staticmethod
    def evaluate(operand1: float, operand2: float, operation: Operation) -> Outcome:
        """
        Evaluate the operation and return its outcome.

        :param float operand1: First operand
        :param float operand2: Second operand
        :param Operation operation: Operation to apply

        :return: Outcome holding either the result or the error kind
        :rtype: Outcome
        """
        expression = f"{operand1} {operation.symbol} {operand2}"
        logger.debug(f"🧮🏁 Evaluating {expression}")

        try:
            result = Evaluator.compute(operand1, operand2, operation)
        except CalculatorError as exc:
            logger.debug(f"🧮❌ Evaluation failed for {expression}: {exc}")
            return Outcome.failure(exc.kind)

        logger.debug(f"🧮✅ {expression} = {result}")
        return Outcome.success(result)

    @staticmethod
    def evaluate_request(request: EvaluationRequest) -> Outcome:
        """
        Evaluate a validated request.

        :param EvaluationRequest request: Operands and operation to evaluate

        :return: Outcome holding either the result or the error kind
        :rtype: Outcome
        """
        return Evaluator.evaluate(request.operand1, request.operand2, request.operation)


def evaluate(operand1: float, operand2: float, operation: Operation) -> Outcome:
    """Evaluate ``operand1 <operation> operand2``; see ``Evaluator.evaluate``."""
    return Evaluator.evaluate(operand1, operand2, operation)


def evaluate_text(text1: str, text2: str, operation: Operation) -> Outcome:
    """
    Parse two raw operand texts and evaluate them.

    If either text fails to parse, an INVALID_INPUT outcome is returned
    and the evaluator is not invoked.

    :param str text1: Raw text of the first operand
    :param str text2: Raw text of the second operand
    :param Operation operation: Operation to apply

    :return: Outcome of the request
    :rtype: Outcome
    """
    try:
        operand1, operand2 = OperandParser.parse_pair(text1, text2)
    except InvalidInputError as exc:
        logger.info(f"📄❌ Rejected operands {text1!r}, {text2!r}: {exc}")
        return Outcome.failure(exc.kind)

    return Evaluator.evaluate_request(
        EvaluationRequest(operand1=operand1, operand2=operand2, operation=operation)
    )
