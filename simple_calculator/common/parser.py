"""Parse raw operand text into numbers."""
import math
from typing import Tuple

from simple_calculator.common.errors import InvalidInputError


class OperandParser:
    """
    Convert the raw text of an operand field into a float.

    Design constraints:
        - Unparseable text is never coerced to 0 or NaN
        - Only finite numbers are accepted, as the evaluator works on real numbers
        - Digit separators ("1_000") are rejected even though float() accepts them
    """

    @staticmethod
    def parse(text: str) -> float:
        """
        Parse a single operand.

        :param str text: Raw operand text, surrounding whitespace is ignored

        :return: Parsed operand
        :rtype: float
        :raises InvalidInputError: If the text is empty, malformed or not finite
        """
        stripped = text.strip()
        if not stripped:
            raise InvalidInputError("Empty operand")
        if "_" in stripped:
            raise InvalidInputError(f"Invalid operand: {text!r}")

        try:
            value = float(stripped)
        except ValueError as exc:
            raise InvalidInputError(f"Invalid operand: {text!r}") from exc

        if not math.isfinite(value):
            raise InvalidInputError(f"Operand is not finite: {text!r}")
        return value

    @staticmethod
    def parse_pair(text1: str, text2: str) -> Tuple[float, float]:
        """
        Parse both operands of a request.

        :param str text1: Raw text of the first operand
        :param str text2: Raw text of the second operand

        :return: Tuple of (operand1, operand2)
        :rtype: Tuple[float, float]
        :raises InvalidInputError: If either operand fails to parse
        """
        return OperandParser.parse(text1), OperandParser.parse(text2)
