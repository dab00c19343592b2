"""
Command-line front-end of the calculator.

This script:
- Evaluates a single "OPERAND1 OPERATION OPERAND2" request, or
- Runs an interactive session over the calculator display state

The front-end only collects raw text, selects an operation and renders
the display; parsing and evaluation are delegated to the engine.
"""

import argparse
import sys
from typing import Iterable, List, Optional, TextIO

from pydantic import BaseModel, ValidationError, field_validator, model_validator
from rich.console import Console
from rich.markup import escape

from simple_calculator.common.logger import configure_logging, logger
from simple_calculator.common.operations import Operation
from simple_calculator.display.state import DisplayState

PROMPT = "> "
HELP_TEXT = (
    "Commands:\n"
    "  1 <text>    set operand 1 (no text clears it)\n"
    "  2 <text>    set operand 2 (no text clears it)\n"
    "  op <name>   select operation: add, subtract, multiply, divide or + - x /\n"
    "  =           calculate\n"
    "  clear       clear both operands\n"
    "  help        show this help\n"
    "  quit        leave"
)


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    operand1 : str, optional
        Raw text of the first operand (one-shot mode).
    operation : Operation, optional
        Operation to apply (one-shot mode).
    operand2 : str, optional
        Raw text of the second operand (one-shot mode).
    interactive : bool
        Run an interactive session instead of a single request.
    log_level : str
        Logging level name.
    """

    operand1: Optional[str] = None
    operation: Optional[Operation] = None
    operand2: Optional[str] = None
    interactive: bool = False
    log_level: str = "WARNING"

    @field_validator("operation", mode="before")
    def operation_from_name(cls, v):
        """Accept operation names and symbols as well as Operation members."""
        if isinstance(v, str):
            return Operation.from_name(v)
        return v

    @field_validator("log_level")
    def log_level_must_be_known(cls, v: str) -> str:
        """Ensure that the log level is a standard level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @model_validator(mode="after")
    def request_must_be_complete(self) -> "CliArgs":
        """A one-shot request needs both operands and an operation."""
        if not self.interactive and None in (self.operand1, self.operation, self.operand2):
            raise ValueError("OPERAND1 OPERATION OPERAND2 are required unless --interactive is given")
        return self


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param argv: Arguments to parse, defaults to sys.argv[1:]

    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        prog="simple-calculator",
        description="Two-operand calculator",
    )

    parser.add_argument("operand1", nargs="?", help="First operand")
    parser.add_argument("operation", nargs="?", help="add, subtract, multiply, divide or + - x /")
    parser.add_argument("operand2", nargs="?", help="Second operand")
    parser.add_argument(
        "-i", "--interactive", action="store_true", help="Run an interactive session"
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")

    args = parser.parse_args(argv)

    try:
        return CliArgs(
            operand1=args.operand1,
            operation=args.operation,
            operand2=args.operand2,
            interactive=args.interactive,
            log_level=args.log_level,
        )
    except ValidationError as exc:
        parser.error(str(exc))


def build_console(file: Optional[TextIO] = None, **kwargs) -> Console:
    """
    Create the console the calculator renders to.

    Lines are never wrapped and neither numbers nor emoji codes are
    styled, so plain output is exactly the display text.

    :param file: Output stream, defaults to stdout
    :param kwargs: Extra arguments for rich.console.Console

    :return: Configured console
    :rtype: Console
    """
    return Console(file=file, highlight=False, emoji=False, soft_wrap=True, **kwargs)


def render(state: DisplayState, console: Console) -> None:
    """
    Print the expression line and the result line of a display state.

    A division by zero is shown in red; rich drops the colour when the
    console is not a terminal.

    :param DisplayState state: State to render
    :param Console console: Output console
    """
    console.print(escape(state.expression_text))
    if state.is_alert:
        console.print(f"[red]{escape(state.result_text)}[/red]")
    else:
        console.print(escape(state.result_text))


def apply_command(state: DisplayState, line: str) -> Optional[DisplayState]:
    """
    Apply one interactive command to a display state.

    :param DisplayState state: Current state
    :param str line: Raw command line

    :return: New state, or None when the session should end
    :rtype: Optional[DisplayState]
    :raises ValueError: If the command or the operation name is unknown
    """
    command, _, argument = line.strip().partition(" ")
    argument = argument.strip()

    if command in ("quit", "exit"):
        return None
    if command == "1":
        return state.with_operand1(argument)
    if command == "2":
        return state.with_operand2(argument)
    if command == "op":
        return state.with_operation(Operation.from_name(argument))
    if command == "=":
        return state.calculate()
    if command == "clear":
        return state.with_operand1("").with_operand2("")
    raise ValueError(f"Unknown command: {line.strip()!r}")


def run_interactive(lines: Iterable[str], console: Console) -> DisplayState:
    """
    Run an interactive session over the given input lines.

    The display is re-rendered after every accepted command.

    :param lines: Input lines, one command each
    :param Console console: Output console

    :return: Final display state
    :rtype: DisplayState
    """
    state = DisplayState()
    console.print(escape(HELP_TEXT))
    console.print(PROMPT, end="")

    for line in lines:
        if not line.strip():
            console.print(PROMPT, end="")
            continue
        if line.strip() == "help":
            console.print(escape(HELP_TEXT))
            console.print(PROMPT, end="")
            continue

        try:
            new_state = apply_command(state, line)
        except ValueError as exc:
            logger.debug(f"⌨️❌ {exc}")
            console.print(escape(str(exc)))
            console.print(PROMPT, end="")
            continue

        if new_state is None:
            break
        state = new_state
        render(state, console)
        console.print(PROMPT, end="")

    console.print()
    return state


def run_once(cli_args: CliArgs, console: Console) -> int:
    """
    Evaluate a single request and render it.

    :param CliArgs cli_args: Validated one-shot arguments
    :param Console console: Output console

    :return: Exit status, 1 if the outcome is an error
    :rtype: int
    """
    state = (
        DisplayState()
        .with_operand1(cli_args.operand1)
        .with_operand2(cli_args.operand2)
        .with_operation(cli_args.operation)
        .calculate()
    )
    render(state, console)
    return 1 if state.outcome.is_error else 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function of the simple-calculator command.
    """
    cli_args = parse_args(argv)
    configure_logging(cli_args.log_level)
    console = build_console()

    if cli_args.interactive:
        logger.info("⌨️🏁 Starting interactive session")
        run_interactive(sys.stdin, console)
        return 0

    return run_once(cli_args, console)


if __name__ == "__main__":
    sys.exit(main())
