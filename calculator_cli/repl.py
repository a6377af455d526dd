import argparse
import logging
import math
import sys
from typing import Optional, Sequence

from calculator_cli.errors import CalcError
from calculator_cli.parser import to_postfix
from calculator_cli.runtime import evaluate_postfix
from calculator_cli.tokenizer import tokenize, untokenize
from calculator_cli.validator import check_well_formed

logger = logging.getLogger(__name__)

HELP_TEXT = "\n".join(
    [
        "Commands:",
        " Enter an expression to evaluate it (e.g., 2 + 2)",
        " Type 'quit' or 'q' to exit the calculator",
        " Type 'help' to see this help message",
    ]
)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="calculator-cli",
        description="Evaluate space-separated arithmetic expressions, e.g. '2 * 3 + 4'",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="reject misplaced operators before evaluating",
    )
    parser.add_argument(
        "--show-postfix",
        action="store_true",
        help="print each expression in postfix order before its result",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def format_result(value: float) -> str:
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def handle_expression(words: list[str], strict: bool = False, show_postfix: bool = False) -> None:
    try:
        tokens = tokenize(words)
        if strict:
            check_well_formed(tokens)
    except CalcError as e:
        print(e, file=sys.stderr)
        return

    postfix = to_postfix(tokens)
    if show_postfix:
        print(f"Postfix: {untokenize(postfix)}")

    try:
        result = evaluate_postfix(postfix)
    except CalcError as e:
        print(f"Error evaluating expression: {e}")
        return

    print(f"Result: {format_result(result)}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    print("\nWelcome to the Calculator CLI project\n")
    print(HELP_TEXT)

    while True:
        try:
            line = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            logger.info("Input closed, exiting")
            return 0

        words = line.split()
        if not words:
            continue

        command = words[0].lower()
        if command in ("quit", "q"):
            print("Goodbye!")
            return 0
        elif command == "help":
            print(HELP_TEXT)
        else:
            handle_expression(words, strict=args.strict, show_postfix=args.show_postfix)


if __name__ == "__main__":
    sys.exit(main())
