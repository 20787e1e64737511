#!/usr/bin/env python3
"""
Arithmetic Expression Evaluator
Evaluates expressions with + - * / % ^, unary minus and parentheses
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule
from rich.table import Table

import settings
from calculator import Calculator

logger = logging.getLogger(__name__)

console = Console()

MENU_OPTIONS = {
    "1": "Enter Expression",
    "2": "History",
    "3": "User Manual",
    "4": "Quit",
}

USER_MANUAL = """\
Welcome to the Arithmetic Expression Evaluator.
This program evaluates arithmetic expressions involving the operators
+, -, *, /, % (floating-point remainder) and ^ (exponentiation).

Menu Options:
1 - Enter Expression: evaluate an arithmetic expression.
2 - History: show the evaluated expressions and their results.
3 - User Manual: show this manual.
4 - Quit: exit the program.

Entering Expressions:
Enter any arithmetic expression using numbers and operators,
for example '3 + 4 * 2', '2 ^ 3' or '(4 + 5) / 2'.
Parentheses group sub-expressions and a leading '-' negates.
Note that '^' groups left to right: 2 ^ 3 ^ 2 is (2 ^ 3) ^ 2 = 64.

History:
Every expression you evaluate is kept, with its result or error,
and can be reviewed with the 'History' option."""


def setup_logging(level: str = settings.LOG_LEVEL, log_file: Optional[str] = None) -> Path:
    """Configure root logging to a dated file plus warnings on stderr"""
    if log_file is None:
        settings.LOG_DIR.mkdir(parents=True, exist_ok=True)
        path = settings.LOG_DIR / settings.LOG_FILE_PATTERN.format(date=datetime.now().strftime("%Y%m%d"))
    else:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(logging.WARNING)

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=settings.LOG_FORMAT,
        handlers=[
            logging.FileHandler(path, encoding="utf-8"),
            stream_handler,
        ],
        force=True,
    )
    logger.info("%s v%s logging to %s", settings.APP_NAME, settings.VERSION, path)
    return path


def print_menu():
    console.print()
    console.print(Rule(settings.APP_NAME))
    for key, label in MENU_OPTIONS.items():
        console.print(f"{key} - {label}")
    console.print(Rule())


def handle_expression(calc: Calculator):
    """Read one expression, evaluate it and print the outcome"""
    expression = console.input("\nEnter an arithmetic expression: ")
    result = calc.run(expression)
    console.print(f"\nResult: {escape(calc.render(result))}")


def show_history(calc: Calculator, n: Optional[int] = None):
    """Display the last n calculations"""
    if n is None:
        n = settings.HISTORY_DISPLAY
    console.print(Rule())
    if not calc.history:
        console.print("\nNo previous instances.")
        return

    table = Table(title="History")
    table.add_column("#", justify="right")
    table.add_column("Expression")
    table.add_column("Result")
    start = max(len(calc.history) - n, 0) + 1
    for i, entry in enumerate(calc.history.recent(n), start=start):
        table.add_row(str(i), escape(entry.expression), escape(entry.result))
    console.print(table)


def show_user_manual():
    console.print(Rule("User Manual"))
    console.print(escape(USER_MANUAL))
    console.print(Rule())


def interactive(calc: Calculator) -> int:
    """Menu loop; returns the exit status"""
    while True:
        try:
            print_menu()
            choice = console.input("\nSelect an option: ").strip()

            if choice == "1":
                handle_expression(calc)
            elif choice == "2":
                show_history(calc)
            elif choice == "3":
                show_user_manual()
            elif choice == "4":
                console.print(Rule())
                console.print("\nProgram has ended.")
                return 0
            else:
                console.print("\nInvalid option. Please try again.")

        except (EOFError, KeyboardInterrupt):
            console.print("\nProgram has ended.")
            return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arith-eval",
        description="Evaluate arithmetic expressions with + - * / % ^ and parentheses.",
    )
    parser.add_argument("expression", nargs="?",
                        help="Expression to evaluate; omit to start the interactive menu")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL,
                        help=f"Logging level (default: {settings.LOG_LEVEL})")
    parser.add_argument("--log-file", default=None,
                        help="Write the log to this file instead of the dated file in logs/")
    parser.add_argument("--version", action="version", version=f"%(prog)s {settings.VERSION}")
    return parser


def parse_arguments(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse the command line, keeping expressions such as '-5+3' intact

    argparse reads a leading '-' as an option flag, so unrecognised
    arguments are joined back into the expression in command-line order.
    """
    if argv is None:
        argv = sys.argv[1:]
    args, extra = build_parser().parse_known_args(argv)

    pieces = extra if args.expression is None else [args.expression] + extra
    if pieces:
        args.expression = " ".join(sorted(pieces, key=argv.index))
    return args


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_arguments(argv)
    setup_logging(args.log_level, args.log_file)
    calc = Calculator()

    if args.expression is None:
        return interactive(calc)

    result = calc.run(args.expression)
    console.print(escape(calc.render(result)))
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
