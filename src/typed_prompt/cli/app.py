"""CLI application entry point and command routing for typed-prompt.

This module is the **sole error boundary** for the command-line tool.
It catches :class:`~typed_prompt.exceptions.TypedPromptError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages on stderr and returning well-defined exit codes.

Architecture notes
------------------
* No prompting logic lives here; ``ask`` builds a
  :class:`~typed_prompt.core.models.PromptConfig` from flags and hands
  over to :class:`~typed_prompt.question.Question`.
* The answer is the only thing written to stdout, so the command can be
  used in shell substitutions: ``name=$(typed-prompt ask string Name)``.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from typing import Any

from typed_prompt.cli import exit_codes
from typed_prompt.core.bool_resolver import BoolResolver
from typed_prompt.core.models import DEFAULT_CONFIG, FloatFormat, PromptConfig
from typed_prompt.core.readers import parse_float, parse_int
from typed_prompt.exceptions import ConfigurationError, InvalidDefaultError, TypedPromptError
from typed_prompt.version import __version__

ANSWER_TYPES: tuple[str, ...] = ("string", "int", "float", "bool")


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``typed-prompt ask <type> <question> [options]``
    * ``typed-prompt --version``
    """
    parser = argparse.ArgumentParser(
        prog="typed-prompt",
        description="Ask a typed question on the terminal and print the answer.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    subparsers = parser.add_subparsers(dest="command")

    ask = subparsers.add_parser("ask", help="Ask one question.")
    ask.add_argument("type", choices=ANSWER_TYPES, help="Type of the expected answer.")
    ask.add_argument("question", help="Question text, e.g. 'Continue?' or 'Name'.")
    ask.add_argument("-d", "--default", default=None, help="Answer used for an empty line.")
    ask.add_argument("--prefix", default=None, help="String placed before the question.")
    ask.add_argument("--error-prefix", default=None, help="String placed before error messages.")
    ask.add_argument("--true-string", default=None, help="Token displayed for 'true'.")
    ask.add_argument("--false-string", default=None, help="Token displayed for 'false'.")
    ask.add_argument(
        "--float-format",
        choices=[fmt.value for fmt in FloatFormat],
        default=None,
        help="How a float default is displayed.",
    )
    ask.add_argument(
        "--precision",
        type=int,
        default=None,
        help="Digits for --float-format (default: shortest).",
    )
    ask.add_argument(
        "--bool-literal",
        action="append",
        default=[],
        metavar="TEXT=BOOL",
        help="Extra boolean literal, e.g. 'oui=true'. Repeatable.",
    )
    return parser


# ---------------------------------------------------------------------------
# Flag → configuration mapping (pure)
# ---------------------------------------------------------------------------

def _parse_bool_literal(spec: str) -> tuple[str, bool]:
    """Split ``TEXT=BOOL`` and resolve BOOL with the standard literals."""
    text, sep, raw_value = spec.rpartition("=")
    value = BoolResolver.from_config(DEFAULT_CONFIG).resolve(raw_value)
    if not sep or not text or value is None:
        raise ConfigurationError(
            f"Invalid boolean literal: {spec!r}",
            hint="Use TEXT=BOOL, e.g. --bool-literal oui=true",
        )
    return text, value


def _build_config(args: argparse.Namespace) -> PromptConfig:
    """Overlay the flags that were given on :data:`DEFAULT_CONFIG`."""
    overrides: dict[str, Any] = {}
    for flag, field_name in (
        ("prefix", "question_prefix"),
        ("error_prefix", "error_prefix"),
        ("true_string", "true_string"),
        ("false_string", "false_string"),
        ("float_format", "float_format"),
        ("precision", "float_precision"),
    ):
        value = getattr(args, flag)
        if value is not None:
            overrides[field_name] = value

    config = replace(DEFAULT_CONFIG, **overrides)
    if args.bool_literal:
        config = config.with_bool_strings(
            dict(_parse_bool_literal(item) for item in args.bool_literal),
        )
    return config


def _convert_default(answer_type: str, raw: str | None, config: PromptConfig) -> Any:
    """Convert ``--default`` to the answer type, or ``None`` when absent."""
    if answer_type == "bool" and raw is None:
        return False
    if raw is None or answer_type == "string":
        return raw

    parsers = {
        "int": parse_int,
        "float": parse_float,
        "bool": BoolResolver.from_config(config).resolve,
    }
    value = parsers[answer_type](raw)
    if value is None:
        raise InvalidDefaultError(
            f"Default {raw!r} is not a valid {answer_type}.",
        )
    return value


def _format_answer(answer: object) -> str:
    if isinstance(answer, bool):
        return "true" if answer else "false"
    return str(answer)


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_ask(args: argparse.Namespace) -> int:
    """Ask a single question and print the answer on stdout."""
    from typed_prompt.question import Question

    config = _build_config(args)
    default = _convert_default(args.type, args.default, config)

    with Question(config) as question:
        if args.type == "string":
            answer: object = question.read_string(args.question, default)
        elif args.type == "int":
            answer = question.read_int(args.question, default)
        elif args.type == "float":
            answer = question.read_float(args.question, default)
        else:
            answer = question.read_bool(args.question, default)

    print(_format_answer(answer))
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the typed-prompt CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    return _handle_ask(args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    from typed_prompt.infra.console import console

    try:
        code = main()
        sys.exit(code)
    except TypedPromptError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
