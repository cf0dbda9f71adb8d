"""Typed read-validate-retry loops.

All four readers share :func:`read_typed`; they differ only in the
:class:`TypeSpec` handed to it.

State machine
-------------
* The prompt is rendered once and one session is opened for it.
* Each iteration reads a line:

  - end-of-input → return the type's zero value, no message;
  - empty line with a default → return the default, no parsing;
  - otherwise parse → return the value, or report the text on the
    diagnostic sink and read again.

A non-defaulted string read accepts the empty line as its answer; the
numeric parsers reject it, so non-defaulted numeric reads keep asking.
"""

from __future__ import annotations

import json
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from typed_prompt.core.models import NoAnswer
from typed_prompt.core.protocols import DiagnosticSink, LineReader

T = TypeVar("T")

_INT_RE = re.compile(r"[+-]?[0-9]+")


# ---------------------------------------------------------------------------
# Per-type parsers (pure)
# ---------------------------------------------------------------------------

def parse_string(text: str) -> str:
    return text


def parse_int(text: str) -> int | None:
    """Accept an optionally signed run of ASCII digits, nothing else."""
    if _INT_RE.fullmatch(text) is None:
        return None
    return int(text)


def parse_float(text: str) -> float | None:
    """Accept decimal and scientific notation, ``inf`` and ``nan``.

    Surrounding whitespace and ``_`` digit separators are rejected even
    though :class:`float` would take them.
    """
    if not text or text != text.strip() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


# ---------------------------------------------------------------------------
# Type descriptors
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TypeSpec(Generic[T]):
    """What a retry loop needs to know about its target type."""

    parse: Callable[[str], T | None]
    zero: T
    error_message: str
    empty_is_answer: bool = False
    """Whether an empty line is itself a valid answer."""


STRING: TypeSpec[str] = TypeSpec(
    parse=parse_string,
    zero="",
    error_message="value has to be a string",
    empty_is_answer=True,
)

INTEGER: TypeSpec[int] = TypeSpec(
    parse=parse_int,
    zero=0,
    error_message="value has to be an integer",
)

FLOAT: TypeSpec[float] = TypeSpec(
    parse=parse_float,
    zero=0.0,
    error_message="value has to be a float",
)


def boolean_spec(resolve: Callable[[str], bool | None]) -> TypeSpec[bool]:
    """Build the boolean descriptor around a configured resolver."""
    return TypeSpec(
        parse=resolve,
        zero=False,
        error_message="does not represent a boolean",
    )


def quote(text: str) -> str:
    """Double-quote *text* with backslash escapes, e.g. ``"a\\"b"``."""
    return json.dumps(text, ensure_ascii=False)


# ---------------------------------------------------------------------------
# Retry loop
# ---------------------------------------------------------------------------

def read_typed(
    reader: LineReader,
    diagnostics: DiagnosticSink,
    prompt: str,
    spec: TypeSpec[T],
    *,
    default: T | None = None,
    has_default: bool = False,
    error_prefix: str = "  ",
) -> T:
    """Ask until a valid *spec* value or end-of-input is obtained.

    Parameters
    ----------
    prompt:
        The fully rendered prompt (see
        :func:`~typed_prompt.core.prompt_builder.build_prompt`).
    default:
        Returned for an empty line when *has_default* is set.
    error_prefix:
        Placed before each diagnostic line.

    Returns
    -------
    T
        The parsed value, the default, or ``spec.zero`` on end-of-input.
    """
    session = reader.open_session(prompt, history=None)

    while True:
        result = session.read()
        if isinstance(result, NoAnswer):
            return spec.zero

        text = result.text
        if text == "":
            if has_default:
                return default  # type: ignore[return-value]
            if spec.empty_is_answer:
                return spec.zero

        value = spec.parse(text)
        if value is not None:
            return value

        diagnostics.write(f"{error_prefix}{quote(text)}: {spec.error_message}")
