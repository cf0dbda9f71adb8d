"""Prompt text composition.

Pure string transforms used by the retry readers:

* :func:`build_prompt` — prefix, question, optional ``[default]`` and the
  trailing separator.
* :func:`format_bool_options` — the ``Y/n`` / ``y/N`` default display.
* :func:`format_float` — float defaults rendered per the configured
  format and precision.
"""

from __future__ import annotations

import math
from decimal import Decimal

from typed_prompt.core.models import FloatFormat


def build_prompt(
    prefix: str,
    question: str,
    default_display: str = "",
    has_default: bool = False,
) -> str:
    """Render the text shown before the cursor.

    ``build_prompt(" + ", "Continue?")`` gives ``" + Continue? "``;
    ``build_prompt(" + ", "Name")`` gives ``" + Name: "``.
    """
    prompt = prefix + question

    if has_default:
        prompt = f"{prompt} [{default_display}]"

    if prompt.endswith("?"):
        return prompt + " "
    return prompt + ": "


def format_bool_options(true_string: str, false_string: str, default: bool) -> str:
    """Join both tokens with ``/``, upper-casing the default side."""
    if default:
        return f"{true_string.upper()}/{false_string}"
    return f"{true_string}/{false_string.upper()}"


def format_float(
    value: float,
    float_format: FloatFormat = FloatFormat.GENERAL,
    precision: int | None = None,
) -> str:
    """Render a float default.

    With *precision* ``None`` the shortest digits that round-trip are
    used, laid out according to *float_format*.  ``GENERAL`` then keeps
    ``repr``'s positional layout up to ``1e16``, so ``1e6`` renders
    ``1000000`` rather than ``1e+06``.
    """
    if not math.isfinite(value):
        return repr(value)

    if precision is not None:
        return format(value, f".{precision}{float_format.value}")

    shortest = repr(value)
    if float_format is FloatFormat.GENERAL:
        if shortest.endswith(".0"):
            return shortest[:-2]
        return shortest

    digits = Decimal(shortest).normalize()
    if float_format is FloatFormat.SCIENTIFIC:
        # Two-digit exponent, as with an explicit precision.
        return format(value, f".{len(digits.as_tuple().digits) - 1}e")
    return format(digits, "f")
