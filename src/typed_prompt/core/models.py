"""Domain models for typed-prompt.

Value objects only: the prompt configuration captured by a
:class:`~typed_prompt.question.Question`, and the two-variant result of
a single line read.  No I/O and no third-party imports.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Union

from typed_prompt.exceptions import ConfigurationError


# ---------------------------------------------------------------------------
# Float rendering
# ---------------------------------------------------------------------------

class FloatFormat(str, enum.Enum):
    """Presentation type used when a float default is shown in a prompt."""

    GENERAL = "g"
    FIXED = "f"
    SCIENTIFIC = "e"


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class PromptConfig:
    """Settings shared by every prompt of a session.

    Build one before constructing a :class:`~typed_prompt.question.Question`
    and treat it as write-once: the question captures it at construction.
    Use :func:`dataclasses.replace` or :meth:`with_bool_strings` to derive
    a variant.
    """

    question_prefix: str = " + "
    """Placed before every question."""

    error_prefix: str = "  "
    """Placed before every validation-failure message."""

    true_string: str = "y"
    """Display token for ``True`` in boolean prompts."""

    false_string: str = "n"
    """Display token for ``False`` in boolean prompts."""

    float_format: FloatFormat = FloatFormat.GENERAL
    """How a float default is rendered.  Parsing is unaffected."""

    float_precision: int | None = None
    """Digits for :attr:`float_format`; ``None`` is the shortest form."""

    extra_bool_strings: Mapping[str, bool] = field(
        default_factory=lambda: MappingProxyType({}),
    )
    """Additional boolean literals, e.g. ``{"oui": True, "non": False}``."""

    def __post_init__(self) -> None:
        try:
            float_format = FloatFormat(self.float_format)
        except ValueError as exc:
            raise ConfigurationError(
                f"Unknown float format: {self.float_format!r}",
                hint="Use one of 'g', 'f' or 'e'.",
            ) from exc
        object.__setattr__(self, "float_format", float_format)

        if self.float_precision is not None and self.float_precision < 0:
            raise ConfigurationError(
                f"Float precision must be >= 0, got {self.float_precision}",
                hint="Leave it unset for the shortest representation.",
            )

        for key, value in self.extra_bool_strings.items():
            if not isinstance(key, str) or not isinstance(value, bool):
                raise ConfigurationError(
                    f"Invalid boolean literal mapping {key!r} -> {value!r}",
                )
        object.__setattr__(
            self,
            "extra_bool_strings",
            MappingProxyType(dict(self.extra_bool_strings)),
        )

    def with_bool_strings(self, mapping: Mapping[str, bool]) -> PromptConfig:
        """Return a copy whose extra boolean literals also include *mapping*."""
        merged = dict(self.extra_bool_strings)
        merged.update(mapping)
        return replace(self, extra_bool_strings=merged)


DEFAULT_CONFIG = PromptConfig()


# ---------------------------------------------------------------------------
# Line read results
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Answered:
    """The user submitted a line (possibly empty)."""

    text: str


class NoAnswer:
    """The user signalled end-of-input instead of submitting a line."""

    _instance: NoAnswer | None = None

    def __new__(cls) -> NoAnswer:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_ANSWER"

    def __bool__(self) -> bool:
        return False


NO_ANSWER = NoAnswer()

ReadResult = Union[Answered, NoAnswer]
