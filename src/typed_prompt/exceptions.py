"""Custom exception hierarchy for typed-prompt.

Only conditions the caller has to act on are modelled as exceptions.
A malformed answer is *not* one of them: the retry readers report it on
the error stream and ask again.  End-of-input is not one either; it
yields the zero value of the requested type.

Hierarchy
---------
TypedPromptError
├── ConfigurationError
├── InvalidDefaultError
└── EnvironmentError
"""

from __future__ import annotations


class TypedPromptError(Exception):
    """Base exception for all typed-prompt errors.

    The CLI error boundary renders ``str(exc)`` and, when present,
    :attr:`hint` without a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Configuration ---------------------------------------------------------

class ConfigurationError(TypedPromptError):
    """Raised when a :class:`~typed_prompt.core.models.PromptConfig` is unusable.

    Fatal: a :class:`~typed_prompt.question.Question` is never created
    from a configuration that fails validation.
    """


class InvalidDefaultError(TypedPromptError):
    """Raised when a default value given as text cannot be converted."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(TypedPromptError):
    """Raised when a required runtime dependency is not available."""
