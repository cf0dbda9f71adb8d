"""Protocols (interfaces) consumed by the core layer.

The retry readers depend only on these contracts.  The terminal-backed
implementation lives in :mod:`typed_prompt.infra`; tests plug in
scripted fakes.
"""

from __future__ import annotations

from typing import Any, Protocol

from typed_prompt.core.models import ReadResult


class LineSession(Protocol):
    """A single prompt bound to an already rendered prompt string."""

    def read(self) -> ReadResult:
        """Show the prompt and block until the user submits a line.

        Returns :class:`~typed_prompt.core.models.Answered` with the line
        text (without the newline), or
        :data:`~typed_prompt.core.models.NO_ANSWER` on end-of-input.
        """
        ...  # pragma: no cover


class LineReader(Protocol):
    """Contract for the underlying line-editing backend."""

    def open_session(self, prompt: str, history: Any = None) -> LineSession:
        """Return a session showing *prompt*.

        ``history=None`` means the session keeps no history at all.
        """
        ...  # pragma: no cover

    def restore_terminal(self) -> None:
        """Put the terminal back into the state it had before any read.

        Must be idempotent.
        """
        ...  # pragma: no cover


class DiagnosticSink(Protocol):
    """Destination of validation-failure messages (the error stream)."""

    def write(self, line: str) -> None:
        """Emit *line* followed by a newline."""
        ...  # pragma: no cover
