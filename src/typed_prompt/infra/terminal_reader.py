"""prompt_toolkit backed implementation of :class:`~typed_prompt.core.protocols.LineReader`.

This module is the **only** place in the codebase that imports
``prompt_toolkit``.  prompt_toolkit switches the terminal to raw mode
for the duration of each read and handles keystrokes, cursor movement
and editing; this module only adapts its outcome to the core's
two-variant read result.

Terminal restoration
--------------------
The reader snapshots the ``termios`` attributes of stdin when it is
created and :meth:`PromptToolkitLineReader.restore_terminal` writes
them back.  On platforms without ``termios`` or when stdin is not a
TTY there is nothing to restore and the call is a no-op.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

from typed_prompt.core.models import NO_ANSWER, Answered, ReadResult
from typed_prompt.exceptions import EnvironmentError


def _import_prompt_toolkit() -> tuple[type[Any], type[Any]]:
    """Import ``PromptSession`` and ``DummyHistory`` lazily."""
    try:
        from prompt_toolkit import PromptSession
        from prompt_toolkit.history import DummyHistory
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "prompt_toolkit is not installed. Install with: pip install prompt_toolkit",
        ) from exc
    return PromptSession, DummyHistory


def _snapshot_terminal(stream: TextIO) -> Any:
    """Return the current ``termios`` attributes of *stream*, or ``None``."""
    try:
        import termios
    except ModuleNotFoundError:
        return None

    try:
        if not stream.isatty():
            return None
        return termios.tcgetattr(stream.fileno())
    except (OSError, ValueError, termios.error):
        # Detached or closed stream: nothing we could restore later.
        return None


class PromptToolkitSession:
    """One prompt bound to a :class:`prompt_toolkit.PromptSession`."""

    def __init__(self, session: Any) -> None:
        self._session: Any = session

    def read(self) -> ReadResult:
        """Read one line.

        Ctrl-D on an empty line raises ``EOFError`` inside prompt_toolkit,
        which is reported as :data:`NO_ANSWER`.  ``KeyboardInterrupt``
        (Ctrl-C) propagates to the caller.
        """
        try:
            text: str = self._session.prompt()
        except EOFError:
            return NO_ANSWER
        return Answered(text)


class PromptToolkitLineReader:
    """Concrete :class:`LineReader` backed by prompt_toolkit.

    Usage::

        reader = PromptToolkitLineReader()
        try:
            session = reader.open_session(" + Name: ")
            result = session.read()
        finally:
            reader.restore_terminal()

    This class satisfies the :class:`~typed_prompt.core.protocols.LineReader`
    protocol structurally, without explicit inheritance.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream: TextIO = stream if stream is not None else sys.stdin
        self._saved_attrs: Any = _snapshot_terminal(self._stream)

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def open_session(self, prompt: str, history: Any = None) -> PromptToolkitSession:
        """Create a session showing *prompt*.

        With ``history=None`` a ``DummyHistory`` is used so that nothing
        typed at a question is offered back by later questions.
        """
        prompt_session_class, dummy_history_class = _import_prompt_toolkit()
        if history is None:
            history = dummy_history_class()
        session = prompt_session_class(message=prompt, history=history)
        return PromptToolkitSession(session)

    def restore_terminal(self) -> None:
        """Write back the terminal attributes captured at construction."""
        if self._saved_attrs is None:
            return

        import termios

        try:
            termios.tcsetattr(
                self._stream.fileno(),
                termios.TCSADRAIN,
                self._saved_attrs,
            )
        except (OSError, ValueError, termios.error):
            # The terminal went away (e.g. hang-up); nothing left to restore.
            return
