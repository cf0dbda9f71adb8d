"""Shared pytest fixtures and configuration for the typed-prompt test suite.

Guidelines
----------
* No real terminal in any test.
* prompt_toolkit must be mocked at the infra boundary.
* Core tests drive the retry loops through :class:`ScriptedReader`.
"""

from __future__ import annotations

from collections.abc import Iterable

import pytest

from typed_prompt.core.models import NO_ANSWER, Answered, ReadResult


class ScriptedSession:
    """Replays a fixed sequence of read results."""

    def __init__(self, results: list[ReadResult]) -> None:
        self._results = results
        self.reads: int = 0

    def read(self) -> ReadResult:
        if not self._results:
            raise AssertionError("read() called more times than scripted")
        self.reads += 1
        return self._results.pop(0)


class ScriptedReader:
    """``LineReader`` fake; plain strings are shorthand for ``Answered``.

    ``None`` in the script stands for end-of-input.
    """

    def __init__(self, lines: Iterable[str | None] = ()) -> None:
        self._results: list[ReadResult] = [
            NO_ANSWER if line is None else Answered(line) for line in lines
        ]
        self.prompts: list[str] = []
        self.histories: list[object] = []
        self.sessions: list[ScriptedSession] = []
        self.restore_calls: int = 0

    def open_session(self, prompt: str, history: object = None) -> ScriptedSession:
        self.prompts.append(prompt)
        self.histories.append(history)
        session = ScriptedSession(self._results)
        self.sessions.append(session)
        return session

    def restore_terminal(self) -> None:
        self.restore_calls += 1

    @property
    def remaining(self) -> int:
        return len(self._results)


class ListDiagnostics:
    """``DiagnosticSink`` fake collecting lines."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def write(self, line: str) -> None:
        self.lines.append(line)


@pytest.fixture
def diagnostics() -> ListDiagnostics:
    return ListDiagnostics()


@pytest.fixture
def make_reader():
    """Factory fixture: ``make_reader("abc", "42")``."""

    def _make(*lines: str | None) -> ScriptedReader:
        return ScriptedReader(lines)

    return _make
