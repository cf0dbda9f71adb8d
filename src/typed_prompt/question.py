"""The :class:`Question` entry point.

A ``Question`` captures one :class:`~typed_prompt.core.models.PromptConfig`
for the whole interactive session, checks that its true/false tokens are
real boolean literals, and exposes one method per answer type.

Usage::

    with Question() as q:
        name = q.read_string("Name")
        age = q.read_int("Age", default=30)
        ok = q.read_bool("Continue?", default=True)

Leaving the ``with`` block restores the terminal, on every exit path.
"""

from __future__ import annotations

from typing import TypeVar

from typed_prompt.core.bool_resolver import BoolResolver
from typed_prompt.core.models import DEFAULT_CONFIG, PromptConfig
from typed_prompt.core.prompt_builder import build_prompt, format_bool_options, format_float
from typed_prompt.core.protocols import DiagnosticSink, LineReader
from typed_prompt.core.readers import FLOAT, INTEGER, STRING, TypeSpec, boolean_spec, read_typed
from typed_prompt.exceptions import ConfigurationError

T = TypeVar("T")


class Question:
    """Ask typed questions on a terminal.

    Parameters
    ----------
    config:
        Session settings.  Captured here; later changes need a new
        ``Question``.
    reader:
        Line-editing backend.  Defaults to
        :class:`~typed_prompt.infra.terminal_reader.PromptToolkitLineReader`.
    diagnostics:
        Destination of validation-failure messages.  Defaults to
        :class:`~typed_prompt.infra.console.ConsoleDiagnostics` (stderr).
    resolver:
        Boolean literal resolver.  Defaults to the standard chain for
        *config*.

    Raises
    ------
    ConfigurationError
        If ``config.true_string`` does not resolve to ``True`` or
        ``config.false_string`` does not resolve to ``False``.
    """

    def __init__(
        self,
        config: PromptConfig = DEFAULT_CONFIG,
        *,
        reader: LineReader | None = None,
        diagnostics: DiagnosticSink | None = None,
        resolver: BoolResolver | None = None,
    ) -> None:
        self._config: PromptConfig = config
        self._resolver: BoolResolver = (
            resolver if resolver is not None else BoolResolver.from_config(config)
        )

        self._check_token(config.true_string, True)
        self._check_token(config.false_string, False)
        self.true_string: str = config.true_string.lower()
        self.false_string: str = config.false_string.lower()

        if reader is None:
            from typed_prompt.infra.terminal_reader import PromptToolkitLineReader

            reader = PromptToolkitLineReader()
        if diagnostics is None:
            from typed_prompt.infra.console import ConsoleDiagnostics

            diagnostics = ConsoleDiagnostics()

        self._reader: LineReader = reader
        self._diagnostics: DiagnosticSink = diagnostics

    def _check_token(self, token: str, expected: bool) -> None:
        if self._resolver.resolve(token) is not expected:
            word = "true" if expected else "false"
            raise ConfigurationError(
                f"the string {token!r} does not represent a boolean '{word}'",
                hint="Use a literal such as 'y'/'n', 'yes'/'no', or register it "
                "in extra_bool_strings.",
            )

    @property
    def config(self) -> PromptConfig:
        return self._config

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def restore_terminal(self) -> None:
        """Restore terminal settings (idempotent)."""
        self._reader.restore_terminal()

    def __enter__(self) -> Question:
        return self

    def __exit__(self, *_args: object) -> None:
        self.restore_terminal()

    # ------------------------------------------------------------------
    # Typed readers
    # ------------------------------------------------------------------

    def _ask(
        self,
        question: str,
        spec: TypeSpec[T],
        default: T | None,
        default_display: str,
    ) -> T:
        has_default = default is not None
        prompt = build_prompt(
            self._config.question_prefix,
            question,
            default_display,
            has_default,
        )
        return read_typed(
            self._reader,
            self._diagnostics,
            prompt,
            spec,
            default=default,
            has_default=has_default,
            error_prefix=self._config.error_prefix,
        )

    def read_string(self, question: str, default: str | None = None) -> str:
        """Ask until Return is pressed.

        An empty line yields *default* when given, else ``""``.
        """
        return self._ask(question, STRING, default, default or "")

    def read_int(self, question: str, default: int | None = None) -> int:
        """Ask until an integer is entered.

        An empty line yields *default* when given; otherwise it is
        rejected like any other non-integer.
        """
        display = str(default) if default is not None else ""
        return self._ask(question, INTEGER, default, display)

    def read_float(self, question: str, default: float | None = None) -> float:
        """Ask until a float is entered.

        The configured float format and precision only affect how
        *default* is displayed.
        """
        display = ""
        if default is not None:
            display = format_float(
                default,
                self._config.float_format,
                self._config.float_precision,
            )
        return self._ask(question, FLOAT, default, display)

    def read_bool(self, question: str, default: bool) -> bool:
        """Ask until a boolean literal is entered; an empty line is *default*."""
        options = format_bool_options(self.true_string, self.false_string, default)
        return self._ask(question, boolean_spec(self._resolver.resolve), default, options)
