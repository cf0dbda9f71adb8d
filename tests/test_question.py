"""Tests for the :class:`Question` entry point (question.py).

A scripted reader and a list-backed diagnostics sink are injected, so
no terminal or console is involved.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from typed_prompt.core.bool_resolver import BoolResolver, english_synonym
from typed_prompt.core.models import FloatFormat, PromptConfig
from typed_prompt.exceptions import ConfigurationError
from typed_prompt.question import Question


def _question(reader, diagnostics, **config_overrides: object) -> Question:
    config = PromptConfig(**config_overrides)  # type: ignore[arg-type]
    return Question(config, reader=reader, diagnostics=diagnostics)


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

class TestConstruction:
    def test_default_tokens(self, make_reader, diagnostics) -> None:
        q = _question(make_reader(), diagnostics)
        assert (q.true_string, q.false_string) == ("y", "n")

    def test_tokens_are_lower_cased(self, make_reader, diagnostics) -> None:
        q = _question(make_reader(), diagnostics, true_string="YES", false_string="No")
        assert (q.true_string, q.false_string) == ("yes", "no")

    def test_unknown_true_token_is_fatal(self, make_reader, diagnostics) -> None:
        with pytest.raises(ConfigurationError, match="'true'"):
            _question(make_reader(), diagnostics, true_string="si")

    def test_unknown_false_token_is_fatal(self, make_reader, diagnostics) -> None:
        with pytest.raises(ConfigurationError, match="'false'"):
            _question(make_reader(), diagnostics, false_string="nein")

    def test_swapped_tokens_are_fatal(self, make_reader, diagnostics) -> None:
        with pytest.raises(ConfigurationError):
            _question(make_reader(), diagnostics, true_string="n", false_string="y")

    def test_extra_literals_make_tokens_valid(self, make_reader, diagnostics) -> None:
        q = _question(
            make_reader(),
            diagnostics,
            true_string="oui",
            false_string="non",
            extra_bool_strings={"oui": True, "non": False},
        )
        assert (q.true_string, q.false_string) == ("oui", "non")

    def test_custom_resolver(self, make_reader, diagnostics) -> None:
        with pytest.raises(ConfigurationError):
            Question(
                PromptConfig(true_string="1", false_string="0"),
                reader=make_reader(),
                diagnostics=diagnostics,
                resolver=BoolResolver([english_synonym]),
            )

    def test_default_collaborators(self) -> None:
        with patch("typed_prompt.infra.terminal_reader._snapshot_terminal", return_value=None):
            q = Question()
        from typed_prompt.infra.console import ConsoleDiagnostics
        from typed_prompt.infra.terminal_reader import PromptToolkitLineReader

        assert isinstance(q._reader, PromptToolkitLineReader)
        assert isinstance(q._diagnostics, ConsoleDiagnostics)


# ---------------------------------------------------------------------------
# Prompt rendering through the readers
# ---------------------------------------------------------------------------

class TestPrompts:
    def test_string_without_default(self, make_reader, diagnostics) -> None:
        reader = make_reader("x")
        _question(reader, diagnostics).read_string("Name")
        assert reader.prompts == [" + Name: "]

    def test_string_with_default(self, make_reader, diagnostics) -> None:
        reader = make_reader("")
        assert _question(reader, diagnostics).read_string("Name", "bob") == "bob"
        assert reader.prompts == [" + Name [bob]: "]

    def test_empty_string_default_is_a_default(self, make_reader, diagnostics) -> None:
        reader = make_reader("")
        assert _question(reader, diagnostics).read_string("Name", "") == ""
        assert reader.prompts == [" + Name []: "]

    def test_int_with_default(self, make_reader, diagnostics) -> None:
        reader = make_reader("")
        assert _question(reader, diagnostics).read_int("Port", 8080) == 8080
        assert reader.prompts == [" + Port [8080]: "]

    def test_question_mark(self, make_reader, diagnostics) -> None:
        reader = make_reader("3")
        _question(reader, diagnostics).read_int("How many?")
        assert reader.prompts == [" + How many? "]

    def test_bool_default_true(self, make_reader, diagnostics) -> None:
        reader = make_reader("")
        assert _question(reader, diagnostics).read_bool("Continue?", True) is True
        assert reader.prompts == [" + Continue? [Y/n]: "]

    def test_bool_default_false(self, make_reader, diagnostics) -> None:
        reader = make_reader("")
        assert _question(reader, diagnostics).read_bool("Continue?", False) is False
        assert reader.prompts == [" + Continue? [y/N]: "]

    def test_bool_uses_lower_cased_tokens(self, make_reader, diagnostics) -> None:
        reader = make_reader("")
        q = _question(reader, diagnostics, true_string="YES", false_string="NO")
        q.read_bool("Sure?", False)
        assert reader.prompts == [" + Sure? [yes/NO]: "]

    def test_custom_prefix(self, make_reader, diagnostics) -> None:
        reader = make_reader("x")
        _question(reader, diagnostics, question_prefix="? ").read_string("Name")
        assert reader.prompts == ["? Name: "]


# ---------------------------------------------------------------------------
# Float default rendering vs parsing
# ---------------------------------------------------------------------------

class TestFloatFormatting:
    def test_shortest_default(self, make_reader, diagnostics) -> None:
        reader = make_reader("")
        assert _question(reader, diagnostics).read_float("Ratio", 0.5) == 0.5
        assert reader.prompts == [" + Ratio [0.5]: "]

    def test_precision_only_affects_display(self, make_reader, diagnostics) -> None:
        reader = make_reader("", "3.14159")
        q = _question(
            reader, diagnostics, float_format=FloatFormat.FIXED, float_precision=2,
        )
        assert q.read_float("Pi", 3.14159) == 3.14159
        assert reader.prompts == [" + Pi [3.14]: "]

    def test_parsing_ignores_format(self, make_reader, diagnostics) -> None:
        reader = make_reader("1.23456789e2")
        q = _question(
            reader, diagnostics, float_format=FloatFormat.FIXED, float_precision=1,
        )
        assert q.read_float("X", 1.0) == 123.456789
        assert reader.prompts == [" + X [1.0]: "]

    def test_scientific_default(self, make_reader, diagnostics) -> None:
        reader = make_reader("")
        q = _question(
            reader, diagnostics, float_format="e", float_precision=2,
        )
        q.read_float("X", 1500.0)
        assert reader.prompts == [" + X [1.50e+03]: "]


# ---------------------------------------------------------------------------
# Answers and retries
# ---------------------------------------------------------------------------

class TestAnswers:
    def test_int_retry(self, make_reader, diagnostics) -> None:
        reader = make_reader("abc", "42")
        assert _question(reader, diagnostics).read_int("Age") == 42
        assert diagnostics.lines == ['  "abc": value has to be an integer']

    def test_error_prefix_from_config(self, make_reader, diagnostics) -> None:
        reader = make_reader("x", "1.5")
        _question(reader, diagnostics, error_prefix="error: ").read_float("R")
        assert diagnostics.lines == ['error: "x": value has to be a float']

    def test_bool_extra_literal(self, make_reader, diagnostics) -> None:
        reader = make_reader("non")
        q = _question(reader, diagnostics, extra_bool_strings={"non": False})
        assert q.read_bool("Continuer?", True) is False

    def test_bool_retry(self, make_reader, diagnostics) -> None:
        reader = make_reader("maybe", "Y")
        assert _question(reader, diagnostics).read_bool("Go?", False) is True
        assert diagnostics.lines == ['  "maybe": does not represent a boolean']

    @pytest.mark.parametrize(
        ("method", "args", "zero"),
        [
            ("read_string", ("Name", "bob"), ""),
            ("read_int", ("Age", 3), 0),
            ("read_float", ("Ratio", 0.5), 0.0),
            ("read_bool", ("Go?", True), False),
        ],
    )
    def test_end_of_input(self, make_reader, diagnostics, method, args, zero) -> None:
        reader = make_reader(None)
        q = _question(reader, diagnostics)
        assert getattr(q, method)(*args) == zero
        assert diagnostics.lines == []

    def test_each_call_opens_own_session(self, make_reader, diagnostics) -> None:
        reader = make_reader("a", "1")
        q = _question(reader, diagnostics)
        q.read_string("A")
        q.read_int("B")
        assert reader.prompts == [" + A: ", " + B: "]


# ---------------------------------------------------------------------------
# Terminal restore
# ---------------------------------------------------------------------------

class TestRestoreTerminal:
    def test_delegates_to_reader(self, make_reader, diagnostics) -> None:
        reader = make_reader()
        q = _question(reader, diagnostics)
        q.restore_terminal()
        q.restore_terminal()
        assert reader.restore_calls == 2

    def test_context_manager_restores(self, make_reader, diagnostics) -> None:
        reader = make_reader("x")
        with _question(reader, diagnostics) as q:
            q.read_string("Name")
        assert reader.restore_calls == 1

    def test_context_manager_restores_on_error(self, make_reader, diagnostics) -> None:
        reader = make_reader()
        with pytest.raises(RuntimeError):
            with _question(reader, diagnostics):
                raise RuntimeError("boom")
        assert reader.restore_calls == 1
