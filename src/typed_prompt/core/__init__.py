"""Core layer — prompt rendering, boolean resolution and retry loops.

Rules
-----
* No ``print()`` calls; diagnostics go through a ``DiagnosticSink``.
* No terminal access; lines come from a ``LineReader``.
* No imports from ``cli`` or ``infra``.
"""

from typed_prompt.core.bool_resolver import BoolResolver, ExtraLiteral
from typed_prompt.core.models import (
    DEFAULT_CONFIG,
    NO_ANSWER,
    Answered,
    FloatFormat,
    NoAnswer,
    PromptConfig,
    ReadResult,
)
from typed_prompt.core.prompt_builder import build_prompt, format_bool_options, format_float
from typed_prompt.core.protocols import DiagnosticSink, LineReader, LineSession
from typed_prompt.core.readers import read_typed

__all__: list[str] = [
    "DEFAULT_CONFIG",
    "NO_ANSWER",
    "Answered",
    "BoolResolver",
    "DiagnosticSink",
    "ExtraLiteral",
    "FloatFormat",
    "LineReader",
    "LineSession",
    "NoAnswer",
    "PromptConfig",
    "ReadResult",
    "build_prompt",
    "format_bool_options",
    "format_float",
    "read_typed",
]
