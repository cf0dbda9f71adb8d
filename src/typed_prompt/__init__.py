"""typed-prompt — typed, validated questions on an interactive terminal.

Built on prompt_toolkit for line editing, with a small pure core that
renders prompts, resolves boolean literals and runs the retry loops.
"""

from typed_prompt.core.bool_resolver import BoolResolver
from typed_prompt.core.models import DEFAULT_CONFIG, FloatFormat, PromptConfig
from typed_prompt.question import Question
from typed_prompt.version import __version__

__all__: list[str] = [
    "DEFAULT_CONFIG",
    "BoolResolver",
    "FloatFormat",
    "PromptConfig",
    "Question",
    "__version__",
]
