"""Infrastructure layer — terminal and console integration.

This layer wraps prompt_toolkit (line editing, raw mode), ``termios``
(terminal state) and Rich (stderr output).

Rules
-----
* No imports from ``cli``.
* Must expose clean, typed interfaces consumed by the core layer.
"""

from typed_prompt.infra.console import ConsoleDiagnostics, console, get_rich_console
from typed_prompt.infra.terminal_reader import PromptToolkitLineReader, PromptToolkitSession

__all__: list[str] = [
    "ConsoleDiagnostics",
    "PromptToolkitLineReader",
    "PromptToolkitSession",
    "console",
    "get_rich_console",
]
