"""Boolean literal resolution.

Pipeline order (enforced by :class:`BoolResolver`), first match wins:

1. **Canonical literals** — ``1/t/T/TRUE/true/True`` and their false
   counterparts, case as given.
2. **English synonyms** — ``y/Y/yes/YES/Yes`` and ``n/N/no/NO/No``.
3. **Extra literals** — the caller's mapping, exact key, no case folding.

Every strategy is a pure ``str -> bool | None`` callable; ``None`` means
"not mine, ask the next one".
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping

from typed_prompt.core.models import PromptConfig

BoolStrategy = Callable[[str], "bool | None"]

_CANONICAL: dict[str, bool] = {
    "1": True, "t": True, "T": True, "TRUE": True, "true": True, "True": True,
    "0": False, "f": False, "F": False, "FALSE": False, "false": False, "False": False,
}

_SYNONYMS: dict[str, bool] = {
    "y": True, "Y": True, "yes": True, "YES": True, "Yes": True,
    "n": False, "N": False, "no": False, "NO": False, "No": False,
}


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

def canonical_literal(text: str) -> bool | None:
    """Resolve the standard boolean literals."""
    return _CANONICAL.get(text)


def english_synonym(text: str) -> bool | None:
    """Resolve the fixed yes/no spellings."""
    return _SYNONYMS.get(text)


class ExtraLiteral:
    """Resolve literals from a caller-supplied table (other locales, etc.)."""

    def __init__(self, mapping: Mapping[str, bool]) -> None:
        self._mapping: Mapping[str, bool] = mapping

    def __call__(self, text: str) -> bool | None:
        return self._mapping.get(text)


# ---------------------------------------------------------------------------
# Composite resolver
# ---------------------------------------------------------------------------

class BoolResolver:
    """Ordered chain of boolean strategies.

    Usage::

        resolver = BoolResolver.from_config(config)
        resolver.resolve("Yes")    # True
        resolver.resolve("maybe")  # None
    """

    def __init__(self, strategies: Iterable[BoolStrategy]) -> None:
        self._strategies: tuple[BoolStrategy, ...] = tuple(strategies)

    @classmethod
    def from_config(cls, config: PromptConfig) -> BoolResolver:
        """Build the standard three-tier chain for *config*."""
        return cls(
            (
                canonical_literal,
                english_synonym,
                ExtraLiteral(config.extra_bool_strings),
            )
        )

    def resolve(self, text: str) -> bool | None:
        """Return the boolean *text* stands for, or ``None``."""
        for strategy in self._strategies:
            value = strategy(text)
            if value is not None:
                return value
        return None

    __call__ = resolve
