from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from portfolio_shell.registry import CommandRegistry

if TYPE_CHECKING:
    from portfolio_shell.commands import CommandContext


@dataclass(frozen=True)
class Replacement:
    """A unique match: the new buffer text and where the cursor goes."""

    text: str
    cursor: int


@dataclass(frozen=True)
class Suggestions:
    """Several matches. The buffer stays as it is."""

    candidates: tuple[str, ...]

    def line(self) -> str:
        return "  ".join(self.candidates)


Completion = Replacement | Suggestions


class Autocompleter:
    """Tab completion for command names and registered argument completers."""

    def __init__(self, registry: CommandRegistry):
        self.registry = registry

    def complete(self, buffer: str, ctx: "CommandContext") -> Completion | None:
        text = buffer.strip()
        if not text:
            return None
        parts = text.split(None, 1)
        head = parts[0].lower()

        if len(parts) == 1:
            match = _resolve(self.registry.names, head)
            if isinstance(match, str):
                return _replacement(match + " ")
            return match

        completer = self.registry.completer_for(head)
        if completer is None:
            return None
        match = _resolve(completer(ctx), parts[1].strip().lower())
        if isinstance(match, str):
            return _replacement(f"{head} {match}")
        return match


def _resolve(candidates: list[str], partial: str) -> str | Suggestions | None:
    """One match -> the match, several -> Suggestions, none -> None."""
    matches = [c for c in candidates if c.lower().startswith(partial)]
    if not matches:
        return None
    if len(matches) == 1:
        return matches[0]
    return Suggestions(tuple(matches))


def _replacement(text: str) -> Replacement:
    return Replacement(text=text, cursor=len(text))
