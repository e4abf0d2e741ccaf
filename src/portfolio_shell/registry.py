"""Command table: lowercase name -> handler, plus argument completers.

No terminal or curses imports. Handlers and completers receive the
CommandContext explicitly, so everything a command can touch is visible
in its signature.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterator

if TYPE_CHECKING:
    from portfolio_shell.commands import CommandContext

Handler = Callable[["CommandContext", list[str]], list[str]]
Completer = Callable[["CommandContext"], list[str]]


@dataclass
class Command:
    name: str
    handler: Handler
    summary: str = ""
    usage: str = ""


class CommandRegistry:
    def __init__(self):
        self._commands: dict[str, Command] = {}
        self._completers: dict[str, Completer] = {}

    def register(self, name: str, handler: Handler, summary: str = "", usage: str = "") -> Command:
        """Add (or replace) a command. Names are stored lowercase."""
        key = name.lower()
        cmd = Command(name=key, handler=handler, summary=summary, usage=usage or key)
        self._commands[key] = cmd
        return cmd

    def register_completer(self, name: str, completer: Completer):
        """Provide argument candidates for ``name``'s first argument."""
        self._completers[name.lower()] = completer

    def get(self, name: str) -> Command | None:
        return self._commands.get(name.lower())

    def completer_for(self, name: str) -> Completer | None:
        return self._completers.get(name.lower())

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._commands

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)

    @property
    def names(self) -> list[str]:
        """Registered names, in registration order."""
        return list(self._commands)
