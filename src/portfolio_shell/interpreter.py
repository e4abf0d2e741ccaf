"""The shell's single orchestrator.

The Interpreter turns logical input events (submit, recall, cursor motion,
completion, editing) into SessionState changes. Nothing raised by a command
escapes ``submit``; every input ends up as lines in the scrollback.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from portfolio_shell.autocomplete import Autocompleter, Completion, Replacement, Suggestions
from portfolio_shell.commands import CommandContext, build_registry
from portfolio_shell.navigator import Navigator
from portfolio_shell.portfolio import Portfolio
from portfolio_shell.registry import CommandRegistry
from portfolio_shell.session import SessionState
from portfolio_shell.types import LineKind

if TYPE_CHECKING:
    from portfolio_shell.debug_log import DebugLogger


def not_found_message(name: str) -> str:
    return f"Command not found: {name}. Type 'help' for available commands."


class Interpreter:
    def __init__(
        self,
        session: SessionState,
        registry: CommandRegistry,
        navigator: Navigator,
        switch_theme: Callable[[str], None],
        current_theme: Callable[[], str],
        lowercase_arguments: bool = False,
        logger: "DebugLogger | None" = None,
    ):
        self.session = session
        self.registry = registry
        self.lowercase_arguments = lowercase_arguments
        self.logger = logger
        self.context = CommandContext(
            session=session,
            navigator=navigator,
            portfolio=navigator.portfolio,
            registry=registry,
            switch_theme=switch_theme,
            current_theme=current_theme,
        )
        self.autocompleter = Autocompleter(registry)

    # --- Submission ---

    def submit(self, raw: str):
        """Run one command line and append its results to the scrollback."""
        text = raw.strip()
        if not text:
            return

        session = self.session
        session.history.add(text)
        path = str(session.path)
        session.append(LineKind.COMMAND, text, path=path)
        if self.logger:
            self.logger.log_command(path, text)

        source = text.lower() if self.lowercase_arguments else text
        name, *args = source.split()
        name = name.lower()

        command = self.registry.get(name)
        if command is None:
            session.append(LineKind.ERROR, not_found_message(name))
            return

        try:
            output = command.handler(self.context, args)
        except Exception as e:
            session.append(LineKind.ERROR, f"{name}: {e}")
            if self.logger:
                self.logger.log_event(f"Command '{name}' failed: {e!r}")
            return

        for line in output:
            session.append(LineKind.OUTPUT, line)

    def submit_buffer(self):
        """Submit whatever is in the input buffer, leaving it empty."""
        self.submit(self.session.buffer.take())

    # --- History recall ---

    def recall_previous(self) -> str | None:
        entry = self.session.history.previous()
        if entry is not None:
            self.session.buffer.replace(entry)
        return entry

    def recall_next(self) -> str | None:
        entry = self.session.history.next()
        if entry is not None:
            self.session.buffer.replace(entry)
        return entry

    # --- Cursor and editing ---

    def cursor_left(self):
        self.session.buffer.move_left()

    def cursor_right(self):
        self.session.buffer.move_right()

    def cursor_home(self):
        self.session.buffer.move_home()

    def cursor_end(self):
        self.session.buffer.move_end()

    def word_left(self):
        self.session.buffer.move_word_left()

    def word_right(self):
        self.session.buffer.move_word_right()

    def insert(self, chars: str):
        self.session.buffer.insert(chars)

    def backspace(self):
        self.session.buffer.backspace()

    def delete(self):
        self.session.buffer.delete()

    def kill_word_back(self):
        self.session.buffer.kill_word_back()

    def kill_to_start(self):
        self.session.buffer.kill_to_start()

    def kill_to_end(self):
        self.session.buffer.kill_to_end()

    # --- Completion ---

    def autocomplete(self) -> Completion | None:
        """Complete the buffer in place, or list the candidates in the scrollback."""
        result = self.autocompleter.complete(self.session.buffer.text, self.context)
        if isinstance(result, Replacement):
            self.session.buffer.replace(result.text, result.cursor)
        elif isinstance(result, Suggestions):
            self.session.append(LineKind.OUTPUT, result.line())
        if result is not None and self.logger:
            self.logger.log_event(f"Completion: {result}")
        return result


def create_interpreter(
    portfolio: Portfolio,
    switch_theme: Callable[[str], None],
    current_theme: Callable[[], str],
    welcome: list[str] | None = None,
    lowercase_arguments: bool = False,
    logger: "DebugLogger | None" = None,
) -> Interpreter:
    """Build a fresh session with the built-in commands."""
    return Interpreter(
        SessionState(welcome=welcome),
        build_registry(),
        Navigator(portfolio),
        switch_theme=switch_theme,
        current_theme=current_theme,
        lowercase_arguments=lowercase_arguments,
        logger=logger,
    )
