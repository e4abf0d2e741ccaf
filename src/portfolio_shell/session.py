from __future__ import annotations

from portfolio_shell.history import CommandHistory
from portfolio_shell.input_buffer import InputBuffer
from portfolio_shell.navigator import HOME, VirtualPath
from portfolio_shell.types import Line, LineKind


class SessionState:
    """Everything one interactive session owns.

    Scrollback and command history are separate logs: clearing the screen
    leaves history intact. Only the Interpreter (and the command handlers it
    hands a context to) mutate a session, through the methods below.
    """

    def __init__(self, welcome: list[str] | None = None):
        self._scrollback: list[Line] = []
        self.history = CommandHistory()
        self.buffer = InputBuffer()
        self._path: VirtualPath = HOME
        for text in welcome or []:
            self.append(LineKind.OUTPUT, text)

    @property
    def scrollback(self) -> tuple[Line, ...]:
        return tuple(self._scrollback)

    @property
    def path(self) -> VirtualPath:
        return self._path

    def append(self, kind: LineKind, text: str, path: str | None = None) -> Line:
        line = Line(kind=kind, text=text, path=path)
        self._scrollback.append(line)
        return line

    def clear_scrollback(self):
        self._scrollback = []

    def change_path(self, path: VirtualPath):
        self._path = path
