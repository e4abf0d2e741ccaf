from __future__ import annotations

import time
from pathlib import Path

from portfolio_shell.types import ts_str


class DebugLogger:
    """Manages optional debug log files for submitted commands and shell events."""

    COMMANDS_FILE = "shell_commands.log"
    EVENTS_FILE = "shell_events.log"

    def __init__(self, directory: Path | str = "."):
        self.enabled = False
        self.directory = Path(directory)
        self._commands_fh = None
        self._events_fh = None

    def start(self):
        self._commands_fh = open(self.directory / self.COMMANDS_FILE, "a", encoding="utf-8")
        self._events_fh = open(self.directory / self.EVENTS_FILE, "a", encoding="utf-8")
        self.enabled = True
        sep = f"\n{'='*60}\n  Session started: {time.strftime('%Y-%m-%d %H:%M:%S')}\n{'='*60}\n"
        for fh in (self._commands_fh, self._events_fh):
            fh.write(sep)
            fh.flush()

    def stop(self):
        self.enabled = False
        for fh in (self._commands_fh, self._events_fh):
            if fh:
                try:
                    fh.close()
                except OSError:
                    pass
        self._commands_fh = self._events_fh = None

    def toggle(self) -> bool:
        if self.enabled:
            self.stop()
        else:
            self.start()
        return self.enabled

    def log_command(self, path: str, text: str):
        if not self.enabled or not self._commands_fh:
            return
        self._commands_fh.write(f"{ts_str(time.time())} {path:>20} $ {text}\n")
        self._commands_fh.flush()

    def log_event(self, text: str):
        if not self.enabled or not self._events_fh:
            return
        for line in text.split("\n"):
            self._events_fh.write(f"{ts_str(time.time())} | {line}\n")
        self._events_fh.flush()
