"""Theme names, their palettes, and the theme system the shell talks to.

Palettes name colours ("green", "black", ...) instead of curses constants,
so this module stays importable without a terminal. The curses front-end
resolves the names when it applies a palette.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from portfolio_shell.debug_log import DebugLogger
    from portfolio_shell.preferences import PreferenceStore

THEME_NAMES = ("dark", "matrix", "ubuntu", "dracula", "nord", "monokai")
DEFAULT_THEME = "dark"
PREFERENCE_KEY = "theme"


def is_theme_name(value: str) -> bool:
    return value.lower() in THEME_NAMES


@dataclass(frozen=True)
class Palette:
    text: str  # command lines and the live prompt text
    output: str
    accent: str  # prompt label
    error: str
    background: str = "default"


PALETTES: dict[str, Palette] = {
    "dark": Palette(text="white", output="white", accent="green", error="red"),
    "matrix": Palette(text="green", output="green", accent="green", error="red", background="black"),
    "ubuntu": Palette(text="white", output="white", accent="yellow", error="red", background="magenta"),
    "dracula": Palette(text="white", output="magenta", accent="cyan", error="red", background="black"),
    "nord": Palette(text="white", output="cyan", accent="blue", error="red", background="black"),
    "monokai": Palette(text="white", output="yellow", accent="green", error="magenta", background="black"),
}


class ThemeManager:
    """The external theme system: applies a palette and remembers the choice.

    Nothing here raises into the shell. An unreadable preference file
    is logged and ignored. A failed write is logged and persistence is
    switched off for the rest of the session, while the theme itself keeps
    working in memory.
    """

    def __init__(
        self,
        store: "PreferenceStore | None" = None,
        default: str = DEFAULT_THEME,
        on_change: Callable[[Palette], None] | None = None,
        logger: "DebugLogger | None" = None,
    ):
        self._store = store
        self._current = default.lower() if is_theme_name(default) else DEFAULT_THEME
        self.on_change = on_change
        self.logger = logger

    @property
    def current(self) -> str:
        return self._current

    @property
    def palette(self) -> Palette:
        return PALETTES[self._current]

    @property
    def persisting(self) -> bool:
        return self._store is not None

    def restore(self) -> str:
        """Adopt the stored preference when it names a known theme."""
        if self._store is None:
            return self._current
        try:
            stored = self._store.get(PREFERENCE_KEY)
        except (OSError, ValueError) as e:
            self._log(f"Preference read failed: {e}")
            return self._current
        if stored and is_theme_name(stored):
            self._current = stored.lower()
        return self._current

    def switch(self, name: str):
        """Switch to ``name`` (one of THEME_NAMES, any case)."""
        name = name.lower()
        if name not in THEME_NAMES:
            raise ValueError(f"Unknown theme: {name}")
        self._current = name
        self._log(f"Theme switched to {name}")
        self.apply()
        self._persist()

    def apply(self):
        if self.on_change is None:
            return
        try:
            self.on_change(self.palette)
        except Exception as e:
            self._log(f"Applying theme {self._current} failed: {e}")

    def _persist(self):
        if self._store is None:
            return
        try:
            self._store.set(PREFERENCE_KEY, self._current)
        except (OSError, ValueError) as e:
            self._log(f"Preference write failed, keeping theme in memory only: {e}")
            self._store = None

    def _log(self, text: str):
        if self.logger:
            self.logger.log_event(text)
