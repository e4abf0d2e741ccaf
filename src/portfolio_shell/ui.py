from __future__ import annotations

import curses
from typing import TYPE_CHECKING

from portfolio_shell.navigator import prompt_string
from portfolio_shell.types import Line, LineKind

if TYPE_CHECKING:
    from portfolio_shell.config import PromptConfig
    from portfolio_shell.debug_log import DebugLogger
    from portfolio_shell.interpreter import Interpreter
    from portfolio_shell.themes import Palette, ThemeManager

PAIR_TEXT = 1
PAIR_OUTPUT = 2
PAIR_ACCENT = 3
PAIR_ERROR = 4

_KIND_PAIRS = {
    LineKind.COMMAND: PAIR_TEXT,
    LineKind.OUTPUT: PAIR_OUTPUT,
    LineKind.ERROR: PAIR_ERROR,
}


def _color(name: str) -> int:
    """Resolve a palette colour name; 'default' is the terminal's own colour."""
    if name == "default":
        return -1
    return getattr(curses, f"COLOR_{name.upper()}", -1)


def _hard_wrap(text: str, width: int) -> list[str]:
    if width <= 0 or len(text) <= width:
        return [text]
    return [text[i : i + width] for i in range(0, len(text), width)]


class ShellUI:
    """Curses presentation of a shell session.

    Reads the session (scrollback, buffer, path) and turns keys into
    Interpreter calls. It never writes scrollback itself.
    """

    def __init__(
        self,
        stdscr,
        interpreter: "Interpreter",
        themes: "ThemeManager",
        prompt: "PromptConfig",
        color: bool = True,
        debug_logger: "DebugLogger | None" = None,
    ):
        self.stdscr = stdscr
        self.interpreter = interpreter
        self.session = interpreter.session
        self.themes = themes
        self.prompt = prompt
        self.color_enabled = color
        self.debug_logger = debug_logger

        # 0 = pinned to bottom, >0 = rows scrolled up
        self._scroll = 0
        self._output_h = 1

        curses.curs_set(1)
        if color:
            curses.start_color()
            curses.use_default_colors()
            themes.on_change = self.apply_palette
            themes.apply()
        self.stdscr.timeout(50)
        self.stdscr.keypad(True)

    def apply_palette(self, palette: "Palette"):
        bg = _color(palette.background)
        for pair, fg in (
            (PAIR_TEXT, palette.text),
            (PAIR_OUTPUT, palette.output),
            (PAIR_ACCENT, palette.accent),
            (PAIR_ERROR, palette.error),
        ):
            try:
                curses.init_pair(pair, _color(fg), bg)
            except curses.error:
                pass
        self.stdscr.bkgd(" ", curses.color_pair(PAIR_OUTPUT))

    def _attr(self, pair: int, bold: bool = False) -> int:
        attr = curses.color_pair(pair) if self.color_enabled else 0
        return attr | curses.A_BOLD if bold else attr

    def _prompt(self, path) -> str:
        return prompt_string(self.prompt.user, self.prompt.host, path)

    # --- Drawing ---

    def _rows(self, lines: tuple[Line, ...], width: int) -> list[list[tuple[str, int]]]:
        """Split scrollback lines into screen rows of (text, attr) segments."""
        rows = []
        for line in lines:
            prefix = self._prompt(line.path) if line.kind == LineKind.COMMAND else ""
            body_attr = self._attr(_KIND_PAIRS[line.kind])
            consumed = 0
            for chunk in _hard_wrap(prefix + line.text, width):
                split = max(0, min(len(chunk), len(prefix) - consumed))
                segments = []
                if split:
                    segments.append((chunk[:split], self._attr(PAIR_ACCENT, bold=True)))
                if chunk[split:]:
                    segments.append((chunk[split:], body_attr))
                rows.append(segments)
                consumed += len(chunk)
        return rows

    def _draw_output(self, win):
        win.erase()
        h, w = win.getmaxyx()
        rows = self._rows(self.session.scrollback, w - 1)
        self._scroll = min(self._scroll, max(0, len(rows) - h))
        end = len(rows) - self._scroll
        start = max(0, end - h)
        for y, segments in enumerate(rows[start:end]):
            x = 0
            for text, attr in segments:
                try:
                    win.addnstr(y, x, text, w - 1 - x, attr)
                except curses.error:
                    pass
                x += len(text)
        win.noutrefresh()

    def _draw_input(self, win) -> int:
        """Draw the live prompt; returns the cursor column."""
        win.erase()
        _, w = win.getmaxyx()
        label = self._prompt(self.session.path)
        text = self.session.buffer.text
        cursor_in_full = len(label) + self.session.buffer.cursor
        max_visible = w - 1
        # Slide the window so the cursor stays visible
        scroll_off = max(0, cursor_in_full - max_visible + 1)
        full = label + text
        shown = full[scroll_off : scroll_off + max_visible]
        label_shown = max(0, len(label) - scroll_off)
        try:
            win.addnstr(0, 0, shown[:label_shown], max_visible, self._attr(PAIR_ACCENT, bold=True))
            if len(shown) > label_shown:
                win.addnstr(0, label_shown, shown[label_shown:], max_visible - label_shown, self._attr(PAIR_TEXT))
        except curses.error:
            pass
        win.noutrefresh()
        return cursor_in_full - scroll_off

    def _status_text(self) -> str:
        status = f"Tab complete | PgUp/PgDn scroll | Ctrl+D quit | theme: {self.themes.current}"
        if self.debug_logger and self.debug_logger.enabled:
            status += " | DBG"
        if self._scroll > 0:
            status += f" | SCROLL +{self._scroll}"
        return status

    def draw(self):
        h, w = self.stdscr.getmaxyx()
        out_h = max(1, h - 2)
        out_win = curses.newwin(out_h, w, 0, 0)
        input_win = curses.newwin(1, w, h - 2, 0)
        status_win = curses.newwin(1, w, h - 1, 0)
        self._output_h = out_h

        self._draw_output(out_win)
        cursor_x = self._draw_input(input_win)

        status_win.erase()
        try:
            status_win.addnstr(0, 0, self._status_text(), w - 1, curses.A_REVERSE)
        except curses.error:
            pass
        status_win.noutrefresh()

        try:
            self.stdscr.move(h - 2, cursor_x)
        except curses.error:
            pass
        curses.doupdate()

    # --- Input ---

    def _scroll_up(self):
        self._scroll += max(1, self._output_h - 1)

    def _scroll_down(self):
        self._scroll = max(0, self._scroll - max(1, self._output_h - 1))

    def read_key(self) -> int | str:
        """Next key: a key code, or one decoded character. -1 on timeout."""
        try:
            ch = self.stdscr.get_wch()
        except curses.error:
            return -1
        # Control characters come back as str; dispatch goes by code
        if isinstance(ch, str) and (ord(ch) < 32 or ord(ch) == 127):
            return ord(ch)
        return ch

    def handle_key(self, ch: int | str) -> bool:
        """Dispatch one key. Returns True when the user asked to quit."""
        if isinstance(ch, str):
            if ch.isprintable():
                self.interpreter.insert(ch)
            return False
        if ch == -1 or ch == curses.KEY_RESIZE:
            return False

        shell = self.interpreter

        if ch in (curses.KEY_ENTER, 10, 13):
            shell.submit_buffer()
            self._scroll = 0
            return False

        if ch == 4:  # Ctrl+D
            return True

        if ch == curses.KEY_PPAGE:
            self._scroll_up()
            return False
        if ch == curses.KEY_NPAGE:
            self._scroll_down()
            return False

        if ch == curses.KEY_UP:
            shell.recall_previous()
            return False
        if ch == curses.KEY_DOWN:
            shell.recall_next()
            return False

        if ch == 9:  # Tab
            shell.autocomplete()
            return False

        if ch == 12:  # Ctrl+L
            if self.debug_logger:
                self.debug_logger.toggle()
            return False

        key_actions = {
            curses.KEY_LEFT: shell.cursor_left,
            curses.KEY_RIGHT: shell.cursor_right,
            curses.KEY_HOME: shell.cursor_home,
            1: shell.cursor_home,  # Ctrl+A
            curses.KEY_END: shell.cursor_end,
            5: shell.cursor_end,  # Ctrl+E
            curses.KEY_BACKSPACE: shell.backspace,
            127: shell.backspace,
            8: shell.backspace,
            curses.KEY_DC: shell.delete,
            23: shell.kill_word_back,  # Ctrl+W
            21: shell.kill_to_start,  # Ctrl+U
            11: shell.kill_to_end,  # Ctrl+K
        }
        action = key_actions.get(ch)
        if action:
            action()
            return False

        # Ctrl+Left/Right: key codes vary by terminal, so go by keyname
        if ch >= 256:
            try:
                kn = curses.keyname(ch).decode("ascii", errors="ignore")
            except (ValueError, AttributeError):
                kn = ""
            if kn == "kLFT5":
                shell.word_left()
            elif kn == "kRIT5":
                shell.word_right()
            return False

        if ch >= 0:
            c = chr(ch)
            if c.isprintable():
                shell.insert(c)
        return False
