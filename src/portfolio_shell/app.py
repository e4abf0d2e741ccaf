from __future__ import annotations

import sys
from typing import TextIO

from portfolio_shell.config import Config
from portfolio_shell.debug_log import DebugLogger
from portfolio_shell.interpreter import Interpreter, create_interpreter
from portfolio_shell.navigator import prompt_string
from portfolio_shell.portfolio import Portfolio
from portfolio_shell.preferences import PreferenceStore
from portfolio_shell.themes import ThemeManager
from portfolio_shell.types import LineKind
from portfolio_shell.ui import ShellUI


def build_themes(
    config: Config,
    initial_theme: str | None = None,
    logger: DebugLogger | None = None,
    persist: bool = True,
) -> ThemeManager:
    """Theme system for a session.

    An explicit ``initial_theme`` wins over the stored preference, which wins
    over the configured default.
    """
    store = PreferenceStore() if persist and config.theme.persist else None
    themes = ThemeManager(store, default=initial_theme or config.theme.default, logger=logger)
    if not initial_theme:
        themes.restore()
    return themes


def build_shell(
    config: Config,
    portfolio: Portfolio,
    themes: ThemeManager,
    logger: DebugLogger | None = None,
) -> Interpreter:
    return create_interpreter(
        portfolio,
        switch_theme=themes.switch,
        current_theme=lambda: themes.current,
        welcome=config.shell.welcome,
        lowercase_arguments=config.shell.lowercase_arguments,
        logger=logger,
    )


def run_batch(
    config: Config,
    portfolio: Portfolio,
    commands: list[str],
    out: TextIO = sys.stdout,
    initial_theme: str | None = None,
) -> int:
    """Run commands without a terminal and print the transcript.

    Returns 1 if any command produced an error line, else 0. Theme changes
    are not persisted.
    """
    themes = build_themes(config, initial_theme, persist=False)
    shell = build_shell(config, portfolio, themes)
    status = 0
    for cmd in commands:
        shell.submit(cmd)
    for line in shell.session.scrollback:
        if line.kind == LineKind.COMMAND:
            out.write(prompt_string(config.prompt.user, config.prompt.host, line.path) + line.text + "\n")
        else:
            if line.kind == LineKind.ERROR:
                status = 1
            out.write(line.text + "\n")
    return status


def run_shell(
    stdscr,
    config: Config,
    portfolio: Portfolio,
    color: bool = True,
    debug: bool = False,
    initial_theme: str | None = None,
):
    logger = DebugLogger()
    if debug:
        logger.start()

    themes = build_themes(config, initial_theme, logger=logger)
    shell = build_shell(config, portfolio, themes, logger=logger)
    ui = ShellUI(stdscr, shell, themes, config.prompt, color=color, debug_logger=logger)

    try:
        while True:
            ui.draw()
            if ui.handle_key(ui.read_key()):
                return
    except KeyboardInterrupt:
        return
    finally:
        logger.stop()
