import argparse
import curses
import sys

from portfolio_shell import __version__
from portfolio_shell.app import run_batch, run_shell
from portfolio_shell.config import load_config
from portfolio_shell.portfolio import load_portfolio
from portfolio_shell.themes import THEME_NAMES


def main(argv=None):
    p = argparse.ArgumentParser(description="Interactive portfolio terminal")
    p.add_argument("-v", "--version", action="version",
                   version=f"%(prog)s {__version__}")
    p.add_argument("-c", "--config", default="default",
                   help="Configuration name or path (searches ~/.portfolio-shell/configs/, ./configs/, or use full path)")
    p.add_argument("--content", default=None,
                   help="Content dataset name or path (searches ~/.portfolio-shell/content/, ./content/) - overrides config")
    p.add_argument("--theme", choices=THEME_NAMES, default=None,
                   help="Start with this theme instead of the saved one")
    p.add_argument("--no-color", action="store_true", default=False,
                   help="Disable colors")
    p.add_argument("-d", "--debug", action="store_true", default=False,
                   help="Enable debug logging to shell_*.log files in current directory")
    p.add_argument("-e", "--exec", dest="commands", action="append", metavar="CMD",
                   help="Run a command without the interactive terminal (repeatable) and print the transcript")
    args = p.parse_args(argv)

    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        p.error(str(e))

    if args.content:
        config.content = args.content

    try:
        portfolio = load_portfolio(config.content)
    except FileNotFoundError as e:
        p.error(str(e))

    if args.commands:
        sys.exit(run_batch(config, portfolio, args.commands, initial_theme=args.theme))

    curses.wrapper(run_shell, config, portfolio,
                   color=not args.no_color, debug=args.debug,
                   initial_theme=args.theme)
