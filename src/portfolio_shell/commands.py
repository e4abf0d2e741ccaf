"""Built-in shell commands.

Every handler takes ``(ctx, args)`` and returns output lines. Usage problems
are reported as ordinary lines, never raised. Only three handlers have side
effects, each through the context: ``clear`` empties the scrollback, ``cd``
changes the session path, and ``theme`` calls the theme switcher.
"""

from __future__ import annotations

import textwrap
from dataclasses import dataclass
from typing import Callable

from portfolio_shell.navigator import Navigator
from portfolio_shell.portfolio import Portfolio
from portfolio_shell.registry import CommandRegistry
from portfolio_shell.session import SessionState
from portfolio_shell.themes import THEME_NAMES, is_theme_name

WRAP_WIDTH = 60
BAR_WIDTH = 10

_LINK_LABELS = {
    "linkedin": "LinkedIn",
    "github": "GitHub",
    "twitter": "Twitter",
    "website": "Website",
}


@dataclass
class CommandContext:
    """What a handler is allowed to see and touch."""

    session: SessionState
    navigator: Navigator
    portfolio: Portfolio
    registry: CommandRegistry
    switch_theme: Callable[[str], None]
    current_theme: Callable[[], str]


# --- Informational ---


def cmd_help(ctx: CommandContext, args: list[str]) -> list[str]:
    width = max((len(c.usage) for c in ctx.registry), default=0)
    lines = ["Available commands:"]
    for cmd in ctx.registry:
        lines.append(f"  {cmd.usage.ljust(width)} - {cmd.summary}")
    return lines


def _banner(rows: list[str]) -> list[str]:
    width = max(len(r) for r in rows) + 8
    blank = "  ║" + " " * width + "║"
    lines = ["  ╔" + "═" * width + "╗", blank]
    for row in rows:
        lines += ["  ║   " + row.ljust(width - 3) + "║", blank]
    lines.append("  ╚" + "═" * width + "╝")
    return lines


def cmd_about(ctx: CommandContext, args: list[str]) -> list[str]:
    p = ctx.portfolio.personal
    lines = [""] + _banner([f"Hi! I'm {p.name}", p.role]) + [""]
    if p.description:
        lines += ["  " + row for row in textwrap.wrap(p.description, WRAP_WIDTH)]
        lines.append("")
    if p.focus:
        lines.append("  Currently focused on:")
        lines += [f"     • {item}" for item in p.focus]
        lines.append("")
    if p.stats:
        width = max(len(label) for label in p.stats) + 1
        lines += [f"  {(label + ':').ljust(width)} {value}" for label, value in p.stats.items()]
        lines.append("")
    if p.location:
        lines += [f"  Based in: {p.location}", ""]
    lines += [
        '  Type "skills" to see my technical skills',
        '  Type "projects" to view my work',
        '  Type "contact" to get in touch',
        "",
    ]
    return lines


def _level_bar(level: int) -> str:
    filled = round(level * BAR_WIDTH / 100)
    return "█" * filled + "░" * (BAR_WIDTH - filled)


def cmd_skills(ctx: CommandContext, args: list[str]) -> list[str]:
    categories = ctx.portfolio.skills
    if not categories:
        return ["No skills listed."]
    width = max((len(s.name) for c in categories for s in c.skills), default=0)
    lines = ["Technical skills:", ""]
    for category in categories:
        lines.append(f"  {category.title}")
        for skill in category.skills:
            lines.append(f"    {skill.name.ljust(width)}  {_level_bar(skill.level)} {skill.level:>3}%")
        lines.append("")
    return lines


def cmd_experience(ctx: CommandContext, args: list[str]) -> list[str]:
    if not ctx.portfolio.experience:
        return ["No experience listed."]
    lines = ["Work experience:", ""]
    for job in ctx.portfolio.experience:
        lines.append(f"  {job.role} @ {job.company}")
        lines.append(f"    {' | '.join(part for part in (job.location, job.period) if part)}")
        lines += [f"    • {item}" for item in job.achievements]
        lines.append("")
    return lines


def cmd_contact(ctx: CommandContext, args: list[str]) -> list[str]:
    p = ctx.portfolio.personal
    rows = [("Email", p.email), ("Phone", p.phone), ("Location", p.location)]
    rows += [(_LINK_LABELS.get(k, k.capitalize()), v) for k, v in p.links.items()]
    rows = [(label, value) for label, value in rows if value]
    width = max((len(label) for label, _ in rows), default=0) + 1
    lines = ["Contact information:", ""]
    lines += [f"  {(label + ':').ljust(width)} {value}" for label, value in rows]
    lines += ["", "  Feel free to reach out, I usually reply within a day."]
    return lines


def cmd_resume(ctx: CommandContext, args: list[str]) -> list[str]:
    p = ctx.portfolio.personal
    lines = [f"Resume: {p.name}" + (f" - {p.role}" if p.role else ""), ""]
    if p.education:
        lines.append(f"  Education:  {p.education}")
    if ctx.portfolio.experience:
        lines.append("  Experience:")
        for job in ctx.portfolio.experience:
            lines.append(f"    • {job.role}, {job.company} ({job.period})")
    lines.append("")
    if p.resume:
        lines.append(f"  Download: {p.resume}")
    else:
        lines.append("  No resume link configured. Type 'contact' to request a copy.")
    return lines


# --- Themes ---


def cmd_themes(ctx: CommandContext, args: list[str]) -> list[str]:
    current = ctx.current_theme()
    lines = ["Available themes:"]
    for name in THEME_NAMES:
        marker = "*" if name == current else " "
        lines.append(f"  {marker} {name}")
    lines += ["", "Use 'theme <name>' to switch themes"]
    return lines


def cmd_theme(ctx: CommandContext, args: list[str]) -> list[str]:
    if not args:
        return ["Usage: theme <name>"]
    name = args[0].lower()
    if not is_theme_name(name):
        return [f"Theme '{name}' not found. Type 'themes' to see available themes."]
    ctx.switch_theme(name)
    return [f"Theme switched to: {name}"]


# --- Session ---


def cmd_history(ctx: CommandContext, args: list[str]) -> list[str]:
    return [f"{i}  {cmd}" for i, cmd in enumerate(ctx.session.history, 1)]


def cmd_clear(ctx: CommandContext, args: list[str]) -> list[str]:
    ctx.session.clear_scrollback()
    return []


# --- Navigation ---


def cmd_pwd(ctx: CommandContext, args: list[str]) -> list[str]:
    return ctx.navigator.pwd(ctx.session.path)


def cmd_ls(ctx: CommandContext, args: list[str]) -> list[str]:
    return ctx.navigator.ls(ctx.session.path)


def cmd_cd(ctx: CommandContext, args: list[str]) -> list[str]:
    target = args[0] if args else ""
    path, lines = ctx.navigator.cd(ctx.session.path, target)
    ctx.session.change_path(path)
    return lines


def cmd_projects(ctx: CommandContext, args: list[str]) -> list[str]:
    return ctx.navigator.projects(ctx.session.path)


BUILTINS = [
    ("help", cmd_help, "Show this list", ""),
    ("about", cmd_about, "Learn about me", ""),
    ("skills", cmd_skills, "View my technical skills", ""),
    ("projects", cmd_projects, "See my projects", ""),
    ("experience", cmd_experience, "View work experience", ""),
    ("contact", cmd_contact, "Get contact information", ""),
    ("resume", cmd_resume, "Download resume", ""),
    ("ls", cmd_ls, "List the current directory", ""),
    ("cd", cmd_cd, "Enter a project directory", "cd <dir>"),
    ("pwd", cmd_pwd, "Print the current directory", ""),
    ("themes", cmd_themes, "List available themes", ""),
    ("theme", cmd_theme, "Switch to a theme", "theme <name>"),
    ("history", cmd_history, "Show command history", ""),
    ("clear", cmd_clear, "Clear terminal", ""),
]


def build_registry() -> CommandRegistry:
    """Registry holding every built-in command and argument completer."""
    registry = CommandRegistry()
    for name, handler, summary, usage in BUILTINS:
        registry.register(name, handler, summary=summary, usage=usage)
    registry.register_completer("cd", lambda ctx: ctx.navigator.completions(ctx.session.path))
    registry.register_completer("theme", lambda ctx: list(THEME_NAMES))
    return registry
