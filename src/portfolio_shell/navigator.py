"""Two-level virtual filesystem over the portfolio's project categories.

``home`` is the root; every project category is a directory directly under
it. Depth never exceeds one, so a path is either Root or Directory(name).
"""

from __future__ import annotations

from dataclasses import dataclass

from portfolio_shell.portfolio import Portfolio, Project, ProjectCategory

ROOT_NAME = "home"
PARENT_ALIASES = ("", "..", "~")


@dataclass(frozen=True)
class Root:
    def __str__(self) -> str:
        return ROOT_NAME


@dataclass(frozen=True)
class Directory:
    name: str

    def __str__(self) -> str:
        return f"{ROOT_NAME}/{self.name}"


VirtualPath = Root | Directory

HOME = Root()


def prompt_label(path: VirtualPath | str) -> str:
    """Shell-style label for a path or its string form: ``~`` or ``~/<name>``."""
    text = str(path)
    if text.startswith(ROOT_NAME):
        return "~" + text[len(ROOT_NAME) :]
    return text


def prompt_string(user: str, host: str, path: VirtualPath | str) -> str:
    return f"{user}@{host}:{prompt_label(path)}$ "


class Navigator:
    """Answers pwd/ls/cd/projects against a read-only Portfolio.

    The navigator never stores the current path. Callers pass it in, and
    ``cd`` returns the new path alongside its output lines.
    """

    def __init__(self, portfolio: Portfolio):
        self.portfolio = portfolio

    @property
    def directory_names(self) -> list[str]:
        return self.portfolio.directory_names

    def completions(self, path: VirtualPath) -> list[str]:
        """Argument candidates for ``cd`` at ``path``."""
        names = list(self.directory_names)
        if isinstance(path, Directory):
            names.append("..")
        return names

    def pwd(self, path: VirtualPath) -> list[str]:
        return [str(path)]

    def ls(self, path: VirtualPath) -> list[str]:
        if isinstance(path, Root):
            return [f"{name}/" for name in self.directory_names]
        category = self.portfolio.category(path.name)
        if category is None:
            return [f"ls: cannot access '{path}': No such directory"]
        if not category.projects:
            return ["(empty)"]
        return [f"{i}. {p.name} - {p.description}" for i, p in enumerate(category.projects, 1)]

    def cd(self, path: VirtualPath, target: str) -> tuple[VirtualPath, list[str]]:
        """Resolve ``target`` from ``path``. Returns (new_path, lines)."""
        if target in PARENT_ALIASES:
            return HOME, [f"Changed directory to {ROOT_NAME}"]
        category = self.portfolio.category(target)
        if category is None:
            available = ", ".join(self.directory_names) or "(none)"
            return path, [
                f"Directory not found: {target}",
                f"Available directories: {available}",
            ]
        return Directory(category.name), describe_category(category)

    def projects(self, path: VirtualPath) -> list[str]:
        if isinstance(path, Directory):
            return self.ls(path)
        lines = ["Project directories:", ""]
        width = max((len(n) for n in self.directory_names), default=0) + 1
        for category in self.portfolio.projects:
            count = len(category.projects)
            label = f"{category.name}/".ljust(width)
            noun = "project" if count == 1 else "projects"
            lines.append(f"  {label}  {category.title} ({count} {noun})")
        lines += ["", "Use 'cd <directory>' to browse projects"]
        return lines


def describe_category(category: ProjectCategory) -> list[str]:
    """Full listing of every project in a category."""
    lines = [f"{category.title or category.name} ({ROOT_NAME}/{category.name})", ""]
    for i, project in enumerate(category.projects, 1):
        lines += describe_project(i, project)
        lines.append("")
    return lines


def describe_project(index: int, project: Project) -> list[str]:
    lines = [f"  [{index}] {project.name}", f"      {project.description}"]
    if project.github:
        lines.append(f"      GitHub: {project.github}")
    if project.live:
        lines.append(f"      Live:   {project.live}")
    if project.tech:
        lines.append(f"      Tech:   {project.tech}")
    for feature in project.features:
        lines.append(f"        • {feature}")
    return lines
