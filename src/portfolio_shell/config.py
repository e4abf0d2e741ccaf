"""Configuration system with a minimal YAML parser.

Configuration, content datasets and the preference file are all small YAML
documents. The parser here has no external dependencies and supports:
- Scalars (strings, numbers, booleans, null)
- Lists (- item syntax), including lists of mappings (- key: value)
- Nested mappings (key: value syntax)
- Comments (# ...)
- Quoted strings (single and double)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from importlib.resources import as_file, files
from pathlib import Path

# --- Minimal YAML Parser ---


def parse_simple_yaml(text: str) -> dict | list:
    """Parse a simple YAML document into Python dicts, lists and scalars.

    An empty document parses to an empty dict.
    """
    lines = _significant_lines(text)
    if not lines:
        return {}
    value, _ = _parse_node(lines, 0, lines[0][0])
    return value


def _significant_lines(text: str) -> list[tuple[int, str]]:
    """Return (indent, content) pairs, skipping blanks and comments.

    A ``- key: value`` line is split into a bare ``-`` marker and the
    ``key: value`` line indented under it, so list items holding mappings
    parse like any other nested block.
    """
    out: list[tuple[int, str]] = []
    for raw in text.splitlines():
        stripped = raw.lstrip(" ")
        if not stripped or stripped.startswith("#"):
            continue
        indent = len(raw) - len(stripped)
        while stripped.startswith("- "):
            item = stripped[2:].lstrip(" ")
            if _is_quoted_string(item) or _find_unquoted_colon(item) <= 0:
                break
            out.append((indent, "-"))
            indent += len(stripped) - len(item)
            stripped = item
        out.append((indent, stripped.rstrip()))
    return out


def _is_list_item(content: str) -> bool:
    return content == "-" or content.startswith("- ")


def _parse_node(lines: list[tuple[int, str]], i: int, indent: int) -> tuple[dict | list, int]:
    if _is_list_item(lines[i][1]):
        return _parse_list(lines, i, indent)
    return _parse_mapping(lines, i, indent)


def _parse_nested(lines: list[tuple[int, str]], i: int, parent_indent: int, allow_same: bool):
    """Parse the block under a ``key:`` or ``-`` line, or return None."""
    if i >= len(lines):
        return None, i
    indent, content = lines[i]
    if indent > parent_indent or (allow_same and indent == parent_indent and _is_list_item(content)):
        return _parse_node(lines, i, indent)
    return None, i


def _parse_mapping(lines: list[tuple[int, str]], i: int, indent: int) -> tuple[dict, int]:
    result: dict = {}
    while i < len(lines):
        line_indent, content = lines[i]
        if line_indent < indent or (line_indent == indent and _is_list_item(content)):
            break
        if line_indent > indent:
            # Stray over-indented line, nothing owns it
            i += 1
            continue
        colon = _find_unquoted_colon(content)
        if colon <= 0:
            i += 1
            continue
        key = content[:colon].strip()
        value_part = _remove_inline_comment(content[colon + 1 :].strip())
        i += 1
        if value_part:
            result[key] = _parse_value(value_part)
        else:
            # YAML lets a list sit at the same indent as its key
            result[key], i = _parse_nested(lines, i, indent, allow_same=True)
    return result, i


def _parse_list(lines: list[tuple[int, str]], i: int, indent: int) -> tuple[list, int]:
    result: list = []
    while i < len(lines):
        line_indent, content = lines[i]
        if line_indent != indent or not _is_list_item(content):
            break
        item = content[1:].strip()
        i += 1
        if item:
            result.append(_parse_value(_remove_inline_comment(item)))
        else:
            value, i = _parse_nested(lines, i, indent, allow_same=False)
            result.append(value)
    return result, i


def _find_unquoted_colon(s: str) -> int:
    """Find the first ``:`` outside quotes that ends the string or precedes a space."""
    in_single = False
    in_double = False
    for i, c in enumerate(s):
        if c == "'" and not in_double:
            in_single = not in_single
        elif c == '"' and not in_single:
            in_double = not in_double
        elif c == ":" and not in_single and not in_double:
            if i + 1 == len(s) or s[i + 1] == " ":
                return i
    return -1


def _is_quoted_string(s: str) -> bool:
    s = s.strip()
    return len(s) >= 2 and s[0] == s[-1] and s[0] in "'\""


def _remove_inline_comment(s: str) -> str:
    """Drop a trailing ``# comment`` (only when preceded by a space)."""
    in_single = False
    in_double = False
    for i, c in enumerate(s):
        if c == "'" and not in_double:
            in_single = not in_single
        elif c == '"' and not in_single:
            in_double = not in_double
        elif c == "#" and not in_single and not in_double and i > 0 and s[i - 1] == " ":
            return s[:i].rstrip()
    return s


_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "\\": "\\", '"': '"', "/": "/", "0": "\0"}


def _parse_value(s: str) -> str | int | float | bool | None:
    """Parse a scalar YAML value."""
    s = s.strip()
    if not s:
        return None

    lowered = s.lower()
    if lowered in ("null", "~", "none"):
        return None
    if lowered in ("true", "yes", "on"):
        return True
    if lowered in ("false", "no", "off"):
        return False

    if _is_quoted_string(s):
        if s[0] == '"':
            return _unescape_double_quoted(s[1:-1])
        return s[1:-1].replace("''", "'")

    try:
        if "." in s:
            return float(s)
        return int(s)
    except ValueError:
        return s


def _unescape_double_quoted(s: str) -> str:
    out = []
    i = 0
    while i < len(s):
        if s[i] == "\\" and i + 1 < len(s):
            nxt = s[i + 1]
            out.append(_ESCAPES.get(nxt, "\\" + nxt))
            i += 2
        else:
            out.append(s[i])
            i += 1
    return "".join(out)


def read_yaml_file(path: Path) -> dict | list:
    with open(path, encoding="utf-8") as f:
        return parse_simple_yaml(f.read())


# --- Configuration Dataclasses ---


DEFAULT_WELCOME = [
    "Welcome to My Portfolio Terminal",
    "Type 'help' for available commands",
]


@dataclass
class PromptConfig:
    """Prompt label shown before every command line."""

    user: str = "guest"
    host: str = "portfolio"


@dataclass
class ShellConfig:
    """Interpreter behaviour."""

    lowercase_arguments: bool = False
    welcome: list[str] = field(default_factory=lambda: list(DEFAULT_WELCOME))


@dataclass
class ThemeConfig:
    """Initial theme and whether the choice is remembered."""

    default: str = "dark"
    persist: bool = True


@dataclass
class Config:
    """Complete application configuration."""

    prompt: PromptConfig = field(default_factory=PromptConfig)
    shell: ShellConfig = field(default_factory=ShellConfig)
    theme: ThemeConfig = field(default_factory=ThemeConfig)
    content: str = "default"


# --- File Lookup ---


def get_user_data_dir() -> Path:
    """Get the user's portfolio-shell data directory ($HOME/.portfolio-shell)."""
    return Path.home() / ".portfolio-shell"


def _looks_like_path(name_or_path: str) -> bool:
    return "/" in name_or_path or "\\" in name_or_path or name_or_path.endswith((".yml", ".yaml"))


def find_yaml_file(name_or_path: str, subdir: str) -> Path | None:
    """Find a YAML file by name or path.

    Search order:
    1. If it looks like a path (contains / or \\ or ends in .yml), treat as path
    2. $HOME/.portfolio-shell/<subdir>/<name>.yml
    3. Current working directory <subdir>/<name>.yml
    4. Bundled package data portfolio_shell.<subdir>/<name>.yml
    """
    if _looks_like_path(name_or_path):
        path = Path(name_or_path).expanduser()
        return path if path.is_file() else None

    filename = f"{name_or_path}.yml"

    user_file = get_user_data_dir() / subdir / filename
    if user_file.is_file():
        return user_file

    cwd_file = Path.cwd() / subdir / filename
    if cwd_file.is_file():
        return cwd_file

    try:
        ref = files(f"portfolio_shell.{subdir}").joinpath(filename)
        with as_file(ref) as p:
            if p.is_file():
                return Path(p)
    except (ModuleNotFoundError, FileNotFoundError, TypeError):
        pass

    return None


def not_found_error(kind: str, name_or_path: str, subdir: str) -> FileNotFoundError:
    """Build a FileNotFoundError that lists every place that was searched."""
    if _looks_like_path(name_or_path):
        return FileNotFoundError(f"{kind.capitalize()} file not found: {name_or_path}")
    filename = f"{name_or_path}.yml"
    searched = [
        str(get_user_data_dir() / subdir / filename),
        str(Path.cwd() / subdir / filename),
        f"portfolio_shell.{subdir}/{filename} (bundled)",
    ]
    paths_str = "\n  - ".join(searched)
    return FileNotFoundError(f"{kind.capitalize()} '{name_or_path}' not found. Searched:\n  - {paths_str}")


# --- Config Loading ---


def load_config(config_name_or_path: str | None = None) -> Config:
    """Load configuration from a YAML file.

    Args:
        config_name_or_path: Name of config file (without .yml extension),
                            or path to a config file. If None or empty, uses 'default'.

    Returns:
        Config object with loaded values merged over defaults.

    Raises:
        FileNotFoundError: If a non-default config is specified but not found.
    """
    if not config_name_or_path:
        config_name_or_path = "default"

    config_path = find_yaml_file(config_name_or_path, "configs")
    config = Config()

    if config_path is None:
        if config_name_or_path != "default":
            raise not_found_error("config", config_name_or_path, "configs")
        return config

    _merge_config(config, read_yaml_file(config_path))
    return config


def _merge_config(config: Config, data: dict):
    """Merge parsed YAML data into a Config object."""
    if not isinstance(data, dict):
        return

    if isinstance(data.get("prompt"), dict):
        prompt = data["prompt"]
        if prompt.get("user") is not None:
            config.prompt.user = str(prompt["user"])
        if prompt.get("host") is not None:
            config.prompt.host = str(prompt["host"])

    if isinstance(data.get("shell"), dict):
        shell = data["shell"]
        if "lowercase_arguments" in shell:
            config.shell.lowercase_arguments = bool(shell["lowercase_arguments"])
        if isinstance(shell.get("welcome"), list):
            config.shell.welcome = ["" if line is None else str(line) for line in shell["welcome"]]

    if isinstance(data.get("theme"), dict):
        theme = data["theme"]
        if theme.get("default"):
            config.theme.default = str(theme["default"]).lower()
        if "persist" in theme:
            config.theme.persist = bool(theme["persist"])

    if data.get("content"):
        config.content = str(data["content"])


def get_default_config() -> Config:
    """Return a Config with all default values."""
    return Config()
