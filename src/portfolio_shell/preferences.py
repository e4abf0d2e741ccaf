from __future__ import annotations

from pathlib import Path

from portfolio_shell.config import get_user_data_dir, read_yaml_file


def default_preferences_path() -> Path:
    return get_user_data_dir() / "preferences.yml"


def _quote(value: str) -> str:
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


class PreferenceStore:
    """Flat key/value preferences kept in a small YAML file.

    Reads and writes raise OSError on storage problems and UnicodeDecodeError
    on a file that is not UTF-8; callers decide whether that matters.
    """

    def __init__(self, path: Path | str | None = None):
        self.path = Path(path).expanduser() if path else default_preferences_path()

    def load(self) -> dict[str, str]:
        if not self.path.is_file():
            return {}
        data = read_yaml_file(self.path)
        if not isinstance(data, dict):
            return {}
        return {str(k): str(v) for k, v in data.items() if v is not None}

    def get(self, key: str, default: str | None = None) -> str | None:
        return self.load().get(key, default)

    def set(self, key: str, value: str):
        data = self.load()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        lines = ["# portfolio-shell preferences\n"]
        lines += [f"{k}: {_quote(v)}\n" for k, v in data.items()]
        with open(self.path, "w", encoding="utf-8") as f:
            f.writelines(lines)
