"""Portfolio content dataset model and loader.

The dataset is static, read-only data: personal details, skill categories,
project categories (the shell's directories) and work experience. It is
loaded once from YAML, using the same search path as configs but under
``content/``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from portfolio_shell.config import find_yaml_file, not_found_error, read_yaml_file


@dataclass
class Project:
    name: str
    description: str = ""
    tech: str = ""
    github: str | None = None
    live: str | None = None
    features: list[str] = field(default_factory=list)


@dataclass
class ProjectCategory:
    """A directory under ``home``."""

    name: str
    title: str = ""
    projects: list[Project] = field(default_factory=list)


@dataclass
class Skill:
    name: str
    level: int = 0


@dataclass
class SkillCategory:
    name: str
    title: str = ""
    skills: list[Skill] = field(default_factory=list)


@dataclass
class Experience:
    role: str
    company: str = ""
    location: str = ""
    period: str = ""
    achievements: list[str] = field(default_factory=list)


@dataclass
class Personal:
    name: str = ""
    role: str = ""
    description: str = ""
    location: str = ""
    email: str = ""
    phone: str = ""
    education: str = ""
    resume: str | None = None
    focus: list[str] = field(default_factory=list)
    stats: dict[str, str] = field(default_factory=dict)
    links: dict[str, str] = field(default_factory=dict)


@dataclass
class Portfolio:
    personal: Personal = field(default_factory=Personal)
    skills: list[SkillCategory] = field(default_factory=list)
    projects: list[ProjectCategory] = field(default_factory=list)
    experience: list[Experience] = field(default_factory=list)

    @property
    def directory_names(self) -> list[str]:
        return [c.name for c in self.projects]

    def category(self, name: str) -> ProjectCategory | None:
        """Look up a project category by directory name, ignoring case."""
        wanted = name.lower()
        for category in self.projects:
            if category.name.lower() == wanted:
                return category
        return None


# --- Loading ---


def load_portfolio(content_name_or_path: str | None = None) -> Portfolio:
    """Load a content dataset by name or path.

    Raises:
        FileNotFoundError: If the dataset cannot be found.
    """
    if not content_name_or_path:
        content_name_or_path = "default"
    path = find_yaml_file(content_name_or_path, "content")
    if path is None:
        raise not_found_error("content", content_name_or_path, "content")
    return build_portfolio(read_yaml_file(path))


def build_portfolio(data: dict) -> Portfolio:
    """Build a Portfolio from parsed YAML, ignoring malformed entries."""
    portfolio = Portfolio()
    if not isinstance(data, dict):
        return portfolio

    if isinstance(data.get("personal"), dict):
        portfolio.personal = _build_personal(data["personal"])

    for item in _dicts(data.get("skills")):
        portfolio.skills.append(
            SkillCategory(
                name=_str(item.get("name")),
                title=_str(item.get("title")) or _str(item.get("name")),
                skills=[
                    Skill(name=_str(s.get("name")), level=_level(s.get("level")))
                    for s in _dicts(item.get("skills"))
                ],
            )
        )

    for item in _dicts(data.get("projects")):
        if not item.get("name"):
            continue
        portfolio.projects.append(
            ProjectCategory(
                name=_str(item["name"]).lower(),
                title=_str(item.get("title")) or _str(item["name"]),
                projects=[_build_project(p) for p in _dicts(item.get("projects")) if p.get("name")],
            )
        )

    for item in _dicts(data.get("experience")):
        portfolio.experience.append(
            Experience(
                role=_str(item.get("role")),
                company=_str(item.get("company")),
                location=_str(item.get("location")),
                period=_str(item.get("period")),
                achievements=_strs(item.get("achievements")),
            )
        )

    return portfolio


def _build_personal(data: dict) -> Personal:
    links = data.get("links")
    stats = data.get("stats")
    return Personal(
        name=_str(data.get("name")),
        role=_str(data.get("role")),
        description=_str(data.get("description")),
        location=_str(data.get("location")),
        email=_str(data.get("email")),
        phone=_str(data.get("phone")),
        education=_str(data.get("education")),
        resume=_str(data.get("resume")) or None,
        focus=_strs(data.get("focus")),
        stats={str(k): _str(v) for k, v in stats.items() if v is not None} if isinstance(stats, dict) else {},
        links={str(k): _str(v) for k, v in links.items() if v} if isinstance(links, dict) else {},
    )


def _build_project(data: dict) -> Project:
    return Project(
        name=_str(data.get("name")),
        description=_str(data.get("description")),
        tech=_str(data.get("tech")),
        github=_str(data.get("github")) or None,
        live=_str(data.get("live")) or None,
        features=_strs(data.get("features")),
    )


def _dicts(value) -> list[dict]:
    if not isinstance(value, list):
        return []
    return [v for v in value if isinstance(v, dict)]


def _str(value) -> str:
    return "" if value is None else str(value)


def _strs(value) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(v) for v in value if v is not None]


def _level(value) -> int:
    try:
        return max(0, min(100, int(value)))
    except (TypeError, ValueError):
        return 0
