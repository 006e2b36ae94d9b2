"""Android project detection and paths.

The project root is the Gradle root of the Android build (the directory that
holds `settings.gradle(.kts)` and, usually, `key.properties`). A
`relconf.toml` file also marks a root, for projects that keep their settings
elsewhere.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from .config import CONFIG_FILENAME
from .result import Err, Ok, Result

__all__ = [
    "Project",
    "ProjectError",
    "ProjectSource",
    "PROJECT_ENV_VAR",
    "PROJECT_MARKERS",
    "detect_project",
    "find_project_upward",
    "is_project_root",
]

PROJECT_ENV_VAR = "RELCONF_PROJECT_ROOT"
PROJECT_MARKERS: tuple[str, ...] = (CONFIG_FILENAME, "settings.gradle.kts", "settings.gradle")

ProjectSource = Literal["option", "env", "cwd"]


@dataclass(frozen=True)
class ProjectError:
    """Error when the project root cannot be determined."""

    message: str
    searched_from: Path | None = None


@dataclass(frozen=True, slots=True)
class Project:
    """A detected Android project.

    The root contains:
    - settings.gradle(.kts) and/or relconf.toml (marker)
    - key.properties (optional; release signing only)
    - app/ module with its proguard-rules.pro
    """

    root: Path
    source: ProjectSource = "cwd"

    @property
    def config_path(self) -> Path:
        """Path to relconf.toml."""
        return self.root / CONFIG_FILENAME

    @property
    def app_dir(self) -> Path:
        """Path to the application module."""
        return self.root / "app"

    def resolve(self, value: str) -> Path:
        """Resolve a user-supplied path against the project root."""
        p = Path(value).expanduser()
        if not p.is_absolute():
            p = self.root / p
        return Path(os.path.normpath(p))

    def __str__(self) -> str:
        return str(self.root)


def is_project_root(path: Path) -> bool:
    """Check if a directory carries one of the project markers."""
    return any((path / marker).is_file() for marker in PROJECT_MARKERS)


def find_project_upward(start: Path) -> Path | None:
    """Search upward from start for a project root; None if there is none."""
    for parent in (start, *start.parents):
        if is_project_root(parent):
            return parent
    return None


def detect_project(
    *,
    override: Path | None = None,
    start_dir: Path | None = None,
    env_var: str = PROJECT_ENV_VAR,
) -> Result[Project, ProjectError]:
    """Detect the project root directory.

    Detection order:
    1. Explicit override (the --project option)
    2. RELCONF_PROJECT_ROOT environment variable
    3. Search upward from start_dir (or cwd) for a project marker
    """
    if override is not None:
        root = override.expanduser().resolve()
        if not root.is_dir():
            return Err(ProjectError(message=f"Project directory not found: {root}"))
        # An explicit directory is trusted even without markers.
        return Ok(Project(root=root, source="option"))

    env_value = os.environ.get(env_var)
    if env_value:
        env_path = Path(env_value).expanduser().resolve()
        if env_path.is_dir():
            return Ok(Project(root=env_path, source="env"))
        return Err(
            ProjectError(
                message=f"${env_var} is set to '{env_value}' but it is not a directory",
            )
        )

    search_start = (start_dir or Path.cwd()).resolve()
    found = find_project_upward(search_start)
    if found is not None:
        return Ok(Project(root=found, source="cwd"))

    return Err(
        ProjectError(
            message=(
                "Could not find an Android project "
                f"({', '.join(PROJECT_MARKERS)} not found)"
            ),
            searched_from=search_start,
        )
    )
