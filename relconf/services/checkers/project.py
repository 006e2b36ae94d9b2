# SPDX-License-Identifier: MIT
"""Project configuration checker.

Validates:
- relconf.toml (optional; defaults apply when missing)
- ABI filters name known Android ABIs
- release shrink rules files exist
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from relconf.core.config import ConfigError
from relconf.services.checkers.base import CheckResult

if TYPE_CHECKING:
    from relconf.core.config import ProjectConfig
    from relconf.core.project import Project

KNOWN_ABIS = frozenset({"arm64-v8a", "armeabi-v7a", "x86", "x86_64"})

# Shipped inside the Android Gradle plugin, never present in the project tree.
BUILTIN_RULES_FILES = frozenset({"proguard-android.txt", "proguard-android-optimize.txt"})


@dataclass(frozen=True, slots=True)
class ProjectChecker:
    """Check project configuration.

    Attributes:
        project: The project to check
        config: Loaded config, or None when relconf.toml is invalid
        config_error: Why relconf.toml could not be loaded
    """

    project: Project
    config: ProjectConfig | None
    config_error: ConfigError | None = None

    def check_all(self) -> list[CheckResult]:
        results = [self.check_config()]
        if self.config is not None:
            results.append(self.check_abi_filters())
            results.extend(self.check_rules_files())
        return results

    def check_config(self) -> CheckResult:
        path = self.project.config_path
        if self.config_error is not None:
            return CheckResult.error(path.name, self.config_error.message)
        if not path.exists():
            return CheckResult.success(path.name, "not present (using defaults)")
        return CheckResult.success(path.name, "ok")

    def check_abi_filters(self) -> CheckResult:
        assert self.config is not None
        abis = self.config.android.abi_filters
        unknown = [abi for abi in abis if abi not in KNOWN_ABIS]
        if unknown:
            return CheckResult.error(
                "abi filters",
                f"unknown ABI: {', '.join(unknown)}",
                hint=f"Known ABIs: {', '.join(sorted(KNOWN_ABIS))}",
            )
        if not abis:
            return CheckResult.warning("abi filters", "empty (all ABIs packaged)")
        return CheckResult.success("abi filters", ", ".join(abis))

    def check_rules_files(self) -> list[CheckResult]:
        assert self.config is not None
        return [self._check_rules_file(name) for name in self.config.release.proguard_files]

    def _check_rules_file(self, name: str) -> CheckResult:
        if name in BUILTIN_RULES_FILES:
            return CheckResult.success(name, "provided by the Android Gradle plugin")
        found = self._find_rules_file(name)
        if found is not None:
            return CheckResult.success(name, str(found))
        return CheckResult.error(
            name,
            "missing",
            hint=f"Create it in {self.project.app_dir} or remove it from [release] proguard_files",
        )

    def _find_rules_file(self, name: str) -> Path | None:
        # Gradle resolves proguardFiles() against the app module first.
        candidates = [self.project.app_dir / name, self.project.resolve(name)]
        return next((p for p in candidates if p.is_file()), None)
