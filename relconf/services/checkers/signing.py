# SPDX-License-Identifier: MIT
"""Release signing checker.

Validates, in order:
- key.properties exists (a warning only: debug builds work without it)
- key.properties parses
- all four signing keys are set
- the keystore file exists
Later checks are skipped when an earlier one fails.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from relconf.core.properties import load_properties
from relconf.core.result import Err, Ok
from relconf.core.signing import REQUIRED_KEYS, build_signing_profile
from relconf.services.checkers.base import CheckResult

if TYPE_CHECKING:
    from relconf.core.config import ProjectConfig
    from relconf.core.project import Project


@dataclass(frozen=True, slots=True)
class SigningChecker:
    """Check release signing inputs.

    Attributes:
        project: The project to check
        config: Loaded project configuration
    """

    project: Project
    config: ProjectConfig

    @property
    def properties_path(self) -> Path:
        return self.config.properties_path(self.project.root)

    def check_all(self) -> list[CheckResult]:
        path = self.properties_path
        name = path.name

        match load_properties(path):
            case Err(error):
                return [CheckResult.error(name, f"line {error.line}: {error.reason}")]
            case Ok(props):
                pass

        if not props.found:
            return [
                CheckResult.warning(
                    name,
                    "missing (release builds cannot be signed)",
                    hint=f"Create {path} with {', '.join(REQUIRED_KEYS)}",
                )
            ]

        results = [CheckResult.success(name, str(path))]

        match build_signing_profile(props, self.project.root):
            case Err(missing):
                results.append(
                    CheckResult.error(
                        "signing keys",
                        f"missing: {', '.join(missing.missing)}",
                        hint=f"Set every key in {path}",
                    )
                )
                return results
            case Ok(profile):
                results.append(CheckResult.success("signing keys", f"alias {profile.key_alias}"))

        if profile.store_file.is_file():
            results.append(CheckResult.success("keystore", str(profile.store_file)))
        else:
            results.append(
                CheckResult.error(
                    "keystore",
                    f"not found: {profile.store_file}",
                    hint="storeFile is resolved relative to the project root",
                )
            )
        return results
