from __future__ import annotations

from dataclasses import dataclass

from relconf.core.config import ProjectConfig, load_config
from relconf.core.project import Project
from relconf.core.result import Err
from relconf.services.checkers import CheckResult, ProjectChecker, SigningChecker


@dataclass(frozen=True, slots=True)
class CheckReport:
    project: list[CheckResult]
    signing: list[CheckResult]

    def all_results(self) -> list[CheckResult]:
        return [*self.project, *self.signing]

    def has_errors(self) -> bool:
        return any(r.is_error for r in self.all_results())

    def blocks_release(self) -> bool:
        return any(r.blocks_release for r in self.all_results())


class CheckService:
    def __init__(self, *, project: Project) -> None:
        self._project = project

    def run(self) -> CheckReport:
        config_result = load_config(self._project.config_path)
        if isinstance(config_result, Err):
            project_checker = ProjectChecker(
                project=self._project,
                config=None,
                config_error=config_result.error,
            )
            # Signing can still be checked against the default file location.
            config = ProjectConfig()
        else:
            config = config_result.value
            project_checker = ProjectChecker(project=self._project, config=config)

        return CheckReport(
            project=project_checker.check_all(),
            signing=SigningChecker(project=self._project, config=config).check_all(),
        )
