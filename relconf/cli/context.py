from __future__ import annotations

from dataclasses import dataclass

import typer

from relconf.core.config import ProjectConfig, load_config
from relconf.core.project import Project, detect_project
from relconf.core.result import Err
from relconf.output.console import ConsoleProtocol, RichConsole
from relconf.output.errors import error_exit_code, print_error


@dataclass(frozen=True, slots=True)
class CLIContext:
    project: Project
    config: ProjectConfig | None
    console: ConsoleProtocol


def build_context(*, require_config: bool = True) -> CLIContext:
    """Detect the project and load relconf.toml.

    With require_config, an invalid relconf.toml aborts the command; without
    it, `config` is None and the command reports the problem itself.
    """
    console = RichConsole()

    project_result = detect_project()
    if isinstance(project_result, Err):
        print_error(project_result.error, console)
        raise typer.Exit(code=error_exit_code(project_result.error))

    project = project_result.value

    config: ProjectConfig | None = None
    config_result = load_config(project.config_path)
    if isinstance(config_result, Err):
        if require_config:
            print_error(config_result.error, console)
            raise typer.Exit(code=error_exit_code(config_result.error))
    else:
        config = config_result.value

    return CLIContext(project=project, config=config, console=console)
