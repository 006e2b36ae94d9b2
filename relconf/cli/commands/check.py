from __future__ import annotations

import typer

from relconf.cli.context import CLIContext, build_context
from relconf.core.errors import ErrorCode
from relconf.output.console import Style
from relconf.services.check import CheckService
from relconf.services.checkers import CheckResult, CheckStatus


def check(
    strict: bool = typer.Option(False, "--strict", help="Treat warnings as errors"),
) -> None:
    """Check that a release build could be configured and suggest fixes."""
    ctx = build_context(require_config=False)

    report = CheckService(project=ctx.project).run()

    ctx.console.print(f"project: {ctx.project.root}", Style.DIM)

    _print_group(ctx, "Project", report.project)
    _print_group(ctx, "Signing", report.signing)

    if report.has_errors():
        raise typer.Exit(code=int(ErrorCode.CONFIG_ERROR))
    if strict and report.blocks_release():
        raise typer.Exit(code=int(ErrorCode.SIGNING_ERROR))


def _print_group(ctx: CLIContext, title: str, results: list[CheckResult]) -> None:
    console = ctx.console
    console.header(title)
    for r in results:
        style = _style_for_status(r.status)
        console.print(r.summary, style)
        if r.hint and r.status != CheckStatus.OK:
            console.print(f"hint: {r.hint}", Style.DIM)


def _style_for_status(status: CheckStatus) -> Style:
    if status == CheckStatus.OK:
        return Style.SUCCESS
    if status == CheckStatus.WARNING:
        return Style.WARNING
    return Style.ERROR
