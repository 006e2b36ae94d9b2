"""Configure command - resolve and show the configuration of a build variant."""

from __future__ import annotations

import json

import typer

from relconf.cli.commands._helpers import exit_with_error
from relconf.cli.context import CLIContext, build_context
from relconf.core.config import ProjectConfig
from relconf.core.result import Err, Ok
from relconf.core.variants import parse_variant
from relconf.output.console import Style
from relconf.services.configure import BuildConfiguration, ConfigureService


def configure(
    variant: str = typer.Argument("debug", help="Build variant (debug or release)"),
    as_json: bool = typer.Option(False, "--json", help="Print the configuration as JSON"),
) -> None:
    """Resolve the signing and packaging configuration of a build variant."""
    ctx = build_context()

    match parse_variant(variant):
        case Err(error):
            exit_with_error(error, ctx)
        case Ok(selected):
            pass

    service = ConfigureService(
        project=ctx.project,
        config=ctx.config or ProjectConfig(),
        console=ctx.console,
    )

    match service.resolve(selected):
        case Err(error):
            exit_with_error(error, ctx)
        case Ok(build_config):
            pass

    if as_json:
        typer.echo(json.dumps(build_config.as_dict(), indent=2))
        return

    _print_configuration(ctx, build_config)
    ctx.console.success(f"{build_config.variant.variant} configuration resolved")


def _print_configuration(ctx: CLIContext, build_config: BuildConfiguration) -> None:
    console = ctx.console
    android = build_config.android
    variant = build_config.variant

    console.print(f"project: {build_config.project_root}", Style.DIM)

    console.header("Android")
    console.field("namespace", android.namespace)
    console.field("applicationId", android.application_id)
    console.field("compileSdk", _sdk(android.compile_sdk))
    console.field("minSdk", _sdk(android.min_sdk))
    console.field("targetSdk", _sdk(android.target_sdk))
    console.field("ndkVersion", android.ndk_version or "(framework default)")
    console.field("java", str(android.java_version))
    console.field("abiFilters", ", ".join(android.abi_filters) or "(all)")

    console.header(f"Variant: {variant.variant}")
    console.field("minify", _yes_no(variant.minify))
    console.field("shrinkResources", _yes_no(variant.shrink_resources))
    console.field("proguardFiles", ", ".join(variant.proguard_files) or "(none)")

    if variant.signing is None:
        console.field("signing", "(toolchain debug key)")
        return

    console.header("Signing")
    for key, value in variant.signing.as_dict().items():
        console.field(key, value)


def _sdk(value: int | None) -> str:
    return str(value) if value is not None else "(framework default)"


def _yes_no(value: bool) -> str:
    return "yes" if value else "no"
