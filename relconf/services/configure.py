"""Resolve the build configuration of one variant.

Evaluation is one-shot and ordered: load key.properties, decide whether a
parse failure is fatal for the variant, then select the variant behaviour.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from relconf.core.config import AndroidConfig, ProjectConfig
from relconf.core.project import Project
from relconf.core.properties import KeyProperties, PropertiesParseError, load_properties
from relconf.core.result import Err, Ok, Result
from relconf.core.signing import MissingSigningKey
from relconf.core.variants import BuildVariant, MissingPropertiesFile, VariantConfig, select_variant
from relconf.output.console import ConsoleProtocol

__all__ = ["BuildConfiguration", "ConfigureError", "ConfigureService"]

ConfigureError = PropertiesParseError | MissingPropertiesFile | MissingSigningKey


def _empty_warnings() -> list[str]:
    return []


@dataclass(frozen=True, slots=True)
class BuildConfiguration:
    """Everything a build of one variant would be configured with."""

    project_root: Path
    properties_path: Path
    android: AndroidConfig
    variant: VariantConfig
    warnings: list[str] = field(default_factory=_empty_warnings)

    def as_dict(self) -> dict[str, object]:
        """JSON-ready rendering; secrets are masked."""
        v = self.variant
        return {
            "project_root": str(self.project_root),
            "properties_file": str(self.properties_path),
            "android": {
                "namespace": self.android.namespace,
                "application_id": self.android.application_id,
                "compile_sdk": self.android.compile_sdk,
                "min_sdk": self.android.min_sdk,
                "target_sdk": self.android.target_sdk,
                "ndk_version": self.android.ndk_version,
                "java_version": self.android.java_version,
                "abi_filters": list(self.android.abi_filters),
            },
            "variant": {
                "name": v.variant.value,
                "minify": v.minify,
                "shrink_resources": v.shrink_resources,
                "proguard_files": list(v.proguard_files),
                "signing": v.signing.as_dict() if v.signing is not None else None,
            },
            "warnings": list(self.warnings),
        }


class ConfigureService:
    def __init__(
        self,
        *,
        project: Project,
        config: ProjectConfig,
        console: ConsoleProtocol,
    ) -> None:
        self._project = project
        self._config = config
        self._console = console

    @property
    def properties_path(self) -> Path:
        return self._config.properties_path(self._project.root)

    def resolve(self, variant: BuildVariant) -> Result[BuildConfiguration, ConfigureError]:
        path = self.properties_path
        warnings: list[str] = []

        match load_properties(path):
            case Ok(props):
                pass
            case Err(parse_error):
                if variant == BuildVariant.release:
                    return Err(parse_error)
                # Debug does not need credentials; keep going without them.
                msg = f"ignoring unreadable {parse_error.message}"
                self._console.warning(msg)
                warnings.append(msg)
                props = KeyProperties.empty(path)

        if variant == BuildVariant.release:
            self._console.info(f"reading signing keys from {path}")

        match select_variant(variant, props, self._project.root, self._config.release):
            case Err(error):
                return Err(error)
            case Ok(variant_config):
                pass

        return Ok(
            BuildConfiguration(
                project_root=self._project.root,
                properties_path=path,
                android=self._config.android,
                variant=variant_config,
                warnings=warnings,
            )
        )
