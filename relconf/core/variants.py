"""Build variants and their packaging behaviour.

Only two variants exist:

- debug: unsigned by this configuration (the toolchain's debug key applies),
  no minification, no resource shrinking.
- release: signed with the profile from key.properties, minified, resources
  shrunk, shrink/obfuscation rules applied.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from .config import ReleaseConfig
from .properties import KeyProperties
from .result import Err, Ok, Result
from .signing import MissingSigningKey, SigningProfile, build_signing_profile

__all__ = [
    "BuildVariant",
    "VariantConfig",
    "MissingPropertiesFile",
    "UnknownVariant",
    "SigningError",
    "parse_variant",
    "select_variant",
]


class BuildVariant(StrEnum):
    debug = "debug"
    release = "release"


@dataclass(frozen=True, slots=True)
class UnknownVariant:
    name: str
    available: tuple[str, ...] = tuple(v.value for v in BuildVariant)

    @property
    def message(self) -> str:
        return f"Unknown build variant: {self.name}"


@dataclass(frozen=True, slots=True)
class MissingPropertiesFile:
    """A release build was requested but the properties file does not exist."""

    path: Path

    @property
    def message(self) -> str:
        return f"signing properties file not found: {self.path}"


SigningError = MissingPropertiesFile | MissingSigningKey


@dataclass(frozen=True, slots=True)
class VariantConfig:
    """Resolved packaging behaviour for one variant."""

    variant: BuildVariant
    minify: bool
    shrink_resources: bool
    signing: SigningProfile | None = None
    proguard_files: tuple[str, ...] = ()


def parse_variant(name: str) -> Result[BuildVariant, UnknownVariant]:
    """Parse a variant name, case-insensitively."""
    try:
        return Ok(BuildVariant(name.strip().lower()))
    except ValueError:
        return Err(UnknownVariant(name=name))


def select_variant(
    variant: BuildVariant,
    props: Mapping[str, str],
    project_root: Path,
    release: ReleaseConfig | None = None,
) -> Result[VariantConfig, SigningError]:
    """Resolve the packaging behaviour of `variant`.

    Debug never looks at `props`. Release requires the properties file to
    exist (when `props` is a KeyProperties that knows) and all four signing
    keys to be present.
    """
    if variant == BuildVariant.debug:
        return Ok(VariantConfig(variant=variant, minify=False, shrink_resources=False))

    if isinstance(props, KeyProperties) and not props.found:
        return Err(MissingPropertiesFile(path=props.path))

    release = release or ReleaseConfig()
    match build_signing_profile(props, project_root):
        case Err(error):
            return Err(error)
        case Ok(profile):
            return Ok(
                VariantConfig(
                    variant=variant,
                    minify=True,
                    shrink_resources=True,
                    signing=profile,
                    proguard_files=release.proguard_files,
                )
            )
