"""Typed project configuration (relconf.toml).

Every setting is optional; an absent file means the defaults below, which
match the Android module this tool was written for.

Example:
    [android]
    application_id = "com.example.app"
    min_sdk = 21
    abi_filters = ["arm64-v8a"]

    [signing]
    properties_file = "key.properties"

    [release]
    proguard_files = ["proguard-android-optimize.txt", "proguard-rules.pro"]
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, get_int, get_str, get_str_list, get_table, is_str_dict

__all__ = [
    "AndroidConfig",
    "SigningConfig",
    "ReleaseConfig",
    "ProjectConfig",
    "ConfigError",
    "load_config",
    "CONFIG_FILENAME",
    "DEFAULT_APPLICATION_ID",
    "DEFAULT_ABI_FILTERS",
    "DEFAULT_JAVA_VERSION",
    "DEFAULT_PROPERTIES_FILE",
    "DEFAULT_PROGUARD_FILES",
]

CONFIG_FILENAME = "relconf.toml"

DEFAULT_APPLICATION_ID = "com.oishimenu.app"
# Real devices only; emulator ABIs (x86, x86_64) are left out of release APKs.
DEFAULT_ABI_FILTERS: tuple[str, ...] = ("arm64-v8a", "armeabi-v7a")
DEFAULT_JAVA_VERSION = 11
DEFAULT_PROPERTIES_FILE = "key.properties"
DEFAULT_PROGUARD_FILES: tuple[str, ...] = ("proguard-android-optimize.txt", "proguard-rules.pro")
RELEASE_FIXED_KEYS: tuple[str, ...] = ("minify", "shrink_resources")


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when relconf.toml cannot be loaded or is invalid."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class AndroidConfig:
    """Android module identity and toolchain values.

    SDK and NDK values come from the host framework; None means "use the
    framework's default" and is rendered as such.
    """

    namespace: str = DEFAULT_APPLICATION_ID
    application_id: str = DEFAULT_APPLICATION_ID
    compile_sdk: int | None = None
    min_sdk: int | None = None
    target_sdk: int | None = None
    ndk_version: str | None = None
    java_version: int = DEFAULT_JAVA_VERSION
    abi_filters: tuple[str, ...] = DEFAULT_ABI_FILTERS


@dataclass(frozen=True, slots=True)
class SigningConfig:
    properties_file: str = DEFAULT_PROPERTIES_FILE


@dataclass(frozen=True, slots=True)
class ReleaseConfig:
    """Rules files of the release variant.

    Release always minifies and shrinks resources; only the rules applied
    while doing so are configurable.
    """

    proguard_files: tuple[str, ...] = DEFAULT_PROGUARD_FILES


@dataclass(frozen=True, slots=True)
class ProjectConfig:
    """Main configuration container."""

    android: AndroidConfig = field(default_factory=AndroidConfig)
    signing: SigningConfig = field(default_factory=SigningConfig)
    release: ReleaseConfig = field(default_factory=ReleaseConfig)

    def properties_path(self, root: Path) -> Path:
        """Absolute path of the signing properties file for a project root."""
        p = Path(self.signing.properties_file).expanduser()
        return p if p.is_absolute() else root / p

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> ProjectConfig:
        """Create ProjectConfig from a mapping (parsed TOML).

        Raises:
            TypeError: A value has the wrong type.
            ValueError: A setting that cannot be changed is present.
        """
        android: StrDict = get_table(data, "android") or {}
        signing: StrDict = get_table(data, "signing") or {}
        release: StrDict = get_table(data, "release") or {}

        application_id = get_str(android, "application_id") or DEFAULT_APPLICATION_ID
        abi_filters = get_str_list(android, "abi_filters")
        java_version = get_int(android, "java_version")

        fixed = [key for key in RELEASE_FIXED_KEYS if key in release]
        if fixed:
            raise ValueError(
                f"release.{fixed[0]} cannot be set: release builds always minify and shrink"
            )
        proguard_files = get_str_list(release, "proguard_files")

        release_config = ReleaseConfig(
            proguard_files=(
                DEFAULT_PROGUARD_FILES if proguard_files is None else tuple(proguard_files)
            ),
        )

        return cls(
            android=AndroidConfig(
                namespace=get_str(android, "namespace") or application_id,
                application_id=application_id,
                compile_sdk=get_int(android, "compile_sdk"),
                min_sdk=get_int(android, "min_sdk"),
                target_sdk=get_int(android, "target_sdk"),
                ndk_version=get_str(android, "ndk_version"),
                java_version=DEFAULT_JAVA_VERSION if java_version is None else java_version,
                abi_filters=DEFAULT_ABI_FILTERS if abi_filters is None else tuple(abi_filters),
            ),
            signing=SigningConfig(
                properties_file=get_str(signing, "properties_file") or DEFAULT_PROPERTIES_FILE,
            ),
            release=release_config,
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and syntax errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        if not is_str_dict(data_obj):
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data_obj)
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[ProjectConfig, ConfigError]:
    """Load project configuration from a TOML file.

    A missing file is not an error: the defaults apply.

    Args:
        path: Path to relconf.toml

    Returns:
        Ok(ProjectConfig) on success, Err(ConfigError) on failure
    """
    if not path.exists():
        return Ok(ProjectConfig())

    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(ProjectConfig.from_dict(result.value))
    except (TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config: {e}", path=path))
