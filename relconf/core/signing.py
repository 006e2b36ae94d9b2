"""Release signing profile.

The profile is built once per invocation from the loaded properties and is
never modified afterwards.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .properties import KeyProperties
from .result import Err, Ok, Result

__all__ = [
    "SigningProfile",
    "MissingSigningKey",
    "REQUIRED_KEYS",
    "build_signing_profile",
    "mask",
]

KEY_ALIAS = "keyAlias"
KEY_PASSWORD = "keyPassword"
STORE_FILE = "storeFile"
STORE_PASSWORD = "storePassword"

REQUIRED_KEYS: tuple[str, ...] = (KEY_ALIAS, KEY_PASSWORD, STORE_FILE, STORE_PASSWORD)


def mask(secret: str) -> str:
    """Render a secret without revealing it."""
    return "********" if secret else ""


@dataclass(frozen=True, slots=True)
class MissingSigningKey:
    """One or more required signing keys are absent or empty."""

    missing: tuple[str, ...]
    path: Path | None = None

    @property
    def message(self) -> str:
        where = f" in {self.path}" if self.path is not None else ""
        return f"missing signing key(s){where}: {', '.join(self.missing)}"


@dataclass(frozen=True, slots=True)
class SigningProfile:
    """Credentials used to sign a release artifact.

    Attributes:
        key_alias: Alias of the key inside the keystore
        key_password: Password of the key (secret)
        store_file: Absolute path of the keystore
        store_password: Password of the keystore (secret)
    """

    key_alias: str
    key_password: str
    store_file: Path
    store_password: str

    def as_dict(self, *, reveal: bool = False) -> dict[str, str]:
        """Render with the property names of key.properties; secrets masked."""
        return {
            KEY_ALIAS: self.key_alias,
            KEY_PASSWORD: self.key_password if reveal else mask(self.key_password),
            STORE_FILE: str(self.store_file),
            STORE_PASSWORD: self.store_password if reveal else mask(self.store_password),
        }

    def __repr__(self) -> str:
        return (
            f"SigningProfile(key_alias={self.key_alias!r}, key_password='********', "
            f"store_file={str(self.store_file)!r}, store_password='********')"
        )


def _resolve_store_file(value: str, project_root: Path) -> Path:
    p = Path(value).expanduser()
    if not p.is_absolute():
        p = project_root / p
    # normpath, not resolve(): the keystore may not exist yet and symlinks
    # are left as the developer wrote them.
    return Path(os.path.normpath(p.absolute()))


def build_signing_profile(
    props: Mapping[str, str],
    project_root: Path,
) -> Result[SigningProfile, MissingSigningKey]:
    """Bind the four signing keys to a profile.

    Values are taken verbatim; a value that is empty or only whitespace
    counts as missing. `storeFile` is resolved against `project_root` when
    relative.

    Returns:
        Ok(SigningProfile), or Err(MissingSigningKey) naming every missing key
        in the order keyAlias, keyPassword, storeFile, storePassword.
    """
    missing = tuple(k for k in REQUIRED_KEYS if not props.get(k, "").strip())
    if missing:
        path = props.path if isinstance(props, KeyProperties) else None
        return Err(MissingSigningKey(missing=missing, path=path))

    return Ok(
        SigningProfile(
            key_alias=props[KEY_ALIAS],
            key_password=props[KEY_PASSWORD],
            store_file=_resolve_store_file(props[STORE_FILE].strip(), project_root),
            store_password=props[STORE_PASSWORD],
        )
    )
