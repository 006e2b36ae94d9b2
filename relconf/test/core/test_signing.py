"""Tests for relconf.core.signing module."""

from __future__ import annotations

from pathlib import Path

import pytest

from relconf.core.properties import KeyProperties
from relconf.core.result import Err, Ok
from relconf.core.signing import (
    REQUIRED_KEYS,
    MissingSigningKey,
    SigningProfile,
    build_signing_profile,
    mask,
)

COMPLETE = {
    "keyAlias": "upload",
    "keyPassword": "key-secret",
    "storeFile": "keys/upload.jks",
    "storePassword": "store-secret",
}


class TestBuildSigningProfile:
    """Test build_signing_profile."""

    def test_fields_equal_inputs(self, tmp_path: Path) -> None:
        result = build_signing_profile(COMPLETE, tmp_path)
        assert isinstance(result, Ok)
        profile = result.value
        assert profile.key_alias == "upload"
        assert profile.key_password == "key-secret"
        assert profile.store_password == "store-secret"
        assert profile.store_file == tmp_path / "keys" / "upload.jks"

    def test_store_file_resolves_to_existing_absolute_path(self, tmp_path: Path) -> None:
        keystore = tmp_path / "k.jks"
        keystore.write_bytes(b"\x00")
        props = {**COMPLETE, "storeFile": "./k.jks"}

        result = build_signing_profile(props, tmp_path)
        assert isinstance(result, Ok)
        store_file = result.value.store_file
        assert store_file.is_absolute()
        assert store_file.exists()
        assert store_file == keystore

    def test_absolute_store_file_kept(self, tmp_path: Path) -> None:
        absolute = tmp_path / "elsewhere" / "release.keystore"
        props = {**COMPLETE, "storeFile": str(absolute)}
        result = build_signing_profile(props, tmp_path / "project")
        assert isinstance(result, Ok)
        assert result.value.store_file == absolute

    def test_parent_relative_store_file_is_normalized(self, tmp_path: Path) -> None:
        project = tmp_path / "android"
        props = {**COMPLETE, "storeFile": "../upload.jks"}
        result = build_signing_profile(props, project)
        assert isinstance(result, Ok)
        assert result.value.store_file == tmp_path / "upload.jks"

    def test_home_is_expanded(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HOME", str(tmp_path))
        props = {**COMPLETE, "storeFile": "~/upload.jks"}
        result = build_signing_profile(props, tmp_path / "project")
        assert isinstance(result, Ok)
        assert result.value.store_file == tmp_path / "upload.jks"

    def test_empty_mapping_names_all_four_keys(self, tmp_path: Path) -> None:
        result = build_signing_profile({}, tmp_path)
        assert isinstance(result, Err)
        assert result.error.missing == REQUIRED_KEYS
        assert result.error.missing == ("keyAlias", "keyPassword", "storeFile", "storePassword")

    def test_names_only_missing_keys(self, tmp_path: Path) -> None:
        props = {"keyAlias": "a", "storeFile": "k.jks"}
        result = build_signing_profile(props, tmp_path)
        assert isinstance(result, Err)
        assert result.error.missing == ("keyPassword", "storePassword")

    def test_blank_value_counts_as_missing(self, tmp_path: Path) -> None:
        props = {**COMPLETE, "keyPassword": "   "}
        result = build_signing_profile(props, tmp_path)
        assert isinstance(result, Err)
        assert result.error.missing == ("keyPassword",)

    def test_error_carries_properties_path(self, tmp_path: Path) -> None:
        path = tmp_path / "key.properties"
        props = KeyProperties(path=path, entries={"keyAlias": "a"})
        result = build_signing_profile(props, tmp_path)
        assert isinstance(result, Err)
        assert result.error.path == path
        assert str(path) in result.error.message

    def test_passwords_taken_verbatim(self, tmp_path: Path) -> None:
        props = {**COMPLETE, "storePassword": " spaced "}
        result = build_signing_profile(props, tmp_path)
        assert isinstance(result, Ok)
        assert result.value.store_password == " spaced "


class TestSigningProfile:
    """Test SigningProfile rendering."""

    def _profile(self) -> SigningProfile:
        return SigningProfile(
            key_alias="upload",
            key_password="key-secret",
            store_file=Path("/keys/upload.jks"),
            store_password="store-secret",
        )

    def test_frozen(self) -> None:
        profile = self._profile()
        with pytest.raises(AttributeError):
            profile.key_alias = "other"  # type: ignore[misc]

    def test_as_dict_masks_secrets(self) -> None:
        data = self._profile().as_dict()
        assert data["keyAlias"] == "upload"
        assert data["keyPassword"] == "********"
        assert data["storePassword"] == "********"
        assert data["storeFile"] == str(Path("/keys/upload.jks"))

    def test_as_dict_reveal(self) -> None:
        data = self._profile().as_dict(reveal=True)
        assert data["keyPassword"] == "key-secret"

    def test_repr_hides_secrets(self) -> None:
        text = repr(self._profile())
        assert "key-secret" not in text
        assert "store-secret" not in text
        assert "upload" in text


class TestMissingSigningKey:
    def test_message_lists_keys(self) -> None:
        err = MissingSigningKey(missing=("keyAlias", "storeFile"))
        assert err.message == "missing signing key(s): keyAlias, storeFile"


def test_mask() -> None:
    assert mask("abc") == "********"
    assert mask("") == ""
