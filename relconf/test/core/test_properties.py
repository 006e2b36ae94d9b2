"""Tests for relconf.core.properties module."""

from __future__ import annotations

from pathlib import Path

import pytest

from relconf.core.properties import (
    KeyProperties,
    PropertiesParseError,
    load_properties,
    parse_properties,
)
from relconf.core.result import Err, Ok


def _parse(text: str) -> KeyProperties:
    result = parse_properties(text, path=Path("key.properties"))
    assert isinstance(result, Ok), result
    return result.value


def _parse_error(text: str) -> PropertiesParseError:
    result = parse_properties(text, path=Path("key.properties"))
    assert isinstance(result, Err), result
    return result.error


class TestLoadProperties:
    """Test load_properties against real files."""

    def test_missing_file_is_empty_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "key.properties"
        result = load_properties(path)
        assert isinstance(result, Ok)
        props = result.value
        assert len(props) == 0
        assert dict(props) == {}
        assert props.found is False
        assert props.path == path

    def test_loads_four_keys(self, tmp_path: Path) -> None:
        path = tmp_path / "key.properties"
        path.write_text(
            "keyAlias=x\nkeyPassword=y\nstoreFile=./k.jks\nstorePassword=z\n",
            encoding="utf-8",
        )
        result = load_properties(path)
        assert isinstance(result, Ok)
        assert result.value.found is True
        assert dict(result.value) == {
            "keyAlias": "x",
            "keyPassword": "y",
            "storeFile": "./k.jks",
            "storePassword": "z",
        }

    def test_utf8_values(self, tmp_path: Path) -> None:
        path = tmp_path / "key.properties"
        path.write_text("keyAlias=clé\n", encoding="utf-8")
        result = load_properties(path)
        assert isinstance(result, Ok)
        assert result.value["keyAlias"] == "clé"

    def test_utf8_bom_is_ignored(self, tmp_path: Path) -> None:
        path = tmp_path / "key.properties"
        path.write_bytes(b"\xef\xbb\xbfkeyAlias=upload\n")
        result = load_properties(path)
        assert isinstance(result, Ok)
        assert result.value["keyAlias"] == "upload"

    def test_invalid_utf8_is_parse_error(self, tmp_path: Path) -> None:
        path = tmp_path / "key.properties"
        path.write_bytes(b"keyAlias=ok\nkeyPassword=\xff\xfe\n")
        result = load_properties(path)
        assert isinstance(result, Err)
        assert result.error.line == 2
        assert "UTF-8" in result.error.reason

    def test_directory_is_error(self, tmp_path: Path) -> None:
        path = tmp_path / "key.properties"
        path.mkdir()
        result = load_properties(path)
        assert isinstance(result, Err)
        assert result.error.path == path

    def test_crlf_line_endings(self, tmp_path: Path) -> None:
        path = tmp_path / "key.properties"
        path.write_bytes(b"keyAlias=a\r\nkeyPassword=b\r\n")
        result = load_properties(path)
        assert isinstance(result, Ok)
        assert result.value["keyAlias"] == "a"
        assert result.value["keyPassword"] == "b"


class TestParseProperties:
    """Test the line format."""

    def test_comments_and_blank_lines(self) -> None:
        props = _parse("# comment\n\n! also comment\n   \nkeyAlias=a\n")
        assert dict(props) == {"keyAlias": "a"}

    def test_colon_separator(self) -> None:
        props = _parse("keyAlias: upload\n")
        assert props["keyAlias"] == "upload"

    def test_whitespace_around_separator(self) -> None:
        props = _parse("  keyAlias   =   upload\n")
        assert props["keyAlias"] == "upload"

    def test_trailing_whitespace_in_value_is_kept(self) -> None:
        props = _parse("storePassword=abc  \n")
        assert props["storePassword"] == "abc  "

    def test_value_may_contain_separators(self) -> None:
        props = _parse("storePassword=a=b:c\n")
        assert props["storePassword"] == "a=b:c"

    def test_empty_value(self) -> None:
        props = _parse("keyPassword=\n")
        assert props["keyPassword"] == ""

    def test_line_continuation(self) -> None:
        props = _parse("storePassword=abc\\\n    def\n")
        assert props["storePassword"] == "abcdef"

    def test_escaped_backslash_is_not_continuation(self) -> None:
        props = _parse("storeFile=C:\\\\keys\\\\\nkeyAlias=a\n")
        assert props["storeFile"] == "C:\\keys\\"
        assert props["keyAlias"] == "a"

    def test_continuation_at_end_of_file(self) -> None:
        props = _parse("keyAlias=abc\\")
        assert props["keyAlias"] == "abc"

    @pytest.mark.parametrize("text", ["\\", "\\\n   \n", "  \\\n"])
    def test_bare_continuation_is_blank(self, text: str) -> None:
        assert dict(_parse(text)) == {}

    def test_bare_continuation_after_entry(self) -> None:
        props = _parse("keyAlias=x\n  \\\n")
        assert dict(props) == {"keyAlias": "x"}

    def test_unseparated_line_of_other_whitespace(self) -> None:
        error = _parse_error("keyAlias=x\n\v\n")
        assert error.line == 2
        assert "expected key=value" in error.reason

    def test_escapes(self) -> None:
        props = _parse("a=tab\\there\nb=\\u00e9\nc=\\=\\:\\#\n")
        assert props["a"] == "tab\there"
        assert props["b"] == "é"
        assert props["c"] == "=:#"

    def test_escaped_separator_in_key(self) -> None:
        props = _parse("my\\=key=value\n")
        assert props["my=key"] == "value"

    def test_later_duplicate_wins(self) -> None:
        props = _parse("keyAlias=first\nkeyAlias=second\n")
        assert props["keyAlias"] == "second"

    def test_hash_inside_value_is_not_comment(self) -> None:
        props = _parse("storePassword=pa#ss\n")
        assert props["storePassword"] == "pa#ss"

    def test_missing_separator(self) -> None:
        error = _parse_error("keyAlias=a\njunk\n")
        assert error.line == 2
        assert "key=value" in error.reason

    def test_empty_key(self) -> None:
        error = _parse_error("=value\n")
        assert error.line == 1
        assert "empty key" in error.reason

    def test_whitespace_in_key(self) -> None:
        error = _parse_error("key alias=x\n")
        assert "whitespace" in error.reason

    def test_invalid_unicode_escape(self) -> None:
        error = _parse_error("keyAlias=ok\nkeyPassword=\\u12G4\n")
        assert error.line == 2
        assert "\\u" in error.reason

    def test_error_reports_first_line_of_continued_entry(self) -> None:
        error = _parse_error("a=1\nb=\\\n  \\uZZZZ\n")
        assert error.line == 2

    def test_message_includes_location(self) -> None:
        error = _parse_error("junk\n")
        assert error.message == "key.properties:1: expected key=value, got 'junk'"


class TestKeyProperties:
    """Test KeyProperties mapping behaviour."""

    def test_is_read_only_mapping(self) -> None:
        props = _parse("keyAlias=a\n")
        assert "keyAlias" in props
        assert props.get("missing") is None
        assert list(props) == ["keyAlias"]

    def test_equals_plain_dict(self) -> None:
        assert _parse("a=1\n") == {"a": "1"}

    def test_repr_hides_values(self) -> None:
        props = _parse("keyAlias=a\nstorePassword=hunter2\n")
        text = repr(props)
        assert "hunter2" not in text
        assert "storePassword" in text

    def test_empty(self) -> None:
        props = KeyProperties.empty(Path("key.properties"))
        assert props.found is False
        assert len(props) == 0
