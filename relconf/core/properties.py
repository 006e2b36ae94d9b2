"""Reader for `key.properties` files.

The file uses the Java properties line format that Gradle loads with
`java.util.Properties`:

    # comment          ! also a comment
    keyAlias=upload
    storePassword : s3cr\\
        et             (continued on the next line)
    storeFile=~/keys/upload.jks

Differences from java.util.Properties are deliberate strictness: a line
without `=` or `:` and a key containing unescaped whitespace are parse errors
instead of being read as oddly-split pairs. Keys are case-sensitive; later
duplicates override earlier ones.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result

__all__ = [
    "KeyProperties",
    "PropertiesParseError",
    "load_properties",
    "parse_properties",
]

_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_WHITESPACE = " \t\f"
_SEPARATORS = "=:"
_SIMPLE_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


@dataclass(frozen=True, slots=True)
class PropertiesParseError:
    """The properties file exists but cannot be read as key=value lines."""

    path: Path
    line: int
    reason: str

    @property
    def message(self) -> str:
        return f"{self.path}:{self.line}: {self.reason}"


def _empty_entries() -> dict[str, str]:
    return {}


@dataclass(frozen=True, slots=True, eq=False)
class KeyProperties(Mapping[str, str]):
    """Read-only key/value mapping loaded from a properties file.

    `found` is False when the file did not exist; the mapping is then empty.
    """

    path: Path
    found: bool = True
    entries: dict[str, str] = field(default_factory=_empty_entries)

    @classmethod
    def empty(cls, path: Path) -> KeyProperties:
        return cls(path=path, found=False)

    def __getitem__(self, key: str) -> str:
        return self.entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __repr__(self) -> str:
        # Never print credentials, even in tracebacks.
        keys = ", ".join(sorted(self.entries))
        return f"KeyProperties(path={str(self.path)!r}, found={self.found}, keys=[{keys}])"


class _LineError(Exception):
    def __init__(self, line: int, reason: str) -> None:
        super().__init__(reason)
        self.line = line
        self.reason = reason


def _ends_with_continuation(line: str) -> bool:
    count = len(line) - len(line.rstrip("\\"))
    return count % 2 == 1


def _logical_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield (first physical line number, logical line) pairs.

    Comments and blank lines are dropped; continuation lines are joined with
    their leading whitespace removed.
    """
    physical = _LINE_BREAK.split(text)
    i = 0
    while i < len(physical):
        start = i + 1
        line = physical[i].lstrip(_WHITESPACE)
        i += 1
        if not line or line[0] in "#!":
            continue
        while _ends_with_continuation(line):
            line = line[:-1]
            if i >= len(physical):
                break
            line += physical[i].lstrip(_WHITESPACE)
            i += 1
        if not line:
            # a bare continuation joined to nothing, skipped like a blank line
            continue
        yield start, line


def _unescape(raw: str, lineno: int) -> str:
    out: list[str] = []
    i = 0
    while i < len(raw):
        ch = raw[i]
        if ch != "\\":
            out.append(ch)
            i += 1
            continue
        if i + 1 >= len(raw):
            # lone trailing backslash of a continuation at end of file
            break
        nxt = raw[i + 1]
        if nxt == "u":
            digits = raw[i + 2 : i + 6]
            if len(digits) != 4 or any(c not in "0123456789abcdefABCDEF" for c in digits):
                raise _LineError(lineno, f"invalid \\u escape: \\u{digits}")
            out.append(chr(int(digits, 16)))
            i += 6
            continue
        out.append(_SIMPLE_ESCAPES.get(nxt, nxt))
        i += 2
    return "".join(out)


def _split_pair(line: str, lineno: int) -> tuple[str, str]:
    i = 0
    while i < len(line):
        ch = line[i]
        if ch == "\\":
            i += 2
            continue
        if ch in _SEPARATORS:
            break
        i += 1
    else:
        token = line.split(maxsplit=1)[0] if line.strip() else line
        raise _LineError(lineno, f"expected key=value, got {token!r}")

    raw_key = line[:i].rstrip(_WHITESPACE)
    raw_value = line[i + 1 :].lstrip(_WHITESPACE)
    if not raw_key:
        raise _LineError(lineno, "empty key")

    j = 0
    while j < len(raw_key):
        if raw_key[j] == "\\":
            j += 2
            continue
        if raw_key[j] in _WHITESPACE:
            raise _LineError(lineno, f"whitespace in key {raw_key!r}")
        j += 1

    return _unescape(raw_key, lineno), _unescape(raw_value, lineno)


def parse_properties(text: str, *, path: Path) -> Result[KeyProperties, PropertiesParseError]:
    """Parse properties text already decoded from the file at `path`."""
    entries: dict[str, str] = {}
    try:
        for lineno, line in _logical_lines(text):
            key, value = _split_pair(line, lineno)
            entries[key] = value
    except _LineError as e:
        return Err(PropertiesParseError(path=path, line=e.line, reason=e.reason))
    return Ok(KeyProperties(path=path, found=True, entries=entries))


def load_properties(path: Path) -> Result[KeyProperties, PropertiesParseError]:
    """Load a properties file as UTF-8.

    A missing file is a valid state (debug builds need no credentials) and
    yields an empty mapping with `found=False`.

    Args:
        path: Path to key.properties

    Returns:
        Ok(KeyProperties) on success, Err(PropertiesParseError) if the file
        exists but is not valid UTF-8 key=value text.
    """
    try:
        data = path.read_bytes()
    except FileNotFoundError:
        return Ok(KeyProperties.empty(path))
    except IsADirectoryError:
        return Err(PropertiesParseError(path=path, line=0, reason="is a directory"))
    except PermissionError:
        return Err(PropertiesParseError(path=path, line=0, reason="permission denied"))

    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        lineno = data[: e.start].count(b"\n") + 1
        return Err(PropertiesParseError(path=path, line=lineno, reason="not valid UTF-8"))

    return parse_properties(text, path=path)
