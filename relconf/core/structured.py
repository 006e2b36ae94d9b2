"""Helpers for reading untyped TOML tables.

Used at the relconf.toml boundary: each getter returns None when the key is
absent and raises TypeError when it is present with the wrong type, so a typo
in the config file is reported instead of silently replaced by a default.
"""

from __future__ import annotations

from typing import Mapping, TypeGuard, cast

StrDict = dict[str, object]


def is_str_dict(obj: object) -> TypeGuard[StrDict]:
    """Return True if obj is a dict with string keys."""
    if not isinstance(obj, dict):
        return False
    d = cast(dict[object, object], obj)
    return all(isinstance(k, str) for k in d.keys())


def get_table(table: Mapping[str, object], key: str) -> StrDict | None:
    value = table.get(key)
    if value is None:
        return None
    if not is_str_dict(value):
        raise TypeError(f"[{key}] must be a table")
    return value


def get_str(table: Mapping[str, object], key: str) -> str | None:
    """Get a string, stripped; empty strings count as absent."""
    value = table.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string")
    s = value.strip()
    return s or None


def get_int(table: Mapping[str, object], key: str) -> int | None:
    value = table.get(key)
    if value is None:
        return None
    # bool is an int subclass; `min_sdk = true` is not a version number
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"'{key}' must be an integer")
    return value


def get_str_list(table: Mapping[str, object], key: str) -> list[str] | None:
    value = table.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        raise TypeError(f"'{key}' must be a list of strings")
    items = cast(list[object], value)
    out: list[str] = []
    for item in items:
        if not isinstance(item, str) or not item.strip():
            raise TypeError(f"'{key}' must be a list of non-empty strings")
        out.append(item.strip())
    return out
