"""Tests for relconf.core.errors module."""

from relconf.core.errors import ErrorCode


def test_values_are_stable() -> None:
    assert ErrorCode.OK == 0
    assert ErrorCode.USER_ERROR == 1
    assert ErrorCode.CONFIG_ERROR == 2
    assert ErrorCode.SIGNING_ERROR == 3
    assert ErrorCode.IO_ERROR == 5


def test_str() -> None:
    assert str(ErrorCode.SIGNING_ERROR) == "signing error"

