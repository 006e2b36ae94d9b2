# SPDX-License-Identifier: MIT
"""Check result types shared by the checkers."""

from dataclasses import dataclass
from enum import Enum, auto


class CheckStatus(Enum):
    """How far a project can get given one check outcome."""

    OK = auto()
    """Both variants can be configured."""

    WARNING = auto()
    """Debug can be configured; release cannot (e.g. no key.properties)."""

    ERROR = auto()
    """The project configuration is broken."""


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Outcome of one check, e.g. `keystore: not found: /keys/upload.jks`."""

    name: str
    status: CheckStatus
    message: str
    hint: str | None = None

    @property
    def is_error(self) -> bool:
        return self.status == CheckStatus.ERROR

    @property
    def blocks_release(self) -> bool:
        """A release build could not be configured with this outcome."""
        return self.status != CheckStatus.OK

    @property
    def summary(self) -> str:
        return f"{self.name}: {self.message}"

    @classmethod
    def success(cls, name: str, message: str) -> "CheckResult":
        return cls(name=name, status=CheckStatus.OK, message=message)

    @classmethod
    def warning(cls, name: str, message: str, hint: str | None = None) -> "CheckResult":
        return cls(name=name, status=CheckStatus.WARNING, message=message, hint=hint)

    @classmethod
    def error(cls, name: str, message: str, hint: str | None = None) -> "CheckResult":
        return cls(name=name, status=CheckStatus.ERROR, message=message, hint=hint)
