"""Exit codes for CLI commands.

Every domain error maps to one of these codes (see relconf.output.errors).
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes; values are stable.

    - 0: Success
    - 1: User error (unknown variant, bad arguments)
    - 2: Configuration error (project not found, invalid relconf.toml,
      malformed key.properties)
    - 3: Signing error (release requested without usable credentials)
    - 5: I/O error (file unreadable)
    """

    OK = 0
    USER_ERROR = 1
    CONFIG_ERROR = 2
    SIGNING_ERROR = 3
    IO_ERROR = 5

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")
