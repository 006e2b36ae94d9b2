"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from relconf.core.config import ConfigError
from relconf.core.errors import ErrorCode
from relconf.core.project import ProjectError
from relconf.core.properties import PropertiesParseError
from relconf.core.signing import REQUIRED_KEYS, MissingSigningKey
from relconf.core.variants import MissingPropertiesFile, UnknownVariant
from relconf.output.console import Style

if TYPE_CHECKING:
    from relconf.output.console import ConsoleProtocol

__all__ = ["RelconfError", "print_error", "error_exit_code"]

RelconfError = (
    ConfigError
    | ProjectError
    | PropertiesParseError
    | MissingPropertiesFile
    | MissingSigningKey
    | UnknownVariant
)


def print_error(error: RelconfError, console: ConsoleProtocol) -> None:
    """Print an error with its fix hint."""
    match error:
        case UnknownVariant(available=available):
            console.error(error.message)
            console.print(f"Available: {', '.join(available)}", Style.DIM)
        case ProjectError(message=message, searched_from=searched_from):
            console.error(message)
            if searched_from is not None:
                console.print(f"searched from: {searched_from}", Style.DIM)
            console.print("hint: pass --project or set RELCONF_PROJECT_ROOT", Style.DIM)
        case ConfigError(message=message, path=path):
            console.error(f"{path}: {message}" if path is not None else message)
        case PropertiesParseError(path=path, line=line, reason=reason):
            console.error(f"malformed {path.name} (line {line}): {reason}")
            console.print(f"file: {path}", Style.DIM)
        case MissingPropertiesFile():
            console.error(f"release build: {error.message}")
            console.print(f"hint: create it with {', '.join(REQUIRED_KEYS)}", Style.DIM)
        case MissingSigningKey():
            console.error(error.message)
            console.print("hint: every key must be set to a non-empty value", Style.DIM)


def error_exit_code(error: RelconfError) -> int:
    """Get exit code for an error."""
    match error:
        case UnknownVariant():
            return int(ErrorCode.USER_ERROR)
        case ProjectError() | ConfigError():
            return int(ErrorCode.CONFIG_ERROR)
        case PropertiesParseError(line=0):
            return int(ErrorCode.IO_ERROR)
        case PropertiesParseError():
            return int(ErrorCode.CONFIG_ERROR)
        case MissingPropertiesFile() | MissingSigningKey():
            return int(ErrorCode.SIGNING_ERROR)
    # Fallback for exhaustiveness
    return int(ErrorCode.CONFIG_ERROR)
