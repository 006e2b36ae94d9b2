# SPDX-License-Identifier: MIT
"""Checker modules for release configuration validation.

- ProjectChecker: relconf.toml and shrink rules files
- SigningChecker: key.properties, signing keys and keystore
"""

from relconf.services.checkers.base import CheckResult, CheckStatus
from relconf.services.checkers.project import ProjectChecker
from relconf.services.checkers.signing import SigningChecker

__all__ = [
    "CheckResult",
    "CheckStatus",
    "ProjectChecker",
    "SigningChecker",
]
