"""Core domain types and logic."""

from .config import ProjectConfig, ConfigError, load_config
from .errors import ErrorCode
from .project import Project, ProjectError, detect_project
from .properties import KeyProperties, PropertiesParseError, load_properties
from .result import Err, Ok, Result, is_err, is_ok
from .signing import MissingSigningKey, SigningProfile, build_signing_profile
from .variants import (
    BuildVariant,
    MissingPropertiesFile,
    UnknownVariant,
    VariantConfig,
    parse_variant,
    select_variant,
)

__all__ = [
    # config
    "ProjectConfig",
    "ConfigError",
    "load_config",
    # errors
    "ErrorCode",
    # project
    "Project",
    "ProjectError",
    "detect_project",
    # properties
    "KeyProperties",
    "PropertiesParseError",
    "load_properties",
    # result
    "Err",
    "Ok",
    "Result",
    "is_err",
    "is_ok",
    # signing
    "MissingSigningKey",
    "SigningProfile",
    "build_signing_profile",
    # variants
    "BuildVariant",
    "MissingPropertiesFile",
    "UnknownVariant",
    "VariantConfig",
    "parse_variant",
    "select_variant",
]
