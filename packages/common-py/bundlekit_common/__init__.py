"""bundlekit common utilities: errors, constants and structured logging."""

from .constants import LOG_LEVELS, PACKAGE_TYPES, LogDefaults, ManifestDefaults, ModuleSuffixes
from .errors import (
    BundleKitError,
    ConflictError,
    ConflictingExportTypesError,
    ValidationError,
)
from .logger import (
    BundleKitLogger,
    clear_build_id,
    configure_logging,
    get_build_id,
    get_logger,
    set_build_id,
)

__all__ = [
    # Constants
    "LOG_LEVELS",
    "PACKAGE_TYPES",
    "LogDefaults",
    "ManifestDefaults",
    "ModuleSuffixes",
    # Errors
    "BundleKitError",
    "ValidationError",
    "ConflictError",
    "ConflictingExportTypesError",
    # Logging
    "BundleKitLogger",
    "get_logger",
    "configure_logging",
    "set_build_id",
    "get_build_id",
    "clear_build_id",
]
