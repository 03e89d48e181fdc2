"""
bundlekit Constants

Shared defaults for manifest handling, module format detection and logging.
"""

# Module formats a package (or a single file) can be emitted as
PACKAGE_TYPES = ["module", "commonjs"]


class ManifestDefaults:
    """Defaults for reading package manifests."""

    FILENAME = "package.json"
    ENCODING = "utf-8"

    # Node treats a package without "type" as CommonJS
    DEFAULT_TYPE = "commonjs"

    # Manifest fields the entry resolver reads unless told otherwise
    ENTRY_FIELDS = ("main",)


class ModuleSuffixes:
    """File suffixes that pin a module format regardless of the package type."""

    ESM = ".mjs"
    CJS = ".cjs"

    # Targets in an "exports" map that name an emitted script
    SCRIPTS = (".js", ".mjs", ".cjs")


class LogDefaults:
    """Logging configuration defaults."""

    LEVEL = "INFO"
    ENV_VAR = "BUNDLEKIT_LOG_LEVEL"
    LOGGER_PREFIX = "bundlekit"


LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
