"""
bundlekit core
==============

Helpers the bundler uses to understand a package:

- Manifest reading (package.json, tolerant of missing/broken files)
- Export entry resolution with module format inference
- Common source root calculation
- Node.js built-in module registry

Usage:
    from bundlekit_core import read_manifest, resolve_entries, longest_common_ancestor

    manifest = read_manifest("packages/core")
    entries = resolve_entries(manifest) if manifest else []
    root = await longest_common_ancestor(source_files)
"""

from .entries import (
    ENTRY_FIELD_COLLECTORS,
    ExportEntryMap,
    get_file_type,
    normalize_output_path,
    resolve_entries,
)
from .manifest import is_object, read_manifest
from .node_builtins import NODE_BUILTIN_MODULES, NODE_BUILTIN_PATTERNS, is_builtin
from .paths import common_path_segments, is_regular_file, longest_common_ancestor
from .resolver import PackageResolution, resolve_package
from .schema import ExportEntry, Manifest, PackageType

__version__ = "0.1.0"

__all__ = [
    # Schema
    "PackageType",
    "Manifest",
    "ExportEntry",
    # Manifest reading
    "read_manifest",
    "is_object",
    # Entry resolution
    "resolve_entries",
    "get_file_type",
    "normalize_output_path",
    "ExportEntryMap",
    "ENTRY_FIELD_COLLECTORS",
    # Source root
    "longest_common_ancestor",
    "common_path_segments",
    "is_regular_file",
    # Built-ins
    "NODE_BUILTIN_MODULES",
    "NODE_BUILTIN_PATTERNS",
    "is_builtin",
    # Package resolution
    "resolve_package",
    "PackageResolution",
]
