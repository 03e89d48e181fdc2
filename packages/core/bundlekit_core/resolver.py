"""
Package Resolver
================

Combines the manifest reader, entry resolution and source root calculation
for one package:

1. Read package.json (a missing or broken manifest means no entries)
2. Resolve export entries (conflicts abort)
3. Compute the common source root of the given source files
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Union

from bundlekit_common import ManifestDefaults, get_logger

from .entries import resolve_entries
from .manifest import read_manifest
from .paths import IsFile, longest_common_ancestor
from .schema import ExportEntry, Manifest

logger = get_logger("core.resolver")


@dataclass
class PackageResolution:
    """Result of resolving one package."""

    manifest: Optional[Manifest] = None
    """Parsed manifest, None if it is missing or invalid"""

    entries: List[ExportEntry] = field(default_factory=list)
    """Export entries in declaration order"""

    source_root: Optional[str] = None
    """Deepest directory shared by the source files, None without sources"""


async def resolve_package(
    root: Union[str, Path],
    source_paths: Iterable[str] = (),
    fields: Iterable[str] = ManifestDefaults.ENTRY_FIELDS,
    *,
    is_file: Optional[IsFile] = None,
) -> PackageResolution:
    """
    Resolve the export surface and source root of the package at ``root``.

    Args:
        root: Package directory containing package.json
        source_paths: Absolute paths of the package's source files
        fields: Entry-declaring manifest fields to read
        is_file: Optional filesystem predicate for the source root check

    Returns:
        PackageResolution

    Raises:
        ConflictingExportTypesError: If the manifest declares one output path
            with two module formats
    """
    pkg_logger = logger.with_context(package_root=str(root))

    manifest = read_manifest(root)
    entries = resolve_entries(manifest, fields) if manifest is not None else []
    source_root = await longest_common_ancestor(source_paths, is_file=is_file)

    pkg_logger.info(
        "Resolved package",
        entries=len(entries),
        source_root=source_root,
    )
    return PackageResolution(manifest=manifest, entries=entries, source_root=source_root)
