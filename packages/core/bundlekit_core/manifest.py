"""
Manifest Reader
===============

Loads ``package.json`` from a package directory.

A package without a manifest, or with one that cannot be parsed, has no
declared entries. Both cases are reported as warnings and resolve to ``None``
so the calling build keeps going.
"""

import json
from pathlib import Path
from typing import Any, Optional, Union

from bundlekit_common import ManifestDefaults, get_logger

from .schema import Manifest

logger = get_logger("core.manifest")


def is_object(value: Any) -> bool:
    """True if ``value`` is a JSON object (a dict), not an array or scalar."""
    return isinstance(value, dict)


def read_manifest(directory: Union[str, Path]) -> Optional[Manifest]:
    """
    Read and validate ``<directory>/package.json``.

    Args:
        directory: Package root, absolute or relative

    Returns:
        Parsed Manifest, or None if the file is missing or invalid

    Examples:
        >>> read_manifest("/work/packages/core")
        Manifest(name='core', type=<PackageType.MODULE: 'module'>, main='dist/index.js', ...)

        >>> read_manifest("/tmp/empty")  # logs a warning
        None
    """
    manifest_path = Path(directory) / ManifestDefaults.FILENAME

    if not manifest_path.is_file():
        logger.warning(
            f"{ManifestDefaults.FILENAME} does not exist in the {directory} directory",
            directory=str(directory),
        )
        return None

    try:
        data = json.loads(manifest_path.read_text(encoding=ManifestDefaults.ENCODING))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning(
            f"Failed to parse {manifest_path}, it might not be valid JSON",
            path=str(manifest_path),
            error=str(e),
        )
        return None

    if not is_object(data):
        logger.warning(
            f"Failed to parse {manifest_path}, expected a JSON object "
            f"but got {type(data).__name__}",
            path=str(manifest_path),
        )
        return None

    return Manifest.model_validate(data)
