"""
Package Manifest Schema

Pydantic models for the parts of ``package.json`` the bundler consumes and for
the export entries derived from it.

Design Principles:
- Lenient: receives dicts, never rejects a JSON object over field values
- No file I/O: reading the manifest is manifest.py's responsibility
- Extensible: unknown manifest keys are kept, not dropped

Usage:
    from bundlekit_core.schema import Manifest

    manifest = Manifest.model_validate({"name": "my-lib", "main": "dist/index.js"})
    manifest.package_type  # PackageType.COMMONJS
"""

from enum import Enum
from typing import Any

from bundlekit_common import PACKAGE_TYPES, ManifestDefaults
from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Self


class PackageType(str, Enum):
    """Module format an artifact is emitted as."""

    MODULE = "module"
    """ECMAScript module"""

    COMMONJS = "commonjs"
    """CommonJS module"""


class Manifest(BaseModel):
    """
    Parsed ``package.json``.

    Only the fields the entry resolver reads are declared; everything else is
    preserved as extra attributes for later pipeline stages. Declared fields
    keep whatever JSON value the manifest holds: the resolver ignores values
    it cannot use instead of rejecting the manifest.
    """

    type: Any = None
    main: Any = None
    module: Any = None
    exports: Any = None

    model_config = ConfigDict(extra="allow", frozen=True)

    @property
    def package_type(self) -> PackageType:
        """Declared ``type``, or CommonJS when it is missing or not a known format."""
        if isinstance(self.type, str) and self.type in PACKAGE_TYPES:
            return PackageType(self.type)
        return PackageType(ManifestDefaults.DEFAULT_TYPE)


class ExportEntry(BaseModel):
    """
    One build artifact declared by a manifest.

    Serialised with aliases it reads
    ``{"outputPath": "dist/index.js", "type": "commonjs", "from": "main"}``.
    """

    output_path: str = Field(alias="outputPath")
    """Normalized POSIX-style output path, unique per package"""

    type: PackageType
    """Module format the artifact must be emitted as"""

    from_: str = Field(alias="from")
    """Manifest field that declared the artifact"""

    model_config = ConfigDict(populate_by_name=True)

    def merge(self, other: "ExportEntry") -> Self:
        """Return a copy of this entry with ``other``'s attributes applied on top."""
        return self.model_copy(update=other.model_dump())
