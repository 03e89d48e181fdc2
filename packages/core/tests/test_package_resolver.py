"""Tests for resolver.py - Resolving a whole package."""

import pytest
from bundlekit_common import ConflictingExportTypesError

from bundlekit_core.resolver import PackageResolution, resolve_package
from bundlekit_core.schema import PackageType


class TestPackageResolution:
    """Tests for PackageResolution dataclass."""

    def test_default_values(self):
        resolution = PackageResolution()

        assert resolution.manifest is None
        assert resolution.entries == []
        assert resolution.source_root is None


class TestResolvePackage:
    """Tests for resolve_package function."""

    @pytest.mark.asyncio
    async def test_resolves_entries_and_source_root(self, write_manifest, tmp_path, fake_fs):
        write_manifest({"name": "my-lib", "type": "module", "main": "./dist/index.js"})
        sources = ["/repo/my-lib/src/index.ts", "/repo/my-lib/src/utils/fmt.ts"]

        resolution = await resolve_package(tmp_path, sources, is_file=fake_fs(sources))

        assert resolution.manifest.name == "my-lib"
        assert [(e.output_path, e.type) for e in resolution.entries] == [
            ("dist/index.js", PackageType.MODULE)
        ]
        assert resolution.source_root == "/repo/my-lib/src"

    @pytest.mark.asyncio
    async def test_missing_manifest_yields_no_entries(self, tmp_path):
        resolution = await resolve_package(tmp_path)

        assert resolution.manifest is None
        assert resolution.entries == []
        assert resolution.source_root is None

    @pytest.mark.asyncio
    async def test_extra_fields(self, write_manifest, tmp_path):
        write_manifest({"main": "dist/index.cjs", "module": "dist/index.mjs"})

        resolution = await resolve_package(tmp_path, fields=("main", "module"))

        assert [e.from_ for e in resolution.entries] == ["main", "module"]

    @pytest.mark.asyncio
    async def test_conflict_propagates(self, write_manifest, tmp_path):
        write_manifest({"main": "index.js", "module": "index.js"})

        with pytest.raises(ConflictingExportTypesError):
            await resolve_package(tmp_path, fields=("main", "module"))
