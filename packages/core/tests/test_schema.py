"""Tests for schema.py - Manifest and ExportEntry models."""

import pydantic
import pytest

from bundlekit_core.schema import ExportEntry, Manifest, PackageType


class TestPackageType:
    """Tests for PackageType enum."""

    def test_enum_values(self):
        """Test that both module formats exist with their manifest spelling."""
        assert PackageType.MODULE.value == "module"
        assert PackageType.COMMONJS.value == "commonjs"

    def test_compares_equal_to_string(self):
        """PackageType is a str enum so raw manifest values compare equal."""
        assert PackageType.MODULE == "module"


class TestManifest:
    """Tests for the Manifest model."""

    def test_empty_manifest(self):
        """An empty object is a valid manifest with no entries declared."""
        manifest = Manifest.model_validate({})

        assert manifest.type is None
        assert manifest.main is None
        assert manifest.package_type == PackageType.COMMONJS

    def test_declared_type(self):
        """Declared type selects the package format."""
        manifest = Manifest.model_validate({"type": "module", "main": "index.js"})

        assert manifest.type == "module"
        assert manifest.package_type == PackageType.MODULE

    @pytest.mark.parametrize("declared", ["esm", "", 1, ["module"], None])
    def test_unknown_type_falls_back_to_commonjs(self, declared):
        """A type that is not a known format counts as CommonJS."""
        manifest = Manifest.model_validate({"type": declared})

        assert manifest.package_type == PackageType.COMMONJS

    def test_non_string_fields_accepted(self):
        """Values the resolver cannot use are kept, not rejected."""
        manifest = Manifest.model_validate(
            {"name": ["x"], "version": 1, "main": 5, "module": False}
        )

        assert manifest.main == 5
        assert manifest.module is False
        assert manifest.model_extra["version"] == 1

    def test_unknown_fields_kept(self):
        """Unrecognised keys are preserved for later pipeline stages."""
        manifest = Manifest.model_validate(
            {"name": "my-lib", "scripts": {"build": "rslib build"}, "sideEffects": False}
        )

        assert manifest.name == "my-lib"
        assert manifest.model_extra["scripts"] == {"build": "rslib build"}
        assert manifest.model_extra["sideEffects"] is False

    def test_manifest_is_immutable(self):
        """Manifests are read once and never modified."""
        manifest = Manifest.model_validate({"main": "index.js"})

        with pytest.raises(pydantic.ValidationError):
            manifest.main = "other.js"


class TestExportEntry:
    """Tests for the ExportEntry model."""

    def test_construct_by_field_name(self):
        """Entries can be built with Python field names."""
        entry = ExportEntry(output_path="dist/index.js", type="commonjs", from_="main")

        assert entry.output_path == "dist/index.js"
        assert entry.type == PackageType.COMMONJS
        assert entry.from_ == "main"

    def test_construct_by_alias(self):
        """Entries can be built from their serialised form."""
        entry = ExportEntry.model_validate(
            {"outputPath": "dist/index.mjs", "type": "module", "from": "exports"}
        )

        assert entry.output_path == "dist/index.mjs"
        assert entry.from_ == "exports"

    def test_dump_by_alias(self):
        """Serialised entries use outputPath/type/from keys and plain strings."""
        entry = ExportEntry(output_path="dist/index.js", type=PackageType.MODULE, from_="main")

        assert entry.model_dump(by_alias=True, mode="json") == {
            "outputPath": "dist/index.js",
            "type": "module",
            "from": "main",
        }

    def test_merge_later_wins(self):
        """Merging applies the other entry's attributes without touching the original."""
        first = ExportEntry(output_path="dist/index.js", type="commonjs", from_="main")
        second = ExportEntry(output_path="dist/index.js", type="commonjs", from_="exports")

        merged = first.merge(second)

        assert merged.from_ == "exports"
        assert merged.output_path == "dist/index.js"
        assert first.from_ == "main"
