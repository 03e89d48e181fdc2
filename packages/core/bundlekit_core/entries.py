"""
Export Entry Resolution
=======================

Derives the build artifacts a package declares in its manifest and the module
format each one must be emitted as.

Resolution works the same way for every entry-declaring field:
1. A collector turns the field into candidate entries
2. Each candidate's format comes from its file suffix, falling back to the
   field's default (usually the package ``type``)
3. Candidates are merged by normalized output path; two different formats for
   one path abort resolution with ConflictingExportTypesError

Usage:
    from bundlekit_core.entries import resolve_entries

    entries = resolve_entries(manifest)
    entries = resolve_entries(manifest, fields=("main", "module", "exports"))
"""

import posixpath
from typing import Any, Callable, Dict, Iterable, Iterator, List, Mapping, Union

import pydantic
from bundlekit_common import (
    ConflictingExportTypesError,
    ManifestDefaults,
    ModuleSuffixes,
    ValidationError,
    get_logger,
)

from .manifest import is_object
from .schema import ExportEntry, Manifest, PackageType

logger = get_logger("core.entries")

EntryCollector = Callable[[Manifest], Iterator[ExportEntry]]

# Conditions in an "exports" map that pin the format of their targets
_CONDITION_TYPES = {
    "import": PackageType.MODULE,
    "module": PackageType.MODULE,
    "require": PackageType.COMMONJS,
}

# Conditions whose targets are not build artifacts
_SKIPPED_CONDITIONS = {"types", "typings"}


def normalize_output_path(path: str) -> str:
    """
    Normalize an output path to a platform-neutral form.

    Examples:
        >>> normalize_output_path("./dist//index.js")
        'dist/index.js'
        >>> normalize_output_path("dist\\\\cjs\\\\index.cjs")
        'dist/cjs/index.cjs'
    """
    return posixpath.normpath(path.replace("\\", "/"))


def get_file_type(file_path: str, default: PackageType) -> PackageType:
    """
    Infer the module format of a single file.

    ``.mjs`` is always an ECMAScript module and ``.cjs`` is always CommonJS;
    any other suffix takes ``default``.
    """
    if file_path.endswith(ModuleSuffixes.ESM):
        return PackageType.MODULE

    if file_path.endswith(ModuleSuffixes.CJS):
        return PackageType.COMMONJS

    return default


def _candidate(file_path: str, default: PackageType, field: str) -> ExportEntry:
    return ExportEntry(
        output_path=file_path,
        type=get_file_type(file_path, default),
        from_=field,
    )


class ExportEntryMap:
    """
    Insertion-ordered accumulator of export entries keyed by output path.

    Example:
        >>> entry_map = ExportEntryMap()
        >>> entry_map.add(ExportEntry(output_path="./dist/index.js", type="commonjs", from_="main"))
        >>> [e.output_path for e in entry_map.entries()]
        ['dist/index.js']
    """

    def __init__(self):
        self._entries: Dict[str, ExportEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, output_path: object) -> bool:
        return output_path in self._entries

    def add(self, entry: ExportEntry) -> None:
        """
        Merge ``entry`` into the map.

        Raises:
            ConflictingExportTypesError: If the path is already recorded with
                a different module format
        """
        output_path = normalize_output_path(entry.output_path)
        if output_path != entry.output_path:
            entry = entry.model_copy(update={"output_path": output_path})

        existing = self._entries.get(output_path)
        if existing is None:
            self._entries[output_path] = entry
            return

        if existing.type != entry.type:
            raise ConflictingExportTypesError(
                output_path,
                existing.type.value,
                entry.type.value,
            )

        self._entries[output_path] = existing.merge(entry)

    def entries(self) -> List[ExportEntry]:
        """Entries in first-insertion order."""
        return list(self._entries.values())


def _collect_main(manifest: Manifest) -> Iterator[ExportEntry]:
    if isinstance(manifest.main, str) and manifest.main:
        yield _candidate(manifest.main, manifest.package_type, "main")


def _collect_module(manifest: Manifest) -> Iterator[ExportEntry]:
    # "module" conventionally names the ESM build of a package
    if isinstance(manifest.module, str) and manifest.module:
        yield _candidate(manifest.module, PackageType.MODULE, "module")


def _walk_export_target(target: Any, default: PackageType) -> Iterator[ExportEntry]:
    if isinstance(target, str):
        # Subpath patterns and non-script files (package.json, css) are not
        # build artifacts
        if "*" not in target and target.endswith(ModuleSuffixes.SCRIPTS):
            yield _candidate(target, default, "exports")
    elif isinstance(target, list):
        for fallback in target:
            yield from _walk_export_target(fallback, default)
    elif is_object(target):
        for condition, nested in target.items():
            if condition in _SKIPPED_CONDITIONS:
                continue
            yield from _walk_export_target(nested, _CONDITION_TYPES.get(condition, default))


def _collect_exports(manifest: Manifest) -> Iterator[ExportEntry]:
    exports = manifest.exports
    if exports is None:
        return

    if is_object(exports) and any(key.startswith(".") for key in exports):
        for target in exports.values():
            yield from _walk_export_target(target, manifest.package_type)
    else:
        yield from _walk_export_target(exports, manifest.package_type)


ENTRY_FIELD_COLLECTORS: Dict[str, EntryCollector] = {
    "main": _collect_main,
    "module": _collect_module,
    "exports": _collect_exports,
}


def resolve_entries(
    manifest: Union[Manifest, Mapping[str, Any]],
    fields: Iterable[str] = ManifestDefaults.ENTRY_FIELDS,
) -> List[ExportEntry]:
    """
    Resolve the distinct export entries a manifest declares.

    Args:
        manifest: Parsed Manifest, or a raw ``package.json`` mapping
        fields: Entry-declaring manifest fields to read, in order.
            Supported: "main", "module", "exports"

    Returns:
        Export entries in first-declaration order

    Raises:
        ConflictingExportTypesError: If one output path is declared with two
            different module formats
        ValidationError: If ``manifest`` is not a mapping or Manifest, or a
            field name is not supported

    Examples:
        >>> resolve_entries({"main": "./index.mjs"})
        [ExportEntry(output_path='index.mjs', type=<PackageType.MODULE: 'module'>, from_='main')]

        >>> resolve_entries({"type": "module", "main": "index.cjs"})[0].type
        <PackageType.COMMONJS: 'commonjs'>
    """
    if isinstance(manifest, Mapping):
        try:
            manifest = Manifest.model_validate(dict(manifest))
        except pydantic.ValidationError as e:
            raise ValidationError(f"Invalid manifest: {e}") from e
    elif not isinstance(manifest, Manifest):
        raise ValidationError(
            f"Expected a Manifest or mapping, got {type(manifest).__name__}"
        )

    fields = (fields,) if isinstance(fields, str) else tuple(fields)
    unknown = [f for f in fields if f not in ENTRY_FIELD_COLLECTORS]
    if unknown:
        raise ValidationError(
            f"Unsupported entry field(s): {', '.join(unknown)}. "
            f"Supported fields: {', '.join(ENTRY_FIELD_COLLECTORS)}"
        )

    entry_map = ExportEntryMap()
    for field in fields:
        for candidate in ENTRY_FIELD_COLLECTORS[field](manifest):
            entry_map.add(candidate)

    entries = entry_map.entries()
    logger.debug("Resolved export entries", count=len(entries), fields=list(fields))
    return entries
