"""Tests for node_builtins.py - Built-in module registry."""

import pytest

from bundlekit_core.node_builtins import NODE_BUILTIN_MODULES, is_builtin


class TestIsBuiltin:
    """Tests for is_builtin function."""

    @pytest.mark.parametrize(
        "specifier",
        [
            "fs",
            "fs/promises",
            "path",
            "path/posix",
            "crypto",
            "child_process",
            "stream/web",
            "util/types",
            "worker_threads",
            "zlib",
        ],
    )
    def test_exact_names(self, specifier):
        assert is_builtin(specifier)

    @pytest.mark.parametrize("specifier", ["node:fs", "node:test", "node:sqlite", "node:fs/promises"])
    def test_node_protocol(self, specifier):
        assert is_builtin(specifier)

    def test_pnpapi(self):
        """Yarn PnP's resolver API counts as builtin."""
        assert is_builtin("pnpapi")

    @pytest.mark.parametrize(
        "specifier",
        ["my-lib", "lodash", "fs-extra", "@scope/fs", "./fs", "fs/", "FS", "nodes:fs", ""],
    )
    def test_non_builtins(self, specifier):
        assert not is_builtin(specifier)

    def test_registry_is_immutable(self):
        assert isinstance(NODE_BUILTIN_MODULES, frozenset)
        with pytest.raises(AttributeError):
            NODE_BUILTIN_MODULES.add("my-lib")

    def test_promise_variants_listed(self):
        """Every promise-based sibling has its callback module alongside."""
        promise_variants = [name for name in NODE_BUILTIN_MODULES if name.endswith("/promises")]

        assert promise_variants
        for name in promise_variants:
            assert name.rsplit("/", 1)[0] in NODE_BUILTIN_MODULES
