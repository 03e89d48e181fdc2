"""
Node.js built-in modules.

Specifiers listed here are provided by the runtime and must never be treated
as package dependencies. The list tracks webpack's NodeTargetPlugin and has to
be updated when Node.js adds modules.
"""

import re
from typing import Tuple

NODE_BUILTIN_MODULES = frozenset(
    [
        "assert",
        "assert/strict",
        "async_hooks",
        "buffer",
        "child_process",
        "cluster",
        "console",
        "constants",
        "crypto",
        "dgram",
        "diagnostics_channel",
        "dns",
        "dns/promises",
        "domain",
        "events",
        "fs",
        "fs/promises",
        "http",
        "http2",
        "https",
        "inspector",
        "inspector/promises",
        "module",
        "net",
        "os",
        "path",
        "path/posix",
        "path/win32",
        "perf_hooks",
        "process",
        "punycode",
        "querystring",
        "readline",
        "readline/promises",
        "repl",
        "stream",
        "stream/consumers",
        "stream/promises",
        "stream/web",
        "string_decoder",
        "sys",
        "timers",
        "timers/promises",
        "tls",
        "trace_events",
        "tty",
        "url",
        "util",
        "util/types",
        "v8",
        "vm",
        "wasi",
        "worker_threads",
        "zlib",
        # Yarn PnP exposes its resolver API as a builtin
        "pnpapi",
    ]
)

NODE_BUILTIN_PATTERNS: Tuple[re.Pattern, ...] = (re.compile(r"^node:"),)


def is_builtin(specifier: str) -> bool:
    """
    Check whether a module specifier names a runtime built-in.

    Examples:
        >>> is_builtin("fs/promises")
        True
        >>> is_builtin("node:test")
        True
        >>> is_builtin("lodash")
        False
    """
    if specifier in NODE_BUILTIN_MODULES:
        return True
    return any(pattern.match(specifier) for pattern in NODE_BUILTIN_PATTERNS)
