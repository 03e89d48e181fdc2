"""
Common Source Root Calculation
==============================

Computes the deepest directory shared by a set of absolute paths. The bundler
uses it as the root that output paths are made relative to.

The computation is lexical: paths are compared segment by segment, which
handles both POSIX paths (``/packages/a/src/index.ts``) and drive-letter paths
(``D:/packages/a/src/index.ts``). The filesystem is consulted once, to step up
to the parent directory when the shared prefix turns out to be a file.
"""

import asyncio
import os
import posixpath
import stat
from typing import Awaitable, Callable, Iterable, List, Optional

from bundlekit_common import get_logger

logger = get_logger("core.paths")

SEP = "/"

IsFile = Callable[[str], Awaitable[bool]]


async def is_regular_file(path: str) -> bool:
    """
    Return True if ``path`` is a regular file.

    The stat call runs in the default executor so concurrent calculations do
    not block one another.

    Raises:
        OSError: If the path cannot be stat'ed
    """
    loop = asyncio.get_running_loop()
    st = await loop.run_in_executor(None, os.stat, path)
    return stat.S_ISREG(st.st_mode)


def common_path_segments(abs_paths: Iterable[str]) -> List[str]:
    """
    Longest run of leading path segments shared by every path.

    Args:
        abs_paths: Absolute paths; backslashes are treated as separators

    Returns:
        Shared segments; an empty list when the input is empty or nothing is shared

    Examples:
        >>> common_path_segments(["/pkg/src/a.ts", "/pkg/lib/b.ts"])
        ['', 'pkg']
        >>> common_path_segments(["C:/pkg/a.ts", "D:/pkg/a.ts"])
        []
    """
    split_paths = [p.replace("\\", SEP).split(SEP) for p in abs_paths]
    if not split_paths:
        return []

    common = split_paths[0]
    for current in split_paths[1:]:
        shared = 0
        for left, right in zip(common, current):
            if left != right:
                break
            shared += 1
        common = common[:shared]

    return common


async def longest_common_ancestor(
    abs_paths: Iterable[str],
    *,
    is_file: Optional[IsFile] = None,
) -> Optional[str]:
    """
    Compute the deepest directory shared by ``abs_paths``.

    Args:
        abs_paths: Absolute file or directory paths
        is_file: Async predicate telling whether a path is a regular file.
            Defaults to a stat of the real filesystem.

    Returns:
        The shared directory, "/" when only the root is shared, or None for
        empty input

    Examples:
        >>> await longest_common_ancestor(["/pkg/src/a.ts", "/pkg/lib/b.ts"])
        '/pkg'
        >>> await longest_common_ancestor(["/pkg/src/a.ts"])  # a.ts is a file
        '/pkg/src'
        >>> await longest_common_ancestor([])
        None
    """
    abs_paths = list(abs_paths)
    if not abs_paths:
        return None

    segments = common_path_segments(abs_paths)
    lca = SEP.join(segments) or SEP

    check = is_file or is_regular_file
    try:
        lca_is_file = await check(lca)
    except (OSError, ValueError) as e:
        logger.warning(
            f"Could not stat {lca}, keeping it as the common ancestor",
            path=lca,
            error=str(e),
        )
        return lca

    if lca_is_file:
        lca = posixpath.dirname(lca)

    return lca
