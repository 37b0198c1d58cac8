from __future__ import annotations

"""
Glob Pattern Matching Engine.

Translates glob-style name patterns into anchored regular expressions and
filters walk results (or single-level listings) by leaf name. Supported
wildcards are ``*`` (any run of characters, including none) and ``?``
(exactly one character); every other character matches itself literally.
"""

import asyncio
import logging
import re
from typing import Iterable, List

from fstree.core.walker import stat_children, walk
from fstree.domain.node_models import Node
from fstree.infra.fs import astat_path

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PATTERN COMPILATION AND MATCHING
# -----------------------------------------------------------------------------

def compile_glob(pattern: str) -> re.Pattern:
    """
    Compile a glob pattern into an anchored, case-sensitive regex.

    The pattern is escaped first, then the escaped wildcards are expanded,
    so regex metacharacters such as ``.`` or ``+`` stay literal.

    Args:
        pattern: Raw glob pattern (e.g. ``*.txt``).

    Returns:
        re.Pattern: Regex matching whole leaf names.
    """
    escaped = re.escape(pattern)
    regex = escaped.replace(r"\*", ".*").replace(r"\?", ".")
    return re.compile(f"^{regex}$", re.DOTALL)


def matches_glob(name: str, compiled: re.Pattern) -> bool:
    """
    Verify whether a leaf name satisfies a compiled glob.

    Args:
        name: Final path segment to evaluate.
        compiled: Output of compile_glob.

    Returns:
        bool: True on a full-name match.
    """
    return compiled.match(name) is not None


def filter_nodes(nodes: Iterable[Node], pattern: str) -> List[Node]:
    """Keep the Nodes whose leaf name matches, preserving input order."""
    rx = compile_glob(pattern)
    return [n for n in nodes if matches_glob(n.name, rx)]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

async def search(
        root_path: str,
        pattern: str,
        recursive: bool = True,
        *,
        follow_symlinks: bool = True,
) -> List[Node]:
    """
    Find entries under a root whose leaf name matches a glob pattern.

    Args:
        root_path: Directory to search.
        pattern: Glob pattern applied to leaf names.
        recursive: If True, match against the full walk (directories and the
                   root included). If False, match only the direct children.
        follow_symlinks: Passed through to the walker.

    Returns:
        List[Node]: Matches in walk order or listing order.
    """
    if recursive:
        candidates = await walk(root_path, follow_symlinks=follow_symlinks)
    else:
        root = Node.from_metadata(await astat_path(root_path, follow_symlinks))
        if root.is_file:
            # A file root is treated as the whole result rather than an error.
            candidates = [root]
        else:
            candidates = await stat_children(root, follow_symlinks)

    matches = filter_nodes(candidates, pattern)
    logger.debug(
        f"Search '{pattern}' under '{root_path}' (recursive={recursive}): "
        f"{len(matches)}/{len(candidates)} matched"
    )
    return matches


def search_sync(
        root_path: str,
        pattern: str,
        recursive: bool = True,
        *,
        follow_symlinks: bool = True,
) -> List[Node]:
    return asyncio.run(search(root_path, pattern, recursive, follow_symlinks=follow_symlinks))
