from __future__ import annotations

"""
Size Aggregation Service.

Sums the size snapshot of every Node produced by a single walk. Directory
Nodes contribute the size the OS reports for the directory entry itself,
not the size of their contents.
"""

import asyncio
import logging
from typing import Iterable

from fstree.core.walker import walk
from fstree.domain.node_models import Node

logger = logging.getLogger(__name__)


async def total_size(root_path: str, *, follow_symlinks: bool = True) -> int:
    """
    Compute the aggregate size of everything reachable from a root path.

    Args:
        root_path: Directory (or file) to measure.
        follow_symlinks: Passed through to the walker.

    Returns:
        int: Sum of ``size`` over every Node of the walk, directories included.
    """
    nodes = await walk(root_path, follow_symlinks=follow_symlinks)
    size = sum_sizes(nodes)
    logger.debug(f"Total size of '{root_path}': {size} bytes over {len(nodes)} nodes")
    return size


def sum_sizes(nodes: Iterable[Node], files_only: bool = False) -> int:
    """Sum node sizes, optionally restricted to file Nodes."""
    return sum(n.size for n in nodes if n.is_file or not files_only)


def total_size_sync(root_path: str, *, follow_symlinks: bool = True) -> int:
    return asyncio.run(total_size(root_path, follow_symlinks=follow_symlinks))
