from __future__ import annotations

"""
Recursive Tree Walker.

Flattens a directory tree into an ordered, deduplicated list of Nodes. The
result is a pre-order traversal: every directory Node precedes its own
children, which precede the subtrees of those children. Each Node holds a
back-reference to the Node of its containing directory.

Children of a single directory are stat'd concurrently; sibling subtrees are
expanded one after the other so that peak open-handle usage is bounded by
the depth of the tree rather than its fan-out.
"""

import asyncio
import logging
import os
from typing import List, Tuple

from fstree.domain.node_models import Node
from fstree.infra.fs import alist_names, astat_path

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

async def walk(root_path: str, *, follow_symlinks: bool = True) -> List[Node]:
    """
    Materialize every file and directory reachable from a root path.

    A file root yields a single-element list. Any I/O failure aborts the walk
    and propagates; no partial result is returned.

    Args:
        root_path: Directory (or file) to start from.
        follow_symlinks: If True, links are resolved and expanded unless they
                         lead back to a directory on the current descent
                         chain. If False, links are reported as opaque
                         file Nodes.

    Returns:
        List[Node]: Pre-order sequence, one Node per path.

    Raises:
        PathNotFoundError: The root (or an entry racing the walk) is absent.
        PathPermissionError: A visited path cannot be stat'd or listed.
    """
    logger.debug(f"Walking tree from: {root_path}")

    root = Node.from_metadata(await astat_path(root_path, follow_symlinks))
    result: List[Node] = [root]

    if root.is_dir:
        await _expand(root, result, (), follow_symlinks)

    logger.debug(f"Walk of '{root_path}' materialized {len(result)} nodes")
    return result


async def list_children(path: str, *, follow_symlinks: bool = True) -> List[Node]:
    """
    Return the direct children of a directory as Nodes, in listing order.

    The children's parent is a freshly built Node for ``path``. A file has
    no children and yields an empty list.

    Args:
        path: Directory to list.
        follow_symlinks: Passed through to each child stat.

    Returns:
        List[Node]: Single-level listing.
    """
    directory = Node.from_metadata(await astat_path(path, follow_symlinks))
    if directory.is_file:
        return []
    return await stat_children(directory, follow_symlinks)


async def stat_children(directory: Node, follow_symlinks: bool = True) -> List[Node]:
    """
    Stat every direct child of an existing directory Node concurrently.

    Nodes are built in listing order with ``directory`` as their parent.
    When several stats fail, the first failure in listing order is raised
    once all of them have settled.
    """
    names = await alist_names(directory.path)
    outcomes = await asyncio.gather(
        *(astat_path(os.path.join(directory.path, name), follow_symlinks) for name in names),
        return_exceptions=True,
    )

    for outcome in outcomes:
        if isinstance(outcome, BaseException):
            raise outcome

    return [Node.from_metadata(meta, parent=directory) for meta in outcomes]


def walk_sync(root_path: str, *, follow_symlinks: bool = True) -> List[Node]:
    """Blocking entry point for callers without a running event loop."""
    return asyncio.run(walk(root_path, follow_symlinks=follow_symlinks))

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

async def _expand(
        directory: Node,
        result: List[Node],
        ancestors: Tuple[str, ...],
        follow_symlinks: bool,
) -> None:
    """
    Append the children of an already-placed directory Node, then recurse.

    ``ancestors`` holds the canonical paths of the directories on the chain
    from the root down to ``directory`` (exclusive). A directory that
    resolves to one of them closes a link cycle: it keeps its
    own Node but is not descended into. Any other directory is expanded,
    so a link to a sibling subtree never hides the real subtree.
    """
    key = await _canonical_key(directory.path, follow_symlinks)
    if key in ancestors:
        logger.debug(f"Not descending into link cycle: {directory.path} -> {key}")
        return
    chain = ancestors + (key,)

    children = await stat_children(directory, follow_symlinks)
    result.extend(children)

    # Sibling subtrees are sequential: a subtree starts only after its
    # directory Node and that Node's children have been appended.
    for child in children:
        if child.is_dir:
            await _expand(child, result, chain, follow_symlinks)


async def _canonical_key(path: str, follow_symlinks: bool) -> str:
    """Identity used for cycle detection along the descent chain."""
    if not follow_symlinks:
        return os.path.normpath(os.path.abspath(path))
    return await asyncio.to_thread(os.path.realpath, path)
