from __future__ import annotations

"""
Content Equality Comparator.

Decides whether two file Nodes hold byte-identical content. The check is
short-circuited by path identity and by the size snapshot before any
content is read.
"""

import asyncio
import logging

from fstree.domain.node_models import Node
from fstree.infra.file_ops import aread_content

logger = logging.getLogger(__name__)


async def is_equal(a: Node, b: Node) -> bool:
    """
    Compare two Nodes for content equality.

    Rules, in order:
    1. Same path: equal, no I/O.
    2. Either Node is a directory: not equal.
    3. Size snapshots differ: not equal, no content read.
    4. Otherwise both files are read fully and compared byte for byte.

    Read failures (e.g. a file deleted after the walk) propagate.

    Args:
        a: First Node.
        b: Second Node.

    Returns:
        bool: True if the contents are identical.
    """
    if a.path == b.path:
        return True

    if not (a.is_file and b.is_file):
        return False

    if a.size != b.size:
        logger.debug(f"Size mismatch: '{a.path}' ({a.size}) vs '{b.path}' ({b.size})")
        return False

    content_a, content_b = await asyncio.gather(aread_content(a.path), aread_content(b.path))
    return content_a == content_b


def is_equal_sync(a: Node, b: Node) -> bool:
    return asyncio.run(is_equal(a, b))
