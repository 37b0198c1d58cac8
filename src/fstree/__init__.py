from __future__ import annotations

from .core.aggregator import total_size, total_size_sync
from .core.comparator import is_equal, is_equal_sync
from .core.matcher import search, search_sync
from .core.walker import list_children, walk, walk_sync
from .domain.errors import (
    FsTreeError,
    IsADirectoryPathError,
    NotADirectoryPathError,
    PathExistsError,
    PathNotFoundError,
    PathPermissionError,
)
from .domain.node_models import Node, NodeKind, PathMetadata
from .infra.watcher import watch

__version__ = "1.0.0"

__all__ = [
    "walk",
    "walk_sync",
    "list_children",
    "total_size",
    "total_size_sync",
    "search",
    "search_sync",
    "is_equal",
    "is_equal_sync",
    "watch",
    "Node",
    "NodeKind",
    "PathMetadata",
    "FsTreeError",
    "IsADirectoryPathError",
    "NotADirectoryPathError",
    "PathExistsError",
    "PathNotFoundError",
    "PathPermissionError",
]
