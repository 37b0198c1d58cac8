from __future__ import annotations

"""
Filesystem Node Data Models.

Provides the immutable snapshot types produced by the metadata provider and
the tree walker. A Node is identified by its path alone; every other field
is a point-in-time snapshot taken when the Node was built.
"""

import os
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

# -----------------------------------------------------------------------------
# METADATA SNAPSHOT
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PathMetadata:
    """
    Result of a single stat call.

    Attributes:
        path: Path that was queried.
        is_directory: Whether the OS reported a directory.
        size: Size in bytes as reported by the OS.
        created_at: Birth time where available, otherwise inode change time.
        modified_at: Last content modification time.
        is_symlink: Whether the path itself is a symbolic link.
    """
    path: str
    is_directory: bool
    size: int
    created_at: datetime
    modified_at: datetime
    is_symlink: bool = False

# -----------------------------------------------------------------------------
# NODE MODEL
# -----------------------------------------------------------------------------

class NodeKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class Node:
    """
    Immutable snapshot of one filesystem entry.

    Equality and hashing use ``path`` only. ``parent`` is a back-reference to
    the Node of the containing directory (None for a traversal root); it is
    excluded from comparison and repr and is never used to find children.

    Attributes:
        path: Identity key of the entry.
        kind: FILE or DIRECTORY, fixed at construction.
        size: Size in bytes at construction time.
        created_at: Creation timestamp at construction time.
        modified_at: Modification timestamp at construction time.
        parent: Node of the containing directory, if any.
    """
    path: str
    kind: NodeKind = field(compare=False)
    size: int = field(default=0, compare=False)
    created_at: Optional[datetime] = field(default=None, compare=False)
    modified_at: Optional[datetime] = field(default=None, compare=False)
    parent: Optional["Node"] = field(default=None, compare=False, repr=False)

    @classmethod
    def from_metadata(cls, meta: PathMetadata, parent: Optional[Node] = None) -> Node:
        """Build a Node from a stat snapshot, resolving kind and size once."""
        return cls(
            path=meta.path,
            kind=NodeKind.DIRECTORY if meta.is_directory else NodeKind.FILE,
            size=meta.size,
            created_at=meta.created_at,
            modified_at=meta.modified_at,
            parent=parent,
        )

    @property
    def name(self) -> str:
        """Leaf name (final path segment)."""
        return os.path.basename(os.path.normpath(self.path))

    @property
    def ext(self) -> str:
        return os.path.splitext(self.name)[1]

    @property
    def is_file(self) -> bool:
        return self.kind is NodeKind.FILE

    @property
    def is_dir(self) -> bool:
        return self.kind is NodeKind.DIRECTORY

    def to_dict(self) -> dict:
        """Serialize the snapshot for JSON output; parent is reported by path."""
        return {
            "path": self.path,
            "name": self.name,
            "kind": self.kind.value,
            "size": self.size,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "modified_at": self.modified_at.isoformat() if self.modified_at else None,
            "parent": self.parent.path if self.parent is not None else None,
        }
