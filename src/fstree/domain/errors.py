from __future__ import annotations

"""
Filesystem Error Taxonomy.

Defines the domain exceptions raised by the metadata provider, the tree
walker and the file operations layer. Native OS failures are translated
at the infrastructure boundary so callers only ever handle this hierarchy.
"""

import errno
from typing import Optional

# -----------------------------------------------------------------------------
# EXCEPTION HIERARCHY
# -----------------------------------------------------------------------------

class FsTreeError(Exception):
    """
    Base class for every filesystem failure surfaced by fstree.

    Attributes:
        path: Filesystem path the failing operation targeted.
    """

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path


class PathNotFoundError(FsTreeError):
    """The path was absent at the time of the stat or listing call."""


class PathPermissionError(FsTreeError):
    """Access to the path was refused by the operating system."""


class NotADirectoryPathError(FsTreeError):
    """A directory-only operation was attempted on a file."""


class IsADirectoryPathError(FsTreeError):
    """A file-only operation (read, hash) was attempted on a directory."""


class PathExistsError(FsTreeError):
    """A create operation targeted a path that already exists."""

# -----------------------------------------------------------------------------
# OS ERROR TRANSLATION
# -----------------------------------------------------------------------------

def translate_os_error(exc: OSError, path: Optional[str] = None) -> FsTreeError:
    """
    Map a native OSError onto the domain taxonomy.

    The caller is expected to raise the returned instance with
    ``raise ... from exc`` so the original traceback is preserved.

    Args:
        exc: The exception raised by the OS primitive.
        path: Path to report. Defaults to the filename carried by the error.

    Returns:
        FsTreeError: The matching domain exception instance.
    """
    target = path if path is not None else (exc.filename or "")
    target = str(target)
    reason = exc.strerror or str(exc)

    if isinstance(exc, FileNotFoundError):
        return PathNotFoundError(f"Path does not exist: {target}", target)
    if isinstance(exc, PermissionError):
        return PathPermissionError(f"Permission denied: {target}", target)
    if isinstance(exc, NotADirectoryError):
        return NotADirectoryPathError(f"Not a directory: {target}", target)
    if isinstance(exc, IsADirectoryError):
        return IsADirectoryPathError(f"Is a directory: {target}", target)
    if isinstance(exc, FileExistsError):
        return PathExistsError(f"Path already exists: {target}", target)
    if exc.errno == errno.ELOOP:
        return FsTreeError(f"Too many levels of symbolic links: {target}", target)

    return FsTreeError(f"Filesystem error on '{target}': {reason}", target)
