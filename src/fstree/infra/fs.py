from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the metadata provider consumed by the tree walker (single-path stat
and directory listing, blocking and awaitable variants), plus cross-platform
path resolution utilities. OS failures are translated into the fstree error
taxonomy at this boundary.
"""

import asyncio
import logging
import os
import stat
from datetime import datetime
from typing import List, Optional

from fstree.domain.errors import translate_os_error
from fstree.domain.node_models import PathMetadata

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "fstree"
UNIX_APP_DIR_NAME = ".fstree"

# -----------------------------------------------------------------------------
# METADATA PROVIDER API
# -----------------------------------------------------------------------------

def stat_path(path: str, follow_symlinks: bool = True) -> PathMetadata:
    """
    Query the OS for a single path and snapshot the result.

    Args:
        path: Target filesystem path.
        follow_symlinks: If False, links are reported as themselves (lstat).

    Returns:
        PathMetadata: Immutable metadata snapshot.

    Raises:
        PathNotFoundError: The path does not exist.
        PathPermissionError: The OS refused access.
    """
    try:
        st = os.stat(path, follow_symlinks=follow_symlinks)
        is_link = os.path.islink(path)
    except OSError as e:
        logger.debug(f"stat failed for '{path}': {e}")
        raise translate_os_error(e, path) from e

    birth = getattr(st, "st_birthtime", None)
    created = birth if birth is not None else st.st_ctime

    return PathMetadata(
        path=path,
        is_directory=stat.S_ISDIR(st.st_mode),
        size=st.st_size,
        created_at=datetime.fromtimestamp(created),
        modified_at=datetime.fromtimestamp(st.st_mtime),
        is_symlink=is_link,
    )


def list_names(path: str) -> List[str]:
    """
    List the child names of a directory in OS order (no sorting).

    Args:
        path: Directory to list.

    Returns:
        List[str]: Child entry names.

    Raises:
        PathNotFoundError: The directory does not exist.
        PathPermissionError: The OS refused access.
        NotADirectoryPathError: The path is a file.
    """
    try:
        return os.listdir(path)
    except OSError as e:
        logger.debug(f"listdir failed for '{path}': {e}")
        raise translate_os_error(e, path) from e


async def astat_path(path: str, follow_symlinks: bool = True) -> PathMetadata:
    """Awaitable stat_path; the blocking call runs on a worker thread."""
    return await asyncio.to_thread(stat_path, path, follow_symlinks)


async def alist_names(path: str) -> List[str]:
    """Awaitable list_names; the blocking call runs on a worker thread."""
    return await asyncio.to_thread(list_names, path)

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/fstree
    - Linux/Mac: ~/.fstree

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        home = os.path.expanduser("~")
        path = os.path.join(home, UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        logger.debug(f"Could not create user data dir '{path}': {e}")

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is blank.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)
