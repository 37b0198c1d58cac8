from __future__ import annotations

"""
File Operations Layer.

Thin pass-throughs to OS primitives for content access, creation, removal,
relocation, hashing and permission checks. Each function calls the primitive
and translates its failure into the fstree error taxonomy; no retries and no
silent fallbacks.
"""

import asyncio
import hashlib
import logging
import os
import shutil
from typing import Iterator, Optional, Union

from fstree.domain.errors import (
    IsADirectoryPathError,
    PathExistsError,
    PathNotFoundError,
    translate_os_error,
)

logger = logging.getLogger(__name__)

CHUNK_SIZE = 8192

# -----------------------------------------------------------------------------
# EXISTENCE AND CONTENT ACCESS
# -----------------------------------------------------------------------------

def exists(path: str) -> bool:
    """
    Check whether a path exists.

    Only absence maps to False; any other OS failure propagates.
    """
    try:
        os.stat(path)
        return True
    except FileNotFoundError:
        return False
    except OSError as e:
        raise translate_os_error(e, path) from e


def is_empty(path: str) -> bool:
    """
    Check whether a file has no bytes or a directory has no entries.

    Args:
        path: File or directory to inspect.

    Returns:
        bool: True if empty.
    """
    try:
        if os.path.isdir(path):
            with os.scandir(path) as it:
                return next(it, None) is None
        return os.stat(path).st_size == 0
    except OSError as e:
        raise translate_os_error(e, path) from e


def read_content(path: str, encoding: Optional[str] = None) -> Optional[Union[bytes, str]]:
    """
    Read a whole file.

    Args:
        path: Target file.
        encoding: If given, decode to str with it; otherwise return bytes.

    Returns:
        Optional[Union[bytes, str]]: File content, or None for a directory.
    """
    try:
        if os.path.isdir(path):
            return None
        if encoding:
            with open(path, "r", encoding=encoding) as f:
                return f.read()
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise translate_os_error(e, path) from e


async def aread_content(path: str, encoding: Optional[str] = None) -> Optional[Union[bytes, str]]:
    """Awaitable read_content; the blocking read runs on a worker thread."""
    return await asyncio.to_thread(read_content, path, encoding)


def read_lines(path: str, encoding: str = "utf-8") -> Iterator[str]:
    """
    Generate a line-by-line stream of file content.

    Undecodable byte sequences are replaced instead of raising, so mixed
    encodings do not interrupt a stream.

    Args:
        path: Target file.
        encoding: Text encoding.

    Yields:
        str: Lines with their trailing newline stripped.
    """
    try:
        with open(path, "r", encoding=encoding, errors="replace") as f:
            for line in f:
                yield line.rstrip("\r\n")
    except OSError as e:
        raise translate_os_error(e, path) from e


def get_hash(path: str, algorithm: str = "sha256") -> str:
    """
    Compute a hex digest of a file, reading it in chunks.

    Args:
        path: Target file.
        algorithm: Any name accepted by hashlib.new.

    Returns:
        str: Hex digest.

    Raises:
        IsADirectoryPathError: The path is a directory.
    """
    if os.path.isdir(path):
        raise IsADirectoryPathError(f"Cannot calculate hash for directories: {path}", path)

    digest = hashlib.new(algorithm)
    try:
        with open(path, "rb") as f:
            for block in iter(lambda: f.read(CHUNK_SIZE), b""):
                digest.update(block)
    except OSError as e:
        raise translate_os_error(e, path) from e
    return digest.hexdigest()

# -----------------------------------------------------------------------------
# CREATION AND WRITING
# -----------------------------------------------------------------------------

def create_dir(path: str, overwrite: bool = False) -> None:
    """
    Create a directory and any missing parents.

    Args:
        path: Directory to create.
        overwrite: If True, an existing directory is removed and recreated.

    Raises:
        PathExistsError: The path exists and overwrite is False.
    """
    if exists(path):
        if not overwrite:
            raise PathExistsError(f"Directory already exists: {path}", path)
        logger.debug(f"Recreating existing directory: {path}")
        delete(path)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        raise translate_os_error(e, path) from e


def create_file(
        path: str,
        content: Union[str, bytes] = "",
        overwrite: bool = False,
        auto_create_dir: bool = True,
) -> None:
    """
    Create a file with initial content.

    Args:
        path: File to create.
        content: Initial content (str is written as UTF-8).
        overwrite: If True, replace an existing file.
        auto_create_dir: If True, create missing parent directories.

    Raises:
        PathExistsError: The file exists and overwrite is False.
    """
    if exists(path) and not overwrite:
        raise PathExistsError(f"File already exists: {path}", path)

    if auto_create_dir:
        _ensure_parent_dir(path)
    write_file(path, content)


def write_file(path: str, content: Union[str, bytes]) -> None:
    """Create or truncate a file and write content to it."""
    data = content.encode("utf-8") if isinstance(content, str) else content
    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as e:
        raise translate_os_error(e, path) from e


def append(
        path: str,
        content: Union[str, bytes],
        new_line: bool = False,
        auto_create: bool = True,
) -> None:
    """
    Append content to a file.

    Args:
        path: Target file.
        content: Data to append (str is written as UTF-8).
        new_line: If True, prefix the content with a newline.
        auto_create: If False, a missing file raises PathNotFoundError.
    """
    data = content.encode("utf-8") if isinstance(content, str) else content
    if new_line:
        data = b"\n" + data

    if not auto_create and not exists(path):
        raise PathNotFoundError(f"Path does not exist: {path}", path)

    try:
        if auto_create:
            _ensure_parent_dir(path)
        with open(path, "ab") as f:
            f.write(data)
    except OSError as e:
        raise translate_os_error(e, path) from e

# -----------------------------------------------------------------------------
# REMOVAL AND RELOCATION
# -----------------------------------------------------------------------------

def delete(path: str) -> None:
    """Remove a file, a link, or a whole directory tree."""
    try:
        if os.path.isdir(path) and not os.path.islink(path):
            shutil.rmtree(path)
        else:
            os.remove(path)
    except OSError as e:
        raise translate_os_error(e, path) from e
    logger.debug(f"Deleted: {path}")


def move(src: str, dst: str) -> str:
    """
    Move or rename a file or directory.

    Returns:
        str: The final destination path.
    """
    try:
        return shutil.move(src, dst)
    except OSError as e:
        raise translate_os_error(e, src) from e


def copy(src: str, dst: str) -> str:
    """
    Copy a file (with metadata) or a directory tree.

    Returns:
        str: The final destination path.
    """
    try:
        if os.path.isdir(src):
            return shutil.copytree(src, dst)
        return shutil.copy2(src, dst)
    except OSError as e:
        raise translate_os_error(e, src) from e

# -----------------------------------------------------------------------------
# PERMISSIONS
# -----------------------------------------------------------------------------

def is_readable(path: str) -> bool:
    return os.access(path, os.R_OK)


def is_writable(path: str) -> bool:
    return os.access(path, os.W_OK)


def set_mode(path: str, mode: int) -> None:
    """Apply permission bits (e.g. ``0o644``) to a path."""
    try:
        os.chmod(path, mode)
    except OSError as e:
        raise translate_os_error(e, path) from e

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _ensure_parent_dir(path: str) -> None:
    """Create the parent directory hierarchy of a target file if missing."""
    parent = os.path.dirname(os.path.abspath(path))
    if parent and not os.path.exists(parent):
        try:
            os.makedirs(parent, exist_ok=True)
        except OSError as e:
            raise translate_os_error(e, parent) from e
