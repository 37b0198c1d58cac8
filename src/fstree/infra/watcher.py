from __future__ import annotations

"""
Change Notification Layer.

Wraps a watchdog Observer so that a single file or a directory tree can be
watched with a plain callback. Watching starts immediately and runs on the
observer's own thread until the returned stop function is called.
"""

import logging
import os
from typing import Callable, Optional

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from fstree.domain.errors import PathNotFoundError, translate_os_error

logger = logging.getLogger(__name__)

ChangeCallback = Callable[[str, str], None]

# Access notifications emitted by newer watchdog releases; not changes.
_IGNORED_EVENT_TYPES = frozenset({"opened", "closed_no_write"})

# -----------------------------------------------------------------------------
# EVENT DISPATCH
# -----------------------------------------------------------------------------

class _CallbackHandler(FileSystemEventHandler):
    """
    Forward watchdog events to a user callback as ``(event_type, path)``.

    When ``target`` is set, only events whose source or destination is that
    exact path are forwarded (a file is watched through its directory).
    """

    def __init__(self, callback: ChangeCallback, target: Optional[str] = None) -> None:
        super().__init__()
        self._callback = callback
        self._target = target

    def on_any_event(self, event: FileSystemEvent) -> None:
        if event.event_type in _IGNORED_EVENT_TYPES:
            return

        src = os.path.abspath(os.fsdecode(event.src_path))
        dest = getattr(event, "dest_path", "") or ""
        dest = os.path.abspath(os.fsdecode(dest)) if dest else ""

        if self._target is not None and self._target not in (src, dest):
            return

        try:
            self._callback(event.event_type, src)
        except Exception:
            # Runs on the observer thread; an escaping error would stop delivery
            logger.exception(f"Watch callback failed for {event.event_type} on '{src}'")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def watch(path: str, callback: ChangeCallback, *, recursive: bool = True) -> Callable[[], None]:
    """
    Watch a file or directory for changes.

    Args:
        path: File or directory to watch.
        callback: Called as ``callback(event_type, path)`` for every change
                  (``created``, ``modified``, ``deleted``, ``moved``, ``closed``).
        recursive: For a directory, also report changes in subdirectories.

    Returns:
        Callable[[], None]: Stop function; calling it more than once is a no-op.

    Raises:
        PathNotFoundError: The path does not exist.
    """
    target = os.path.abspath(path)
    if not os.path.exists(target):
        raise PathNotFoundError(f"Path does not exist: {path}", path)

    if os.path.isdir(target):
        watch_dir, handler = target, _CallbackHandler(callback)
    else:
        watch_dir, handler = os.path.dirname(target), _CallbackHandler(callback, target)
        recursive = False

    observer = Observer()
    try:
        observer.schedule(handler, watch_dir, recursive=recursive)
        observer.start()
    except OSError as e:
        raise translate_os_error(e, path) from e

    logger.debug(f"Watching '{target}' (recursive={recursive})")

    def stop() -> None:
        if observer.is_alive():
            observer.stop()
            observer.join()
            logger.debug(f"Stopped watching '{target}'")

    return stop
