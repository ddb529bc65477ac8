"""Filesystem primitives used by the disk store.

Every function here raises a typed :mod:`cryptcache.exceptions` error on
failure instead of returning a status; the store decides how to translate
that into its own results.
"""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from collections.abc import Iterable
from pathlib import Path
from typing import Optional

from cryptcache.exceptions import DeleteFailureError, WriteFailureError

logger = logging.getLogger(__name__)

FILE_MODE = 0o600


def ensure_directory(path: Path) -> None:
    """Create *path* (and its parents) unless it already exists as a directory.

    Raises:
        WriteFailureError: If the directory cannot be created, or if a
            non-directory already occupies *path*.
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise WriteFailureError(f"Cannot create directory {path}: {exc}") from exc


def delete_path(path: Path) -> None:
    """Delete a file, symlink, or whole directory tree at *path*.

    Deleting a path that does not exist is not an error.

    Raises:
        DeleteFailureError: If something is still present at *path* after
            the attempt.
    """
    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink(missing_ok=True)
    except OSError as exc:
        raise DeleteFailureError(f"Cannot delete {path}: {exc}") from exc
    if os.path.lexists(path):
        raise DeleteFailureError(f"{path} still exists after deletion")
    logger.debug("Deleted %s", path)


def atomic_write_lines(path: Path, lines: Iterable[str]) -> None:
    """Write *lines* to *path* atomically, each terminated by ``\\n``.

    Content goes to a temporary file in the same directory, which is
    flushed, fsynced and then renamed over *path*, so readers only ever see
    the previous file or the complete new one.  The temp file carries
    ``0o600`` permissions from before the first byte is written.  On any
    failure the temp file is removed and the exception re-raised.
    """
    fd = None
    tmp_path: Optional[str] = None
    try:
        fd = tempfile.NamedTemporaryFile(
            mode="w",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
            newline="\n",
        )
        tmp_path = fd.name
        os.chmod(tmp_path, FILE_MODE)
        for line in lines:
            fd.write(line)
            fd.write("\n")
        fd.flush()
        os.fsync(fd.fileno())
        fd.close()
        fd = None
        os.replace(tmp_path, path)
    except BaseException:
        if fd is not None:
            fd.close()
        if tmp_path is not None:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
        raise
