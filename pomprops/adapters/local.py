"""
Local filesystem adapter — real disk through pathlib.

Atomic mode writes to a temp file in the target folder and renames it
over the destination, so an interrupted build never leaves a partially
written pom.properties or pom.xml behind.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from pomprops.adapters.base import Filesystem

logger = logging.getLogger(__name__)

_NEW_FILE_MODE = 0o644


class LocalFilesystem(Filesystem):
    """Disk-backed filesystem.

    Args:
        atomic: Write through temp file + rename (default). When False,
            files are overwritten in place.
    """

    def __init__(self, atomic: bool = True):
        self._atomic = atomic

    @property
    def name(self) -> str:
        return "local"

    @property
    def atomic(self) -> bool:
        return self._atomic

    def exists(self, path: Path) -> bool:
        return path.exists()

    def create_folder(self, path: Path) -> bool:
        if path.is_dir():
            return False
        # raises FileExistsError when a regular file is in the way
        path.mkdir(parents=True, exist_ok=True)
        logger.debug("Created folder %s", path)
        return True

    def create_or_replace_file(self, path: Path, data: bytes) -> tuple[bool, int]:
        created = not path.exists()
        if self._atomic:
            self._write_atomic(path, data)
        else:
            path.write_bytes(data)
        logger.debug("%s %s (%d bytes)", "Created" if created else "Replaced", path, len(data))
        return created, len(data)

    def read_bytes(self, path: Path) -> bytes:
        return path.read_bytes()

    def _write_atomic(self, path: Path, data: bytes) -> None:
        # mkstemp creates 0600 files; keep the replaced file's mode instead
        mode = path.stat().st_mode & 0o777 if path.exists() else _NEW_FILE_MODE
        fd, tmp_path = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}_",
            suffix=".tmp",
        )
        tmp = Path(tmp_path)
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            tmp.chmod(mode)
            tmp.replace(path)
        except Exception:
            tmp.unlink(missing_ok=True)
            raise
