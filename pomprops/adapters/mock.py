"""
Memory filesystem — in-memory test double for the Filesystem contract.

Used by tests and by the CLI's ``--mock`` mode to run a complete
materialize without touching disk. Configurable to fail on chosen
paths.
"""

from __future__ import annotations

from pathlib import PurePosixPath, Path

from pomprops.adapters.base import Filesystem


class MemoryFilesystem(Filesystem):
    """Files and folders held in dicts.

    Every call is recorded in ``call_log`` as ``(operation, path)``.
    """

    def __init__(self, adapter_name: str = "memory", available: bool = True):
        self._name = adapter_name
        self._available = available
        self._folders: set[str] = {"/"}
        self._files: dict[str, bytes] = {}
        self._failures: dict[tuple[str, str], OSError] = {}
        self._call_log: list[tuple[str, str]] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_log(self) -> list[tuple[str, str]]:
        """All (operation, path) pairs this fake has received."""
        return self._call_log

    @property
    def files(self) -> dict[str, bytes]:
        """Snapshot of stored files keyed by POSIX path."""
        return dict(self._files)

    def is_available(self) -> bool:
        return self._available

    def set_failure(self, operation: str, path: Path | str, error: OSError | None = None) -> None:
        """Make ``operation`` ('create_folder' or 'write') on ``path`` raise."""
        key = _key(path)
        self._failures[(operation, key)] = error or PermissionError(f"[mock] {operation} denied: {key}")

    def add_file(self, path: Path | str, data: bytes) -> None:
        """Seed a file (and its parent folders) without logging a call."""
        key = _key(path)
        self._add_parents(key)
        self._files[key] = data

    # ── Filesystem contract ─────────────────────────────────────

    def exists(self, path: Path) -> bool:
        key = _key(path)
        self._call_log.append(("exists", key))
        return key in self._files or key in self._folders

    def create_folder(self, path: Path) -> bool:
        key = _key(path)
        self._call_log.append(("create_folder", key))
        self._raise_if_failing("create_folder", key)
        if key in self._files:
            raise FileExistsError(f"[mock] file in the way: {key}")
        if key in self._folders:
            return False
        for parent in PurePosixPath(key).parents:
            if str(parent) in self._files:
                raise NotADirectoryError(f"[mock] not a folder: {parent}")
        self._add_parents(key)
        self._folders.add(key)
        return True

    def create_or_replace_file(self, path: Path, data: bytes) -> tuple[bool, int]:
        key = _key(path)
        self._call_log.append(("write", key))
        self._raise_if_failing("write", key)
        parent = str(PurePosixPath(key).parent)
        if parent not in self._folders:
            raise FileNotFoundError(f"[mock] no such folder: {parent}")
        created = key not in self._files
        self._files[key] = bytes(data)
        return created, len(data)

    def read_bytes(self, path: Path) -> bytes:
        key = _key(path)
        self._call_log.append(("read", key))
        try:
            return self._files[key]
        except KeyError:
            raise FileNotFoundError(f"[mock] no such file: {key}") from None

    def reset(self) -> None:
        """Drop all files, folders, failures and the call log."""
        self._folders = {"/"}
        self._files.clear()
        self._failures.clear()
        self._call_log.clear()

    # ── Internals ───────────────────────────────────────────────

    def _raise_if_failing(self, operation: str, key: str) -> None:
        error = self._failures.get((operation, key))
        if error is not None:
            raise error

    def _add_parents(self, key: str) -> None:
        for parent in PurePosixPath(key).parents:
            self._folders.add(str(parent))


def _key(path: Path | str) -> str:
    """Normalize a path to an absolute POSIX string."""
    posix = PurePosixPath(Path(path).as_posix())
    if not posix.is_absolute():
        posix = PurePosixPath("/") / posix
    return str(posix)
