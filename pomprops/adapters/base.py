"""
Filesystem base — the capability contract between the writer and storage.

The writer only talks to storage through this interface, never
directly to ``os`` or ``pathlib``. That keeps the materialize logic
testable against an in-memory fake and lets the CLI dry-run a write.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class Filesystem(ABC):
    """Abstract base class for filesystem adapters.

    Unlike receipts-only adapters, filesystem operations raise
    ``OSError`` on failure; the writer turns those into typed errors.

    To create a new adapter:
        1. Subclass Filesystem
        2. Implement name, exists, create_folder, create_or_replace_file,
           read_bytes
        3. Register it in the AdapterRegistry
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The adapter identifier (e.g., 'local', 'memory')."""

    def is_available(self) -> bool:
        """Whether the backing storage can be used. Never raises."""
        return True

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Whether a file or folder exists at ``path``."""

    @abstractmethod
    def create_folder(self, path: Path) -> bool:
        """Create ``path`` and all missing parents.

        Succeeds when the folder already exists.

        Returns:
            True if the folder was created, False if it was already there.

        Raises:
            OSError: The folder cannot be created (or a file is in the way).
        """

    @abstractmethod
    def create_or_replace_file(self, path: Path, data: bytes) -> tuple[bool, int]:
        """Write ``data`` to ``path``.

        An existing file is replaced entirely, never merged.

        Returns:
            (created, size). ``created`` is False when a file was replaced.

        Raises:
            OSError: The file cannot be written.
        """

    @abstractmethod
    def read_bytes(self, path: Path) -> bytes:
        """Return the content of the file at ``path``."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
