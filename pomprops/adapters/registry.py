"""
Adapter registry — name-based lookup of filesystem adapters.

The registry is the single point of adapter management. Use cases ask
it for a filesystem by name and never construct adapters themselves,
which is how mock mode swaps the real disk for memory.
"""

from __future__ import annotations

import logging

from pomprops.adapters.base import Filesystem
from pomprops.adapters.mock import MemoryFilesystem

logger = logging.getLogger(__name__)


class AdapterRegistry:
    """Central registry for filesystem adapters.

    In mock mode every lookup returns one shared memory filesystem.
    """

    def __init__(self, mock_mode: bool = False):
        self._adapters: dict[str, Filesystem] = {}
        self._mock_mode = mock_mode
        self._mock_adapter: Filesystem | None = None

    @property
    def mock_mode(self) -> bool:
        return self._mock_mode

    def set_mock_mode(self, enabled: bool, mock_adapter: Filesystem | None = None) -> None:
        """Enable or disable mock mode.

        Args:
            enabled: Whether to use mock mode.
            mock_adapter: Optional custom mock. If None, a MemoryFilesystem
                is created on first lookup.
        """
        self._mock_mode = enabled
        self._mock_adapter = mock_adapter

    def register(self, adapter: Filesystem) -> None:
        """Register an adapter under its name."""
        name = adapter.name
        if name in self._adapters:
            logger.warning("Overwriting existing adapter: %s", name)
        self._adapters[name] = adapter
        logger.debug("Registered adapter: %s", name)

    def get(self, name: str) -> Filesystem | None:
        """Look up an adapter by name, honoring mock mode."""
        if self._mock_mode:
            if self._mock_adapter is None:
                self._mock_adapter = MemoryFilesystem()
            return self._mock_adapter
        return self._adapters.get(name)
