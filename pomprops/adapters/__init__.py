"""Adapters — storage bindings for the writer.

Public re-exports for convenient access.
"""

from pomprops.adapters.base import Filesystem
from pomprops.adapters.local import LocalFilesystem
from pomprops.adapters.mock import MemoryFilesystem
from pomprops.adapters.registry import AdapterRegistry

__all__ = [
    "AdapterRegistry",
    "Filesystem",
    "LocalFilesystem",
    "MemoryFilesystem",
]
