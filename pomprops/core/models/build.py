"""
Build kinds — the trigger tag a host build passes to a participant.
"""

from __future__ import annotations

from enum import Enum


class BuildKind(str, Enum):
    """Why the host is building."""

    FULL = "full"
    INCREMENTAL = "incremental"
    AUTO = "auto"
    CLEAN = "clean"

    @property
    def writes_output(self) -> bool:
        """Clean builds remove output; all others produce it."""
        return self is not BuildKind.CLEAN
