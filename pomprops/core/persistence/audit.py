"""
Audit ledger — append-only record of materialize runs.

Every ``write`` appends one entry to an NDJSON (newline-delimited JSON)
file next to the config: which coordinates, which build kind, where the
files went, and whether it worked. Entries are never modified or
deleted, and a ledger that cannot be written never fails a build.
"""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from pathlib import Path

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

DEFAULT_AUDIT_DIR = ".state"
DEFAULT_AUDIT_FILE = "audit.ndjson"


def default_audit_path(base_dir: Path) -> Path:
    """Ledger location for a config folder."""
    return base_dir / DEFAULT_AUDIT_DIR / DEFAULT_AUDIT_FILE


class AuditEntry(BaseModel):
    """A single ledger entry."""

    timestamp: str = Field(default_factory=lambda: datetime.now(UTC).isoformat())
    coordinates: str = ""
    build_kind: str = ""
    destination: str = ""
    mock: bool = False

    status: str = ""               # ok, skipped, failed
    files: list[str] = Field(default_factory=list)
    duration_ms: int = 0

    errors: list[str] = Field(default_factory=list)


class AuditWriter:
    """Append-only ledger writer and reader."""

    def __init__(self, path: Path):
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def write(self, entry: AuditEntry) -> bool:
        """Append an entry. Returns False (and logs) if the ledger is unwritable."""
        line = json.dumps(entry.model_dump(mode="json"), ensure_ascii=False) + "\n"
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("a", encoding="utf-8") as f:
                f.write(line)
        except OSError as e:
            logger.error("Failed to write audit entry to %s: %s", self._path, e)
            return False
        logger.debug("Audit entry written: %s %s", entry.coordinates, entry.status)
        return True

    def read_all(self) -> list[AuditEntry]:
        """All entries, oldest first. Corrupt lines are skipped."""
        if not self._path.is_file():
            return []

        entries = []
        try:
            with self._path.open("r", encoding="utf-8") as f:
                for line_num, line in enumerate(f, start=1):
                    line = line.strip()
                    if not line:
                        continue
                    try:
                        entries.append(AuditEntry.model_validate(json.loads(line)))
                    except ValueError as e:
                        logger.warning("Skipping corrupt audit entry at line %d: %s", line_num, e)
        except OSError as e:
            logger.error("Failed to read audit ledger: %s", e)

        return entries

    def read_recent(self, n: int = 20) -> list[AuditEntry]:
        """The most recent ``n`` entries, oldest first."""
        entries = self.read_all()
        return entries[-n:] if n > 0 else []
