"""
Receipt and report models — the outcome of a materialize call.

One Receipt per generated file. The report groups them with the
destination folder they were written to. A failed write raises instead
of producing a receipt.
"""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, Field


def _now_iso() -> str:
    """Current UTC time as ISO string."""
    return datetime.now(UTC).isoformat()


class Receipt(BaseModel):
    """Result of upserting one generated file."""

    file: str                       # pom.properties | pom.xml
    path: str

    started_at: str = Field(default_factory=_now_iso)
    duration_ms: int = 0

    created: bool = False           # False when an existing file was replaced
    size: int = 0


class MaterializeReport(BaseModel):
    """All receipts of one materialize call."""

    coordinates: str
    destination: str
    receipts: list[Receipt] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return bool(self.receipts)

    def get(self, file: str) -> Receipt | None:
        """Look up the receipt of a generated file by name."""
        for receipt in self.receipts:
            if receipt.file == file:
                return receipt
        return None

    def to_dict(self) -> dict:
        return {
            "coordinates": self.coordinates,
            "destination": self.destination,
            "ok": self.ok,
            "files": [r.model_dump(mode="json") for r in self.receipts],
        }
