"""
Materialize use case — one build pass driven by pomprops.yml.

This is the top-level orchestrator: it loads config, resolves paths,
picks the filesystem, runs the build participant, and records the
outcome in the audit ledger. It never raises; failures land in
``MaterializeResult.error``.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path

from pomprops.adapters.local import LocalFilesystem
from pomprops.adapters.registry import AdapterRegistry
from pomprops.core.config.loader import ConfigError, config_dir, find_config_file, load_config
from pomprops.core.engine.build_participant import BuildRequest, build
from pomprops.core.models.build import BuildKind
from pomprops.core.models.config import WriterConfig
from pomprops.core.models.receipt import MaterializeReport
from pomprops.core.persistence.audit import AuditEntry, AuditWriter, default_audit_path
from pomprops.core.services.errors import WriteError
from pomprops.core.services.pom_writer import PomArtifactWriter, destination_folder

logger = logging.getLogger(__name__)


@dataclass
class MaterializeResult:
    """Result of a materialize run."""

    report: MaterializeReport | None = None
    config: WriterConfig | None = None
    config_path: Path | None = None
    kind: BuildKind = BuildKind.INCREMENTAL
    destination: Path | None = None
    skipped: bool = False
    mock: bool = False
    error: str | None = None
    error_detail: dict | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        result: dict = {}
        if self.error:
            result["error"] = self.error
            if self.error_detail:
                result["detail"] = self.error_detail
            return result

        result["coordinates"] = str(self.config.coordinates) if self.config else ""
        result["kind"] = self.kind.value
        result["destination"] = str(self.destination) if self.destination else None
        result["skipped"] = self.skipped
        result["mock"] = self.mock
        if self.report:
            result["report"] = self.report.to_dict()
        return result


def build_registry(config: WriterConfig, mock_mode: bool = False) -> AdapterRegistry:
    """Registry holding the local filesystem, honoring mock mode."""
    registry = AdapterRegistry(mock_mode=mock_mode)
    registry.register(LocalFilesystem(atomic=config.atomic))
    return registry


def run_materialize(
    config_path: Path | None = None,
    output_root: Path | str | None = None,
    kind: BuildKind | str = BuildKind.INCREMENTAL,
    mock_mode: bool = False,
    audit: bool = True,
    registry: AdapterRegistry | None = None,
) -> MaterializeResult:
    """Write pom.properties and pom.xml for the configured project.

    Args:
        config_path: Explicit pomprops.yml (default: search upward from cwd).
        output_root: Override the configured output root.
        kind: Build kind passed to the participant.
        mock_mode: Write to an in-memory filesystem instead of disk.
        audit: Append an entry to the audit ledger.
        registry: Pre-built adapter registry (tests).

    Returns:
        MaterializeResult with the report or an error message.
    """
    result = MaterializeResult(mock=mock_mode)
    try:
        result.kind = BuildKind(kind)
    except ValueError:
        choices = ", ".join(k.value for k in BuildKind)
        result.error = f"Unknown build kind '{kind}' (expected one of: {choices})"
        return result

    # ── Load config ──────────────────────────────────────────────
    try:
        if config_path is None:
            config_path = find_config_file()
        config = load_config(config_path)
    except ConfigError as e:
        result.error = str(e)
        return result

    assert config_path is not None  # load_config raised otherwise
    base = config_dir(config_path)
    result.config = config
    result.config_path = config_path

    root = config.output_path(base, output_root)
    result.destination = destination_folder(root, config.coordinates)

    # ── Resolve filesystem ───────────────────────────────────────
    if registry is None:
        registry = build_registry(config, mock_mode=mock_mode)
    fs = registry.get("local")
    if fs is None:
        result.error = "No filesystem adapter registered for 'local'"
        return result
    if not fs.is_available():
        result.error = f"Filesystem adapter '{fs.name}' is not available"
        return result

    writer = PomArtifactWriter(fs, timestamp=config.timestamp)
    request = BuildRequest(
        coordinates=config.coordinates,
        output_root=root,
        project=config.project_metadata(base),
        descriptor=config.pom_path(base),
    )

    # ── Build ────────────────────────────────────────────────────
    start = time.monotonic()
    try:
        report = build(result.kind, request, writer)
    except WriteError as e:
        logger.info("Materialize failed: %s", e)
        result.error = str(e)
        result.error_detail = e.to_dict()
    else:
        result.report = report
        result.skipped = report is None
    elapsed_ms = int((time.monotonic() - start) * 1000)

    # ── Audit ────────────────────────────────────────────────────
    if audit:
        _record(result, base, elapsed_ms)

    return result


def _record(result: MaterializeResult, base: Path, elapsed_ms: int) -> None:
    assert result.config is not None
    if result.error:
        status = "failed"
    elif result.skipped:
        status = "skipped"
    else:
        status = "ok"

    entry = AuditEntry(
        coordinates=str(result.config.coordinates),
        build_kind=result.kind.value,
        destination=str(result.destination),
        mock=result.mock,
        status=status,
        files=[r.file for r in result.report.receipts] if result.report else [],
        duration_ms=elapsed_ms,
        errors=[result.error] if result.error else [],
    )
    AuditWriter(default_audit_path(base)).write(entry)
