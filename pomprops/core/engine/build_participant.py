"""
Build participant — the hook a host build calls on every build pass.

A host (IDE builder, watch loop, build script) calls ``build()`` with
the kind of build it is running. Output-producing builds refresh the
archiver metadata; clean builds leave it alone, since the host wipes
the output folder itself.

Flow:
    host → build(kind, request) → PomArtifactWriter.materialize
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from pomprops.core.models.build import BuildKind
from pomprops.core.models.coordinates import Coordinates, ProjectMetadata
from pomprops.core.models.receipt import MaterializeReport
from pomprops.core.services.pom_writer import Descriptor, PomArtifactWriter

logger = logging.getLogger(__name__)


@dataclass
class BuildRequest:
    """What the host knows about the project being built."""

    coordinates: Coordinates
    output_root: Path
    project: ProjectMetadata
    descriptor: Descriptor


def configure(request: BuildRequest) -> None:
    """Project configuration step. pom metadata needs no configuration."""


def build(
    kind: BuildKind | str,
    request: BuildRequest,
    writer: PomArtifactWriter | None = None,
) -> MaterializeReport | None:
    """Run the participant for one build pass.

    The descriptor stream is closed even when the build kind skips the
    write.

    Args:
        kind: The host's build kind.
        request: Project inputs.
        writer: Writer to use (default: local disk).

    Returns:
        The materialize report, or None when the build kind writes nothing.

    Raises:
        WriteError: Propagated from the writer.
    """
    kind = BuildKind(kind)
    if not kind.writes_output:
        logger.debug("Skipping %s build for %s", kind.value, request.coordinates)
        if hasattr(request.descriptor, "close"):
            request.descriptor.close()
        return None

    writer = writer or PomArtifactWriter()
    logger.info("%s build: %s", kind.value.capitalize(), request.coordinates)
    return writer.materialize(
        request.coordinates,
        request.output_root,
        request.project,
        request.descriptor,
    )
