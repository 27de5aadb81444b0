"""
Pom artifact writer — materializes archiver metadata into an output root.

Writes the two files the Maven archiver embeds in every jar:

    <output_root>/META-INF/maven/<groupId>/<artifactId>/pom.properties
    <output_root>/META-INF/maven/<groupId>/<artifactId>/pom.xml

so that a folder built outside Maven (IDE, script) carries the same
metadata as a packaged artifact. Both files are upserted on every call;
nothing is ever deleted, and other files in the folder are left alone.

Flow:
    create folder → build properties → serialize → upsert pom.properties
    → read descriptor → upsert pom.xml
"""

from __future__ import annotations

import io
import logging
import time
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path
from typing import BinaryIO

from pomprops.adapters.base import Filesystem
from pomprops.adapters.local import LocalFilesystem
from pomprops.core.models.coordinates import Coordinates, ProjectMetadata
from pomprops.core.models.receipt import MaterializeReport, Receipt
from pomprops.core.services.errors import (
    FileWriteError,
    FolderCreationError,
    StreamReadError,
)
from pomprops.core.services.properties import store_properties

logger = logging.getLogger(__name__)

# Header comment of pom.properties; tooling matches on this exact text
GENERATED_BY = "Generated by m2e"

PROPERTIES_FILE = "pom.properties"
POM_FILE = "pom.xml"

# The descriptor may be an open binary stream, a file path, or raw bytes
Descriptor = BinaryIO | Path | bytes


def destination_folder(output_root: Path | str, coordinates: Coordinates) -> Path:
    """Folder that receives both generated files.

    Group and artifact ids are used verbatim as path segments.
    """
    return Path(output_root) / coordinates.relative_path


def build_properties(coordinates: Coordinates, project: ProjectMetadata) -> dict[str, str]:
    """The pom.properties entries, in file order."""
    return {
        "groupId": coordinates.group_id,
        "artifactId": coordinates.artifact_id,
        "version": coordinates.version,
        "m2e.projectName": project.name,
        "m2e.projectLocation": project.location,
    }


class PomArtifactWriter:
    """Writes pom.properties and pom.xml through a Filesystem adapter.

    Args:
        fs: Storage to write to. Defaults to the local disk.
        timestamp: Add a Java-style date comment to pom.properties.
            Off by default so repeated builds produce identical bytes.
        clock: Time source for the date comment.
    """

    def __init__(
        self,
        fs: Filesystem | None = None,
        *,
        timestamp: bool = False,
        clock: Callable[[], datetime] | None = None,
    ):
        self._fs = fs or LocalFilesystem()
        self._timestamp = timestamp
        self._clock = clock or (lambda: datetime.now(UTC))

    @property
    def fs(self) -> Filesystem:
        return self._fs

    def materialize(
        self,
        coordinates: Coordinates,
        output_root: Path | str,
        project: ProjectMetadata,
        descriptor: Descriptor,
    ) -> MaterializeReport:
        """Create or refresh both generated files.

        The descriptor stream is closed before returning, whatever the
        outcome. A Path descriptor is opened and closed here.

        Returns:
            Report with one ok receipt per file.

        Raises:
            FolderCreationError: Destination folder missing and not creatable.
            SerializationError: pom.properties content could not be built.
            FileWriteError: One of the files could not be written.
            StreamReadError: The descriptor could not be opened or read.
        """
        stream = _open_descriptor(descriptor)
        try:
            return self._materialize(coordinates, Path(output_root), project, stream)
        finally:
            stream.close()

    def _materialize(
        self,
        coordinates: Coordinates,
        output_root: Path,
        project: ProjectMetadata,
        stream: BinaryIO,
    ) -> MaterializeReport:
        dest = destination_folder(output_root, coordinates)
        report = MaterializeReport(coordinates=str(coordinates), destination=str(dest))

        try:
            if self._fs.create_folder(dest):
                logger.info("Created %s", dest)
        except OSError as e:
            raise FolderCreationError(f"Cannot create folder {dest}: {e}", path=str(dest), cause=e) from e

        content = store_properties(
            build_properties(coordinates, project),
            GENERATED_BY,
            timestamp=self._timestamp,
            now=self._clock() if self._timestamp else None,
        )
        report.receipts.append(self._upsert(dest / PROPERTIES_FILE, content))

        pom = dest / POM_FILE
        try:
            data = stream.read()
        except OSError as e:
            raise StreamReadError(f"Cannot read project descriptor: {e}", path=str(pom), cause=e) from e
        report.receipts.append(self._upsert(pom, data))

        logger.info("Materialized %s into %s", coordinates, dest)
        return report

    def _upsert(self, path: Path, data: bytes) -> Receipt:
        start = time.monotonic()
        try:
            created, size = self._fs.create_or_replace_file(path, data)
        except OSError as e:
            raise FileWriteError(path.name, str(path), cause=e) from e

        receipt = Receipt(
            file=path.name,
            path=str(path),
            created=created,
            size=size,
            duration_ms=int((time.monotonic() - start) * 1000),
        )
        logger.debug("%s %s", "Created" if created else "Replaced", path)
        return receipt


def _open_descriptor(descriptor: Descriptor) -> BinaryIO:
    if isinstance(descriptor, bytes):
        return io.BytesIO(descriptor)
    if isinstance(descriptor, Path):
        try:
            return descriptor.open("rb")
        except OSError as e:
            raise StreamReadError(f"Cannot open {descriptor}: {e}", path=str(descriptor), cause=e) from e
    return descriptor
