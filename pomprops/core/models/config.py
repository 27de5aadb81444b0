"""
Writer configuration model — loaded from pomprops.yml.

Paths are kept as written; the resolve helpers below make relative ones
absolute against the folder that holds the config file.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from pomprops.core.models.coordinates import Coordinates, ProjectMetadata

CONFIG_VERSION = 1


class ProjectSection(BaseModel):
    """The ``project:`` block. Both fields default from the config location."""

    name: str = ""
    location: str = ""


class WriterConfig(BaseModel):
    """Everything the CLI needs to materialize one project."""

    version: int = CONFIG_VERSION    # schema version of pomprops.yml

    coordinates: Coordinates
    project: ProjectSection = Field(default_factory=ProjectSection)

    output_root: str = "target/classes"
    pom: str = "pom.xml"

    timestamp: bool = False     # emit a Java-style date comment line
    atomic: bool = True         # write through a temp file + rename

    def output_path(self, base_dir: Path, override: Path | str | None = None) -> Path:
        """Output root, resolved against the config folder."""
        return _resolve(base_dir, override if override is not None else self.output_root)

    def pom_path(self, base_dir: Path) -> Path:
        """Descriptor file, resolved against the config folder."""
        return _resolve(base_dir, self.pom)

    def project_metadata(self, base_dir: Path) -> ProjectMetadata:
        """Project identity, defaulting to the config folder and its name."""
        location = _resolve(base_dir, self.project.location) if self.project.location else base_dir
        return ProjectMetadata(
            name=self.project.name or location.name,
            location=str(location),
        )


def _resolve(base_dir: Path, value: Path | str) -> Path:
    path = Path(value).expanduser()
    return path if path.is_absolute() else base_dir / path
