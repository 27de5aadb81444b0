"""
Coordinates and project metadata — the inputs of every write.

Both are supplied by the caller (config file or API) and are treated
as opaque strings: no format validation, no escaping.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# Folder that holds archiver metadata inside a build output root
MAVEN_METADATA_DIR = "META-INF/maven"


class Coordinates(BaseModel):
    """The (groupId, artifactId, version) triple of a build artifact."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    group_id: str = Field(alias="groupId", min_length=1)
    artifact_id: str = Field(alias="artifactId", min_length=1)
    version: str = Field(min_length=1)

    @property
    def relative_path(self) -> str:
        """Destination folder relative to the output root."""
        return f"{MAVEN_METADATA_DIR}/{self.group_id}/{self.artifact_id}"

    def __str__(self) -> str:
        return f"{self.group_id}:{self.artifact_id}:{self.version}"


class ProjectMetadata(BaseModel):
    """Identity of the project being built.

    Carried into pom.properties under the ``m2e.*`` keys so that
    tooling can map a built artifact back to its workspace project.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    location: str
