"""
Domain models — Pydantic types for pomprops.

All models are re-exported here for convenient access:

    from pomprops.core.models import Coordinates, ProjectMetadata, Receipt
"""

from pomprops.core.models.build import BuildKind
from pomprops.core.models.config import ProjectSection, WriterConfig
from pomprops.core.models.coordinates import (
    MAVEN_METADATA_DIR,
    Coordinates,
    ProjectMetadata,
)
from pomprops.core.models.receipt import MaterializeReport, Receipt

__all__ = [
    # build.py
    "BuildKind",
    # coordinates.py
    "Coordinates",
    "MAVEN_METADATA_DIR",
    "MaterializeReport",
    "ProjectMetadata",
    # config.py
    "ProjectSection",
    # receipt.py
    "Receipt",
    "WriterConfig",
]
