"""
Shared test fixtures and configuration.
"""

import logging
import textwrap
from pathlib import Path

import pytest

from pomprops.core.models.coordinates import Coordinates, ProjectMetadata


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """The CLI reconfigures the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def coordinates() -> Coordinates:
    return Coordinates(groupId="com.example", artifactId="widget", version="1.0")


@pytest.fixture
def project() -> ProjectMetadata:
    return ProjectMetadata(name="Widget", location="/home/dev/widget")


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A project folder with pomprops.yml and pom.xml."""
    root = tmp_path / "widget"
    root.mkdir()
    (root / "pom.xml").write_bytes(b"<project/>")
    (root / "pomprops.yml").write_text(textwrap.dedent("""\
        coordinates:
          groupId: com.example
          artifactId: widget
          version: "1.0"
        project:
          name: Widget
        output_root: target/classes
        pom: pom.xml
    """))
    return root


@pytest.fixture
def config_file(project_dir: Path) -> Path:
    return project_dir / "pomprops.yml"
