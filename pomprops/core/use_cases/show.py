"""
Show use case — read back what a previous write produced.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from jproperties import PropertyError

from pomprops.adapters.registry import AdapterRegistry
from pomprops.core.config.loader import ConfigError, config_dir, find_config_file, load_config
from pomprops.core.services.pom_writer import POM_FILE, PROPERTIES_FILE, destination_folder
from pomprops.core.services.properties import load_properties
from pomprops.core.use_cases.materialize import build_registry


@dataclass
class ShowResult:
    """Contents of the destination folder."""

    destination: Path | None = None
    properties: dict[str, str] = field(default_factory=dict)
    has_properties: bool = False
    pom_size: int | None = None
    error: str | None = None

    def to_dict(self) -> dict:
        if self.error:
            return {"error": self.error}
        return {
            "destination": str(self.destination),
            "properties": self.properties if self.has_properties else None,
            "pom_size": self.pom_size,
        }


def show_output(
    config_path: Path | None = None,
    output_root: Path | str | None = None,
    registry: AdapterRegistry | None = None,
) -> ShowResult:
    """Load the generated pom.properties and size pom.xml, if present."""
    result = ShowResult()
    try:
        if config_path is None:
            config_path = find_config_file()
        config = load_config(config_path)
    except ConfigError as e:
        result.error = str(e)
        return result

    assert config_path is not None
    base = config_dir(config_path)
    dest = destination_folder(config.output_path(base, output_root), config.coordinates)
    result.destination = dest

    if registry is None:
        registry = build_registry(config)
    fs = registry.get("local")
    if fs is None:
        result.error = "No filesystem adapter registered for 'local'"
        return result

    props_file = dest / PROPERTIES_FILE
    pom_file = dest / POM_FILE
    try:
        if fs.exists(props_file):
            result.properties = load_properties(fs.read_bytes(props_file))
            result.has_properties = True
        if fs.exists(pom_file):
            result.pom_size = len(fs.read_bytes(pom_file))
    except (OSError, PropertyError) as e:
        result.error = f"Cannot read {dest}: {e}"

    return result
