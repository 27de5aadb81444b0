"""
Config check use case — validate pomprops.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from pomprops.core.config.loader import ConfigError, config_dir, find_config_file, load_config
from pomprops.core.models.config import WriterConfig
from pomprops.core.services.pom_writer import destination_folder

# Characters that change the meaning of a coordinate used as a path segment
_PATH_SEPARATORS = ("/", "\\")


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    config: WriterConfig | None = None
    config_path: Path | None = None
    destination: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "coordinates": str(self.config.coordinates) if self.config else None,
            "destination": str(self.destination) if self.destination else None,
            "errors": self.errors,
            "warnings": self.warnings,
        }


def check_config(config_path: Path | None = None) -> ConfigCheckResult:
    """Validate configuration and report issues.

    Args:
        config_path: Optional explicit path to pomprops.yml.

    Returns:
        ConfigCheckResult with validation status and any issues.
    """
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_config_file()
    if config_path is None:
        result.errors.append("No pomprops.yml found.")
        return result
    result.config_path = config_path

    try:
        config = load_config(config_path)
    except ConfigError as e:
        result.errors.append(str(e))
        return result
    result.config = config

    base = config_dir(config_path)
    result.destination = destination_folder(config.output_path(base), config.coordinates)

    # Semantic checks
    pom = config.pom_path(base)
    if not pom.is_file():
        result.errors.append(f"Project descriptor not found: {pom}")

    for label, value in (
        ("groupId", config.coordinates.group_id),
        ("artifactId", config.coordinates.artifact_id),
    ):
        if any(sep in value for sep in _PATH_SEPARATORS):
            result.warnings.append(
                f"{label} '{value}' contains a path separator; it will create nested folders."
            )
        if value in (".", ".."):
            result.warnings.append(f"{label} '{value}' is a relative path segment.")

    if Path(config.output_root).is_absolute():
        result.warnings.append("output_root is absolute; the config is not portable.")

    result.valid = not result.errors
    return result
