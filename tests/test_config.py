"""
Tests for configuration loading — pomprops.yml parsing and path resolution.
"""

import textwrap
from pathlib import Path

import pytest

from pomprops.core.config.loader import ConfigError, config_dir, find_config_file, load_config


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "pomprops.yml"
    path.write_text(textwrap.dedent(content))
    return path


class TestLoadConfig:
    """Tests for load_config()."""

    def test_load_valid_config(self, config_file: Path):
        config = load_config(config_file)
        assert config.coordinates.group_id == "com.example"
        assert config.coordinates.artifact_id == "widget"
        assert config.coordinates.version == "1.0"
        assert config.project.name == "Widget"
        assert config.output_root == "target/classes"

    def test_defaults(self, tmp_path: Path):
        path = _write(tmp_path, """\
            coordinates:
              groupId: g
              artifactId: a
              version: "2"
        """)
        config = load_config(path)
        assert config.output_root == "target/classes"
        assert config.pom == "pom.xml"
        assert config.timestamp is False
        assert config.atomic is True

    def test_numeric_version_becomes_string(self, tmp_path: Path):
        path = _write(tmp_path, """\
            coordinates:
              groupId: g
              artifactId: a
              version: 1.0
        """)
        assert load_config(path).coordinates.version == "1.0"

    def test_boolean_version_rejected(self, tmp_path: Path):
        path = _write(tmp_path, """\
            coordinates:
              groupId: g
              artifactId: a
              version: true
        """)
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(path)

    def test_schema_version_accepted(self, tmp_path: Path):
        path = _write(tmp_path, """\
            version: 1
            coordinates: {groupId: g, artifactId: a, version: "1"}
        """)
        assert load_config(path).version == 1

    def test_unsupported_schema_version(self, tmp_path: Path):
        path = _write(tmp_path, """\
            version: 2
            coordinates: {groupId: g, artifactId: a, version: "1"}
        """)
        with pytest.raises(ConfigError, match="Unsupported config version 2"):
            load_config(path)

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nonexistent.yml")

    def test_invalid_yaml_raises(self, tmp_path: Path):
        path = _write(tmp_path, ":: invalid: yaml: [")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path)

    def test_non_mapping_raises(self, tmp_path: Path):
        path = _write(tmp_path, "- just\n- a\n- list\n")
        with pytest.raises(ConfigError, match="Expected a YAML mapping"):
            load_config(path)

    def test_missing_coordinates_raises(self, tmp_path: Path):
        path = _write(tmp_path, "output_root: out\n")
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(path)

    def test_empty_artifact_id_raises(self, tmp_path: Path):
        path = _write(tmp_path, """\
            coordinates:
              groupId: g
              artifactId: ""
              version: "1"
        """)
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(path)

    def test_auto_search_fails(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        isolated = tmp_path / "isolated"
        isolated.mkdir()
        monkeypatch.chdir(isolated)
        with pytest.raises(ConfigError, match=r"No pomprops\.yml found"):
            load_config(None)


class TestPathResolution:
    def test_relative_paths_resolve_against_config(self, config_file: Path):
        config = load_config(config_file)
        base = config_dir(config_file)
        assert config.output_path(base) == base / "target" / "classes"
        assert config.pom_path(base) == base / "pom.xml"

    def test_output_override(self, config_file: Path, tmp_path: Path):
        config = load_config(config_file)
        base = config_dir(config_file)
        assert config.output_path(base, tmp_path / "elsewhere") == tmp_path / "elsewhere"
        assert config.output_path(base, "rel") == base / "rel"

    def test_project_metadata_defaults(self, tmp_path: Path):
        path = _write(tmp_path, """\
            coordinates: {groupId: g, artifactId: a, version: "1"}
        """)
        config = load_config(path)
        meta = config.project_metadata(config_dir(path))
        assert meta.location == str(tmp_path.resolve())
        assert meta.name == tmp_path.resolve().name

    def test_project_location_resolved(self, tmp_path: Path):
        path = _write(tmp_path, """\
            coordinates: {groupId: g, artifactId: a, version: "1"}
            project:
              name: Named
              location: sub/project
        """)
        meta = load_config(path).project_metadata(config_dir(path))
        assert meta.name == "Named"
        assert meta.location == str(tmp_path.resolve() / "sub" / "project")


class TestFindConfigFile:
    """Tests for find_config_file()."""

    def test_find_in_current_dir(self, tmp_path: Path):
        (tmp_path / "pomprops.yml").write_text("coordinates: {}\n")
        result = find_config_file(tmp_path)
        assert result is not None
        assert result.name == "pomprops.yml"

    def test_find_in_parent_dir(self, tmp_path: Path):
        (tmp_path / "pomprops.yml").write_text("coordinates: {}\n")
        subdir = tmp_path / "src" / "main"
        subdir.mkdir(parents=True)
        result = find_config_file(subdir)
        assert result is not None
        assert result.parent == tmp_path.resolve()

    def test_not_found_returns_none(self, tmp_path: Path):
        subdir = tmp_path / "deep" / "nested"
        subdir.mkdir(parents=True)
        assert find_config_file(subdir) is None
