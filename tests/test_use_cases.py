"""
Tests for use cases — materialize, config check, and show.
"""

import json
from pathlib import Path

from pomprops.adapters.mock import MemoryFilesystem
from pomprops.adapters.registry import AdapterRegistry
from pomprops.core.models.build import BuildKind
from pomprops.core.persistence.audit import AuditWriter, default_audit_path
from pomprops.core.use_cases.config_check import check_config
from pomprops.core.use_cases.materialize import run_materialize
from pomprops.core.use_cases.show import show_output

DEST = Path("target/classes/META-INF/maven/com.example/widget")


class TestRunMaterialize:
    def test_writes_files(self, project_dir: Path, config_file: Path):
        result = run_materialize(config_path=config_file)

        assert result.ok
        assert result.report is not None and result.report.ok
        dest = project_dir.resolve() / DEST
        assert result.destination == dest
        assert (dest / "pom.xml").read_bytes() == b"<project/>"
        props = (dest / "pom.properties").read_text()
        assert f"m2e.projectLocation={project_dir.resolve()}" in props
        assert "m2e.projectName=Widget" in props

    def test_records_audit(self, project_dir: Path, config_file: Path):
        run_materialize(config_path=config_file, kind=BuildKind.FULL)
        entries = AuditWriter(default_audit_path(project_dir.resolve())).read_all()
        assert len(entries) == 1
        assert entries[0].status == "ok"
        assert entries[0].build_kind == "full"
        assert entries[0].files == ["pom.properties", "pom.xml"]

    def test_no_audit(self, project_dir: Path, config_file: Path):
        run_materialize(config_path=config_file, audit=False)
        assert not default_audit_path(project_dir.resolve()).exists()

    def test_output_root_override(self, config_file: Path, tmp_path: Path):
        out = tmp_path / "custom"
        result = run_materialize(config_path=config_file, output_root=out)
        assert result.ok
        assert (out / "META-INF/maven/com.example/widget/pom.properties").is_file()

    def test_mock_mode_leaves_disk_alone(self, project_dir: Path, config_file: Path):
        result = run_materialize(config_path=config_file, mock_mode=True)
        assert result.ok
        assert result.mock
        assert not (project_dir / "target").exists()

    def test_custom_registry(self, config_file: Path):
        fs = MemoryFilesystem()
        registry = AdapterRegistry()
        registry.set_mock_mode(True, mock_adapter=fs)
        result = run_materialize(config_path=config_file, registry=registry, audit=False)
        assert result.ok
        assert any(key.endswith("/pom.xml") for key in fs.files)

    def test_clean_is_skipped(self, project_dir: Path, config_file: Path):
        result = run_materialize(config_path=config_file, kind="clean")
        assert result.ok
        assert result.skipped
        assert not (project_dir / "target").exists()
        entries = AuditWriter(default_audit_path(project_dir.resolve())).read_all()
        assert entries[0].status == "skipped"

    def test_missing_config(self, tmp_path: Path):
        result = run_materialize(config_path=tmp_path / "nope.yml")
        assert not result.ok
        assert "not found" in result.error
        assert result.to_dict() == {"error": result.error}

    def test_missing_pom_is_error(self, project_dir: Path, config_file: Path):
        (project_dir / "pom.xml").unlink()
        result = run_materialize(config_path=config_file)
        assert not result.ok
        assert result.error_detail["kind"] == "stream"
        entries = AuditWriter(default_audit_path(project_dir.resolve())).read_all()
        assert entries[0].status == "failed"
        assert entries[0].errors

    def test_folder_error_detail(self, project_dir: Path, config_file: Path):
        (project_dir / "target").write_text("not a folder")
        result = run_materialize(config_path=config_file)
        assert not result.ok
        assert result.error_detail["kind"] == "folder"

    def test_missing_adapter(self, config_file: Path):
        result = run_materialize(config_path=config_file, registry=AdapterRegistry())
        assert "No filesystem adapter" in result.error

    def test_unavailable_adapter(self, config_file: Path):
        registry = AdapterRegistry()
        registry.register(MemoryFilesystem(adapter_name="local", available=False))
        result = run_materialize(config_path=config_file, registry=registry, audit=False)
        assert result.error == "Filesystem adapter 'local' is not available"

    def test_unknown_kind_is_error(self, project_dir: Path, config_file: Path):
        result = run_materialize(config_path=config_file, kind="bogus")
        assert not result.ok
        assert "Unknown build kind 'bogus'" in result.error
        assert not (project_dir / "target").exists()
        assert not default_audit_path(project_dir.resolve()).exists()

    def test_to_dict_is_json(self, config_file: Path):
        data = run_materialize(config_path=config_file).to_dict()
        json.dumps(data)
        assert data["coordinates"] == "com.example:widget:1.0"
        assert data["report"]["ok"] is True


class TestCheckConfig:
    def test_valid(self, config_file: Path):
        result = check_config(config_file)
        assert result.valid
        assert result.errors == []
        assert result.destination == config_file.parent.resolve() / DEST

    def test_missing_pom_invalid(self, project_dir: Path, config_file: Path):
        (project_dir / "pom.xml").unlink()
        result = check_config(config_file)
        assert not result.valid
        assert any("descriptor not found" in e for e in result.errors)

    def test_path_separator_warning(self, project_dir: Path):
        config = project_dir / "pomprops.yml"
        config.write_text(
            'coordinates: {groupId: "com/example", artifactId: "..", version: "1"}\n'
            "output_root: /abs/out\n"
        )
        result = check_config(config)
        assert result.valid
        assert any("path separator" in w for w in result.warnings)
        assert any("relative path segment" in w for w in result.warnings)
        assert any("absolute" in w for w in result.warnings)

    def test_no_config(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = check_config(None)
        assert not result.valid
        assert "No pomprops.yml found." in result.errors


class TestShowOutput:
    def test_before_write(self, config_file: Path):
        result = show_output(config_file)
        assert result.error is None
        assert not result.has_properties
        assert result.pom_size is None

    def test_after_write(self, config_file: Path):
        run_materialize(config_path=config_file, audit=False)
        result = show_output(config_file)
        assert result.has_properties
        assert list(result.properties)[:3] == ["groupId", "artifactId", "version"]
        assert result.pom_size == len(b"<project/>")

    def test_error(self, tmp_path: Path):
        result = show_output(tmp_path / "missing.yml")
        assert result.error
        assert result.to_dict() == {"error": result.error}

    def test_reads_through_registry(self, config_file: Path):
        fs = MemoryFilesystem()
        registry = AdapterRegistry()
        registry.set_mock_mode(True, mock_adapter=fs)
        run_materialize(config_path=config_file, registry=registry, audit=False)

        result = show_output(config_file, registry=registry)
        assert result.properties["artifactId"] == "widget"
        assert result.pom_size == len(b"<project/>")
        assert ("read", str(result.destination / "pom.properties")) in fs.call_log

    def test_corrupt_properties(self, config_file: Path):
        dest = config_file.parent.resolve() / DEST
        dest.mkdir(parents=True)
        (dest / "pom.properties").write_bytes(b"k=\\uZZZZ\n")
        result = show_output(config_file)
        assert result.error.startswith("Cannot read")
