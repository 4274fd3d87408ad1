"""Unit tests for config_manager module."""

import json
from pathlib import Path

import pytest

from modern_frontend_cli.config_manager import ConfigManager
from modern_frontend_cli.exceptions import FileSystemError, LocalizedError
from modern_frontend_cli.settings import CliSettings


def _marker(directory, content=""):
    directory.mkdir(parents=True, exist_ok=True)
    marker = directory / "modern-frontend.json"
    marker.write_text(content)
    return marker


@pytest.fixture
def project(tmp_path):
    """Project tree with module and theme roots."""
    (tmp_path / "app" / "code").mkdir(parents=True)
    (tmp_path / "app" / "design" / "frontend").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def manager(project):
    return ConfigManager.from_settings(CliSettings(project_root=str(project)))


class TestConfigManagerGenerate:
    """Tests for configuration generation."""

    def test_has_config_false_before_generate(self, manager):
        assert manager.has_config() is False

    def test_generate_empty_project(self, manager):
        manager.generate()

        assert manager.has_config() is True
        assert manager.get() == {"modules": {}, "themes": {}}

    def test_generate_discovers_modules_and_themes(self, project, manager):
        _marker(project / "app" / "code" / "Acme" / "Checkout")
        _marker(
            project / "app" / "design" / "frontend" / "Acme" / "luma",
            json.dumps({"name": "Acme/luma", "src": "web/dist"}),
        )

        manager.generate()
        config = manager.get()

        checkout_dir = project.resolve() / "app" / "code" / "Acme" / "Checkout"
        luma_dir = project.resolve() / "app" / "design" / "frontend" / "Acme" / "luma"
        assert config["modules"] == {"Acme_Checkout": {"src": str(checkout_dir / "web")}}
        assert config["themes"] == {"Acme/luma": {"src": str(luma_dir / "web" / "dist")}}

    def test_missing_roots_are_skipped(self, project, manager):
        # "vendor" root does not exist in the project fixture
        _marker(project / "app" / "code" / "Acme" / "Cart")
        manager.generate()
        assert list(manager.get()["modules"]) == ["Acme_Cart"]

    def test_generated_files(self, manager):
        manager.generate()

        paths = manager.get_config_file_path()
        assert paths == [str(manager.json_path), str(manager.module_path)]
        assert manager.module_path.read_text().startswith("export default {")
        for path in paths:
            assert not Path(path + ".tmp").exists()

    def test_regenerate_overwrites(self, project, manager):
        manager.generate()
        _marker(project / "app" / "code" / "Acme" / "Search")
        manager.generate()
        assert "Acme_Search" in manager.get()["modules"]

    def test_duplicate_name_rejected(self, project, manager):
        _marker(project / "app" / "code" / "Acme" / "One", json.dumps({"name": "Same"}))
        _marker(project / "app" / "code" / "Acme" / "Two", json.dumps({"name": "Same"}))

        with pytest.raises(LocalizedError, match="Duplicate module name 'Same'"):
            manager.generate()
        assert manager.has_config() is False

    def test_same_name_allowed_across_sections(self, project, manager):
        _marker(project / "app" / "code" / "Acme" / "Base", json.dumps({"name": "Base"}))
        _marker(project / "app" / "design" / "frontend" / "Base", json.dumps({"name": "Base"}))

        manager.generate()
        config = manager.get()
        assert "Base" in config["modules"]
        assert "Base" in config["themes"]

    def test_malformed_marker(self, project, manager):
        _marker(project / "app" / "code" / "Acme" / "Broken", "{not json")
        with pytest.raises(LocalizedError, match="Invalid marker file"):
            manager.generate()

    def test_marker_must_be_object(self, project, manager):
        _marker(project / "app" / "code" / "Acme" / "List", "[]")
        with pytest.raises(LocalizedError, match="expected a JSON object"):
            manager.generate()

    def test_marker_not_utf8(self, project, manager):
        marker = _marker(project / "app" / "code" / "Acme" / "Latin1")
        marker.write_bytes(b'{"name": "Acme_\xff"}')

        with pytest.raises(LocalizedError, match="not valid UTF-8"):
            manager.generate()

    def test_unwritable_output(self, project):
        blocker = project / "blocker"
        blocker.write_text("")
        manager = ConfigManager([project / "app" / "code"], [], blocker / "out")

        with pytest.raises(FileSystemError, match="Failed to write configuration files"):
            manager.generate()


class TestConfigManagerGet:
    """Tests for loading the configuration document."""

    def test_get_missing_file(self, manager):
        with pytest.raises(FileSystemError, match="Cannot read configuration file"):
            manager.get()

    def test_get_invalid_json(self, manager):
        manager.output_dir.mkdir(parents=True)
        manager.json_path.write_text("{")
        with pytest.raises(LocalizedError, match="not valid JSON"):
            manager.get()

    def test_get_not_utf8(self, manager):
        manager.output_dir.mkdir(parents=True)
        manager.json_path.write_bytes(b"\xff\xfe{}")
        with pytest.raises(LocalizedError, match="not valid UTF-8"):
            manager.get()

    def test_get_entry_without_src(self, manager):
        manager.output_dir.mkdir(parents=True)
        manager.json_path.write_text(json.dumps({"modules": {"Acme_X": {}}}))
        with pytest.raises(LocalizedError, match="Entry 'Acme_X' in 'modules'"):
            manager.get()

    def test_get_section_not_object(self, manager):
        manager.output_dir.mkdir(parents=True)
        manager.json_path.write_text(json.dumps({"themes": []}))
        with pytest.raises(LocalizedError, match="Section 'themes'"):
            manager.get()

    def test_get_preserves_entry_order(self, manager):
        manager.output_dir.mkdir(parents=True)
        document = {"modules": {"Z_Last": {"src": "z"}, "A_First": {"src": "a"}}}
        manager.json_path.write_text(json.dumps(document))

        assert list(manager.get()["modules"]) == ["Z_Last", "A_First"]
