"""Tests for the manifest project name resolver"""

import json

from kudoly_mcp.services.project_name import get_project_name_from_manifest


class TestGetProjectNameFromManifest:
    def test_no_manifest(self, tmp_path):
        assert get_project_name_from_manifest(tmp_path) is None

    def test_package_json_name(self, tmp_path):
        (tmp_path / "package.json").write_text(json.dumps({"name": "web-app"}))
        assert get_project_name_from_manifest(tmp_path) == "web-app"

    def test_package_json_without_name(self, tmp_path):
        (tmp_path / "package.json").write_text(json.dumps({"version": "1.0.0"}))
        assert get_project_name_from_manifest(tmp_path) is None

    def test_invalid_package_json(self, tmp_path):
        (tmp_path / "package.json").write_text("{not json")
        assert get_project_name_from_manifest(tmp_path) is None

    def test_package_json_not_an_object(self, tmp_path):
        (tmp_path / "package.json").write_text('["web-app"]')
        assert get_project_name_from_manifest(tmp_path) is None

    def test_pyproject_name(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "py-service"\n')
        assert get_project_name_from_manifest(tmp_path) == "py-service"

    def test_poetry_name(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text(
            '[tool.poetry]\nname = "poetry-service"\n'
        )
        assert get_project_name_from_manifest(tmp_path) == "poetry-service"

    def test_package_json_wins(self, tmp_path):
        (tmp_path / "package.json").write_text(json.dumps({"name": "web-app"}))
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "py-service"\n')
        assert get_project_name_from_manifest(tmp_path) == "web-app"

    def test_falls_through_broken_package_json(self, tmp_path):
        (tmp_path / "package.json").write_text("")
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "py-service"\n')
        assert get_project_name_from_manifest(tmp_path) == "py-service"

    def test_invalid_pyproject(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text("[project\nname=")
        assert get_project_name_from_manifest(tmp_path) is None

    def test_blank_name(self, tmp_path):
        (tmp_path / "package.json").write_text(json.dumps({"name": "  "}))
        assert get_project_name_from_manifest(tmp_path) is None

    def test_defaults_to_working_directory(self, tmp_path, monkeypatch):
        (tmp_path / "package.json").write_text(json.dumps({"name": "cwd-app"}))
        monkeypatch.chdir(tmp_path)
        assert get_project_name_from_manifest() == "cwd-app"
