"""Tests for settings loading."""

import json
from pathlib import Path

import pytest

from npm_directory_context.config import CONFIG_PATH_ENV_VAR, Settings, load_settings
from npm_directory_context.errors import ConfigError


class TestLoadSettings:
    def test_defaults_without_file(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(CONFIG_PATH_ENV_VAR, raising=False)
        assert load_settings() == Settings()

    def test_loads_from_file(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.json"
        path.write_text(
            json.dumps({"linkDirectory": "linked", "ignoredDirectories": ["dist"]}),
            encoding="utf-8",
        )

        settings = load_settings(path)

        assert settings.link_directory == "linked"
        assert settings.ignored_directories == ("dist",)
        assert settings.manifest_name == "package.json"  # default

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = tmp_path / "custom.json"
        path.write_text('{"legacyConfigName": "multi.json"}', encoding="utf-8")
        monkeypatch.setenv(CONFIG_PATH_ENV_VAR, str(path))

        assert load_settings().legacy_config_name == "multi.json"

    def test_explicit_path_beats_env_var(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv(CONFIG_PATH_ENV_VAR, str(tmp_path / "missing.json"))
        path = tmp_path / "settings.json"
        path.write_text("{}", encoding="utf-8")

        assert load_settings(path) == Settings()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="does not exist"):
            load_settings(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(ConfigError, match="not valid JSON"):
            load_settings(path)

    @pytest.mark.parametrize(
        "payload",
        [
            [],
            {"unknownKey": True},
            {"manifestName": ""},
            {"ignoredDirectories": "node_modules"},
            {"ignoredDirectories": ["dist", "dist"]},
        ],
    )
    def test_schema_violations(self, tmp_path: Path, payload: object) -> None:
        path = tmp_path / "settings.json"
        path.write_text(json.dumps(payload), encoding="utf-8")
        with pytest.raises(ConfigError, match="settings rejected"):
            load_settings(path)
