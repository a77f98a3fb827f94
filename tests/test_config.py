"""
Tests for settings loading and its fallbacks.
"""
import json

import pytest
from pydantic import ValidationError

from fwew_api.config import Settings, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("FWEW_PORT", "FWEW_WEB_ROOT", "FWEW_ENGINE_URL", "FWEW_ENGINE_TIMEOUT", "FWEW_API_GENERATION"):
        monkeypatch.delenv(name, raising=False)


class TestLoadSettings:
    """config.json overrides the defaults; broken files never fail startup."""

    def test_reads_config_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"Port": "9090", "WebRoot": "https://tirea.example/api"}))
        settings = load_settings(path)
        assert settings.port == 9090
        assert settings.web_root == "https://tirea.example/api"

    def test_missing_file_uses_defaults(self, tmp_path):
        settings = load_settings(tmp_path / "absent.json")
        assert settings.port == 8080
        assert settings.web_root == "https://localhost"

    @pytest.mark.parametrize("content", ["{not json", "[1, 2]", "42", json.dumps({"Port": "eighty"})])
    def test_malformed_file_uses_defaults(self, tmp_path, content):
        path = tmp_path / "config.json"
        path.write_text(content)
        settings = load_settings(path)
        assert settings.port == 8080
        assert settings.web_root == "https://localhost"

    def test_environment_applies_without_file(self, tmp_path, monkeypatch):
        monkeypatch.setenv("FWEW_WEB_ROOT", "https://env.example/api")
        assert load_settings(tmp_path / "absent.json").web_root == "https://env.example/api"

    def test_settings_are_immutable(self):
        settings = Settings()
        with pytest.raises(ValidationError):
            settings.port = 1

    def test_generation_is_bounded(self):
        with pytest.raises(ValidationError):
            Settings(api_generation=99)
