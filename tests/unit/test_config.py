"""Unit tests for settings loading."""

import logging

from structview.config import FETCH_TIMEOUT_SECONDS, ViewerSettings, load_settings


class TestLoadSettings:
    def test_missing_file_gives_defaults(self, tmp_path):
        settings = load_settings(tmp_path / "absent.yaml")
        assert settings == ViewerSettings()
        assert settings.fetch_timeout == FETCH_TIMEOUT_SECONDS

    def test_reads_yaml(self, tmp_path):
        config = tmp_path / "config.yaml"
        config.write_text("default_source: page.json\nfetch_timeout: 5\n")
        settings = load_settings(config)
        assert settings.default_source == "page.json"
        assert settings.fetch_timeout == 5.0

    def test_empty_file(self, tmp_path):
        config = tmp_path / "config.yaml"
        config.write_text("")
        assert load_settings(config) == ViewerSettings()

    def test_invalid_values_fall_back(self, tmp_path, caplog):
        config = tmp_path / "config.yaml"
        config.write_text("fetch_timeout: -1\n")
        with caplog.at_level(logging.WARNING, logger="structview.config"):
            settings = load_settings(config)
        assert settings.fetch_timeout == FETCH_TIMEOUT_SECONDS
        assert "Ignoring unreadable config" in caplog.text

    def test_broken_yaml_falls_back(self, tmp_path):
        config = tmp_path / "config.yaml"
        config.write_text("default_source: [unclosed\n")
        assert load_settings(config) == ViewerSettings()
