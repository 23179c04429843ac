"""
Tests for urdu_summarizer/config.py - config.json + environment settings.
"""
import pytest


class TestGetSettings:
    """Tests for get_settings function."""

    def test_defaults_without_config(self, tmp_path):
        from urdu_summarizer.config import get_settings

        settings = get_settings(str(tmp_path / "missing.json"))

        assert settings.rapidapi_key == ""
        assert settings.summary_lang == "ur"
        assert settings.translation_mode == "upstream"

    def test_reads_config_file(self, temp_config_file):
        from urdu_summarizer.config import get_settings

        settings = get_settings(str(temp_config_file))

        assert settings.rapidapi_host == "summarizer.example.com"
        assert settings.summary_engine == "3"
        assert settings.translation_mode == "local"
        assert settings.request_timeout == 12.5

    def test_env_overrides_config_file(self, temp_config_file, monkeypatch):
        from urdu_summarizer.config import get_settings

        monkeypatch.setenv("RAPIDAPI_KEY", "env-key")
        monkeypatch.setenv("TRANSLATION_MODE", "upstream")
        monkeypatch.setenv("SCRAPE_PAGE", "true")
        monkeypatch.setenv("REQUEST_TIMEOUT", "3")

        settings = get_settings(str(temp_config_file))

        assert settings.rapidapi_key == "env-key"
        assert settings.translation_mode == "upstream"
        assert settings.scrape_page is True
        assert settings.request_timeout == 3.0
        # untouched by env
        assert settings.rapidapi_host == "summarizer.example.com"

    def test_numeric_engine_in_config_file(self, tmp_path):
        from urdu_summarizer.config import get_settings

        path = tmp_path / "config.json"
        path.write_text('{"summarizer": {"summary_engine": 2}}', encoding="utf-8")

        settings = get_settings(str(path))
        assert settings.summary_engine == "2"

    def test_malformed_json_is_ignored(self, tmp_path):
        from urdu_summarizer.config import get_settings

        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")

        settings = get_settings(str(path))
        assert settings.summary_lang == "ur"

    def test_non_dict_section_is_ignored(self, tmp_path):
        from urdu_summarizer.config import get_settings

        path = tmp_path / "config.json"
        path.write_text('{"summarizer": ["bad"]}', encoding="utf-8")

        settings = get_settings(str(path))
        assert settings.summary_engine == "2"

    def test_invalid_value_raises_internal_failure(self, tmp_path, monkeypatch):
        from urdu_summarizer.config import get_settings
        from urdu_summarizer.errors import ErrorKind, SummarizerError

        monkeypatch.setenv("TRANSLATION_MODE", "babelfish")

        with pytest.raises(SummarizerError) as exc_info:
            get_settings(str(tmp_path / "missing.json"))

        assert exc_info.value.kind == ErrorKind.INTERNAL_FAILURE
        assert exc_info.value.status_code == 500
