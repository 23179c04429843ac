"""
Pytest configuration and shared fixtures for summarizer tests.
"""
import os
import sys
import pytest

# Add python directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

SUMMARIZER_ENV_VARS = [
    "RAPIDAPI_KEY",
    "RAPIDAPI_HOST",
    "SUMMARY_LANG",
    "SUMMARY_ENGINE",
    "SUMMARY_HTML",
    "TRANSLATION_MODE",
    "SCRAPE_PAGE",
    "REQUEST_TIMEOUT",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep a developer's local .env from leaking into tests."""
    for name in SUMMARIZER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_settings():
    """Return settings with a dummy RapidAPI key."""
    from urdu_summarizer.schemas import Settings

    return Settings(rapidapi_key="test-key-12345", request_timeout=5.0)


@pytest.fixture
def local_settings(sample_settings):
    """Settings using the local dictionary translation path."""
    return sample_settings.model_copy(update={"translation_mode": "local"})


@pytest.fixture
def sample_config():
    """Return sample config dictionary."""
    return {
        "summarizer": {
            "rapidapi_host": "summarizer.example.com",
            "summary_lang": "ur",
            "summary_engine": "3",
            "translation_mode": "local",
            "request_timeout": 12.5
        }
    }


@pytest.fixture
def temp_config_file(tmp_path, sample_config):
    """Write the sample config to a temporary config.json."""
    import json

    config_dir = tmp_path / "config"
    config_dir.mkdir()
    path = config_dir / "config.json"
    path.write_text(json.dumps(sample_config), encoding="utf-8")
    return path


@pytest.fixture
def sample_article_html():
    """A small article page with boilerplate around the body."""
    return """
    <html>
      <head>
        <title>Fallback Title</title>
        <meta property="og:title" content="Rivers of the North">
        <style>body { color: red; }</style>
        <script>console.log("tracking");</script>
      </head>
      <body>
        <nav><p>Home | About</p></nav>
        <article>
          <h1>Rivers of the North</h1>
          <p>The river is important for the city.</p>
          <p>People work on the water every day.</p>
          <script>var ads = true;</script>
        </article>
      </body>
    </html>
    """
