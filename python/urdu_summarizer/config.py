import os
import json
import logging
from pydantic import ValidationError
from dotenv import load_dotenv

from urdu_summarizer.errors import ErrorKind, SummarizerError
from urdu_summarizer.schemas import Settings

logger = logging.getLogger("UrduSummarizer.Config")

load_dotenv()

CONFIG_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), '../../config/config.json'))

# 환경변수 이름 -> Settings 필드
ENV_OVERRIDES = {
    "RAPIDAPI_KEY": "rapidapi_key",
    "RAPIDAPI_HOST": "rapidapi_host",
    "SUMMARY_LANG": "summary_lang",
    "SUMMARY_ENGINE": "summary_engine",
    "SUMMARY_HTML": "include_html",
    "TRANSLATION_MODE": "translation_mode",
    "SCRAPE_PAGE": "scrape_page",
    "REQUEST_TIMEOUT": "request_timeout",
}


def _read_config_file(path: str) -> dict:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Ignoring unreadable config file {path}: {e}")
        return {}

    section = data.get('summarizer', {}) if isinstance(data, dict) else {}
    if not isinstance(section, dict):
        logger.warning(f"Ignoring malformed 'summarizer' section in {path}")
        return {}
    return section


def get_settings(config_path: str = CONFIG_PATH) -> Settings:
    """
    config.json 의 'summarizer' 섹션을 읽고, 환경변수로 덮어씁니다.
    (환경변수 > config.json > 기본값)
    """
    config_data = _read_config_file(config_path)

    for env_name, field in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            config_data[field] = value

    try:
        return Settings(**config_data)
    except ValidationError as e:
        logger.error(f"Invalid summarizer configuration: {e}")
        raise SummarizerError(ErrorKind.INTERNAL_FAILURE, "Server configuration error: invalid settings.")
