from typing import Literal, Optional
from pydantic import BaseModel, Field, StrictStr, field_validator

# -------------------------------------------------------------------------
# [Configuration Schema]
# -------------------------------------------------------------------------

class Settings(BaseModel):
    """RapidAPI 요약 호출 및 번역 경로 설정"""
    rapidapi_key: str = ""
    rapidapi_host: str = "article-extractor-and-summarizer.p.rapidapi.com"
    summary_lang: str = "ur"
    summary_engine: str = "2"
    include_html: bool = True
    translation_mode: Literal["upstream", "local"] = "upstream"
    scrape_page: bool = False
    request_timeout: float = Field(default=30.0, gt=0)

    @field_validator("summary_engine", mode="before")
    @classmethod
    def engine_as_string(cls, value):
        # config.json 에서는 숫자로 적는 경우가 많음 (예: "summary_engine": 2)
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    def summarize_url(self) -> str:
        return f"https://{self.rapidapi_host}/summarize"

# -------------------------------------------------------------------------
# [Request / Response Schemas]
# -------------------------------------------------------------------------

class SummarizeRequest(BaseModel):
    """Browser -> Server: 요약할 기사 URL"""
    url: StrictStr
    scrape: Optional[bool] = None

    @field_validator("url")
    @classmethod
    def url_must_be_http(cls, value: str) -> str:
        value = value.strip()
        if not value.startswith("http"):
            raise ValueError("URL must start with http")
        return value

class SummarizeResponse(BaseModel):
    """Server -> Browser: 원문 요약과 우르두어 요약"""
    summary: str
    translatedSummary: str
    translation: Literal["upstream", "local"]
    title: Optional[str] = None
    content: Optional[str] = None

class ErrorResponse(BaseModel):
    error: str
    kind: str
