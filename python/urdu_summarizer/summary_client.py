import logging
import httpx

from urdu_summarizer.errors import ErrorKind, SummarizerError
from urdu_summarizer.schemas import Settings

logger = logging.getLogger("UrduSummarizer.Client")

SUMMARY_NOT_AVAILABLE = "Summary not available."


def build_summary_params(url: str, settings: Settings, lang: str) -> dict:
    return {
        "url": url,
        "html": "true" if settings.include_html else "false",
        "lang": lang,
        "engine": settings.summary_engine,
    }


def build_summary_headers(settings: Settings) -> dict:
    return {
        "X-RapidAPI-Key": settings.rapidapi_key,
        "X-RapidAPI-Host": settings.rapidapi_host,
    }


def _upstream_message(resp: httpx.Response) -> str:
    """응답 본문의 message 필드를 우선 사용하고, 없으면 상태 문구로 대체"""
    try:
        data = resp.json()
    except ValueError:
        data = None
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return resp.reason_phrase or f"HTTP {resp.status_code}"


async def request_summary(url: str, settings: Settings, client: httpx.AsyncClient, lang: str = None) -> str:
    """
    RapidAPI Article Extractor & Summarizer 호출.
    재시도 없이 한 번만 호출하며, 실패는 즉시 SummarizerError 로 변환됩니다.
    """
    lang = lang or settings.summary_lang
    params = build_summary_params(url, settings, lang)
    headers = build_summary_headers(settings)

    logger.info(f"[*] RapidAPI Key (first few chars): {settings.rapidapi_key[:5]}...")
    logger.info(f"[*] Requesting summary ({lang}) for: {url}")

    try:
        resp = await client.get(settings.summarize_url, params=params, headers=headers, timeout=settings.request_timeout)
    except httpx.TimeoutException as e:
        logger.error(f"[*] RapidAPI Timeout: {e}")
        raise SummarizerError(ErrorKind.UPSTREAM_UNAVAILABLE, "Failed to summarize from RapidAPI: request timed out.")
    except httpx.RequestError as e:
        logger.error(f"[*] RapidAPI Connection Error: {e}")
        raise SummarizerError(ErrorKind.UPSTREAM_UNAVAILABLE, f"Failed to summarize from RapidAPI: {e}")

    if not resp.is_success:
        message = _upstream_message(resp)
        logger.error(f"[*] RapidAPI Summary Error: Status {resp.status_code}, Message: {message}")
        status = resp.status_code if resp.status_code >= 400 else None
        raise SummarizerError(ErrorKind.UPSTREAM_ERROR, f"Failed to summarize from RapidAPI: {message}", status_code=status)

    try:
        data = resp.json()
    except ValueError:
        logger.error(f"[*] RapidAPI returned non-JSON body: {resp.text[:100]}")
        raise SummarizerError(ErrorKind.UPSTREAM_ERROR, "Failed to summarize from RapidAPI: malformed response.")

    logger.info(f"[*] API Response: {str(data)[:100]}...")
    summary = data.get("summary") if isinstance(data, dict) else None
    if not summary or not isinstance(summary, str):
        return SUMMARY_NOT_AVAILABLE
    return summary
