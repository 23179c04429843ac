import logging
import httpx
from fastapi import APIRouter, Request
from pydantic import ValidationError

from urdu_summarizer.config import get_settings
from urdu_summarizer.errors import ErrorKind, SummarizerError
from urdu_summarizer.schemas import ErrorResponse, SummarizeRequest, SummarizeResponse
from urdu_summarizer.scraper import fetch_page_text
from urdu_summarizer.summary_client import request_summary
from urdu_summarizer.translator import translate

logging.basicConfig(level=logging.INFO, format='%(asctime)s [%(levelname)s] %(name)s - %(message)s')
logger = logging.getLogger("UrduSummarizer.Router")

router = APIRouter()

INVALID_URL_MESSAGE = "Please provide a valid URL"
ERROR_RESPONSES = {code: {"model": ErrorResponse} for code in (400, "4XX", "5XX")}


async def _parse_request(request: Request) -> SummarizeRequest:
    try:
        payload = await request.json()
    except ValueError:
        raise SummarizerError(ErrorKind.INVALID_INPUT, INVALID_URL_MESSAGE)

    if not isinstance(payload, dict):
        raise SummarizerError(ErrorKind.INVALID_INPUT, INVALID_URL_MESSAGE)

    try:
        return SummarizeRequest.model_validate(payload)
    except ValidationError:
        raise SummarizerError(ErrorKind.INVALID_INPUT, INVALID_URL_MESSAGE)


async def summarize_article(req: SummarizeRequest) -> SummarizeResponse:
    settings = get_settings()

    if not settings.rapidapi_key:
        logger.error("RAPIDAPI_KEY is not set in environment variables.")
        raise SummarizerError(ErrorKind.INTERNAL_FAILURE, "Server configuration error: RapidAPI key is missing.")

    scrape = settings.scrape_page if req.scrape is None else req.scrape
    local_mode = settings.translation_mode == "local"

    title = None
    content = None
    async with httpx.AsyncClient(timeout=settings.request_timeout) as client:
        # 1. (선택) 페이지 본문 스크래핑
        if scrape:
            page = await fetch_page_text(req.url, client)
            title, content = page.title, page.content

        # 2. 요약 요청 (local 모드에서는 영어 요약을 받아 직접 번역)
        lang = "en" if local_mode else settings.summary_lang
        summary = await request_summary(req.url, settings, client, lang=lang)

    # 3. 번역
    if local_mode:
        translated = translate(summary)
        logger.info(f"[*] Applied local dictionary translation ({len(summary)} chars)")
    else:
        # API handles Urdu, so no additional translation needed
        translated = summary

    return SummarizeResponse(
        summary=summary,
        translatedSummary=translated,
        translation=settings.translation_mode,
        title=title,
        content=content,
    )


@router.post(
    "/api/scrape",
    response_model=SummarizeResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
async def scrape_endpoint(request: Request):
    req = await _parse_request(request)
    logger.info(f"[*] Received URL for summarization: {req.url}")

    try:
        return await summarize_article(req)
    except SummarizerError:
        raise
    except Exception as e:
        logger.error(f"[*] General Error during summarization request: {e}")
        raise SummarizerError(ErrorKind.INTERNAL_FAILURE, f"An unexpected error occurred: {e}")
