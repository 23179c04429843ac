import logging
import httpx
from bs4 import BeautifulSoup
from pydantic import BaseModel

from urdu_summarizer.errors import ErrorKind, SummarizerError

logger = logging.getLogger("UrduSummarizer.Scraper")

BROWSER_HEADERS = {
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
}
MAX_CONTENT_CHARS = 3000
INVISIBLE_TAGS = ["script", "style", "noscript", "template"]


class ScrapedPage(BaseModel):
    title: str
    content: str


def _extract_title(soup: BeautifulSoup) -> str:
    meta_og = soup.find('meta', property='og:title')
    if meta_og and meta_og.get('content'):
        return meta_og.get('content').strip()

    for tag_name in ('h1', 'title'):
        tag = soup.find(tag_name)
        if tag and tag.get_text(strip=True):
            return tag.get_text(strip=True)
    return "No title found"


def _extract_content(soup: BeautifulSoup) -> str:
    container = soup.find('article') or soup.find('main') or soup

    paras = [p.get_text(" ", strip=True) for p in container.find_all('p')]
    paras = [text for text in paras if text]
    if paras:
        content = "\n\n".join(paras)
    else:
        body = soup.body or soup
        content = body.get_text("\n", strip=True)

    return content[:MAX_CONTENT_CHARS]


def extract_visible_text(html: str) -> ScrapedPage:
    """HTML 에서 제목과 화면에 보이는 본문 텍스트를 추출합니다."""
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(INVISIBLE_TAGS):
        tag.decompose()
    return ScrapedPage(title=_extract_title(soup), content=_extract_content(soup))


async def fetch_page_text(url: str, client: httpx.AsyncClient) -> ScrapedPage:
    logger.info(f"[*] Fetching article page: {url}")
    try:
        resp = await client.get(url, headers=BROWSER_HEADERS, follow_redirects=True)
    except httpx.TimeoutException as e:
        logger.error(f"[*] Page fetch timed out: {e}")
        raise SummarizerError(ErrorKind.UPSTREAM_UNAVAILABLE, f"Timed out fetching article page: {url}")
    except httpx.RequestError as e:
        logger.error(f"[*] Page fetch failed: {e}")
        raise SummarizerError(ErrorKind.UPSTREAM_UNAVAILABLE, f"Could not reach article page: {e}")

    if not resp.is_success:
        logger.error(f"[*] Page fetch returned status {resp.status_code}")
        raise SummarizerError(ErrorKind.UPSTREAM_ERROR, f"Error fetching page: status {resp.status_code}")

    return extract_visible_text(resp.text)
