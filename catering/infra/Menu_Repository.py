"""Menu repository: discovers weekly menu PDFs on the catering page and downloads their text."""
import asyncio
import logging
from typing import List, Optional
from urllib.parse import urljoin

import httpx
from bs4 import BeautifulSoup

from catering.domain.MenuDocument import MenuLink
from catering.domain.errors import MenuSourceError
from catering.infra.pdf_utils import extract_text
from catering.logic.weeks.dates import parse_week_commencing
from catering.utilities.config import (
    CATERING_BASE_URL,
    CATERING_PAGE_URL,
    CATERING_USER_AGENT,
    HTTP_TIMEOUT_SECONDS,
    PDF_LAYOUT_TEXT,
)

logger = logging.getLogger(__name__)


def find_menu_links(html: str, base_url: str = CATERING_BASE_URL) -> List[MenuLink]:
    """Return every anchor pointing at a menu PDF, with the week named in its text."""
    soup = BeautifulSoup(html, "html.parser")
    links = []
    for anchor in soup.find_all("a", href=True):
        href = anchor["href"]
        href_lower = href.lower()
        if ".pdf" not in href_lower or "menu" not in href_lower:
            continue
        label = anchor.get_text()
        links.append(MenuLink(url=urljoin(base_url, href), week_start=parse_week_commencing(label), label=label.strip()))
    return links


class MenuRepository:
    def __init__(self, client: Optional[httpx.AsyncClient] = None, page_url: str = CATERING_PAGE_URL,
                 base_url: str = CATERING_BASE_URL, layout_text: bool = PDF_LAYOUT_TEXT):
        # trust_env=False: no system proxy lookup
        self.client = client or httpx.AsyncClient(
            headers={"User-Agent": CATERING_USER_AGENT},
            timeout=HTTP_TIMEOUT_SECONDS,
            follow_redirects=True,
            trust_env=False,
        )
        self.page_url = page_url
        self.base_url = base_url
        self.layout_text = layout_text

    async def _get(self, url: str) -> httpx.Response:
        try:
            response = await self.client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error("Request to %s failed: %s", url, e)
            raise MenuSourceError(f"{url}: {e}") from e
        return response

    async def fetch_menu_links(self) -> List[MenuLink]:
        response = await self._get(self.page_url)
        links = find_menu_links(response.text, self.base_url)
        logger.info("Found %d menu links on %s", len(links), self.page_url)
        return links

    async def download_text(self, url: str) -> str:
        response = await self._get(url)
        # pdfplumber is synchronous and CPU bound
        return await asyncio.to_thread(extract_text, response.content, self.layout_text)

    async def aclose(self) -> None:
        await self.client.aclose()
