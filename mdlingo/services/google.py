import urllib.parse
from typing import Optional

import httpx

from mdlingo.core.config import settings
from mdlingo.errors import ProviderError, RateLimitError

from .provider import Provider


class GoogleTranslator(Provider):
    """
    Google Translate using httpx async
    """

    name = "google"

    def __init__(self, client: Optional[httpx.AsyncClient] = None) -> None:
        self.api_url = settings.GOOGLE_TRANSLATE_URL
        self.headers = {
            "Content-Type": "application/x-www-form-urlencoded",
            "User-Agent": "GoogleTranslate/6.29.59279 (iPhone; iOS 15.4; en; iPhone14,2)",
        }
        self.client = client or httpx.AsyncClient(timeout=settings.REQUEST_TIMEOUT)

    async def translate(self, text: str, language: str) -> str:
        try:
            r = await self.client.post(
                self.api_url,
                params={"tl": language},
                headers=self.headers,
                data={"q": urllib.parse.quote(text)},
            )
        except httpx.HTTPError as e:
            raise ProviderError(f"Request to Google Translate failed: {e}") from e

        if r.status_code == 429:
            raise RateLimitError("Too Many Requests", status_code=r.status_code)
        if not r.is_success:
            raise ProviderError(f"Google Translate returned HTTP {r.status_code}", status_code=r.status_code)

        try:
            sentences = r.json()["sentences"]
        except (ValueError, KeyError) as e:
            raise ProviderError(f"Unexpected Google Translate response: {e}") from e

        return "".join([sentence.get("trans", "") for sentence in sentences])

    async def aclose(self) -> None:
        await self.client.aclose()
