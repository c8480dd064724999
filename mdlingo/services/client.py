import asyncio
from typing import Awaitable, Callable, Optional

from mdlingo.core.config import settings
from mdlingo.core.context import RunContext
from mdlingo.core.logger import mdlingo_logger as logger
from mdlingo.errors import is_rate_limited

from .provider import Provider

Sleep = Callable[[float], Awaitable[None]]


class TranslationClient:
    """
    Best-effort wrapper around a provider: caches successful results in the
    run context and retries failures. When retries run out the source text is
    returned unchanged, so one bad unit never fails a whole file.
    """

    def __init__(
        self,
        provider: Provider,
        context: Optional[RunContext] = None,
        max_retries: Optional[int] = None,
        retry_delay: Optional[float] = None,
        rate_limit_max_retries: Optional[int] = None,
        rate_limit_delay: Optional[float] = None,
        sleep: Sleep = asyncio.sleep,
    ):
        self.provider = provider
        self.context = context or RunContext()
        self.max_retries = settings.MAX_RETRIES if max_retries is None else max_retries
        self.retry_delay = settings.RETRY_DELAY_SECONDS if retry_delay is None else retry_delay
        self.rate_limit_max_retries = (
            settings.RATE_LIMIT_MAX_RETRIES if rate_limit_max_retries is None else rate_limit_max_retries
        )
        self.rate_limit_delay = settings.RATE_LIMIT_DELAY_SECONDS if rate_limit_delay is None else rate_limit_delay
        self.sleep = sleep

    async def translate_unit(self, text: str, language: str) -> str:
        if not text.strip():
            return text

        key = self.context.cache_key(text, language)
        cached = self.context.cache.get(key)
        if cached is not None:
            self.context.cache_hits += 1
            return cached

        retries = 0
        rate_limit_retries = 0
        while True:
            try:
                translated = await self.provider.translate(text, language)
            except Exception as e:
                if is_rate_limited(e):
                    if rate_limit_retries >= self.rate_limit_max_retries:
                        logger.error(f"Rate limit exceeded after {self.rate_limit_max_retries} retries")
                        self.context.exhausted += 1
                        return text
                    rate_limit_retries += 1
                    self.context.retries += 1
                    logger.warning(
                        f"Rate limited. Waiting {self.rate_limit_delay}s before retry "
                        f"({self.rate_limit_max_retries - rate_limit_retries + 1} attempts left)"
                    )
                    await self.sleep(self.rate_limit_delay)
                    continue

                if retries >= self.max_retries:
                    logger.error(f"Translation error after {self.max_retries} retries: {e}")
                    self.context.exhausted += 1
                    return text
                retries += 1
                self.context.retries += 1
                logger.warning(f"Translation failed (attempt {retries}/{self.max_retries}): {e}. Retrying...")
                await self.sleep(self.retry_delay)
                continue

            self.context.cache[key] = translated
            self.context.translations += 1
            return translated
