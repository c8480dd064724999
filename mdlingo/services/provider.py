"""Translation provider abstractions."""

from abc import ABC, abstractmethod


class Provider(ABC):
    """Abstract adapter for translation providers."""

    name = "provider"

    @abstractmethod
    async def translate(self, text: str, language: str) -> str:
        """Translate ``text`` into ``language`` (a provider language code)."""

    async def aclose(self) -> None:
        return None

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


class EchoTranslator(Provider):
    """A provider that returns the original text (dry runs and testing)."""

    name = "echo"

    async def translate(self, text: str, language: str) -> str:
        return text
