import re
from typing import Dict, Optional, Tuple

from mdlingo.constant import PLACEHOLDER_PATTERN
from mdlingo.schemas import PlaceholderCategory
from mdlingo.services.client import TranslationClient

from .extractor import Extractor
from .tokenizer import Tokenizer

_EDGE_WHITESPACE = re.compile(r"^(\s*)(.*?)(\s*)$", re.DOTALL)


def split_edges(text: str) -> Tuple[str, str, str]:
    """Split text into leading whitespace, body and trailing whitespace."""
    match = _EDGE_WHITESPACE.match(text)
    return match.group(1), match.group(2), match.group(3)


class Reassembler:
    """
    Translates a whole Markdown document: tokenize, translate the text
    segments through the client, restore placeholders and join everything
    back in the original order.
    """

    def __init__(
        self,
        client: TranslationClient,
        tokenizer: Optional[Tokenizer] = None,
        extractor: Optional[Extractor] = None,
    ):
        self.client = client
        self.tokenizer = tokenizer or Tokenizer()
        self.extractor = extractor or Extractor()

    async def translate_text(self, text: str, language: str) -> str:
        leading, body, trailing = split_edges(text)
        if not body:
            return text

        processed, placeholders = self.extractor.extract(body)

        # 链接文字和图片 alt 也走一遍提取，嵌套图片的地址不会发给翻译服务
        displays: Dict[str, str] = {}
        for placeholder in placeholders.items:
            if placeholder.category not in (PlaceholderCategory.LINK, PlaceholderCategory.IMAGE):
                continue
            display = placeholder.display or ""
            if display.strip() and display not in displays:
                displays[display] = await self.translate_text(display, language)

        if PLACEHOLDER_PATTERN.sub("", processed).strip():
            translated = await self.client.translate_unit(processed, language)
        else:
            translated = processed
        restored = self.extractor.restore(translated, placeholders, lambda d: displays.get(d, d))
        return f"{leading}{restored}{trailing}"

    async def translate_document(self, document: str, language: str) -> str:
        parts = []
        for segment in self.tokenizer.tokenize(document):
            if segment.translatable:
                parts.append(await self.translate_text(segment.content, language))
            else:
                parts.append(segment.content)
        return "".join(parts)
