import re
from typing import Callable, List, Optional, Tuple

from mdlingo.constant import (
    HTML_TAG_PATTERN,
    IMAGE_PATTERN,
    INLINE_CODE_PATTERN,
    LINK_PATTERN,
    PLACEHOLDER_PATTERN,
)
from mdlingo.core.logger import mdlingo_logger
from mdlingo.schemas import Placeholder, PlaceholderCategory, PlaceholderSet
from mdlingo.schemas.placeholder import SENTINEL_NAMES

# Categories in the order they are extracted. Restoration walks this backwards
# so that a sentinel captured inside another construct is restored as well.
EXTRACTION_ORDER = (
    PlaceholderCategory.INLINE_CODE,
    PlaceholderCategory.LINK,
    PlaceholderCategory.IMAGE,
    PlaceholderCategory.HTML_TAG,
)

PATTERNS = {
    PlaceholderCategory.INLINE_CODE: INLINE_CODE_PATTERN,
    PlaceholderCategory.LINK: LINK_PATTERN,
    PlaceholderCategory.IMAGE: IMAGE_PATTERN,
    PlaceholderCategory.HTML_TAG: HTML_TAG_PATTERN,
}


def _identity(text: str) -> str:
    return text


class Extractor:
    """
    Swaps inline code, links, images and raw HTML tags for sentinels such as
    ``__LINK_0__`` so the provider only sees prose, then puts them back.
    """

    def extract(self, text: str) -> Tuple[str, PlaceholderSet]:
        placeholders = PlaceholderSet()
        processed = text
        for category in EXTRACTION_ORDER:
            processed = PATTERNS[category].sub(lambda m, c=category: self._hold(placeholders, c, m), processed)
        return processed, placeholders

    @staticmethod
    def _hold(placeholders: PlaceholderSet, category: PlaceholderCategory, match: "re.Match[str]") -> str:
        if category in (PlaceholderCategory.LINK, PlaceholderCategory.IMAGE):
            placeholder = placeholders.add(category, match.group(0), display=match.group(1), target=match.group(2))
        else:
            placeholder = placeholders.add(category, match.group(0))
        return placeholder.token

    @staticmethod
    def sentinel_pattern(placeholder: Placeholder) -> "re.Pattern[str]":
        """Providers sometimes change case or pad the index with spaces."""
        name = SENTINEL_NAMES[placeholder.category]
        return re.compile(rf"__{name}_\s*{placeholder.index}\s*__", re.IGNORECASE)

    def render(self, placeholder: Placeholder, translate_display: Callable[[str], str]) -> str:
        if placeholder.category == PlaceholderCategory.LINK:
            return f"[{translate_display(placeholder.display or '')}]({placeholder.target})"
        if placeholder.category == PlaceholderCategory.IMAGE:
            alt = placeholder.display or ""
            if alt.strip():
                alt = translate_display(alt)
            return f"![{alt}]({placeholder.target})"
        return placeholder.original

    def restore(
        self,
        text: str,
        placeholders: PlaceholderSet,
        translate_display: Optional[Callable[[str], str]] = None,
    ) -> str:
        translate_display = translate_display or _identity
        restored = text
        for category in reversed(EXTRACTION_ORDER):
            for placeholder in placeholders.of(category):
                replacement = self.render(placeholder, translate_display)
                restored = self.sentinel_pattern(placeholder).sub(lambda _m, r=replacement: r, restored)

        remaining = self.find_leftovers(restored)
        if remaining:
            mdlingo_logger.warning(f"还有未还原的占位符: {len(remaining)} 个, 示例: {remaining[:5]}")
        return restored

    @staticmethod
    def find_leftovers(text: str) -> List[str]:
        return PLACEHOLDER_PATTERN.findall(text)
