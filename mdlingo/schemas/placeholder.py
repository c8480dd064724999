from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class PlaceholderCategory(str, Enum):
    """
    行内占位符的类别，决定还原时的格式。
    """

    INLINE_CODE = "inline-code"
    LINK = "link"
    IMAGE = "image"
    HTML_TAG = "html-tag"


# 占位符中使用的名字，例如 __LINK_0__
SENTINEL_NAMES = {
    PlaceholderCategory.INLINE_CODE: "INLINE_CODE",
    PlaceholderCategory.LINK: "LINK",
    PlaceholderCategory.IMAGE: "IMAGE",
    PlaceholderCategory.HTML_TAG: "HTML",
}


class Placeholder(BaseModel):
    """
    从正文中提取出来、翻译期间需要原样保留的行内结构。
    """

    category: PlaceholderCategory
    index: int = Field(..., description="在同类占位符中的序号")
    original: str = Field(..., description="被替换掉的原始文本")
    display: Optional[str] = Field(None, description="链接文字或图片 alt 文本")
    target: Optional[str] = Field(None, description="链接或图片地址，永远不翻译")

    @property
    def token(self) -> str:
        return f"__{SENTINEL_NAMES[self.category]}_{self.index}__"


class PlaceholderSet(BaseModel):
    items: List[Placeholder] = Field(default_factory=list)

    def add(
        self,
        category: PlaceholderCategory,
        original: str,
        display: Optional[str] = None,
        target: Optional[str] = None,
    ) -> Placeholder:
        placeholder = Placeholder(
            category=category,
            index=len(self.of(category)),
            original=original,
            display=display,
            target=target,
        )
        self.items.append(placeholder)
        return placeholder

    def of(self, category: PlaceholderCategory) -> List[Placeholder]:
        return [item for item in self.items if item.category == category]

    def __len__(self) -> int:
        return len(self.items)
