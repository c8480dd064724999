from enum import Enum

from pydantic import BaseModel, Field


class SegmentKind(str, Enum):
    """
    Markdown 文档切分后的片段类型。
    """

    FRONTMATTER = "frontmatter"  # 文档头部元数据
    CODE = "code"  # 代码块、style/script 区域、注释
    WHITESPACE = "whitespace"  # 纯空白
    TEXT = "text"  # 需要翻译的正文


class Segment(BaseModel):
    """
    文档中连续的一段原文。
    """

    kind: SegmentKind
    content: str = Field(..., description="原文中的精确子串，包括代码块的围栏符号")

    @property
    def translatable(self) -> bool:
        return self.kind == SegmentKind.TEXT
