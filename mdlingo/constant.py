import re

from mdlingo.schemas import Language

LANGUAGES = {
    "km": Language(code="km", name="Khmer", native_name="ភាសាខ្មែរ", provider_code="km"),
    "zh": Language(code="zh", name="Chinese", native_name="中文", provider_code="zh-CN", sections=["css"]),
    "ja": Language(code="ja", name="Japanese", native_name="日本語", provider_code="ja", sections=["css"]),
}

# 文档头部的元数据块
FRONTMATTER_PATTERN = re.compile(r"---\r?\n.*?\r?\n---\r?\n", re.DOTALL)

# 扫描器寻找的不翻译区域起始标记
CODE_OPENER_PATTERN = re.compile(r"```|~~~|<(?:style|script)\b|<!--", re.IGNORECASE)
FENCE_PATTERNS = {
    "```": re.compile(r"```.*?```", re.DOTALL),
    "~~~": re.compile(r"~~~.*?~~~", re.DOTALL),
}
TAG_REGION_PATTERN = re.compile(r"<(style|script)\b[^>]*>.*?</\1\s*>", re.IGNORECASE | re.DOTALL)
COMMENT_PATTERN = re.compile(r"<!--.*?-->", re.DOTALL)

# 行内结构
INLINE_CODE_PATTERN = re.compile(r"`[^`]+`")
# 链接文字里可以嵌一张图片（徽章写法 [![alt](img)](url)）
LINK_PATTERN = re.compile(r"(?<!!)\[((?:!\[[^\]]*\]\([^)]+\)|[^\]])+)\]\(([^)]+)\)")
IMAGE_PATTERN = re.compile(r"!\[([^\]]*)\]\(([^)]+)\)")
HTML_TAG_PATTERN = re.compile(r"<[^>]+>")

# 未能还原的占位符
PLACEHOLDER_PATTERN = re.compile(r"__(?:INLINE_CODE|LINK|IMAGE|HTML)_\s*\d+\s*__", re.IGNORECASE)

# 目录遍历时忽略的目录
IGNORED_DIRS = {"node_modules", ".vitepress"}
