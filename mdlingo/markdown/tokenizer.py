from typing import List

from mdlingo.constant import (
    CODE_OPENER_PATTERN,
    COMMENT_PATTERN,
    FENCE_PATTERNS,
    FRONTMATTER_PATTERN,
    TAG_REGION_PATTERN,
)
from mdlingo.schemas import Segment, SegmentKind


class Tokenizer:
    """
    Splits a Markdown document into ordered segments so that only prose is
    translated.

    The scanner walks the document once. At each candidate opener it tries to
    close the region (fenced code, style/script block, HTML comment); closed
    regions become ``code`` segments and everything in between becomes
    ``text`` or ``whitespace``. Concatenating the segment contents always gives
    back the input.
    """

    def tokenize(self, document: str) -> List[Segment]:
        if not isinstance(document, str):
            raise ValueError("document must be a string")

        segments: List[Segment] = []
        pos = 0

        frontmatter = FRONTMATTER_PATTERN.match(document)
        if frontmatter:
            segments.append(Segment(kind=SegmentKind.FRONTMATTER, content=frontmatter.group(0)))
            pos = frontmatter.end()

        text_start = pos
        n = len(document)

        while pos < n:
            opener = CODE_OPENER_PATTERN.search(document, pos)
            if opener is None:
                break

            region_end = self._close_region(document, opener.start(), opener.group(0))
            if region_end is None:
                if opener.group(0) in FENCE_PATTERNS:
                    # Unterminated fence: the rest of the document is plain text.
                    break
                pos = opener.end()
                continue

            self._emit_text(segments, document[text_start : opener.start()])
            segments.append(Segment(kind=SegmentKind.CODE, content=document[opener.start() : region_end]))
            pos = text_start = region_end

        self._emit_text(segments, document[text_start:])
        return segments

    def _close_region(self, document: str, start: int, opener: str):
        """Return the end offset of the region opened at ``start``, or None."""
        fence = FENCE_PATTERNS.get(opener)
        if fence is not None:
            match = fence.match(document, start)
        elif opener.startswith("<!--"):
            match = COMMENT_PATTERN.match(document, start)
        else:
            match = TAG_REGION_PATTERN.match(document, start)
        return match.end() if match else None

    @staticmethod
    def _emit_text(segments: List[Segment], content: str) -> None:
        if not content:
            return
        kind = SegmentKind.TEXT if content.strip() else SegmentKind.WHITESPACE
        segments.append(Segment(kind=kind, content=content))


def tokenize(document: str) -> List[Segment]:
    return Tokenizer().tokenize(document)
