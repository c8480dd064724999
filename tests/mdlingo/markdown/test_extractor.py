from unittest.mock import patch

import pytest

from mdlingo.markdown.extractor import Extractor
from mdlingo.schemas import PlaceholderCategory


class TestExtractor:
    @pytest.fixture
    def extractor(self):
        return Extractor()

    def test_extract_categories(self, extractor):
        text = "See `npm install` and [docs](https://x.com) for ![a cat](cat.png) <br/>."
        processed, placeholders = extractor.extract(text)

        assert processed == "See __INLINE_CODE_0__ and __LINK_0__ for __IMAGE_0__ __HTML_0__."
        assert [p.category for p in placeholders.items] == [
            PlaceholderCategory.INLINE_CODE,
            PlaceholderCategory.LINK,
            PlaceholderCategory.IMAGE,
            PlaceholderCategory.HTML_TAG,
        ]
        link = placeholders.of(PlaceholderCategory.LINK)[0]
        assert link.display == "docs"
        assert link.target == "https://x.com"
        image = placeholders.of(PlaceholderCategory.IMAGE)[0]
        assert image.display == "a cat"
        assert image.target == "cat.png"

    def test_targets_never_in_processed_text(self, extractor):
        processed, _ = extractor.extract("[guide](/guide/intro.md) and ![](img/logo.svg)")
        assert "/guide/intro.md" not in processed
        assert "img/logo.svg" not in processed

    def test_indexes_per_category(self, extractor):
        processed, placeholders = extractor.extract("`a` `b` [c](d) `e`")
        assert processed == "__INLINE_CODE_0__ __INLINE_CODE_1__ __LINK_0__ __INLINE_CODE_2__"
        assert len(placeholders) == 4

    def test_link_wrapping_image(self, extractor):
        processed, placeholders = extractor.extract(
            "Build [![status](https://img.shields.io/x.svg)](https://ci.example.com/job) ok"
        )
        assert processed == "Build __LINK_0__ ok"
        link = placeholders.of(PlaceholderCategory.LINK)[0]
        assert link.display == "![status](https://img.shields.io/x.svg)"
        assert link.target == "https://ci.example.com/job"
        assert placeholders.of(PlaceholderCategory.IMAGE) == []

    def test_adjacent_links_stay_separate(self, extractor):
        processed, placeholders = extractor.extract("[a](b) and [c](d)")
        assert processed == "__LINK_0__ and __LINK_1__"
        assert [p.target for p in placeholders.items] == ["b", "d"]

    def test_inline_code_protects_link_syntax(self, extractor):
        processed, placeholders = extractor.extract("Use `[x](y)` literally")
        assert processed == "Use __INLINE_CODE_0__ literally"
        assert placeholders.of(PlaceholderCategory.LINK) == []

    def test_uppercase_prose_scenario(self, extractor):
        """只有正文被改动，行内代码、链接和图片地址保持原样。"""
        text = "See `npm install` and [docs](https://x.com) for ![a cat](cat.png)."
        processed, placeholders = extractor.extract(text)
        restored = extractor.restore(processed.upper(), placeholders)
        assert restored == "SEE `npm install` AND [docs](https://x.com) FOR ![a cat](cat.png)."

    def test_restore_with_translated_display(self, extractor):
        text = "Read [the docs](https://x.com) and ![a cat](cat.png)"
        processed, placeholders = extractor.extract(text)
        restored = extractor.restore(processed, placeholders, str.upper)
        assert restored == "Read [THE DOCS](https://x.com) and ![A CAT](cat.png)"

    def test_empty_alt_not_translated(self, extractor):
        processed, placeholders = extractor.extract("![](logo.png)")
        restored = extractor.restore(processed, placeholders, lambda _: "SHOULD NOT APPEAR")
        assert restored == "![](logo.png)"

    def test_restore_tolerates_case_and_spacing(self, extractor):
        processed, placeholders = extractor.extract("Run `make` then see [site](http://a.b).")
        mangled = "Run __inline_code_ 0 __ then see __Link_0 __."
        assert extractor.restore(mangled, placeholders) == "Run `make` then see [site](http://a.b)."

    def test_restore_does_not_confuse_indexes(self, extractor):
        text = " ".join(f"`c{i}`" for i in range(12))
        processed, placeholders = extractor.extract(text)
        assert "__INLINE_CODE_11__" in processed
        assert extractor.restore(processed, placeholders) == text

    @pytest.mark.parametrize(
        "text",
        [
            "Plain prose without anything special.",
            "See `npm install` and [docs](https://x.com) for ![a cat](cat.png).",
            "A [`code` link](https://example.com/a_(b)) here",
            "[![badge](https://img.shields.io/x.svg)](https://ci.example.com)",
            'Click <kbd>Ctrl</kbd> + <a href="[x](y)">here</a>',
            "Nested ![alt with `code`](pic.png) and <span>`tag`</span>",
            "Empty alt ![](a.png), weird < b > comparison",
        ],
    )
    def test_identity_round_trip(self, extractor, text):
        processed, placeholders = extractor.extract(text)
        assert extractor.restore(processed, placeholders) == text

    @patch("mdlingo.markdown.extractor.mdlingo_logger")
    def test_restore_unmatched_placeholder(self, mock_logger, extractor):
        processed, placeholders = extractor.extract("Go to [home](/).")
        corrupted = processed.replace("__LINK_0__", "__LINK_0__ __HTML_3__")
        restored = extractor.restore(corrupted, placeholders)

        assert restored == "Go to [home](/) __HTML_3__."
        assert extractor.find_leftovers(restored) == ["__HTML_3__"]
        assert mock_logger.warning.called

    @patch("mdlingo.markdown.extractor.mdlingo_logger")
    def test_dropped_placeholder_is_not_an_exception(self, mock_logger, extractor):
        processed, placeholders = extractor.extract("Use `x` here")
        restored = extractor.restore("Use here", placeholders)
        assert restored == "Use here"
        assert not mock_logger.warning.called
