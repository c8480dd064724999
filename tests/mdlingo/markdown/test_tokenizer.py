import pytest

from mdlingo.markdown.tokenizer import Tokenizer, tokenize
from mdlingo.schemas import SegmentKind


class TestTokenizer:
    """
    测试 Tokenizer 的切分规则和边界情况。
    """

    @pytest.fixture
    def tokenizer(self):
        return Tokenizer()

    def test_input_validation(self, tokenizer):
        with pytest.raises(ValueError, match="document must be a string"):
            tokenizer.tokenize(None)  # type: ignore

    def test_empty_document(self, tokenizer):
        assert tokenizer.tokenize("") == []

    def test_plain_text(self, tokenizer):
        segments = tokenizer.tokenize("Hello world.\n")
        assert len(segments) == 1
        assert segments[0].kind == SegmentKind.TEXT
        assert segments[0].translatable is True

    def test_frontmatter_heading_and_code(self, tokenizer):
        document = "---\ntitle: X\n---\n# Hi\n```js\nconst a = 1;\n```\nBody text."
        segments = tokenizer.tokenize(document)

        assert [s.kind for s in segments] == [
            SegmentKind.FRONTMATTER,
            SegmentKind.TEXT,
            SegmentKind.CODE,
            SegmentKind.TEXT,
        ]
        assert segments[0].content == "---\ntitle: X\n---\n"
        assert segments[1].content == "# Hi\n"
        assert segments[2].content == "```js\nconst a = 1;\n```"
        assert segments[3].content == "\nBody text."
        assert [s.translatable for s in segments] == [False, True, False, True]

    def test_frontmatter_only_at_start(self, tokenizer):
        document = "Intro\n---\ntitle: X\n---\n"
        segments = tokenizer.tokenize(document)
        assert all(s.kind != SegmentKind.FRONTMATTER for s in segments)

    def test_whitespace_between_code_blocks(self, tokenizer):
        document = "```\na\n```\n\n```\nb\n```"
        segments = tokenizer.tokenize(document)
        assert [s.kind for s in segments] == [SegmentKind.CODE, SegmentKind.WHITESPACE, SegmentKind.CODE]
        assert segments[1].content == "\n\n"

    def test_tilde_fence(self, tokenizer):
        document = "Text\n~~~python\nprint('```')\n~~~\nMore"
        segments = tokenizer.tokenize(document)
        assert segments[1].kind == SegmentKind.CODE
        assert segments[1].content == "~~~python\nprint('```')\n~~~"

    def test_style_script_and_comment_regions(self, tokenizer):
        document = (
            "Intro\n<style scoped>\n.a { color: red; }\n</style>\n"
            "<SCRIPT setup>\nconst x = 1\n</SCRIPT>\n<!-- note -->\nOutro"
        )
        segments = tokenizer.tokenize(document)
        code = [s.content for s in segments if s.kind == SegmentKind.CODE]
        assert code == [
            "<style scoped>\n.a { color: red; }\n</style>",
            "<SCRIPT setup>\nconst x = 1\n</SCRIPT>",
            "<!-- note -->",
        ]

    def test_unterminated_fence_becomes_text(self, tokenizer):
        document = "Before\n```js\nconst a = 1;\n<!-- not a comment block -->\n"
        segments = tokenizer.tokenize(document)
        assert len(segments) == 1
        assert segments[0].kind == SegmentKind.TEXT
        assert segments[0].content == document

    def test_unterminated_fence_after_closed_block(self, tokenizer):
        document = "```\na\n```\nMiddle\n```\nopen"
        segments = tokenizer.tokenize(document)
        assert [s.kind for s in segments] == [SegmentKind.CODE, SegmentKind.TEXT]
        assert segments[1].content == "\nMiddle\n```\nopen"

    def test_unterminated_comment_is_text(self, tokenizer):
        document = "A <!-- open\n```\ncode\n```\nB"
        segments = tokenizer.tokenize(document)
        assert [s.kind for s in segments] == [SegmentKind.TEXT, SegmentKind.CODE, SegmentKind.TEXT]
        assert segments[0].content == "A <!-- open\n"

    @pytest.mark.parametrize(
        "document",
        [
            "",
            "   \n\t",
            "---\na: b\n---\n",
            "# Title\n\nSome `code` and [link](http://x).\n",
            "```\nunterminated",
            "<style>a{}</style><script>b()</script><!--c-->",
            "---\r\ntitle: x\r\n---\r\nBody\r\n```\r\ncode\r\n```\r\n",
            "text ``` inline ``` text ~~~ more",
        ],
    )
    def test_lossless(self, document):
        """所有片段拼接后应与原文完全一致。"""
        assert "".join(s.content for s in tokenize(document)) == document

    def test_deterministic(self, tokenizer):
        document = "# A\n```\nx\n```\nB"
        assert tokenizer.tokenize(document) == tokenizer.tokenize(document)
