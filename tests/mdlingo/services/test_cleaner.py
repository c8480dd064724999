import os
from unittest.mock import patch

from mdlingo.services.cleaner import Cleaner


def _touch(path, content="x"):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


class TestCleaner:
    def test_removes_translations_and_empty_dirs(self, tmp_path):
        root = tmp_path / "docs"
        _touch(root / "index.md")
        _touch(root / "km" / "index.md")
        _touch(root / "km" / "guide" / "ai" / "intro.md")

        result = Cleaner(str(root)).clean("km")

        assert sorted(os.path.relpath(p, root) for p in result.removed) == [
            os.path.join("km", "guide", "ai", "intro.md"),
            os.path.join("km", "index.md"),
        ]
        assert not (root / "km").exists()
        assert str(root / "km") in result.removed_dirs
        assert (root / "index.md").exists()

    def test_keeps_non_markdown_files(self, tmp_path):
        root = tmp_path / "docs"
        _touch(root / "km" / "guide" / "intro.md")
        _touch(root / "km" / "images" / "logo.png")

        result = Cleaner(str(root)).clean("km")

        assert len(result.removed) == 1
        assert (root / "km" / "images" / "logo.png").exists()
        assert not (root / "km" / "guide").exists()
        assert (root / "km").exists()

    def test_missing_language_dir(self, tmp_path):
        result = Cleaner(str(tmp_path)).clean("km")
        assert result.removed == []
        assert result.removed_dirs == []

    def test_failed_removal_is_recorded(self, tmp_path):
        root = tmp_path / "docs"
        _touch(root / "km" / "index.md")

        with patch("mdlingo.services.cleaner.os.remove", side_effect=OSError("permission denied")):
            result = Cleaner(str(root)).clean("km")

        assert result.removed == []
        assert result.failed == {str(root / "km" / "index.md"): "permission denied"}
        assert (root / "km" / "index.md").exists()
