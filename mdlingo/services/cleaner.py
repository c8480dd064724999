import os

from mdlingo.core.logger import mdlingo_logger as logger
from mdlingo.schemas import CleanResult


class Cleaner:
    """
    删除已生成的译文，以便重新翻译。
    """

    def __init__(self, root: str):
        self.root = root

    def clean(self, language: str) -> CleanResult:
        result = CleanResult(language=language)
        language_root = os.path.join(self.root, language)
        if not os.path.isdir(language_root):
            logger.info(f"No translations found under {language_root}")
            return result

        for current, _, names in os.walk(language_root):
            for name in sorted(names):
                if not name.lower().endswith(".md"):
                    continue
                file_path = os.path.join(current, name)
                try:
                    os.remove(file_path)
                    result.removed.append(file_path)
                    logger.info(f"Removed: {file_path}")
                except OSError as e:
                    result.failed[file_path] = str(e)
                    logger.warning(f"Failed to remove: {file_path} - {e}")

        # 自底向上删除空目录，包括语言根目录
        for current, _, _ in os.walk(language_root, topdown=False):
            if not os.listdir(current):
                os.rmdir(current)
                result.removed_dirs.append(current)
                logger.info(f"Removed empty dir: {current}")

        return result
