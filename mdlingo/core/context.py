from typing import Dict, Optional, Tuple

from .config import settings


class RunContext:
    """
    一次运行内共享的状态：翻译缓存、计数器和取消标记。

    缓存只在进程内有效，不做淘汰；同一次运行的输入是有限的。
    """

    def __init__(self, cache_key_length: Optional[int] = None):
        self.cache_key_length = cache_key_length or settings.CACHE_KEY_LENGTH
        self.cache: Dict[Tuple[str, str], str] = {}
        self.translations = 0
        self.cache_hits = 0
        self.retries = 0
        self.exhausted = 0
        self.batch_count = 0
        self._cancelled = False

    def cache_key(self, text: str, language: str) -> Tuple[str, str]:
        return text[: self.cache_key_length], language

    def cancel(self) -> None:
        """请求在下一个文件任务开始前停止。"""
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled
