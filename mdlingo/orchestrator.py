import asyncio
import os
from typing import Awaitable, Callable, List, Optional

from tqdm import tqdm

from mdlingo.constant import LANGUAGES
from mdlingo.core.config import settings
from mdlingo.core.context import RunContext
from mdlingo.core.logger import mdlingo_logger as logger
from mdlingo.core.paths import find_markdown_files, translated_path, write_atomic
from mdlingo.errors import UnsupportedLanguageError
from mdlingo.markdown import Extractor, Reassembler
from mdlingo.schemas import FileTask, Language, RunSummary, TaskStatus
from mdlingo.services.client import TranslationClient
from mdlingo.services.provider import Provider


def resolve_language(code: str) -> Language:
    """
    校验目标语言，未登记的语言直接报错。
    """
    language = LANGUAGES.get(code)
    if language is None:
        raise UnsupportedLanguageError(f'Unsupported language "{code}". Supported: {", ".join(supported_languages())}')
    return language


def supported_languages() -> List[str]:
    return list(LANGUAGES.keys())


class Orchestrator:
    """
    逐个文件、逐个语言地执行翻译任务的编排器。
    """

    def __init__(
        self,
        provider: Provider,
        root: Optional[str] = None,
        force: bool = False,
        context: Optional[RunContext] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """
        初始化编排器实例。

        Args:
            provider: 翻译服务。
            root: 文档内容目录，默认取配置中的 DOCS_ROOT。
            force: 为 True 时覆盖已存在的译文。
            context: 本次运行共享的缓存与计数器。
            sleep: 延时函数，测试中可替换。
        """
        self.root = root or settings.DOCS_ROOT
        self.force = force
        self.context = context or RunContext()
        self.sleep = sleep
        self.client = TranslationClient(provider, context=self.context, sleep=sleep)
        self.reassembler = Reassembler(self.client)
        self.extractor = Extractor()

    def covers(self, source: str, language: Language) -> bool:
        """只开放部分目录的语言（如 zh、ja 只翻译 css/）在这里过滤源文件。"""
        return language.covers(os.path.relpath(source, self.root))

    def build_task(self, source: str, language: Language) -> FileTask:
        return FileTask(
            source=source,
            destination=translated_path(source, self.root, language.code),
            language=language.code,
        )

    async def translate_file(self, task: FileTask) -> FileTask:
        """
        翻译单个文件。

        已存在且未指定 force 时跳过；源文件为空时跳过（force 时顺带删除旧译文）；
        读取、翻译或写入出错时记录错误并返回，不影响后续任务。
        """
        if os.path.exists(task.destination):
            if not self.force:
                logger.info(f"Skipping (exists): {task.destination}")
                task.status = TaskStatus.SKIPPED
                task.message = "exists"
                return task
            logger.info(f"Replacing: {task.destination}")

        try:
            with open(task.source, "r", encoding="utf-8") as f:
                content = f.read()

            if not content.strip():
                logger.info(f"Skipping (empty): {task.source}")
                if self.force and os.path.exists(task.destination):
                    # 源文件已清空，旧译文不再保留
                    os.remove(task.destination)
                    logger.info(f"Removed stale translation: {task.destination}")
                task.status = TaskStatus.SKIPPED
                task.message = "empty"
                return task

            logger.info(f"Translating: {task.source}")
            language = LANGUAGES[task.language]
            translated = await self.reassembler.translate_document(content, language.provider_code)

            # 原文中本来就有的占位符样式文本不算还原失败
            leftovers = set(self.extractor.find_leftovers(translated)) - set(self.extractor.find_leftovers(content))
            for leftover in sorted(leftovers):
                task.warnings.append(f"unrestored placeholder {leftover}")
            if leftovers:
                logger.warning(f"{len(leftovers)} placeholder(s) not restored in {task.destination}")

            write_atomic(task.destination, translated)
        except Exception as e:
            logger.error(f"Error: {task.source}: {e}")
            task.status = TaskStatus.ERROR
            task.message = str(e)
            return task

        logger.info(f"Saved: {task.destination}")
        task.status = TaskStatus.SUCCESS
        return task

    async def _pause(self) -> None:
        """每成功翻译一个文件暂停一次，每 BATCH_SIZE 个文件暂停加倍。"""
        self.context.batch_count += 1
        if self.context.batch_count >= settings.BATCH_SIZE:
            logger.debug(f"Batch pause ({settings.DELAY_SECONDS * 2}s)...")
            await self.sleep(settings.DELAY_SECONDS * 2)
            self.context.batch_count = 0
        else:
            await self.sleep(settings.DELAY_SECONDS)

    async def run(self, languages: List[str], file: Optional[str] = None) -> RunSummary:
        """
        翻译所有源文件到给定语言。

        Args:
            languages: 目标语言代码列表。
            file: 只翻译指定文件（可选）。

        Returns:
            本次运行的汇总。
        """
        # 在处理任何文件之前校验语言
        targets = [resolve_language(code) for code in languages]
        if file:
            for language in targets:
                if not self.covers(file, language):
                    raise UnsupportedLanguageError(
                        f'Language "{language.code}" ({language.name}) only translates '
                        f'{", ".join(language.sections)}/ under {self.root}: {file}'
                    )
        files = find_markdown_files(self.root, LANGUAGES.keys(), file)
        logger.info(f"Found {len(files)} markdown file(s)")

        summary = RunSummary()
        for language in targets:
            sources = [source for source in files if self.covers(source, language)]
            logger.info(f"Translating {len(sources)} file(s) to {language.name} ({language.code})")
            self.context.batch_count = 0

            for source in tqdm(sources, desc=f"翻译 {language.code}", unit="文件"):
                if self.context.cancelled:
                    logger.warning("Cancellation requested, stopping before the next file.")
                    summary.cancelled = True
                    break

                try:
                    task = self.build_task(source, language)
                except ValueError as e:
                    task = FileTask(source=source, destination="", language=language.code)
                    task.status = TaskStatus.ERROR
                    task.message = str(e)
                    logger.error(f"Error: {e}")
                else:
                    await self.translate_file(task)

                summary.record(task)
                if task.status == TaskStatus.SUCCESS:
                    await self._pause()

            if summary.cancelled:
                break

        summary.translations = self.context.translations
        summary.retries = self.context.retries
        return summary
