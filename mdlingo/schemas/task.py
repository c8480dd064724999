from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class TaskStatus(str, Enum):
    """
    表示单个文件翻译任务的状态。
    """

    PENDING = "pending"  # 待处理
    SUCCESS = "success"  # 翻译并写入成功
    SKIPPED = "skipped"  # 已存在或源文件为空
    ERROR = "error"  # 读取、翻译或写入失败


class FileTask(BaseModel):
    """
    一个（源文件，目标语言）翻译任务。
    """

    source: str
    destination: str
    language: str
    status: TaskStatus = TaskStatus.PENDING
    message: Optional[str] = None
    warnings: List[str] = Field(default_factory=list)


class RunSummary(BaseModel):
    """
    一次运行的汇总统计。
    """

    total: int = 0
    success: int = 0
    skipped: int = 0
    errors: int = 0
    warnings: int = 0
    translations: int = 0
    retries: int = 0
    cancelled: bool = False
    tasks: List[FileTask] = Field(default_factory=list)

    def record(self, task: FileTask) -> None:
        self.total += 1
        self.tasks.append(task)
        self.warnings += len(task.warnings)
        if task.status == TaskStatus.SUCCESS:
            self.success += 1
        elif task.status == TaskStatus.SKIPPED:
            self.skipped += 1
        elif task.status == TaskStatus.ERROR:
            self.errors += 1

    @property
    def failed(self) -> bool:
        return self.errors > 0
