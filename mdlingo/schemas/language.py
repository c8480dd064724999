import os
from typing import List

from pydantic import BaseModel, Field


class Language(BaseModel):
    """
    目标语言。code 用作翻译输出的子目录名，provider_code 发送给翻译服务。
    """

    code: str
    name: str
    native_name: str
    provider_code: str
    sections: List[str] = Field(default_factory=list, description="允许翻译的顶层目录，为空表示整个文档目录")

    def covers(self, relative_path: str) -> bool:
        """relative_path 是相对于文档目录的路径。"""
        if not self.sections:
            return True
        return relative_path.split(os.sep)[0] in self.sections
