from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CheckResult(BaseModel):
    """
    单项质量检查的结果。
    """

    name: str
    passed: bool
    results: Dict[str, Any] = Field(default_factory=dict)
    error: Optional[str] = None


class QAReport(BaseModel):
    timestamp: str
    languages: List[str]
    tests: List[CheckResult] = Field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(test.passed for test in self.tests)


class CheckLevel(str, Enum):
    OK = "ok"
    WARNING = "warning"
    ERROR = "error"


class ValidationCheck(BaseModel):
    name: str
    level: CheckLevel
    message: str


class ValidationReport(BaseModel):
    checks: List[ValidationCheck] = Field(default_factory=list)

    def add(self, name: str, level: CheckLevel, message: str) -> None:
        self.checks.append(ValidationCheck(name=name, level=level, message=message))

    @property
    def valid(self) -> bool:
        return not any(check.level == CheckLevel.ERROR for check in self.checks)


class CleanResult(BaseModel):
    language: str
    removed: List[str] = Field(default_factory=list)
    failed: Dict[str, str] = Field(default_factory=dict)
    removed_dirs: List[str] = Field(default_factory=list)


class ProjectConfig(BaseModel):
    """
    translation.config.json 的内容。
    """

    model_config = ConfigDict(populate_by_name=True)

    source_language: Optional[str] = Field(None, alias="sourceLanguage")
    target_languages: List[str] = Field(default_factory=list, alias="targetLanguages")
    languages: Dict[str, Any] = Field(default_factory=dict)
    translation_settings: Optional[Dict[str, Any]] = Field(None, alias="translationSettings")
