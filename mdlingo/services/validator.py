import json
import os
from typing import List, Optional

from pydantic import ValidationError

from mdlingo.constant import LANGUAGES
from mdlingo.core.config import settings
from mdlingo.core.logger import mdlingo_logger as logger
from mdlingo.errors import ConfigurationError
from mdlingo.schemas import CheckLevel, ProjectConfig, ValidationReport

CONFIG_FILE = "translation.config.json"

# 站点配置可能出现的位置
SITE_CONFIG_CANDIDATES = [
    ".vitepress/config.js",
    ".vitepress/config.ts",
    "docs/.vitepress/config.js",
    "docs/.vitepress/config.ts",
    "docs/.vitepress/config.mts",
]


class ConfigValidator:
    """
    检查翻译配置文件、文档目录和站点的多语言配置。
    """

    def __init__(self, project_root: str = ".", docs_root: Optional[str] = None):
        self.project_root = project_root
        self.docs_root = docs_root or settings.DOCS_ROOT

    def load_config(self) -> ProjectConfig:
        path = os.path.join(self.project_root, CONFIG_FILE)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return ProjectConfig.model_validate(data)
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            raise ConfigurationError(f"Error reading {CONFIG_FILE}: {e}") from e

    def _check_translation_config(self, report: ValidationReport) -> None:
        try:
            config = self.load_config()
        except ConfigurationError as e:
            report.add(CONFIG_FILE, CheckLevel.ERROR, str(e))
            return

        if not config.source_language:
            report.add("sourceLanguage", CheckLevel.ERROR, "Missing sourceLanguage")
        else:
            report.add("sourceLanguage", CheckLevel.OK, f"Source language: {config.source_language}")

        if not config.target_languages:
            report.add("targetLanguages", CheckLevel.ERROR, "Missing or empty targetLanguages")
        else:
            unknown = [code for code in config.target_languages if code not in LANGUAGES]
            if unknown:
                report.add("targetLanguages", CheckLevel.ERROR, f"Unknown target languages: {', '.join(unknown)}")
            else:
                report.add("targetLanguages", CheckLevel.OK, f"Target languages: {', '.join(config.target_languages)}")

        if not config.languages:
            report.add("languages", CheckLevel.ERROR, "Missing or empty languages configuration")
        else:
            report.add("languages", CheckLevel.OK, f"Configured languages: {len(config.languages)}")

        if config.translation_settings is None:
            report.add("translationSettings", CheckLevel.WARNING, "Missing translationSettings")
        else:
            report.add("translationSettings", CheckLevel.OK, "Translation settings configured")

    def _check_docs_root(self, report: ValidationReport) -> None:
        path = os.path.join(self.project_root, self.docs_root)
        if os.path.isdir(path):
            report.add("docs", CheckLevel.OK, f"Content root found: {path}")
        else:
            report.add("docs", CheckLevel.ERROR, f"Content root not found: {path}")

    def _site_configs(self) -> List[str]:
        paths = [os.path.join(self.project_root, candidate) for candidate in SITE_CONFIG_CANDIDATES]
        return [path for path in paths if os.path.isfile(path)]

    def _check_site_config(self, report: ValidationReport) -> None:
        configs = self._site_configs()
        if not configs:
            report.add("site config", CheckLevel.WARNING, "No site configuration found")
            return
        for path in configs:
            with open(path, "r", encoding="utf-8") as f:
                content = f.read()
            if "locales" in content:
                report.add("site config", CheckLevel.OK, f"Locales configured in {path}")
            else:
                report.add("site config", CheckLevel.WARNING, f"No locales configured in {path}")

    def validate(self) -> ValidationReport:
        report = ValidationReport()
        self._check_translation_config(report)
        self._check_docs_root(report)
        self._check_site_config(report)

        for check in report.checks:
            if check.level == CheckLevel.ERROR:
                logger.error(f"{check.name}: {check.message}")
            elif check.level == CheckLevel.WARNING:
                logger.warning(f"{check.name}: {check.message}")
            else:
                logger.debug(f"{check.name}: {check.message}")
        return report
