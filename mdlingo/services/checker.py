import json
import os
import re
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from mdlingo.constant import FRONTMATTER_PATTERN, LANGUAGES
from mdlingo.core.config import settings
from mdlingo.core.logger import mdlingo_logger as logger
from mdlingo.core.paths import find_markdown_files, translated_path
from mdlingo.schemas import CheckResult, QAReport

SUSPICIOUS_PATTERNS = {
    "placeholder markers": re.compile(r"__[A-Z_]+_?\d*__"),
    "undefined values": re.compile(r"undefined", re.IGNORECASE),
}


class QualityChecker:
    """
    对已生成的译文做质量检查：完整性、文件大小、空文件、结构和残留占位符。
    """

    def __init__(self, root: str, languages: Optional[List[str]] = None, sample_size: Optional[int] = None):
        self.root = root
        self.languages = languages or list(LANGUAGES.keys())
        self.sample_size = sample_size or settings.QA_SAMPLE_SIZE

    def _sources(self) -> List[str]:
        return find_markdown_files(self.root, LANGUAGES.keys())

    def _translations(self, language: str) -> List[str]:
        language_root = os.path.join(self.root, language)
        if not os.path.isdir(language_root):
            return []
        return find_markdown_files(language_root)

    @staticmethod
    def _read(path: str) -> str:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()

    def _covered(self, sources: List[str], language: str) -> List[str]:
        registered = LANGUAGES.get(language)
        if registered is None:
            return sources
        return [s for s in sources if registered.covers(os.path.relpath(s, self.root))]

    def check_completeness(self) -> CheckResult:
        all_sources = self._sources()
        results: Dict[str, Dict] = {}
        for language in self.languages:
            sources = self._covered(all_sources, language)
            missing = [s for s in sources if not os.path.exists(translated_path(s, self.root, language))]
            translated = len(sources) - len(missing)
            results[language] = {
                "total": len(sources),
                "translated": translated,
                "missing": len(missing),
                "missing_files": missing[:5],
                "percentage": round(translated / len(sources) * 100) if sources else 100,
            }
            logger.info(f"{language}: translated {translated}/{len(sources)} ({results[language]['percentage']}%)")
        return CheckResult(name="File Completeness", passed=True, results=results)

    def check_sizes(self) -> CheckResult:
        results: Dict[str, Dict] = {}
        sources = self._sources()[: self.sample_size]
        for language in self.languages:
            issues = []
            for source in sources:
                target = translated_path(source, self.root, language)
                if not os.path.exists(target):
                    continue
                source_size = os.path.getsize(source)
                if source_size == 0:
                    continue
                ratio = os.path.getsize(target) / source_size
                # 译文明显偏小（< 0.5 倍）或偏大（> 3 倍）
                if ratio < 0.5 or ratio > 3:
                    issues.append({"file": source, "ratio": round(ratio, 2)})
            results[language] = {"checked": len(sources), "issues": len(issues), "size_issues": issues}
            if issues:
                logger.warning(f"{language}: {len(issues)} potential size issue(s)")
        return CheckResult(name="File Sizes", passed=True, results=results)

    def check_empty(self) -> CheckResult:
        results: Dict[str, Dict] = {}
        for language in self.languages:
            files = self._translations(language)
            empty = [f for f in files if not FRONTMATTER_PATTERN.sub("", self._read(f), count=1).strip()]
            results[language] = {"total": len(files), "empty": len(empty), "empty_files": empty[:5]}
            if empty:
                logger.error(f"{language}: {len(empty)} empty file(s)")
        passed = not any(r["empty"] for r in results.values())
        return CheckResult(name="Empty Files", passed=passed, results=results)

    def _structure_issues(self, path: str, language: str) -> List[str]:
        content = self._read(path)
        issues = []

        source = os.path.join(self.root, os.path.relpath(path, os.path.join(self.root, language)))
        if os.path.exists(source) and FRONTMATTER_PATTERN.match(self._read(source)):
            if not FRONTMATTER_PATTERN.match(content):
                issues.append("missing frontmatter")
        if content.count("```") % 2 != 0:
            issues.append("unmatched code blocks")
        if content.count("[") != content.count("]"):
            issues.append("unmatched brackets")
        return issues

    def check_integrity(self) -> CheckResult:
        return self._per_file_check("Markdown Integrity", self._structure_issues)

    def _suspicious(self, path: str, language: str) -> List[str]:
        content = self._read(path)
        return [name for name, pattern in SUSPICIOUS_PATTERNS.items() if pattern.search(content)]

    def check_placeholders(self) -> CheckResult:
        return self._per_file_check("Untranslated Placeholders", self._suspicious)

    def _per_file_check(self, name: str, inspect: Callable[[str, str], List[str]]) -> CheckResult:
        results: Dict[str, Dict] = {}
        for language in self.languages:
            files = self._translations(language)[: self.sample_size]
            details = []
            for path in files:
                issues = inspect(path, language)
                if issues:
                    details.append({"file": path, "issues": issues})
                    logger.warning(f"{path}: {', '.join(issues)}")
            results[language] = {"checked": len(files), "issues": len(details), "details": details}
        return CheckResult(name=name, passed=True, results=results)

    def run(self) -> QAReport:
        report = QAReport(timestamp=datetime.now(timezone.utc).isoformat(), languages=self.languages)
        checks = [
            ("File Completeness", self.check_completeness),
            ("File Sizes", self.check_sizes),
            ("Empty Files", self.check_empty),
            ("Markdown Integrity", self.check_integrity),
            ("Untranslated Placeholders", self.check_placeholders),
        ]
        for name, check in checks:
            try:
                report.tests.append(check())
            except OSError as e:
                logger.error(f"{name} failed: {e}")
                report.tests.append(CheckResult(name=name, passed=False, error=str(e)))
        return report

    @staticmethod
    def save(report: QAReport, path: Optional[str] = None) -> str:
        path = path or f"translation-report-{report.timestamp[:10]}.json"
        with open(path, "w", encoding="utf-8") as f:
            json.dump(report.model_dump(), f, ensure_ascii=False, indent=2)
        logger.info(f"Report saved: {path}")
        return path
