import asyncio
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from mdlingo.constant import LANGUAGES
from mdlingo.core.config import settings
from mdlingo.core.logger import get_logger
from mdlingo.core.logger import mdlingo_logger as logger
from mdlingo.errors import UnsupportedLanguageError
from mdlingo.orchestrator import Orchestrator
from mdlingo.schemas import CheckLevel, RunSummary, TaskStatus
from mdlingo.services import Cleaner, ConfigValidator, EchoTranslator, GoogleTranslator, QualityChecker

# 初始化 Typer 应用和 Rich 控制台
app = typer.Typer()
console = Console()


def _split_languages(value: Optional[str]) -> List[str]:
    if not value:
        return list(settings.DEFAULT_LANGUAGES)
    return [code.strip() for code in value.split(",") if code.strip()]


def _print_summary(summary: RunSummary) -> None:
    table = Table(title="Summary")
    table.add_column("Metric")
    table.add_column("Count", justify="right")
    table.add_row("Total", str(summary.total))
    table.add_row("[green]Success[/green]", str(summary.success))
    table.add_row("[yellow]Skipped[/yellow]", str(summary.skipped))
    table.add_row("[red]Errors[/red]", str(summary.errors))
    table.add_row("Warnings", str(summary.warnings))
    table.add_row("Total translations", str(summary.translations))
    table.add_row("Retries", str(summary.retries))
    console.print(table)
    for task in summary.tasks:
        if task.status == TaskStatus.ERROR:
            console.print(f"[red]✗[/red] {task.source}: {task.message}")


async def _translate(languages: List[str], file: Optional[str], root: str, force: bool, dry_run: bool) -> RunSummary:
    provider = EchoTranslator() if dry_run else GoogleTranslator()
    async with provider:
        orchestrator = Orchestrator(provider, root=root, force=force)
        return await orchestrator.run(languages, file=file)


@app.command("translate", help="把 Markdown 文档翻译为目标语言")
def translate(
    lang: Optional[str] = typer.Option(None, "--lang", "-l", help="目标语言，多个用逗号分隔（默认 km）。"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="只翻译指定文件。"),
    force: bool = typer.Option(False, "--force", help="覆盖已存在的译文。"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="输出详细日志。"),
    root: Optional[Path] = typer.Option(None, "--root", help="文档内容目录。"),
    dry_run: bool = typer.Option(False, "--dry-run", help="不调用翻译服务，原样输出。"),
):
    if verbose:
        get_logger("mdlingo", "DEBUG")

    languages = _split_languages(lang)
    content_root = str(root or settings.DOCS_ROOT)

    console.print(f"[bold]目标语言:[/bold] {', '.join(languages)}")
    console.print(f"[bold]文档目录:[/bold] {content_root}")
    console.print("[bold]模式:[/bold] " + ("覆盖已有译文" if force else "跳过已有译文"))
    console.print("-" * 50)

    try:
        summary = asyncio.run(_translate(languages, str(file) if file else None, content_root, force, dry_run))
    except UnsupportedLanguageError as e:
        console.print(f"[bold red]{e}[/bold red]")
        raise typer.Exit(1)
    except KeyboardInterrupt:
        console.print("[bold yellow]已取消。[/bold yellow]")
        raise typer.Exit(130)

    console.print("-" * 50)
    _print_summary(summary)

    if summary.failed:
        console.print("[bold red]部分文件翻译失败！[/bold red] 详情请查看日志。")
        raise typer.Exit(1)
    console.print("[bold green]翻译完成！[/bold green]")


@app.command("clean", help="删除已生成的译文")
def clean(
    lang: Optional[str] = typer.Option(None, "--lang", "-l", help="要清理的语言（默认 km）。"),
    root: Optional[Path] = typer.Option(None, "--root", help="文档内容目录。"),
):
    cleaner = Cleaner(str(root or settings.DOCS_ROOT))
    failed = False
    for code in _split_languages(lang):
        result = cleaner.clean(code)
        console.print(
            f"[bold]{code}[/bold]: 删除 {len(result.removed)} 个文件, {len(result.removed_dirs)} 个空目录"
        )
        if result.failed:
            failed = True
            for path, message in result.failed.items():
                console.print(f"[yellow]删除失败[/yellow] {path}: {message}")
    if failed:
        raise typer.Exit(1)


@app.command("check", help="检查译文的完整性和质量")
def check(
    root: Optional[Path] = typer.Option(None, "--root", help="文档内容目录。"),
    report: bool = typer.Option(True, "--report/--no-report", help="保存 JSON 报告。"),
):
    checker = QualityChecker(str(root or settings.DOCS_ROOT), languages=list(LANGUAGES.keys()))
    qa_report = checker.run()
    for test in qa_report.tests:
        symbol = "[green]✓[/green]" if test.passed else "[yellow]![/yellow]"
        console.print(f"{symbol} {test.name}")
        if test.error:
            console.print(f"   Error: {test.error}")
    if report:
        path = checker.save(qa_report)
        console.print(f"报告已保存至 [bold]{path}[/bold]")
    if not qa_report.passed:
        raise typer.Exit(1)


@app.command("validate-config", help="校验翻译配置")
def validate_config(
    project: Path = typer.Option(Path("."), "--project", help="项目根目录。"),
):
    validation = ConfigValidator(str(project)).validate()
    for item in validation.checks:
        color = {CheckLevel.OK: "green", CheckLevel.WARNING: "yellow", CheckLevel.ERROR: "red"}[item.level]
        console.print(f"[{color}]{item.level.value:<7}[/{color}] {item.name}: {item.message}")
    if not validation.valid:
        logger.error("Some configurations are missing or invalid.")
        raise typer.Exit(1)
    console.print("[bold green]All configurations are valid![/bold green]")


if __name__ == "__main__":
    app()
