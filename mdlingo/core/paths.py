import os
from typing import Iterable, List, Optional

from mdlingo.constant import IGNORED_DIRS


def find_markdown_files(
    root: str,
    excluded_languages: Iterable[str] = (),
    specific_file: Optional[str] = None,
) -> List[str]:
    """
    列出内容目录下的所有 Markdown 源文件。

    已翻译的语言子目录（<root>/<code>/）、node_modules 和 .vitepress 会被跳过，
    避免把译文再次翻译。指定 specific_file 时只返回该文件。
    """
    if specific_file:
        return [specific_file]

    excluded = {os.path.join(root, code) for code in excluded_languages}
    files: List[str] = []
    for current, dirs, names in os.walk(root):
        dirs[:] = [d for d in dirs if d not in IGNORED_DIRS and os.path.join(current, d) not in excluded]
        for name in names:
            if name.lower().endswith(".md"):
                files.append(os.path.join(current, name))
    return sorted(files)


def translated_path(source: str, root: str, language: str) -> str:
    """
    计算译文路径：把内容目录前缀替换为 <root>/<language>/，其余相对路径保持不变。
    """
    relative_path = os.path.relpath(source, root)
    if relative_path == os.curdir or relative_path.split(os.sep)[0] == os.pardir:
        raise ValueError(f"{source} is not inside the content root {root}")
    return os.path.join(root, language, relative_path)


def write_atomic(path: str, content: str) -> None:
    """
    先写入同目录下的临时文件再替换目标文件，失败时目标文件保持不变。
    """
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    temp_path = f"{path}.tmp"
    try:
        with open(temp_path, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(temp_path, path)
    finally:
        if os.path.exists(temp_path):
            os.remove(temp_path)
