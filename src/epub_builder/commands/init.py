"""Init command implementation."""

from enum import Enum
from pathlib import Path

from rich.console import Console

CONFIG_FILENAME = "epub-builder.yaml"


class TemplateLang(str, Enum):
    """Languages the starter config is available in."""

    EN = "en"
    ZH = "zh"


TEMPLATES = {
    TemplateLang.EN: """\
# epub-builder config
author: Author Name
title: Book Title
lang: en
# uuid: 00000000-0000-0000-0000-000000000000
# publisher: Publisher Name
# cover: images/cover.jpg
# media_folder: images
no_title: No Title
cover_title: Cover
nav_title: Table of Contents

spine:
  # - cover_page: images/cover.jpg
  #   nav: false
  - nav_page: true
    title: Table of Contents
  - path: chapter-1.md
    nodes:
      - path: chapter-1-1.md
        title: Section 1.1
  - chapter-2.md
""",
    TemplateLang.ZH: """\
# epub-builder 配置
author: 作者
title: 书名
lang: zh
# uuid: 00000000-0000-0000-0000-000000000000
# publisher: 出版社
# cover: images/cover.jpg
# media_folder: images
no_title: 无标题
cover_title: 封面
nav_title: 目录

spine:
  # - cover_page: images/cover.jpg
  #   nav: false
  - nav_page: true
    title: 目录
  - path: 第一章.md
    nodes:
      - path: 第一章第一节.md
        title: 第一节
  - 第二章.md
""",
}


def execute_init(
    lang: TemplateLang,
    force: bool,
    console: Console,
    cwd: Path | None = None,
) -> Path:
    """Write a starter config into ``cwd``."""
    target = (cwd or Path.cwd()) / CONFIG_FILENAME
    if target.exists() and not force:
        raise FileExistsError(f"{target} already exists (use --force to overwrite)")

    target.write_text(TEMPLATES[lang], encoding="utf-8")
    console.print(f"[green]Created {target}[/]")
    return target
