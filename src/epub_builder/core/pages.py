"""Generate spine pages and register them."""

import logging
from html import escape
from pathlib import Path

from epub_builder.core.images import image_size
from epub_builder.core.markup import query_title, render_markdown, render_page, to_xhtml
from epub_builder.core.registry import ResourceRegistry
from epub_builder.models.config import MARKDOWN_SUFFIXES, BookConfig
from epub_builder.models.package import PageRef

log = logging.getLogger(__name__)

MARKUP_SUFFIXES = (".html", ".htm", ".xhtml")

COVER_PAGE_PATH = "cover_page.xhtml"
COVER_PAGE_ID = "cover-page"

COVER_PAGE_HEAD = """\
<style type="text/css" title="override_css">
  @page { padding: 0pt; margin: 0pt }
  body { text-align: center; padding: 0pt; margin: 0pt; }
</style>
"""

COVER_PAGE_BODY = """\
<div>
  <svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" version="1.1" width="100%" height="100%" viewBox="0 0 {width} {height}" preserveAspectRatio="none">
    <image width="{width}" height="{height}" xlink:href="{href}"/>
  </svg>
</div>
"""


class PageGenerator:
    """Turn spine sources into registered pages.

    Paths are archive paths exactly as written in the config; files are read
    relative to ``source_root``.
    """

    def __init__(
        self,
        config: BookConfig,
        registry: ResourceRegistry,
        source_root: Path,
        style_links: str = "",
    ):
        self.config = config
        self.registry = registry
        self.source_root = source_root
        self.style_links = style_links

    def _source(self, path: str) -> Path:
        return self.source_root / path

    def query_title(self, markup: str | bytes) -> str:
        return query_title(markup, self.config.no_title)

    def normal_page(self, path: str) -> PageRef:
        """Register a content page, rendering Markdown to XHTML."""
        suffix = Path(path).suffix.lower()
        store_path = path
        title: str | None = None
        content: str | bytes

        if suffix in MARKDOWN_SUFFIXES:
            store_path = f"{path}.xhtml"
            body = to_xhtml(render_markdown(self._source(path).read_text(encoding="utf-8")))
            title = self.query_title(body)
            content = render_page(
                title=title,
                head=self.style_links,
                body=body,
                lang=self.config.lang,
            )
        elif suffix in MARKUP_SUFFIXES:
            content = self._source(path).read_text(encoding="utf-8")
            title = self.query_title(content)
        else:
            content = self._source(path).read_bytes()

        log.debug("Generated page %s (title: %s)", store_path, title)
        item_id = self.registry.register(store_path, content)
        return PageRef(id=item_id, title=title, href=store_path)

    def cover_page(self, image_path: str) -> PageRef:
        """Register a full-bleed SVG page showing ``image_path``."""
        width, height = image_size(self._source(image_path))
        title = self.config.cover_title
        content = render_page(
            title=title,
            head=COVER_PAGE_HEAD,
            body=COVER_PAGE_BODY.format(
                width=width, height=height, href=escape(image_path)
            ),
            lang=self.config.lang,
        )
        item_id = self.registry.register(
            COVER_PAGE_PATH, content, id=COVER_PAGE_ID, properties="svg"
        )
        return PageRef(id=item_id, title=title, href=COVER_PAGE_PATH)

