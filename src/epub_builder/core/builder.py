"""Assemble a complete EPUB from a book config."""

import logging
import uuid
from collections.abc import Iterator
from pathlib import Path, PurePosixPath

from epub_builder.core.container import assemble
from epub_builder.core.navigation import render_nav
from epub_builder.core.package import render_package
from epub_builder.core.pages import PageGenerator
from epub_builder.core.registry import ResourceRegistry
from epub_builder.core.spine import NAV_ID, NAV_PATH, SpineWalker
from epub_builder.core.styles import register_styles
from epub_builder.models.config import BookConfig
from epub_builder.models.package import NavNode

log = logging.getLogger(__name__)

COVER_ID = "cover"


class BookBuilder:
    """Single-pass builder: registry, spine, navigation, package, archive.

    Usage:
        data = BookBuilder(config, source_root).build()
    """

    def __init__(self, config: BookConfig, source_root: Path | None = None):
        self.config = config
        self.source_root = source_root or Path.cwd()
        self.registry = ResourceRegistry()
        self.nav: list[NavNode] = []
        self.spine: list[str] = []
        self.style_links = ""
        self.book_uuid = config.uuid or str(uuid.uuid4())

    def build(self) -> bytes:
        """Run every stage and return the archive bytes."""
        self.add_styles()
        self.add_cover()
        self.add_media()
        self.add_spine()
        self.add_nav()
        return assemble(self.render_package(), self.registry)

    def add_styles(self) -> None:
        self.style_links = register_styles(self.registry)

    def add_cover(self) -> None:
        if not self.config.cover:
            return
        log.info("Adding cover %s", self.config.cover)
        self.registry.register(
            self.config.cover,
            (self.source_root / self.config.cover).read_bytes(),
            id=COVER_ID,
            properties="cover",
        )

    def add_media(self) -> None:
        """Register every file under the media folder, ids = file names."""
        if not self.config.media_folder:
            return
        folder = self.source_root / self.config.media_folder
        archive_root = PurePosixPath(self.config.media_folder)
        count = 0
        for file_path in _walk_files(folder):
            relative = file_path.relative_to(folder).as_posix()
            self.registry.register(
                str(archive_root / relative),
                file_path.read_bytes(),
                id=file_path.name,
            )
            count += 1
        log.info("Added %d media file(s) from %s", count, self.config.media_folder)

    def add_spine(self) -> None:
        pages = PageGenerator(
            self.config, self.registry, self.source_root, self.style_links
        )
        walker = SpineWalker(self.config, self.registry, pages)
        self.spine = walker.walk(self.config.spine, self.nav)
        log.info("Spine has %d item(s)", len(self.spine))

    def add_nav(self) -> None:
        """Render the nav forest; must run after ``add_spine``."""
        content = render_nav(
            self.nav,
            title=self.config.nav_title,
            lang=self.config.lang,
            head=self.style_links,
        )
        # The spine may already have reserved the slot without a body
        self.registry.register(NAV_PATH, None, id=NAV_ID, properties="nav")
        self.registry.fill(NAV_PATH, content)

    def render_package(self) -> bytes:
        return render_package(self.config, self.registry, self.spine, self.book_uuid)


def _walk_files(folder: Path) -> Iterator[Path]:
    """Depth-first, in directory listing order."""
    for child in folder.iterdir():
        if child.is_dir():
            yield from _walk_files(child)
        elif child.is_file():
            yield child
