"""Walk the spine tree into reading order and a navigation forest."""

import logging
from pathlib import PurePosixPath

from epub_builder.core.pages import PageGenerator
from epub_builder.core.registry import ResourceRegistry
from epub_builder.models.config import BookConfig, SpineItem, SpineKind, SpineNode
from epub_builder.models.package import NavNode, PageRef

log = logging.getLogger(__name__)

NAV_PATH = "nav.xhtml"
NAV_ID = "nav"


class SpineWalker:
    """Recursive spine traversal.

    Every node that yields a page adds its id to the reading order, parent
    before children. Nav-included nodes (the default) add a ``NavNode`` to the
    list for their level, and their children nest under it.
    """

    def __init__(
        self,
        config: BookConfig,
        registry: ResourceRegistry,
        pages: PageGenerator,
    ):
        self.config = config
        self.registry = registry
        self.pages = pages

    def walk(self, nodes: list[SpineNode], nav_list: list[NavNode]) -> list[str]:
        """Walk ``nodes``, appending nav entries to ``nav_list``.

        Returns:
            Spine ids in reading order
        """
        spine: list[str] = []

        for raw in nodes:
            node = SpineItem.coerce(raw)
            page = self._render(node)
            if page is not None:
                spine.append(page.id)

            # Children of a node without a nav entry attach to this level
            child_nav = nav_list
            if node.nav is not False:
                entry = self._nav_entry(node, page)
                if entry is not None:
                    nav_list.append(entry)
                    child_nav = entry.children

            if node.nodes:
                spine.extend(self.walk(node.nodes, child_nav))

        return spine

    def _render(self, node: SpineItem) -> PageRef | None:
        kind = node.kind
        if kind == SpineKind.PAGE:
            return self.pages.normal_page(node.path)
        if kind == SpineKind.COVER_PAGE:
            return self.pages.cover_page(node.cover_page)
        if kind == SpineKind.NAV_PAGE:
            # Body is filled in once the whole tree has been walked
            item_id = self.registry.register(NAV_PATH, None, id=NAV_ID, properties="nav")
            return PageRef(id=item_id, title=self.config.nav_title, href=NAV_PATH)
        return None

    def _nav_entry(self, node: SpineItem, page: PageRef | None) -> NavNode | None:
        title = node.title or (page.title if page else None)
        if not title and node.source:
            title = PurePosixPath(node.source).stem
        if not title:
            log.debug("Skipping untitled group node in navigation")
            return None

        href = page.href if page else None
        if href and node.anchor:
            href = f"{href}#{node.anchor}"
        return NavNode(title=title, href=href)
