"""Data models for the book config and its spine tree."""

from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


# Archive paths the builder writes itself
RESERVED_PATHS = frozenset(
    {"mimetype", "META-INF/container.xml", "content.opf", "nav.xhtml", "cover_page.xhtml"}
)

MARKDOWN_SUFFIXES = (".md", ".markdown")


class SpineKind(str, Enum):
    """What a spine node renders to."""

    PAGE = "page"
    COVER_PAGE = "cover_page"
    NAV_PAGE = "nav_page"
    GROUP = "group"


class SpineItem(BaseModel):
    """Single node of the user's spine tree."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    title: str | None = None
    path: str | None = None
    anchor: str | None = None
    nav: bool | None = None  # None = include in navigation
    cover_page: str | None = None
    nav_page: bool = False
    nodes: list[Union[str, "SpineItem"]] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_variant(self) -> "SpineItem":
        chosen = [
            name for name in ("path", "cover_page", "nav_page") if getattr(self, name)
        ]
        if len(chosen) > 1:
            raise ValueError(
                f"spine node sets more than one of path, cover_page, nav_page: "
                f"{', '.join(chosen)}"
            )
        if not chosen and not self.nodes:
            raise ValueError(
                "spine node needs a path, cover_page, nav_page or child nodes"
            )
        return self

    @property
    def kind(self) -> SpineKind:
        if self.path:
            return SpineKind.PAGE
        if self.cover_page:
            return SpineKind.COVER_PAGE
        if self.nav_page:
            return SpineKind.NAV_PAGE
        return SpineKind.GROUP

    @property
    def source(self) -> str | None:
        """Path the node reads from, if any."""
        return self.path or self.cover_page

    @classmethod
    def coerce(cls, node: "SpineNode") -> "SpineItem":
        """Turn a bare content path into a page node."""
        if isinstance(node, str):
            return cls(path=node)
        return node


SpineNode = Union[str, SpineItem]
SpineItem.model_rebuild()


class BookConfig(BaseModel):
    """Book configuration as loaded from epub-builder.{yaml,json}."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    author: str
    title: str
    lang: str
    spine: list[SpineNode]
    uuid: str | None = None
    publisher: str | None = None
    cover: str | None = None
    no_title: str = "No Title"
    cover_title: str = "Cover"
    nav_title: str = "Navigation"
    media_folder: str | None = None

    @model_validator(mode="after")
    def check_reserved_paths(self) -> "BookConfig":
        for path in _config_paths(self):
            if path in RESERVED_PATHS:
                raise ValueError(
                    f"{path} is reserved for a generated file, rename the source"
                )
        return self


def _config_paths(config: BookConfig) -> list[str]:
    """Archive paths the config asks to store, recursing into the spine."""
    paths = [config.cover] if config.cover else []
    pending = list(config.spine)
    while pending:
        node = SpineItem.coerce(pending.pop())
        if node.path:
            paths.append(node.path)
            if node.path.lower().endswith(MARKDOWN_SUFFIXES):
                paths.append(f"{node.path}.xhtml")
        if node.cover_page:
            paths.append(node.cover_page)
        pending.extend(node.nodes)
    return paths
