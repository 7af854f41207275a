"""Data models."""

from epub_builder.models.config import (
    BookConfig,
    SpineItem,
    SpineKind,
    SpineNode,
)
from epub_builder.models.package import (
    ManifestEntry,
    NavNode,
    PageRef,
)

__all__ = [
    # Config models
    "BookConfig",
    "SpineItem",
    "SpineKind",
    "SpineNode",
    # Package models
    "ManifestEntry",
    "NavNode",
    "PageRef",
]
