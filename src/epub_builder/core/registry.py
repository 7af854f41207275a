"""Resource registry backing the package manifest."""

import logging
from collections.abc import Iterator

from epub_builder.errors import BuildError, DuplicateIdError
from epub_builder.models.package import ManifestEntry

log = logging.getLogger(__name__)


class IdAllocator:
    """Hands out manifest ids, skipping any already taken explicitly."""

    PREFIX = "id"

    def __init__(self):
        self._used: set[str] = set()
        self._next = 1

    def __contains__(self, item_id: str) -> bool:
        return item_id in self._used

    def claim(self, item_id: str) -> str:
        """Mark an explicit id as used."""
        self._used.add(item_id)
        return item_id

    def allocate(self) -> str:
        """Return the next free ``id<n>``."""
        while f"{self.PREFIX}{self._next}" in self._used:
            self._next += 1
        item_id = self.claim(f"{self.PREFIX}{self._next}")
        self._next += 1
        return item_id


class ResourceRegistry:
    """Insertion-ordered map of archive path -> manifest entry.

    Registration is insert-if-absent: a path keeps the id and content it was
    first registered with, so the same file can be referenced from several
    spine nodes and still be stored once.
    """

    def __init__(self):
        self._entries: dict[str, ManifestEntry] = {}
        self._owners: dict[str, str] = {}  # id -> path
        self._ids = IdAllocator()

    def register(
        self,
        path: str,
        content: bytes | str | None,
        id: str | None = None,
        properties: str | None = None,
    ) -> str:
        """Register ``path`` unless already present and return its id.

        Args:
            path: Archive path of the resource
            content: Body to write, or None when it is supplied later
            id: Explicit manifest id (auto-allocated when omitted)
            properties: Manifest ``properties`` value

        Raises:
            DuplicateIdError: If ``id`` already belongs to another path
        """
        return self.get_or_insert(path, content, id=id, properties=properties).id

    def get_or_insert(
        self,
        path: str,
        content: bytes | str | None,
        id: str | None = None,
        properties: str | None = None,
    ) -> ManifestEntry:
        existing = self._entries.get(path)
        if existing is not None:
            log.debug("Reusing %s for %s", existing.id, path)
            return existing

        if id is None:
            item_id = self._ids.allocate()
        elif id in self._ids:
            raise DuplicateIdError(id, path, self._owners.get(id, "an earlier resource"))
        else:
            item_id = self._ids.claim(id)

        entry = ManifestEntry(id=item_id, content=content, properties=properties)
        self._entries[path] = entry
        self._owners[item_id] = path
        log.debug("Registered %s as %s", path, item_id)
        return entry

    def fill(self, path: str, content: bytes | str) -> None:
        """Supply the body of an entry registered without content."""
        entry = self._entries.get(path)
        if entry is None:
            raise BuildError(f"Cannot fill unregistered resource: {path}")
        if entry.content is not None:
            raise BuildError(f"Resource already has content: {path}")
        entry.content = content

    def get(self, path: str) -> ManifestEntry | None:
        return self._entries.get(path)

    def items(self) -> Iterator[tuple[str, ManifestEntry]]:
        return iter(self._entries.items())

    def __contains__(self, path: str) -> bool:
        return path in self._entries

    def __len__(self) -> int:
        return len(self._entries)
