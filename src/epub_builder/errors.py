"""Exceptions raised while building a book."""


class BuildError(Exception):
    """Base class for errors raised by the builder itself."""

    pass


class ConfigError(BuildError):
    """Raised when the book config is missing, unreadable or invalid."""

    pass


class DuplicateIdError(BuildError):
    """Raised when an explicit manifest id is already owned by another path."""

    def __init__(self, item_id: str, path: str, owner: str):
        super().__init__(
            f"Manifest id '{item_id}' for {path} is already used by {owner}"
        )
        self.item_id = item_id
        self.path = path
        self.owner = owner
