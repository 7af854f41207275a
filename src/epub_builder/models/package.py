"""Data models for the package being assembled."""

from pydantic import BaseModel, Field


class ManifestEntry(BaseModel):
    """Registered resource. ``content=None`` means no body is written."""

    id: str
    content: bytes | str | None = None
    properties: str | None = None


class NavNode(BaseModel):
    """Single entry in the navigation document."""

    title: str
    href: str | None = None
    children: list["NavNode"] = Field(default_factory=list)


class PageRef(BaseModel):
    """Registered spine page."""

    id: str
    title: str | None = None
    href: str
