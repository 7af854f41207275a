"""Render the package description document (content.opf)."""

import logging
from datetime import datetime, timezone

from lxml import etree

from epub_builder.core.media_types import guess_media_type
from epub_builder.core.registry import ResourceRegistry
from epub_builder.models.config import BookConfig

log = logging.getLogger(__name__)

PACKAGE_PATH = "content.opf"
UNIQUE_IDENTIFIER = "uuid_id"
FALLBACK_MEDIA_TYPE = "application/octet-stream"

OPF_NS = "http://www.idpf.org/2007/opf"
DC_NS = "http://purl.org/dc/elements/1.1/"
DCTERMS_NS = "http://purl.org/dc/terms/"


def _opf(tag: str) -> str:
    return f"{{{OPF_NS}}}{tag}"


def _dc(tag: str) -> str:
    return f"{{{DC_NS}}}{tag}"


def _text(parent: etree._Element, tag: str, text: str, **attrib: str) -> etree._Element:
    element = etree.SubElement(parent, tag, attrib)
    element.text = text
    return element


def manifest_media_type(path: str) -> str:
    """Media type for a manifest item, falling back to octet-stream."""
    media_type = guess_media_type(path)
    if media_type is None:
        log.warning("Unknown media type for %s, listing as %s", path, FALLBACK_MEDIA_TYPE)
        return FALLBACK_MEDIA_TYPE
    return media_type


def render_package(
    config: BookConfig,
    registry: ResourceRegistry,
    spine: list[str],
    book_uuid: str,
    modified: datetime | None = None,
) -> bytes:
    """Serialize metadata, manifest and spine into content.opf."""
    modified = (modified or datetime.now(timezone.utc)).astimezone(timezone.utc)

    package = etree.Element(
        _opf("package"),
        {"unique-identifier": UNIQUE_IDENTIFIER, "version": "3.0"},
        nsmap={None: OPF_NS},
    )

    metadata = etree.SubElement(
        package,
        _opf("metadata"),
        nsmap={"dc": DC_NS, "dcterms": DCTERMS_NS},
    )
    _text(metadata, _dc("title"), config.title)
    _text(metadata, _dc("creator"), config.author)
    _text(metadata, _dc("identifier"), f"uuid:{book_uuid}")
    _text(metadata, _dc("identifier"), f"uuid:{book_uuid}", id=UNIQUE_IDENTIFIER)
    _text(metadata, _dc("language"), config.lang)
    _text(metadata, _dc("date"), modified.isoformat())
    _text(
        metadata,
        _opf("meta"),
        modified.strftime("%Y-%m-%dT%H:%M:%SZ"),
        property="dcterms:modified",
    )
    if config.publisher:
        _text(metadata, _dc("publisher"), config.publisher)
    if config.cover:
        etree.SubElement(metadata, _opf("meta"), {"name": "cover", "content": "cover"})

    manifest = etree.SubElement(package, _opf("manifest"))
    for path, entry in registry.items():
        attrib = {
            "id": entry.id,
            "href": path,
            "media-type": manifest_media_type(path),
        }
        if entry.properties:
            attrib["properties"] = entry.properties
        etree.SubElement(manifest, _opf("item"), attrib)

    spine_element = etree.SubElement(package, _opf("spine"))
    for item_id in spine:
        etree.SubElement(spine_element, _opf("itemref"), {"idref": item_id})

    return etree.tostring(
        package, xml_declaration=True, encoding="utf-8", pretty_print=True
    )
