"""Write the EPUB zip container."""

import io
import logging
import zipfile

from epub_builder.core.package import PACKAGE_PATH
from epub_builder.core.registry import ResourceRegistry

log = logging.getLogger(__name__)

MIMETYPE_ENTRY = "mimetype"
MIMETYPE = "application/epub+zip"
CONTAINER_PATH = "META-INF/container.xml"

CONTAINER_XML = f"""\
<?xml version="1.0"?>
<container version="1.0" xmlns="urn:oasis:names:tc:opendocument:xmlns:container">
  <rootfiles>
    <rootfile full-path="{PACKAGE_PATH}" media-type="application/oebps-package+xml"/>
  </rootfiles>
</container>
"""


def assemble(package_document: bytes, registry: ResourceRegistry) -> bytes:
    """Zip the package in memory and return the archive bytes.

    ``mimetype`` is written first and uncompressed; entries registered
    without content are skipped.
    """
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as zf:
        zf.writestr(MIMETYPE_ENTRY, MIMETYPE, compress_type=zipfile.ZIP_STORED)
        zf.writestr(CONTAINER_PATH, CONTAINER_XML)
        zf.writestr(PACKAGE_PATH, package_document)

        written = 0
        for path, entry in registry.items():
            if entry.content is None:
                log.debug("No body for %s, skipping", path)
                continue
            zf.writestr(path, entry.content)
            written += 1

    log.info("Assembled %d resource(s) into archive", written)
    return buffer.getvalue()

