"""Media type inference for manifest items."""

import mimetypes
from pathlib import PurePosixPath

# EPUB 3 core media types, checked before the platform mimetypes table
CORE_MEDIA_TYPES = {
    ".xhtml": "application/xhtml+xml",
    ".html": "application/xhtml+xml",
    ".htm": "application/xhtml+xml",
    ".css": "text/css",
    ".js": "application/javascript",
    ".ncx": "application/x-dtbncx+xml",
    ".svg": "image/svg+xml",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".webp": "image/webp",
    ".mp3": "audio/mpeg",
    ".m4a": "audio/mp4",
    ".mp4": "video/mp4",
    ".ttf": "font/ttf",
    ".otf": "font/otf",
    ".woff": "font/woff",
    ".woff2": "font/woff2",
    ".smil": "application/smil+xml",
    ".pls": "application/pls+xml",
}


def guess_media_type(path: str) -> str | None:
    """Infer a media type from a file name, or None if unknown."""
    suffix = PurePosixPath(path).suffix.lower()
    if suffix in CORE_MEDIA_TYPES:
        return CORE_MEDIA_TYPES[suffix]
    media_type, _ = mimetypes.guess_type(path, strict=False)
    return media_type
