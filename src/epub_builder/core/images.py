"""Image probing."""

from pathlib import Path

from PIL import Image


def image_size(path: Path) -> tuple[int, int]:
    """Return (width, height) of an image in pixels."""
    with Image.open(path) as img:
        return img.size
