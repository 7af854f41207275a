import io
import zipfile
from pathlib import Path

import pytest
from lxml import etree
from PIL import Image

from epub_builder.models.config import BookConfig

OPF_NS = {"opf": "http://www.idpf.org/2007/opf", "dc": "http://purl.org/dc/elements/1.1/"}
XHTML_NS = {"x": "http://www.w3.org/1999/xhtml"}


def make_config(**overrides) -> BookConfig:
    data = {
        "author": "Jane Doe",
        "title": "Test Book",
        "lang": "en",
        "spine": [],
    }
    data.update(overrides)
    return BookConfig.model_validate(data)


def write_image(path: Path, size: tuple[int, int], fmt: str = "JPEG") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGB", size, color=(200, 30, 30)).save(path, fmt)
    return path


def read_archive(data: bytes) -> dict[str, bytes]:
    with zipfile.ZipFile(io.BytesIO(data)) as zf:
        return {name: zf.read(name) for name in zf.namelist()}


def parse_xml(data: bytes | str) -> etree._Element:
    if isinstance(data, str):
        data = data.encode("utf-8")
    return etree.fromstring(data)


@pytest.fixture
def book_dir(tmp_path: Path) -> Path:
    """Source tree with a handful of Markdown chapters."""
    (tmp_path / "alpha.md").write_text("# Alpha\n\nFirst chapter.\n", encoding="utf-8")
    (tmp_path / "beta.md").write_text("# Beta\n\nSecond.\n", encoding="utf-8")
    (tmp_path / "gamma.md").write_text("## Gamma\n\nThird.\n", encoding="utf-8")
    (tmp_path / "delta.md").write_text("# Delta\n", encoding="utf-8")
    (tmp_path / "epsilon.md").write_text("# Epsilon\n", encoding="utf-8")
    (tmp_path / "plain.md").write_text("Just a paragraph, no heading.\n", encoding="utf-8")
    return tmp_path
