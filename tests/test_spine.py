from pathlib import Path

import pytest
from conftest import make_config, write_image

from epub_builder.core.pages import PageGenerator
from epub_builder.core.registry import ResourceRegistry
from epub_builder.core.spine import SpineWalker
from epub_builder.models.package import NavNode


def walk(book_dir: Path, spine: list, **config_overrides) -> tuple[list[str], list[NavNode], ResourceRegistry]:
    config = make_config(spine=spine, **config_overrides)
    registry = ResourceRegistry()
    walker = SpineWalker(config, registry, PageGenerator(config, registry, book_dir))
    nav: list[NavNode] = []
    spine_ids = walker.walk(config.spine, nav)
    return spine_ids, nav, registry


def outline(nav: list[NavNode]) -> list:
    return [(node.title, node.href, outline(node.children)) for node in nav]


def test_spine_is_preorder_and_nav_mirrors_nesting(book_dir):
    spine_ids, nav, _ = walk(
        book_dir,
        [
            "alpha.md",
            {
                "path": "beta.md",
                "nodes": [
                    "gamma.md",
                    {"path": "delta.md", "nav": False, "nodes": ["epsilon.md"]},
                ],
            },
            {"nav_page": True},
        ],
    )

    assert spine_ids == ["id1", "id2", "id3", "id4", "id5", "nav"]
    # epsilon hangs under beta because delta is left out of the nav
    assert outline(nav) == [
        ("Alpha", "alpha.md.xhtml", []),
        (
            "Beta",
            "beta.md.xhtml",
            [
                ("Gamma", "gamma.md.xhtml", []),
                ("Epsilon", "epsilon.md.xhtml", []),
            ],
        ),
        ("Navigation", "nav.xhtml", []),
    ]


def test_excluded_top_level_node_hoists_children(book_dir):
    spine_ids, nav, _ = walk(
        book_dir,
        [{"path": "alpha.md", "nav": False, "nodes": ["beta.md"]}, "gamma.md"],
    )

    assert spine_ids == ["id1", "id2", "id3"]
    assert [node.title for node in nav] == ["Beta", "Gamma"]


def test_explicit_title_and_anchor(book_dir):
    _, nav, _ = walk(
        book_dir,
        [{"path": "alpha.md", "title": "Opening", "anchor": "part-2"}],
    )

    assert outline(nav) == [("Opening", "alpha.md.xhtml#part-2", [])]


def test_markdown_without_heading_uses_no_title(book_dir):
    _, nav, _ = walk(book_dir, ["plain.md"])
    assert nav[0].title == "No Title"

    _, nav, _ = walk(book_dir, ["plain.md"], no_title="Untitled")
    assert nav[0].title == "Untitled"


def test_binary_page_title_falls_back_to_file_name(book_dir):
    write_image(book_dir / "images" / "map.png", (10, 10), "PNG")

    spine_ids, nav, registry = walk(book_dir, ["images/map.png"])

    assert spine_ids == ["id1"]
    assert outline(nav) == [("map", "images/map.png", [])]
    assert isinstance(registry.get("images/map.png").content, bytes)


def test_html_page_keeps_path_and_queries_title(book_dir):
    (book_dir / "page.html").write_text(
        "<html><head><title>From HTML</title></head><body/></html>",
        encoding="utf-8",
    )

    _, nav, registry = walk(book_dir, ["page.html"])

    assert outline(nav) == [("From HTML", "page.html", [])]
    assert "page.html" in registry
    assert "page.html.xhtml" not in registry


def test_markdown_source_is_stored_beside_original(book_dir):
    _, _, registry = walk(book_dir, ["alpha.md"])

    assert "alpha.md" not in registry
    content = registry.get("alpha.md.xhtml").content
    assert "<title>Alpha</title>" in content
    assert "<h1>Alpha</h1>" in content


def test_same_file_twice_is_registered_once(book_dir):
    spine_ids, nav, registry = walk(book_dir, ["alpha.md", "alpha.md"])

    assert spine_ids == ["id1", "id1"]
    assert len(registry) == 1
    assert len(nav) == 2


def test_grouping_node_with_title_gets_plain_nav_entry(book_dir):
    spine_ids, nav, _ = walk(
        book_dir,
        [{"title": "Part One", "nodes": ["alpha.md", "beta.md"]}],
    )

    assert spine_ids == ["id1", "id2"]
    assert outline(nav) == [
        (
            "Part One",
            None,
            [("Alpha", "alpha.md.xhtml", []), ("Beta", "beta.md.xhtml", [])],
        )
    ]


def test_untitled_grouping_node_hoists_children(book_dir):
    spine_ids, nav, _ = walk(book_dir, [{"nodes": ["alpha.md"]}])

    assert spine_ids == ["id1"]
    assert outline(nav) == [("Alpha", "alpha.md.xhtml", [])]


def test_cover_page_node(book_dir):
    write_image(book_dir / "cover.jpg", (600, 800))

    spine_ids, nav, registry = walk(
        book_dir, [{"cover_page": "cover.jpg"}], cover_title="Front"
    )

    assert spine_ids == ["cover-page"]
    assert outline(nav) == [("Front", "cover_page.xhtml", [])]
    entry = registry.get("cover_page.xhtml")
    assert entry.properties == "svg"
    assert 'viewBox="0 0 600 800"' in entry.content
    assert 'xlink:href="cover.jpg"' in entry.content


def test_nav_page_reserves_slot_without_body(book_dir):
    spine_ids, _, registry = walk(book_dir, [{"nav_page": True, "title": "Contents"}])

    assert spine_ids == ["nav"]
    entry = registry.get("nav.xhtml")
    assert entry.content is None
    assert entry.properties == "nav"


def test_missing_source_file_propagates(book_dir):
    with pytest.raises(FileNotFoundError):
        walk(book_dir, ["missing.md"])
