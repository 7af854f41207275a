from conftest import XHTML_NS, parse_xml

from epub_builder.core.navigation import render_nav, render_nav_list
from epub_builder.models.package import NavNode

EPUB_TYPE = "{http://www.idpf.org/2007/ops}type"


def sample_forest() -> list[NavNode]:
    return [
        NavNode(title="Intro", href="intro.md.xhtml"),
        NavNode(
            title="Part <One>",
            children=[
                NavNode(title="Q & A", href="qa.html#top"),
                NavNode(title="Deep", href="deep.md.xhtml", children=[
                    NavNode(title="Deeper", href="deeper.md.xhtml"),
                ]),
            ],
        ),
    ]


def test_nav_list_nests_children():
    root = parse_xml(render_nav_list(sample_forest()))

    items = root.findall("li")
    assert len(items) == 2
    assert items[0].find("a").get("href") == "intro.md.xhtml"
    assert items[0].find("a").text == "Intro"
    assert items[0].find("ol") is None

    # No href renders plain text
    assert items[1].find("a") is None
    assert items[1].find("span").text == "Part <One>"
    nested = items[1].find("ol").findall("li")
    assert [li.find("a").text for li in nested] == ["Q & A", "Deep"]
    assert nested[0].find("a").get("href") == "qa.html#top"
    assert nested[1].find("ol/li/a").text == "Deeper"


def test_nav_document_is_toc_landmark():
    page = render_nav(
        sample_forest(),
        title="Contents",
        lang="en",
        head='<link href="stylesheet.css" rel="stylesheet" type="text/css"/>',
    )
    root = parse_xml(page)

    assert root.find("x:head/x:title", XHTML_NS).text == "Contents"
    nav = root.find("x:body/x:nav", XHTML_NS)
    assert nav.get(EPUB_TYPE) == "toc"
    assert len(nav.findall("x:ol/x:li", XHTML_NS)) == 2
    assert root.find("x:head/x:link", XHTML_NS).get("href") == "stylesheet.css"


def test_empty_forest_renders_empty_list():
    root = parse_xml(render_nav_list([]))
    assert root.tag == "ol"
    assert len(root) == 0
