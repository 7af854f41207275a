"""Markdown rendering, XHTML normalization and page templating."""

import warnings
from html import escape
from textwrap import dedent

import markdown
from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning

# Source pages are often XHTML; lxml's HTML parser handles them fine
warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)

TITLE_SELECTORS = ["title", "h1", "h2", "h3", "h4", "h5"]
DEFAULT_NO_TITLE = "No Title"

MARKDOWN_EXTENSIONS = ["tables", "fenced_code"]

PAGE_TEMPLATE = """\
<?xml version='1.0' encoding='utf-8'?>
<html xmlns:epub="http://www.idpf.org/2007/ops" xmlns="http://www.w3.org/1999/xhtml" xml:lang="{lang}">
  <head>
    <title>{title}</title>
{head}
    <meta http-equiv="Content-Type" content="text/html; charset=utf-8"/>
  </head>
  <body>
{body}
  </body>
</html>
"""


def render_markdown(source: str) -> str:
    """Render Markdown source to an HTML fragment."""
    return markdown.markdown(source, extensions=MARKDOWN_EXTENSIONS)


def to_xhtml(fragment: str) -> str:
    """Normalize a lenient HTML fragment into well-formed XHTML.

    Void elements are self-closed, attributes quoted and named entities
    replaced by their characters. Parsed with html.parser so nothing is
    moved into an implied <head>.
    """
    soup = BeautifulSoup(fragment, "html.parser")
    return soup.decode_contents(formatter="minimal")


def query_title(markup: str | bytes, fallback: str | None = None) -> str:
    """Find a page title in markup.

    Looks for ``<title>``, then ``<h1>`` through ``<h5>``, and returns the
    first non-empty text. Falls back to ``fallback`` (or "No Title").
    """
    soup = BeautifulSoup(markup, "lxml")
    for tag in TITLE_SELECTORS:
        for element in soup.find_all(tag):
            text = element.get_text().strip()
            if text:
                return text
    return fallback or DEFAULT_NO_TITLE


def render_page(title: str, head: str, body: str, lang: str) -> str:
    """Wrap head and body markup in the XHTML page template."""
    return PAGE_TEMPLATE.format(
        lang=escape(lang),
        title=escape(title, quote=False),
        head=dedent(head).strip(),
        body=body.strip(),
    )
