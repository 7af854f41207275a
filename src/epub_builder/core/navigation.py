"""Render the navigation document."""

from html import escape

from epub_builder.core.markup import render_page
from epub_builder.models.package import NavNode


def render_nav_list(nav: list[NavNode], depth: int = 0) -> str:
    """Render a nav forest as nested ``<ol>`` markup."""
    pad = "  " * depth
    lines = [f"{pad}<ol>"]
    for node in nav:
        if node.href:
            label = f'<a href="{escape(node.href)}">{escape(node.title, quote=False)}</a>'
        else:
            label = f"<span>{escape(node.title, quote=False)}</span>"
        if node.children:
            lines.append(f"{pad}  <li>{label}")
            lines.append(render_nav_list(node.children, depth + 2))
            lines.append(f"{pad}  </li>")
        else:
            lines.append(f"{pad}  <li>{label}</li>")
    lines.append(f"{pad}</ol>")
    return "\n".join(lines)


def render_nav(nav: list[NavNode], title: str, lang: str, head: str = "") -> str:
    """Render the full ``nav.xhtml`` page."""
    body = "\n".join(
        [
            '<nav epub:type="toc" id="toc">',
            render_nav_list(nav, depth=1),
            "</nav>",
        ]
    )
    return render_page(title=title, head=head, body=body, lang=lang)
