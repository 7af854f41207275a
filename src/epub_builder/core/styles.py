"""Fixed stylesheets shared by every generated page."""

from epub_builder.core.registry import ResourceRegistry

PAGE_STYLES_PATH = "page-styles.css"
STYLESHEET_PATH = "stylesheet.css"

PAGE_STYLES = """\
@page {
  margin-bottom: 5pt;
  margin-top: 5pt;
}
"""

STYLESHEET = """\
rt {
  user-select: none;
  -webkit-user-select: none;
}
img {
  max-width: 100%;
  height: auto;
}
table {
  border-collapse: collapse;
}
table, th, td {
  border: 1px solid;
}
"""

STYLE_LINKS = f"""\
<link href="{PAGE_STYLES_PATH}" rel="stylesheet" type="text/css"/>
<link href="{STYLESHEET_PATH}" rel="stylesheet" type="text/css"/>
"""


def register_styles(registry: ResourceRegistry) -> str:
    """Register both stylesheets and return the head links for them."""
    registry.register(PAGE_STYLES_PATH, PAGE_STYLES, id="page-styles")
    registry.register(STYLESHEET_PATH, STYLESHEET, id="stylesheet")
    return STYLE_LINKS
