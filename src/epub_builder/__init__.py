"""Build EPUB 3 books from a declarative YAML/JSON spine."""

__version__ = "0.1.0"
