"""Stylesheet color extraction package.

Finds every color usage in raw CSS text (keyword colors, RGB triple custom
properties, hex / rgb() / hsl() literals) and reports each one with its owning
property, enclosing selector and canonical hex value.
"""

from .extractor import (  # noqa: F401
    extract_colors,
    extract_from_stylesheets,
    extract_colors_from_html,
    summarize_palette,
)
from .tracker import DeduplicationTracker  # noqa: F401
from .rgb_triples import scan_rgb_triples  # noqa: F401
from .named_colors import scan_named_colors  # noqa: F401
from .literals import scan_literals  # noqa: F401

__all__ = [
    "extract_colors",
    "extract_from_stylesheets",
    "extract_colors_from_html",
    "summarize_palette",
    "DeduplicationTracker",
    "scan_rgb_triples",
    "scan_named_colors",
    "scan_literals",
]
