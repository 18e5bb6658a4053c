"""Application layer - the demo catalog and the scenarios it runs."""

from pattern_gallery.application.catalog import (
    DemoCatalog,
    DemoResult,
    PatternCategory,
    PatternDemo,
)
from pattern_gallery.application.demos import build_default_catalog

__all__ = [
    "DemoCatalog",
    "DemoResult",
    "PatternCategory",
    "PatternDemo",
    "build_default_catalog",
]
