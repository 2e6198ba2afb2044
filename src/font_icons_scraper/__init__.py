"""
Scrape icon webfonts referenced by a stylesheet into standalone SVG files.
"""

from .config import Settings, __version__
from .errors import DecodeError, ResolutionError, ScraperError, TransportError
from .extract_glyphs import GlyphOutline, IconRecord, PathCommand, WebFont, extract_glyph, font_to_svg, iter_glyph_outlines
from .fetch import HttpFetcher
from .geometry import OUTPUT_DIM, BBox, CoordinateRemapper, Rect, Vector, pad_to_square
from .pipeline import CrawlReport, CrawlTask, Crawler, UnitResult, scrape_font_icons
from .stylesheet import (
    SUPPORTED_FONT_EXTENSION,
    Stylesheet,
    extract_font_urls,
    extract_import_urls,
    normalize_font_name,
    resolve_url,
    url_extension,
)

__all__ = [
    "__version__",
    "Settings",
    "ScraperError",
    "TransportError",
    "DecodeError",
    "ResolutionError",
    "GlyphOutline",
    "IconRecord",
    "PathCommand",
    "WebFont",
    "extract_glyph",
    "font_to_svg",
    "iter_glyph_outlines",
    "HttpFetcher",
    "OUTPUT_DIM",
    "BBox",
    "CoordinateRemapper",
    "Rect",
    "Vector",
    "pad_to_square",
    "CrawlReport",
    "CrawlTask",
    "Crawler",
    "UnitResult",
    "scrape_font_icons",
    "SUPPORTED_FONT_EXTENSION",
    "Stylesheet",
    "extract_font_urls",
    "extract_import_urls",
    "normalize_font_name",
    "resolve_url",
    "url_extension",
]
