"""Fixtures shared by the tests: in-memory fonts and an in-memory fetcher."""

from __future__ import annotations

import io
from collections import Counter
from typing import Dict, List, Sequence, Tuple, Union

from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import TTFont
from fontTools.ttLib.tables._g_l_y_f import Glyph, GlyphComponent

from font_icons_scraper.errors import TransportError

Contour = Sequence[Tuple[int, int]]

SQUARE = [[(0, 0), (0, 1000), (1000, 1000), (1000, 0)]]
WIDE = [[(0, 250), (0, 750), (1000, 750), (1000, 250)]]
BAR = [[(500, 0), (500, 1000)]]


def build_font(glyphs: Dict[str, List[Contour]]) -> bytes:
    """Compile a TrueType font with straight-line contours; empty lists give empty glyphs."""
    glyph_order = [".notdef"] + list(glyphs)
    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap({0xF000 + i: name for i, name in enumerate(glyphs)})

    drawn = {}
    for name in glyph_order:
        pen = TTGlyphPen(None)
        for contour in glyphs.get(name, []):
            pen.moveTo(contour[0])
            for point in contour[1:]:
                pen.lineTo(point)
            pen.closePath()
        drawn[name] = pen.glyph()
    fb.setupGlyf(drawn)

    glyph_table = fb.font["glyf"]
    fb.setupHorizontalMetrics(
        {name: (1000, getattr(glyph_table[name], "xMin", 0)) for name in glyph_order}
    )
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": "Icons", "styleName": "Regular"})
    fb.setupOS2()
    fb.setupPost()

    buf = io.BytesIO()
    fb.save(buf)
    return buf.getvalue()


def make_self_referencing(data: bytes, name: str) -> bytes:
    """Replace glyph ``name`` with a composite whose only component is itself."""
    font = TTFont(io.BytesIO(data), recalcBBoxes=False)
    component = GlyphComponent()
    component.glyphName = name
    component.x = component.y = 0
    component.flags = 0
    glyph = Glyph()
    glyph.numberOfContours = -1
    glyph.components = [component]
    glyph.xMin = glyph.yMin = glyph.xMax = glyph.yMax = 0
    font["glyf"][name] = glyph

    buf = io.BytesIO()
    font.save(buf)
    return buf.getvalue()


class FakeFetcher:
    """Serves canned stylesheets and fonts; unknown URLs fail like a 404."""

    def __init__(self, resources: Dict[str, Union[str, bytes]]) -> None:
        self.resources = resources
        self.requests: List[str] = []

    def _lookup(self, url: str):
        self.requests.append(url)
        if url not in self.resources:
            raise TransportError(url, "HTTP 404", status_code=404)
        return self.resources[url]

    def fetch_text(self, url: str) -> str:
        return self._lookup(url)

    def fetch_bytes(self, url: str) -> bytes:
        return self._lookup(url)

    @property
    def counts(self) -> Counter:
        return Counter(self.requests)


class StubFont:
    """Decoder stand-in: each glyph is ``(name, bbox or None, draw callback)``."""

    def __init__(self, glyphs) -> None:
        self.glyphs = list(glyphs)
        self.outline_calls = Counter()

    @property
    def glyph_count(self) -> int:
        return len(self.glyphs)

    def glyph_name(self, index: int):
        return self.glyphs[index][0]

    def outline(self, index: int, pen):
        self.outline_calls[index] += 1
        _, bbox, draw = self.glyphs[index]
        if bbox is None:
            return None
        draw(pen)
        return bbox
