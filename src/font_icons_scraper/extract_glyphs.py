"""Glyph outline extraction: webfont bytes in, square SVG icons out."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Protocol, Sequence, Tuple

from fontTools.pens.basePen import BasePen, NullPen
from fontTools.pens.boundsPen import ControlBoundsPen
from fontTools.pens.recordingPen import DecomposingRecordingPen
from fontTools.ttLib import TTFont

from .errors import DecodeError
from .geometry import OUTPUT_DIM, BBox, CoordinateRemapper

logger = logging.getLogger(__name__)

Point = Tuple[float, float]

SVG_TEMPLATE = """<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {dim} {dim}">
  <path d="{path_data}" />
</svg>"""


def format_number(value: float) -> str:
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


@dataclass(frozen=True)
class PathCommand:
    op: str
    args: Tuple[float, ...] = ()

    def to_svg(self) -> str:
        return " ".join([self.op, *(format_number(v) for v in self.args)])


@dataclass
class GlyphOutline:
    index: int
    name: str
    bbox: BBox
    commands: List[PathCommand] = field(default_factory=list)

    @property
    def path_data(self) -> str:
        return " ".join(command.to_svg() for command in self.commands)

    def to_svg(self, dim: float = OUTPUT_DIM) -> str:
        return SVG_TEMPLATE.format(dim=format_number(dim), path_data=self.path_data)


@dataclass(frozen=True)
class IconRecord:
    name: str
    svg: str
    font_url: str = ""
    glyph_index: int = -1
    glyph_name: str = ""


class OutlineSource(Protocol):
    """What the extractor needs from a decoded font."""

    @property
    def glyph_count(self) -> int: ...

    def glyph_name(self, index: int) -> str | None: ...

    def outline(self, index: int, pen) -> BBox | None: ...


class WebFont:
    """Thin wrapper around a fontTools ``TTFont`` exposing glyphs by index."""

    def __init__(self, font: TTFont, url: str | None = None) -> None:
        self.font = font
        self.url = url
        self._glyph_order: Sequence[str] = font.getGlyphOrder()
        self._glyph_set = font.getGlyphSet()

    @classmethod
    def decode(cls, data: bytes, url: str | None = None) -> "WebFont":
        try:
            font = TTFont(io.BytesIO(data), lazy=False)
            font.ensureDecompiled()
            return cls(font, url=url)
        except Exception as exc:
            raise DecodeError(url, f"unable to decode font: {exc}") from exc

    @property
    def glyph_count(self) -> int:
        return len(self._glyph_order)

    def glyph_name(self, index: int) -> str | None:
        if 0 <= index < len(self._glyph_order):
            return self._glyph_order[index]
        return None

    def outline(self, index: int, pen) -> BBox | None:
        """Draw glyph ``index`` into ``pen``; return its control bounds or None if empty."""
        name = self._glyph_order[index]
        recording = DecomposingRecordingPen(self._glyph_set)
        try:
            self._glyph_set[name].draw(recording)
        except Exception as exc:
            raise DecodeError(self.url, f"unable to draw glyph {name!r}: {exc!r}") from exc

        bounds_pen = ControlBoundsPen(None)
        recording.replay(bounds_pen)
        if bounds_pen.bounds is None:
            return None

        recording.replay(pen)
        return BBox(*bounds_pen.bounds)


class RemappingPen(BasePen):
    """Collects path commands with every point routed through a remapper.

    TrueType quadratic runs with several off-curve points arrive here already
    split into single segments by ``BasePen``.
    """

    def __init__(self, remapper: CoordinateRemapper) -> None:
        super().__init__(glyphSet=None)
        self.remapper = remapper
        self.commands: List[PathCommand] = []

    def _emit(self, op: str, *points: Point) -> None:
        args: List[float] = []
        for x, y in points:
            args.extend(self.remapper.remap(x, y))
        self.commands.append(PathCommand(op, tuple(args)))

    def _moveTo(self, pt):
        self._emit("M", pt)

    def _lineTo(self, pt):
        self._emit("L", pt)

    def _qCurveToOne(self, pt1, pt2):
        self._emit("Q", pt1, pt2)

    def _curveToOne(self, pt1, pt2, pt3):
        self._emit("C", pt1, pt2, pt3)

    def _closePath(self):
        self.commands.append(PathCommand("Z"))

    def _endPath(self):
        pass


def extract_glyph(font: OutlineSource, index: int) -> GlyphOutline | None:
    bbox = font.outline(index, NullPen())
    if bbox is None:
        return None

    name = font.glyph_name(index) or f"glyph{index}"
    try:
        remapper = CoordinateRemapper.for_bbox(bbox)
    except ValueError:
        logger.debug("glyph %s has zero-size bounds %s, emitting empty path", name, bbox)
        return GlyphOutline(index=index, name=name, bbox=bbox)

    pen = RemappingPen(remapper)
    if font.outline(index, pen) is None:
        return None
    return GlyphOutline(index=index, name=name, bbox=bbox, commands=pen.commands)


def iter_glyph_outlines(font: OutlineSource) -> Iterator[GlyphOutline]:
    for index in range(font.glyph_count):
        glyph = extract_glyph(font, index)
        if glyph is not None:
            yield glyph


def font_to_svg(font: OutlineSource) -> List[Tuple[str, str]]:
    """Return ``(glyph_name, svg_markup)`` for every glyph with an outline."""
    return [(glyph.name, glyph.to_svg()) for glyph in iter_glyph_outlines(font)]
