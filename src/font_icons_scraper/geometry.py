from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

OUTPUT_DIM = 512.0


@dataclass(frozen=True)
class Vector:
    x: float = 0.0
    y: float = 0.0

    def into_absolute_rect(self) -> "Rect":
        return Rect(start=Vector(), end=self)


@dataclass(frozen=True)
class Rect:
    start: Vector
    end: Vector

    @property
    def width(self) -> float:
        return self.end.x - self.start.x

    @property
    def height(self) -> float:
        return self.end.y - self.start.y


@dataclass(frozen=True)
class BBox:
    """Glyph bounds in font units (y up)."""

    x_min: float
    y_min: float
    x_max: float
    y_max: float

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min


def pad_to_square(bbox: BBox) -> Rect:
    """Grow the shorter axis of ``bbox`` evenly on both sides so width == height."""
    max_dim = max(bbox.width, bbox.height)
    padding_x = (max_dim - bbox.width) / 2.0
    padding_y = (max_dim - bbox.height) / 2.0
    return Rect(
        start=Vector(bbox.x_min - padding_x, bbox.y_min - padding_y),
        end=Vector(bbox.x_max + padding_x, bbox.y_max + padding_y),
    )


class CoordinateRemapper:
    """Maps font-unit points into the output canvas, flipping the y axis.

    Construct with :meth:`for_bbox` to get the padded square input rect. Raises
    ``ValueError`` when an input span is zero; callers treat that glyph as an
    empty path.
    """

    def __init__(self, input_rect: Rect, output_rect: Rect) -> None:
        if input_rect.width == 0 or input_rect.height == 0:
            raise ValueError(f"zero-span input rect {input_rect}")
        self.input_rect = input_rect
        self.output_rect = output_rect

    @classmethod
    def for_bbox(cls, bbox: BBox, output_dim: float = OUTPUT_DIM) -> "CoordinateRemapper":
        return cls(pad_to_square(bbox), Vector(output_dim, output_dim).into_absolute_rect())

    def remap(self, x: float, y: float) -> Tuple[float, float]:
        inp, out = self.input_rect, self.output_rect
        return (
            out.start.x + (x - inp.start.x) * out.width / inp.width,
            out.start.y + (inp.end.y - y) * out.height / inp.height,
        )
