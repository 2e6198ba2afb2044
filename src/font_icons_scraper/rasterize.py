"""PNG previews of written icons. Imported only when previews are requested."""

from __future__ import annotations

import io
from pathlib import Path

from cairosvg import svg2png
from PIL import Image

from .extract_glyphs import IconRecord
from .render_icons import icon_path


def rasterize_icon(icon: IconRecord, size: int) -> Image.Image:
    png_bytes = svg2png(
        bytestring=icon.svg.encode("utf-8"),
        output_width=size,
        output_height=size,
    )
    return Image.open(io.BytesIO(png_bytes)).convert("LA")


def write_preview(icon: IconRecord, output_dir: Path, size: int) -> Path:
    output_path = icon_path(output_dir, icon, suffix=".png")
    rasterize_icon(icon, size).save(output_path)
    return output_path
