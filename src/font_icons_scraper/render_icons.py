from __future__ import annotations

import json
import re
from collections import Counter
from pathlib import Path
from typing import Dict, List, Sequence

from svgpathtools import parse_path

from .extract_glyphs import IconRecord

PATH_DATA_RE = re.compile(r'<path d="([^"]*)"')


def icon_path(output_dir: Path, icon: IconRecord, suffix: str = ".svg") -> Path:
    return output_dir / f"{icon.name}{suffix}"


def find_collisions(icons: Sequence[IconRecord]) -> Dict[str, int]:
    """Names shared by more than one record; only the last one survives on disk."""
    counts = Counter(icon.name for icon in icons)
    return {name: count for name, count in counts.items() if count > 1}


def write_icon(icon: IconRecord, output_dir: Path) -> Path:
    path = icon_path(output_dir, icon)
    path.write_text(icon.svg, encoding="utf-8")
    return path


def icon_bounds(icon: IconRecord) -> List[float] | None:
    """``[xmin, ymin, xmax, ymax]`` of the icon path in canvas units, or None if empty."""
    match = PATH_DATA_RE.search(icon.svg)
    if not match or not match.group(1).strip():
        return None
    try:
        xmin, xmax, ymin, ymax = parse_path(match.group(1)).bbox()
    except ValueError:
        return None
    return [xmin, ymin, xmax, ymax]


def build_manifest(icons: Sequence[IconRecord], output_dir: Path) -> List[Dict[str, object]]:
    manifest: Dict[str, Dict[str, object]] = {}
    for icon in icons:
        manifest[icon.name] = {
            "name": icon.name,
            "path": str(icon_path(output_dir, icon)),
            "font_url": icon.font_url,
            "glyph_index": icon.glyph_index,
            "glyph_name": icon.glyph_name,
            "bounds": icon_bounds(icon),
        }
    return list(manifest.values())


def write_manifest(icons: Sequence[IconRecord], output_dir: Path) -> Path:
    manifest_path = output_dir / "manifest.json"
    manifest_path.write_text(json.dumps(build_manifest(icons, output_dir), indent=2))
    return manifest_path
