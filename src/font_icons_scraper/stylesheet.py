"""Scanning stylesheets for ``@font-face`` sources and ``@import`` targets."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List
from urllib.parse import urljoin, urlsplit

from .errors import ResolutionError

logger = logging.getLogger(__name__)

SUPPORTED_FONT_EXTENSION = "ttf"

COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
FONT_FACE_RE = re.compile(r"@font-face\s*\{([^}]+)\}", re.IGNORECASE)
FONT_FACE_URL_RE = re.compile(r"url\(([^)]+)\)")
CSS_IMPORT_RE = re.compile(
    r"""@import\s+url\s*\(\s*(?:"([^"]+)"|'([^']+)'|([^)'"\s]+))\s*\)\s*;""",
    re.IGNORECASE,
)
NUMERIC_PART_RE = re.compile(r"[0-9]+")

RESOLVABLE_SCHEMES = ("http", "https")


@dataclass(frozen=True)
class Stylesheet:
    url: str
    text: str


def strip_query(url: str) -> str:
    return url.split("?", 1)[0].split("#", 1)[0]


def url_extension(url: str) -> str:
    return strip_query(url).split(".")[-1]


def resolve_url(base: str, reference: str) -> str:
    try:
        resolved = urljoin(base, reference.strip())
        parts = urlsplit(resolved)
    except ValueError as exc:
        raise ResolutionError(base, reference) from exc
    if parts.scheme not in RESOLVABLE_SCHEMES or not parts.netloc:
        raise ResolutionError(base, reference)
    return resolved


def normalize_font_name(url: str) -> str:
    """Turn a font URL into an icon-name prefix.

    ``../webfonts/fa-solid-900.ttf?v=5.0.0`` becomes ``solid``: the file's base
    name, without a leading ``fa-`` and without purely numeric ``-`` parts.
    """
    components = [part for part in strip_query(url).split("/") if part]
    stems = [part for part in components[-1].split(".") if part] if components else []
    if not stems:
        raise ValueError(f"no file name in font url {url!r}")

    name = stems[0]
    if name.startswith("fa-"):
        name = name[len("fa-"):]
    return "-".join(part for part in name.split("-") if not NUMERIC_PART_RE.fullmatch(part))


def _unwrap_url_literal(literal: str) -> str:
    literal = literal.strip()
    if len(literal) >= 2 and literal[0] == literal[-1] and literal[0] in "\"'":
        return literal[1:-1]
    return literal


def extract_font_urls(text: str) -> List[str]:
    """Source URLs of ``@font-face`` rules with a supported extension, in order, unique."""
    text = COMMENT_RE.sub("", text)
    urls: List[str] = []
    for face in FONT_FACE_RE.finditer(text):
        for src in FONT_FACE_URL_RE.finditer(face.group(0)):
            url = _unwrap_url_literal(src.group(1))
            if url_extension(url) != SUPPORTED_FONT_EXTENSION:
                logger.debug("skipping font source %s", url)
                continue
            if url not in urls:
                urls.append(url)
    return urls


def extract_import_urls(stylesheet: Stylesheet) -> List[str]:
    """Absolute URLs of same-host stylesheets pulled in with ``@import url(...)``."""
    current = urlsplit(stylesheet.url)
    text = COMMENT_RE.sub("", stylesheet.text)
    imports: List[str] = []
    for match in CSS_IMPORT_RE.finditer(text):
        literal = match.group(1) or match.group(2) or match.group(3)
        try:
            absolute = resolve_url(stylesheet.url, literal)
        except ResolutionError as exc:
            logger.debug("dropping import: %s", exc)
            continue
        target = urlsplit(absolute)
        if target.hostname != current.hostname or target.path == current.path:
            logger.debug("dropping import %s from %s", absolute, stylesheet.url)
            continue
        imports.append(absolute)
    return imports
