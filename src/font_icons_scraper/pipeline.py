"""Crawl a stylesheet (and, up to a depth, the stylesheets it imports) for icon fonts."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Protocol, Set

from .errors import ResolutionError, ScraperError
from .extract_glyphs import IconRecord, WebFont, iter_glyph_outlines
from .fetch import HttpFetcher
from .stylesheet import (
    Stylesheet,
    extract_font_urls,
    extract_import_urls,
    normalize_font_name,
    resolve_url,
)

logger = logging.getLogger(__name__)


class Fetcher(Protocol):
    def fetch_text(self, url: str) -> str: ...

    def fetch_bytes(self, url: str) -> bytes: ...


@dataclass(frozen=True)
class CrawlTask:
    url: str
    depth: int
    level: int = 0


@dataclass
class UnitResult:
    kind: str  # "stylesheet" or "font"
    url: str
    level: int
    icons: int = 0
    error: ScraperError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class CrawlReport:
    root_url: str
    icons: List[IconRecord] = field(default_factory=list)
    units: List[UnitResult] = field(default_factory=list)

    @property
    def failures(self) -> List[UnitResult]:
        return [unit for unit in self.units if not unit.ok]

    @property
    def root_failures(self) -> List[UnitResult]:
        return [unit for unit in self.failures if unit.level == 0]

    def raise_for_failures(self, strict: bool = False) -> None:
        """Re-raise the first failure of the root stylesheet (any failure if ``strict``)."""
        failures = self.failures if strict else self.root_failures
        if failures:
            raise failures[0].error


class Crawler:
    """Breadth-first, depth-bounded crawl sharing one visited set across all branches.

    Each stylesheet fetch and each font is a unit of work; failures are recorded
    in the report instead of aborting the crawl.
    """

    def __init__(self, fetcher: Fetcher | None = None) -> None:
        self.fetcher = fetcher if fetcher is not None else HttpFetcher()

    def crawl(self, url: str, depth: int = 0) -> CrawlReport:
        if depth < 0:
            raise ValueError(f"depth must not be negative, got {depth}")

        report = CrawlReport(root_url=url)
        queue: Deque[CrawlTask] = deque([CrawlTask(url, depth)])
        visited: Set[str] = {url}

        while queue:
            task = queue.popleft()
            stylesheet = self._fetch_stylesheet(task, report)
            if stylesheet is None:
                continue

            for font_url in extract_font_urls(stylesheet.text):
                try:
                    absolute = resolve_url(stylesheet.url, font_url)
                except ResolutionError as exc:
                    logger.debug("dropping font source: %s", exc)
                    continue
                if absolute in visited:
                    continue
                visited.add(absolute)
                self._convert_font(font_url, absolute, task.level, report)

            if task.depth > 0:
                for import_url in extract_import_urls(stylesheet):
                    if import_url in visited:
                        continue
                    visited.add(import_url)
                    queue.append(CrawlTask(import_url, task.depth - 1, task.level + 1))

        return report

    def _fetch_stylesheet(self, task: CrawlTask, report: CrawlReport) -> Stylesheet | None:
        unit = UnitResult(kind="stylesheet", url=task.url, level=task.level)
        report.units.append(unit)
        try:
            return Stylesheet(url=task.url, text=self.fetcher.fetch_text(task.url))
        except ScraperError as exc:
            logger.warning("stylesheet %s failed: %s", task.url, exc)
            unit.error = exc
            return None

    def _convert_font(self, font_url: str, absolute: str, level: int, report: CrawlReport) -> None:
        unit = UnitResult(kind="font", url=absolute, level=level)
        report.units.append(unit)
        try:
            font = WebFont.decode(self.fetcher.fetch_bytes(absolute), url=absolute)
            prefix = normalize_font_name(font_url)
            icons = [
                IconRecord(
                    name=f"{prefix}-{glyph.name}",
                    svg=glyph.to_svg(),
                    font_url=absolute,
                    glyph_index=glyph.index,
                    glyph_name=glyph.name,
                )
                for glyph in iter_glyph_outlines(font)
            ]
        except ScraperError as exc:
            logger.warning("font %s failed: %s", absolute, exc)
            unit.error = exc
            return

        report.icons.extend(icons)
        unit.icons = len(icons)
        logger.info("font %s: %d icons", absolute, unit.icons)


def scrape_font_icons(url: str, depth: int = 0, fetcher: Fetcher | None = None) -> List[IconRecord]:
    """Crawl ``url`` and return its icons.

    Failures of ``url`` itself or of its fonts are raised; failures inside
    imported stylesheets only drop that branch.
    """
    report = Crawler(fetcher).crawl(url, depth)
    report.raise_for_failures()
    return report.icons
