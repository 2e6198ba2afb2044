"""Command line entry point: scrape icon fonts from a stylesheet into SVG files."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Sequence

from dotenv import load_dotenv

from .config import Settings
from .errors import ScraperError
from .fetch import HttpFetcher
from .pipeline import Crawler
from .render_icons import find_collisions, icon_path, write_icon, write_manifest

load_dotenv()


def parse_args(argv: Sequence[str] | None = None, settings: Settings | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    settings = settings or Settings()
    parser = argparse.ArgumentParser(
        prog="font-icons-scraper",
        description="Convert every glyph of the webfonts referenced by a stylesheet into SVG files.",
    )
    parser.add_argument("url", help="URL of the stylesheet that declares the icon fonts.")
    parser.add_argument("output_dir", type=Path, help="Directory to write the SVG files to.")
    parser.add_argument(
        "-d",
        "--depth",
        type=int,
        default=settings.default_depth,
        help="How many levels of @import to follow (default: %(default)s).",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail if any stylesheet or font fails, including imported ones.",
    )
    parser.add_argument(
        "--manifest",
        action="store_true",
        help="Also write manifest.json describing every icon.",
    )
    parser.add_argument(
        "--png-size",
        type=int,
        default=None,
        metavar="PX",
        help="Also render a PNG preview of each icon at this size.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress (-v) or everything (-vv).",
    )
    args = parser.parse_args(argv)
    if args.depth < 0:
        parser.error("--depth must not be negative")
    if args.png_size is not None and args.png_size <= 0:
        parser.error("--png-size must be positive")
    return args


def main(argv: Sequence[str] | None = None, fetcher=None) -> None:
    """Run the scraper from CLI arguments."""
    try:
        settings = Settings.from_env()
    except ValueError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)

    args = parse_args(argv, settings)
    level = (logging.WARNING, logging.INFO, logging.DEBUG)[min(args.verbose, 2)]
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    output_dir: Path = args.output_dir.expanduser()
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        print(f'Unable to create directory "{output_dir}": {exc}', file=sys.stderr)
        sys.exit(1)

    if fetcher is None:
        fetcher = HttpFetcher(timeout=settings.timeout, user_agent=settings.user_agent)
    report = Crawler(fetcher).crawl(args.url, args.depth)
    try:
        report.raise_for_failures(strict=args.strict)
    except ScraperError as exc:
        print(f'Unable to scrape font icons from url "{args.url}": {exc}', file=sys.stderr)
        sys.exit(1)

    written: List[Path] = []
    try:
        for icon in report.icons:
            output_file = icon_path(output_dir, icon)
            print(f"Writing: {output_file}")
            written.append(write_icon(icon, output_dir))
        if args.manifest:
            print(f"Wrote metadata to {write_manifest(report.icons, output_dir)}")
    except OSError as exc:
        print(f"Unable to write file: {exc}", file=sys.stderr)
        sys.exit(1)

    if args.png_size is not None:
        try:
            from .rasterize import write_preview

            for icon in report.icons:
                write_preview(icon, output_dir, args.png_size)
        except OSError as exc:
            print(f"Unable to write preview: {exc}", file=sys.stderr)
            sys.exit(1)

    collisions = find_collisions(report.icons)
    if collisions:
        print(
            f"{len(collisions)} icon names were produced more than once; "
            f"the last glyph won (e.g. {next(iter(collisions))})",
            file=sys.stderr,
        )
    for unit in report.failures:
        print(f"Skipped {unit.kind} {unit.url}: {unit.error}", file=sys.stderr)
    print(f"{len(written)} icons written to {output_dir}")


if __name__ == "__main__":
    main()
