"""Exceptions raised while crawling stylesheets and decoding webfonts."""

from __future__ import annotations


class ScraperError(Exception):
    """Base class for every error raised by this package."""


class TransportError(ScraperError):
    """A fetch returned a non-success status or never completed."""

    def __init__(self, url: str, message: str, status_code: int | None = None) -> None:
        super().__init__(f"{message} ({url})")
        self.url = url
        self.status_code = status_code


class DecodeError(ScraperError):
    """Downloaded bytes are not a readable font."""

    def __init__(self, url: str | None, message: str) -> None:
        super().__init__(f"{message} ({url})" if url else message)
        self.url = url


class ResolutionError(ScraperError):
    def __init__(self, base: str, reference: str) -> None:
        super().__init__(f"cannot resolve {reference!r} against {base!r}")
        self.base = base
        self.reference = reference
