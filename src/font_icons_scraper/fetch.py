from __future__ import annotations

import logging

import requests

from .config import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from .errors import TransportError

logger = logging.getLogger(__name__)


class HttpFetcher:
    """Fetches stylesheets and font files; every failure becomes ``TransportError``."""

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        self.user_agent = user_agent

    def _get(self, url: str) -> requests.Response:
        logger.info("GET %s", url)
        try:
            response = self.session.get(
                url,
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            raise TransportError(url, f"HTTP {status}", status_code=status) from exc
        except requests.RequestException as exc:
            raise TransportError(url, f"request failed: {exc}") from exc
        return response

    def fetch_text(self, url: str) -> str:
        response = self._get(url)
        # text/css without a charset would otherwise decode as ISO-8859-1
        if "charset" in response.headers.get("Content-Type", "").lower():
            response.encoding = requests.utils.get_encoding_from_headers(response.headers)
        else:
            response.encoding = "utf-8"
        return response.text

    def fetch_bytes(self, url: str) -> bytes:
        return self._get(url).content
