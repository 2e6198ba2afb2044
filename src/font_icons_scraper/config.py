from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

__version__ = "0.1.0"

DEFAULT_USER_AGENT = f"font-icons-scraper/{__version__}"
DEFAULT_TIMEOUT = 30.0


def _number(environ: Mapping[str, str], key: str, default, convert):
    raw = environ.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        return convert(raw.strip())
    except ValueError:
        raise ValueError(f"{key} must be a number, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    default_depth: int = 0

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Read ``FONT_ICONS_*`` variables (call ``load_dotenv()`` first to include ``.env``)."""
        env = os.environ if environ is None else environ
        depth = _number(env, "FONT_ICONS_DEPTH", 0, int)
        if depth < 0:
            raise ValueError(f"FONT_ICONS_DEPTH must not be negative, got {depth}")
        return cls(
            timeout=_number(env, "FONT_ICONS_TIMEOUT", DEFAULT_TIMEOUT, float),
            user_agent=env.get("FONT_ICONS_USER_AGENT") or DEFAULT_USER_AGENT,
            default_depth=depth,
        )
