import logging
import os
from dataclasses import dataclass
from typing import Callable, Optional, TypeVar

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://pokeapi.co/api/v2/pokemon/"
DEFAULT_COUNT = 40
DEFAULT_PAGE_SIZE = 9
DEFAULT_CONCURRENCY = 1
DEFAULT_HTTP_TIMEOUT = 10.0

T = TypeVar("T", int, float)


def _env_number(name: str, default: T, cast: Callable[[str], T], minimum: T) -> T:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = cast(raw.strip())
    except ValueError:
        logger.warning("Invalid numeric env value, using default", extra={"env": name, "value": raw, "default": default})
        return default
    if value < minimum:
        logger.warning("Env value below minimum, using default", extra={"env": name, "value": raw, "default": default})
        return default
    return value


@dataclass(frozen=True)
class Settings:
    """Runtime settings resolved from the environment."""

    base_url: str = DEFAULT_BASE_URL
    count: int = DEFAULT_COUNT
    page_size: int = DEFAULT_PAGE_SIZE
    concurrency: int = DEFAULT_CONCURRENCY
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    bot_token: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Settings":
        base_url = (os.getenv("POKEAPI_BASE_URL") or DEFAULT_BASE_URL).strip()
        if not base_url.endswith("/"):
            base_url += "/"
        return cls(
            base_url=base_url,
            count=_env_number("POKEDEX_COUNT", DEFAULT_COUNT, int, 1),
            page_size=_env_number("POKEDEX_PAGE_SIZE", DEFAULT_PAGE_SIZE, int, 1),
            concurrency=_env_number("POKEDEX_CONCURRENCY", DEFAULT_CONCURRENCY, int, 1),
            http_timeout=_env_number("HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT, float, 0.1),
            bot_token=os.getenv("TELEGRAM_BOT_TOKEN") or None,
        )
