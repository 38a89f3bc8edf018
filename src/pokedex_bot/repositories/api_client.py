import logging
from typing import Any, Dict

import httpx

from pokedex_bot.config import Settings
from pokedex_bot.errors import RetrievalFailure

logger = logging.getLogger(__name__)


def build_client(settings: Settings) -> httpx.AsyncClient:
    return httpx.AsyncClient(base_url=settings.base_url, timeout=settings.http_timeout)


async def api_get_one(client: httpx.AsyncClient, pokemon_id: int) -> Dict[str, Any]:
    path = str(pokemon_id)
    logger.info("API GET ONE", extra={"url": f"{client.base_url}{path}", "pokemon_id": pokemon_id})
    try:
        resp = await client.get(path)
    except httpx.HTTPError as exc:
        logger.error(
            "API GET ONE transport error",
            extra={"url": f"{client.base_url}{path}", "pokemon_id": pokemon_id, "error": repr(exc)},
        )
        raise RetrievalFailure(pokemon_id, f"transport error: {exc!r}") from exc
    logger.info(
        "API GET ONE response",
        extra={"url": str(resp.request.url), "pokemon_id": pokemon_id, "status_code": resp.status_code},
    )
    try:
        resp.raise_for_status()
    except httpx.HTTPStatusError as exc:
        # Log response body to aid debugging
        logger.error(
            "API GET ONE error",
            extra={
                "url": str(resp.request.url),
                "pokemon_id": pokemon_id,
                "status_code": resp.status_code,
                "response_body": resp.text[:500],
            },
        )
        raise RetrievalFailure(pokemon_id, f"HTTP {resp.status_code}") from exc
    try:
        return resp.json()
    except ValueError as exc:
        logger.error("API GET ONE invalid JSON", extra={"url": str(resp.request.url), "pokemon_id": pokemon_id})
        raise RetrievalFailure(pokemon_id, "response body is not valid JSON") from exc
