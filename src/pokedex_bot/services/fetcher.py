"""Retrieve and classify the pokedex range.

Records come back as an immutable tuple ordered by id. The first failed
retrieval aborts the whole run; nothing fetched before it is returned.
"""

import asyncio
import logging
from typing import List, Optional, Tuple

import httpx

from pokedex_bot.config import Settings
from pokedex_bot.models import Record
from pokedex_bot.repositories.api_client import api_get_one, build_client

logger = logging.getLogger(__name__)


async def _fetch_record(client: httpx.AsyncClient, pokemon_id: int) -> Record:
    payload = await api_get_one(client, pokemon_id)
    return Record.from_payload(payload, requested_id=pokemon_id)


async def _fetch_sequential(client: httpx.AsyncClient, ids: range) -> Tuple[Record, ...]:
    records: List[Record] = []
    for pokemon_id in ids:
        records.append(await _fetch_record(client, pokemon_id))
    return tuple(records)


async def _fetch_bounded(client: httpx.AsyncClient, ids: range, concurrency: int) -> Tuple[Record, ...]:
    semaphore = asyncio.Semaphore(concurrency)

    async def worker(pokemon_id: int) -> Record:
        async with semaphore:
            return await _fetch_record(client, pokemon_id)

    tasks = [asyncio.ensure_future(worker(pokemon_id)) for pokemon_id in ids]
    try:
        # gather keeps results in task order, i.e. ordered by id
        return tuple(await asyncio.gather(*tasks))
    finally:
        for task in tasks:
            if not task.done():
                task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)


async def fetch_classified(
    count: int,
    *,
    client: Optional[httpx.AsyncClient] = None,
    settings: Optional[Settings] = None,
    concurrency: int = 1,
) -> Tuple[Record, ...]:
    """Fetch ids ``1..count-1`` and classify each one.

    When ``client`` is omitted a client is built from ``settings`` and closed
    afterwards. ``concurrency`` bounds the number of requests in flight; the
    default of 1 issues them strictly one after another.
    """
    if count < 1:
        raise ValueError("count must be >= 1")
    if concurrency < 1:
        raise ValueError("concurrency must be >= 1")
    if client is None:
        async with build_client(settings or Settings.from_env()) as owned:
            return await fetch_classified(count, client=owned, concurrency=concurrency)

    ids = range(1, count)
    logger.info("Fetching pokedex", extra={"count": len(ids), "concurrency": concurrency})
    if concurrency == 1:
        records = await _fetch_sequential(client, ids)
    else:
        records = await _fetch_bounded(client, ids, concurrency)
    logger.info("Pokedex fetched", extra={"count": len(records)})
    return records
