import asyncio

import httpx
import pytest

import pokedex_bot.services.fetcher as fetcher_mod
from factories import make_payload
from pokedex_bot.config import Settings
from pokedex_bot.errors import RetrievalFailure
from pokedex_bot.repositories.api_client import api_get_one
from pokedex_bot.services.fetcher import fetch_classified
from pokedex_bot.utils.pagination import PaginationState, paginate

pytestmark = pytest.mark.asyncio

BASE_URL = "https://pokeapi.test/api/v2/pokemon/"

NAMES = {
    1: ("bulbasaur", ["grass", "poison"]),
    2: ("ivysaur", ["grass", "poison"]),
    3: ("venusaur", ["grass", "poison"]),
    4: ("charmander", ["fire"]),
    5: ("charmeleon", ["fire"]),
    6: ("charizard", ["fire", "flying"]),
    7: ("squirtle", ["water"]),
    8: ("wartortle", ["water"]),
    9: ("blastoise", ["water"]),
    10: ("caterpie", ["bug"]),
    11: ("metapod", ["bug"]),
}


def _id_from(request: httpx.Request) -> int:
    return int(request.url.path.rstrip("/").rsplit("/", 1)[-1])


def _ok(request: httpx.Request) -> httpx.Response:
    pid = _id_from(request)
    name, types = NAMES[pid]
    return httpx.Response(200, json=make_payload(pid, name, *types))


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(handler))


async def test_api_get_one_returns_json() -> None:
    async with _client(_ok) as client:
        data = await api_get_one(client, 4)
    assert data["name"] == "charmander"


async def test_api_get_one_wraps_http_status_error() -> None:
    async with _client(lambda request: httpx.Response(404, text="Not Found")) as client:
        with pytest.raises(RetrievalFailure) as exc_info:
            await api_get_one(client, 9999)
    assert exc_info.value.pokemon_id == 9999
    assert isinstance(exc_info.value.__cause__, httpx.HTTPStatusError)


async def test_api_get_one_wraps_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with _client(handler) as client:
        with pytest.raises(RetrievalFailure) as exc_info:
            await api_get_one(client, 1)
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


async def test_api_get_one_rejects_invalid_json() -> None:
    async with _client(lambda request: httpx.Response(200, text="<html>")) as client:
        with pytest.raises(RetrievalFailure, match="not valid JSON"):
            await api_get_one(client, 1)


async def test_fetch_classified_is_sequential_and_ordered() -> None:
    requested = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append(_id_from(request))
        return _ok(request)

    async with _client(handler) as client:
        records = await fetch_classified(5, client=client)

    assert requested == [1, 2, 3, 4]
    assert isinstance(records, tuple)
    assert [r.id for r in records] == [1, 2, 3, 4]
    assert [r.display_name for r in records] == ["Bulbasaur", "Ivysaur", "Venusaur", "Charmander"]
    assert records[0].category == "grass"
    assert records[3].padded_id == "004"


async def test_fetch_classified_count_one_issues_no_requests() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    async with _client(handler) as client:
        assert await fetch_classified(1, client=client) == ()


async def test_fetch_classified_rejects_bad_arguments() -> None:
    async with _client(_ok) as client:
        with pytest.raises(ValueError):
            await fetch_classified(0, client=client)
        with pytest.raises(ValueError):
            await fetch_classified(3, client=client, concurrency=0)


async def test_fetch_classified_fails_fast() -> None:
    requested = []

    def handler(request: httpx.Request) -> httpx.Response:
        pid = _id_from(request)
        requested.append(pid)
        if pid == 3:
            return httpx.Response(500, text="boom")
        return _ok(request)

    async with _client(handler) as client:
        with pytest.raises(RetrievalFailure) as exc_info:
            await fetch_classified(10, client=client)

    assert exc_info.value.pokemon_id == 3
    assert requested == [1, 2, 3]


async def test_fetch_classified_malformed_payload_aborts() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"id": _id_from(request)})

    async with _client(handler) as client:
        with pytest.raises(RetrievalFailure):
            await fetch_classified(3, client=client)


async def test_fetch_classified_bounded_concurrency_preserves_order() -> None:
    in_flight = 0
    peak = 0

    async def handler(request: httpx.Request) -> httpx.Response:
        nonlocal in_flight, peak
        in_flight += 1
        peak = max(peak, in_flight)
        pid = _id_from(request)
        # Later ids finish first
        await asyncio.sleep(0.001 * (12 - pid))
        in_flight -= 1
        return _ok(request)

    async with _client(handler) as client:
        records = await fetch_classified(12, client=client, concurrency=3)

    assert [r.id for r in records] == list(range(1, 12))
    assert peak <= 3


async def test_fetch_classified_concurrent_failure_propagates() -> None:
    async def handler(request: httpx.Request) -> httpx.Response:
        if _id_from(request) == 2:
            return httpx.Response(503)
        await asyncio.sleep(0.01)
        return _ok(request)

    async with _client(handler) as client:
        with pytest.raises(RetrievalFailure) as exc_info:
            await fetch_classified(8, client=client, concurrency=4)
    assert exc_info.value.pokemon_id == 2


async def test_fetch_classified_builds_and_closes_own_client(monkeypatch) -> None:
    built = []

    def fake_build_client(settings: Settings) -> httpx.AsyncClient:
        client = httpx.AsyncClient(base_url=settings.base_url, transport=httpx.MockTransport(_ok))
        built.append(client)
        return client

    monkeypatch.setattr(fetcher_mod, "build_client", fake_build_client)

    records = await fetch_classified(3, settings=Settings(base_url=BASE_URL))

    assert [r.id for r in records] == [1, 2]
    assert len(built) == 1 and built[0].is_closed


async def test_end_to_end_single_page() -> None:
    async with _client(_ok) as client:
        records = await fetch_classified(10, client=client)

    pages = paginate(records, 9)
    state = PaginationState.initial(len(pages))

    assert len(records) == 9
    assert len(pages) == 1 and pages[0] == records
    assert state.current_index == 0
    assert not state.has_next and not state.has_prev


async def test_fetch_classified_concurrent_failure_cancels_remaining() -> None:
    started = []
    completed = []

    async def handler(request: httpx.Request) -> httpx.Response:
        pid = _id_from(request)
        started.append(pid)
        if pid == 1:
            return httpx.Response(503)
        await asyncio.sleep(0.05)
        completed.append(pid)
        return _ok(request)

    async with _client(handler) as client:
        with pytest.raises(RetrievalFailure) as exc_info:
            await fetch_classified(11, client=client, concurrency=2)
        await asyncio.sleep(0.1)

    assert exc_info.value.pokemon_id == 1
    assert completed == []
    assert all(pid <= 4 for pid in started)


async def test_fetch_classified_rejects_payload_for_other_id() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        pid = _id_from(request)
        # Server answers id 2 with the body for id 3
        return _ok(request) if pid != 2 else httpx.Response(200, json=make_payload(3, "venusaur", "grass"))

    async with _client(handler) as client:
        with pytest.raises(RetrievalFailure) as exc_info:
            await fetch_classified(5, client=client)
    assert exc_info.value.pokemon_id == 2
