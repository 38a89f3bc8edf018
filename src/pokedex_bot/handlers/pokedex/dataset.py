import logging
from dataclasses import dataclass
from typing import Any, MutableMapping, Optional, Tuple

from pokedex_bot.config import Settings
from pokedex_bot.errors import RetrievalFailure
from pokedex_bot.models import Record
from pokedex_bot.services.fetcher import fetch_classified
from pokedex_bot.utils.pagination import paginate

logger = logging.getLogger(__name__)

BOT_DATA_KEY = "pokedex"
SETTINGS_KEY = "settings"


@dataclass(frozen=True)
class PokedexData:
    records: Tuple[Record, ...] = ()
    pages: Tuple[Tuple[Record, ...], ...] = ()
    load_error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.load_error is not None


async def load_pokedex(settings: Settings) -> PokedexData:
    """Run the fetch once and paginate; a failure yields an empty dataset with ``load_error`` set."""
    try:
        records = await fetch_classified(settings.count, settings=settings, concurrency=settings.concurrency)
    except RetrievalFailure as exc:
        logger.exception("Pokedex load failed", extra={"pokemon_id": exc.pokemon_id})
        return PokedexData(load_error=str(exc))
    return PokedexData(records=records, pages=paginate(records, settings.page_size))


def get_settings(bot_data: MutableMapping[str, Any]) -> Settings:
    settings = bot_data.get(SETTINGS_KEY)
    if not isinstance(settings, Settings):
        settings = Settings.from_env()
        bot_data[SETTINGS_KEY] = settings
    return settings


def get_dataset(bot_data: MutableMapping[str, Any]) -> PokedexData:
    data = bot_data.get(BOT_DATA_KEY)
    return data if isinstance(data, PokedexData) else PokedexData()


async def on_startup(application) -> None:
    """``post_init`` hook: load the pokedex once before polling starts."""
    settings = get_settings(application.bot_data)
    application.bot_data[BOT_DATA_KEY] = await load_pokedex(settings)
