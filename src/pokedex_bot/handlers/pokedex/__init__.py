import logging

# Public API re-exports
from .dataset import on_startup
from .handlers import pokedex_nav, refresh, start

logger = logging.getLogger(__name__)

__all__ = [
    "on_startup",
    "pokedex_nav",
    "refresh",
    "start",
]
