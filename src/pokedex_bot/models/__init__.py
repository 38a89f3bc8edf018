"""Domain models: classified pokemon records and the category table."""

from .categories import CATEGORY_TABLE, UNKNOWN_CATEGORY, UNKNOWN_COLOR, PokemonType, classify
from .record import Record, capitalize_name, pad_id

__all__ = [
    "CATEGORY_TABLE",
    "UNKNOWN_CATEGORY",
    "UNKNOWN_COLOR",
    "PokemonType",
    "Record",
    "capitalize_name",
    "classify",
    "pad_id",
]
