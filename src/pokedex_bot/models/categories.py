from enum import Enum
from typing import Iterable, Tuple


class PokemonType(str, Enum):
    """Display categories, declared in classification priority order."""

    FIRE = "fire"
    GRASS = "grass"
    ELECTRIC = "electric"
    WATER = "water"
    GROUND = "ground"
    ROCK = "rock"
    FAIRY = "fairy"
    POISON = "poison"
    BUG = "bug"
    DRAGON = "dragon"
    PSYCHIC = "psychic"
    FLYING = "flying"
    FIGHTING = "fighting"
    NORMAL = "normal"


UNKNOWN_CATEGORY = "unknown"
UNKNOWN_COLOR = "#EEEEEE"

# Ordered association list: position is the tie-break when a pokemon has several types.
CATEGORY_TABLE: Tuple[Tuple[str, str], ...] = (
    (PokemonType.FIRE.value, "#FDDFDF"),
    (PokemonType.GRASS.value, "#DEFDE0"),
    (PokemonType.ELECTRIC.value, "#FCF7DE"),
    (PokemonType.WATER.value, "#DEF3FD"),
    (PokemonType.GROUND.value, "#f4e7da"),
    (PokemonType.ROCK.value, "#d5d5d4"),
    (PokemonType.FAIRY.value, "#fceaff"),
    (PokemonType.POISON.value, "#98d7a5"),
    (PokemonType.BUG.value, "#f8d5a3"),
    (PokemonType.DRAGON.value, "#97b3e6"),
    (PokemonType.PSYCHIC.value, "#eaeda1"),
    (PokemonType.FLYING.value, "#F5F5F5"),
    (PokemonType.FIGHTING.value, "#E6E0D4"),
    (PokemonType.NORMAL.value, "#F5F5F5"),
)


def classify(
    type_names: Iterable[str],
    table: Tuple[Tuple[str, str], ...] = CATEGORY_TABLE,
) -> Tuple[str, str]:
    """Return ``(category, color)`` for the first table entry present in ``type_names``."""
    present = {str(name).strip().lower() for name in type_names}
    for category, color in table:
        if category in present:
            return category, color
    return UNKNOWN_CATEGORY, UNKNOWN_COLOR
