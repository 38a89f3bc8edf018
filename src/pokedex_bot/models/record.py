from dataclasses import dataclass
from typing import Any, Dict, List

from pokedex_bot.errors import RetrievalFailure

from .categories import classify

SPRITE_URL_TEMPLATE = "https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon/{id}.png"


def capitalize_name(name: str) -> str:
    return name[:1].upper() + name[1:]


def pad_id(pokemon_id: int) -> str:
    return str(pokemon_id).zfill(3)


def _extract_type_names(types: Any, pokemon_id: int) -> List[str]:
    if not isinstance(types, list):
        raise RetrievalFailure(pokemon_id, "payload field 'types' is not a list")
    names: List[str] = []
    for slot in types:
        type_info = slot.get("type") if isinstance(slot, dict) else None
        name = type_info.get("name") if isinstance(type_info, dict) else None
        if not isinstance(name, str):
            raise RetrievalFailure(pokemon_id, "payload type entry has no name")
        names.append(name)
    return names


@dataclass(frozen=True)
class Record:
    id: int
    display_name: str
    padded_id: str
    category: str
    color: str

    @property
    def sprite_url(self) -> str:
        return SPRITE_URL_TEMPLATE.format(id=self.id)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any], requested_id: int | None = None) -> "Record":
        """Build a classified record from a ``/pokemon/<id>`` response body.

        Only ``id``, ``name`` and ``types[*].type.name`` are read; everything else
        in the payload is ignored.
        """
        if not isinstance(payload, dict):
            raise RetrievalFailure(requested_id, "payload is not a JSON object")
        pokemon_id = payload.get("id")
        if not isinstance(pokemon_id, int) or isinstance(pokemon_id, bool) or pokemon_id < 1:
            raise RetrievalFailure(requested_id, "payload field 'id' is not a positive integer")
        if requested_id is not None and pokemon_id != requested_id:
            raise RetrievalFailure(requested_id, f"payload id {pokemon_id} does not match the requested id")
        name = payload.get("name")
        if not isinstance(name, str) or not name:
            raise RetrievalFailure(pokemon_id, "payload field 'name' is missing or empty")
        category, color = classify(_extract_type_names(payload.get("types"), pokemon_id))
        return cls(
            id=pokemon_id,
            display_name=capitalize_name(name),
            padded_id=pad_id(pokemon_id),
            category=category,
            color=color,
        )
