from typing import Optional


class RetrievalFailure(Exception):
    """A single record could not be retrieved or decoded.

    Raised for transport errors, non-success statuses and malformed payloads.
    The underlying httpx exception, if any, is chained as ``__cause__``.
    """

    def __init__(self, pokemon_id: Optional[int], reason: str) -> None:
        self.pokemon_id = pokemon_id
        self.reason = reason
        where = f"pokemon {pokemon_id}" if pokemon_id is not None else "pokemon"
        super().__init__(f"Failed to retrieve {where}: {reason}")


NetworkError = RetrievalFailure
