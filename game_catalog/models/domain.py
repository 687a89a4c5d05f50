"""Domain entities - internal representation (transport-agnostic)."""

from dataclasses import dataclass, fields
from enum import IntEnum
from typing import Tuple, Union


class ResponseStatus(IntEnum):
    """Status codes reported by catalog operations."""
    OK = 200
    CREATED = 201
    BAD_REQUEST = 400
    NOT_FOUND = 404


@dataclass
class Game:
    """Game domain entity."""
    id: str
    title: str
    genre: str
    year: Union[int, float]
    developer: str
    description: str


# Every record field is required on write
REQUIRED_FIELDS: Tuple[str, ...] = tuple(f.name for f in fields(Game))
