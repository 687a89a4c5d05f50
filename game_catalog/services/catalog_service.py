"""Catalog service - business logic for game records."""

import logging
from collections.abc import Mapping
from typing import Any, Iterable, Optional

from pydantic import ValidationError

from game_catalog.errors import CatalogError, GameNotFound, InvalidGameData
from game_catalog.models.domain import Game, REQUIRED_FIELDS, ResponseStatus
from game_catalog.models.dto import CatalogResponse, GameDTO
from game_catalog.repositories.base import Repository
from game_catalog.repositories.game_repository import InMemoryGameRepository
from game_catalog.services.config_service import get_config_service

logger = logging.getLogger(__name__)

GAME_ADDED = "Game added successfully."
GAME_UPDATED = "Game updated successfully."
GAME_DELETED = "Game deleted successfully."


def validate_game_data(candidate: Any) -> Game:
    """Check a write payload and build the record it describes.

    Accepts a mapping, a :class:`Game` or a :class:`GameDTO`. Every
    required field must be present and non-empty; keys outside the six
    record fields are dropped.

    Raises:
        InvalidGameData: If a field is missing, empty or of the wrong type
    """
    try:
        if isinstance(candidate, Mapping):
            dto = GameDTO.model_validate(dict(candidate))
        else:
            dto = GameDTO.model_validate(candidate, from_attributes=True)
    except ValidationError as e:
        bad = {err["loc"][0] for err in e.errors() if err["loc"]}
        fields = [name for name in REQUIRED_FIELDS if name in bad]
        logger.debug("Rejected game payload, bad fields: %s", fields)
        raise InvalidGameData(f"bad fields: {', '.join(fields) or 'payload'}") from e

    return Game(**{name: getattr(dto, name) for name in REQUIRED_FIELDS})


class GameCatalog:
    """
    Service for game catalog business logic.

    Responsibilities:
    - Validate write payloads before they reach storage
    - Resolve ids to the first matching record in insertion order
    - Report every outcome as a CatalogResponse, never as an exception

    Duplicate ids are accepted on add; update and delete then act on the
    earliest record carrying the id.
    """

    def __init__(
        self,
        repository: Optional[Repository[Game]] = None,
        seed: Optional[Iterable[Any]] = None,
    ):
        """Create a catalog.

        Args:
            repository: Storage backend. Defaults to a new in-memory repository.
            seed: Payloads added before first use. When omitted, a new
                  repository is filled from the configured seed file and an
                  injected one is left as is.

        Raises:
            InvalidGameData: If a seed payload fails validation
        """
        if repository is None:
            repository = InMemoryGameRepository()
            if seed is None:
                seed = get_config_service().get_seed_games()

        self.repository = repository

        for payload in seed or ():
            self.repository.add(validate_game_data(payload))

    def list(self) -> CatalogResponse:
        """List all games in insertion order."""
        games = self.repository.list()
        return CatalogResponse(
            status=ResponseStatus.OK.value,
            data=[self._to_dto(game) for game in games],
        )

    def add(self, candidate: Any) -> CatalogResponse:
        """Append a game to the end of the catalog."""
        try:
            game = validate_game_data(candidate)
        except CatalogError as e:
            return self._error_response(e)

        self.repository.add(game)
        logger.info("Added game %s (%s)", game.id, game.title)
        return CatalogResponse(status=ResponseStatus.CREATED.value, message=GAME_ADDED)

    def update(self, game_id: str, new_data: Any) -> CatalogResponse:
        """
        Replace a game wholesale, keeping its position.

        Business rules:
        - Payload is validated before the id is looked up
        - Replacement is not merged with the old record
        """
        try:
            game = validate_game_data(new_data)
            if not self.repository.replace(game_id, game):
                raise GameNotFound(f"id {game_id!r}")
        except CatalogError as e:
            return self._error_response(e)

        logger.info("Updated game %s", game_id)
        return CatalogResponse(status=ResponseStatus.OK.value, message=GAME_UPDATED)

    def delete(self, game_id: str) -> CatalogResponse:
        """Remove the first game with this id."""
        try:
            if not self.repository.delete(game_id):
                raise GameNotFound(f"id {game_id!r}")
        except CatalogError as e:
            return self._error_response(e)

        logger.info("Deleted game %s", game_id)
        return CatalogResponse(status=ResponseStatus.OK.value, message=GAME_DELETED)

    @staticmethod
    def _error_response(error: CatalogError) -> CatalogResponse:
        """Convert a caller-facing error to its response."""
        logger.warning("%s (%s)", error.message, error.detail)
        return CatalogResponse(status=error.status.value, error=error.message)

    @staticmethod
    def _to_dto(game: Game) -> GameDTO:
        """Convert domain entity to DTO."""
        return GameDTO(
            id=game.id,
            title=game.title,
            genre=game.genre,
            year=game.year,
            developer=game.developer,
            description=game.description,
        )
