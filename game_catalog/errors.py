"""Catalog errors.

Raised inside the service layer and converted to a
:class:`~game_catalog.models.dto.CatalogResponse` at the operation boundary.
Callers of :class:`~game_catalog.services.catalog_service.GameCatalog` never
see them, except :class:`InvalidGameData` for a bad seed at construction.
"""

from game_catalog.models.domain import ResponseStatus


class CatalogError(Exception):
    """Base class for caller-facing catalog failures."""

    status: ResponseStatus = ResponseStatus.BAD_REQUEST
    message: str = "Catalog error"

    def __init__(self, detail: str = ""):
        super().__init__(detail or self.message)
        self.detail = detail


class InvalidGameData(CatalogError):
    """Payload is missing a required field or has an empty one."""

    status = ResponseStatus.BAD_REQUEST
    message = "Invalid Game Data!"


class GameNotFound(CatalogError):
    """No record matches the given identifier."""

    status = ResponseStatus.NOT_FOUND
    message = "Game Not Found!"
