"""In-memory game catalog.

A small CRUD service over game records with:
- Field validation on every write
- First-match lookup by caller-supplied id
- Structured responses (status, data, message, error)

Usage:
    from game_catalog import create_catalog

    catalog = create_catalog()
    catalog.list().to_dict()
"""

from typing import Optional

from .logging_config import setup_logging
from .models.dto import CatalogResponse, GameDTO
from .services.catalog_service import GameCatalog, validate_game_data
from .services.config_service import ConfigService, get_config_service


def create_catalog(config_service: Optional[ConfigService] = None) -> GameCatalog:
    """Set up logging and return a new catalog seeded from configuration."""
    config_service = config_service or get_config_service()
    setup_logging(config_service.log_level)
    return GameCatalog(seed=config_service.get_seed_games())


__all__ = [
    'CatalogResponse',
    'ConfigService',
    'GameCatalog',
    'GameDTO',
    'create_catalog',
    'validate_game_data',
]
