"""Pytest configuration and fixtures."""

import logging
import sys
from pathlib import Path

# Add repo root for imports - do this before other imports
repo_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(repo_root))

import pytest

from game_catalog.services.catalog_service import GameCatalog
from game_catalog.services import config_service


SEED_GAMES = [
    {
        "id": "1",
        "title": "The Legend of Zelda: Breath of the Wild",
        "genre": "Action-adventure",
        "year": 2017,
        "developer": "Nintendo",
        "description": "An open-world adventure.",
    },
    {
        "id": "2",
        "title": "Hades",
        "genre": "Roguelike",
        "year": 2020,
        "developer": "Supergiant Games",
        "description": "Escape the underworld.",
    },
    {
        "id": "3",
        "title": "Celeste",
        "genre": "Platformer",
        "year": 2018,
        "developer": "Maddy Makes Games",
        "description": "Climb the mountain.",
    },
]


@pytest.fixture(autouse=True)
def reset_config_service(monkeypatch):
    """Keep the global config service and env overrides out of each test."""
    monkeypatch.delenv(config_service.SEED_FILE_ENV, raising=False)
    monkeypatch.delenv(config_service.LOG_LEVEL_ENV, raising=False)
    monkeypatch.setattr(config_service, "_config_service", None)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers create_catalog() attaches to the package logger."""
    logger = logging.getLogger("game_catalog")
    saved_handlers, saved_level = logger.handlers[:], logger.level
    yield
    for handler in logger.handlers[:]:
        if handler not in saved_handlers:
            handler.close()
            logger.removeHandler(handler)
    logger.setLevel(saved_level)


@pytest.fixture
def seed_games():
    """Fresh copy of the seed payloads."""
    return [dict(game) for game in SEED_GAMES]


@pytest.fixture
def catalog(seed_games):
    """Catalog seeded with ids "1", "2", "3"."""
    return GameCatalog(seed=seed_games)


@pytest.fixture
def new_game():
    """Valid game payload not in the seed."""
    return {
        "id": "4",
        "title": "Cyberpunk 2077",
        "genre": "RPG",
        "year": 2020,
        "developer": "CD Projekt Red",
        "description": "A futuristic RPG set in Night City.",
    }
