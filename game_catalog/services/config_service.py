"""
Configuration service for catalog settings.

Provides a single source of truth for the seed data and log level.
Both can be overridden through environment variables:

    GAME_CATALOG_SEED_FILE   JSON array of game objects
    GAME_CATALOG_LOG_LEVEL   logging level name (default INFO)
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional


SEED_FILE_ENV = "GAME_CATALOG_SEED_FILE"
LOG_LEVEL_ENV = "GAME_CATALOG_LOG_LEVEL"

# Bundled seed data (3 records, ids "1"-"3")
DEFAULT_SEED_FILE = Path(__file__).parent.parent / "config" / "seed_games.json"


class ConfigService:
    """Service for loading and providing catalog configuration."""

    def __init__(self, seed_path: Optional[Path] = None, log_level: Optional[str] = None):
        """Initialize the configuration service.

        Args:
            seed_path: Path to seed JSON file.
                       Defaults to $GAME_CATALOG_SEED_FILE, then the bundled file.
            log_level: Logging level name. Defaults to $GAME_CATALOG_LOG_LEVEL or INFO.
        """
        if seed_path is None:
            seed_path = Path(os.environ.get(SEED_FILE_ENV, str(DEFAULT_SEED_FILE)))

        self.seed_path = Path(seed_path)
        self.log_level = (log_level or os.environ.get(LOG_LEVEL_ENV, "INFO")).upper()
        self._seed_games = None

    def _load_seed(self) -> List[Dict[str, Any]]:
        """Load seed games from JSON file.

        Raises:
            FileNotFoundError: If seed file doesn't exist
            json.JSONDecodeError: If seed file is invalid JSON
            ValueError: If the top-level value is not an array
        """
        if not self.seed_path.exists():
            raise FileNotFoundError(f"Seed file not found: {self.seed_path}")

        with open(self.seed_path, 'r', encoding='utf-8') as f:
            games = json.load(f)

        if not isinstance(games, list):
            raise ValueError(f"Seed file must contain a JSON array: {self.seed_path}")
        return games

    def get_seed_games(self) -> List[Dict[str, Any]]:
        """Get seed game payloads (cached).

        Returns:
            Fresh list of game dicts, safe for the caller to mutate
        """
        if self._seed_games is None:
            self._seed_games = self._load_seed()
        return [dict(game) for game in self._seed_games]


# Global instance for easy import
_config_service = None

def get_config_service() -> ConfigService:
    """Get the global configuration service instance.

    Returns:
        ConfigService instance
    """
    global _config_service
    if _config_service is None:
        _config_service = ConfigService()
    return _config_service
