"""Game repository - in-memory implementation."""

import threading
from dataclasses import replace as copy_game
from typing import Iterable, List, Optional

from game_catalog.models.domain import Game
from game_catalog.repositories.base import Repository


class InMemoryGameRepository(Repository[Game]):
    """
    Repository for game records.

    Current implementation: In-memory ordered list
    Rationale: Catalog state lives for the process lifetime only
    Every access holds the lock, so lookup-then-mutate is atomic.
    """

    def __init__(self, games: Optional[Iterable[Game]] = None):
        self._games: List[Game] = list(games or [])
        self._lock = threading.RLock()

    def list(self) -> List[Game]:
        """Snapshot of all games in insertion order."""
        with self._lock:
            return [copy_game(game) for game in self._games]

    def add(self, game: Game) -> Game:
        """Append game to the end."""
        with self._lock:
            self._games.append(game)
        return game

    def replace(self, game_id: str, game: Game) -> bool:
        """Replace first game with this id at its current position."""
        with self._lock:
            index = self._index_of(game_id)
            if index is None:
                return False
            self._games[index] = game
            return True

    def delete(self, game_id: str) -> bool:
        """Remove first game with this id."""
        with self._lock:
            index = self._index_of(game_id)
            if index is None:
                return False
            del self._games[index]
            return True

    def _index_of(self, game_id: str) -> Optional[int]:
        # Caller holds the lock.
        for index, game in enumerate(self._games):
            if game.id == game_id:
                return index
        return None
