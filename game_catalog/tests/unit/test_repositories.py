"""Unit tests for repositories."""

import threading

import pytest

from game_catalog.models.domain import Game
from game_catalog.repositories.game_repository import InMemoryGameRepository


def make_game(game_id, title="Game"):
    return Game(
        id=game_id,
        title=title,
        genre="Puzzle",
        year=2021,
        developer="Studio",
        description="A game.",
    )


def ids(repo):
    return [g.id for g in repo.list()]


class TestInMemoryGameRepository:
    """Test InMemoryGameRepository operations."""

    @pytest.fixture
    def repo(self):
        return InMemoryGameRepository([make_game("1"), make_game("2"), make_game("3")])

    def test_add_appends(self, repo):
        repo.add(make_game("4"))

        assert ids(repo) == ["1", "2", "3", "4"]

    def test_list_returns_copies(self, repo):
        repo.list()[0].title = "Changed"

        assert repo.list()[0].title == "Game"

    def test_replace_in_place(self, repo):
        assert repo.replace("2", make_game("20", title="New")) is True

        assert ids(repo) == ["1", "20", "3"]
        assert repo.list()[1].title == "New"

    def test_replace_first_duplicate(self, repo):
        repo.add(make_game("1", title="Later"))

        repo.replace("1", make_game("1", title="Replaced"))

        assert [g.title for g in repo.list() if g.id == "1"] == ["Replaced", "Later"]

    def test_replace_nonexistent(self, repo):
        assert repo.replace("999", make_game("999")) is False
        assert ids(repo) == ["1", "2", "3"]

    def test_delete(self, repo):
        assert repo.delete("2") is True
        assert ids(repo) == ["1", "3"]

    def test_delete_nonexistent(self, repo):
        assert repo.delete("999") is False
        assert ids(repo) == ["1", "2", "3"]

    def test_delete_first_duplicate(self, repo):
        repo.add(make_game("1", title="Later"))

        repo.delete("1")

        assert [g.title for g in repo.list() if g.id == "1"] == ["Later"]

    def test_starts_empty(self):
        assert InMemoryGameRepository().list() == []

    def test_concurrent_adds(self):
        """Parallel writers don't lose records."""
        repo = InMemoryGameRepository()

        def writer(prefix):
            for i in range(200):
                repo.add(make_game(f"{prefix}-{i}"))

        threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(repo.list()) == 800
