"""In-memory implementation of FavoriteRepository for testing."""

from domain.model.favorite import FavoriteEntry


class FakeFavoriteRepository:
    def __init__(self):
        self.store: list[FavoriteEntry] = []

    def list_all(self) -> list[FavoriteEntry]:
        return sorted(self.store, key=lambda e: e.word)

    def find(self, language: str, word: str) -> FavoriteEntry | None:
        return next((e for e in self.store if e.matches(language, word)), None)

    def save(self, entry: FavoriteEntry) -> bool:
        """Mirrors the unique index: a second entry with the same identity is rejected."""
        if self.find(entry.language, entry.word):
            return False
        self.store.append(entry)
        return True

    def delete(self, language: str, word: str) -> bool | None:
        entry = self.find(language, word)
        if entry is None:
            return False
        self.store.remove(entry)
        return True
