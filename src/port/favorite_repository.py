"""Port for favorites data access."""

from typing import Protocol

from domain.model.favorite import FavoriteEntry


class FavoriteRepository(Protocol):
    """Protocol for favorite entry storage keyed by (language, word)."""

    def list_all(self) -> list[FavoriteEntry]:
        """All favorites, sorted by word."""
        ...

    def find(self, language: str, word: str) -> FavoriteEntry | None:
        """Find a favorite by normalized (language, word)."""
        ...

    def save(self, entry: FavoriteEntry) -> bool:
        """Insert an entry. Returns False if not stored (already exists or storage failure)."""
        ...

    def delete(self, language: str, word: str) -> bool | None:
        """Delete a favorite. Returns True if deleted, False if not found, None on storage failure."""
        ...
