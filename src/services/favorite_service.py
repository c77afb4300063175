"""Favorite service — business logic for the user's saved words."""

import logging

from domain.model.favorite import FavoriteEntry
from domain.model.errors import NotFoundError, StorageError
from port.favorite_repository import FavoriteRepository

logger = logging.getLogger(__name__)


def add_favorite(
    repo: FavoriteRepository,
    language: str,
    word: str,
    markdown: str,
    url: str,
) -> tuple[FavoriteEntry | None, bool]:
    """Save a favorite unless the (language, word) pair already exists.

    Returns:
        (entry, created). entry is the stored one for duplicates, including
        one stored concurrently between find and save, and None when storage
        failed.
    """
    existing = repo.find(language, word)
    if existing:
        return existing, False

    entry = FavoriteEntry.create(language=language, word=word, markdown=markdown, url=url)
    if not repo.save(entry):
        return repo.find(language, word), False
    logger.info("Favorite added", extra={"language": entry.language, "word": entry.word})
    return entry, True


def remove_favorite(repo: FavoriteRepository, language: str, word: str) -> None:
    """Remove a favorite.

    Raises:
        NotFoundError: No such favorite.
        StorageError: The store could not be reached.
    """
    deleted = repo.delete(language, word)
    if deleted is None:
        raise StorageError(f"Failed to remove favorite: {word} ({language})")
    if not deleted:
        raise NotFoundError(f"Favorite not found: {word} ({language})")
    logger.info("Favorite removed", extra={"language": language, "word": word})


def is_favorite(repo: FavoriteRepository, language: str, word: str) -> bool:
    return repo.find(language, word) is not None


def list_favorites(repo: FavoriteRepository) -> list[FavoriteEntry]:
    return sorted(repo.list_all(), key=lambda e: e.word)


def group_by_language(
    entries: list[FavoriteEntry],
    search_text: str = "",
) -> dict[str, list[FavoriteEntry]]:
    """Group favorites by language in first-seen order.

    search_text filters entries by case-insensitive substring of the word.
    Languages whose entries are all filtered out are omitted.
    """
    needle = search_text.lower()
    grouped: dict[str, list[FavoriteEntry]] = {}
    for entry in entries:
        if needle in entry.word.lower():
            grouped.setdefault(entry.language, []).append(entry)
    return grouped
