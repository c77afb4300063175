from fastapi import HTTPException

from adapter.external.free_dictionary import FreeDictionaryAdapter
from adapter.mongodb.connection import get_mongodb_client, DATABASE_NAME
from adapter.mongodb.favorite_repository import MongoFavoriteRepository
from port.dictionary import DictionaryPort
from port.favorite_repository import FavoriteRepository


def _get_db():
    """Get MongoDB database, raising 503 if unavailable."""
    client = get_mongodb_client()
    if client is None:
        raise HTTPException(status_code=503, detail="Database unavailable")
    return client[DATABASE_NAME]


def get_favorite_repo() -> FavoriteRepository:
    return MongoFavoriteRepository(_get_db())


def get_dictionary_port() -> DictionaryPort:
    return FreeDictionaryAdapter()


def get_optional_favorite_repo() -> FavoriteRepository | None:
    """Favorites repository, or None when the database is unavailable."""
    client = get_mongodb_client()
    if client is None:
        return None
    return MongoFavoriteRepository(client[DATABASE_NAME])
