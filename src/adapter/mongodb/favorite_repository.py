"""MongoDB implementation of FavoriteRepository."""

from logging import getLogger

from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError

from adapter.mongodb.connection import FAVORITES_COLLECTION_NAME
from domain.model.favorite import FavoriteEntry, normalize_key

logger = getLogger(__name__)


class MongoFavoriteRepository:
    def __init__(self, db: Database):
        self.collection = db[FAVORITES_COLLECTION_NAME]

    # ── indexes ────────────────────────────────────────────────

    def ensure_indexes(self) -> bool:
        """Create indexes for favorites collection."""
        from adapter.mongodb.indexes import create_index_safe

        try:
            create_index_safe(
                self.collection, [('language', 1), ('word', 1)], 'idx_favorite_identity', unique=True,
            )
            create_index_safe(self.collection, [('word', 1)], 'idx_favorite_word')
            return True
        except PyMongoError as e:
            logger.error("Failed to create favorites indexes", extra={"error": str(e)})
            return False

    # ── mapping ───────────────────────────────────────────────

    def _to_domain(self, doc: dict) -> FavoriteEntry:
        return FavoriteEntry(
            language=doc['language'],
            word=doc['word'],
            markdown=doc.get('markdown', ''),
            url=doc.get('url', ''),
        )

    @staticmethod
    def _query(language: str, word: str) -> dict:
        return {'language': normalize_key(language), 'word': normalize_key(word)}

    # ── CRUD ──────────────────────────────────────────────────

    def list_all(self) -> list[FavoriteEntry]:
        try:
            return [self._to_domain(doc) for doc in self.collection.find({}).sort('word', 1)]
        except PyMongoError as e:
            logger.error("Failed to list favorites", extra={"error": str(e)})
            return []

    def find(self, language: str, word: str) -> FavoriteEntry | None:
        try:
            doc = self.collection.find_one(self._query(language, word))
            return self._to_domain(doc) if doc else None
        except PyMongoError as e:
            logger.error("Failed to find favorite", extra={"word": word, "error": str(e)})
            return None

    def save(self, entry: FavoriteEntry) -> bool:
        doc = {
            **entry.identity,
            'markdown': entry.markdown,
            'url': entry.url,
        }
        try:
            self.collection.insert_one(doc)
            logger.info("Favorite saved", extra={"language": doc['language'], "word": doc['word']})
            return True
        except DuplicateKeyError:
            logger.info("Favorite already stored", extra={"language": doc['language'], "word": doc['word']})
            return False
        except PyMongoError as e:
            logger.error("Failed to save favorite", extra={"word": entry.word, "error": str(e)})
            return False

    def delete(self, language: str, word: str) -> bool | None:
        try:
            result = self.collection.delete_one(self._query(language, word))
            return result.deleted_count > 0
        except PyMongoError as e:
            logger.error("Failed to delete favorite", extra={"word": word, "error": str(e)})
            return None
