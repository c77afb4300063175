"""In-memory implementation of DictionaryPort for testing."""

from domain.model.lexical import LexicalRecord


class FakeDictionaryAdapter:
    """Fake dictionary adapter that returns a preconfigured record."""

    def __init__(self, record: LexicalRecord | None = None):
        self.record = record
        self.last_word: str | None = None
        self.last_language: str | None = None

    async def fetch(self, language: str, word: str) -> LexicalRecord | None:
        self.last_word = word
        self.last_language = language
        return self.record
