"""Dictionary port — outbound interface for dictionary data sources."""

from typing import Protocol

from domain.model.lexical import LexicalRecord


class DictionaryPort(Protocol):
    """Port for fetching lexical records.

    fetch() returns None when the word is not found or the source is
    unavailable; callers must not render in that case.
    """

    async def fetch(self, language: str, word: str) -> LexicalRecord | None: ...
