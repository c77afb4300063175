"""Favorite domain model."""

from dataclasses import dataclass


def normalize_key(text: str) -> str:
    """Normalize a language or word for identity comparison.

    Trims, lower-cases and collapses a double space.
    """
    return text.strip().lower().replace("  ", " ")


@dataclass(frozen=True)
class FavoriteEntry:
    """A looked-up word the user saved, with its rendered markdown snapshot."""

    IDENTITY_FIELDS = ('language', 'word')

    language: str
    word: str
    markdown: str = ""
    url: str = ""

    @staticmethod
    def create(language: str, word: str, markdown: str = "", url: str = "") -> 'FavoriteEntry':
        """Factory method storing language and word in normalized form."""
        return FavoriteEntry(
            language=normalize_key(language),
            word=normalize_key(word),
            markdown=markdown,
            url=url,
        )

    @property
    def identity(self) -> dict:
        """Business identity — fields that define uniqueness."""
        return {f: normalize_key(getattr(self, f)) for f in self.IDENTITY_FIELDS}

    def matches(self, language: str, word: str) -> bool:
        return self.identity == {'language': normalize_key(language), 'word': normalize_key(word)}
