"""Lexical record domain models.

A LexicalRecord is the immutable result of a single dictionary lookup:
one headword, several language entries (one per part of speech and source
dialect), and the source citation. GroupedEntry is the transient merge of
all entries sharing a part of speech, rebuilt on every render.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def _str_list(values: Any) -> tuple[str, ...]:
    if not values:
        return ()
    return tuple(str(v) for v in values if v is not None)


def _text(data: dict[str, Any], key: str) -> str:
    """String field; an explicit null reads the same as a missing key."""
    return data.get(key) or ""


def _item_text(item: Any, key: str) -> str:
    """A plain string item, or the `key` field of a dict item."""
    if isinstance(item, dict):
        return _text(item, key)
    return item if isinstance(item, str) else ""


@dataclass(frozen=True)
class Pronunciation:
    """A phonetic transcription, optionally tagged with dialects."""
    type: str
    text: str
    tags: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Pronunciation:
        return cls(
            type=_text(data, "type"),
            text=_text(data, "text"),
            tags=_str_list(data.get("tags")),
        )


@dataclass(frozen=True)
class Form:
    """An inflected surface form with its grammatical tags."""
    word: str
    tags: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Form:
        return cls(word=_text(data, "word"), tags=_str_list(data.get("tags")))


@dataclass(frozen=True)
class Quote:
    text: str
    reference: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Quote:
        return cls(text=_text(data, "text"), reference=_text(data, "reference"))


@dataclass(frozen=True)
class Sense:
    """One meaning of a word, with arbitrarily nested subsenses.

    A sense without subsenses is a leaf.
    """
    definition: str
    tags: tuple[str, ...] = ()
    examples: tuple[str, ...] = ()
    quotes: tuple[Quote, ...] = ()
    synonyms: tuple[str, ...] = ()
    antonyms: tuple[str, ...] = ()
    translations: tuple[str, ...] = ()
    subsenses: tuple[Sense, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Sense:
        """Build a Sense tree from the API's sense dict.

        Examples may come as plain strings or as dicts with a 'text' key;
        null items are skipped.
        """
        examples = tuple(
            _item_text(e, "text")
            for e in data.get("examples") or []
            if e is not None
        )
        return cls(
            definition=_text(data, "definition"),
            tags=_str_list(data.get("tags")),
            examples=examples,
            quotes=tuple(Quote.from_dict(q) for q in data.get("quotes") or [] if q),
            synonyms=_str_list(data.get("synonyms")),
            antonyms=_str_list(data.get("antonyms")),
            translations=tuple(
                _item_text(t, "word")
                for t in data.get("translations") or []
                if t is not None
            ),
            subsenses=tuple(cls.from_dict(s) for s in data.get("subsenses") or [] if s),
        )


@dataclass(frozen=True)
class EntryLanguage:
    code: str
    name: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> EntryLanguage:
        data = data or {}
        return cls(code=_text(data, "code"), name=_text(data, "name"))


@dataclass(frozen=True)
class LanguageEntry:
    """One dictionary entry: a part of speech of the headword in one language."""
    language: EntryLanguage
    part_of_speech: str
    pronunciations: tuple[Pronunciation, ...] = ()
    forms: tuple[Form, ...] = ()
    senses: tuple[Sense, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LanguageEntry:
        return cls(
            language=EntryLanguage.from_dict(data.get("language")),
            part_of_speech=_text(data, "partOfSpeech"),
            pronunciations=tuple(Pronunciation.from_dict(p) for p in data.get("pronunciations") or [] if p),
            forms=tuple(Form.from_dict(f) for f in data.get("forms") or [] if f),
            senses=tuple(Sense.from_dict(s) for s in data.get("senses") or [] if s),
        )


@dataclass(frozen=True)
class License:
    name: str = ""
    url: str = ""


@dataclass(frozen=True)
class Source:
    """Citation for the upstream dictionary page."""
    url: str = ""
    license: License = field(default_factory=License)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> Source:
        data = data or {}
        license_data = data.get("license") or {}
        return cls(
            url=_text(data, "url"),
            license=License(name=_text(license_data, "name"), url=_text(license_data, "url")),
        )


@dataclass(frozen=True)
class LexicalRecord:
    """Immutable result of a dictionary lookup (Value Object)."""
    word: str
    entries: tuple[LanguageEntry, ...] = ()
    source: Source = field(default_factory=Source)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LexicalRecord:
        """Parse the Free Dictionary API response body."""
        return cls(
            word=_text(data, "word"),
            entries=tuple(LanguageEntry.from_dict(e) for e in data.get("entries") or [] if e),
            source=Source.from_dict(data.get("source")),
        )


@dataclass
class GroupedEntry:
    """All entries of one part of speech, merged in encounter order."""
    language: EntryLanguage
    part_of_speech: str
    pronunciations: list[Pronunciation] = field(default_factory=list)
    forms: list[Form] = field(default_factory=list)
    senses: list[Sense] = field(default_factory=list)

    def merge(self, entry: LanguageEntry) -> None:
        """Append (never replace) the entry's lists."""
        self.pronunciations.extend(entry.pronunciations)
        self.forms.extend(entry.forms)
        self.senses.extend(entry.senses)
