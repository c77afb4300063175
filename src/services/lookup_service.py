"""Lookup service — fetch a lexical record and render it.

The dictionary port is the only asynchronous step; rendering is a
synchronous pure function called once per successful fetch.
"""

import logging
from dataclasses import dataclass, field

from domain.model.favorite import normalize_key
from port.dictionary import DictionaryPort
from services.entry_renderer import SenseSection, render_record, render_sense_sections

logger = logging.getLogger(__name__)


def not_found_message(word: str) -> str:
    return f"**No definitions found for {word}**"


@dataclass(frozen=True)
class LookupResult:
    """Rendered lookup result (Value Object)."""
    word: str
    language: str
    found: bool
    markdown: str
    url: str = ""
    sections: list[SenseSection] = field(default_factory=list)


class LookupService:
    def __init__(self, dictionary: DictionaryPort):
        self.dictionary = dictionary

    async def lookup(self, language: str, word: str) -> LookupResult:
        """Look up a word and render it as markdown.

        When the dictionary has no record, the markdown is a fixed
        not-found message and the renderer is not called.
        """
        language = normalize_key(language)
        word = word.strip()

        record = await self.dictionary.fetch(language, word)
        if record is None:
            logger.info("No definitions found", extra={"word": word, "language": language})
            return LookupResult(
                word=word,
                language=language,
                found=False,
                markdown=not_found_message(word),
            )

        document = render_record(record, language_code=language)
        logger.info("Lookup rendered", extra={
            "word": word,
            "language": language,
            "entry_count": len(record.entries),
        })
        return LookupResult(
            word=word,
            language=language,
            found=True,
            markdown=document.markdown,
            url=document.url,
            sections=render_sense_sections(record),
        )
