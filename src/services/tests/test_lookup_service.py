"""Tests for LookupService using the fake dictionary adapter."""

import unittest

from adapter.fake.dictionary import FakeDictionaryAdapter
from domain.model.lexical import EntryLanguage, LanguageEntry, LexicalRecord, Sense, Source
from services.lookup_service import LookupService, not_found_message


def _record() -> LexicalRecord:
    return LexicalRecord(
        word="casa",
        entries=(LanguageEntry(
            language=EntryLanguage("es", "Spanish"),
            part_of_speech="noun",
            senses=(Sense("house"), Sense("home")),
        ),),
        source=Source(url="https://en.wiktionary.org/wiki/casa grande"),
    )


class TestLookupService(unittest.IsolatedAsyncioTestCase):
    """Test fetch-then-render orchestration."""

    async def test_found(self):
        """A fetched record is rendered with its escaped URL and sections."""
        adapter = FakeDictionaryAdapter(_record())

        result = await LookupService(adapter).lookup("es", "casa")

        self.assertTrue(result.found)
        self.assertTrue(result.markdown.startswith("# Casa\n"))
        self.assertEqual(result.url, "https://en.wiktionary.org/wiki/casa%20grande")
        self.assertEqual([s.title for s in result.sections], ["Noun (2)"])

    async def test_not_found(self):
        """A missing record yields the fixed message without rendering."""
        result = await LookupService(FakeDictionaryAdapter(None)).lookup("es", "zzz")

        self.assertFalse(result.found)
        self.assertEqual(result.markdown, not_found_message("zzz"))
        self.assertEqual(result.markdown, "**No definitions found for zzz**")
        self.assertEqual(result.url, "")
        self.assertEqual(result.sections, [])

    async def test_normalizes_inputs(self):
        """Language code is lower-cased and the word trimmed before fetching."""
        adapter = FakeDictionaryAdapter(_record())

        result = await LookupService(adapter).lookup(" ES ", "  casa ")

        self.assertEqual(adapter.last_language, "es")
        self.assertEqual(adapter.last_word, "casa")
        self.assertEqual(result.language, "es")


if __name__ == "__main__":
    unittest.main()
