"""Tests for pronunciation grouping and table rendering."""

import unittest

from domain.model.lexical import Pronunciation
from services.pronunciation_renderer import (
    PRONUNCIATION_TABLE_HEADER,
    UNTAGGED_DIALECT,
    group_pronunciations,
    render_pronunciations,
)


class TestGroupPronunciations(unittest.TestCase):
    """Test dialect bucketing."""

    def test_multi_tag_pronunciation_lands_in_each_bucket(self):
        """A pronunciation tagged UK and US appears under both."""
        grouped = group_pronunciations([Pronunciation("IPA", "fu:", ("UK", "US"))])

        self.assertEqual(list(grouped), ["UK", "US"])
        self.assertEqual(grouped["UK"].texts, ["fu:"])
        self.assertEqual(grouped["US"].texts, ["fu:"])

    def test_untagged_goes_to_dash_bucket(self):
        """A pronunciation without tags is grouped under '-'."""
        grouped = group_pronunciations([Pronunciation("IPA", "fu:")])

        self.assertEqual(list(grouped), [UNTAGGED_DIALECT])

    def test_bucket_keeps_first_type(self):
        """Phonetic system is the type of the first contributor."""
        grouped = group_pronunciations([
            Pronunciation("IPA", "rʌn", ("US",)),
            Pronunciation("enPR", "rŭn", ("US",)),
        ])

        self.assertEqual(grouped["US"].type, "IPA")
        self.assertEqual(grouped["US"].texts, ["rʌn", "rŭn"])

    def test_first_encountered_order(self):
        """Buckets appear in first-seen order, not alphabetically."""
        grouped = group_pronunciations([
            Pronunciation("IPA", "a", ("US",)),
            Pronunciation("IPA", "b", ("AU",)),
            Pronunciation("IPA", "c", ("UK", "US")),
        ])

        self.assertEqual(list(grouped), ["US", "AU", "UK"])


class TestRenderPronunciations(unittest.TestCase):
    """Test table output."""

    def test_empty_returns_empty_string(self):
        """No pronunciations renders nothing."""
        self.assertEqual(render_pronunciations([]), "")

    def test_table(self):
        """Rows join accumulated texts with ', ' and end with two blank lines."""
        md = render_pronunciations([
            Pronunciation("IPA", "fu:", ("UK", "US")),
            Pronunciation("IPA", "fuː", ("US",)),
            Pronunciation("enPR", "foo"),
        ])

        self.assertEqual(
            md,
            PRONUNCIATION_TABLE_HEADER
            + "| UK | fu: | IPA |\n"
            + "| US | fu:, fuː | IPA |\n"
            + "| - | foo | enPR |\n"
            + "\n\n",
        )

    def test_header_format(self):
        """Header row and separator row use pipe-table syntax."""
        self.assertEqual(
            PRONUNCIATION_TABLE_HEADER,
            "| Dialect | Pronunciation | Phonetic System | \n|---|---|---|\n",
        )


if __name__ == "__main__":
    unittest.main()
