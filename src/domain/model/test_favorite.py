"""Unit tests for FavoriteEntry identity."""

import unittest

from domain.model.favorite import FavoriteEntry, normalize_key


class TestFavoriteEntry(unittest.TestCase):
    """Tests for normalization and identity used by repositories."""

    def test_normalize_key(self):
        """Trims, lower-cases and collapses a double space."""
        self.assertEqual(normalize_key("  Ice  Cream "), "ice cream")

    def test_create_normalizes(self):
        """Factory stores normalized language and word."""
        entry = FavoriteEntry.create(" DE", "Haus ", "# Haus", "u")
        self.assertEqual((entry.language, entry.word), ("de", "haus"))

    def test_identity_and_matches(self):
        """Identity ignores case and surrounding whitespace."""
        entry = FavoriteEntry("en", "Run")

        self.assertEqual(entry.identity, {"language": "en", "word": "run"})
        self.assertTrue(entry.matches("EN", " run"))
        self.assertFalse(entry.matches("de", "run"))


if __name__ == "__main__":
    unittest.main()
