"""Tests for the recursive sense outline."""

import unittest

from domain.model.lexical import Quote, Sense
from services.sense_renderer import render_senses, render_subsenses


class TestRenderSenses(unittest.TestCase):
    """Test top-level numbering, field order and nested subsenses."""

    def test_empty_returns_empty_string(self):
        """No senses renders nothing."""
        self.assertEqual(render_senses([]), "")

    def test_leaf_senses_numbered_in_order(self):
        """Top-level senses are numbered 1..N followed by two blank lines."""
        md = render_senses([Sense("first"), Sense("second")])
        self.assertEqual(md, "### Senses\n1. first\n2. second\n\n\n")

    def test_top_level_field_order(self):
        """Top level lists Examples, Quotes, Synonyms, Antonyms."""
        md = render_senses([Sense(
            "def",
            examples=("ex1", "ex2"),
            quotes=(Quote("q1", "r1"), Quote("q2", "r2")),
            synonyms=("a", "b"),
            antonyms=("c",),
        )])

        self.assertEqual(
            md,
            "### Senses\n"
            "1. def\n"
            "    - **Examples:** ex1; ex2\n"
            "    - **Quote 1:** q1 - _r1_\n"
            "    - **Quote 2:** q2 - _r2_\n"
            "    - **Synonyms:** a, b\n"
            "    - **Antonyms:** c\n"
            "\n\n",
        )

    def test_nested_subsenses(self):
        """Each level numbers from 1 and indents one more 4-space unit."""
        sense = Sense(
            "def",
            subsenses=(
                Sense("sub1"),
                Sense(
                    "sub2",
                    examples=("e",),
                    quotes=(Quote("qq", "rr"),),
                    synonyms=("s",),
                    antonyms=("t",),
                    subsenses=(Sense("subsub1"),),
                ),
            ),
        )

        md = render_senses([sense])

        self.assertEqual(
            md,
            "### Senses\n"
            "1. def\n"
            "        1. sub1\n"
            "        2. sub2\n"
            "            - **Synonyms:** s\n"
            "            - **Antonyms:** t\n"
            "            - **Examples:** e\n"
            "            - **Quote 1:** qq - _rr_\n"
            "            1. subsub1\n"
            "\n"
            "\n"
            "\n\n",
        )

    def test_empty_fields_omitted(self):
        """Empty lists produce no field lines."""
        md = render_senses([Sense("def", examples=(), synonyms=())])
        self.assertNotIn("**", md)


class TestRenderSubsenses(unittest.TestCase):
    """Test the recursive helper on its own."""

    def test_empty_list_renders_nothing(self):
        """No subsenses means no trailing blank line either."""
        self.assertEqual(render_subsenses([], 2), "")

    def test_indent_parameter(self):
        """Indent level sets the 4-space prefix."""
        self.assertEqual(render_subsenses([Sense("x")], 1), "    1. x\n\n")

    def test_deep_nesting(self):
        """Depth is unbounded and each level restarts numbering."""
        leaf = Sense("d4")
        tree = Sense("d1", subsenses=(Sense("d2", subsenses=(Sense("d3", subsenses=(leaf,)),)),))

        lines = render_subsenses([tree], 0).splitlines()

        self.assertEqual(lines[:4], ["1. d1", "    1. d2", "        1. d3", "            1. d4"])


if __name__ == "__main__":
    unittest.main()
