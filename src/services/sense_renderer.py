"""Sense outline rendering.

Renders a sense tree as a numbered markdown outline. Top-level senses list
their fields as Examples, Quotes, Synonyms, Antonyms; nested subsenses list
Synonyms, Antonyms, Examples, Quotes. Each nesting level numbers its own
subsenses from 1.
"""

from typing import Sequence

from domain.model.lexical import Quote, Sense

INDENT_UNIT = " " * 4
# Indent level of the first subsense list under a top-level sense
FIRST_SUBSENSE_INDENT = 2


def _examples_line(prefix: str, sense: Sense) -> str:
    if not sense.examples:
        return ""
    return f"{prefix}- **Examples:** {'; '.join(sense.examples)}\n"


def _quote_lines(prefix: str, quotes: Sequence[Quote]) -> str:
    return "".join(
        f"{prefix}- **Quote {i}:** {q.text} - _{q.reference}_\n"
        for i, q in enumerate(quotes, start=1)
    )


def _synonyms_line(prefix: str, sense: Sense) -> str:
    if not sense.synonyms:
        return ""
    return f"{prefix}- **Synonyms:** {', '.join(sense.synonyms)}\n"


def _antonyms_line(prefix: str, sense: Sense) -> str:
    if not sense.antonyms:
        return ""
    return f"{prefix}- **Antonyms:** {', '.join(sense.antonyms)}\n"


def render_subsenses(subsenses: Sequence[Sense], indent: int = FIRST_SUBSENSE_INDENT) -> str:
    """Render one level of subsenses at `indent`, recursing one level deeper per nesting."""
    md = ""
    prefix = INDENT_UNIT * indent
    field_prefix = prefix + INDENT_UNIT

    for number, sense in enumerate(subsenses, start=1):
        md += f"{prefix}{number}. {sense.definition}\n"
        md += _synonyms_line(field_prefix, sense)
        md += _antonyms_line(field_prefix, sense)
        md += _examples_line(field_prefix, sense)
        md += _quote_lines(field_prefix, sense.quotes)
        if sense.subsenses:
            md += render_subsenses(sense.subsenses, indent + 1)

    if subsenses:
        md += "\n"
    return md


def render_senses(senses: Sequence[Sense]) -> str:
    """Render the "Senses" section, or "" when there are no senses."""
    if not senses:
        return ""

    md = "### Senses\n"
    for number, sense in enumerate(senses, start=1):
        md += f"{number}. {sense.definition}\n"
        md += _examples_line(INDENT_UNIT, sense)
        md += _quote_lines(INDENT_UNIT, sense.quotes)
        md += _synonyms_line(INDENT_UNIT, sense)
        md += _antonyms_line(INDENT_UNIT, sense)
        if sense.subsenses:
            md += render_subsenses(sense.subsenses)
    md += "\n\n"
    return md
