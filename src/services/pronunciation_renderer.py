"""Pronunciation table rendering.

Groups pronunciations by dialect tag and renders a
Dialect | Pronunciation | Phonetic System table.
"""

from dataclasses import dataclass, field
from typing import Iterable

from domain.model.lexical import Pronunciation
from utils.markdown import table_row

# Bucket for pronunciations without any dialect tag
UNTAGGED_DIALECT = "-"

# Trailing space after the last column is part of the published format
PRONUNCIATION_TABLE_HEADER = "| Dialect | Pronunciation | Phonetic System | \n|---|---|---|\n"


@dataclass
class PronunciationGroup:
    """Transcriptions collected under one dialect.

    `type` is taken from the first pronunciation assigned to the bucket;
    later contributors are not checked against it.
    """
    type: str
    texts: list[str] = field(default_factory=list)


def group_pronunciations(pronunciations: Iterable[Pronunciation]) -> dict[str, PronunciationGroup]:
    """Bucket pronunciation texts by dialect tag, in first-seen order.

    A pronunciation tagged with several dialects lands in each bucket;
    untagged ones go to the "-" bucket.
    """
    grouped: dict[str, PronunciationGroup] = {}
    for p in pronunciations:
        for dialect in p.tags or (UNTAGGED_DIALECT,):
            if dialect not in grouped:
                grouped[dialect] = PronunciationGroup(type=p.type)
            grouped[dialect].texts.append(p.text)
    return grouped


def render_pronunciations(pronunciations: Iterable[Pronunciation]) -> str:
    """Render the pronunciation table, or "" when there is nothing to show."""
    grouped = group_pronunciations(pronunciations)
    if not grouped:
        return ""

    md = PRONUNCIATION_TABLE_HEADER
    for dialect, group in grouped.items():
        md += table_row(dialect, ", ".join(group.texts), group.type)
    md += "\n\n"
    return md
