"""Entry rendering — turns a LexicalRecord into one markdown document.

Entries are grouped by part of speech (merging entries that repeat across
source dialects), then each group renders its pronunciations, senses and
forms in that order. Rendering is a pure function of its inputs.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable

from domain.model.lexical import GroupedEntry, LanguageEntry, LexicalRecord, Sense
from services.form_renderer import render_forms
from services.pronunciation_renderer import render_pronunciations
from services.sense_renderer import render_senses
from utils.markdown import capitalize_first, collapse_double_periods, escape_source_url

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedDocument:
    """Markdown document plus the escaped source URL it cites."""
    markdown: str
    url: str


@dataclass(frozen=True)
class SenseDetail:
    definition: str
    markdown: str


@dataclass(frozen=True)
class SenseSection:
    """One part of speech with a standalone outline per top-level sense."""
    part_of_speech: str
    title: str
    senses: list[SenseDetail] = field(default_factory=list)


def group_entries(entries: Iterable[LanguageEntry]) -> dict[str, GroupedEntry]:
    """Merge entries by part of speech, in first-encountered order.

    Later entries with the same part of speech append to the earlier group's
    pronunciations, forms and senses.
    """
    grouped: dict[str, GroupedEntry] = {}
    for entry in entries:
        if entry.part_of_speech not in grouped:
            grouped[entry.part_of_speech] = GroupedEntry(
                language=entry.language,
                part_of_speech=entry.part_of_speech,
            )
        grouped[entry.part_of_speech].merge(entry)
    return grouped


def _render_header(record: LexicalRecord, url: str) -> str:
    md = f"# {capitalize_first(record.word)}\n"
    md += f"Source: [{url}]({url})\n\n"
    return md


def _render_group(group: GroupedEntry, language_code: str) -> str:
    md = f"## {capitalize_first(group.part_of_speech)}\n"
    md += render_pronunciations(group.pronunciations)
    md += render_senses(group.senses)
    md += render_forms(group.forms, language_code)
    return md


def render_record(record: LexicalRecord, language_code: str | None = None) -> RenderedDocument:
    """Render a lookup result as a markdown document.

    Args:
        record: The lexical record; its headword must be non-empty.
        language_code: Language the lookup was made in. Drives the choice of
            form layout; defaults to each group's own entry language.

    Returns:
        RenderedDocument with the markdown and the space-escaped source URL.
    """
    url = escape_source_url(record.source.url)
    grouped = group_entries(record.entries)

    logger.debug("Rendering lexical record", extra={
        "word": record.word,
        "entry_count": len(record.entries),
        "parts_of_speech": list(grouped),
    })

    md = _render_header(record, url)
    for group in grouped.values():
        md += _render_group(group, language_code or group.language.code)

    return RenderedDocument(markdown=collapse_double_periods(md), url=url)


def _render_sense_detail(sense: Sense) -> SenseDetail:
    return SenseDetail(
        definition=sense.definition,
        markdown=collapse_double_periods(render_senses([sense])),
    )


def render_sense_sections(record: LexicalRecord) -> list[SenseSection]:
    """Per part of speech, a titled list of senses each with its own outline.

    Section titles read "{Part of speech} ({sense count})".
    """
    sections: list[SenseSection] = []
    for pos, group in group_entries(record.entries).items():
        sections.append(SenseSection(
            part_of_speech=pos,
            title=f"{capitalize_first(pos)} ({len(group.senses)})",
            senses=[_render_sense_detail(s) for s in group.senses],
        ))
    return sections
