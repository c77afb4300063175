"""Inflected form rendering.

Languages with rich verb morphology get their forms grouped by
mood → tense → number → person and rendered as one table per tense.
Every other language gets a flat bulleted list.

Grammatical roles are not typed on the Form: they are inferred from the
tag set by testing each axis' vocabulary in priority order.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable

from domain.model.language import has_complex_conjugation
from domain.model.lexical import Form
from utils.markdown import table_header, table_row

logger = logging.getLogger(__name__)

# ── Controlled vocabularies ──────────────────────────────────

# Structural markers that are not grammatical features
STRUCTURAL_TAGS = frozenset({"inflection-template", "table-tags", "class"})

NON_FINITE_MOOD = "non-finite"
DEFAULT_MOOD = "indicative"
IMPERATIVE_MOOD = "imperative"
IMPERATIVE_DEFAULT_TENSE = "present"

MOODS = ("indicative", "subjunctive-i", "subjunctive-ii", "subjunctive", "imperative")
NON_FINITE_TAGS = ("gerund", "participle", "infinitive")
TENSES = (
    "future-i", "future-ii", "present", "imperfect", "preterite", "future",
    "conditional", "perfect", "pluperfect", "past perfect", "future perfect",
    "conditional perfect",
)
NUMBERS = ("singular", "plural")
PERSONS = ("first-person", "second-person", "third-person")

# Vocabulary names that betray a template artifact when found in the word itself
_ARTIFACT_KEYWORDS = tuple(k.lower() for k in TENSES + NUMBERS + PERSONS)


# ── Classification ───────────────────────────────────────────

Rule = tuple[str, Callable[[frozenset[str]], bool]]


def _has_tag(tag: str) -> Callable[[frozenset[str]], bool]:
    return lambda tags: tag in tags


def _rules(vocabulary: Iterable[str]) -> tuple[Rule, ...]:
    return tuple((label, _has_tag(label)) for label in vocabulary)


MOOD_RULES: tuple[Rule, ...] = _rules(MOODS) + (
    (NON_FINITE_MOOD, lambda tags: any(t in tags for t in NON_FINITE_TAGS)),
    (DEFAULT_MOOD, lambda tags: True),
)
TENSE_RULES = _rules(TENSES)
NUMBER_RULES = _rules(NUMBERS)
PERSON_RULES = _rules(PERSONS)


def _first_match(rules: tuple[Rule, ...], tags: frozenset[str]) -> str:
    """Label of the first rule whose predicate holds, or "" if none does."""
    for label, predicate in rules:
        if predicate(tags):
            return label
    return ""


@dataclass(frozen=True)
class FormClass:
    """Single-assignment classification of a form along each axis."""
    mood: str
    tense: str
    number: str
    person: str


def classify_form(form: Form) -> FormClass:
    tags = frozenset(form.tags)
    return FormClass(
        mood=_first_match(MOOD_RULES, tags),
        tense=_first_match(TENSE_RULES, tags),
        number=_first_match(NUMBER_RULES, tags),
        person=_first_match(PERSON_RULES, tags),
    )


def has_structural_tag(form: Form) -> bool:
    return any(tag in STRUCTURAL_TAGS for tag in form.tags)


def is_renderable_form(form: Form, complex_branch: bool) -> bool:
    """Whether a form survives filtering.

    Forms carrying a structural marker are always dropped. For the complex
    branch, untagged forms and forms whose word contains a tense, number or
    person name (template artifacts) are dropped as well.
    """
    if has_structural_tag(form):
        return False
    if not complex_branch:
        return True
    if not form.tags:
        return False
    word = form.word.lower()
    return not any(keyword in word for keyword in _ARTIFACT_KEYWORDS)


# ── Grouping ─────────────────────────────────────────────────

# mood -> tense -> number -> person -> forms
GroupedForms = dict[str, dict[str, dict[str, dict[str, list[Form]]]]]


def group_forms(forms: Iterable[Form]) -> GroupedForms:
    """Group forms four levels deep, keeping first-seen key order at every level."""
    grouped: GroupedForms = {}
    for form in forms:
        c = classify_form(form)
        (grouped
            .setdefault(c.mood, {})
            .setdefault(c.tense, {})
            .setdefault(c.number, {})
            .setdefault(c.person, [])
            .append(form))
    return grouped


# ── Rendering ────────────────────────────────────────────────


def _render_non_finite(mood: str, tenses: dict[str, dict[str, dict[str, list[Form]]]]) -> str:
    md = "#### Non-finite forms\n"
    md += table_header("Name", "Form")
    seen: set[str] = set()
    for tense, numbers in tenses.items():
        if tense and mood != IMPERATIVE_MOOD:
            continue
        for persons in numbers.values():
            for forms in persons.values():
                for form in forms:
                    row = table_row(", ".join(form.tags), form.word)
                    if row not in seen:
                        seen.add(row)
                        md += row
    return md


def _render_finite(mood: str, tenses: dict[str, dict[str, dict[str, list[Form]]]]) -> str:
    md = f"#### Mood: {mood}\n"
    for tense, numbers in tenses.items():
        if not tense and mood != IMPERATIVE_MOOD:
            continue
        md += f"##### Tense: {tense or IMPERATIVE_DEFAULT_TENSE}\n"
        md += table_header("Person & Number", "Form")
        # Duplicate rows are only suppressed within one tense table
        seen: set[str] = set()
        for number, persons in numbers.items():
            for person, forms in persons.items():
                for form in forms:
                    row = table_row(f"{person} {number}", form.word)
                    if row not in seen:
                        seen.add(row)
                        md += row
    return md


def _render_conjugation_tables(forms: list[Form]) -> str:
    grouped = group_forms(f for f in forms if is_renderable_form(f, complex_branch=True))
    logger.debug("Grouped forms by mood", extra={"moods": list(grouped)})

    md = ""
    for mood, tenses in grouped.items():
        if mood == NON_FINITE_MOOD:
            md += _render_non_finite(mood, tenses)
        else:
            md += _render_finite(mood, tenses)
        md += "\n"
    return md


def _render_form_list(forms: list[Form]) -> str:
    md = ""
    for form in forms:
        if is_renderable_form(form, complex_branch=False):
            md += f"- {form.word} ({', '.join(form.tags)})\n"
    return md


def render_forms(forms: Iterable[Form], language_code: str) -> str:
    """Render the "Forms" section for a language.

    Returns "" for no forms; otherwise the section is always headed, even
    when filtering leaves nothing to show.
    """
    forms = list(forms)
    if not forms:
        return ""

    md = "### Forms\n"
    if has_complex_conjugation(language_code):
        md += _render_conjugation_tables(forms)
    else:
        md += _render_form_list(forms)
    md += "\n\n"
    return md
