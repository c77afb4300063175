"""Language Value Object.

Classifies dictionary languages by verb morphology: languages with rich
conjugation (mood × tense × number × person) get their forms rendered as
grouped tables, every other language gets a flat list.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Language:
    """Immutable value object representing a dictionary language."""

    code: str
    name: str
    complex_conjugation: bool = False


# ── Language instances ────────────────────────────────────────

CATALAN = Language(code="ca", name="Catalan", complex_conjugation=True)
CZECH = Language(code="cs", name="Czech", complex_conjugation=True)
FRENCH = Language(code="fr", name="French", complex_conjugation=True)
GERMAN = Language(code="de", name="German", complex_conjugation=True)
GREEK = Language(code="el", name="Greek", complex_conjugation=True)
HUNGARIAN = Language(code="hu", name="Hungarian", complex_conjugation=True)
ITALIAN = Language(code="it", name="Italian", complex_conjugation=True)
LATIN = Language(code="la", name="Latin", complex_conjugation=True)
PORTUGUESE = Language(code="pt", name="Portuguese", complex_conjugation=True)
ROMANIAN = Language(code="ro", name="Romanian", complex_conjugation=True)
RUSSIAN = Language(code="ru", name="Russian", complex_conjugation=True)
SERBO_CROATIAN = Language(code="sh", name="Serbo-Croatian", complex_conjugation=True)
SPANISH = Language(code="es", name="Spanish", complex_conjugation=True)
DUTCH = Language(code="nl", name="Dutch", complex_conjugation=True)

ENGLISH = Language(code="en", name="English")
POLISH = Language(code="pl", name="Polish")
JAPANESE = Language(code="ja", name="Japanese")
KOREAN = Language(code="ko", name="Korean")
CHINESE = Language(code="zh", name="Chinese")


# ── Registry ──────────────────────────────────────────────────

LANGUAGES: dict[str, Language] = {
    lang.code: lang
    for lang in (
        CATALAN, CZECH, FRENCH, GERMAN, GREEK, HUNGARIAN, ITALIAN, LATIN,
        PORTUGUESE, ROMANIAN, RUSSIAN, SERBO_CROATIAN, SPANISH, DUTCH,
        ENGLISH, POLISH, JAPANESE, KOREAN, CHINESE,
    )
}

COMPLEX_CONJUGATION_CODES: frozenset[str] = frozenset(
    lang.code for lang in LANGUAGES.values() if lang.complex_conjugation
)


def has_complex_conjugation(code: str) -> bool:
    """Whether forms of this language are grouped by mood, tense, number and person."""
    return code in COMPLEX_CONJUGATION_CODES
