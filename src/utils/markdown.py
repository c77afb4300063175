"""Markdown formatting helpers shared by the renderers."""

TABLE_SEPARATOR_CELL = "---"


def capitalize_first(text: str) -> str:
    """Upper-case the first character only ("past tense" -> "Past tense")."""
    return text[:1].upper() + text[1:]


def table_header(*columns: str) -> str:
    """Pipe-table header row plus its |---| separator row."""
    header = "| " + " | ".join(columns) + " |\n"
    separator = "|" + "|".join(TABLE_SEPARATOR_CELL for _ in columns) + "|\n"
    return header + separator


def table_row(*cells: str) -> str:
    return "| " + " | ".join(cells) + " |\n"


def escape_source_url(url: str) -> str:
    """Percent-encode spaces in a source URL."""
    return url.replace(" ", "%20")


def collapse_double_periods(text: str) -> str:
    """Repair '..' left behind by abbreviations ending a sentence ("etc..")."""
    return text.replace("..", ".")
