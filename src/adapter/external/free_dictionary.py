"""Free Dictionary API adapter.

Implements DictionaryPort by fetching lexical records from the Free
Dictionary API and parsing them into LexicalRecord domain objects.

API Documentation: https://freedictionaryapi.com
"""

import logging
import os
from urllib.parse import quote

import httpx
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

from domain.model.lexical import LexicalRecord

logger = logging.getLogger(__name__)

FREE_DICTIONARY_API_BASE_URL = os.getenv(
    "FREE_DICTIONARY_API_URL", "https://freedictionaryapi.com/api/v1/entries"
)
API_TIMEOUT_SECONDS = float(os.getenv("FREE_DICTIONARY_TIMEOUT_SECONDS", "5.0"))


class FreeDictionaryAdapter:
    """Adapter that fetches lexical records from the Free Dictionary API."""

    def __init__(
        self,
        base_url: str = FREE_DICTIONARY_API_BASE_URL,
        timeout: float = API_TIMEOUT_SECONDS,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def build_url(self, language: str, word: str) -> str:
        return f"{self.base_url}/{quote(language, safe='')}/{quote(word, safe='')}"

    async def fetch(self, language: str, word: str) -> LexicalRecord | None:
        """Fetch the lexical record for a word.

        Args:
            language: ISO 639 language code (e.g., "en", "de").
            word: The word to look up.

        Returns:
            LexicalRecord, or None when not found or on any error.
        """
        url = self.build_url(language, word)

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await _fetch_with_retry(client, url)

                if response.status_code == 404:
                    logger.debug(
                        "Word not found in Free Dictionary API",
                        extra={"word": word, "language": language},
                    )
                    return None

                response.raise_for_status()
                data = response.json()

                if not isinstance(data, dict):
                    logger.warning(
                        "Unexpected response type from Free Dictionary API",
                        extra={"word": word, "language": language, "type": type(data).__name__},
                    )
                    return None

                record = LexicalRecord.from_dict(data)
                if not record.word:
                    record = LexicalRecord(word=word, entries=record.entries, source=record.source)

                logger.debug(
                    "Free Dictionary API lookup successful",
                    extra={"word": word, "language": language, "entry_count": len(record.entries)},
                )
                return record

        except httpx.HTTPStatusError as e:
            logger.warning(
                "Free Dictionary API HTTP error",
                extra={"word": word, "language": language, "status_code": e.response.status_code},
            )
            return None
        except httpx.RequestError as e:
            logger.warning(
                "Free Dictionary API request error",
                extra={"word": word, "language": language, "error_type": type(e).__name__},
            )
            return None
        except ValueError as e:
            logger.warning(
                "Free Dictionary API returned invalid JSON",
                extra={"word": word, "language": language, "error": str(e)},
            )
            return None


# ── HTTP helpers ─────────────────────────────────────────────


@retry(
    retry=retry_if_exception_type((httpx.TimeoutException, httpx.ConnectError)),
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=4),
    reraise=True,
)
async def _fetch_with_retry(client: httpx.AsyncClient, url: str) -> httpx.Response:
    """Fetch URL with automatic retry on transient failures."""
    return await client.get(url)
