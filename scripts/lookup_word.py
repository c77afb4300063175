"""Look up a word and print the rendered markdown.

Manual use only (not collected by pytest).

Usage:
    PYTHONPATH=src python scripts/lookup_word.py --language de laufen
"""

import argparse
import asyncio
import logging

from dotenv import load_dotenv

load_dotenv()

from adapter.external.free_dictionary import FreeDictionaryAdapter
from services.lookup_service import LookupService
from utils.logging import setup_structured_logging


async def main(language: str, word: str) -> int:
    result = await LookupService(FreeDictionaryAdapter()).lookup(language, word)
    print(result.markdown)
    if result.url:
        print(f"\n{result.url}")
    return 0 if result.found else 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Render a dictionary entry as markdown")
    parser.add_argument("word", help="Word to look up")
    parser.add_argument("--language", "-l", default="en", help="Language code (default: en)")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    setup_structured_logging(logging.DEBUG if args.debug else logging.WARNING)
    raise SystemExit(asyncio.run(main(args.language, args.word)))
