"""Dictionary API routes.

Endpoints:
- GET /dictionary/{language}/{word}: Render the dictionary entry for a word
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_dictionary_port, get_optional_favorite_repo
from api.models import LookupResponse, SenseDetailResponse, SenseSectionResponse
from port.dictionary import DictionaryPort
from port.favorite_repository import FavoriteRepository
from services.favorite_service import is_favorite
from services.lookup_service import LookupService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dictionary", tags=["dictionary"])


@router.get("/{language}/{word}", response_model=LookupResponse)
async def lookup_word(
    language: str,
    word: str,
    dictionary: DictionaryPort = Depends(get_dictionary_port),
    favorites: FavoriteRepository | None = Depends(get_optional_favorite_repo),
):
    """Look up a word and return its rendered markdown.

    A word the dictionary does not know still returns 200 with found=False
    and the not-found message as markdown.
    """
    if not word.strip():
        raise HTTPException(status_code=422, detail="Word must not be empty")

    result = await LookupService(dictionary).lookup(language, word)

    return LookupResponse(
        word=result.word,
        language=result.language,
        found=result.found,
        markdown=result.markdown,
        url=result.url,
        sections=[
            SenseSectionResponse(
                part_of_speech=s.part_of_speech,
                title=s.title,
                senses=[SenseDetailResponse(definition=d.definition, markdown=d.markdown) for d in s.senses],
            )
            for s in result.sections
        ],
        is_favorite=favorites is not None and is_favorite(favorites, result.language, result.word),
    )
