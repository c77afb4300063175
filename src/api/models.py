"""Pydantic models for API request/response."""

from pydantic import BaseModel, Field


class SenseDetailResponse(BaseModel):
    """A single top-level sense with its own markdown outline."""
    definition: str
    markdown: str


class SenseSectionResponse(BaseModel):
    """Senses of one part of speech."""
    part_of_speech: str
    title: str = Field(..., description="Part of speech with sense count, e.g. 'Noun (3)'")
    senses: list[SenseDetailResponse] = Field(default_factory=list)


class LookupResponse(BaseModel):
    """Response model for a dictionary lookup."""
    word: str
    language: str
    found: bool = Field(..., description="False when the dictionary has no entry for the word")
    markdown: str = Field(..., description="Rendered document, or the not-found message")
    url: str = Field("", description="Source URL with spaces escaped")
    sections: list[SenseSectionResponse] = Field(default_factory=list)
    is_favorite: bool = False


class FavoriteRequest(BaseModel):
    """Request model for adding a favorite."""
    language: str = Field(..., min_length=1, max_length=20, description="Language code")
    word: str = Field(..., min_length=1, max_length=100, description="Word to save")
    markdown: str = Field("", description="Rendered markdown snapshot")
    url: str = Field("", description="Source URL")


class FavoriteResponse(BaseModel):
    """Response model for a favorite."""
    language: str
    word: str
    markdown: str
    url: str


class FavoriteGroupResponse(BaseModel):
    """Favorites of one language."""
    language: str
    entries: list[FavoriteResponse]
