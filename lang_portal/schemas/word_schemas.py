"""Pydantic schemas for Word API request/response validation."""

from datetime import datetime as dt

from pydantic import BaseModel, ConfigDict, Field


class WordBase(BaseModel):
    """Base schema for Word."""

    model_config = ConfigDict(str_strip_whitespace=True)

    portuguese: str = Field(..., min_length=1, max_length=255, description="Source language text")
    english: str = Field(..., min_length=1, max_length=255, description="Target language text")


class WordCreate(WordBase):
    """Schema for creating a new Word."""


class WordUpdate(WordBase):
    """Schema for updating a Word. Both text fields are replaced."""


class Word(WordBase):
    """Schema for Word response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: dt


class WordWithStats(Word):
    """Word list item with review counts."""

    correct_count: int = Field(..., ge=0)
    wrong_count: int = Field(..., ge=0)


class WordStats(BaseModel):
    """Review counts of a word."""

    correct_count: int = Field(..., ge=0)
    wrong_count: int = Field(..., ge=0)


class WordGroup(BaseModel):
    """Group reference listed on a word."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class WordDetail(BaseModel):
    """Word with review stats and groups."""

    id: int
    portuguese: str
    english: str
    stats: WordStats
    groups: list[WordGroup]
