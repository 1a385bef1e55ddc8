"""Pydantic schemas for Group API request/response validation."""

from datetime import datetime as dt

from pydantic import BaseModel, ConfigDict, Field


class GroupBase(BaseModel):
    """Base schema for Group."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=255, description="Group name")


class GroupCreate(GroupBase):
    """Schema for creating a new Group."""


class GroupUpdate(GroupBase):
    """Schema for renaming a Group."""


class Group(GroupBase):
    """Schema for Group response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: dt


class GroupWithWordCount(Group):
    """Group list item with its member word count."""

    word_count: int = Field(..., ge=0)


class GroupStats(BaseModel):
    """Derived group statistics."""

    total_word_count: int = Field(..., ge=0)


class GroupDetail(BaseModel):
    """Group with its statistics."""

    id: int
    name: str
    stats: GroupStats
