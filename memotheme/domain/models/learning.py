"""Learning table models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class WordThemePattern(BaseModel):
    """How often a user action associated a term (or phrase) with a theme."""

    word: str = Field(..., description="Normalized term or 2-3 word phrase")
    theme_id: str = Field(..., description="Associated theme ID")
    count: int = Field(default=1, ge=1, description="Reinforcement count")


class FrequentTerm(BaseModel):
    """A term from the bounded table of frequently used vocabulary."""

    term: str = Field(..., description="Normalized term")
    count: int = Field(default=1, ge=1, description="Occurrence count")
