"""Result models for analysis operations."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .theme import Memo


class ScoreBreakdown(BaseModel):
    """Component scores behind a theme's final relevance."""

    keyword_match: float = 0.0
    user_pattern: float = 0.0
    frequency_boost: float = 0.0
    context_relevance: float = 0.0
    hierarchy_bonus: float = 0.0


class ThemeRelevance(BaseModel):
    """Relevance of one theme to one piece of text. Never persisted."""

    theme_id: str
    score: float
    breakdown: ScoreBreakdown = Field(default_factory=ScoreBreakdown)


class AnalysisResult(BaseModel):
    """Full outcome of analyzing a text against a theme catalog."""

    theme_ids: list[str] = Field(
        default_factory=list, description="Themes selected for auto-attachment"
    )
    candidates: list[str] = Field(
        default_factory=list,
        description="Themes that passed the threshold, before hierarchy optimization",
    )
    relevances: list[ThemeRelevance] = Field(
        default_factory=list, description="All scores, highest first"
    )


class ReanalysisResult(BaseModel):
    """Result of re-analyzing the memos attached to a theme."""

    total_memos: int
    updated_memos: list[Memo] = Field(default_factory=list)

    @property
    def updated_count(self) -> int:
        return len(self.updated_memos)
