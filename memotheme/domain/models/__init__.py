"""Domain models for memotheme.

This package provides all domain models, organized by concern:
- theme: Theme, Memo
- learning: WordThemePattern, FrequentTerm
- results: ScoreBreakdown, ThemeRelevance, AnalysisResult, ReanalysisResult
"""

from .learning import FrequentTerm, WordThemePattern
from .results import (
    AnalysisResult,
    ReanalysisResult,
    ScoreBreakdown,
    ThemeRelevance,
)
from .theme import Memo, Theme

__all__ = [
    # Core models
    "Theme",
    "Memo",
    # Learning tables
    "WordThemePattern",
    "FrequentTerm",
    # Result models
    "ScoreBreakdown",
    "ThemeRelevance",
    "AnalysisResult",
    "ReanalysisResult",
]
