"""Domain layer - Core business logic and models."""

from .exceptions import (
    MemoThemeError,
    StorageError,
    ThemeNotFoundError,
    ValidationError,
)
from .models import (
    AnalysisResult,
    FrequentTerm,
    Memo,
    ReanalysisResult,
    ScoreBreakdown,
    Theme,
    ThemeRelevance,
    WordThemePattern,
)

__all__ = [
    # Exceptions
    "MemoThemeError",
    "ValidationError",
    "StorageError",
    "ThemeNotFoundError",
    # Models
    "Theme",
    "Memo",
    "WordThemePattern",
    "FrequentTerm",
    "ScoreBreakdown",
    "ThemeRelevance",
    "AnalysisResult",
    "ReanalysisResult",
]
