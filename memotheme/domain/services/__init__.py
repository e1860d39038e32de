"""Domain Services Package.

Main components:
- ThemeAnalyzer: Theme selection facade and learning feedback entry point
- LearningStore: Persisted word-theme patterns and frequent terms
- MemoTaggingService: Tagging workflows for new, edited and re-analyzed memos
"""

from .analyzer import ThemeAnalyzer
from .learning import FREQUENT_TERMS_KEY, USER_PATTERNS_KEY, LearningStore
from .tagging import MemoTaggingService

__all__ = [
    "ThemeAnalyzer",
    "LearningStore",
    "MemoTaggingService",
    "USER_PATTERNS_KEY",
    "FREQUENT_TERMS_KEY",
]
