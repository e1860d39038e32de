"""Text analysis and scoring for theme relevance.

## Module Structure

- tokenizer: Normalization and term/phrase extraction
- extractors: Pluggable grammatical tagging (whitespace fallback, spaCy)
- scorer: Five-factor relevance scoring per theme
- hierarchy: Parent/child pruning of selected themes
"""

from .extractors import (
    ExtractedTerms,
    SpacyTermExtractor,
    TermExtractor,
    WhitespaceTermExtractor,
    create_term_extractor,
)
from .hierarchy import HierarchyOptimizer
from .scorer import RelevanceScorer
from .tokenizer import TextAnalysis, Tokenizer, normalize_text

__all__ = [
    "ExtractedTerms",
    "TermExtractor",
    "WhitespaceTermExtractor",
    "SpacyTermExtractor",
    "create_term_extractor",
    "TextAnalysis",
    "Tokenizer",
    "normalize_text",
    "RelevanceScorer",
    "HierarchyOptimizer",
]
