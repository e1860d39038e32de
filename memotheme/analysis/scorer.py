"""Relevance Scorer - Multi-factor theme relevance scoring.

Each theme receives five component scores, each roughly in [0, 1]:

- keyword_match: containment of the theme's keywords in the text
- user_pattern: learned word-theme associations from user corrections
- frequency_boost: global popularity of the text's terms
- context_relevance: overlap between the text and the theme description
- hierarchy_bonus: structural prior from the theme's position in the tree

The scorer is pure: learning tables are passed in per call.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..domain.models import (
    FrequentTerm,
    ScoreBreakdown,
    Theme,
    ThemeRelevance,
    WordThemePattern,
)
from .tokenizer import TextAnalysis

# Component weights (sum to 1.0)
WEIGHT_KEYWORD_MATCH: float = 0.35
WEIGHT_USER_PATTERN: float = 0.25
WEIGHT_FREQUENCY_BOOST: float = 0.15
WEIGHT_CONTEXT_RELEVANCE: float = 0.15
WEIGHT_HIERARCHY_BONUS: float = 0.10

# Keyword match multipliers, most specific first
ORIGINAL_TEXT_MULTIPLIER: float = 1.5
PHRASE_MULTIPLIER: float = 1.2
TERM_MULTIPLIER: float = 0.6
PARTIAL_MULTIPLIER: float = 0.5

# Hierarchy bonus caps
CHILD_BONUS_STEP: float = 0.05
CHILD_BONUS_CAP: float = 0.3
PARENT_BONUS: float = 0.1
SIBLING_BONUS_STEP: float = 0.02
SIBLING_BONUS_CAP: float = 0.2
HIERARCHY_BONUS_CAP: float = 0.5

# Description words must be longer than this to count as context
MIN_CONTEXT_WORD_LENGTH: int = 2


def _partially_matches(a: str, b: str) -> bool:
    return a in b or b in a


class RelevanceScorer:
    """Computes a ThemeRelevance for every candidate theme."""

    def score_themes(
        self,
        analysis: TextAnalysis,
        themes: Sequence[Theme],
        user_patterns: Sequence[WordThemePattern],
        frequent_terms: Sequence[FrequentTerm],
    ) -> list[ThemeRelevance]:
        """Score all themes against one analyzed text.

        Args:
            analysis: Tokenizer output for the text.
            themes: Full theme catalog snapshot.
            user_patterns: Learned word-theme patterns.
            frequent_terms: Global frequent terms.

        Returns:
            One ThemeRelevance per theme, in catalog order.
        """
        themes_by_id = {theme.id: theme for theme in themes}
        frequency_boost = self.frequency_boost(analysis.terms, frequent_terms)

        relevances = []
        for theme in themes:
            breakdown = ScoreBreakdown(
                keyword_match=self.keyword_match(analysis, theme.keywords),
                user_pattern=self.user_pattern(
                    analysis.terms, theme.id, user_patterns
                ),
                frequency_boost=frequency_boost,
                context_relevance=self.context_relevance(analysis, theme),
                hierarchy_bonus=self.hierarchy_bonus(theme, themes_by_id),
            )
            relevances.append(
                ThemeRelevance(
                    theme_id=theme.id,
                    score=self.combine(breakdown),
                    breakdown=breakdown,
                )
            )
        return relevances

    @staticmethod
    def combine(breakdown: ScoreBreakdown) -> float:
        """Combine component scores with the fixed weights."""
        return (
            WEIGHT_KEYWORD_MATCH * breakdown.keyword_match
            + WEIGHT_USER_PATTERN * breakdown.user_pattern
            + WEIGHT_FREQUENCY_BOOST * breakdown.frequency_boost
            + WEIGHT_CONTEXT_RELEVANCE * breakdown.context_relevance
            + WEIGHT_HIERARCHY_BONUS * breakdown.hierarchy_bonus
        )

    def keyword_match(self, analysis: TextAnalysis, keywords: Sequence[str]) -> float:
        """Weighted keyword containment score.

        Each keyword is weighted by its length and counted once, at the most
        specific level it matches: the original text, a phrase, a single
        term, or (for multi-word keywords) a fraction of its sub-terms.
        """
        total_weight = 0.0
        matched_weight = 0.0
        original_text = analysis.original_text.lower()
        phrases = [phrase.lower() for phrase in analysis.phrases]

        for keyword in keywords:
            keyword_lower = keyword.strip().lower()
            if not keyword_lower:
                continue

            weight = 1 + len(keyword_lower) * 0.1 if len(keyword_lower) > 1 else 1.0
            total_weight += weight

            if keyword_lower in original_text:
                matched_weight += weight * ORIGINAL_TEXT_MULTIPLIER
                continue

            if any(keyword_lower in phrase for phrase in phrases):
                matched_weight += weight * PHRASE_MULTIPLIER
                continue

            if any(_partially_matches(keyword_lower, term) for term in analysis.terms):
                matched_weight += weight * TERM_MULTIPLIER
                continue

            sub_terms = keyword_lower.split()
            if len(sub_terms) > 1:
                match_count = sum(
                    1
                    for sub_term in sub_terms
                    if any(_partially_matches(sub_term, term) for term in analysis.terms)
                )
                if match_count > 0:
                    fraction = match_count / len(sub_terms)
                    matched_weight += weight * fraction * PARTIAL_MULTIPLIER

        if total_weight == 0:
            return 0.0
        return min(1.0, matched_weight / total_weight)

    def user_pattern(
        self,
        terms: Sequence[str],
        theme_id: str,
        user_patterns: Sequence[WordThemePattern],
    ) -> float:
        """Score from learned word-theme associations.

        The running total is divided by the number of terms, including
        terms without any pattern, so sparse matches stay weak.
        """
        if not terms:
            return 0.0

        theme_patterns = [p for p in user_patterns if p.theme_id == theme_id]
        if not theme_patterns:
            return 0.0

        max_count = max(p.count for p in theme_patterns)
        if max_count == 0:
            return 0.0

        total = 0.0
        match_found = False
        for term in terms:
            term_lower = term.lower()
            matching = [p for p in theme_patterns if p.word.lower() == term_lower]
            if matching:
                match_found = True
                total += min(1.0, sum(p.count / max_count for p in matching))

        if not match_found:
            return 0.0
        return min(1.0, total / len(terms))

    def frequency_boost(
        self, terms: Sequence[str], frequent_terms: Sequence[FrequentTerm]
    ) -> float:
        """Average normalized global frequency of the terms that have a record."""
        if not terms or not frequent_terms:
            return 0.0

        max_count = max(t.count for t in frequent_terms)
        if max_count == 0:
            return 0.0

        frequency_map = {t.term: t.count / max_count for t in frequent_terms}
        boosts = [
            frequency_map[term.lower()]
            for term in terms
            if frequency_map.get(term.lower())
        ]
        if not boosts:
            return 0.0
        return sum(boosts) / len(boosts)

    def context_relevance(self, analysis: TextAnalysis, theme: Theme) -> float:
        """Overlap between the text's terms and the theme description."""
        if not theme.description:
            return 0.0

        description_words = {
            word
            for word in theme.description.lower().split()
            if len(word) > MIN_CONTEXT_WORD_LENGTH
        }
        if not description_words:
            return 0.0

        matched = [
            term
            for term in analysis.terms
            if any(_partially_matches(term, word) for word in description_words)
        ]
        return min(1.0, len(matched) / len(description_words))

    def hierarchy_bonus(self, theme: Theme, themes_by_id: dict[str, Theme]) -> float:
        """Structural prior for themes with children, a parent or siblings."""
        bonus = 0.0

        if theme.has_children:
            bonus += min(CHILD_BONUS_CAP, len(theme.child_theme_ids) * CHILD_BONUS_STEP)

        if theme.parent_theme_id:
            bonus += PARENT_BONUS
            parent = themes_by_id.get(theme.parent_theme_id)
            if parent is not None:
                siblings = [c for c in parent.child_theme_ids if c != theme.id]
                bonus += min(SIBLING_BONUS_CAP, len(siblings) * SIBLING_BONUS_STEP)

        return min(HIERARCHY_BONUS_CAP, bonus)
