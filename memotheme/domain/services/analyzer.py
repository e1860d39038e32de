"""Theme Analyzer - Selects the themes to attach to a memo and learns from edits.

Pipeline: tokenize → score every theme → threshold → hierarchy optimization.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from ...analysis import HierarchyOptimizer, RelevanceScorer, Tokenizer
from ..models import AnalysisResult, Theme, ThemeRelevance

if TYPE_CHECKING:
    from .learning import LearningStore

logger = logging.getLogger(__name__)


class ThemeAnalyzer:
    """Façade over the tokenizer, scorer, hierarchy optimizer and learning store."""

    def __init__(
        self,
        learning_store: LearningStore,
        tokenizer: Tokenizer | None = None,
        scorer: RelevanceScorer | None = None,
        optimizer: HierarchyOptimizer | None = None,
        selection_threshold: float = 0.25,
        fallback_threshold: float = 0.15,
    ) -> None:
        """Initialize the analyzer.

        Args:
            learning_store: Store for learned patterns and term frequencies.
            tokenizer: Tokenizer (whitespace extraction by default).
            scorer: Relevance scorer.
            optimizer: Hierarchy optimizer.
            selection_threshold: Themes scoring above this are selected.
            fallback_threshold: If nothing is selected, the top theme is
                selected alone when it scores above this.
        """
        self._store = learning_store
        self._tokenizer = tokenizer or Tokenizer()
        self._scorer = scorer or RelevanceScorer()
        self._optimizer = optimizer or HierarchyOptimizer()
        self._selection_threshold = selection_threshold
        self._fallback_threshold = fallback_threshold

    @property
    def learning_store(self) -> LearningStore:
        return self._store

    def analyze_text(self, text: str, themes: Sequence[Theme]) -> list[str]:
        """Get the IDs of the themes to auto-attach to a text.

        Args:
            text: Memo content.
            themes: Theme catalog snapshot.

        Returns:
            Selected theme IDs, highest score first.
        """
        return self.analyze_text_detailed(text, themes).theme_ids

    def analyze_text_detailed(
        self, text: str, themes: Sequence[Theme]
    ) -> AnalysisResult:
        """Analyze a text and return the selection with its full score table.

        The text's terms are added to the frequent-term table as a side
        effect. Scoring uses the tables as they were before this update.
        """
        if not text or not text.strip() or not themes:
            return AnalysisResult()

        analysis = self._tokenizer.analyze(text)
        frequent_terms = self._store.get_frequent_terms()
        user_patterns = self._store.get_user_patterns()
        self._store.update_term_frequency(analysis.terms)

        relevances = self._scorer.score_themes(
            analysis, themes, user_patterns, frequent_terms
        )
        relevances.sort(key=lambda r: r.score, reverse=True)
        self._log_scores(relevances, themes)

        candidates = self._select_candidates(relevances)
        scores = {r.theme_id: r.score for r in relevances}
        selected = self._optimizer.optimize(candidates, themes, scores)

        logger.info(f"Selected themes: {selected} (candidates: {candidates})")
        return AnalysisResult(
            theme_ids=selected,
            candidates=candidates,
            relevances=relevances,
        )

    def learn_from_memo_edit(
        self,
        content: str,
        old_themes: Sequence[str],
        new_themes: Sequence[str],
    ) -> bool:
        """Learn from a user-initiated change of a memo's themes.

        Does nothing when the content is empty or the theme sets are equal.

        Returns:
            True if the change was passed on to the learning store.
        """
        if not content or set(old_themes) == set(new_themes):
            return False

        analysis = self._tokenizer.analyze(content)
        self._store.learn_from_user_action(analysis.terms, old_themes, new_themes)
        return True

    def get_most_relevant_theme_for_word(self, word: str) -> str | None:
        """Get the theme most often associated with a word."""
        return self._store.get_most_relevant_theme_for_word(word)

    def reset_all_data(self) -> None:
        """Clear both learning tables."""
        self._store.reset_all_data()

    def _select_candidates(self, relevances: list[ThemeRelevance]) -> list[str]:
        candidates = [
            r.theme_id for r in relevances if r.score > self._selection_threshold
        ]
        if not candidates and relevances:
            top = relevances[0]
            if top.score > self._fallback_threshold:
                candidates = [top.theme_id]
        return candidates

    @staticmethod
    def _log_scores(
        relevances: list[ThemeRelevance], themes: Sequence[Theme]
    ) -> None:
        if not logger.isEnabledFor(logging.DEBUG):
            return
        names = {theme.id: theme.name for theme in themes}
        for r in relevances:
            b = r.breakdown
            logger.debug(
                f"Theme {r.theme_id} ({names.get(r.theme_id)}): score={r.score:.3f} "
                f"keyword={b.keyword_match:.3f} pattern={b.user_pattern:.3f} "
                f"frequency={b.frequency_boost:.3f} context={b.context_relevance:.3f} "
                f"hierarchy={b.hierarchy_bonus:.3f}"
            )
