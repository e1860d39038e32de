"""Learning Store - Persisted word-theme patterns and frequent terms.

Two tables are kept, each as a JSON array under a stable key:

- user_patterns: how often user actions associated a term with a theme
- frequent_terms: the most frequently seen vocabulary, capped in size

Patterns are only ever reinforced. Removing a theme from a memo does not
decrement its counts.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import StorageError
from ..models import FrequentTerm, WordThemePattern

if TYPE_CHECKING:
    from ...infra.repositories import KeyValueStore

logger = logging.getLogger(__name__)

USER_PATTERNS_KEY = "user_patterns"
FREQUENT_TERMS_KEY = "frequent_terms"

DEFAULT_MAX_FREQUENT_TERMS = 100
MIN_TERM_LENGTH = 2

_PUNCTUATION_PATTERN = re.compile(r"[^\w\s]")
_PATTERN_LIST = TypeAdapter(list[WordThemePattern])
_TERM_LIST = TypeAdapter(list[FrequentTerm])


def _ordered_difference(left: Iterable[str], right: Iterable[str]) -> list[str]:
    excluded = set(right)
    return [item for item in dict.fromkeys(left) if item not in excluded]


class LearningStore:
    """Reads and writes the learning tables through a key-value store."""

    def __init__(
        self,
        store: KeyValueStore,
        max_frequent_terms: int = DEFAULT_MAX_FREQUENT_TERMS,
    ) -> None:
        """Initialize the learning store.

        Args:
            store: Backend for the two tables.
            max_frequent_terms: Number of frequent terms kept after each update.
        """
        self._store = store
        self._max_frequent_terms = max_frequent_terms

    # =========================================================================
    # Table I/O
    # =========================================================================

    def get_user_patterns(self) -> list[WordThemePattern]:
        """Get all word-theme patterns (empty if never written)."""
        raw = self._store.get_item(USER_PATTERNS_KEY)
        if not raw:
            return []
        try:
            return _PATTERN_LIST.validate_json(raw)
        except PydanticValidationError as e:
            raise StorageError(USER_PATTERNS_KEY, f"corrupt table: {e}") from e

    def save_user_patterns(self, patterns: Sequence[WordThemePattern]) -> None:
        self._store.set_item(
            USER_PATTERNS_KEY,
            json.dumps([p.model_dump() for p in patterns], ensure_ascii=False),
        )

    def get_frequent_terms(self) -> list[FrequentTerm]:
        """Get all frequent terms, highest count first (empty if never written)."""
        raw = self._store.get_item(FREQUENT_TERMS_KEY)
        if not raw:
            return []
        try:
            return _TERM_LIST.validate_json(raw)
        except PydanticValidationError as e:
            raise StorageError(FREQUENT_TERMS_KEY, f"corrupt table: {e}") from e

    def save_frequent_terms(self, terms: Sequence[FrequentTerm]) -> None:
        self._store.set_item(
            FREQUENT_TERMS_KEY,
            json.dumps([t.model_dump() for t in terms], ensure_ascii=False),
        )

    # =========================================================================
    # Updates
    # =========================================================================

    def update_word_theme_pattern(self, word: str, theme_id: str) -> None:
        """Reinforce the association between a word and a theme by one."""
        patterns = self.get_user_patterns()
        self._reinforce(patterns, _index_patterns(patterns), word, theme_id)
        self.save_user_patterns(patterns)

    def update_term_frequency(self, terms: Iterable[str]) -> None:
        """Count a batch of terms and keep only the most frequent ones.

        Terms are lowercased and trimmed; terms shorter than two characters
        are ignored. Entries beyond the cap are dropped permanently.
        """
        counts = {t.term: t.count for t in self.get_frequent_terms()}

        for term in terms:
            normalized = term.lower().strip()
            if len(normalized) < MIN_TERM_LENGTH:
                continue
            counts[normalized] = counts.get(normalized, 0) + 1

        # sorted() is stable, so ties keep their previous order
        ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
        if len(ranked) > self._max_frequent_terms:
            logger.debug(
                f"Dropping {len(ranked) - self._max_frequent_terms} infrequent terms"
            )
        self.save_frequent_terms(
            [
                FrequentTerm(term=term, count=count)
                for term, count in ranked[: self._max_frequent_terms]
            ]
        )

    def get_most_relevant_theme_for_word(self, word: str) -> str | None:
        """Get the theme most often associated with an exact word."""
        matches = [p for p in self.get_user_patterns() if p.word == word]
        if not matches:
            return None
        matches.sort(key=lambda p: p.count, reverse=True)
        return matches[0].theme_id

    def learn_from_user_action(
        self,
        terms: Sequence[str] | str,
        old_themes: Sequence[str],
        new_themes: Sequence[str],
    ) -> None:
        """Learn from a user changing a memo's themes.

        Every term, and every contiguous 2- and 3-term phrase, is reinforced
        against each newly added theme.

        Args:
            terms: Extracted terms, or raw text to split into words.
            old_themes: Theme IDs before the change.
            new_themes: Theme IDs after the change.
        """
        if isinstance(terms, str):
            normalized = _PUNCTUATION_PATTERN.sub(" ", terms.lower())
            processed = [w for w in normalized.split() if len(w) >= MIN_TERM_LENGTH]
        else:
            processed = [t for t in terms if len(t) >= MIN_TERM_LENGTH]

        self.update_term_frequency(processed)

        removed = _ordered_difference(old_themes, new_themes)
        added = _ordered_difference(new_themes, old_themes)
        if removed:
            logger.debug(f"Themes removed without reinforcement: {removed}")
        if not added:
            return

        patterns = self.get_user_patterns()
        index = _index_patterns(patterns)

        for word in processed:
            for theme_id in added:
                self._reinforce(patterns, index, word, theme_id)

        for phrase in _phrases(processed):
            for theme_id in added:
                self._reinforce(patterns, index, phrase, theme_id)

        self.save_user_patterns(patterns)
        logger.info(
            f"Learned {len(processed)} terms for {len(added)} added theme(s)"
        )

    def reset_all_data(self) -> None:
        """Remove both learning tables."""
        self._store.remove_item(USER_PATTERNS_KEY)
        self._store.remove_item(FREQUENT_TERMS_KEY)
        logger.info("Learning data reset")

    @staticmethod
    def _reinforce(
        patterns: list[WordThemePattern],
        index: dict[tuple[str, str], WordThemePattern],
        word: str,
        theme_id: str,
    ) -> None:
        existing = index.get((word, theme_id))
        if existing is not None:
            existing.count += 1
            return
        pattern = WordThemePattern(word=word, theme_id=theme_id, count=1)
        patterns.append(pattern)
        index[(word, theme_id)] = pattern


def _index_patterns(
    patterns: Iterable[WordThemePattern],
) -> dict[tuple[str, str], WordThemePattern]:
    return {(p.word, p.theme_id): p for p in patterns}


def _phrases(words: Sequence[str]) -> list[str]:
    """Contiguous 2-word and 3-word phrases, in reading order."""
    phrases = []
    for i in range(len(words) - 1):
        phrases.append(f"{words[i]} {words[i + 1]}")
        if i < len(words) - 2:
            phrases.append(f"{words[i]} {words[i + 1]} {words[i + 2]}")
    return phrases
