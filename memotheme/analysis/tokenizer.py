"""Tokenizer - Turns raw memo text into the terms and phrases used for scoring."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from .extractors import TermExtractor, WhitespaceTermExtractor

# Anything that is not a word character, whitespace, Hangul syllable or jamo
_NON_WORD_PATTERN = re.compile(r"[^\w\s가-힣ㄱ-ㅎㅏ-ㅣ]")


@dataclass
class TextAnalysis:
    """Analysis bundle shared by every scoring step."""

    terms: list[str] = field(default_factory=list)
    phrases: list[str] = field(default_factory=list)
    nouns: list[str] = field(default_factory=list)
    verbs: list[str] = field(default_factory=list)
    adjectives: list[str] = field(default_factory=list)
    entities: list[str] = field(default_factory=list)

    @property
    def original_text(self) -> str:
        """The trimmed input text, always the last phrase."""
        return self.phrases[-1] if self.phrases else ""


def normalize_text(text: str) -> str:
    """Lowercase text and replace punctuation with spaces."""
    return _NON_WORD_PATTERN.sub(" ", text.lower())


class Tokenizer:
    """Tokenizes text with an optional grammatical term extractor."""

    def __init__(self, extractor: TermExtractor | None = None) -> None:
        self._extractor = extractor or WhitespaceTermExtractor()

    @property
    def extractor(self) -> TermExtractor:
        return self._extractor

    def analyze(self, text: str) -> TextAnalysis:
        """Tokenize text into terms and phrases.

        Terms are the order-preserving union of raw words and extracted
        nouns, verbs, adjectives and entities. Phrases are the extracted
        clauses followed by the trimmed original text.

        Args:
            text: Raw memo text.

        Returns:
            TextAnalysis (empty for blank input).
        """
        stripped = text.strip() if text else ""
        if not stripped:
            return TextAnalysis()

        normalized = normalize_text(text)
        words = normalized.split()
        extracted = self._extractor.extract(normalized)

        terms = list(
            dict.fromkeys(
                [
                    *words,
                    *extracted.nouns,
                    *extracted.verbs,
                    *extracted.adjectives,
                    *extracted.entities,
                ]
            )
        )
        phrases = [*extracted.clauses, stripped]

        return TextAnalysis(
            terms=terms,
            phrases=phrases,
            nouns=extracted.nouns,
            verbs=extracted.verbs,
            adjectives=extracted.adjectives,
            entities=extracted.entities,
        )
