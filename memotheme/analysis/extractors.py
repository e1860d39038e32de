"""Term extractors - Pluggable grammatical tagging for the tokenizer.

An extractor receives already-normalized text and reports nouns, verbs,
adjectives, multi-word noun entities and clauses. Extraction is best-effort:
an extractor that does not understand the language returns empty lists.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from ..domain.exceptions import ValidationError

logger = logging.getLogger(__name__)


@dataclass
class ExtractedTerms:
    """Grammatical terms found in a text."""

    nouns: list[str] = field(default_factory=list)
    verbs: list[str] = field(default_factory=list)
    adjectives: list[str] = field(default_factory=list)
    entities: list[str] = field(default_factory=list)
    clauses: list[str] = field(default_factory=list)


class TermExtractor(ABC):
    """Interface for grammatical term extraction."""

    @abstractmethod
    def extract(self, normalized_text: str) -> ExtractedTerms:
        """Extract grammatical terms from normalized text."""


class WhitespaceTermExtractor(TermExtractor):
    """Fallback extractor that needs no language model.

    Every whitespace token is reported as a noun. No clauses are produced,
    so phrase-level matching falls back to the whole input text.
    """

    def extract(self, normalized_text: str) -> ExtractedTerms:
        return ExtractedTerms(nouns=normalized_text.split())


class SpacyTermExtractor(TermExtractor):
    """Extractor backed by a spaCy pipeline.

    Noun chunks are used as entities when the pipeline has a dependency
    parser, named entities otherwise. Sentences are used as clauses.
    """

    NOUN_TAGS = frozenset({"NOUN", "PROPN"})

    def __init__(self, model_name: str = "en_core_web_sm") -> None:
        """Load the spaCy pipeline.

        Args:
            model_name: Installed spaCy model to load.

        Raises:
            ImportError: If spaCy is not installed.
            OSError: If the model is not downloaded.
        """
        try:
            import spacy
        except ImportError as e:
            raise ImportError(
                "spaCy not installed. Install with: pip install 'memotheme[nlp]' && "
                f"python -m spacy download {model_name}"
            ) from e

        try:
            self._nlp: Any = spacy.load(model_name)
        except OSError as e:
            raise OSError(
                f"spaCy model '{model_name}' not found. "
                f"Download with: python -m spacy download {model_name}"
            ) from e
        self.model_name = model_name
        logger.info(f"Loaded spaCy model: {model_name}")

    def extract(self, normalized_text: str) -> ExtractedTerms:
        if not normalized_text.strip():
            return ExtractedTerms()

        doc = self._nlp(normalized_text)
        terms = ExtractedTerms(
            nouns=[t.text for t in doc if t.pos_ in self.NOUN_TAGS],
            verbs=[t.text for t in doc if t.pos_ == "VERB"],
            adjectives=[t.text for t in doc if t.pos_ == "ADJ"],
        )

        if doc.has_annotation("DEP"):
            terms.entities = [
                chunk.text for chunk in map(_strip_determiner, doc.noun_chunks) if chunk
            ]
            terms.clauses = [sent.text.strip() for sent in doc.sents]
        else:
            terms.entities = [ent.text for ent in doc.ents]

        return terms


def _strip_determiner(chunk: Any) -> Any:
    """Drop a leading determiner from a noun chunk."""
    if len(chunk) > 0 and chunk[0].pos_ == "DET":
        return chunk[1:]
    return chunk


def create_term_extractor(
    name: str, model_name: str = "en_core_web_sm"
) -> TermExtractor:
    """Create a term extractor by configuration name.

    Args:
        name: "whitespace" or "spacy".
        model_name: spaCy model, used only by the spaCy extractor.

    Returns:
        The configured extractor.

    Raises:
        ValidationError: If the name is unknown.
    """
    normalized = name.strip().lower()
    if normalized == "whitespace":
        return WhitespaceTermExtractor()
    if normalized == "spacy":
        return SpacyTermExtractor(model_name)
    raise ValidationError(
        f"Unknown term extractor '{name}'. Expected 'whitespace' or 'spacy'"
    )
