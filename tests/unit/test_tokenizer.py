"""Unit tests for the tokenizer and term extractors."""

from __future__ import annotations

import pytest

from memotheme.analysis import (
    ExtractedTerms,
    TermExtractor,
    Tokenizer,
    WhitespaceTermExtractor,
    create_term_extractor,
    normalize_text,
)
from memotheme.domain.exceptions import ValidationError


class ClauseExtractor(TermExtractor):
    """Extractor returning fixed entities and clauses."""

    def extract(self, normalized_text: str) -> ExtractedTerms:
        return ExtractedTerms(
            nouns=["framework"],
            entities=["react native"],
            clauses=[normalized_text.strip()],
        )


class TestNormalizeText:
    """Tests for text normalization."""

    def test_lowercases_and_strips_punctuation(self):
        """Test that punctuation is replaced by spaces."""
        assert normalize_text("Hello, World!").split() == ["hello", "world"]

    def test_keeps_hangul(self):
        """Test that Korean syllables survive normalization."""
        assert normalize_text("안녕하세요, 세계!").split() == ["안녕하세요", "세계"]

    def test_keeps_digits_and_underscores(self):
        """Test that word characters are preserved."""
        assert normalize_text("v2_release (beta)").split() == ["v2_release", "beta"]


class TestTokenizer:
    """Tests for Tokenizer.analyze."""

    def test_empty_text(self):
        """Test that empty input yields an empty analysis."""
        analysis = Tokenizer().analyze("")

        assert analysis.terms == []
        assert analysis.phrases == []
        assert analysis.original_text == ""

    def test_whitespace_only_text(self):
        """Test that blank input yields an empty analysis."""
        analysis = Tokenizer().analyze("   \n\t ")

        assert analysis.terms == []
        assert analysis.phrases == []

    def test_original_text_is_last_phrase(self):
        """Test that the trimmed original text is always the last phrase."""
        analysis = Tokenizer().analyze("  Building a React app.  ")

        assert analysis.phrases == ["Building a React app."]
        assert analysis.original_text == "Building a React app."

    def test_terms_are_deduplicated_in_order(self):
        """Test that repeated words appear once, in first-seen order."""
        analysis = Tokenizer().analyze("React native react NATIVE app")

        assert analysis.terms == ["react", "native", "app"]

    def test_korean_text(self):
        """Test that Korean text tokenizes without errors."""
        analysis = Tokenizer().analyze("리액트 네이티브 앱 개발")

        assert analysis.terms == ["리액트", "네이티브", "앱", "개발"]
        assert analysis.original_text == "리액트 네이티브 앱 개발"

    def test_extractor_output_is_merged(self):
        """Test that extracted entities join terms and clauses precede the text."""
        tokenizer = Tokenizer(extractor=ClauseExtractor())
        analysis = tokenizer.analyze("React-Native rocks")

        assert analysis.terms == ["react", "native", "rocks", "framework", "react native"]
        assert analysis.phrases == ["react native rocks", "React-Native rocks"]
        assert analysis.entities == ["react native"]

    def test_default_extractor(self):
        """Test that the whitespace extractor is used by default."""
        assert isinstance(Tokenizer().extractor, WhitespaceTermExtractor)


class TestTermExtractors:
    """Tests for extractor construction."""

    def test_whitespace_extractor_reports_nouns_only(self):
        """Test the fallback extractor output."""
        terms = WhitespaceTermExtractor().extract("react native app")

        assert terms.nouns == ["react", "native", "app"]
        assert terms.verbs == []
        assert terms.adjectives == []
        assert terms.entities == []
        assert terms.clauses == []

    def test_create_whitespace_extractor(self):
        """Test creating the fallback extractor by name."""
        extractor = create_term_extractor(" Whitespace ")
        assert isinstance(extractor, WhitespaceTermExtractor)

    def test_create_unknown_extractor_raises(self):
        """Test that unknown extractor names are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            create_term_extractor("compromise")

        assert "compromise" in str(exc_info.value)

    def test_spacy_missing_model_raises(self):
        """Test that a missing spaCy model is reported, not replaced."""
        pytest.importorskip("spacy")
        from memotheme.analysis import SpacyTermExtractor

        with pytest.raises(OSError):
            SpacyTermExtractor("memotheme_missing_model")


def parsed_doc(with_parse: bool):
    """Hand-tagged spaCy Doc for "building a react native component today"."""
    spacy = pytest.importorskip("spacy")
    from spacy.tokens import Doc

    words = ["building", "a", "react", "native", "component", "today"]
    pos = ["VERB", "DET", "PROPN", "PROPN", "NOUN", "NOUN"]
    if with_parse:
        return Doc(
            spacy.blank("en").vocab,
            words=words,
            pos=pos,
            deps=["ROOT", "det", "compound", "compound", "dobj", "npadvmod"],
            heads=[0, 4, 4, 4, 0, 0],
        )
    return Doc(
        spacy.blank("en").vocab,
        words=words,
        pos=pos,
        ents=["O", "O", "B-ORG", "I-ORG", "O", "O"],
    )


def spacy_extractor_for(doc):
    """SpacyTermExtractor whose pipeline always returns the given Doc."""
    from memotheme.analysis import SpacyTermExtractor

    extractor = SpacyTermExtractor.__new__(SpacyTermExtractor)
    extractor._nlp = lambda text: doc
    extractor.model_name = "test"
    return extractor


class TestSpacyTermExtractor:
    """Tests for part-of-speech extraction with a spaCy pipeline."""

    TEXT = "building a react native component today"

    def test_parsed_doc_uses_noun_chunks_and_sentences(self):
        """Test extraction when the pipeline has a dependency parser."""
        terms = spacy_extractor_for(parsed_doc(with_parse=True)).extract(self.TEXT)

        assert terms.nouns == ["react", "native", "component", "today"]
        assert terms.verbs == ["building"]
        assert terms.adjectives == []
        assert terms.entities == ["react native component"]
        assert terms.clauses == [self.TEXT]

    def test_unparsed_doc_uses_named_entities(self):
        """Test extraction when the pipeline has no dependency parser."""
        terms = spacy_extractor_for(parsed_doc(with_parse=False)).extract(self.TEXT)

        assert terms.nouns == ["react", "native", "component", "today"]
        assert terms.verbs == ["building"]
        assert terms.entities == ["react native"]
        assert terms.clauses == []

    def test_blank_text_skips_pipeline(self):
        """Test that blank text is not sent to the pipeline."""
        terms = spacy_extractor_for(parsed_doc(with_parse=True)).extract("  ")

        assert terms == ExtractedTerms()

    def test_tokenizer_merges_noun_chunks_into_terms(self):
        """Test that noun chunks become terms without their determiner."""
        tokenizer = Tokenizer(spacy_extractor_for(parsed_doc(with_parse=True)))

        analysis = tokenizer.analyze("Building a React Native component today")

        assert "react native component" in analysis.terms
        assert "a react native component" not in analysis.terms
        assert analysis.phrases == [
            self.TEXT,
            "Building a React Native component today",
        ]
