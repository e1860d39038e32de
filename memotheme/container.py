"""Dependency injection container for memotheme."""

from __future__ import annotations

from dataclasses import dataclass

from .analysis import (
    HierarchyOptimizer,
    RelevanceScorer,
    Tokenizer,
    create_term_extractor,
)
from .config import Config, get_config
from .domain.exceptions import ValidationError
from .domain.services import LearningStore, MemoTaggingService, ThemeAnalyzer
from .infra.database import DatabaseConnection
from .infra.repositories import (
    InMemoryKeyValueStore,
    KeyValueStore,
    KuzuKeyValueStore,
)

STORAGE_BACKENDS = ("kuzu", "memory")


@dataclass
class Container:
    """Dependency injection container.

    Manages the lifecycle of all application components with proper
    dependency injection.
    """

    config: Config
    _database: DatabaseConnection | None = None
    _key_value_store: KeyValueStore | None = None
    _learning_store: LearningStore | None = None
    _tokenizer: Tokenizer | None = None
    _analyzer: ThemeAnalyzer | None = None
    _tagging_service: MemoTaggingService | None = None

    @classmethod
    def create(cls, config: Config | None = None) -> Container:
        """Create a new container with the given config.

        Args:
            config: Optional config. Uses global config if not provided.

        Returns:
            A new Container instance.
        """
        return cls(config=config or get_config())

    @property
    def database(self) -> DatabaseConnection:
        """Get the database connection (lazy initialization)."""
        if self._database is None:
            self._database = DatabaseConnection(db_path=self.config.db_path)
        return self._database

    @property
    def key_value_store(self) -> KeyValueStore:
        """Get the configured key-value store (lazy initialization)."""
        if self._key_value_store is None:
            backend = self.config.storage_backend.strip().lower()
            if backend == "kuzu":
                self._key_value_store = KuzuKeyValueStore(db=self.database)
            elif backend == "memory":
                self._key_value_store = InMemoryKeyValueStore()
            else:
                raise ValidationError(
                    f"Unknown storage backend '{self.config.storage_backend}'. "
                    f"Expected one of: {', '.join(STORAGE_BACKENDS)}"
                )
        return self._key_value_store

    @property
    def learning_store(self) -> LearningStore:
        """Get the learning store (lazy initialization)."""
        if self._learning_store is None:
            self._learning_store = LearningStore(
                store=self.key_value_store,
                max_frequent_terms=self.config.max_frequent_terms,
            )
        return self._learning_store

    @property
    def tokenizer(self) -> Tokenizer:
        """Get the tokenizer (lazy initialization)."""
        if self._tokenizer is None:
            extractor = create_term_extractor(
                self.config.term_extractor, model_name=self.config.spacy_model
            )
            self._tokenizer = Tokenizer(extractor=extractor)
        return self._tokenizer

    @property
    def analyzer(self) -> ThemeAnalyzer:
        """Get the theme analyzer (lazy initialization)."""
        if self._analyzer is None:
            self._analyzer = ThemeAnalyzer(
                learning_store=self.learning_store,
                tokenizer=self.tokenizer,
                scorer=RelevanceScorer(),
                optimizer=HierarchyOptimizer(),
                selection_threshold=self.config.selection_threshold,
                fallback_threshold=self.config.fallback_threshold,
            )
        return self._analyzer

    @property
    def tagging_service(self) -> MemoTaggingService:
        """Get the memo tagging service (lazy initialization)."""
        if self._tagging_service is None:
            self._tagging_service = MemoTaggingService(analyzer=self.analyzer)
        return self._tagging_service

    def close(self) -> None:
        """Close all resources."""
        if self._key_value_store is not None:
            self._key_value_store.close()
            self._key_value_store = None
        if self._database is not None:
            self._database.close()
            self._database = None
        self._learning_store = None
        self._analyzer = None
        self._tagging_service = None


# Module-level container instance
_container: Container | None = None


def get_container() -> Container:
    """Get the global container instance."""
    global _container
    if _container is None:
        _container = Container.create()
    return _container


def reset_container() -> None:
    """Reset the container (for testing)."""
    global _container
    if _container is not None:
        _container.close()
    _container = None
