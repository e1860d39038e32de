"""Pytest fixtures for memotheme tests."""

from __future__ import annotations

import os
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from memotheme.config import Config, reset_config
from memotheme.container import Container, reset_container
from memotheme.domain.models import Theme
from memotheme.domain.services import LearningStore, ThemeAnalyzer
from memotheme.infra.repositories import InMemoryKeyValueStore


@pytest.fixture
def temp_data_dir() -> Generator[Path, None, None]:
    """Create a temporary data directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_config(temp_data_dir: Path) -> Generator[Config, None, None]:
    """Create a test configuration backed by the in-memory store."""
    config = Config(
        data_dir=temp_data_dir,
        db_name="test_db",
        storage_backend="memory",
        term_extractor="whitespace",
        selection_threshold=0.25,
        fallback_threshold=0.15,
        max_frequent_terms=100,
    )
    yield config


@pytest.fixture
def kuzu_config(test_config: Config) -> Config:
    """Create a test configuration backed by KùzuDB."""
    test_config.storage_backend = "kuzu"
    return test_config


@pytest.fixture
def container(test_config: Config) -> Generator[Container, None, None]:
    """Create a test container with isolated dependencies."""
    # Reset any global state
    reset_config()
    reset_container()

    container = Container.create(test_config)
    yield container

    # Cleanup
    container.close()
    reset_container()
    reset_config()


@pytest.fixture
def kv_store() -> InMemoryKeyValueStore:
    """Create an empty in-memory key-value store."""
    return InMemoryKeyValueStore()


@pytest.fixture
def learning_store(kv_store: InMemoryKeyValueStore) -> LearningStore:
    """Create a learning store over the in-memory key-value store."""
    return LearningStore(store=kv_store)


@pytest.fixture
def analyzer(learning_store: LearningStore) -> ThemeAnalyzer:
    """Create a theme analyzer with default components."""
    return ThemeAnalyzer(learning_store=learning_store)


@pytest.fixture
def react_themes() -> list[Theme]:
    """A parent theme with one child, as in the React Native scenario."""
    return [
        Theme(
            id="t1",
            name="React Native",
            keywords=["react", "native"],
            description="",
            parent_theme_id=None,
            child_theme_ids=["t3"],
        ),
        Theme(
            id="t3",
            name="RN Components",
            keywords=["component"],
            parent_theme_id="t1",
            child_theme_ids=[],
        ),
    ]


@pytest.fixture
def programming_themes() -> list[Theme]:
    """Two small theme trees with descriptions."""
    return [
        Theme(
            id="theme1",
            name="React Native",
            keywords=["react", "native", "mobile", "app"],
            description="React Native mobile app development framework",
            child_theme_ids=["theme3"],
        ),
        Theme(
            id="theme2",
            name="JavaScript",
            keywords=["javascript", "js", "programming", "language"],
            description="JavaScript web programming language",
            child_theme_ids=["theme4"],
        ),
        Theme(
            id="theme3",
            name="React Native Components",
            keywords=["component", "ui", "view", "text"],
            description="React Native components are UI elements",
            parent_theme_id="theme1",
        ),
        Theme(
            id="theme4",
            name="TypeScript",
            keywords=["typescript", "ts", "typed", "interface"],
            description="TypeScript is a typed extension of JavaScript",
            parent_theme_id="theme2",
        ),
    ]


@pytest.fixture(autouse=True)
def set_test_env(temp_data_dir: Path) -> Generator[None, None, None]:
    """Set environment variables for tests."""
    old_env = os.environ.get("MEMOTHEME_DATA_DIR")
    os.environ["MEMOTHEME_DATA_DIR"] = str(temp_data_dir)
    yield
    if old_env:
        os.environ["MEMOTHEME_DATA_DIR"] = old_env
    else:
        os.environ.pop("MEMOTHEME_DATA_DIR", None)
