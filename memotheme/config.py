"""Configuration settings for memotheme."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Config:
    """memotheme configuration."""

    # Data storage
    data_dir: Path = field(default_factory=lambda: Path.home() / ".memotheme")
    db_name: str = "memotheme_db"
    storage_backend: str = "kuzu"

    # Tokenization
    term_extractor: str = "whitespace"
    spacy_model: str = "en_core_web_sm"

    # Theme selection thresholds
    selection_threshold: float = 0.25
    fallback_threshold: float = 0.15

    # Limits
    max_frequent_terms: int = 100

    @property
    def db_path(self) -> Path:
        """Get the full database path."""
        return self.data_dir / self.db_name

    @classmethod
    def from_env(cls) -> Config:
        """Load configuration from environment variables."""
        data_dir_str = os.environ.get("MEMOTHEME_DATA_DIR")
        data_dir = Path(data_dir_str) if data_dir_str else Path.home() / ".memotheme"

        return cls(
            data_dir=data_dir,
            db_name=os.environ.get("MEMOTHEME_DB_NAME", "memotheme_db"),
            storage_backend=os.environ.get("MEMOTHEME_STORAGE", "kuzu"),
            term_extractor=os.environ.get("MEMOTHEME_TERM_EXTRACTOR", "whitespace"),
            spacy_model=os.environ.get("MEMOTHEME_SPACY_MODEL", "en_core_web_sm"),
            selection_threshold=float(
                os.environ.get("MEMOTHEME_SELECTION_THRESHOLD", "0.25")
            ),
            fallback_threshold=float(
                os.environ.get("MEMOTHEME_FALLBACK_THRESHOLD", "0.15")
            ),
            max_frequent_terms=int(
                os.environ.get("MEMOTHEME_MAX_FREQUENT_TERMS", "100")
            ),
        )


# Module-level config instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global config instance."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def reset_config() -> None:
    """Reset the config (for testing)."""
    global _config
    _config = None
