"""memotheme - Theme relevance engine for personal memos."""

__version__ = "0.1.0"
