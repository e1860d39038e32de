"""Theme catalog loading from JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..domain.exceptions import ValidationError
from ..domain.models import Theme

logger = logging.getLogger(__name__)

_THEME_LIST = TypeAdapter(list[Theme])


def parse_themes(raw: str) -> list[Theme]:
    """Parse a JSON array of theme objects.

    Raises:
        ValidationError: If the document is not a valid theme list.
    """
    try:
        return _THEME_LIST.validate_json(raw)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid theme catalog: {e}") from e


def load_themes(path: Path) -> list[Theme]:
    """Load a theme catalog snapshot from a JSON file.

    Args:
        path: File containing a JSON array of themes.

    Returns:
        The validated themes.

    Raises:
        ValidationError: If the file is missing or invalid.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ValidationError(f"Cannot read theme catalog '{path}': {e}") from e

    themes = parse_themes(raw)
    logger.info(f"Loaded {len(themes)} themes from {path}")
    return themes


def dump_themes(themes: list[Theme]) -> str:
    """Serialize themes to the catalog JSON format."""
    return json.dumps([theme.model_dump() for theme in themes], ensure_ascii=False)
