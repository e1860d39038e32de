"""Memo Tagging Service - Theme workflows for new, edited and re-analyzed memos."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from ..exceptions import ThemeNotFoundError
from ..models import Memo, ReanalysisResult, Theme

if TYPE_CHECKING:
    from .analyzer import ThemeAnalyzer

logger = logging.getLogger(__name__)


def _merge(*groups: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(theme_id for group in groups for theme_id in group))


class MemoTaggingService:
    """Applies analyzer suggestions to memos and feeds changes back for learning."""

    def __init__(self, analyzer: ThemeAnalyzer) -> None:
        """Initialize the service.

        Args:
            analyzer: Theme analyzer used for suggestions and learning.
        """
        self._analyzer = analyzer

    def themes_for_new_memo(
        self,
        text: str,
        themes: Sequence[Theme],
        selected_theme_ids: Sequence[str] = (),
        active_filter_ids: Sequence[str] = (),
    ) -> list[str]:
        """Decide the themes of a memo being created.

        An explicit selection wins. Otherwise the analyzer's suggestions are
        merged with the themes of the active list filter.
        """
        if not text.strip():
            return []
        if selected_theme_ids:
            return list(selected_theme_ids)

        suggested = self._analyzer.analyze_text(text, themes)
        return _merge(suggested, active_filter_ids)

    def save_memo_edit(
        self,
        memo: Memo,
        content: str,
        selected_theme_ids: Sequence[str],
        themes: Sequence[Theme],
    ) -> Memo:
        """Apply an edit to a memo and learn from any change to its themes.

        When the content changed, fresh suggestions are merged into the
        user's selection.

        Returns:
            An updated copy of the memo.
        """
        if content != memo.content:
            suggested = self._analyzer.analyze_text(content, themes)
            new_themes = _merge(selected_theme_ids, suggested)
        else:
            new_themes = list(selected_theme_ids)

        if set(new_themes) != set(memo.themes):
            self._analyzer.learn_from_memo_edit(content, memo.themes, new_themes)

        return memo.model_copy(
            update={
                "content": content,
                "themes": new_themes,
                "updated_at": datetime.now(timezone.utc),
            }
        )

    def reanalyze_memos(
        self,
        theme_id: str,
        memos: Sequence[Memo],
        themes: Sequence[Theme],
    ) -> ReanalysisResult:
        """Re-analyze the memos of a theme, e.g. after its keywords changed.

        The theme stays attached to every memo; other suggestions are merged
        in. Memos whose theme set changed are returned updated and learned from.

        Raises:
            ThemeNotFoundError: If theme_id is not in the catalog.
        """
        if not any(theme.id == theme_id for theme in themes):
            raise ThemeNotFoundError(theme_id)

        updated: list[Memo] = []
        for memo in memos:
            suggested = self._analyzer.analyze_text(memo.content, themes)
            new_themes = _merge([theme_id], suggested)
            if set(new_themes) == set(memo.themes):
                continue

            self._analyzer.learn_from_memo_edit(memo.content, memo.themes, new_themes)
            updated.append(
                memo.model_copy(
                    update={
                        "themes": new_themes,
                        "updated_at": datetime.now(timezone.utc),
                    }
                )
            )

        logger.info(
            f"Re-analyzed {len(memos)} memos for theme {theme_id}: "
            f"{len(updated)} updated"
        )
        return ReanalysisResult(total_memos=len(memos), updated_memos=updated)
