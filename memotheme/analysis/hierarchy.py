"""Hierarchy Optimizer - Resolves parent/child redundancy among selected themes."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from ..domain.models import Theme

logger = logging.getLogger(__name__)

# Parent and child within this score gap are considered equally relevant
CLOSENESS_GAP: float = 0.2
# A child scoring below this fraction of its parent is considered weaker
WEAK_CHILD_RATIO: float = 0.7
# Minimum selected children (count and share) that collapse into the parent
MIN_COLLAPSE_CHILDREN: int = 2
COLLAPSE_CHILD_SHARE: float = 0.5


class HierarchyOptimizer:
    """Prunes candidate themes using parent/child relationships.

    - Parent and child with close scores: keep the more specific child.
    - Child clearly weaker than its parent: keep the parent.
    - Child clearly stronger: keep both.
    - A majority of a theme's children selected: collapse them into the theme.
    """

    def optimize(
        self,
        candidate_ids: Sequence[str],
        themes: Sequence[Theme],
        scores: Mapping[str, float],
    ) -> list[str]:
        """Optimize a candidate theme list.

        Args:
            candidate_ids: Candidate theme IDs, highest score first.
            themes: Full theme catalog snapshot.
            scores: Final score per theme ID.

        Returns:
            Surviving theme IDs in candidate order.
        """
        if len(candidate_ids) < 2:
            return list(candidate_ids)

        themes_by_id = {theme.id: theme for theme in themes}
        candidate_set = set(candidate_ids)
        kept: set[str] = set()
        dropped: set[str] = set()

        for theme_id in candidate_ids:
            if theme_id in dropped:
                continue
            theme = themes_by_id.get(theme_id)
            if theme is None:
                continue

            parent_id = theme.parent_theme_id
            if parent_id and parent_id in candidate_set and parent_id not in dropped:
                parent_score = scores.get(parent_id, 0.0)
                child_score = scores.get(theme_id, 0.0)
                if abs(parent_score - child_score) < CLOSENESS_GAP:
                    dropped.add(parent_id)
                    kept.add(theme_id)
                elif child_score < parent_score * WEAK_CHILD_RATIO:
                    dropped.add(theme_id)
                    kept.add(parent_id)
                else:
                    kept.add(theme_id)
                    kept.add(parent_id)
            else:
                kept.add(theme_id)

            if theme.has_children:
                present = [
                    child_id
                    for child_id in theme.child_theme_ids
                    if child_id in candidate_set and child_id not in dropped
                ]
                if (
                    len(present) >= MIN_COLLAPSE_CHILDREN
                    and len(present) >= len(theme.child_theme_ids) * COLLAPSE_CHILD_SHARE
                ):
                    logger.debug(
                        f"Collapsing {len(present)} children into theme {theme_id}"
                    )
                    dropped.update(present)
                    kept.add(theme_id)

        return [
            theme_id
            for theme_id in dict.fromkeys(candidate_ids)
            if theme_id in kept and theme_id not in dropped
        ]
