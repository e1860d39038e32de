"""Theme and memo domain models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class Theme(BaseModel):
    """A topic node in the user's theme tree.

    Themes are owned by the host application. The engine reads them as
    snapshots and never repairs inconsistent parent/child references.
    """

    id: str = Field(..., description="Opaque unique identifier")
    name: str = Field(..., description="Display name")
    keywords: list[str] = Field(
        default_factory=list, description="Keywords used for matching"
    )
    description: str | None = Field(
        default=None, description="Free text used for contextual scoring"
    )
    parent_theme_id: str | None = Field(default=None, description="Parent theme ID")
    child_theme_ids: list[str] = Field(
        default_factory=list, description="Child theme IDs"
    )

    @property
    def has_children(self) -> bool:
        return bool(self.child_theme_ids)


class Memo(BaseModel):
    """A note as seen by the tagging workflows."""

    id: str = Field(..., description="Unique identifier")
    content: str = Field(..., description="Free text content")
    themes: list[str] = Field(
        default_factory=list, description="Attached theme IDs"
    )
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")
