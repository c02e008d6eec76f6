"""Figure and editor UI state models."""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from stickpose.models.enums import ViewMode


class Figure(BaseModel):
    """A stick figure on the canvas, bound to one pose."""

    id: UUID = Field(default_factory=uuid4)
    label: str
    color: str = Field(default="#2563eb", pattern=r"^#[0-9a-fA-F]{6}$")
    pose_id: UUID | None = None


class UIState(BaseModel):
    """Editor-wide flags shared by every figure."""

    active_figure_id: UUID | None = None
    show_grid: bool = True
    view_mode: ViewMode = ViewMode.FLAT
