"""Front/side view projection between pose-space and presentation space."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from stickpose.models.enums import PoseView, ViewMode
from stickpose.models.pose import Vec2

SIDE_X_SCALE = 0.55
DEPTH_BLEND_3D = 0.35


@dataclass(frozen=True)
class ViewTransform:
    """Paired forward (pose -> presentation) and backward mappings."""

    forward: Callable[[Vec2], Vec2]
    backward: Callable[[Vec2], Vec2]


def _identity(point: Vec2) -> Vec2:
    return Vec2(x=point.x, y=point.y)


def depth_blend(mode: ViewMode) -> float:
    return DEPTH_BLEND_3D if mode == ViewMode.PSEUDO_3D else 0.0


def view_transform(view: PoseView, mode: ViewMode) -> ViewTransform:
    """Build the transform for a pose's orientation under the global *mode*.

    Side views squash x and, in pseudo-3D mode, shear it by y to fake depth.
    """
    if view == PoseView.FRONT:
        return ViewTransform(forward=_identity, backward=_identity)

    blend = depth_blend(mode)

    def forward(point: Vec2) -> Vec2:
        return Vec2(x=point.x * SIDE_X_SCALE + point.y * blend, y=point.y)

    def backward(point: Vec2) -> Vec2:
        return Vec2(x=(point.x - point.y * blend) / SIDE_X_SCALE, y=point.y)

    return ViewTransform(forward=forward, backward=backward)


def to_presentation(point: Vec2, view: PoseView, mode: ViewMode) -> Vec2:
    return view_transform(view, mode).forward(point)


def to_pose(point: Vec2, view: PoseView, mode: ViewMode) -> Vec2:
    return view_transform(view, mode).backward(point)
